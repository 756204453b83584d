from typing import Any, List, Optional
from models.resume_model import EducationEntry, ResumeForm


def normalize_education(education: Optional[List[EducationEntry]]) -> List[EducationEntry]:
    """
    Replace the "Other" education type with the user's free-text override.
    Entries without a usable override are returned untouched.
    """
    normalized = []
    for entry in education or []:
        override = (entry.eduTypeOther or "").strip() if entry.eduType == "Other" else ""
        if override:
            entry = entry.model_copy(update={"eduType": override})
        normalized.append(entry)
    return normalized


def normalize_skills(skills: Any) -> List[str]:
    """Skills arrive either as a list or as one comma separated string."""
    if isinstance(skills, str):
        pieces = skills.split(",")
    elif isinstance(skills, (list, tuple)):
        pieces = [str(s) for s in skills if s is not None]
    else:
        return []

    return [piece.strip() for piece in pieces if piece.strip()]


def normalize_form(form: ResumeForm) -> ResumeForm:
    return form.model_copy(update={
        "education": normalize_education(form.education),
        "skills": normalize_skills(form.skills),
    })


def clean_summary(summary: Optional[str]) -> str:
    # Gemini wraps emphasis in markdown asterisks
    return (summary or "").replace("*", "")
