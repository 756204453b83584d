"""
One render function per resume section.

Every renderer takes the canonical (normalized) form and returns an HTML
fragment, or an empty string when the section has nothing worth showing.
Education is the exception: it always renders, with a placeholder when empty.
"""
from typing import List, Optional
from config.jinja_env import jinja_env
from models.resume_model import (
    CertificateEntry,
    ExperienceEntry,
    LanguageEntry,
    ProjectEntry,
    ResumeForm,
)
from utils.normalize_resume import normalize_skills

NO_EDUCATION_PLACEHOLDER = "No education details provided"


def _text(value) -> str:
    return str(value).strip() if value is not None else ""


def with_https(link: Optional[str]) -> str:
    link = _text(link)
    if link and not link.startswith("http"):
        return f"https://{link}"
    return link


def _render(template_name: str, **context) -> str:
    template = jinja_env.get_template(f"resume/sections/{template_name}")
    return template.render(**context).strip()


# ------------------- Presence rules ------------------------
def has_experience_content(entry: ExperienceEntry) -> bool:
    return any(_text(v) for v in (entry.role, entry.company, entry.duration, entry.activities))


def key_points(entry: ProjectEntry) -> List[str]:
    return [_text(point) for point in entry.keyPoints or [] if _text(point)]


def has_project_content(entry: ProjectEntry) -> bool:
    fields = (entry.name, entry.description, entry.link, entry.technologies)
    return any(_text(v) for v in fields) or bool(key_points(entry))


def has_certificate_content(entry: CertificateEntry) -> bool:
    return any(_text(v) for v in (entry.title, entry.issuedBy, entry.issuedOn, entry.credential))


def has_language_content(entry: LanguageEntry) -> bool:
    return bool(_text(entry.language))


# ------------------- Sections ------------------------
def render_header(form: ResumeForm) -> str:
    location = ", ".join(
        part for part in (_text(form.city), _text(form.state), _text(form.pincode)) if part
    )

    contacts = []
    if location:
        contacts.append({"text": location, "href": None})
    if _text(form.emailId):
        contacts.append({"text": _text(form.emailId), "href": f"mailto:{_text(form.emailId)}"})
    if _text(form.phoneNo):
        contacts.append({"text": _text(form.phoneNo), "href": None})
    for link in (form.linkedIn, form.portfolioLink):
        if _text(link):
            contacts.append({"text": _text(link), "href": with_https(link)})

    return _render("header.html", name=_text(form.name), role=_text(form.role), contacts=contacts)


def render_summary(form: ResumeForm, cleaned_summary: str = "") -> str:
    summary = _text(cleaned_summary)
    if not summary:
        return ""
    return _render("summary.html", summary=summary)


def render_experience(form: ResumeForm) -> str:
    entries = [
        {
            "role": _text(exp.role),
            "duration": _text(exp.duration),
            "company": _text(exp.company),
            "activities": _text(exp.activities),
        }
        for exp in form.experience or []
        if has_experience_content(exp)
    ]
    if not entries:
        return ""
    return _render("experience.html", entries=entries)


def render_projects(form: ResumeForm) -> str:
    entries = [
        {
            "name": _text(project.name),
            "link": with_https(project.link),
            "description": _text(project.description),
            "key_points": key_points(project),
            "technologies": _text(project.technologies),
        }
        for project in form.projects or []
        if has_project_content(project)
    ]
    if not entries:
        return ""
    return _render("projects.html", entries=entries)


def render_education(form: ResumeForm) -> str:
    entries = []
    for edu in form.education or []:
        institute = ", ".join(p for p in (_text(edu.institute), _text(edu.city)) if p)
        years = " - ".join(p for p in (_text(edu.startYear), _text(edu.endYear)) if p)

        score = _text(edu.score)
        if score and _text(edu.scoreType):
            score = f"{_text(edu.scoreType)}: {score}"
        details = ", ".join(p for p in (_text(edu.eduType), _text(edu.department), score) if p)

        entries.append({"institute": institute, "years": years, "details": details})

    return _render("education.html", entries=entries, placeholder=NO_EDUCATION_PLACEHOLDER)


def render_skills(form: ResumeForm) -> str:
    skills = normalize_skills(form.skills)
    if not skills:
        return ""
    return _render("skills.html", skills=skills)


def render_certificates(form: ResumeForm) -> str:
    entries = [
        {
            "title": _text(cert.title),
            "issued_on": _text(cert.issuedOn),
            "issued_by": _text(cert.issuedBy),
            "credential": with_https(cert.credential),
        }
        for cert in form.certificates or []
        if has_certificate_content(cert)
    ]
    if not entries:
        return ""
    return _render("certificates.html", entries=entries)


def describe_language(entry: LanguageEntry) -> str:
    levels = [
        label
        for label, enabled in (("Read", entry.read), ("Write", entry.write), ("Speak", entry.speak))
        if enabled
    ]
    return f"{_text(entry.language)} ({', '.join(levels) if levels else 'Not specified'})"


def describe_availability(form: ResumeForm) -> str:
    availability_type = _text(form.availabilityType)
    if availability_type == "Notice Period":
        return f"Notice Period for {_text(form.noticePeriod)}"
    if availability_type == "Available From":
        return f"Available from {_text(form.availableFromDate)}"
    return availability_type


def render_additional_info(form: ResumeForm) -> str:
    languages = [describe_language(lang) for lang in form.languages or [] if has_language_content(lang)]
    nationality = _text(form.nationality)
    availability = describe_availability(form)

    if not (languages or nationality or availability):
        return ""
    return _render(
        "additional_info.html",
        languages=languages,
        nationality=nationality,
        availability=availability,
    )
