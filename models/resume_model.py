from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional


# Note: This model is in sync with the TypeScript frontend form, hence the camelCase keys


class FormModel(BaseModel):
    model_config = ConfigDict(
        extra="allow",
        coerce_numbers_to_str=True,
        populate_by_name=True,
    )


# ------------------- Nested Structures ------------------------
class EducationEntry(FormModel):
    institute: Optional[str] = None
    city: Optional[str] = None
    eduType: Optional[str] = None
    eduTypeOther: Optional[str] = None
    department: Optional[str] = None
    startYear: Optional[str] = None
    endYear: Optional[str] = None
    score: Optional[str] = None
    scoreType: Optional[str] = None


class ExperienceEntry(FormModel):
    role: Optional[str] = None
    company: Optional[str] = None
    duration: Optional[str] = None
    activities: Optional[str] = None


class ProjectEntry(FormModel):
    name: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    technologies: Optional[str] = None
    keyPoints: Optional[List[Optional[str]]] = Field(default_factory=list)


class CertificateEntry(FormModel):
    title: Optional[str] = None
    issuedBy: Optional[str] = None
    issuedOn: Optional[str] = None
    credential: Optional[str] = None


class LanguageEntry(FormModel):
    language: Optional[str] = None
    read: Optional[bool] = False
    write: Optional[bool] = False
    speak: Optional[bool] = False


# ------------------- Main Resume Form ------------------------
class ResumeForm(FormModel):
    name: Optional[str] = None
    role: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    emailId: Optional[str] = None
    phoneNo: Optional[str] = None
    linkedIn: Optional[str] = None
    portfolioLink: Optional[str] = None
    nationality: Optional[str] = None

    availabilityType: Optional[str] = None
    noticePeriod: Optional[str] = None
    availableFromDate: Optional[str] = None

    # list of strings or one comma separated string, see normalize_skills
    skills: Any = None

    education: Optional[List[EducationEntry]] = Field(default_factory=list)
    experience: Optional[List[ExperienceEntry]] = Field(default_factory=list)
    projects: Optional[List[ProjectEntry]] = Field(default_factory=list)
    certificates: Optional[List[CertificateEntry]] = Field(default_factory=list)
    languages: Optional[List[LanguageEntry]] = Field(default_factory=list)

    @field_validator("education", "experience", "projects", "certificates", "languages", mode="before")
    @classmethod
    def blank_out_malformed_entries(cls, value):
        # null or non-object entries render as blank rows instead of failing the export
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [entry if isinstance(entry, (dict, BaseModel)) else {} for entry in value]
        return value
