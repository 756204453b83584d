"""Unit tests for form normalization."""

import pytest

from models.resume_model import EducationEntry, ResumeForm
from utils.normalize_resume import (
    clean_summary,
    normalize_education,
    normalize_form,
    normalize_skills,
)


@pytest.mark.unit
def test_other_edu_type_replaced_by_trimmed_override():
    education = [
        EducationEntry(institute="IIT", eduType="Other", eduTypeOther="  Diploma  "),
        EducationEntry(institute="MIT", eduType="B.Tech"),
    ]

    result = normalize_education(education)

    assert [e.eduType for e in result] == ["Diploma", "B.Tech"]
    assert all(e.eduType != "Other" for e in result)
    assert [e.institute for e in result] == ["IIT", "MIT"]


@pytest.mark.unit
def test_other_edu_type_with_blank_override_is_untouched():
    education = [
        EducationEntry(eduType="Other", eduTypeOther="   "),
        EducationEntry(eduType="Other"),
    ]

    assert [e.eduType for e in normalize_education(education)] == ["Other", "Other"]


@pytest.mark.unit
def test_override_ignored_when_type_is_not_other():
    education = [EducationEntry(eduType="M.Sc", eduTypeOther="Diploma")]

    assert normalize_education(education)[0].eduType == "M.Sc"


@pytest.mark.unit
def test_normalize_education_does_not_mutate_input():
    entry = EducationEntry(eduType="Other", eduTypeOther="PhD")

    normalize_education([entry])

    assert entry.eduType == "Other"


@pytest.mark.unit
def test_normalize_education_handles_none():
    assert normalize_education(None) == []


@pytest.mark.unit
def test_skills_string_is_split_trimmed_and_blanks_dropped():
    assert normalize_skills("Go, Python,  , Rust") == ["Go", "Python", "Rust"]


@pytest.mark.unit
def test_skills_list_is_filtered():
    assert normalize_skills(["SQL", 3, None, "  ", "", " Docker "]) == ["SQL", "3", "Docker"]


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, 42, {"a": 1}])
def test_unsupported_skills_become_empty(value):
    assert normalize_skills(value) == []


@pytest.mark.unit
def test_normalize_form_is_idempotent():
    form = ResumeForm(
        name="Ada",
        skills="C++, Math, ",
        education=[{"institute": "Cambridge", "eduType": "Other", "eduTypeOther": " Self-taught "}],
    )

    once = normalize_form(form)
    twice = normalize_form(once)

    assert once.skills == ["C++", "Math"]
    assert once.education[0].eduType == "Self-taught"
    assert twice.model_dump() == once.model_dump()


@pytest.mark.unit
def test_clean_summary_strips_asterisks():
    assert clean_summary("**Bold** and *brilliant* engineer") == "Bold and brilliant engineer"
    assert clean_summary(None) == ""
