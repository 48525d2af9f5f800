"""Unit tests for the front-end resume transform."""

import pytest

from tailor.api import transform_resume
from tailor.contexts.content import SectionOrder


@pytest.mark.unit
def test_transform_shape(resume):
    data = transform_resume(resume)

    assert set(data) == {
        "contact",
        "summary",
        "education",
        "skills",
        "experience",
        "projects",
        "leadership",
    }
    assert data["contact"]["email"] == "jordan@example.com"
    assert data["education"]["gpa"] == "3.8"


@pytest.mark.unit
def test_transform_skills_grouped_by_category(resume):
    skills = transform_resume(resume)["skills"]

    assert [group["category"] for group in skills] == ["languages", "frameworks", "cloud"]
    assert skills[0]["items"][0] == {"name": "Python", "tags": ["python", "backend"], "selected": True}


@pytest.mark.unit
def test_transform_everything_selected_and_tags_never_null(resume):
    data = transform_resume(resume)

    initech = data["experience"][1]
    assert initech["tags"] == []
    assert initech["selected"] is True
    assert all(bullet["selected"] for bullet in initech["bullets"])
    assert data["leadership"][0] == {
        "id": "mentor",
        "text": "Mentored 5 junior engineers",
        "tags": ["leadership"],
        "selected": True,
    }


@pytest.mark.unit
def test_transform_omits_empty_github(resume):
    resume.projects[0].github = ""

    project = transform_resume(resume)["projects"][0]

    assert "github" not in project
    assert project["technologies"] == "Go, PostgreSQL"


@pytest.mark.unit
def test_transform_applies_order(resume):
    data = transform_resume(resume, SectionOrder(leadership=["meetup"]))

    assert [entry["id"] for entry in data["leadership"]] == ["meetup", "mentor"]
    assert [entry["id"] for entry in data["experience"]] == ["acme", "initech"]
