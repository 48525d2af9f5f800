"""Unit tests for the resume data model and loader."""

import pytest

from tailor.contexts.content import Resume, load_resume
from tailor.exceptions import ResumeLoadError


@pytest.mark.unit
def test_load_resume_sections(resume):
    """Test that every section of the sample resume is populated."""
    assert resume.contact.name == "Jordan Rivera"
    assert resume.education.gpa == "3.8"
    assert [exp.id for exp in resume.experience] == ["acme", "initech"]
    assert [proj.id for proj in resume.projects] == ["ledger"]
    assert [lead.id for lead in resume.leadership] == ["mentor", "meetup"]
    assert [skill.name for skill in resume.skills.languages] == ["Python", "Go"]


@pytest.mark.unit
def test_missing_tags_become_empty_lists(resume):
    """Entries without tags get an empty list, never None."""
    initech = resume.experience[1]
    assert initech.tags == []


@pytest.mark.unit
def test_get_all_items_document_order(resume):
    """Test flattening: experience bullets, project bullets, then leadership."""
    items = resume.get_all_items()

    assert [item.id for item in items] == [
        "acme-kafka",
        "acme-latency",
        "initech-tps",
        "ledger-core",
        "mentor",
        "meetup",
    ]
    assert items[0].section == "Experience"
    assert items[0].category == "Acme Corp"
    assert items[3].section == "Projects"
    assert items[3].category == "Ledger"
    assert items[4].section == "Leadership"
    assert items[4].category == ""


@pytest.mark.unit
def test_collect_item_ids_includes_skills_and_entries(resume):
    """Job analysis ids cover skills, entries, bullets and leadership."""
    ids = resume.collect_item_ids()

    assert "skill-google-cloud" in ids
    assert "skill-python" in ids
    assert "acme" in ids
    assert "acme-kafka" in ids
    assert "ledger" in ids
    assert "meetup" in ids


@pytest.mark.unit
def test_from_dict_empty_mapping():
    """A bare mapping yields an empty resume."""
    resume = Resume.from_dict({})

    assert resume.get_all_items() == []
    assert resume.skills.all_items() == []
    assert resume.contact.name == ""


@pytest.mark.unit
def test_load_resume_missing_file(tmp_path):
    """Test error handling for a missing resume file."""
    with pytest.raises(ResumeLoadError, match="resume file not found"):
        load_resume(tmp_path / "nope.yaml")


@pytest.mark.unit
def test_load_resume_malformed_yaml(tmp_path):
    """Test error handling for unparseable YAML."""
    path = tmp_path / "resume.yaml"
    path.write_text("contact: [unclosed\n", encoding="utf-8")

    with pytest.raises(ResumeLoadError, match="failed to load resume"):
        load_resume(path)


@pytest.mark.unit
def test_load_resume_rejects_non_mapping(tmp_path):
    """A top-level list is not a resume."""
    path = tmp_path / "resume.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(ResumeLoadError, match="mapping"):
        load_resume(path)


@pytest.mark.unit
def test_load_resume_accepts_json(tmp_path):
    """JSON is valid YAML, so JSON resumes load too."""
    path = tmp_path / "resume.json"
    path.write_text(
        '{"contact": {"name": "A"}, "leadership": [{"id": "x", "text": "Led"}]}',
        encoding="utf-8",
    )

    resume = load_resume(path)

    assert resume.contact.name == "A"
    assert resume.leadership[0].tags == []
