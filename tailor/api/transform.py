"""
Front-end resume format.

Converts a Resume into the JSON shape the front-end expects: skills grouped by
category, a `selected` flag on every item, and tag lists that are never null.
Selection state is not reflected yet, so every `selected` flag is true.
"""

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from tailor.contexts.content import (
    Bullet,
    ExperienceEntry,
    LeadershipEntry,
    ProjectEntry,
    Resume,
    SectionOrder,
    SkillItem,
    apply_section_order,
)


def _transform_skill(item: SkillItem) -> Dict[str, Any]:
    return {"name": item.name, "tags": list(item.tags or []), "selected": True}


def _transform_bullets(bullets: List[Bullet]) -> List[Dict[str, Any]]:
    return [
        {"id": bullet.id, "text": bullet.text, "tags": list(bullet.tags or []), "selected": True}
        for bullet in bullets
    ]


def _transform_experience(entry: ExperienceEntry) -> Dict[str, Any]:
    return {
        "id": entry.id,
        "title": entry.title,
        "company": entry.company,
        "location": entry.location,
        "start_date": entry.start_date,
        "end_date": entry.end_date,
        "tags": list(entry.tags or []),
        "bullets": _transform_bullets(entry.bullets),
        "selected": True,
    }


def _transform_project(entry: ProjectEntry) -> Dict[str, Any]:
    result = {
        "id": entry.id,
        "title": entry.title,
        "technologies": entry.technologies,
        "tags": list(entry.tags or []),
        "bullets": _transform_bullets(entry.bullets),
        "selected": True,
    }
    if entry.github:
        result["github"] = entry.github
    return result


def _transform_leadership(entry: LeadershipEntry) -> Dict[str, Any]:
    return {"id": entry.id, "text": entry.text, "tags": list(entry.tags or []), "selected": True}


def transform_resume(resume: Resume, order: Optional[SectionOrder] = None) -> Dict[str, Any]:
    """
    Convert a Resume to the front-end format.

    Args:
        resume: Loaded resume
        order: Section order to list experience, projects and leadership in
               (default: source order)
    """
    if order is not None:
        resume = apply_section_order(resume, order)

    return {
        "contact": asdict(resume.contact),
        "summary": resume.summary,
        "education": asdict(resume.education),
        "skills": [
            {"category": category, "items": [_transform_skill(item) for item in items]}
            for category, items in resume.skills.categories()
        ],
        "experience": [_transform_experience(entry) for entry in resume.experience],
        "projects": [_transform_project(entry) for entry in resume.projects],
        "leadership": [_transform_leadership(entry) for entry in resume.leadership],
    }
