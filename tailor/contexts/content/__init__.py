"""
Content Context

Responsibilities:
- Represents the resume as dataclasses loaded from YAML/JSON
- Flattens selectable items for listing and scoring
- Computes selections by identifier or tag
- Persists per-section ordering

Owns: Resume data model, selection, section order
Never: Produces LaTeX or talks to remote services
"""

from tailor.contexts.content.resume_data_structure import (
    SKILL_CATEGORIES,
    Bullet,
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ItemWithID,
    LeadershipEntry,
    ProjectEntry,
    Resume,
    SkillItem,
    Skills,
    load_resume,
)
from tailor.contexts.content.section_order import (
    SectionOrder,
    apply_order,
    apply_section_order,
    default_order,
    load_order,
    merge_order,
    order_path_for,
    save_order,
)
from tailor.contexts.content.selection import Selection, select_by_ids, select_by_tags

__all__ = [
    # Data model
    "SKILL_CATEGORIES",
    "Bullet",
    "ContactInfo",
    "EducationEntry",
    "ExperienceEntry",
    "ItemWithID",
    "LeadershipEntry",
    "ProjectEntry",
    "Resume",
    "SkillItem",
    "Skills",
    "load_resume",
    # Selection
    "Selection",
    "select_by_ids",
    "select_by_tags",
    # Section order
    "SectionOrder",
    "apply_order",
    "apply_section_order",
    "default_order",
    "load_order",
    "merge_order",
    "order_path_for",
    "save_order",
]
