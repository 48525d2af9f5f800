"""
Resume Data Structure

Defines the in-memory representation of a resume loaded from YAML (or JSON).
The Resume is reloaded wholesale on every load cycle and never mutated in place.

Only bullets and leadership entries are independently selectable. Experience
and project entries carry their own identifiers for ordering and API output,
but rendering decides their inclusion from their bullets.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from tailor.contexts.content.logger import _log_debug
from tailor.exceptions import ResumeLoadError
from tailor.utils.text_processing import slugify

SKILL_CATEGORIES = ("languages", "frameworks", "cloud")

SECTION_EXPERIENCE = "Experience"
SECTION_PROJECTS = "Projects"
SECTION_LEADERSHIP = "Leadership"


def _text(value: Any) -> str:
    """Coerce an optional YAML scalar (e.g. a float GPA) to a string."""
    return "" if value is None else str(value)


def _tags(value: Any) -> List[str]:
    return [str(tag) for tag in value] if value else []


@dataclass
class ContactInfo:
    name: str = ""
    location: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    github: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContactInfo":
        return cls(**{key: _text(data.get(key)) for key in cls.__dataclass_fields__})


@dataclass
class EducationEntry:
    institution: str = ""
    location: str = ""
    degree: str = ""
    minor: str = ""
    gpa: str = ""
    honors: str = ""
    focus: str = ""
    program: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EducationEntry":
        return cls(**{key: _text(data.get(key)) for key in cls.__dataclass_fields__})


@dataclass
class SkillItem:
    """A named skill with tags. Skills are not independently selectable."""

    name: str
    tags: List[str] = field(default_factory=list)

    @property
    def item_id(self) -> str:
        """Synthetic identifier used by job analysis (e.g. "skill-google-cloud")."""
        return f"skill-{slugify(self.name)}"


@dataclass
class Skills:
    languages: List[SkillItem] = field(default_factory=list)
    frameworks: List[SkillItem] = field(default_factory=list)
    cloud: List[SkillItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Skills":
        return cls(
            **{
                category: [
                    SkillItem(name=_text(item.get("name")), tags=_tags(item.get("tags")))
                    for item in data.get(category) or []
                ]
                for category in SKILL_CATEGORIES
            }
        )

    def categories(self) -> List[tuple]:
        """Return (category name, items) pairs in display order."""
        return [(category, getattr(self, category)) for category in SKILL_CATEGORIES]

    def all_items(self) -> List[SkillItem]:
        return [item for _, items in self.categories() for item in items]


@dataclass
class Bullet:
    """The atomic selectable unit of resume content."""

    id: str
    text: str
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bullet":
        return cls(id=_text(data.get("id")), text=_text(data.get("text")), tags=_tags(data.get("tags")))


@dataclass
class ExperienceEntry:
    id: str
    title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    tags: List[str] = field(default_factory=list)
    bullets: List[Bullet] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExperienceEntry":
        return cls(
            id=_text(data.get("id")),
            title=_text(data.get("title")),
            company=_text(data.get("company")),
            location=_text(data.get("location")),
            start_date=_text(data.get("start_date")),
            end_date=_text(data.get("end_date")),
            tags=_tags(data.get("tags")),
            bullets=[Bullet.from_dict(bullet) for bullet in data.get("bullets") or []],
        )


@dataclass
class ProjectEntry:
    id: str
    title: str = ""
    technologies: str = ""
    github: str = ""
    tags: List[str] = field(default_factory=list)
    bullets: List[Bullet] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectEntry":
        return cls(
            id=_text(data.get("id")),
            title=_text(data.get("title")),
            technologies=_text(data.get("technologies")),
            github=_text(data.get("github")),
            tags=_tags(data.get("tags")),
            bullets=[Bullet.from_dict(bullet) for bullet in data.get("bullets") or []],
        )


@dataclass
class LeadershipEntry:
    """Selectable like a bullet, but with no parent grouping."""

    id: str
    text: str
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeadershipEntry":
        return cls(id=_text(data.get("id")), text=_text(data.get("text")), tags=_tags(data.get("tags")))


@dataclass
class ItemWithID:
    """
    Flattened view of a selectable item for listing and scoring.

    Attributes:
        id: Item identifier
        text: Display text
        tags: Item tags
        section: "Experience", "Projects" or "Leadership"
        category: Company, project title, or "" for leadership
    """

    id: str
    text: str
    tags: List[str]
    section: str
    category: str = ""


@dataclass
class Resume:
    """Root aggregate of a loaded resume."""

    contact: ContactInfo = field(default_factory=ContactInfo)
    summary: str = ""
    education: EducationEntry = field(default_factory=EducationEntry)
    skills: Skills = field(default_factory=Skills)
    experience: List[ExperienceEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    leadership: List[LeadershipEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Resume":
        """
        Build a Resume from a plain mapping (as produced by YAML or JSON).

        Missing sections become empty; missing tag lists become empty lists.
        """
        return cls(
            contact=ContactInfo.from_dict(data.get("contact") or {}),
            summary=_text(data.get("summary")),
            education=EducationEntry.from_dict(data.get("education") or {}),
            skills=Skills.from_dict(data.get("skills") or {}),
            experience=[ExperienceEntry.from_dict(entry) for entry in data.get("experience") or []],
            projects=[ProjectEntry.from_dict(entry) for entry in data.get("projects") or []],
            leadership=[LeadershipEntry.from_dict(entry) for entry in data.get("leadership") or []],
        )

    def get_all_items(self) -> List[ItemWithID]:
        """
        List every selectable item (bullets and leadership entries) in document order.

        Returns:
            ItemWithID list: experience bullets, project bullets, then leadership
        """
        items = []

        for exp in self.experience:
            for bullet in exp.bullets:
                items.append(
                    ItemWithID(bullet.id, bullet.text, bullet.tags, SECTION_EXPERIENCE, exp.company)
                )

        for proj in self.projects:
            for bullet in proj.bullets:
                items.append(
                    ItemWithID(bullet.id, bullet.text, bullet.tags, SECTION_PROJECTS, proj.title)
                )

        for lead in self.leadership:
            items.append(ItemWithID(lead.id, lead.text, lead.tags, SECTION_LEADERSHIP))

        return items

    def collect_item_ids(self) -> List[str]:
        """
        Collect every identifier a job analysis may reference.

        Includes synthetic skill ids, entry ids and their bullet ids, and
        leadership ids.
        """
        ids = [skill.item_id for skill in self.skills.all_items()]

        for exp in self.experience:
            ids.append(exp.id)
            ids.extend(bullet.id for bullet in exp.bullets)

        for proj in self.projects:
            ids.append(proj.id)
            ids.extend(bullet.id for bullet in proj.bullets)

        ids.extend(lead.id for lead in self.leadership)

        return ids


def load_resume(path: Path) -> Resume:
    """
    Read and parse a resume YAML (or JSON) file.

    Args:
        path: Path to the resume file

    Returns:
        Resume instance

    Raises:
        ResumeLoadError: If the file is missing, unreadable, or not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise ResumeLoadError("resume file not found", path)

    _log_debug(f"Loading resume from {path}")

    try:
        config = OmegaConf.load(path)
    except (OSError, YAMLError, OmegaConfBaseException) as e:
        raise ResumeLoadError(f"failed to load resume ({e})", path) from e

    # Interpolation stays unresolved so "${...}" in resume text is never evaluated
    data: Optional[Any] = OmegaConf.to_container(config, resolve=False)
    if not isinstance(data, dict):
        raise ResumeLoadError("resume file must contain a mapping at the top level", path)

    try:
        return Resume.from_dict(data)
    except (AttributeError, TypeError) as e:
        raise ResumeLoadError(f"invalid resume structure ({e})", path) from e
