"""
Section Ordering

Persisted per-section ordering of experience, project and leadership entries.
The ordering file is YAML written by the API when the front-end reorders a
section. Without a file, entries keep the order they have in the resume source.
"""

from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, TypeVar

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from tailor.contexts.content.logger import _log_debug, _log_info
from tailor.contexts.content.resume_data_structure import Resume
from tailor.exceptions import ResumeLoadError

ORDER_SECTIONS = ("experience", "projects", "leadership")
ORDER_FILENAME = "order.yaml"

T = TypeVar("T")


@dataclass
class SectionOrder:
    experience: List[str] = field(default_factory=list)
    projects: List[str] = field(default_factory=list)
    leadership: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return asdict(self)


def order_path_for(resume_path: Path, override: Optional[Path] = None) -> Path:
    """Ordering file location: override if given, else order.yaml beside the resume."""
    if override:
        return Path(override)
    return Path(resume_path).parent / ORDER_FILENAME


def default_order(resume: Resume) -> SectionOrder:
    """Entry ids in the order they appear in the resume source."""
    return SectionOrder(
        experience=[exp.id for exp in resume.experience],
        projects=[proj.id for proj in resume.projects],
        leadership=[lead.id for lead in resume.leadership],
    )


def load_order(order_path: Path, resume: Resume) -> SectionOrder:
    """
    Read the ordering file, or fall back to the default order.

    Args:
        order_path: Path to order.yaml
        resume: Resume providing the default order

    Raises:
        ResumeLoadError: If the file exists but cannot be parsed
    """
    order_path = Path(order_path)
    if not order_path.exists():
        return default_order(resume)

    try:
        data = OmegaConf.to_container(OmegaConf.load(order_path), resolve=False)
    except (OSError, YAMLError, OmegaConfBaseException) as e:
        raise ResumeLoadError(f"failed to load section order ({e})", order_path) from e

    if not isinstance(data, dict):
        raise ResumeLoadError("section order file must contain a mapping", order_path)

    _log_debug(f"Loaded section order from {order_path}")
    return SectionOrder(**{section: [str(i) for i in data.get(section) or []] for section in ORDER_SECTIONS})


def save_order(order_path: Path, order: SectionOrder) -> None:
    """Write the ordering file as YAML."""
    order_path = Path(order_path)
    OmegaConf.save(OmegaConf.create(order.to_dict()), order_path)
    _log_info(f"Saved section order to {order_path}")


def merge_order(existing: SectionOrder, partial: Mapping[str, Optional[Sequence[str]]]) -> SectionOrder:
    """
    Apply a partial update field by field.

    Only sections present (and not None) in partial replace the existing list;
    the others are left untouched. Unknown keys are ignored.
    """
    merged = SectionOrder(**existing.to_dict())
    for section in ORDER_SECTIONS:
        ids = partial.get(section)
        if ids is not None:
            setattr(merged, section, list(ids))
    return merged


def apply_order(entries: Sequence[T], ordered_ids: Sequence[str]) -> List[T]:
    """
    Reorder entries (anything with an .id) to follow ordered_ids.

    Ids with no matching entry are ignored; entries missing from ordered_ids
    keep their source order after the ordered ones. Entries sharing an id
    (including a missing id) move together and are never dropped.
    """
    positions: Dict[Any, List[int]] = {}
    for index, entry in enumerate(entries):
        positions.setdefault(entry.id, []).append(index)

    result = []
    placed = set()
    for item_id in ordered_ids:
        for index in positions.pop(item_id, []):
            result.append(entries[index])
            placed.add(index)

    result.extend(entry for index, entry in enumerate(entries) if index not in placed)
    return result


def apply_section_order(resume: Resume, order: SectionOrder) -> Resume:
    """Return a copy of the resume with its sections listed in the given order."""
    return replace(
        resume,
        experience=apply_order(resume.experience, order.experience),
        projects=apply_order(resume.projects, order.projects),
        leadership=apply_order(resume.leadership, order.leadership),
    )
