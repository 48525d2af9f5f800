"""
Item selection.

A Selection is either Unfiltered (include everything) or a Subset of
identifiers. An empty Subset means "selected nothing" and is never confused
with Unfiltered.
"""

from typing import FrozenSet, Iterable, List, Optional

from tailor.contexts.content.resume_data_structure import Resume


class Selection:
    """
    Tagged variant over {Unfiltered} | {Subset(ids)}.

    Build with Selection.unfiltered() or Selection.subset(ids).
    """

    __slots__ = ("_ids",)

    def __init__(self, ids: Optional[FrozenSet[str]]):
        # None is the Unfiltered tag
        self._ids = ids

    @classmethod
    def unfiltered(cls) -> "Selection":
        return cls(None)

    @classmethod
    def subset(cls, ids: Iterable[str]) -> "Selection":
        return cls(frozenset(ids))

    @property
    def is_unfiltered(self) -> bool:
        return self._ids is None

    @property
    def is_empty(self) -> bool:
        """True only for a Subset that selected nothing."""
        return self._ids is not None and not self._ids

    @property
    def ids(self) -> FrozenSet[str]:
        """Selected identifiers. Raises ValueError for an Unfiltered selection."""
        if self._ids is None:
            raise ValueError("an unfiltered selection has no identifier set")
        return self._ids

    def includes(self, item_id: str) -> bool:
        return self._ids is None or item_id in self._ids

    def matched_ids(self, resume: Resume) -> List[str]:
        """
        Selected identifiers that name a bullet or leadership entry of the resume.

        For an Unfiltered selection every selectable identifier matches.
        """
        return [item.id for item in resume.get_all_items() if self.includes(item.id)]

    def __len__(self) -> int:
        return 0 if self._ids is None else len(self._ids)

    def __eq__(self, other) -> bool:
        return isinstance(other, Selection) and self._ids == other._ids

    def __hash__(self) -> int:
        return hash(self._ids)

    def __repr__(self) -> str:
        if self._ids is None:
            return "Selection.unfiltered()"
        return f"Selection.subset({sorted(self._ids)!r})"


def select_by_ids(ids: Iterable[str]) -> Selection:
    """
    Select items by identifier.

    Identifiers are taken verbatim with no existence check; unknown ids simply
    render nothing. No ids at all means Unfiltered.
    """
    ids = list(ids)
    if not ids:
        return Selection.unfiltered()
    return Selection.subset(ids)


def select_by_tags(resume: Resume, tags: Iterable[str]) -> Selection:
    """
    Select every bullet and leadership entry carrying any of the given tags.

    No tags at all means Unfiltered. Tags that match nothing give an empty Subset.
    """
    tag_set = set(tags)
    if not tag_set:
        return Selection.unfiltered()

    selected = set()
    for item in resume.get_all_items():
        if any(tag in tag_set for tag in item.tags):
            selected.add(item.id)

    return Selection.subset(selected)
