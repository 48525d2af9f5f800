"""Unit tests for item selection."""

import pytest

from tailor.contexts.content import Selection, select_by_ids, select_by_tags


@pytest.mark.unit
def test_no_ids_is_unfiltered():
    selection = select_by_ids([])

    assert selection.is_unfiltered
    assert not selection.is_empty
    assert selection.includes("anything")


@pytest.mark.unit
def test_ids_taken_verbatim():
    """Unknown ids are kept; they simply match nothing."""
    selection = select_by_ids(["acme-kafka", "does-not-exist"])

    assert selection.ids == frozenset({"acme-kafka", "does-not-exist"})
    assert selection.includes("acme-kafka")
    assert not selection.includes("acme-latency")


@pytest.mark.unit
def test_unfiltered_has_no_id_set():
    with pytest.raises(ValueError):
        Selection.unfiltered().ids


@pytest.mark.unit
def test_empty_subset_differs_from_unfiltered():
    """An empty subset selects nothing and is never treated as unfiltered."""
    empty = Selection.subset([])

    assert empty.is_empty
    assert not empty.is_unfiltered
    assert not empty.includes("acme-kafka")
    assert empty != Selection.unfiltered()


@pytest.mark.unit
def test_select_by_tags_any_match(resume):
    """Items carrying any of the tags are selected."""
    selection = select_by_tags(resume, ["python"])

    assert selection.ids == frozenset({"acme-kafka", "initech-tps", "meetup"})


@pytest.mark.unit
def test_select_by_tags_multiple(resume):
    selection = select_by_tags(resume, ["finance", "leadership"])

    assert selection.ids == frozenset({"ledger-core", "mentor"})


@pytest.mark.unit
def test_select_by_tags_entry_tags_do_not_propagate(resume):
    """Tags on an experience entry do not select its bullets."""
    selection = select_by_tags(resume, ["backend"])

    assert selection.is_empty


@pytest.mark.unit
def test_select_by_tags_no_tags_is_unfiltered(resume):
    assert select_by_tags(resume, []).is_unfiltered


@pytest.mark.unit
def test_matched_ids(resume):
    selection = select_by_ids(["acme-kafka", "ghost"])

    assert selection.matched_ids(resume) == ["acme-kafka"]
    assert len(Selection.unfiltered().matched_ids(resume)) == 6


@pytest.mark.unit
def test_selection_equality_and_repr():
    assert Selection.subset(["b", "a"]) == Selection.subset(["a", "b"])
    assert repr(Selection.subset(["b", "a"])) == "Selection.subset(['a', 'b'])"
    assert repr(Selection.unfiltered()) == "Selection.unfiltered()"
