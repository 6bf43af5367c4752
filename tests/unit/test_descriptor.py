import pytest

from token_traveler.descriptor import (
    Descriptor,
    is_marker_name,
    parse_descriptor,
    parse_node_id,
)
from token_traveler.types import TraversalMode


def test_full_descriptor() -> None:
    d = parse_descriptor("Traveler:City:3:Descending")
    assert d == Descriptor(is_portal=True, group="City", node_id=3, mode_name="descending")
    assert d.mode == TraversalMode.DESCENDING


def test_missing_trailing_segments_default() -> None:
    d = parse_descriptor("Traveler:City")
    assert d.is_portal
    assert (d.group, d.node_id, d.mode) == ("City", 0, TraversalMode.ASCENDING)


def test_keyword_only() -> None:
    d = parse_descriptor("Traveler")
    assert d.is_portal
    assert (d.group, d.node_id, d.mode_name) == ("Unknown", 0, "ascending")


@pytest.mark.parametrize(
    "name",
    ["", "Hero", "traveler:City:1", "Travelers:City:1", "City:Traveler:1"],
)
def test_non_portal_names(name: str) -> None:
    assert not parse_descriptor(name).is_portal
    assert not is_marker_name(name)


def test_segments_are_trimmed() -> None:
    d = parse_descriptor("  Traveler : Old Town :  2 : ODD-EVEN ")
    assert d.is_portal
    assert d.group == "Old Town"
    assert d.node_id == 2
    assert d.mode == TraversalMode.ODD_EVEN


def test_empty_group_segment_defaults() -> None:
    assert parse_descriptor("Traveler::4").group == "Unknown"


@pytest.mark.parametrize(
    "text, expected",
    [("7", 7), ("12abc", 12), ("-3", -3), ("+5", 5), ("abc", 0), ("", 0), (None, 0), ("1.9", 1)],
)
def test_parse_node_id(text, expected: int) -> None:
    assert parse_node_id(text) == expected


def test_unknown_mode_resolves_ascending_but_is_kept() -> None:
    d = parse_descriptor("Traveler:City:1:zigzag")
    assert d.mode_name == "zigzag"
    assert d.mode == TraversalMode.ASCENDING
    assert not d.mode_recognized
    assert parse_descriptor("Traveler:City:1:circle-exit").mode_recognized


def test_custom_keyword() -> None:
    assert parse_descriptor("Gate:North:1", keyword="Gate").is_portal
    assert not parse_descriptor("Traveler:North:1", keyword="Gate").is_portal


def test_parse_is_total_and_idempotent() -> None:
    for name in [None, ":::", "Traveler:::::", "Traveler:a:b:c:d:e"]:
        assert parse_descriptor(name) == parse_descriptor(name)
