"""Entity ID allocation.

Graphics are modelled as an ``EntityID`` (an integer) plus component
dataclasses stored in persistent maps on :class:`token_traveler.scene.Scene`.
IDs increase monotonically within a scene, so ascending id order is creation
order; the trigger detector relies on this for its marker enumeration order.

IDs are *not* recycled: a removed graphic's id is never handed out again while
a larger id exists in the scene.

Examples
--------
>>> from token_traveler.entity import entity_id_generator, next_entity_id
>>> ids = entity_id_generator()
>>> marker_a, marker_b = next(ids), next(ids)
>>> next_entity_id([marker_a, marker_b])
2
"""

from typing import Iterable, Iterator

from token_traveler.types import EntityID


def entity_id_generator(start: EntityID = 0) -> Iterator[EntityID]:
    """Yield an infinite sequence of monotonically increasing entity IDs."""
    eid = start
    while True:
        yield eid
        eid += 1


def next_entity_id(existing: Iterable[EntityID]) -> EntityID:
    """Return the id following the largest of ``existing`` (``0`` if empty)."""
    return max(existing, default=-1) + 1
