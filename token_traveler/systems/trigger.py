"""Spatial trigger detection.

A token triggers a portal when its anchor point lies strictly inside the
marker's rectangle and both share a context. Markers are scanned in
enumeration order and the first hit wins; overlapping zones are not
otherwise arbitrated.
"""

from typing import Optional, Sequence

from token_traveler.descriptor import DEFAULT_KEYWORD, parse_descriptor
from token_traveler.scene import Scene
from token_traveler.types import EntityID, Subtype
from token_traveler.utils.geometry import contains


def is_traveler_candidate(
    scene: Scene, entity_id: EntityID, keyword: str = DEFAULT_KEYWORD
) -> bool:
    """Tokens can travel; cards and portal markers cannot."""
    graphic = scene.graphic.get(entity_id)
    if graphic is None or graphic.subtype != Subtype.TOKEN:
        return False
    name = scene.name_of(entity_id)
    if name.startswith(keyword):
        return False
    return not parse_descriptor(name, keyword).is_portal


def find_triggered_marker(
    scene: Scene, entity_id: EntityID, markers: Sequence[EntityID]
) -> Optional[EntityID]:
    """Return the first marker in ``markers`` containing the entity, if any."""
    point = scene.position.get(entity_id)
    context_id = scene.context_of(entity_id)
    if point is None or context_id is None:
        return None

    for marker_id in markers:
        if marker_id == entity_id or scene.context_of(marker_id) != context_id:
            continue
        center = scene.position.get(marker_id)
        size = scene.size.get(marker_id)
        if center is None or size is None:
            continue
        if contains(point, center, size):
            return marker_id
    return None
