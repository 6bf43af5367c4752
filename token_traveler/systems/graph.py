"""Group graph construction.

A group is every portal marker whose raw name *contains* the group name. The
match is a substring test on the whole name rather than an equality test on
the parsed group, so ``City`` also collects ``OldCity`` markers; authors who
need separate groups should pick names that do not overlap.
"""

from dataclasses import dataclass
from typing import List, Sequence

from token_traveler.components import Position
from token_traveler.descriptor import DEFAULT_KEYWORD, parse_descriptor
from token_traveler.scene import Scene
from token_traveler.types import ContextID, EntityID, TraversalMode


@dataclass(frozen=True)
class Node:
    """One marker's place in its group.

    Attributes:
        node_id: Parsed node number (duplicates allowed).
        mode: Traversal mode of this node.
        marker_id: Entity id of the marker.
        context_id: Context the marker lives in.
        position: Marker center; relocation target.
    """

    node_id: int
    mode: TraversalMode
    marker_id: EntityID
    context_id: ContextID
    position: Position


def portal_markers(scene: Scene, keyword: str = DEFAULT_KEYWORD) -> List[EntityID]:
    """Return all portal markers across every context in enumeration order."""
    return [
        eid
        for eid in scene.entity_ids()
        if parse_descriptor(scene.name_of(eid), keyword).is_portal
    ]


def build_group(
    scene: Scene,
    markers: Sequence[EntityID],
    group: str,
    keyword: str = DEFAULT_KEYWORD,
) -> List[Node]:
    """Collect the markers of ``group`` ordered ascending by node id.

    The sort is stable, so markers sharing a node id keep enumeration order.
    Markers missing a position or context are left out.
    """
    nodes: List[Node] = []
    for eid in markers:
        name = scene.name_of(eid)
        if group not in name:
            continue
        position = scene.position.get(eid)
        context_id = scene.context_of(eid)
        if position is None or context_id is None:
            continue
        descriptor = parse_descriptor(name, keyword)
        nodes.append(
            Node(
                node_id=descriptor.node_id,
                mode=descriptor.mode,
                marker_id=eid,
                context_id=context_id,
                position=position,
            )
        )
    return sorted(nodes, key=lambda node: node.node_id)


def find_node_index(nodes: Sequence[Node], marker_id: EntityID) -> int:
    """Index of the node backed by ``marker_id``, ``-1`` if it is not in the group."""
    return next((i for i, node in enumerate(nodes) if node.marker_id == marker_id), -1)
