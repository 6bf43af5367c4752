"""Destination resolution for each traversal mode.

``resolve`` is a pure function over a group snapshot built by
:func:`token_traveler.systems.graph.build_group`:

* ``ascending`` / ``descending``: next / previous node, wrapping.
* ``random``: any other node, uniformly.
* ``odd-even``: next node whose id has the same parity, wrapping.
* ``circle-entry``: the ``circle-exit`` sharing the node id, else the first
  ``circle-exit`` of the group.
* ``circle-exit``: terminal; never moves anything.

A ``None`` result means "do not move". The only failure that callers surface
is a circle entry without any exit, raised as :class:`CircleExitNotFound`.
"""

import random
from typing import List, Optional, Sequence

from token_traveler.systems.graph import Node
from token_traveler.types import TraversalMode


class TraversalError(Exception):
    """Base class for resolution failures worth reporting."""


class CircleExitNotFound(TraversalError):
    def __init__(self, node_id: int) -> None:
        super().__init__(f"No circle-exit found for circle-entry node {node_id}")
        self.node_id = node_id


def _ascending(nodes: Sequence[Node], current_index: int, total: int) -> Node:
    return nodes[(current_index + 1) % total]


def _descending(nodes: Sequence[Node], current_index: int, total: int) -> Node:
    return nodes[(current_index - 1 + total) % total]


def _random(
    nodes: Sequence[Node], current_index: int, total: int, rng: random.Random
) -> Optional[Node]:
    # A lone node has nowhere else to go
    if total < 2:
        return None
    candidates = [i for i in range(total) if i != current_index]
    return nodes[rng.choice(candidates)]


def _odd_even(nodes: Sequence[Node], current_index: int) -> Node:
    current = nodes[current_index]
    parity = current.node_id % 2
    subset: List[Node] = [node for node in nodes if node.node_id % 2 == parity]
    position = next(i for i, node in enumerate(subset) if node is current)
    return subset[(position + 1) % len(subset)]


def _circle_entry(nodes: Sequence[Node], node_id: int) -> Node:
    exits = [node for node in nodes if node.mode == TraversalMode.CIRCLE_EXIT]
    for node in exits:
        if node.node_id == node_id:
            return node
    if exits:
        return exits[0]
    raise CircleExitNotFound(node_id)


def resolve(
    nodes: Sequence[Node],
    current_index: int,
    mode: TraversalMode,
    node_id: int,
    total: int,
    rng: Optional[random.Random] = None,
) -> Optional[Node]:
    """Compute the destination of a trigger on ``nodes[current_index]``.

    Args:
        nodes (Sequence[Node]): Group ordered by node id.
        current_index (int): Index of the triggered node, ``-1`` if missing.
        mode (TraversalMode): Mode of the triggered node.
        node_id (int): Node id of the triggered node.
        total (int): Number of nodes considered, normally ``len(nodes)``.
        rng (random.Random | None): Source for the random mode.

    Returns:
        Node | None: Destination, or ``None`` when nothing should move.

    Raises:
        CircleExitNotFound: ``mode`` is circle-entry and the group has no exit.
    """
    total = min(total, len(nodes))
    if total <= 0 or not 0 <= current_index < total:
        return None
    nodes = nodes[:total]

    if mode == TraversalMode.CIRCLE_EXIT:
        return None
    if mode == TraversalMode.CIRCLE_ENTRY:
        return _circle_entry(nodes, node_id)
    if mode == TraversalMode.RANDOM:
        return _random(nodes, current_index, total, rng or random.Random())
    if mode == TraversalMode.ODD_EVEN:
        return _odd_even(nodes, current_index)
    if mode == TraversalMode.DESCENDING:
        return _descending(nodes, current_index, total)
    return _ascending(nodes, current_index, total)
