"""Portal descriptor parsing.

A marker's display name carries its portal metadata::

    Traveler:<group>:<node>[:<mode>]

Missing trailing segments fall back to defaults, so ``Traveler:City`` is a
valid marker (group ``City``, node ``0``, ascending). Parsing is total: no
name is rejected, and descriptors are recomputed on every evaluation because
markers can be renamed between triggers.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from token_traveler.types import TraversalMode


DEFAULT_KEYWORD = "Traveler"
DEFAULT_GROUP = "Unknown"
DEFAULT_NODE_ID = 0
DEFAULT_MODE = TraversalMode.ASCENDING

# Leading integer, trailing junk ignored ("3b" -> 3)
_INT_PREFIX = re.compile(r"^[+-]?\d+")


@dataclass(frozen=True)
class Descriptor:
    """Parsed view of a marker name.

    Attributes:
        is_portal: True iff the first segment equals the keyword exactly.
        group: Group name, ``"Unknown"`` when absent.
        node_id: Node number, ``0`` when absent or unparsable.
        mode_name: Lower-cased mode segment, ``"ascending"`` when absent.
    """

    is_portal: bool
    group: str = DEFAULT_GROUP
    node_id: int = DEFAULT_NODE_ID
    mode_name: str = DEFAULT_MODE.value

    @property
    def mode(self) -> TraversalMode:
        """Traversal mode; unrecognized names resolve as ascending."""
        try:
            return TraversalMode(self.mode_name)
        except ValueError:
            return DEFAULT_MODE

    @property
    def mode_recognized(self) -> bool:
        return self.mode_name in TraversalMode._value2member_map_


def _segment(parts: List[str], index: int) -> Optional[str]:
    if index < len(parts) and parts[index]:
        return parts[index]
    return None


def parse_node_id(text: Optional[str]) -> int:
    """Integer-prefix parse of ``text``; ``0`` when there is no leading integer."""
    if not text:
        return DEFAULT_NODE_ID
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else DEFAULT_NODE_ID


def parse_descriptor(name: Optional[str], keyword: str = DEFAULT_KEYWORD) -> Descriptor:
    """Parse a marker name into a :class:`Descriptor`.

    Args:
        name (str | None): Raw display name. ``None`` is treated as ``""``.
        keyword (str): Reserved first segment identifying portal markers.

    Returns:
        Descriptor: Parsed fields with defaults for missing segments.
    """
    parts = [part.strip() for part in (name or "").split(":")]
    mode = _segment(parts, 3)
    return Descriptor(
        is_portal=parts[0] == keyword,
        group=_segment(parts, 1) or DEFAULT_GROUP,
        node_id=parse_node_id(_segment(parts, 2)),
        mode_name=mode.lower() if mode else DEFAULT_MODE.value,
    )


def is_marker_name(name: Optional[str], keyword: str = DEFAULT_KEYWORD) -> bool:
    return parse_descriptor(name, keyword).is_portal
