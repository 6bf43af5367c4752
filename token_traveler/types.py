"""Common type aliases and enumerations.

``TraversalMode`` values are the lower-case strings authors write in the
fourth segment of a marker name, so ``TraversalMode(name)`` round-trips.
"""

from enum import StrEnum, auto
from typing import Tuple


EntityID = int
ContextID = str
TemplateID = str
ViewerID = str

Point = Tuple[float, float]

# Milliseconds on the scheduler's clock
Millis = int


class TraversalMode(StrEnum):
    """Destination policy of a portal node."""

    ASCENDING = "ascending"
    DESCENDING = "descending"
    RANDOM = "random"
    ODD_EVEN = "odd-even"
    CIRCLE_ENTRY = "circle-entry"
    CIRCLE_EXIT = "circle-exit"


class Subtype(StrEnum):
    """Kind of a placed graphic. Only tokens can travel."""

    TOKEN = auto()
    CARD = auto()


class Layer(StrEnum):
    """Drawing layer a graphic sits on."""

    OBJECTS = auto()
    GM = auto()
    MAP = auto()


class Outcome(StrEnum):
    """Result of a trigger evaluation that reached the resolver."""

    MOVED = auto()
    TELEPORTED = auto()
    NO_EXIT = auto()
    CLONE_FAILED = auto()
