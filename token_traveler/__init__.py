"""token_traveler
=================

Portal graph resolution for tokens moving across scene contexts.

Markers named ``Traveler:<group>:<node>[:<mode>]`` form groups; a token that
steps inside a marker is relocated to the next node of that group according to
the group's traversal mode. See :mod:`token_traveler.engine` for the entry
point.
"""

from token_traveler.config import TravelerConfig
from token_traveler.engine import TravelerEngine, TravelResult
from token_traveler.scene import Scene
from token_traveler.types import Outcome, TraversalMode

__all__ = [
    "Outcome",
    "Scene",
    "TravelResult",
    "TravelerConfig",
    "TravelerEngine",
    "TraversalMode",
]
