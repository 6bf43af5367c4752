"""token_traveler.components
==========================

Aggregate import surface for the component dataclasses stored on a
:class:`token_traveler.scene.Scene`.

Every graphic placed in a scene (portal markers and tokens alike) is an entity
id plus some of these components::

    from token_traveler.components import Label, Position, Size

All components are frozen ``@dataclass`` value objects with no behavior; the
systems in :mod:`token_traveler.systems` read them and produce new scenes.
"""

from .appearance import Appearance
from .context import Context
from .control import Control, Template
from .graphic import Graphic
from .label import Label
from .position import Position
from .size import Size

__all__ = [
    "Appearance",
    "Context",
    "Control",
    "Graphic",
    "Label",
    "Position",
    "Size",
    "Template",
]
