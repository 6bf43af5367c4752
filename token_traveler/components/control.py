"""Control components.

A token may be controlled directly by viewers and may also represent a
template (a character sheet) with its own controller list. The camera-follow
collaborator needs the union of both, see
:func:`token_traveler.utils.scene.controllers_of`.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from token_traveler.types import TemplateID, ViewerID


@dataclass(frozen=True)
class Control:
    """Who controls a graphic.

    Attributes:
        controlled_by: Viewer ids with direct control, in declaration order.
        represents: Template the graphic stands for, if any.
    """

    controlled_by: Tuple[ViewerID, ...] = ()
    represents: Optional[TemplateID] = None


@dataclass(frozen=True)
class Template:
    """Represented template (character) with its own controllers."""

    name: str
    controlled_by: Tuple[ViewerID, ...] = ()
