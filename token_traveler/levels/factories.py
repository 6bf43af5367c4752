"""Convenience factory functions for authoring ``GraphicSpec`` objects.

Markers are usually placed on the GM layer so players do not see them, and
tokens on the objects layer. Both are plain graphics; what makes a marker a
portal is only its name.
"""

from __future__ import annotations

from typing import Optional, Sequence

from token_traveler.components import Appearance, Control, Graphic, Label, Size
from token_traveler.descriptor import DEFAULT_KEYWORD
from token_traveler.types import Layer, Subtype, TemplateID, TraversalMode, ViewerID
from .graphic_spec import GraphicSpec


def marker_name(
    group: str,
    node_id: int,
    mode: Optional[TraversalMode | str] = None,
    keyword: str = DEFAULT_KEYWORD,
) -> str:
    """Compose ``<keyword>:<group>:<node>[:<mode>]``."""
    parts = [keyword, group, str(node_id)]
    if mode is not None:
        parts.append(str(mode))
    return ":".join(parts)


def create_marker(
    group: str,
    node_id: int,
    mode: Optional[TraversalMode | str] = None,
    size: float = 70,
    imgsrc: str = "",
    layer: Layer = Layer.GM,
    keyword: str = DEFAULT_KEYWORD,
) -> GraphicSpec:
    """Square portal marker of side ``size``."""
    return GraphicSpec(
        graphic=Graphic(Subtype.TOKEN),
        label=Label(marker_name(group, node_id, mode, keyword)),
        size=Size(size, size),
        appearance=Appearance(imgsrc=imgsrc, layer=layer),
    )


def create_token(
    name: str,
    imgsrc: str = "",
    size: float = 70,
    controlled_by: Sequence[ViewerID] = (),
    represents: Optional[TemplateID] = None,
    layer: Layer = Layer.OBJECTS,
) -> GraphicSpec:
    """Movable token, optionally controlled by viewers or representing a template."""
    return GraphicSpec(
        graphic=Graphic(Subtype.TOKEN),
        label=Label(name),
        size=Size(size, size),
        appearance=Appearance(imgsrc=imgsrc, layer=layer),
        control=Control(controlled_by=tuple(controlled_by), represents=represents),
    )


def create_card(name: str, size: float = 70) -> GraphicSpec:
    """Card graphic. Cards never travel."""
    return GraphicSpec(
        graphic=Graphic(Subtype.CARD),
        label=Label(name),
        size=Size(size, size),
        appearance=Appearance(),
    )
