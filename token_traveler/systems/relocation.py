"""Entity relocation.

Moving within a context updates the position in place. Moving to another
context asks the host to construct a clone there and only then removes the
source, so a failed construction never loses the entity. The clone has a new
identity; callers must continue with :attr:`Relocation.entity_id`.
"""

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from token_traveler.components import Appearance, Label, Position
from token_traveler.config import TravelerConfig
from token_traveler.levels.graphic_spec import GraphicSpec
from token_traveler.scene import Scene
from token_traveler.systems.graph import Node
from token_traveler.types import ContextID, EntityID

if TYPE_CHECKING:
    from token_traveler.host import Host

logger = logging.getLogger(__name__)


class CloneError(Exception):
    """The host could not construct the entity in the destination context."""


@dataclass(frozen=True)
class Relocation:
    """Applied move.

    Attributes:
        entity_id: Identity after the move (a new id for cross-context moves).
        source_id: Identity before the move.
        cross_context: True if the entity was cloned into another context.
        context_id: Destination context.
        position: Destination coordinates.
    """

    entity_id: EntityID
    source_id: EntityID
    cross_context: bool
    context_id: ContextID
    position: Position


def carry_attributes(
    scene: Scene, entity_id: EntityID, config: TravelerConfig
) -> GraphicSpec:
    """Blueprint of ``entity_id`` without identity, context or ordering.

    A missing image falls back to the configured placeholder and an empty name
    to ``config.unnamed_name``.
    """
    source_name = scene.name_of(entity_id)
    appearance = scene.appearance.get(entity_id) or Appearance()
    if not appearance.imgsrc:
        appearance = replace(appearance, imgsrc=config.placeholder_imgsrc)
    return GraphicSpec(
        graphic=scene.graphic[entity_id],
        label=Label(source_name or config.unnamed_name),
        size=scene.size.get(entity_id),
        appearance=appearance,
        control=scene.control.get(entity_id),
    )


def relocate(
    host: "Host", entity_id: EntityID, destination: Node, config: TravelerConfig
) -> Relocation:
    """Move ``entity_id`` onto ``destination``.

    Raises:
        CloneError: Cross-context construction failed; the source is untouched.
    """
    scene = host.scene
    source_context = scene.context_of(entity_id)

    if destination.context_id == source_context:
        host.set_position(entity_id, destination.position)
        return Relocation(
            entity_id=entity_id,
            source_id=entity_id,
            cross_context=False,
            context_id=destination.context_id,
            position=destination.position,
        )

    spec = carry_attributes(scene, entity_id, config)
    new_id = host.create_graphic(spec, destination.context_id, destination.position)
    host.remove_graphic(entity_id)
    logger.debug(
        "Cloned entity %s as %s into context %s", entity_id, new_id, destination.context_id
    )
    return Relocation(
        entity_id=new_id,
        source_id=entity_id,
        cross_context=True,
        context_id=destination.context_id,
        position=destination.position,
    )
