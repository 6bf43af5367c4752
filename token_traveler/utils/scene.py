"""Pure scene mutations and queries.

Mutations take a :class:`token_traveler.scene.Scene` and return a new one;
nothing is changed in place. :class:`token_traveler.host.SceneHost`
applies these to keep its snapshot current.
"""

from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple

from pyrsistent.typing import PMap

from token_traveler.components import Context, Position
from token_traveler.entity import next_entity_id
from token_traveler.levels.graphic_spec import GraphicSpec, COMPONENT_TO_FIELD
from token_traveler.scene import Scene
from token_traveler.types import ContextID, EntityID, ViewerID


def set_position(scene: Scene, entity_id: EntityID, position: Position) -> Scene:
    if entity_id not in scene.graphic:
        return scene
    return replace(scene, position=scene.position.set(entity_id, position))


def add_graphic(
    scene: Scene,
    spec: GraphicSpec,
    context_id: ContextID,
    position: Position,
    entity_id: Optional[EntityID] = None,
) -> Tuple[Scene, EntityID]:
    """Place a graphic built from ``spec`` and return the new scene and its id.

    Raises:
        ValueError: If ``context_id`` is not a known context.
    """
    if context_id not in scene.context_name:
        raise ValueError(f"Unknown context: {context_id!r}")
    eid = next_entity_id(scene.graphic.keys()) if entity_id is None else entity_id
    updates: Dict[str, Any] = {
        "position": scene.position.set(eid, position),
        "context": scene.context.set(eid, Context(context_id)),
    }
    for component in spec.components():
        field = COMPONENT_TO_FIELD[type(component)]
        store: PMap[EntityID, Any] = getattr(scene, field)
        updates[field] = store.set(eid, component)
    return replace(scene, **updates), eid


def remove_graphic(scene: Scene, entity_id: EntityID) -> Scene:
    """Drop ``entity_id`` from every component store."""
    updates: Dict[str, Any] = {}
    for field in (*COMPONENT_TO_FIELD.values(), "position", "context"):
        store: PMap[EntityID, Any] = getattr(scene, field)
        if entity_id in store:
            updates[field] = store.remove(entity_id)
    return replace(scene, **updates) if updates else scene


def add_context(scene: Scene, context_id: ContextID, name: str = "") -> Scene:
    return replace(scene, context_name=scene.context_name.set(context_id, name or context_id))


def controllers_of(scene: Scene, entity_id: EntityID) -> List[ViewerID]:
    """Direct controllers plus the represented template's, de-duplicated.

    Declaration order is kept, direct controllers first.
    """
    control = scene.control.get(entity_id)
    if control is None:
        return []
    viewers: List[ViewerID] = list(control.controlled_by)
    if control.represents is not None:
        template = scene.template.get(control.represents)
        if template is not None:
            viewers.extend(template.controlled_by)
    return list(dict.fromkeys(v for v in viewers if v))

