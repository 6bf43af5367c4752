from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict

from pyrsistent import pmap

from token_traveler.components import Context, Position
from token_traveler.entity import entity_id_generator
from token_traveler.scene import Scene
from token_traveler.types import EntityID
from .board import Board
from .graphic_spec import GraphicSpec, COMPONENT_TO_FIELD


def _init_store_maps() -> Dict[str, Dict[EntityID, Any]]:
    """
    Initialize mutable component-store maps mirroring Scene; converted to pmaps later.
    """
    stores: Dict[str, Dict[EntityID, Any]] = {
        field: {} for field in COMPONENT_TO_FIELD.values()
    }
    stores["position"] = {}
    stores["context"] = {}
    return stores


def to_scene(board: Board) -> Scene:
    """
    Convert a Board into an immutable Scene.

    Entity ids are assigned from 0 in placement order.
    """
    stores = _init_store_maps()
    ids = entity_id_generator()
    for placement in board.placements:
        eid = next(ids)
        for component in placement.spec.components():
            stores[COMPONENT_TO_FIELD[type(component)]][eid] = component
        x, y = placement.point
        stores["position"][eid] = Position(x, y)
        stores["context"][eid] = Context(placement.context_id)

    scene = Scene(
        context_name=pmap(board.contexts),
        template=pmap(board.templates),
        seed=board.seed,
    )
    return replace(scene, **{field: pmap(store) for field, store in stores.items()})


def from_scene(scene: Scene) -> Board:
    """
    Convert a Scene back into an authoring Board.

    Placements come out in entity id order, so `to_scene(from_scene(s))`
    preserves the marker enumeration order (ids are renumbered from 0).
    Graphics without a Position or Context are skipped.
    """
    board = Board(
        seed=scene.seed,
        contexts=dict(scene.context_name),
        templates=dict(scene.template),
    )
    for eid in scene.entity_ids():
        position = scene.position.get(eid)
        context_id = scene.context_of(eid)
        if position is None or context_id is None:
            continue
        spec = GraphicSpec(
            graphic=scene.graphic[eid],
            label=scene.label.get(eid),
            size=scene.size.get(eid),
            appearance=scene.appearance.get(eid),
            control=scene.control.get(eid),
        )
        board.add(context_id, (position.x, position.y), spec)
    return board
