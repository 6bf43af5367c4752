"""Host adapter boundary.

The engine reads the scene and applies moves only through :class:`Host`. A
real virtual-tabletop integration implements this protocol over its API;
:class:`SceneHost` implements it over an immutable
:class:`token_traveler.scene.Scene` and is what tests and offline tools use.
"""

from typing import Any, Dict, List, MutableMapping, Optional, Protocol

from token_traveler.components import Position
from token_traveler.levels.graphic_spec import GraphicSpec
from token_traveler.scene import Scene
from token_traveler.systems.relocation import CloneError
from token_traveler.types import ContextID, EntityID, ViewerID
from token_traveler.utils import scene as scene_ops


class Host(Protocol):
    persistent: MutableMapping[str, Any]

    @property
    def scene(self) -> Scene: ...

    def controllers(self, entity_id: EntityID) -> List[ViewerID]: ...

    def context_name(self, context_id: ContextID) -> str: ...

    def set_position(self, entity_id: EntityID, position: Position) -> None: ...

    def create_graphic(
        self, spec: GraphicSpec, context_id: ContextID, position: Position
    ) -> EntityID: ...

    def remove_graphic(self, entity_id: EntityID) -> None: ...


class SceneHost:
    """In-memory host holding the current :class:`Scene` snapshot.

    Attributes:
        persistent: Stand-in for the host's persistent mapping; handed to
            :class:`token_traveler.store.TravelerStore`.
    """

    def __init__(
        self, scene: Scene, persistent: Optional[Dict[str, Any]] = None
    ) -> None:
        self._scene = scene
        self.persistent: MutableMapping[str, Any] = {} if persistent is None else persistent

    @property
    def scene(self) -> Scene:
        return self._scene

    def controllers(self, entity_id: EntityID) -> List[ViewerID]:
        return scene_ops.controllers_of(self._scene, entity_id)

    def context_name(self, context_id: ContextID) -> str:
        return self._scene.context_name.get(context_id, context_id)

    def set_position(self, entity_id: EntityID, position: Position) -> None:
        self._scene = scene_ops.set_position(self._scene, entity_id, position)

    def create_graphic(
        self, spec: GraphicSpec, context_id: ContextID, position: Position
    ) -> EntityID:
        try:
            self._scene, entity_id = scene_ops.add_graphic(
                self._scene, spec, context_id, position
            )
        except ValueError as exc:
            raise CloneError(str(exc)) from exc
        return entity_id

    def remove_graphic(self, entity_id: EntityID) -> None:
        self._scene = scene_ops.remove_graphic(self._scene, entity_id)
