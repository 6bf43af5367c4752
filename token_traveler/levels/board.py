from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from token_traveler.components import Template
from token_traveler.types import ContextID, Point, TemplateID, ViewerID
from .graphic_spec import GraphicSpec


@dataclass
class Placement:
    context_id: ContextID
    point: Point
    spec: GraphicSpec


@dataclass
class Board:
    """
    Authoring-time description of a set of contexts and the graphics on them.
    - `placements` keeps insertion order; conversion assigns entity ids in that
      order, which becomes the marker enumeration order of the scene.
    - This module is Scene-agnostic. Use `levels.convert.to_scene` / `from_scene`
      to bridge between Board and the immutable Scene.
    """

    seed: Optional[int] = None
    contexts: Dict[ContextID, str] = field(default_factory=dict)
    templates: Dict[TemplateID, Template] = field(default_factory=dict)
    placements: List[Placement] = field(default_factory=list)

    # -------- Editing API (purely authoring-time) --------

    def add_context(self, context_id: ContextID, name: str = "") -> None:
        """
        Register a context (page/map). The display name defaults to the id.
        """
        self.contexts[context_id] = name or context_id

    def add_template(
        self, template_id: TemplateID, name: str, controlled_by: Sequence[ViewerID] = ()
    ) -> None:
        self.templates[template_id] = Template(name, tuple(controlled_by))

    def add(self, context_id: ContextID, point: Point, spec: GraphicSpec) -> None:
        """
        Place a GraphicSpec centered at point (x, y) on a registered context.
        """
        self._check_context(context_id)
        self.placements.append(Placement(context_id, point, spec))

    def add_many(self, items: List[Tuple[ContextID, Point, GraphicSpec]]) -> None:
        for context_id, point, spec in items:
            self.add(context_id, point, spec)

    def remove(self, spec: GraphicSpec) -> bool:
        """
        Remove a specific GraphicSpec (by identity).
        Returns True if it was found and removed, False otherwise.
        """
        for i, placement in enumerate(self.placements):
            if placement.spec is spec:
                del self.placements[i]
                return True
        return False

    def specs_on(self, context_id: ContextID) -> List[GraphicSpec]:
        return [p.spec for p in self.placements if p.context_id == context_id]

    # -------- Internal helpers --------

    def _check_context(self, context_id: ContextID) -> None:
        if context_id not in self.contexts:
            raise KeyError(f"Unknown context: {context_id!r}")
