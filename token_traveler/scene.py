"""Immutable scene snapshot.

:class:`Scene` holds every graphic across every context the host knows
about. Portal groups may span contexts, so a single snapshot covers all of
them; the trigger detector narrows spatial tests to the token's own context.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the graphic lacks that component.
* A graphic exists in the scene iff it has a ``graphic`` entry; removal drops
    the id from every store (see :func:`token_traveler.utils.scene.remove_graphic`).
* Snapshots are never cached across trigger evaluations: the host may rename
    or move markers between events, so every evaluation reads a fresh one.
"""

from dataclasses import dataclass
from typing import Any, List, Optional
from pyrsistent import PMap, pmap

from token_traveler.components import (
    Appearance,
    Context,
    Control,
    Graphic,
    Label,
    Position,
    Size,
    Template,
)
from token_traveler.types import ContextID, EntityID, TemplateID


@dataclass(frozen=True)
class Scene:
    """Immutable world snapshot.

    Attributes:
        graphic (PMap[EntityID, Graphic]): Registry of placed graphics and their subtype.
        label (PMap[EntityID, Label]): Display names.
        position (PMap[EntityID, Position]): Center coordinates.
        size (PMap[EntityID, Size]): Bounding box extents.
        appearance (PMap[EntityID, Appearance]): Image reference and layer.
        context (PMap[EntityID, Context]): Owning context of each graphic.
        control (PMap[EntityID, Control]): Controllers and represented template.
        context_name (PMap[ContextID, str]): Known contexts and their display names.
        template (PMap[TemplateID, Template]): Represented templates.
        seed (int | None): Seed for the random traversal mode.
    """

    # Components
    graphic: PMap[EntityID, Graphic] = pmap()
    label: PMap[EntityID, Label] = pmap()
    position: PMap[EntityID, Position] = pmap()
    size: PMap[EntityID, Size] = pmap()
    appearance: PMap[EntityID, Appearance] = pmap()
    context: PMap[EntityID, Context] = pmap()
    control: PMap[EntityID, Control] = pmap()

    # Registries
    context_name: PMap[ContextID, str] = pmap()
    template: PMap[TemplateID, Template] = pmap()

    # RNG
    seed: Optional[int] = None

    def name_of(self, entity_id: EntityID) -> str:
        """Return the display name of ``entity_id`` or ``""``."""
        label = self.label.get(entity_id)
        return label.name if label is not None else ""

    def context_of(self, entity_id: EntityID) -> Optional[ContextID]:
        context = self.context.get(entity_id)
        return context.context_id if context is not None else None

    def entity_ids(self) -> List[EntityID]:
        """All graphic ids in creation order."""
        return sorted(self.graphic.keys())

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields, for diagnostics."""
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, type(pmap())) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description
