from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Type

from token_traveler.components import Appearance, Control, Graphic, Label, Size

# Map component class -> Scene store name (used by convert.py and utils.scene)
COMPONENT_TO_FIELD: Dict[Type[Any], str] = {
    Graphic: "graphic",
    Label: "label",
    Size: "size",
    Appearance: "appearance",
    Control: "control",
}


@dataclass
class GraphicSpec:
    """
    Authoring-time blueprint of a graphic: the components it carries, minus
    the ones that depend on placement (Position, Context).

    Also used by the relocation executor to describe the clone it asks the host
    to construct in a destination context.
    """

    graphic: Graphic = Graphic()
    label: Optional[Label] = None
    size: Optional[Size] = None
    appearance: Optional[Appearance] = None
    control: Optional[Control] = None

    def components(self) -> Iterator[Any]:
        """Yield each present component."""
        for field in COMPONENT_TO_FIELD.values():
            value = getattr(self, field)
            if value is not None:
                yield value

    @property
    def name(self) -> str:
        return self.label.name if self.label is not None else ""
