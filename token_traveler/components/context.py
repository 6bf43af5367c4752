from dataclasses import dataclass

from token_traveler.types import ContextID


@dataclass(frozen=True)
class Context:
    """Owning scene context (page/map) of a graphic.

    Attributes:
        context_id: Identifier of the context container.
    """

    context_id: ContextID
