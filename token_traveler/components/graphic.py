from dataclasses import dataclass

from token_traveler.types import Subtype


@dataclass(frozen=True)
class Graphic:
    """Marker for placed graphics; ``subtype`` separates tokens from cards."""

    subtype: Subtype = Subtype.TOKEN
