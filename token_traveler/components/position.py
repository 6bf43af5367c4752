"""Position component.

Center coordinates of a graphic in its context, in host pixels. The anchor
point of a token (the point tested against portal zones) is its position.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Scene coordinate.

    Attributes:
        x: Horizontal center (0 at left).
        y: Vertical center (0 at top).
    """

    x: float
    y: float
