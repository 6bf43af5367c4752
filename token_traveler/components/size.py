from dataclasses import dataclass


@dataclass(frozen=True)
class Size:
    """Bounding box extent, centered on the graphic's :class:`Position`.

    Attributes:
        width: Horizontal extent.
        height: Vertical extent.
    """

    width: float
    height: float
