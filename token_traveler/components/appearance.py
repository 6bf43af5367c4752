"""Rendering appearance component.

``imgsrc`` is the host's image reference. An empty string means the graphic
has no usable image; clones fall back to the configured placeholder.
"""

from dataclasses import dataclass

from token_traveler.types import Layer


@dataclass(frozen=True)
class Appearance:
    """Visual metadata.

    Attributes:
        imgsrc: Image reference understood by the host.
        layer: Drawing layer.
    """

    imgsrc: str = ""
    layer: Layer = Layer.OBJECTS
