import colorsys
import random
from functools import lru_cache
from typing import List, Optional, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from token_traveler.descriptor import DEFAULT_KEYWORD, parse_descriptor
from token_traveler.scene import Scene
from token_traveler.types import ContextID, EntityID, Subtype


DEFAULT_RESOLUTION = 640
BACKGROUND = (48, 48, 48, 255)
TOKEN_COLOR = (235, 235, 235, 255)
LABEL_COLOR = (255, 255, 255, 255)

UInt8Array = npt.NDArray[np.uint8]


@lru_cache(maxsize=2048)
def group_to_color(group: str) -> Tuple[int, int, int]:
    """
    Deterministically map a group name to an RGB color.
    """
    rng = random.Random(group)
    h = rng.random()
    s = 0.6 + 0.3 * rng.random()
    v = 0.7 + 0.25 * rng.random()
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return int(r * 255), int(g * 255), int(b * 255)


def _graphics_in(scene: Scene, context_id: ContextID) -> List[EntityID]:
    return [eid for eid in scene.entity_ids() if scene.context_of(eid) == context_id]


def _extent(scene: Scene, eids: List[EntityID]) -> Tuple[float, float]:
    width, height = 1.0, 1.0
    for eid in eids:
        pos = scene.position.get(eid)
        size = scene.size.get(eid)
        if pos is None:
            continue
        half_w = size.width / 2 if size else 0
        half_h = size.height / 2 if size else 0
        width = max(width, pos.x + half_w)
        height = max(height, pos.y + half_h)
    return width, height


def render_context(
    scene: Scene,
    context_id: ContextID,
    resolution: int = DEFAULT_RESOLUTION,
    keyword: str = DEFAULT_KEYWORD,
) -> Image.Image:
    """
    Render one context as a PIL Image whose longer side is ``resolution`` pixels.

    Raises:
        ValueError: If ``context_id`` is not a context of ``scene``.
    """
    if context_id not in scene.context_name:
        raise ValueError(f"Unknown context: {context_id!r}")
    if resolution <= 0:
        raise ValueError("resolution must be positive")

    eids = _graphics_in(scene, context_id)
    extent_w, extent_h = _extent(scene, eids)
    scale = resolution / max(extent_w, extent_h)
    img = Image.new(
        "RGBA",
        (max(1, round(extent_w * scale)), max(1, round(extent_h * scale))),
        BACKGROUND,
    )
    draw = ImageDraw.Draw(img)

    markers: List[EntityID] = []
    tokens: List[EntityID] = []
    for eid in eids:
        if parse_descriptor(scene.name_of(eid), keyword).is_portal:
            markers.append(eid)
        elif scene.graphic[eid].subtype == Subtype.TOKEN:
            tokens.append(eid)

    # Zones under tokens
    for eid in markers:
        pos, size = scene.position.get(eid), scene.size.get(eid)
        if pos is None or size is None:
            continue
        descriptor = parse_descriptor(scene.name_of(eid), keyword)
        color = group_to_color(descriptor.group)
        box = (
            (pos.x - size.width / 2) * scale,
            (pos.y - size.height / 2) * scale,
            (pos.x + size.width / 2) * scale,
            (pos.y + size.height / 2) * scale,
        )
        draw.rectangle(box, outline=color + (255,), fill=color + (64,), width=2)
        draw.text(
            (box[0] + 3, box[1] + 2),
            f"{descriptor.node_id} {descriptor.mode}",
            fill=LABEL_COLOR,
        )

    for eid in tokens:
        pos, size = scene.position.get(eid), scene.size.get(eid)
        if pos is None:
            continue
        radius = max(2.0, (size.width if size else 0) * scale * 0.3)
        cx, cy = pos.x * scale, pos.y * scale
        draw.ellipse((cx - radius, cy - radius, cx + radius, cy + radius), fill=TOKEN_COLOR)

    return img


def render_context_array(
    scene: Scene,
    context_id: ContextID,
    resolution: int = DEFAULT_RESOLUTION,
    keyword: str = DEFAULT_KEYWORD,
) -> UInt8Array:
    """
    Same as :func:`render_context` but as an ``(H, W, 4)`` uint8 array.
    """
    return np.asarray(render_context(scene, context_id, resolution, keyword), dtype=np.uint8)


class ZoneRenderer:
    resolution: int
    keyword: str

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        keyword: Optional[str] = None,
    ):
        self.resolution = resolution
        self.keyword = keyword or DEFAULT_KEYWORD

    def render(self, scene: Scene, context_id: ContextID) -> Image.Image:
        return render_context(scene, context_id, self.resolution, self.keyword)
