"""Axis-aligned rectangle tests.

Portal zones are centered rectangles. Containment is strict on every bound:
a point lying exactly on an edge is outside.
"""

from token_traveler.components import Position, Size


def contains(point: Position, center: Position, size: Size) -> bool:
    """Return True if ``point`` lies strictly inside the rectangle."""
    half_w = size.width / 2
    half_h = size.height / 2
    in_x = center.x - half_w < point.x < center.x + half_w
    in_y = center.y - half_h < point.y < center.y + half_h
    return in_x and in_y
