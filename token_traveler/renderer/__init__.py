"""Rendering subpackage.

Debug views of a single context: portal zones outlined in a per-group color
with their node id and mode, tokens as filled discs. Useful for checking zone
overlap and group membership while authoring. Pillow draws the image; NumPy
exposes it as an array for tests and notebooks.

See :mod:`token_traveler.renderer.zones`.
"""

from .zones import ZoneRenderer, group_to_color, render_context, render_context_array

__all__ = ["ZoneRenderer", "group_to_color", "render_context", "render_context_array"]
