"""arctext -- glyph placement along a circular arc.

Computes where each character of a string sits on a circle of a given
radius: its angle around the center and its distance from the center.
Glyph sizes are supplied by the host once it has measured them; until
then a large sentinel width keeps unmeasured glyphs spread apart.

Drawing the glyphs is left to the caller. The package only produces
positions, rotations and the mirroring scale for each glyph.
"""

from .glyphs import Alignment, Direction, Glyph, sequence_glyphs, storage_index
from .layout import (
    ArcTextLayout,
    GlyphPlacement,
    LayoutConfig,
    LayoutResult,
    compute_angles,
    compute_layout,
    orientation_scale,
    radial_offset,
)
from .sizes import SENTINEL_SIZE, Size, SizeRegistry

__all__ = [
    "Alignment",
    "ArcTextLayout",
    "Direction",
    "Glyph",
    "GlyphPlacement",
    "LayoutConfig",
    "LayoutResult",
    "SENTINEL_SIZE",
    "Size",
    "SizeRegistry",
    "compute_angles",
    "compute_layout",
    "orientation_scale",
    "radial_offset",
    "sequence_glyphs",
    "storage_index",
]
