"""Measured glyph sizes, keyed by layout index.

The host measures each glyph after it has been laid out once and
reports the sizes back, possibly over several rounds (fonts loading,
for example). Every report replaces the registry contents wholesale.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import structlog

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Size:
    """Width and height of one glyph, in the same units as the radius."""

    width: float
    height: float


# Placeholder for glyphs that have not been measured yet. The width is
# huge compared to any sensible radius so provisional glyphs land far
# apart instead of piling up; the zero height keeps their radial offset
# at the nominal radius for every alignment.
SENTINEL_SIZE = Size(width=1_000_000.0, height=0.0)


class SizeRegistry:
    """Last-known glyph sizes with a sentinel fallback."""

    def __init__(self, sizes: Mapping[int, Size] | Sequence[Size] | None = None) -> None:
        self._sizes: dict[int, Size] = {}
        if sizes is not None:
            self.replace(sizes)

    def __len__(self) -> int:
        return len(self._sizes)

    def __contains__(self, layout_index: object) -> bool:
        return layout_index in self._sizes

    def replace(self, sizes: Mapping[int, Size] | Sequence[Size]) -> None:
        """Replace all known sizes with a new measurement set.

        Args:
            sizes: Either a mapping of layout index to Size, or a sequence
                of sizes in layout order.
        """
        if isinstance(sizes, Mapping):
            self._sizes = dict(sizes)
        else:
            self._sizes = dict(enumerate(sizes))
        logger.debug("sizes_replaced", measured=len(self._sizes))

    def clear(self) -> None:
        self._sizes = {}

    def size(self, layout_index: int) -> Size:
        """Size at a layout index, or SENTINEL_SIZE if not measured."""
        return self._sizes.get(layout_index, SENTINEL_SIZE)

    def widths(self, count: int) -> list[float]:
        """Widths for layout indices 0..count-1, sentinel-filled."""
        return [self.size(i).width for i in range(count)]

    def snapshot(self) -> dict[int, Size]:
        return dict(self._sizes)
