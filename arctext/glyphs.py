"""Glyph sequencing for arc layout.

A text value is split into single-character glyphs, each tagged with
its storage index (position in the original left-to-right string).
The traversal direction decides the order in which glyphs are laid
out along the arc:

- clockwise: natural order, layout index == storage index
- counterclockwise: reversed order, layout index == N - storage index - 1
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Alignment(Enum):
    """Where glyphs sit relative to the nominal radius."""

    INSIDE = "inside"
    CENTER = "center"
    OUTSIDE = "outside"


class Direction(Enum):
    """Rotational sense in which the text is traversed."""

    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"


@dataclass(frozen=True)
class Glyph:
    """One character of the input text.

    Attributes:
        index: Storage index in the original left-to-right string.
        char: The character itself.
    """

    index: int
    char: str


def parse_alignment(name: str) -> Alignment:
    """Look up an alignment by its name (case-insensitive).

    Raises:
        ValueError: If name is not a known alignment.
    """
    try:
        return Alignment(name.lower())
    except ValueError:
        valid = ", ".join(a.value for a in Alignment)
        raise ValueError(f"Unknown alignment '{name}'. Valid alignments: {valid}") from None


def parse_direction(name: str) -> Direction:
    """Look up a direction by its name (case-insensitive).

    Raises:
        ValueError: If name is not a known direction.
    """
    try:
        return Direction(name.lower())
    except ValueError:
        valid = ", ".join(d.value for d in Direction)
        raise ValueError(f"Unknown direction '{name}'. Valid directions: {valid}") from None


def sequence_glyphs(text: str, direction: Direction) -> tuple[Glyph, ...]:
    """Split text into glyphs ordered for traversal.

    Args:
        text: Input text. May be empty.
        direction: Traversal direction.

    Returns:
        Glyphs in layout order. Each keeps its original storage index.
    """
    glyphs = tuple(Glyph(index=i, char=c) for i, c in enumerate(text))
    if direction is Direction.CLOCKWISE:
        return glyphs
    if direction is Direction.COUNTERCLOCKWISE:
        return glyphs[::-1]
    raise ValueError(f"Unhandled direction: {direction!r}")


def storage_index(layout_index: int, count: int, direction: Direction) -> int:
    """Map a layout index to the storage index of the glyph placed there.

    The counterclockwise mapping is its own inverse, so the same call
    also maps a storage index back to its layout index.
    """
    if direction is Direction.CLOCKWISE:
        return layout_index
    if direction is Direction.COUNTERCLOCKWISE:
        return count - layout_index - 1
    raise ValueError(f"Unhandled direction: {direction!r}")
