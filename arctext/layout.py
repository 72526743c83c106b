"""Arc placement of glyphs.

Given per-glyph sizes and a layout configuration, computes for each
glyph its angle around the circle center and its radial offset.

Angle algorithm (radius r, spacing s, advance a, widths w_0..w_{N-1}
in layout order):

    angle(i) = (sum(w_j for j < i) + w_i / 2 - sum(w) / 2) / r
               + (s / r) * (i - (N - 1) / 2)
               + a

The width terms center the block of glyphs on angle 0 and put each
glyph's midpoint on its slot. The spacing terms add gaps between
neighbours and center those gaps too, so the block stays symmetric.
The same formula serves both directions; counterclockwise text is
handled by reversing the glyph order and mirroring each glyph.

Angles are in radians. Angle 0 points up from the circle center and
positive angles turn clockwise (screen coordinates, y grows downward).
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

import structlog

from .glyphs import Alignment, Direction, Glyph, sequence_glyphs
from .sizes import Size, SizeRegistry

logger = structlog.get_logger(__name__)

GlyphStyler = Callable[[Glyph], Any]


def _identity(glyph: Glyph) -> Glyph:
    return glyph


@dataclass(frozen=True)
class LayoutConfig:
    """Layout options supplied by the host.

    Attributes:
        radius: Nominal radius of the arc. Must be > 0.
        alignment: Glyph position relative to the radius.
        direction: Traversal direction.
        spacing: Extra linear gap between adjacent glyphs (>= 0).
        advance: Global rotation offset in radians.
    """

    radius: float
    alignment: Alignment = Alignment.CENTER
    direction: Direction = Direction.CLOCKWISE
    spacing: float = 0.0
    advance: float = 0.0

    def with_spacing(self, spacing: float) -> LayoutConfig:
        return replace(self, spacing=spacing)

    def with_advance(self, radians: float) -> LayoutConfig:
        return replace(self, advance=radians)


@dataclass(frozen=True)
class GlyphPlacement:
    """Where and how to draw one glyph.

    Attributes:
        glyph: The glyph being placed.
        layout_index: Position in traversal order.
        size: Size used for the computation (may be the sentinel).
        angle: Rotation around the circle center, in radians.
        radial_offset: Distance from the center to the glyph's center.
        scale: Mirroring applied to the glyph about its own center.
        styled: Output of the styler hook for this glyph.
    """

    glyph: Glyph
    layout_index: int
    size: Size
    angle: float
    radial_offset: float
    scale: tuple[float, float]
    styled: Any = None

    @property
    def position(self) -> tuple[float, float]:
        """Glyph center relative to the circle center.

        Equivalent to moving the glyph up by its radial offset and then
        rotating it about the center by its angle.
        """
        return (
            self.radial_offset * math.sin(self.angle),
            -self.radial_offset * math.cos(self.angle),
        )


@dataclass(frozen=True)
class LayoutResult:
    """All placements for one text and configuration, in layout order."""

    placements: tuple[GlyphPlacement, ...] = ()
    scale: tuple[float, float] = (1.0, 1.0)
    frame_size: tuple[float, float] = (0.0, 0.0)

    def __len__(self) -> int:
        return len(self.placements)

    def by_storage_index(self) -> dict[int, GlyphPlacement]:
        return {p.glyph.index: p for p in self.placements}


def radial_offset(alignment: Alignment, radius: float, size: Size) -> float:
    """Distance from the circle center at which a glyph is drawn."""
    if alignment is Alignment.INSIDE:
        return radius - size.height / 2
    if alignment is Alignment.CENTER:
        return radius
    if alignment is Alignment.OUTSIDE:
        return radius + size.height / 2
    raise ValueError(f"Unhandled alignment: {alignment!r}")


def orientation_scale(direction: Direction) -> tuple[float, float]:
    """Scale applied to every glyph so text stays readable.

    Counterclockwise text is mirrored about each glyph's center, which
    together with the reversed glyph order keeps it upright.
    """
    if direction is Direction.CLOCKWISE:
        return (1.0, 1.0)
    if direction is Direction.COUNTERCLOCKWISE:
        return (-1.0, -1.0)
    raise ValueError(f"Unhandled direction: {direction!r}")


def compute_angles(
    widths: Sequence[float],
    radius: float,
    spacing: float = 0.0,
    advance: float = 0.0,
) -> list[float]:
    """Compute the angle of each glyph on the arc.

    Args:
        widths: Glyph widths in layout order.
        radius: Nominal arc radius.
        spacing: Extra linear gap between adjacent glyphs.
        advance: Global rotation offset in radians.

    Returns:
        One angle (radians) per width, in layout order. Empty if widths
        is empty. A non-positive radius puts every glyph at advance.
    """
    count = len(widths)
    if count == 0:
        return []

    if radius <= 0:
        logger.warning("degenerate_radius", radius=radius, glyph_count=count)
        return [advance] * count

    arc_spacing = spacing / radius
    total_arc = sum(widths) / radius
    centering = -total_arc / 2
    spacing_centering = -arc_spacing * (count - 1) / 2

    angles: list[float] = []
    prev_width = 0.0
    for i, width in enumerate(widths):
        prev_arc = prev_width / radius
        char_offset = width / 2 / radius
        prev_spacing = arc_spacing * i
        angles.append(
            prev_arc + char_offset + centering + spacing_centering + prev_spacing + advance
        )
        prev_width += width

    return angles


def compute_layout(
    text: str,
    config: LayoutConfig,
    sizes: SizeRegistry | Mapping[int, Size] | Sequence[Size] | None = None,
    styler: GlyphStyler | None = None,
) -> LayoutResult:
    """Lay out text along an arc.

    Args:
        text: Text to place.
        config: Layout configuration.
        sizes: Measured sizes keyed by layout index (a registry, a
            mapping or a sequence in layout order). Unmeasured glyphs
            use the sentinel size.
        styler: Hook applied to each glyph; its result is passed through
            untouched in GlyphPlacement.styled.

    Returns:
        LayoutResult with one placement per character.
    """
    registry = sizes if isinstance(sizes, SizeRegistry) else SizeRegistry(sizes)
    style = styler or _identity

    glyphs = sequence_glyphs(text, config.direction)
    scale = orientation_scale(config.direction)
    frame = (config.radius * 2, config.radius * 2)
    if not glyphs:
        return LayoutResult(placements=(), scale=scale, frame_size=frame)

    angles = compute_angles(
        registry.widths(len(glyphs)),
        config.radius,
        config.spacing,
        config.advance,
    )

    placements = []
    for layout_index, (glyph, angle) in enumerate(zip(glyphs, angles)):
        size = registry.size(layout_index)
        placements.append(
            GlyphPlacement(
                glyph=glyph,
                layout_index=layout_index,
                size=size,
                angle=angle,
                radial_offset=radial_offset(config.alignment, config.radius, size),
                scale=scale,
                styled=style(glyph),
            )
        )

    logger.debug(
        "layout_computed",
        glyph_count=len(placements),
        measured=sum(1 for i in range(len(glyphs)) if i in registry),
        direction=config.direction.value,
        alignment=config.alignment.value,
    )

    return LayoutResult(placements=tuple(placements), scale=scale, frame_size=frame)


@dataclass
class ArcTextLayout:
    """Coordinating context for one piece of arc text.

    Owns the text, configuration and size registry. Measurements are
    pushed in with set_sizes(); recompute() then produces a fresh
    LayoutResult. Nothing is recomputed implicitly.
    """

    text: str
    config: LayoutConfig
    styler: GlyphStyler | None = None
    registry: SizeRegistry = field(default_factory=SizeRegistry)

    @property
    def glyphs(self) -> tuple[Glyph, ...]:
        return sequence_glyphs(self.text, self.config.direction)

    def set_sizes(self, sizes: Mapping[int, Size] | Sequence[Size]) -> None:
        """Replace the known sizes with a new measurement report."""
        self.registry.replace(sizes)

    def set_text(self, text: str) -> None:
        """Switch to a new text. Previous measurements are dropped."""
        if text != self.text:
            self.text = text
            self.registry.clear()

    def set_config(self, config: LayoutConfig) -> None:
        """Switch configuration.

        Measurements are keyed by layout index, so a direction change
        invalidates them.
        """
        if config.direction is not self.config.direction:
            self.registry.clear()
        self.config = config

    def recompute(self) -> LayoutResult:
        return compute_layout(self.text, self.config, self.registry, self.styler)
