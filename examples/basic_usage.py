#!/usr/bin/env python3
"""Basic usage example for arctext.

Lays out three pieces of text on circles: clockwise on the inside of
the rim, counterclockwise rotated half a turn, and centered on the rim
with an advance. Sizes are faked with a fixed-width "font".

Usage:
    python examples/basic_usage.py
"""

import math
import os
import sys

# Add parent directory to path for direct script execution
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from arctext import Alignment, ArcTextLayout, Direction, LayoutConfig, Size


def measure(layout: ArcTextLayout) -> list[Size]:
    """Pretend to be the host: measure glyphs in layout order."""
    return [Size(width=6.0 if g.char != " " else 3.0, height=12.0) for g in layout.glyphs]


def print_layout(layout: ArcTextLayout) -> None:
    result = layout.recompute()
    print(f"  Frame:  {result.frame_size[0]:.0f} x {result.frame_size[1]:.0f}")
    print(f"  Scale:  {result.scale}")
    for p in result.placements:
        x, y = p.position
        print(
            f"    [{p.layout_index:2d}] {p.glyph.char!r:5s} "
            f"angle={math.degrees(p.angle):8.2f} deg  "
            f"offset={p.radial_offset:6.2f}  pos=({x:7.2f}, {y:7.2f})"
        )


def example_clockwise_inside():
    print("=" * 60)
    print("Example 1: Clockwise, inside the rim")
    print("=" * 60)

    layout = ArcTextLayout(
        text="Clockwize",
        config=LayoutConfig(radius=75, alignment=Alignment.INSIDE),
    )
    # First pass: nothing measured yet, every glyph uses the sentinel size
    provisional = layout.recompute()
    print(f"  Provisional first angle: {provisional.placements[0].angle:.6f} rad")

    layout.set_sizes(measure(layout))
    print_layout(layout)
    print()


def example_counterclockwise():
    print("=" * 60)
    print("Example 2: Counterclockwise, advanced by pi")
    print("=" * 60)

    config = LayoutConfig(
        radius=75,
        alignment=Alignment.INSIDE,
        direction=Direction.COUNTERCLOCKWISE,
    ).with_advance(math.pi)
    layout = ArcTextLayout(text="Counter Clockwise", config=config)
    layout.set_sizes(measure(layout))
    print_layout(layout)
    print()


def example_spacing_and_styler():
    print("=" * 60)
    print("Example 3: Centered, spaced, styled")
    print("=" * 60)

    layout = ArcTextLayout(
        text="advanced",
        config=LayoutConfig(radius=50).with_spacing(2.0).with_advance(3.14159),
        styler=lambda g: f"<tspan font-weight='bold'>{g.char}</tspan>",
    )
    layout.set_sizes(measure(layout))
    print_layout(layout)
    print(f"  Styled: {layout.recompute().placements[0].styled}")
    print()


if __name__ == "__main__":
    example_clockwise_inside()
    example_counterclockwise()
    example_spacing_and_styler()
    print("All examples completed successfully.")
