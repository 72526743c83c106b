"""arctext microservice -- FastAPI application.

Endpoints:
    POST /layout    -- Compute glyph placements for text on an arc
    POST /sequence  -- List glyphs in traversal order
    GET  /health    -- Health check

The service is stateless. A host that measures glyphs asynchronously
calls /layout once with no sizes, measures the provisional glyphs,
then calls /layout again with the sizes it has so far.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .glyphs import parse_alignment, parse_direction, sequence_glyphs
from .layout import LayoutConfig, LayoutResult, compute_layout
from .sizes import Size

structlog.configure(
    processors=[
        structlog.dev.ConsoleRenderer(),
    ],
)

logger = structlog.get_logger(__name__)

SERVICE_NAME = "arctext"
SERVICE_VERSION = "0.1.0"

app = FastAPI(
    title=SERVICE_NAME,
    description="Placement of text glyphs along a circular arc",
    version=SERVICE_VERSION,
)


# --------------------------------------------------------------------------
# Request / Response models
# --------------------------------------------------------------------------


class SizeModel(BaseModel):
    """Measured size of one glyph."""

    width: float = Field(..., ge=0, description="Glyph width")
    height: float = Field(..., ge=0, description="Glyph height")


class LayoutRequest(BaseModel):
    """Request body for /layout."""

    text: str = Field(..., description="Text to place on the arc", examples=["Clockwize"])
    radius: float = Field(..., gt=0, description="Nominal arc radius", examples=[75])
    alignment: str = Field(
        default="center",
        description="Glyph position relative to the radius",
        examples=["inside", "center", "outside"],
    )
    direction: str = Field(
        default="clockwise",
        description="Traversal direction",
        examples=["clockwise", "counterclockwise"],
    )
    spacing: float = Field(default=0.0, ge=0, description="Extra gap between glyphs")
    advance: float = Field(default=0.0, description="Global rotation offset in radians")
    sizes: list[SizeModel] | dict[str, SizeModel] = Field(
        default_factory=list,
        description=(
            "Measured sizes by layout index: a list in layout order, or an "
            "object keyed by index. Missing glyphs use the sentinel size."
        ),
    )


class SequenceRequest(BaseModel):
    """Request body for /sequence."""

    text: str = Field(..., description="Text to split into glyphs")
    direction: str = Field(default="clockwise", description="Traversal direction")


class GlyphModel(BaseModel):
    index: int = Field(description="Storage index in the original text")
    char: str


class PlacementModel(BaseModel):
    """One placed glyph."""

    glyph: GlyphModel
    layout_index: int
    width: float
    height: float
    angle: float = Field(description="Rotation around the center, radians")
    radial_offset: float = Field(description="Distance from the center")
    x: float = Field(description="Glyph center x relative to circle center")
    y: float = Field(description="Glyph center y relative to circle center (down)")
    scale: dict[str, float]


class LayoutResponse(BaseModel):
    """Response body for /layout."""

    scale: dict[str, float]
    frame_size: dict[str, float]
    placements: list[PlacementModel]


class SequenceResponse(BaseModel):
    glyphs: list[GlyphModel]


class HealthResponse(BaseModel):
    """Response body for /health."""

    status: str
    service: str
    version: str


def _decode_sizes(sizes: list[SizeModel] | dict[str, SizeModel]) -> dict[int, Size]:
    """Convert request sizes to a layout-index mapping.

    Raises:
        ValueError: If an object key is not an integer.
    """
    if isinstance(sizes, dict):
        items = []
        for key, value in sizes.items():
            try:
                items.append((int(key), value))
            except ValueError:
                raise ValueError(f"Size key must be an integer index, got '{key}'") from None
    else:
        items = list(enumerate(sizes))
    return {i: Size(width=s.width, height=s.height) for i, s in items}


def _to_response(result: LayoutResult) -> LayoutResponse:
    placements = []
    for p in result.placements:
        x, y = p.position
        placements.append(
            PlacementModel(
                glyph=GlyphModel(index=p.glyph.index, char=p.glyph.char),
                layout_index=p.layout_index,
                width=p.size.width,
                height=p.size.height,
                angle=p.angle,
                radial_offset=p.radial_offset,
                x=x,
                y=y,
                scale={"x": p.scale[0], "y": p.scale[1]},
            )
        )
    return LayoutResponse(
        scale={"x": result.scale[0], "y": result.scale[1]},
        frame_size={"width": result.frame_size[0], "height": result.frame_size[1]},
        placements=placements,
    )


# --------------------------------------------------------------------------
# Endpoints
# --------------------------------------------------------------------------


@app.post(
    "/layout",
    response_model=LayoutResponse,
    responses={422: {"description": "Invalid input"}},
)
async def layout_endpoint(request: LayoutRequest) -> LayoutResponse:
    """Compute arc placements for each glyph of the text."""
    try:
        config = LayoutConfig(
            radius=request.radius,
            alignment=parse_alignment(request.alignment),
            direction=parse_direction(request.direction),
            spacing=request.spacing,
            advance=request.advance,
        )
        sizes = _decode_sizes(request.sizes)
        result = compute_layout(request.text, config, sizes)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("layout_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Layout failed")

    return _to_response(result)


@app.post(
    "/sequence",
    response_model=SequenceResponse,
    responses={422: {"description": "Invalid input"}},
)
async def sequence_endpoint(request: SequenceRequest) -> SequenceResponse:
    """Return glyphs in the order they are laid out."""
    try:
        glyphs = sequence_glyphs(request.text, parse_direction(request.direction))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return SequenceResponse(glyphs=[GlyphModel(index=g.index, char=g.char) for g in glyphs])


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint for Docker and load balancer probes."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
    )
