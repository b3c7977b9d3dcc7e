"""POST /api/chord/* — layout and rendering of the chord wheel."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from chordwheel.config import settings
from chordwheel.engine.layout import build
from chordwheel.engine.scene import SceneOptions, compose_scene
from chordwheel.engine.validation import validate_scene
from chordwheel.models.requests import LayoutRequest, RenderRequest
from chordwheel.models.responses import LayoutResponse, RenderResponse, ScenePathOut
from chordwheel.svg.renderer import SvgRenderer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chord")


@router.post("/layout", response_model=LayoutResponse)
async def layout(req: LayoutRequest) -> LayoutResponse:
    result = build(req.node_count, req.weighted_words())
    return LayoutResponse(**result.to_dict())


@router.post("/render", response_model=RenderResponse)
async def render(req: RenderRequest) -> RenderResponse:
    size = req.size or settings.canvas_size
    options = SceneOptions(
        size=size,
        inner_radius=req.inner_radius,
        outer_radius=req.outer_radius,
        rotation_deg=req.rotation_deg,
    )

    result = build(req.node_count, req.weighted_words())
    paths = compose_scene(result, options)
    report = validate_scene(paths, outer_radius=options.r_outer)
    if not report["valid"]:
        logger.warning("Rendered chord scene has %d issue(s): %s", len(report["issues"]), report["issues"])

    svg = SvgRenderer().render(paths, options)
    return RenderResponse(
        svg=svg,
        paths=[ScenePathOut(**p.to_dict()) for p in paths],
        validation_passed=report["valid"],
        issues=report["issues"],
    )
