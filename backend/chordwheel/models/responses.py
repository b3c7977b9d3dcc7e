"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    engine: str = "chord-layout"


class ArcOut(BaseModel):
    index: int
    start_angle: float
    end_angle: float
    span: float
    total_weight: float
    value_sum: float
    word_count: int
    avg_value: float


class RibbonOut(BaseModel):
    i: int
    j: int
    flow: float
    avg_value: float


class LayoutResponse(BaseModel):
    node_count: int
    pad_angle: float
    arcs: list[ArcOut] = Field(default_factory=list)
    ribbons: list[RibbonOut] = Field(default_factory=list)
    max_flow: float = 1.0


class ScenePathOut(BaseModel):
    kind: str
    d: str
    band: str
    fill: str
    gradient_id: str
    opacity: float = 1.0
    stroke_width: float = 0.0
    nodes: list[int] = Field(default_factory=list)


class RenderResponse(BaseModel):
    svg: str
    paths: list[ScenePathOut] = Field(default_factory=list)
    validation_passed: bool = False
    issues: list[str] = Field(default_factory=list)
