"""Scene composer — turns a ChordLayout into the ordered, styled path list renderers draw.

Ribbons come first and arcs last so arcs composite on top. Renderers must
keep this order.
"""

from __future__ import annotations

import enum
from dataclasses import asdict, dataclass
from typing import Any

from chordwheel.engine.context import ChordLayout
from chordwheel.engine.paths import arc_path, ribbon_path
from chordwheel.engine.sentiment import SentimentBand, arc_color, band, color_identity, ribbon_color

# Default radii as fractions of the canvas size
INNER_RADIUS_FRACTION = 0.18
OUTER_RADIUS_FRACTION = 0.42

# Arc stroke = max(_MIN_STROKE, _BASE_STROKE + _STROKE_GAIN * min(1, weight / _STROKE_SATURATION))
_MIN_STROKE = 2.0
_BASE_STROKE = 3.0
_STROKE_GAIN = 4.0
_STROKE_SATURATION = 15.0


class PathKind(str, enum.Enum):
    RIBBON = "ribbon"
    ARC = "arc"


@dataclass(frozen=True)
class SceneOptions:
    size: float = 400.0
    inner_radius: float | None = None
    outer_radius: float | None = None
    rotation_deg: float = 0.0

    @property
    def r_inner(self) -> float:
        if self.inner_radius is not None:
            return self.inner_radius
        return self.size * INNER_RADIUS_FRACTION

    @property
    def r_outer(self) -> float:
        if self.outer_radius is not None:
            return self.outer_radius
        return self.size * OUTER_RADIUS_FRACTION


@dataclass(frozen=True)
class ScenePath:
    """One drawable path tagged with its band and paint."""

    kind: PathKind
    d: str
    band: SentimentBand
    fill: str
    gradient_id: str
    opacity: float = 1.0
    stroke_width: float = 0.0
    # Node indices: (i, j) for ribbons, (k,) for arcs
    nodes: tuple[int, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["kind"] = self.kind.value
        data["band"] = self.band.value
        data["nodes"] = list(self.nodes)
        return data


def arc_stroke_width(total_weight: float) -> float:
    return max(_MIN_STROKE, _BASE_STROKE + _STROKE_GAIN * min(1.0, total_weight / _STROKE_SATURATION))


def compose_scene(layout: ChordLayout, options: SceneOptions | None = None) -> list[ScenePath]:
    opts = options or SceneOptions()
    r0, r1 = opts.r_inner, opts.r_outer
    paths: list[ScenePath] = []

    for ribbon in layout.ribbons:
        angle_a = layout.arcs[ribbon.i].end_angle
        angle_b = layout.arcs[ribbon.j].start_angle
        color = ribbon_color(ribbon.avg_value, layout.overlap(ribbon))
        paths.append(
            ScenePath(
                kind=PathKind.RIBBON,
                d=ribbon_path(r0, r1, angle_a, angle_b),
                band=band(ribbon.avg_value),
                fill=color.fill,
                gradient_id=color_identity(ribbon.avg_value).gradient_id,
                opacity=color.opacity,
                nodes=(ribbon.i, ribbon.j),
            )
        )

    for arc in layout.arcs:
        identity = color_identity(arc.avg_value)
        paths.append(
            ScenePath(
                kind=PathKind.ARC,
                d=arc_path(r1, arc.start_angle, arc.end_angle),
                band=band(arc.avg_value),
                fill=arc_color(arc.avg_value),
                gradient_id=identity.gradient_id,
                stroke_width=arc_stroke_width(arc.total_weight),
                nodes=(arc.index,),
            )
        )

    return paths
