"""Path generator — arcs and ribbons as SVG path data.

Origin-centered, angles from +x, y grows downward, point = (r cos θ, r sin θ).
No angle normalization happens here; degenerate input yields a degenerate
but well-formed path.
"""

from __future__ import annotations

import math


def polar_point(radius: float, angle: float) -> tuple[float, float]:
    return (radius * math.cos(angle), radius * math.sin(angle))


def large_arc_flag(start_angle: float, end_angle: float) -> int:
    """1 when the clockwise sweep from start to end exceeds half a turn."""
    return 1 if end_angle - start_angle > math.pi else 0


def arc_path(radius: float, start_angle: float, end_angle: float) -> str:
    """Open circular arc, always swept in the positive (clockwise on screen) direction."""
    x1, y1 = polar_point(radius, start_angle)
    x2, y2 = polar_point(radius, end_angle)
    large = large_arc_flag(start_angle, end_angle)
    return f"M {x1} {y1} A {radius} {radius} 0 {large} 1 {x2} {y2}"


def ribbon_path(inner_radius: float, outer_radius: float, angle_a: float, angle_b: float) -> str:
    """Closed band: outer arc a→b, line in, inner arc b→a, line back out.

    The inner arc runs the opposite rotational way, so its large-arc flag
    comes from a − b.
    """
    x1o, y1o = polar_point(outer_radius, angle_a)
    x2o, y2o = polar_point(outer_radius, angle_b)
    x1i, y1i = polar_point(inner_radius, angle_a)
    x2i, y2i = polar_point(inner_radius, angle_b)
    large_outer = large_arc_flag(angle_a, angle_b)
    large_inner = large_arc_flag(angle_b, angle_a)
    return (
        f"M {x1o} {y1o} "
        f"A {outer_radius} {outer_radius} 0 {large_outer} 1 {x2o} {y2o} "
        f"L {x2i} {y2i} "
        f"A {inner_radius} {inner_radius} 0 {large_inner} 1 {x1i} {y1i} "
        f"L {x1o} {y1o} Z"
    )
