"""Validate composed scenes by reading the emitted path data back."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from chordwheel.engine.scene import PathKind, ScenePath
from chordwheel.svg.parser import has_zero_length_arc, is_closed, path_polygon, read_path, sample_path
from chordwheel.utils.geometry import radial_distances

logger = logging.getLogger(__name__)

# Relative tolerance for "sample lies on the arc radius"
_RADIUS_RTOL = 1e-3
# Ribbons thinner than this area are degenerate (valid but invisible)
_MIN_AREA = 1e-9


def validate_scene(paths: Sequence[ScenePath], outer_radius: float | None = None) -> dict:
    """Check that every ribbon is a simple closed region and every arc stays on its circle.

    Returns a dict with:
    - valid: bool
    - path_count: int
    - issues: list[str]
    - degenerate: list[str] (zero-area / zero-length paths; not errors)
    """
    issues: list[str] = []
    degenerate: list[str] = []
    seen_arc = False

    for idx, sp in enumerate(paths):
        label = f"{sp.kind.value}{list(sp.nodes)}"

        if sp.kind is PathKind.RIBBON and seen_arc:
            issues.append(f"{label}: ribbon drawn after an arc")
        if sp.kind is PathKind.ARC:
            seen_arc = True

        try:
            path = read_path(sp.d)
        except Exception as e:
            # svgpathtools rejects zero-length arcs; those are degenerate, not broken
            if has_zero_length_arc(sp.d):
                degenerate.append(label)
                continue
            logger.warning("Could not read path %d (%s): %s", idx, label, e)
            issues.append(f"{label}: unreadable path data ({e})")
            continue

        if sp.kind is PathKind.RIBBON:
            _check_ribbon(label, path, issues, degenerate)
        else:
            _check_arc(label, path, outer_radius, issues, degenerate)

    return {
        "valid": len(issues) == 0,
        "path_count": len(paths),
        "issues": issues,
        "degenerate": degenerate,
    }


def _check_ribbon(label: str, path, issues: list[str], degenerate: list[str]) -> None:
    if not is_closed(path):
        issues.append(f"{label}: ribbon is not closed")
        return
    poly = path_polygon(path)
    if poly is None or poly.area < _MIN_AREA:
        degenerate.append(label)
        return
    if not poly.is_valid:
        issues.append(f"{label}: ribbon outline self-intersects")


def _check_arc(
    label: str,
    path,
    outer_radius: float | None,
    issues: list[str],
    degenerate: list[str],
) -> None:
    points = sample_path(path)
    if len(points) == 0:
        degenerate.append(label)
        return
    dists = radial_distances(points)
    radius = outer_radius if outer_radius is not None else float(np.mean(dists))
    if not np.allclose(dists, radius, rtol=_RADIUS_RTOL, atol=0.0):
        issues.append(f"{label}: arc leaves radius {radius:.3f}")
