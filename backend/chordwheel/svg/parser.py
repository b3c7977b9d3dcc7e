"""Path-data reader — facade over svgpathtools + shapely.

Reads back the path strings the engine emits so their geometry can be checked.
"""

from __future__ import annotations

import logging
import re

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon
from svgpathtools import Path, parse_path

logger = logging.getLogger(__name__)

_DEFAULT_SAMPLES = 200
_SAMPLES_PER_SEGMENT = 50

# Absolute M/L/A/Z commands and numbers, the subset the engine emits
_TOKEN_RE = re.compile(r"[MLAZ]|[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def read_path(d: str) -> Path:
    """Parse path data. svgpathtools raises on malformed or zero-length arcs."""
    return parse_path(d)


def sample_path(d: str | Path, num_samples: int = _DEFAULT_SAMPLES) -> NDArray[np.float64]:
    """Sample (num_samples, 2) points along a path by parametric evaluation."""
    path = read_path(d) if isinstance(d, str) else d
    if not path or path.length() < 1e-10:
        return np.empty((0, 2))

    ts = np.linspace(0, 1, num_samples)
    pts = [path.point(t) for t in ts]
    return np.array([(p.real, p.imag) for p in pts], dtype=np.float64)


def is_closed(d: str | Path, tol: float = 1e-6) -> bool:
    path = read_path(d) if isinstance(d, str) else d
    if not path:
        return False
    return abs(path.start - path.end) < tol


def sample_segments(d: str | Path, per_segment: int = _SAMPLES_PER_SEGMENT) -> NDArray[np.float64]:
    """Sample each segment separately so short arcs keep their shape next to long lines."""
    path = read_path(d) if isinstance(d, str) else d
    if not path:
        return np.empty((0, 2))

    ts = np.linspace(0, 1, per_segment, endpoint=False)
    pts = [seg.point(t) for seg in path for t in ts]
    pts.append(path.end)
    return np.array([(p.real, p.imag) for p in pts], dtype=np.float64)


def has_zero_length_arc(d: str) -> bool:
    """True when an absolute arc command ends where it starts (svgpathtools refuses those)."""
    tokens = _TOKEN_RE.findall(d)
    current: tuple[float, float] | None = None
    i = 0
    try:
        while i < len(tokens):
            cmd = tokens[i]
            if cmd in ("M", "L"):
                current = (float(tokens[i + 1]), float(tokens[i + 2]))
                i += 3
            elif cmd == "A":
                end = (float(tokens[i + 6]), float(tokens[i + 7]))
                if end == current:
                    return True
                current = end
                i += 8
            else:
                i += 1
    except (IndexError, ValueError):
        return False
    return False


def path_polygon(d: str | Path, per_segment: int = _SAMPLES_PER_SEGMENT) -> Polygon | None:
    """Build a polygon from per-segment samples. None when too few distinct points."""
    points = sample_segments(d, per_segment)
    if len(points) < 3:
        return None
    return Polygon(points)
