"""Layout builder — weighted words → proportional arcs, pairwise ribbons, flow normalizer.

build() is total: node counts below 1 become 1, node indices wrap, values
clamp, and the mass denominator is guarded, so every input yields a layout.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from chordwheel.engine.config import DEFAULT_CONFIG, LayoutConfig
from chordwheel.engine.context import ChordLayout, NodeArc, Ribbon, WeightedWord

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi


def build(
    node_count: int,
    words: Sequence[WeightedWord],
    config: LayoutConfig | None = None,
) -> ChordLayout:
    """Compute arcs, ribbons and max_flow for ``words`` spread over ``node_count`` nodes."""
    cfg = config or DEFAULT_CONFIG
    n = max(1, int(node_count))

    # Wrap and clamp as Python numbers first; arbitrarily large ints overflow numpy dtypes
    values = clamp_values(np.array([_bound(w.value, cfg) for w in words], dtype=np.float64), cfg)
    indices = np.array([int(w.node_index) % n for w in words], dtype=np.int64)

    totals = np.full(n, cfg.base_weight, dtype=np.float64)
    np.add.at(totals, indices, cfg.word_weight_floor + np.abs(values))
    sums = np.zeros(n, dtype=np.float64)
    np.add.at(sums, indices, values)
    counts = np.bincount(indices, minlength=n)

    total_mass = float(totals.sum())
    if total_mass <= 0:
        total_mass = 1.0

    starts, ends = _partition(totals, total_mass, cfg.pad_angle)
    arcs = [
        NodeArc(
            index=k,
            start_angle=float(starts[k]),
            end_angle=float(ends[k]),
            total_weight=float(totals[k]),
            value_sum=float(sums[k]),
            word_count=int(counts[k]),
        )
        for k in range(n)
    ]

    # No words means no cross-node flow; arcs still partition the circle.
    ribbons = _ribbons(totals, sums, counts, total_mass, cfg) if len(words) else []
    max_flow = max([r.flow for r in ribbons] + [cfg.max_flow_floor])

    logger.debug(
        "Built chord layout: %d nodes, %d words, %d ribbons, max_flow=%.4f",
        n, len(words), len(ribbons), max_flow,
    )
    return ChordLayout(
        node_count=n,
        pad_angle=cfg.pad_angle,
        arcs=arcs,
        ribbons=ribbons,
        max_flow=max_flow,
    )


def clamp_values(values: NDArray[np.float64], cfg: LayoutConfig = DEFAULT_CONFIG) -> NDArray[np.float64]:
    """Clamp into [min_value, max_value]. NaN reads as 0, infinities hit the bounds."""
    cleaned = np.nan_to_num(values, nan=0.0, posinf=cfg.max_value, neginf=cfg.min_value)
    return np.clip(cleaned, cfg.min_value, cfg.max_value)


def _bound(value: float, cfg: LayoutConfig) -> float:
    """Clamp before float conversion. NaN passes through for clamp_values to zero."""
    return float(max(min(value, cfg.max_value), cfg.min_value))


def usable_angle(node_count: int, pad_angle: float) -> float:
    return TWO_PI - node_count * pad_angle


def _partition(
    totals: NDArray[np.float64],
    total_mass: float,
    pad_angle: float,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Cumulative-mass angles; arc k is shifted by k pads so gaps stay constant."""
    n = len(totals)
    usable = usable_angle(n, pad_angle)
    cumulative = np.concatenate(([0.0], np.cumsum(totals)))
    offsets = np.arange(n) * pad_angle
    starts = cumulative[:-1] / total_mass * usable + offsets
    ends = cumulative[1:] / total_mass * usable + offsets
    return starts, ends


def _ribbons(
    totals: NDArray[np.float64],
    sums: NDArray[np.float64],
    counts: NDArray[np.int64],
    total_mass: float,
    cfg: LayoutConfig,
) -> list[Ribbon]:
    n = len(totals)
    averages = np.divide(sums, counts, out=np.zeros(n, dtype=np.float64), where=counts > 0)
    # Symmetric by construction: w_i * w_j == w_j * w_i in IEEE arithmetic
    flows = np.outer(totals, totals) / (total_mass * total_mass + 1.0) * cfg.flow_scale

    ribbons: list[Ribbon] = []
    rows, cols = np.triu_indices(n, k=1)
    for i, j in zip(rows.tolist(), cols.tolist()):
        flow = float(flows[i, j])
        if flow <= cfg.flow_epsilon:
            continue
        ribbons.append(
            Ribbon(i=i, j=j, flow=flow, avg_value=float((averages[i] + averages[j]) / 2.0))
        )
    return ribbons
