"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def radial_distances(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Distance from the origin to each point."""
    return np.hypot(points[:, 0], points[:, 1])
