"""Layout configuration: tunables for arc sizing and ribbon flow."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutConfig:
    """Constants that shape the chord layout. Defaults reproduce the clock face."""

    # Every node claims this much mass even with zero words
    base_weight: float = 0.3
    # Mass every word adds on top of |value|
    word_weight_floor: float = 0.5

    # Word values are clamped into [min_value, max_value]
    min_value: float = -5.0
    max_value: float = 5.0

    # Constant angular gap after each arc (radians)
    pad_angle: float = 0.015

    # flow(i, j) = w_i * w_j / (total_mass^2 + 1) * flow_scale
    flow_scale: float = 20.0
    # Ribbons at or below this flow are dropped
    flow_epsilon: float = 0.001
    # max_flow never drops below this, so overlap stays <= flow
    max_flow_floor: float = 1.0


DEFAULT_CONFIG = LayoutConfig()
