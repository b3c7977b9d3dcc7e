"""Sentiment bands and the colors they resolve to.

Every function here is stateless and total: any float maps to exactly one
band, and every band maps to one color identity shared by arcs and ribbons.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

# Ribbon opacity = _OPACITY_BASE + min(_OVERLAP_CAP, overlap) * _OPACITY_GAIN
# -> [0.35, 0.55], saturating at overlap 0.5.
_OPACITY_BASE = 0.35
_OPACITY_GAIN = 0.4
_OVERLAP_CAP = 0.5


class SentimentBand(str, enum.Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class ColorIdentity:
    """Representative fill plus a 3-stop gradient for gradient-capable renderers."""

    fill: str
    gradient: tuple[str, str, str]
    gradient_id: str


@dataclass(frozen=True)
class RibbonColor:
    fill: str
    opacity: float


SENTIMENT_COLORS: dict[SentimentBand, ColorIdentity] = {
    SentimentBand.POSITIVE: ColorIdentity(
        fill="#22c55e",
        gradient=("#166534", "#22c55e", "#4ade80"),
        gradient_id="chord-positive",
    ),
    SentimentBand.NEUTRAL: ColorIdentity(
        fill="#3b82f6",
        gradient=("#1e40af", "#3b82f6", "#60a5fa"),
        gradient_id="chord-neutral",
    ),
    SentimentBand.NEGATIVE: ColorIdentity(
        fill="#ef4444",
        gradient=("#991b1b", "#ef4444", "#f87171"),
        gradient_id="chord-negative",
    ),
}


def band(value: float) -> SentimentBand:
    """Exact sign rule. 0, -0.0 and NaN are neutral."""
    if value > 0:
        return SentimentBand.POSITIVE
    if value < 0:
        return SentimentBand.NEGATIVE
    return SentimentBand.NEUTRAL


def color_identity(value: float) -> ColorIdentity:
    return SENTIMENT_COLORS[band(value)]


def ribbon_color(avg_value: float, overlap: float) -> RibbonColor:
    """Fill from the band of ``avg_value``, opacity blended by ``overlap`` (flow / max_flow)."""
    clipped = min(_OVERLAP_CAP, max(0.0, overlap))
    opacity = _OPACITY_BASE + clipped * _OPACITY_GAIN
    return RibbonColor(fill=color_identity(avg_value).fill, opacity=opacity)


def arc_color(avg_value: float) -> str:
    return color_identity(avg_value).fill


def rating_to_value(grade: int, rating: str) -> float:
    """Glossary grade (1-5) and rating ('+', '-', '~') → signed value in [-5, 5].

    Unknown ratings read as neutral.
    """
    if rating == "+":
        return float(min(5, max(1, grade)))
    if rating == "-":
        return float(max(-5, min(-1, -grade)))
    return 0.0
