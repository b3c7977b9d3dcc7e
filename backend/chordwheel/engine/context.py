"""Layout data model: input words and the derived arcs, ribbons and layout.

Inputs are frozen and never mutated. Everything derived is rebuilt from
scratch by ``build``; nothing here caches.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from chordwheel.engine.sentiment import rating_to_value


@dataclass(frozen=True)
class WeightedWord:
    """A word pinned to a node, with signed sentiment in [-5, 5]."""

    text: str
    value: float
    node_index: int

    @classmethod
    def from_rating(cls, text: str, grade: int, rating: str, node_index: int) -> WeightedWord:
        return cls(text=text, value=rating_to_value(grade, rating), node_index=node_index)


@dataclass(frozen=True)
class NodeArc:
    """Angular span owned by one node."""

    index: int
    start_angle: float
    end_angle: float
    # Accumulated mass that sized the arc (base weight + per-word mass)
    total_weight: float
    # Sum of clamped word values at this node
    value_sum: float
    word_count: int = 0

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def avg_value(self) -> float:
        if self.word_count == 0:
            return 0.0
        return self.value_sum / self.word_count


@dataclass(frozen=True)
class Ribbon:
    """Flow between nodes i < j."""

    i: int
    j: int
    flow: float
    avg_value: float


@dataclass(frozen=True)
class ChordLayout:
    """Output of ``build``: arcs in node order, ribbons in (i, j) order, and the flow normalizer."""

    node_count: int
    pad_angle: float
    arcs: list[NodeArc] = field(default_factory=list)
    ribbons: list[Ribbon] = field(default_factory=list)
    max_flow: float = 1.0

    def overlap(self, ribbon: Ribbon) -> float:
        return ribbon.flow / self.max_flow

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        for arc_data, arc in zip(data["arcs"], self.arcs):
            arc_data["span"] = arc.span
            arc_data["avg_value"] = arc.avg_value
        return data
