"""Chord layout engine. Pure functions from weighted words to styled paths."""

from chordwheel.engine.config import LayoutConfig
from chordwheel.engine.context import ChordLayout, NodeArc, Ribbon, WeightedWord
from chordwheel.engine.layout import build
from chordwheel.engine.paths import arc_path, ribbon_path
from chordwheel.engine.scene import SceneOptions, ScenePath, compose_scene
from chordwheel.engine.sentiment import SentimentBand, arc_color, band, ribbon_color

__all__ = [
    "LayoutConfig",
    "ChordLayout",
    "NodeArc",
    "Ribbon",
    "WeightedWord",
    "build",
    "arc_path",
    "ribbon_path",
    "SceneOptions",
    "ScenePath",
    "compose_scene",
    "SentimentBand",
    "arc_color",
    "band",
    "ribbon_color",
]
