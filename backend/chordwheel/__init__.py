"""Chordwheel — radial chord layout for sentiment-weighted words."""

__version__ = "0.1.0"
