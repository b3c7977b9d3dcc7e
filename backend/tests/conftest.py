"""Shared test fixtures."""

from __future__ import annotations

import pytest

from chordwheel.engine.context import WeightedWord


PAD = 0.015

# A single strongly positive word at node 0
JOY_WORDS = [WeightedWord(text="joy", value=5, node_index=0)]

# Opposite extremes on neighbouring nodes
POLARIZED_WORDS = [
    WeightedWord(text="dread", value=-5, node_index=0),
    WeightedWord(text="bliss", value=5, node_index=1),
]

# A mixed clock face, including out-of-range values and indices
CLOCK_WORDS = [
    WeightedWord(text="Achievement", value=4, node_index=0),
    WeightedWord(text="Vitality", value=5, node_index=0),
    WeightedWord(text="Union", value=2, node_index=1),
    WeightedWord(text="joyless", value=-3, node_index=1),
    WeightedWord(text="Rampant", value=-4, node_index=2),
    WeightedWord(text="Balancing", value=0, node_index=3),
    WeightedWord(text="Crippling", value=-9, node_index=4),
    WeightedWord(text="Bliss", value=12, node_index=-2),
    WeightedWord(text="Empathy", value=3, node_index=13),
]


@pytest.fixture
def joy_words() -> list[WeightedWord]:
    return list(JOY_WORDS)


@pytest.fixture
def polarized_words() -> list[WeightedWord]:
    return list(POLARIZED_WORDS)


@pytest.fixture
def clock_words() -> list[WeightedWord]:
    return list(CLOCK_WORDS)
