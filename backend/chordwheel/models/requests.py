"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from chordwheel.engine.context import WeightedWord


class WordIn(BaseModel):
    text: str = Field(..., description="The word itself")
    value: float | None = Field(default=None, description="Signed sentiment, clamped to [-5, 5]")
    grade: int | None = Field(default=None, description="Glossary grade 1-5 (used when value is absent)")
    rating: Literal["+", "-", "~"] | None = Field(default=None, description="Glossary rating")
    node_index: int = Field(..., description="Focus node; wrapped modulo node_count")

    @model_validator(mode="after")
    def _needs_value_or_rating(self) -> WordIn:
        if self.value is None and (self.grade is None or self.rating is None):
            raise ValueError("word needs either 'value' or both 'grade' and 'rating'")
        return self

    def to_weighted(self) -> WeightedWord:
        if self.value is not None:
            return WeightedWord(text=self.text, value=self.value, node_index=self.node_index)
        return WeightedWord.from_rating(self.text, self.grade, self.rating, self.node_index)


class LayoutRequest(BaseModel):
    node_count: int = Field(..., description="Number of focus nodes; values below 1 become 1")
    words: list[WordIn] = Field(default_factory=list, description="Weighted words")

    def weighted_words(self) -> list[WeightedWord]:
        return [w.to_weighted() for w in self.words]


class RenderRequest(LayoutRequest):
    size: float | None = Field(default=None, gt=0, description="Canvas width/height")
    inner_radius: float | None = Field(default=None, ge=0, description="Ribbon inner radius")
    outer_radius: float | None = Field(default=None, ge=0, description="Arc / ribbon outer radius")
    rotation_deg: float = Field(default=0.0, description="Rotation to align with the clock face")
