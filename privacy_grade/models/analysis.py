"""Pydantic models for score breakdowns and cached rating snapshots."""

from __future__ import annotations

import pydantic

from privacy_grade.models.grade import Grade
from privacy_grade.utils.serialization import snake_to_camel


class TermScore(pydantic.BaseModel):
    """Points contributed by one scoring term."""

    model_config = pydantic.ConfigDict(
        alias_generator=snake_to_camel, populate_by_name=True
    )

    points: int = 0
    issues: list[str] = pydantic.Field(default_factory=list)


class ScoreBreakdown(pydantic.BaseModel):
    """Detailed breakdown of one before- or after-protection evaluation."""

    model_config = pydantic.ConfigDict(
        alias_generator=snake_to_camel, populate_by_name=True
    )

    total: int = 0
    grade: Grade = Grade.A
    protected: bool = False
    forced_by_major_network: bool = False
    categories: dict[str, TermScore] = pydantic.Field(default_factory=dict)
    factors: list[str] = pydantic.Field(default_factory=list)


class CacheEntry(pydantic.BaseModel):
    """Frozen snapshot of a rating, shared through the rating cache."""

    model_config = pydantic.ConfigDict(
        alias_generator=snake_to_camel, populate_by_name=True, frozen=True
    )

    score: int
    unique_tracker_networks_detected: int = 0
    unique_tracker_networks_blocked: int = 0
    unique_major_tracker_networks_detected: int = 0
    unique_major_tracker_networks_blocked: int = 0
    has_only_secure_content: bool = True
