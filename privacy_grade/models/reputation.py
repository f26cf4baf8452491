"""Pydantic models for terms-of-service reputation entries."""

from __future__ import annotations

import enum

import pydantic


class Classification(enum.StrEnum):
    """Terms-of-service quality class, ``A`` (best) to ``E`` (worst)."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"


class ReputationEntry(pydantic.BaseModel):
    """Terms-of-service reputation for one domain.

    ``classification`` takes precedence over ``score`` when
    both are present.  The reason lists are informational and
    never scored.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    classification: Classification | None = None
    score: int = 0
    good_reasons: tuple[str, ...] = ()
    bad_reasons: tuple[str, ...] = ()

    @pydantic.field_validator("classification", mode="before")
    @classmethod
    def upper_classification(cls, value: object) -> object:
        """Accept lowercase class letters such as ``"a"``."""
        if isinstance(value, str):
            return value.upper()
        return value
