"""
Grading configuration.

Centralises every tuning constant of the grading algorithm:
the secure-transport bonus, the terms-of-service class offsets,
the tracker weights and the grade thresholds.

Uses ``pydantic_settings.BaseSettings`` so each value can be
overridden from a ``PRIVACY_GRADE_``-prefixed environment
variable (e.g. ``PRIVACY_GRADE_OBSCURE_WEIGHT=5``).  Dict values
are read as JSON.
"""

from __future__ import annotations

import pydantic
import pydantic_settings

from privacy_grade.models.reputation import Classification
from privacy_grade.utils import logger

log = logger.create_logger("Grading-Config")

_DEFAULT_CLASSIFICATION_OFFSETS: dict[Classification, int] = {
    Classification.A: -2,
    Classification.B: 0,
    Classification.C: 0,
    Classification.D: 2,
    Classification.E: 12,
}


class GradingConfig(pydantic_settings.BaseSettings):
    """Weights and thresholds for site grading.

    A total score maps to a grade as follows::

        score <= threshold_a  -> A
        score <= threshold_b  -> B
        score <= threshold_c  -> C
        otherwise             -> D

    Attributes:
        secure_bonus: Subtracted when the page and all of its
            content loaded over the secure transport.
        classification_offsets: Points per terms-of-service class.
        tracker_weight: Points per unique named tracker network.
        obscure_weight: Points per unique obscure tracker.
        major_weight: Extra points when a tracker network is major.
    """

    model_config = pydantic_settings.SettingsConfigDict(
        env_prefix="PRIVACY_GRADE_", frozen=True
    )

    secure_bonus: int = pydantic.Field(default=1, ge=0)
    classification_offsets: dict[Classification, int] = pydantic.Field(
        default_factory=lambda: dict(_DEFAULT_CLASSIFICATION_OFFSETS)
    )
    tracker_weight: int = pydantic.Field(default=1, ge=0)
    obscure_weight: int = pydantic.Field(default=4, ge=0)
    major_weight: int = pydantic.Field(default=2, ge=0)
    threshold_a: int = -3
    threshold_b: int = 0
    threshold_c: int = 9

    @pydantic.model_validator(mode="after")
    def check_consistency(self) -> GradingConfig:
        """Reject thresholds or weights that break grade ordering."""
        if not self.threshold_a < self.threshold_b < self.threshold_c:
            raise ValueError("grade thresholds must be strictly increasing (a < b < c)")
        if self.obscure_weight <= self.tracker_weight:
            raise ValueError("obscure_weight must be greater than tracker_weight")
        missing = [c.value for c in Classification if c not in self.classification_offsets]
        if missing:
            raise ValueError(f"classification_offsets missing classes: {', '.join(missing)}")
        offsets = [self.classification_offsets[c] for c in Classification]
        if offsets != sorted(offsets):
            raise ValueError("classification_offsets must not decrease from A to E")
        return self

    @property
    def worst_grade_floor(self) -> int:
        """Lowest score that maps to grade ``D``."""
        return self.threshold_c + 1


_config: GradingConfig | None = None


def get_config() -> GradingConfig:
    """Get the shared default configuration (lazy loaded and cached)."""
    global _config
    if _config is None:
        _config = GradingConfig()
        log.debug(
            "Grading config loaded",
            {
                "trackerWeight": _config.tracker_weight,
                "obscureWeight": _config.obscure_weight,
                "majorWeight": _config.major_weight,
                "thresholds": [_config.threshold_a, _config.threshold_b, _config.threshold_c],
            },
        )
    return _config


def reset_config() -> None:
    """Drop the cached default so the next call re-reads the environment."""
    global _config
    _config = None
