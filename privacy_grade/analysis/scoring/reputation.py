"""Terms-of-service reputation scoring."""

from __future__ import annotations

from privacy_grade.config import GradingConfig
from privacy_grade.models import analysis
from privacy_grade.models.reputation import ReputationEntry


def derived_score(entry: ReputationEntry | None, config: GradingConfig) -> int:
    """Points for a reputation entry.

    A classification wins over the raw numeric score; a missing
    entry is neutral.
    """
    if entry is None:
        return 0
    if entry.classification is not None:
        return config.classification_offsets[entry.classification]
    return entry.score


def calculate(entry: ReputationEntry | None, config: GradingConfig) -> analysis.TermScore:
    """Score the site's terms-of-service reputation."""
    points = derived_score(entry, config)
    issues: list[str] = []
    if entry is None:
        issues.append("No known terms of service reputation")
    elif entry.classification is not None:
        if points > 0:
            issues.append(f"Terms of service classified {entry.classification.value}")
    elif points > 0:
        issues.append(f"Terms of service scored {points}")
    return analysis.TermScore(points=points, issues=issues)
