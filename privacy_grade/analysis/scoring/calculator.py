"""Site score calculator — orchestrator.

Calls each term's scoring module, sums the points and maps the
total onto a letter grade through the configured thresholds.  A
page that is itself a major tracker network skips the tracker
term and is graded ``D`` outright.
"""

from __future__ import annotations

from collections.abc import Iterable

from privacy_grade.analysis.scoring import reputation, trackers, transport
from privacy_grade.config import GradingConfig
from privacy_grade.models.analysis import ScoreBreakdown, TermScore
from privacy_grade.models.grade import Grade
from privacy_grade.models.reputation import ReputationEntry
from privacy_grade.utils import logger

log = logger.create_logger("SiteScore")


def grade_for_score(score: int, config: GradingConfig) -> Grade:
    """Map a total score to its letter grade.

    Thresholds are inclusive upper bounds: a score equal to
    ``threshold_a`` is still an ``A``.
    """
    if score <= config.threshold_a:
        return Grade.A
    if score <= config.threshold_b:
        return Grade.B
    if score <= config.threshold_c:
        return Grade.C
    return Grade.D


def calculate_site_score(
    *,
    domain: str,
    https: bool,
    has_only_secure_content: bool,
    reputation_entry: ReputationEntry | None,
    resolved_trackers: Iterable[trackers.ResolvedTracker],
    major_network_name: str | None,
    protected: bool,
    config: GradingConfig,
) -> ScoreBreakdown:
    """Calculate one before- or after-protection score breakdown.

    Args:
        domain: The rated page's host, for log context.
        https: Whether the page URL uses the secure scheme.
        has_only_secure_content: False after mixed content.
        reputation_entry: Terms-of-service entry for the host.
        resolved_trackers: Detections with networks resolved.
        major_network_name: Name of the major network the page
            host belongs to, if any.
        protected: Score the after-protection view.
        config: Grading weights and thresholds.

    Returns:
        A :class:`ScoreBreakdown` whose ``grade`` always agrees
        with ``total``.
    """
    transport_score = transport.calculate(https, has_only_secure_content, config)
    reputation_score = reputation.calculate(reputation_entry, config)
    categories: dict[str, TermScore] = {
        "transport": transport_score,
        "reputation": reputation_score,
    }
    total = transport_score.points + reputation_score.points

    forced = major_network_name is not None
    if forced:
        # Raise the total into the D band so cached snapshots stay D too.
        total = max(total, config.worst_grade_floor)
    else:
        tracker_score = trackers.calculate(resolved_trackers, protected, config)
        categories["trackers"] = tracker_score
        total += tracker_score.points

    factors: list[str] = []
    if forced:
        factors.append(f"Site is part of the {major_network_name} major tracker network")
    for term in categories.values():
        factors.extend(term.issues)

    grade = grade_for_score(total, config)

    log.debug(
        "Site score calculated",
        {
            "domain": domain,
            "protected": protected,
            "transport": transport_score.points,
            "reputation": reputation_score.points,
            "trackers": categories["trackers"].points if "trackers" in categories else None,
            "forced": forced,
            "total": total,
            "grade": grade.value,
        },
    )

    return ScoreBreakdown(
        total=total,
        grade=grade,
        protected=protected,
        forced_by_major_network=forced,
        categories=categories,
        factors=factors,
    )


def apply_cached_baseline(
    breakdown: ScoreBreakdown,
    cached_score: int,
    config: GradingConfig,
) -> ScoreBreakdown:
    """Raise *breakdown* to a previously cached score for the same URL.

    A grade already shown for a page never improves just because a
    later context observed fewer trackers.  Returns *breakdown*
    unchanged when the cached score is not worse.
    """
    if cached_score <= breakdown.total:
        return breakdown
    return breakdown.model_copy(
        update={
            "total": cached_score,
            "grade": grade_for_score(cached_score, config),
            "factors": [*breakdown.factors, f"Previously rated with score {cached_score}"],
        }
    )
