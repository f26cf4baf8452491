"""Third-party tracker scoring.

Counts each tracker *network* once, however many requests it
made.  Obscure trackers (no attributable owner) weigh more
than named ones because name-based protection cannot target
them, and trackers belonging to a major network carry an extra
weight on top.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from privacy_grade.config import GradingConfig
from privacy_grade.models import analysis
from privacy_grade.utils import logger

log = logger.create_logger("Score-Trackers")


@dataclass(frozen=True)
class ResolvedTracker:
    """A detected tracker with its effective network resolved.

    ``network_key`` identifies the network case-insensitively;
    obscure trackers are keyed by their endpoint instead.
    """

    network_key: str
    network_name: str | None
    is_major: bool
    blocked: bool

    @property
    def obscure(self) -> bool:
        return self.network_name is None


def unique_networks(trackers: Iterable[ResolvedTracker]) -> list[ResolvedTracker]:
    """Keep the first tracker seen for each network, in order."""
    seen: set[str] = set()
    unique: list[ResolvedTracker] = []
    for tracker in trackers:
        if tracker.network_key in seen:
            continue
        seen.add(tracker.network_key)
        unique.append(tracker)
    return unique


def calculate(
    trackers: Iterable[ResolvedTracker],
    protected: bool,
    config: GradingConfig,
) -> analysis.TermScore:
    """Score the tracker networks a page exposes the user to.

    With ``protected`` set only major-network trackers still
    count; everything else is assumed neutralised by blocking.

    Args:
        trackers: Resolved detections in arrival order.
        protected: Score the after-protection view.
        config: Grading weights.

    Returns:
        TermScore with uncapped points.
    """
    contributing = [t for t in trackers if t.is_major] if protected else list(trackers)
    networks = unique_networks(contributing)

    points = 0
    named = obscure = major = 0
    for tracker in networks:
        if tracker.obscure:
            points += config.obscure_weight
            obscure += 1
        else:
            points += config.tracker_weight
            named += 1
        if tracker.is_major:
            points += config.major_weight
            major += 1

    issues: list[str] = []
    if major:
        issues.append(f"{major} major tracker network{'s' if major != 1 else ''}")
    if named:
        issues.append(f"{named} tracker network{'s' if named != 1 else ''} detected")
    if obscure:
        issues.append(f"{obscure} obscure tracker{'s' if obscure != 1 else ''} with no known owner")

    log.debug(
        "Tracker score",
        {
            "protected": protected,
            "contributing": len(contributing),
            "networks": len(networks),
            "obscure": obscure,
            "major": major,
            "points": points,
        },
    )

    return analysis.TermScore(points=points, issues=issues)
