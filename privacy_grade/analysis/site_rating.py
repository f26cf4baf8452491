"""Per-page site rating.

A :class:`SiteRating` is created when a page context starts
loading, receives tracker detections and mixed-content
observations while the page lives, and can be graded at any
point.  Grades are recomputed from the current state on every
read and never memoized.
"""

from __future__ import annotations

import dataclasses
import re
from collections import Counter

from privacy_grade.analysis import scoring
from privacy_grade.analysis.rating_cache import RatingCache
from privacy_grade.analysis.scoring.trackers import ResolvedTracker, unique_networks
from privacy_grade.config import GradingConfig, get_config
from privacy_grade.models.analysis import CacheEntry, ScoreBreakdown
from privacy_grade.models.grade import Grade
from privacy_grade.models.reputation import ReputationEntry
from privacy_grade.models.tracking import DetectedTracker, MajorTrackerNetwork
from privacy_grade.registries.major_networks import InMemoryMajorNetworkStore, MajorNetworkStore
from privacy_grade.registries.reputation import InMemoryReputationStore, ReputationStore
from privacy_grade.registries.tracker_identity import InMemoryTrackerIdentityStore, TrackerIdentityStore
from privacy_grade.utils import logger, url as url_utils

log = logger.create_logger("SiteRating")


class SiteRating:
    """Privacy rating of a single page context.

    Args:
        url: The page URL being rated.
        tracker_identities: Disconnect-style registry used to name
            trackers whose detection event carries no network.
        reputation_store: Terms-of-service registry.
        major_network_store: Major tracker network registry;
            defaults to the built-in network list.
        cache: Optional shared cache that supplies a baseline
            before-score and receives :meth:`publish` snapshots.
        config: Grading weights; defaults to :func:`get_config`.
    """

    def __init__(
        self,
        url: str,
        *,
        tracker_identities: TrackerIdentityStore | None = None,
        reputation_store: ReputationStore | None = None,
        major_network_store: MajorNetworkStore | None = None,
        cache: RatingCache | None = None,
        config: GradingConfig | None = None,
    ) -> None:
        self.url = url
        self.domain = url_utils.extract_host(url)
        self.https = url_utils.is_secure(url)
        self.has_only_secure_content = self.https
        self._trackers: list[DetectedTracker] = []
        self._tracker_identities = tracker_identities if tracker_identities is not None else InMemoryTrackerIdentityStore()
        self._reputation_store = reputation_store if reputation_store is not None else InMemoryReputationStore()
        self._major_networks = major_network_store if major_network_store is not None else InMemoryMajorNetworkStore()
        self._cache = cache
        self._config = config or get_config()

        log.debug("Site rating created", {"url": url, "domain": self.domain, "https": self.https})

    # ── Registry views ─────────────────────────────────────────

    @property
    def reputation(self) -> ReputationEntry | None:
        """Terms-of-service entry for the page host, if known."""
        if self.domain is None:
            return None
        return self._reputation_store.lookup(self.domain)

    @property
    def major_network(self) -> MajorTrackerNetwork | None:
        """The major network the page host itself belongs to."""
        if self.domain is None:
            return None
        return self._major_networks.contains(self.domain)

    @property
    def is_major_tracker_network(self) -> bool:
        return self.major_network is not None

    def network_name_and_category(self, domain: str) -> tuple[str | None, str | None]:
        """Name the network owning *domain*, with its category label.

        Major network membership wins and carries no category;
        otherwise the tracker identity registry is consulted.
        Returns ``(None, None)`` when the domain is unknown.
        """
        major = self._major_networks.contains(domain)
        if major is not None:
            return major.name, None
        identity = self._tracker_identities.lookup(domain)
        if identity is None:
            return None, None
        category = identity.category.value if identity.category is not None else None
        return identity.network_name, category

    # ── Detections ─────────────────────────────────────────────

    def tracker_detected(self, tracker: DetectedTracker) -> None:
        """Record a tracker detection."""
        self._trackers.append(tracker)
        log.debug(
            "Tracker detected",
            {
                "domain": self.domain,
                "tracker": tracker.url,
                "networkName": tracker.network_name,
                "blocked": tracker.blocked,
            },
        )

    @property
    def trackers(self) -> tuple[DetectedTracker, ...]:
        """Detections in arrival order."""
        return tuple(self._trackers)

    def _resolve(self, tracker: DetectedTracker) -> ResolvedTracker:
        """Work out which network a detection belongs to.

        IP-literal and unparseable endpoints are obscure even when
        the detector named a network, since no name-based rule
        can reach them.
        """
        host = url_utils.extract_host(tracker.url)
        if host is None or url_utils.is_ip_literal(host):
            endpoint = host or tracker.url.strip().lower()
            return ResolvedTracker(
                network_key=f"obscure:{endpoint}",
                network_name=None,
                is_major=False,
                blocked=tracker.blocked,
            )

        name = tracker.network_name or self.network_name_and_category(host)[0]
        if not name:
            return ResolvedTracker(
                network_key=f"obscure:{host}",
                network_name=None,
                is_major=False,
                blocked=tracker.blocked,
            )

        is_major = (
            self._major_networks.network_named(name) is not None
            or self._major_networks.contains(host) is not None
        )
        return ResolvedTracker(
            network_key=f"network:{name.lower()}",
            network_name=name,
            is_major=is_major,
            blocked=tracker.blocked,
        )

    def _resolved_trackers(self) -> list[ResolvedTracker]:
        """Resolve every detection, agreeing on major status per network.

        A network is major when any of its detections is, so the
        first detection to arrive never decides it alone.
        """
        resolved = [self._resolve(t) for t in self._trackers]
        major_keys = {t.network_key for t in resolved if t.is_major}
        return [
            dataclasses.replace(t, is_major=True) if t.network_key in major_keys and not t.is_major else t
            for t in resolved
        ]

    def _network_statistics(self) -> dict[str, int]:
        resolved = self._resolved_trackers()
        return {
            "unique_tracker_networks_detected": len(unique_networks(resolved)),
            "unique_tracker_networks_blocked": len(unique_networks(t for t in resolved if t.blocked)),
            "unique_major_tracker_networks_detected": len(unique_networks(t for t in resolved if t.is_major)),
            "unique_major_tracker_networks_blocked": len(
                unique_networks(t for t in resolved if t.is_major and t.blocked)
            ),
        }

    # ── Tracker statistics ─────────────────────────────────────

    @property
    def total_trackers_detected(self) -> int:
        return len(self._trackers)

    @property
    def total_trackers_blocked(self) -> int:
        return sum(1 for t in self._trackers if t.blocked)

    @property
    def unique_tracker_networks_detected(self) -> int:
        return self._network_statistics()["unique_tracker_networks_detected"]

    @property
    def unique_tracker_networks_blocked(self) -> int:
        return self._network_statistics()["unique_tracker_networks_blocked"]

    @property
    def unique_major_tracker_networks_detected(self) -> int:
        return self._network_statistics()["unique_major_tracker_networks_detected"]

    @property
    def unique_major_tracker_networks_blocked(self) -> int:
        return self._network_statistics()["unique_major_tracker_networks_blocked"]

    @property
    def contains_ip_tracker(self) -> bool:
        """True when any detection targeted a bare IP address."""
        for tracker in self._trackers:
            host = url_utils.extract_host(tracker.url)
            if host is not None and url_utils.is_ip_literal(host):
                return True
        return False

    @property
    def networks_detected(self) -> dict[str, int]:
        """Detection count per named network (obscure trackers excluded)."""
        counts = Counter(t.network_name for t in self._resolved_trackers() if t.network_name)
        return dict(counts)

    # ── Grading ────────────────────────────────────────────────

    def score_breakdown(self, protected: bool = False) -> ScoreBreakdown:
        """Evaluate the current state.

        Args:
            protected: Score the after-protection view.

        Returns:
            The full breakdown.  The unprotected view is raised to
            any worse score cached for this URL.
        """
        major = self.major_network
        breakdown = scoring.calculate_site_score(
            domain=self.domain or self.url,
            https=self.https,
            has_only_secure_content=self.has_only_secure_content,
            reputation_entry=self.reputation,
            resolved_trackers=self._resolved_trackers(),
            major_network_name=major.name if major is not None else None,
            protected=protected,
            config=self._config,
        )
        if not protected and self._cache is not None:
            cached = self._cache.lookup(self.url)
            if cached is not None:
                breakdown = scoring.apply_cached_baseline(breakdown, cached.score, self._config)
        return breakdown

    @property
    def before_score(self) -> int:
        return self.score_breakdown(protected=False).total

    @property
    def after_score(self) -> int:
        return self.score_breakdown(protected=True).total

    @property
    def before_grade(self) -> Grade:
        """Grade as if no tracker blocking were applied."""
        return self.score_breakdown(protected=False).grade

    @property
    def after_grade(self) -> Grade:
        """Grade with tracker blocking engaged."""
        return self.score_breakdown(protected=True).grade

    def describe(self) -> str:
        """One-sentence summary of the rating."""
        site_name = re.sub(r"^www\.", "", self.domain or self.url)
        before = self.before_grade
        after = self.after_grade
        if before == after:
            return f"{site_name} is graded {before.value}."
        return f"{site_name} is graded {before.value}, enhanced to {after.value} with protection."

    # ── Cache interaction ──────────────────────────────────────

    def matches_url(self, other_url: str) -> bool:
        """True when *other_url* refers to the same rated page."""
        return url_utils.cache_key(other_url) == url_utils.cache_key(self.url)

    def cache_entry(self) -> CacheEntry:
        """Snapshot the current before-score and tracker statistics."""
        return CacheEntry(
            score=self.before_score,
            has_only_secure_content=self.has_only_secure_content,
            **self._network_statistics(),
        )

    def publish(self, cache: RatingCache | None = None) -> CacheEntry | None:
        """Write :meth:`cache_entry` to *cache* (or the attached cache).

        Returns:
            The entry that was replaced, if any.

        Raises:
            ValueError: If no cache was given or attached.
        """
        target = cache if cache is not None else self._cache
        if target is None:
            raise ValueError("No rating cache to publish to")
        entry = self.cache_entry()
        previous = target.add(self.url, entry)
        log.info(
            "Site rating published",
            {"domain": self.domain, "score": entry.score, "replaced": previous is not None},
        )
        return previous
