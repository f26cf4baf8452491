"""Shared fixtures for the test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from privacy_grade import config as config_mod
from privacy_grade.analysis.rating_cache import RatingCache
from privacy_grade.models.tracking import DetectedTracker, MajorTrackerNetwork, TrackerCategory, TrackerIdentity
from privacy_grade.registries.major_networks import InMemoryMajorNetworkStore
from privacy_grade.registries.reputation import InMemoryReputationStore
from privacy_grade.registries.tracker_identity import InMemoryTrackerIdentityStore
from privacy_grade.utils import logger

# ── Isolation ───────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from default settings and an empty log buffer."""
    for name in (
        "PRIVACY_GRADE_SECURE_BONUS",
        "PRIVACY_GRADE_CLASSIFICATION_OFFSETS",
        "PRIVACY_GRADE_TRACKER_WEIGHT",
        "PRIVACY_GRADE_OBSCURE_WEIGHT",
        "PRIVACY_GRADE_MAJOR_WEIGHT",
        "PRIVACY_GRADE_THRESHOLD_A",
        "PRIVACY_GRADE_THRESHOLD_B",
        "PRIVACY_GRADE_THRESHOLD_C",
        "PRIVACY_GRADE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    config_mod.reset_config()
    logger.clear_log_buffer()
    yield
    config_mod.reset_config()


@pytest.fixture()
def config() -> config_mod.GradingConfig:
    """Default grading configuration."""
    return config_mod.GradingConfig()


# ── Registries ──────────────────────────────────────────────────


@pytest.fixture()
def class_a_tos() -> InMemoryReputationStore:
    """Class A terms of service for example.com."""
    return InMemoryReputationStore().add("example.com", classification="A", score=0)


@pytest.fixture()
def google_network() -> MajorTrackerNetwork:
    return MajorTrackerNetwork(name="Google", domain="google.com", percentage_of_pages=84)


@pytest.fixture()
def google_network_store(google_network: MajorTrackerNetwork) -> InMemoryMajorNetworkStore:
    """A major network registry holding only Google."""
    return InMemoryMajorNetworkStore([]).adding(google_network)


@pytest.fixture()
def no_major_networks() -> InMemoryMajorNetworkStore:
    return InMemoryMajorNetworkStore([])


@pytest.fixture()
def tricky_ads_identities() -> InMemoryTrackerIdentityStore:
    """Identity registry naming sometracker.com as a social tracker."""
    return InMemoryTrackerIdentityStore(
        {
            "sometracker.com": TrackerIdentity(
                url="http://example.com",
                network_name="TrickyAds",
                category=TrackerCategory.SOCIAL,
            ),
        }
    )


@pytest.fixture()
def rating_cache() -> RatingCache:
    return RatingCache()


# ── Tracker factories ───────────────────────────────────────────


@pytest.fixture()
def standard_tracker() -> DetectedTracker:
    """A named, non-major tracker that was not blocked."""
    return DetectedTracker(url="trackerexample.com", network_name="someSmallAdNetwork.com", blocked=False)


@pytest.fixture()
def ip_tracker() -> DetectedTracker:
    """A blocked tracker served from a bare IP address."""
    return DetectedTracker(url="http://192.168.5.10/abcd", network_name="someSmallAdNetwork.com", blocked=True)


@pytest.fixture()
def google_tracker() -> DetectedTracker:
    """An unblocked tracker explicitly attributed to Google."""
    return DetectedTracker(url="trackerexample.com", network_name="Google", blocked=False)
