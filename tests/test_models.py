"""Tests for Pydantic models and the Grade enum."""

from __future__ import annotations

import pydantic
import pytest

from privacy_grade.models.grade import Grade
from privacy_grade.models.reputation import Classification, ReputationEntry
from privacy_grade.models.tracking import DetectedTracker, TrackerCategory, TrackerIdentity


class TestGrade:
    """Tests for Grade ordering."""

    def test_ordering(self) -> None:
        assert Grade.A < Grade.B < Grade.C < Grade.D
        assert Grade.D >= Grade.D
        assert max(Grade.B, Grade.D, Grade.A) == Grade.D

    def test_rank(self) -> None:
        assert [g.rank for g in Grade] == [0, 1, 2, 3]

    def test_string_value(self) -> None:
        assert Grade("C") is Grade.C
        assert str(Grade.B) == "B"


class TestDetectedTracker:
    """Tests for DetectedTracker."""

    def test_defaults(self) -> None:
        tracker = DetectedTracker(url="tracker.com")
        assert tracker.network_name is None
        assert tracker.category is None
        assert tracker.blocked is False

    def test_immutable(self) -> None:
        tracker = DetectedTracker(url="tracker.com")
        with pytest.raises(pydantic.ValidationError):
            tracker.blocked = True  # type: ignore[misc]

    def test_equal_detections_compare_equal(self) -> None:
        assert DetectedTracker(url="t.com", blocked=True) == DetectedTracker(url="t.com", blocked=True)


class TestReputationEntry:
    """Tests for ReputationEntry."""

    def test_lowercase_classification_accepted(self) -> None:
        assert ReputationEntry(classification="d").classification == Classification.D

    def test_unknown_classification_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            ReputationEntry(classification="Z")

    def test_defaults(self) -> None:
        entry = ReputationEntry()
        assert entry.classification is None
        assert entry.score == 0
        assert entry.good_reasons == ()


class TestTrackerIdentity:
    """Tests for TrackerIdentity."""

    def test_category_label(self) -> None:
        identity = TrackerIdentity(url="http://x.com", network_name="X", category="Analytics")
        assert identity.category == TrackerCategory.ANALYTICS
        assert identity.category.value == "Analytics"

    def test_unknown_category_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            TrackerIdentity(url="http://x.com", category="Spyware")
