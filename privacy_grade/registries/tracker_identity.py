"""Disconnect-style tracker identity registry.

Resolves a tracker domain to its owning network and category
when the detection event did not carry them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from privacy_grade.models.tracking import TrackerIdentity


class TrackerIdentityStore(Protocol):
    """Anything that can resolve a tracker domain to its identity."""

    def lookup(self, tracker_domain: str) -> TrackerIdentity | None:
        """Return the identity for *tracker_domain*, or ``None``."""
        ...


class InMemoryTrackerIdentityStore:
    """Dict-backed tracker identity registry (case-insensitive keys)."""

    def __init__(self, entries: Mapping[str, TrackerIdentity] | None = None) -> None:
        self._entries: dict[str, TrackerIdentity] = {
            domain.lower(): identity for domain, identity in (entries or {}).items()
        }

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Mapping[str, Any]]) -> InMemoryTrackerIdentityStore:
        """Build a store from decoded JSON keyed by tracker domain.

        Raises:
            pydantic.ValidationError: If an entry is malformed.
        """
        return cls({domain: TrackerIdentity.model_validate(val) for domain, val in raw.items()})

    def lookup(self, tracker_domain: str) -> TrackerIdentity | None:
        return self._entries.get(tracker_domain.lower())

    def __len__(self) -> int:
        return len(self._entries)
