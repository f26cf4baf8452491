"""Read-only lookup registries consulted while grading a site.

Each registry is a :class:`typing.Protocol` with an in-memory
implementation; callers inject whichever variant they load.
"""

from __future__ import annotations

from privacy_grade.registries.major_networks import InMemoryMajorNetworkStore, MajorNetworkStore
from privacy_grade.registries.reputation import InMemoryReputationStore, ReputationStore
from privacy_grade.registries.tracker_identity import InMemoryTrackerIdentityStore, TrackerIdentityStore

__all__ = [
    "InMemoryMajorNetworkStore",
    "InMemoryReputationStore",
    "InMemoryTrackerIdentityStore",
    "MajorNetworkStore",
    "ReputationStore",
    "TrackerIdentityStore",
]
