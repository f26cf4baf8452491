"""Major tracker network registry.

Holds the handful of tracker networks seen on a large share of
the web.  A rated page whose own host is one of these domains
is graded ``D`` outright, and trackers resolving to one of
these networks weigh more than ordinary trackers.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from privacy_grade.models.tracking import MajorTrackerNetwork

DEFAULT_NETWORKS: tuple[MajorTrackerNetwork, ...] = (
    MajorTrackerNetwork(name="Google", domain="google.com", percentage_of_pages=84),
    MajorTrackerNetwork(name="Facebook", domain="facebook.com", percentage_of_pages=36),
    MajorTrackerNetwork(name="Twitter", domain="twitter.com", percentage_of_pages=16),
    MajorTrackerNetwork(name="Amazon.com", domain="amazon.com", percentage_of_pages=14),
    MajorTrackerNetwork(name="AppNexus", domain="appnexus.com", percentage_of_pages=10),
    MajorTrackerNetwork(name="Oracle", domain="oracle.com", percentage_of_pages=10),
    MajorTrackerNetwork(name="MediaMath", domain="mediamath.com", percentage_of_pages=9),
    MajorTrackerNetwork(name="Yahoo!", domain="yahoo.com", percentage_of_pages=9),
    MajorTrackerNetwork(name="MaxCDN", domain="maxcdn.com", percentage_of_pages=7),
    MajorTrackerNetwork(name="Automattic", domain="automattic.com", percentage_of_pages=7),
)


class MajorNetworkStore(Protocol):
    """Anything that can answer major-network membership queries."""

    def contains(self, domain: str) -> MajorTrackerNetwork | None:
        """Return the network whose domain is exactly *domain*."""
        ...

    def network_named(self, name: str) -> MajorTrackerNetwork | None:
        """Return the network whose display name is *name*."""
        ...


class InMemoryMajorNetworkStore:
    """Immutable in-memory major network registry.

    Uses :data:`DEFAULT_NETWORKS` when no list is given.  Pass an
    empty iterable for a registry with no major networks.
    """

    def __init__(self, networks: Iterable[MajorTrackerNetwork] | None = None) -> None:
        self._networks = tuple(DEFAULT_NETWORKS if networks is None else networks)
        self._by_domain = {n.domain.lower(): n for n in self._networks}
        self._by_name = {n.name.lower(): n for n in self._networks}

    @property
    def networks(self) -> tuple[MajorTrackerNetwork, ...]:
        return self._networks

    def adding(self, network: MajorTrackerNetwork) -> InMemoryMajorNetworkStore:
        """Return a new store holding this store's networks plus *network*."""
        return InMemoryMajorNetworkStore((*self._networks, network))

    def contains(self, domain: str) -> MajorTrackerNetwork | None:
        return self._by_domain.get(domain.lower())

    def network_named(self, name: str) -> MajorTrackerNetwork | None:
        return self._by_name.get(name.lower())

    def __len__(self) -> int:
        return len(self._networks)
