"""Terms-of-service reputation registry.

Maps a site domain to its :class:`ReputationEntry`.  Matching
is an exact, case-insensitive domain comparison; there is no
suffix or subdomain matching.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from privacy_grade.models.reputation import Classification, ReputationEntry


class ReputationStore(Protocol):
    """Anything that can look up a domain's reputation."""

    def lookup(self, domain: str) -> ReputationEntry | None:
        """Return the entry for *domain*, or ``None`` when unknown."""
        ...


class InMemoryReputationStore:
    """Dict-backed reputation registry.

    ``add`` returns the store itself so test setups can chain
    several entries in one expression.
    """

    def __init__(self, entries: Mapping[str, ReputationEntry] | None = None) -> None:
        self._entries: dict[str, ReputationEntry] = {
            domain.lower(): entry for domain, entry in (entries or {}).items()
        }

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Mapping[str, Any]]) -> InMemoryReputationStore:
        """Build a store from decoded JSON, e.g. ``{"x.com": {"score": 5}}``.

        Raises:
            pydantic.ValidationError: If an entry is malformed.
        """
        return cls({domain: ReputationEntry.model_validate(val) for domain, val in raw.items()})

    def add(
        self,
        domain: str,
        classification: Classification | str | None = None,
        score: int = 0,
        good_reasons: tuple[str, ...] = (),
        bad_reasons: tuple[str, ...] = (),
    ) -> InMemoryReputationStore:
        """Register (or replace) the entry for *domain*."""
        self._entries[domain.lower()] = ReputationEntry(
            classification=classification,
            score=score,
            good_reasons=good_reasons,
            bad_reasons=bad_reasons,
        )
        return self

    def lookup(self, domain: str) -> ReputationEntry | None:
        return self._entries.get(domain.lower())

    def __len__(self) -> int:
        return len(self._entries)
