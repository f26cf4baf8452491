"""Ordinal site grade."""

from __future__ import annotations

import enum


class Grade(enum.StrEnum):
    """Letter grade for a site, ``A`` (least exposure) to ``D`` (most).

    Grades compare by severity, so ``Grade.A < Grade.D``.
    """

    A = "A"
    B = "B"
    C = "C"
    D = "D"

    @property
    def rank(self) -> int:
        """Zero-based severity, 0 for ``A`` through 3 for ``D``."""
        return list(Grade).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Grade):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Grade):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Grade):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Grade):
            return NotImplemented
        return self.rank >= other.rank
