"""Site grade scoring package.

Decomposes the grade calculation into focused modules, one per
scoring term (transport, reputation, trackers).  The public API
is :func:`calculate_site_score` and :func:`grade_for_score`.
"""

from __future__ import annotations

from privacy_grade.analysis.scoring.calculator import apply_cached_baseline, calculate_site_score, grade_for_score

__all__ = ["apply_cached_baseline", "calculate_site_score", "grade_for_score"]
