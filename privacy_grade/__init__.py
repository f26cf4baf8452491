"""Privacy grading for visited sites.

Folds transport security, detected third-party trackers, a
terms-of-service reputation registry and a major tracker
network registry into an A–D grade, both without protection
(*before*) and with tracker blocking engaged (*after*).
"""

from __future__ import annotations

from privacy_grade.analysis.rating_cache import RatingCache
from privacy_grade.analysis.site_rating import SiteRating
from privacy_grade.config import GradingConfig, get_config
from privacy_grade.models.grade import Grade

__all__ = ["Grade", "GradingConfig", "RatingCache", "SiteRating", "get_config"]
