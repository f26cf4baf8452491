"""Rating cache shared between related page contexts.

Stores the last :class:`CacheEntry` computed for a URL so that a
subresource or iframe context, or a reload that observes fewer
trackers, can borrow the score instead of recomputing it from an
empty tracker set.

Keys are ``scheme://host/path`` (scheme and host lowercased,
query and fragment ignored).  There is no expiry or eviction;
``reset`` clears everything.  One lock serializes every
operation, so a lookup never sees a half-written entry.
"""

from __future__ import annotations

import threading

from privacy_grade.models.analysis import CacheEntry
from privacy_grade.utils import logger, url

log = logger.create_logger("RatingCache")


class RatingCache:
    """Thread-safe, URL-keyed store of rating snapshots.

    Construct one per application context and pass it to every
    :class:`~privacy_grade.analysis.site_rating.SiteRating` that
    should share it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, CacheEntry] = {}

    def add(self, page_url: str, entry: CacheEntry) -> CacheEntry | None:
        """Store *entry* for *page_url*, returning the entry it replaced."""
        key = url.cache_key(page_url)
        with self._lock:
            previous = self._entries.get(key)
            self._entries[key] = entry
        log.debug(
            "Rating cached",
            {"key": key, "score": entry.score, "replaced": previous is not None},
        )
        return previous

    def lookup(self, page_url: str) -> CacheEntry | None:
        """Return the entry cached for *page_url*, if any."""
        key = url.cache_key(page_url)
        with self._lock:
            return self._entries.get(key)

    def reset(self) -> int:
        """Remove every entry.  Returns the number of entries removed."""
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
        log.info("Rating cache cleared", {"entriesRemoved": removed})
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, page_url: object) -> bool:
        if not isinstance(page_url, str):
            return False
        return self.lookup(page_url) is not None
