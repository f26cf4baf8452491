"""
URL and host utility functions for site rating.
"""

from __future__ import annotations

import ipaddress
from urllib import parse

from privacy_grade.utils import errors, logger

log = logger.create_logger("URL")

SECURE_SCHEME = "https"


def _split(url: str) -> parse.SplitResult | None:
    """Split *url*, treating a scheme-less value as ``//host/path``.

    Detection events frequently carry a bare host such as
    ``"tracker.com"`` or ``"tracker.com/pixel.gif"``; without the
    leading ``//`` ``urlsplit`` would read the whole thing as a path.
    """
    candidate = url.strip()
    if not candidate:
        return None
    if "://" not in candidate and not candidate.startswith("//"):
        candidate = f"//{candidate}"
    try:
        parts = parse.urlsplit(candidate)
        # Accessing .port validates the netloc (raises on garbage like ":x").
        parts.port  # noqa: B018
    except ValueError as exc:
        log.debug("Unparseable URL", {"url": url, "error": errors.get_error_message(exc)})
        return None
    return parts


def extract_host(url: str) -> str | None:
    """Extract the lowercased hostname from a URL or bare host.

    Returns ``None`` when nothing usable can be parsed.
    """
    parts = _split(url)
    if parts is None or not parts.hostname:
        return None
    return parts.hostname.lower()


def extract_scheme(url: str) -> str:
    """Return the lowercased scheme of *url*, or ``""`` when absent."""
    parts = _split(url)
    if parts is None:
        return ""
    return parts.scheme.lower()


def is_secure(url: str) -> bool:
    """True when *url* uses the secure transport."""
    return extract_scheme(url) == SECURE_SCHEME


def is_ip_literal(host: str) -> bool:
    """True when *host* is an IPv4 or IPv6 address rather than a name."""
    try:
        ipaddress.ip_address(host.strip("[]"))
    except ValueError:
        return False
    return True


def cache_key(url: str) -> str:
    """Build the rating cache key for *url*.

    Scheme and host are lowercased; query, fragment and port are
    ignored, so ``https://Example.com/a?x=1`` and
    ``https://example.com/a`` share one key.  An unparseable URL
    is used verbatim.
    """
    parts = _split(url)
    if parts is None or not parts.hostname:
        return url
    scheme = parts.scheme.lower()
    prefix = f"{scheme}://" if scheme else "//"
    return f"{prefix}{parts.hostname.lower()}{parts.path}"
