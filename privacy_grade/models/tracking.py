"""Pydantic models for detected trackers and tracker registries."""

from __future__ import annotations

import enum

import pydantic


class TrackerCategory(enum.StrEnum):
    """Disconnect-style tracker category; the value is the display label."""

    ADVERTISING = "Advertising"
    ANALYTICS = "Analytics"
    CONTENT = "Content"
    SOCIAL = "Social"
    DISCONNECT = "Disconnect"


class DetectedTracker(pydantic.BaseModel):
    """One observed third-party request reported by the blocking pipeline.

    ``url`` may be a full URL, a bare host or an IP-literal
    endpoint.  ``network_name`` and ``category`` are filled in by
    the detector when it already knows the owner.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    url: str
    network_name: str | None = None
    category: str | None = None
    blocked: bool = False


class TrackerIdentity(pydantic.BaseModel):
    """Disconnect-style registry entry for a tracker domain."""

    model_config = pydantic.ConfigDict(frozen=True)

    url: str
    network_name: str | None = None
    category: TrackerCategory | None = None


class MajorTrackerNetwork(pydantic.BaseModel):
    """A tracker network with broad web-wide prevalence."""

    model_config = pydantic.ConfigDict(frozen=True)

    name: str
    domain: str
    percentage_of_pages: int = pydantic.Field(ge=0, le=100)
