"""camelCase aliasing for snapshot and breakdown models.

Cache snapshots and score breakdowns are exchanged with hosts
that expect camelCase keys (``uniqueTrackerNetworksDetected``,
``forcedByMajorNetwork``).  The models in
:mod:`privacy_grade.models.analysis` set ``alias_generator=snake_to_camel``
and ``populate_by_name=True`` so Python code keeps snake_case
field names while ``model_dump(by_alias=True)`` emits camelCase.
"""

from __future__ import annotations


def snake_to_camel(name: str) -> str:
    """Convert a snake_case field name to its camelCase alias.

    Args:
        name: A snake_case identifier such as
            ``"unique_major_tracker_networks_blocked"``.

    Returns:
        The camelCase equivalent, e.g.
        ``"uniqueMajorTrackerNetworksBlocked"``.
    """
    head, *rest = name.split("_")
    return head + "".join(w.capitalize() for w in rest)
