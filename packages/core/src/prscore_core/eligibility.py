"""Decide whether a pull request should be scanned for score changes."""

from __future__ import annotations

from typing import Iterable

DEFAULT_STOP_MARKERS = ("[stale]", "do not merge", "do not publish")
DEFAULT_REQUIRED_LABEL = "needs-human-review"


def is_pr_eligible(
    title: str | None,
    labels: Iterable[str] | None,
    stop_markers: Iterable[str] = DEFAULT_STOP_MARKERS,
    required_label: str = DEFAULT_REQUIRED_LABEL,
) -> bool:
    """Return True if the PR should be scanned.

    A stop marker anywhere in the title rejects the PR even when the required
    label is present. Both checks are case-insensitive.
    """
    folded_title = (title or "").casefold()
    if any(marker.casefold() in folded_title for marker in stop_markers):
        return False

    wanted = required_label.casefold()
    return any((label or "").casefold() == wanted for label in labels or ())
