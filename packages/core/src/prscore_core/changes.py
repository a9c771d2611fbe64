"""Count Markdown files added, modified and removed by recently merged PRs."""

from __future__ import annotations

import calendar
import logging
from datetime import datetime, timezone

from prscore_core.gh.pull_request import get_changed_files, get_closed_pull_page
from prscore_core.models import ChangeCounts
from prscore_core.utils.paths import is_markdown_file

logger = logging.getLogger(__name__)

_COUNTED_STATUSES = ("added", "modified", "removed")


def months_ago(now: datetime, months: int) -> datetime:
    """Step back whole calendar months, clamping to the last day of the month."""
    month_index = now.year * 12 + (now.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def _merged_before(pr, cutoff: datetime) -> bool:
    # Unmerged PRs never count as "before" the cut-off.
    return pr.merged_at is not None and _as_utc(pr.merged_at) < cutoff


def count_markdown_changes(
    repo,
    base: str = "main",
    since: datetime | None = None,
    months: int = 3,
) -> ChangeCounts:
    """Tally Markdown file statuses across PRs merged into ``base`` since the cut-off.

    Pages are read until one comes back empty or every PR on it was merged
    before the cut-off.
    """
    cutoff = _as_utc(since) if since else months_ago(datetime.now(timezone.utc), months)
    counts = ChangeCounts()
    page = 0

    while True:
        pulls = get_closed_pull_page(repo, base, page)
        page += 1
        if not pulls or all(_merged_before(pr, cutoff) for pr in pulls):
            break

        for pr in pulls:
            if pr.merged_at is None or _merged_before(pr, cutoff):
                continue
            counts.merged_prs += 1
            for f in get_changed_files(pr):
                if not is_markdown_file(f.filename):
                    continue
                if f.status in _COUNTED_STATUSES:
                    setattr(counts, f.status, getattr(counts, f.status) + 1)

        logger.debug("Processed page %d of closed PRs into %s", page, base)

    return counts
