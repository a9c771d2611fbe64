"""Score regression scan over a sequence of pull requests."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator

from prscore_core.classifier import classify_history
from prscore_core.config import DEFAULT_CONFIG
from prscore_core.eligibility import is_pr_eligible
from prscore_core.history import build_score_history
from prscore_core.models import Comment, FileDiff, PullRequestInfo, PullRequestReport, RunStatistics, Trend
from prscore_core.parser import ScoreTableParser

logger = logging.getLogger(__name__)

CommentFetcher = Callable[[int], list[Comment]]


class ScoreScanner:
    """Walks pull requests one at a time and accumulates RunStatistics.

    ``fetch_comments`` is the comment source: given a PR number it returns
    that PR's comments oldest first, or raises TransportError. Nothing is
    retried and nothing is kept between pull requests except ``stats``.
    """

    def __init__(self, fetch_comments: CommentFetcher, parser: ScoreTableParser, config: dict | None = None):
        config = {**DEFAULT_CONFIG, **(config or {})}
        self._fetch_comments = fetch_comments
        self._parser = parser
        self.min_score: int = config["min_score"]
        self.bot_login: str = config["bot_login"]
        self.required_label: str = config["required_label"]
        self.stop_markers: list[str] = list(config["stop_markers"])
        self.stats = RunStatistics()

    def is_eligible(self, pr: PullRequestInfo) -> bool:
        return is_pr_eligible(pr.title, pr.labels, self.stop_markers, self.required_label)

    def _record(self, diff: FileDiff) -> None:
        if diff.below_threshold:
            self.stats.below_threshold += 1
        if diff.trend is Trend.DECREASED:
            self.stats.decreased += 1
        elif diff.trend is Trend.INCREASED:
            self.stats.increased += 1
        else:
            self.stats.unchanged += 1

    def scan_pull_request(self, pr: PullRequestInfo) -> PullRequestReport | None:
        """Scan one PR and update the counters.

        Returns None, leaving the counters untouched, when no file has at
        least two bot snapshots to compare.
        """
        comments = self._fetch_comments(pr.number)
        if not comments:
            return None

        history = build_score_history(comments, self.bot_login, self._parser)
        if not history.has_comparable_files():
            logger.debug("PR #%d has no file with two or more scorecards", pr.number)
            return None

        diffs = classify_history(history, self.min_score)
        self.stats.scanned_prs += 1
        for diff in diffs:
            self._record(diff)
        return PullRequestReport(pull_request=pr, diffs=diffs)

    def run(self, pull_requests: Iterable[PullRequestInfo]) -> Iterator[PullRequestReport]:
        """Scan eligible PRs in order, yielding those with reportable files."""
        for pr in pull_requests:
            self.stats.total_prs += 1
            if not self.is_eligible(pr):
                logger.debug("Skipping ineligible PR #%d", pr.number)
                continue
            report = self.scan_pull_request(pr)
            if report is not None and report.reportable:
                yield report
