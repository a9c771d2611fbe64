"""Tests for the score scan aggregation."""

import pytest

from prscore_core.errors import TransportError
from prscore_core.models import Comment, PullRequestInfo, Trend
from prscore_core.parser import ScoreTableParser
from prscore_core.scanner import ScoreScanner

BOT = "acrolinxatmsft1"
LABEL = frozenset({"needs-human-review"})


def _row(label, total, words=10, correctness=40, clarity=22):
    return (
        f"[{label}](https://github.com/o/r/blob/abc123/{label}) | "
        f"[{total}](https://scorer.example.com/scorecards/id) | {words} | {correctness} | {clarity} |"
    )


def _bot(*rows):
    return Comment(body="\n".join(rows), author=BOT)


def _pr(number, title="Update guide", labels=LABEL):
    return PullRequestInfo(number=number, title=title, labels=labels, author="writer")


def _scanner(comments_by_pr, **config):
    return ScoreScanner(lambda n: comments_by_pr.get(n, []), ScoreTableParser(), config)


class TestScanPullRequest:
    def test_end_to_end_scenario(self):
        scanner = _scanner(
            {
                1: [
                    _bot(_row("up.md", 65), _row("down.md", 95)),
                    _bot(_row("up.md", 90), _row("down.md", 60)),
                ]
            }
        )
        report = scanner.scan_pull_request(_pr(1))

        by_path = {d.path: d for d in report.diffs}
        assert by_path["up.md"].trend is Trend.INCREASED
        assert by_path["up.md"].below_threshold is False
        assert by_path["down.md"].trend is Trend.DECREASED
        assert by_path["down.md"].below_threshold is True
        assert scanner.stats.scanned_prs == 1
        assert scanner.stats.increased == 1
        assert scanner.stats.decreased == 1
        assert scanner.stats.unchanged == 0
        assert scanner.stats.below_threshold == 1

    def test_single_snapshots_only_not_scanned(self):
        scanner = _scanner({1: [_bot(_row("a.md", 50), _row("b.md", 60))]})
        assert scanner.scan_pull_request(_pr(1)) is None
        assert scanner.stats.scanned_prs == 0
        assert scanner.stats.below_threshold == 0

    def test_single_snapshot_file_not_counted(self):
        scanner = _scanner({1: [_bot(_row("a.md", 90), _row("once.md", 10)), _bot(_row("a.md", 90))]})
        report = scanner.scan_pull_request(_pr(1))
        assert [d.path for d in report.diffs] == ["a.md"]
        assert scanner.stats.below_threshold == 0
        assert scanner.stats.unchanged == 1

    def test_no_comments_not_scanned(self):
        scanner = _scanner({})
        assert scanner.scan_pull_request(_pr(1)) is None
        assert scanner.stats.scanned_prs == 0

    def test_non_bot_comments_not_scanned(self):
        comments = [Comment(body=_row("a.md", 50), author="human"), Comment(body=_row("a.md", 90), author="human")]
        scanner = _scanner({1: comments})
        assert scanner.scan_pull_request(_pr(1)) is None

    def test_unchanged_failing_counted_in_both(self):
        scanner = _scanner({1: [_bot(_row("a.md", 70)), _bot(_row("a.md", 70))]})
        scanner.scan_pull_request(_pr(1))
        assert scanner.stats.unchanged == 1
        assert scanner.stats.below_threshold == 1

    def test_custom_min_score(self):
        scanner = _scanner({1: [_bot(_row("a.md", 85)), _bot(_row("a.md", 85))]}, min_score=90)
        report = scanner.scan_pull_request(_pr(1))
        assert report.reportable[0].below_threshold is True

    def test_custom_bot_login(self):
        comments = [Comment(body=_row("a.md", 60), author="scorer"), Comment(body=_row("a.md", 90), author="scorer")]
        scanner = _scanner({1: comments}, bot_login="scorer")
        assert scanner.scan_pull_request(_pr(1)) is not None

    def test_transport_error_propagates(self):
        def failing(number):
            raise TransportError(f"Could not fetch comments for PR #{number}")

        scanner = ScoreScanner(failing, ScoreTableParser())
        with pytest.raises(TransportError):
            scanner.scan_pull_request(_pr(3))


class TestRun:
    def test_counts_all_prs_and_filters_ineligible(self):
        comments = {
            1: [_bot(_row("a.md", 60)), _bot(_row("a.md", 90))],
            2: [_bot(_row("b.md", 60)), _bot(_row("b.md", 90))],
            3: [_bot(_row("c.md", 60)), _bot(_row("c.md", 90))],
        }
        fetched = []

        def fetch(number):
            fetched.append(number)
            return comments[number]

        scanner = ScoreScanner(fetch, ScoreTableParser())
        prs = [_pr(1), _pr(2, title="Fix typo [stale]"), _pr(3, labels=frozenset())]

        reports = list(scanner.run(prs))

        assert [r.pull_request.number for r in reports] == [1]
        assert fetched == [1]
        assert scanner.stats.total_prs == 3
        assert scanner.stats.scanned_prs == 1

    def test_scanned_but_unreportable_pr_not_yielded(self):
        scanner = _scanner({1: [_bot(_row("a.md", 90)), _bot(_row("a.md", 90))]})
        assert list(scanner.run([_pr(1)])) == []
        assert scanner.stats.scanned_prs == 1
        assert scanner.stats.unchanged == 1

    def test_report_lists_only_reportable_files(self):
        scanner = _scanner(
            {1: [_bot(_row("same.md", 90), _row("up.md", 60)), _bot(_row("same.md", 90), _row("up.md", 95))]}
        )
        (report,) = list(scanner.run([_pr(1)]))
        assert [d.path for d in report.reportable] == ["up.md"]
        assert len(report.diffs) == 2

    def test_total_changed_is_sum(self):
        comments = {
            1: [_bot(_row("a.md", 60), _row("b.md", 90)), _bot(_row("a.md", 90), _row("b.md", 70))],
            2: [_bot(_row("c.md", 50)), _bot(_row("c.md", 55))],
        }
        scanner = _scanner(comments)
        list(scanner.run([_pr(1), _pr(2)]))
        stats = scanner.stats
        assert stats.increased == 2
        assert stats.decreased == 1
        assert stats.total_changed == stats.increased + stats.decreased == 3

    def test_stops_on_transport_error(self):
        def fetch(number):
            if number == 2:
                raise TransportError("boom")
            return [_bot(_row("a.md", 60)), _bot(_row("a.md", 90))]

        scanner = ScoreScanner(fetch, ScoreTableParser())
        with pytest.raises(TransportError):
            list(scanner.run([_pr(1), _pr(2), _pr(3)]))
        assert scanner.stats.total_prs == 2
