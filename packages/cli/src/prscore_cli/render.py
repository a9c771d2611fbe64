"""Terminal and JSON presentation of scan results.

Consumes the pure values produced by prscore_core; nothing in the core knows
about colours or output formats.
"""

from __future__ import annotations

import json
from dataclasses import asdict

import click
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from prscore_core.classifier import field_changes
from prscore_core.models import ChangeCounts, FieldTag, FileDiff, PullRequestReport, RunStatistics
from prscore_core.utils.paths import base_name

console = Console()
err_console = Console(stderr=True)

RULE = "-" * 80

_TAG_STYLE = {
    FieldTag.IMPROVED_PASSING: "green",
    FieldTag.IMPROVED_FAILING: "yellow",
    FieldTag.REGRESSED: "red",
    FieldTag.UNCHANGED_PASSING: "white",
    FieldTag.UNCHANGED_FAILING: "yellow",
}


def report_header(report: PullRequestReport) -> str:
    pr = report.pull_request
    title = (pr.title or "").strip()
    return f'{pr.number}: "{title}" by {pr.author or "unknown"}'


def file_line(diff: FileDiff, min_score: int) -> Text:
    line = Text(f"{base_name(diff.path)}: ")
    for label, first, last, tag in field_changes(diff, min_score):
        line.append(f"{label}: ")
        line.append(f"{first}->{last}", style=_TAG_STYLE[tag])
        line.append(" ")
    return line


def print_report(report: PullRequestReport, min_score: int) -> None:
    console.print()
    console.print(report_header(report), markup=False, highlight=False, soft_wrap=True)
    console.print(RULE, markup=False, highlight=False)
    for diff in report.reportable:
        console.print(file_line(diff, min_score), highlight=False, soft_wrap=True)


def summary_lines(stats: RunStatistics, min_score: int) -> list[str]:
    return [
        f"Scanned {stats.scanned_prs} of {stats.total_prs} PRs",
        f"  {stats.below_threshold} files have less than {min_score}",
        f"  {stats.decreased} files have scores that went down",
        f"  {stats.increased} files have scores that went up",
        f"  {stats.unchanged} files have scores that didn't change",
        f"  Total scores changed = {stats.total_changed}",
    ]


def print_summary(stats: RunStatistics, min_score: int) -> None:
    console.print()
    for line in summary_lines(stats, min_score):
        console.print(f"[bold]{escape(line)}[/bold]", highlight=False, soft_wrap=True)


def build_json_payload(reports: list[PullRequestReport], stats: RunStatistics, min_score: int) -> dict:
    return {
        "min_score": min_score,
        "reports": [
            {
                "number": r.pull_request.number,
                "title": r.pull_request.title,
                "author": r.pull_request.author,
                "files": [
                    {
                        "path": d.path,
                        "trend": d.trend.value,
                        "below_threshold": d.below_threshold,
                        "first": asdict(d.first),
                        "last": asdict(d.last),
                    }
                    for d in r.reportable
                ],
            }
            for r in reports
        ],
        "summary": {**asdict(stats), "total_changed": stats.total_changed},
    }


def print_json(reports: list[PullRequestReport], stats: RunStatistics, min_score: int) -> None:
    click.echo(json.dumps(build_json_payload(reports, stats, min_score), indent=2))


def print_change_counts(counts: ChangeCounts) -> None:
    console.print(f"New Files: {counts.added}", highlight=False)
    console.print(f"Updated Files: {counts.modified}", highlight=False)
    console.print(f"Deleted Files: {counts.removed}", highlight=False)


def print_error(exc: BaseException) -> None:
    """Print an error and, when present, the exception it was raised from."""
    err_console.print(f"[red]{escape(str(exc))}[/red]", soft_wrap=True)
    cause = exc.__cause__
    if cause is not None:
        err_console.print(escape(str(cause)), soft_wrap=True)
