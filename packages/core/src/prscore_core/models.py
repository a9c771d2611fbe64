"""Score scanning data models.

Plain dataclasses with no PyGithub knowledge, so the classifier and scanner
can be exercised without any network access.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


@dataclass(frozen=True)
class Score:
    """One scorecard evaluation of one file at one point in review history."""

    total_score: int
    words_phrases: int
    correctness: int
    clarity: int


@dataclass(frozen=True)
class Comment:
    """A pull request comment as delivered by the comment source."""

    body: str | None
    author: str | None


@dataclass(frozen=True)
class PullRequestInfo:
    number: int
    title: str | None
    labels: frozenset[str] = frozenset()
    author: str | None = None


@dataclass(frozen=True)
class ScoreRow:
    """A single matched scorecard table row.

    ``label`` is the row's display text and is what histories are keyed by;
    ``path`` is the repository path taken from the row's blob link.
    """

    label: str
    path: str
    score: Score


class ScoreHistory:
    """Ordered mapping of file path -> score snapshots for one pull request.

    Keys iterate in the order they were first seen and each sequence keeps
    snapshots in the order they were appended (oldest comment first).
    """

    def __init__(self) -> None:
        self._order: list[str] = []
        self._snapshots: dict[str, list[Score]] = {}

    def append(self, path: str, score: Score) -> None:
        if path not in self._snapshots:
            self._order.append(path)
            self._snapshots[path] = []
        self._snapshots[path].append(score)

    def paths(self) -> list[str]:
        return list(self._order)

    def snapshots(self, path: str) -> tuple[Score, ...]:
        return tuple(self._snapshots.get(path, ()))

    def items(self) -> Iterator[tuple[str, tuple[Score, ...]]]:
        for path in self._order:
            yield path, tuple(self._snapshots[path])

    def has_comparable_files(self) -> bool:
        """True when at least one file has two or more snapshots."""
        return any(len(scores) > 1 for scores in self._snapshots.values())

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, path: object) -> bool:
        return path in self._snapshots

    def __repr__(self) -> str:
        return f"ScoreHistory({[(p, len(self._snapshots[p])) for p in self._order]})"


class Trend(str, Enum):
    INCREASED = "increased"
    DECREASED = "decreased"
    UNCHANGED = "unchanged"


class FieldTag(str, Enum):
    """Presentation tag for a single ``first->last`` score field."""

    IMPROVED_PASSING = "improved-passing"
    IMPROVED_FAILING = "improved-failing"
    REGRESSED = "regressed"
    UNCHANGED_PASSING = "unchanged-passing"
    UNCHANGED_FAILING = "unchanged-failing"


@dataclass(frozen=True)
class FileDiff:
    """First-vs-last comparison for one file with two or more snapshots."""

    path: str
    first: Score
    last: Score
    trend: Trend
    below_threshold: bool

    @property
    def reportable(self) -> bool:
        return self.below_threshold or self.trend is not Trend.UNCHANGED


@dataclass
class PullRequestReport:
    """A scanned pull request and the comparisons made for its files."""

    pull_request: PullRequestInfo
    diffs: list[FileDiff] = field(default_factory=list)

    @property
    def reportable(self) -> list[FileDiff]:
        return [d for d in self.diffs if d.reportable]


@dataclass
class RunStatistics:
    """Run-wide counters, zeroed at start and read once for the summary."""

    total_prs: int = 0
    scanned_prs: int = 0
    below_threshold: int = 0
    increased: int = 0
    decreased: int = 0
    unchanged: int = 0

    @property
    def total_changed(self) -> int:
        return self.increased + self.decreased


@dataclass
class ChangeCounts:
    """Markdown file changes across merged pull requests."""

    added: int = 0
    modified: int = 0
    removed: int = 0
    merged_prs: int = 0
