"""First-vs-last score comparison.

Everything here is a pure function of its inputs; colouring and layout live
in the CLI's render module.
"""

from __future__ import annotations

from prscore_core.models import FieldTag, FileDiff, Score, ScoreHistory, Trend

DEFAULT_MIN_SCORE = 80


def classify_trend(first_total: int, last_total: int) -> Trend:
    if first_total > last_total:
        return Trend.DECREASED
    if first_total < last_total:
        return Trend.INCREASED
    return Trend.UNCHANGED


def diff_scores(path: str, first: Score, last: Score, min_score: int = DEFAULT_MIN_SCORE) -> FileDiff:
    return FileDiff(
        path=path,
        first=first,
        last=last,
        trend=classify_trend(first.total_score, last.total_score),
        below_threshold=last.total_score < min_score,
    )


def classify_history(history: ScoreHistory, min_score: int = DEFAULT_MIN_SCORE) -> list[FileDiff]:
    """Compare the first and last snapshot of every file seen at least twice.

    Intermediate snapshots are ignored. Files with a single snapshot are
    omitted from the result.
    """
    diffs = []
    for path, scores in history.items():
        if len(scores) < 2:
            continue
        diffs.append(diff_scores(path, scores[0], scores[-1], min_score))
    return diffs


def tag_field(first: int, last: int, min_score: int = DEFAULT_MIN_SCORE) -> FieldTag:
    """Tag a single ``first->last`` field for presentation."""
    passing = last >= min_score
    if last > first:
        return FieldTag.IMPROVED_PASSING if passing else FieldTag.IMPROVED_FAILING
    if first > last:
        return FieldTag.REGRESSED
    return FieldTag.UNCHANGED_PASSING if passing else FieldTag.UNCHANGED_FAILING


def field_changes(diff: FileDiff, min_score: int = DEFAULT_MIN_SCORE) -> list[tuple[str, int, int, FieldTag]]:
    """Return ``(label, first, last, tag)`` for each of the four score fields."""
    pairs = [
        ("Total", diff.first.total_score, diff.last.total_score),
        ("Words", diff.first.words_phrases, diff.last.words_phrases),
        ("Correctness", diff.first.correctness, diff.last.correctness),
        ("Clarity", diff.first.clarity, diff.last.clarity),
    ]
    return [(label, first, last, tag_field(first, last, min_score)) for label, first, last in pairs]
