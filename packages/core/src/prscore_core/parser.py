"""Extract scorecard rows from review-bot comment bodies.

The review bot posts a Markdown table with one row per checked article:

    Article | Total score<br>(Required: 80) | Words + phrases<br>(Brand, terms) | Correctness<br>(Spelling, grammar) | Clarity<br>(Readability)
    [intro.md](https://github.com/o/r/blob/abc123/intro.md) | [72](https://host/api/v1/checking/scorecards/xyz) | 10 | 40 | 22 |

Parsing happens in two stages: every non-overlapping row is matched, then rows
whose label is not a Markdown file are dropped. Neither stage treats
malformed text as an error.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from prscore_core.models import Score, ScoreRow
from prscore_core.utils.paths import is_markdown_file

logger = logging.getLogger(__name__)

_ANY_SEGMENT = r"[^/\s)]+"


def build_row_pattern(owner: str | None = None, repo: str | None = None) -> re.Pattern:
    """Compile the table-row pattern, optionally pinned to one repository.

    GitHub owner and repository names are case-insensitive, so the pinned
    segments are too.
    """
    owner_re = f"(?i:{re.escape(owner)})" if owner else _ANY_SEGMENT
    repo_re = f"(?i:{re.escape(repo)})" if repo else _ANY_SEGMENT
    return re.compile(
        r"\[(?P<label>[^\]]+)\]"
        rf"\(https://github\.com/{owner_re}/{repo_re}/blob/[a-zA-Z0-9]+/(?P<path>[^)\s]+)\)"
        r" \| \[(?P<total>\d+)\]\(https?://[^)\s]*/scorecards/[a-zA-Z0-9-]+\)"
        r" \| (?P<words>\d+) \| (?P<correctness>\d+) \| (?P<clarity>\d+) \|"
    )


class ScoreTableParser:
    """Turns one comment body into scorecard rows for Markdown files."""

    def __init__(self, owner: str | None = None, repo: str | None = None):
        self._pattern = build_row_pattern(owner, repo)

    def _match_rows(self, body: str) -> Iterator[ScoreRow]:
        for match in self._pattern.finditer(body):
            # int() errors propagate: the pattern only captures digits, so a
            # failure here means the pattern itself has drifted.
            yield ScoreRow(
                label=match.group("label"),
                path=match.group("path"),
                score=Score(
                    total_score=int(match.group("total")),
                    words_phrases=int(match.group("words")),
                    correctness=int(match.group("correctness")),
                    clarity=int(match.group("clarity")),
                ),
            )

    def iter_rows(self, body: str | None) -> Iterator[ScoreRow]:
        """Yield every Markdown scorecard row in ``body``, in text order."""
        if not body:
            return
        for row in self._match_rows(body):
            if not is_markdown_file(row.label):
                logger.debug("Skipping non-Markdown scorecard row for %s", row.label)
                continue
            yield row

    def parse(self, body: str | None) -> Iterator[tuple[str, Score]]:
        """Yield ``(file_path, Score)`` pairs found in ``body``."""
        for row in self.iter_rows(body):
            yield row.label, row.score
