from __future__ import annotations

from typing import Iterable

from prscore_core.models import Comment, ScoreHistory
from prscore_core.parser import ScoreTableParser


def build_score_history(comments: Iterable[Comment], bot_login: str, parser: ScoreTableParser) -> ScoreHistory:
    """Group the bot's scorecard rows by file, oldest comment first.

    Comments by anyone other than ``bot_login`` and comments without a body
    contribute nothing.
    """
    history = ScoreHistory()
    for comment in comments:
        if comment.author != bot_login or not comment.body:
            continue
        for file_path, score in parser.parse(comment.body):
            history.append(file_path, score)
    return history
