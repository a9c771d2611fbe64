from __future__ import annotations

import logging
from typing import Callable, Iterator

import requests
from github import Auth, Github, GithubException

from prscore_core.errors import TransportError
from prscore_core.models import Comment, PullRequestInfo

logger = logging.getLogger(__name__)

PAGE_SIZE = 100

# PyGithub raises GithubException for API errors and lets requests errors
# (DNS, connection resets, timeouts) through untouched.
TRANSPORT_ERRORS = (GithubException, requests.RequestException)


def get_repo(repo_name: str, token: str):
    try:
        return Github(auth=Auth.Token(token), per_page=PAGE_SIZE).get_repo(repo_name)
    except TRANSPORT_ERRORS as e:
        raise TransportError(f"Could not open repository {repo_name}") from e


def to_pull_request_info(pr) -> PullRequestInfo:
    return PullRequestInfo(
        number=pr.number,
        title=pr.title,
        labels=frozenset(label.name for label in pr.labels or ()),
        author=pr.user.login if pr.user else None,
    )


def iter_pull_requests(repo, state: str = "open") -> Iterator[PullRequestInfo]:
    """Yield pull requests page by page, as GitHub returns them."""
    try:
        for pr in repo.get_pulls(state=state):
            yield to_pull_request_info(pr)
    except TRANSPORT_ERRORS as e:
        raise TransportError(f"Could not list {state} pull requests for {repo.full_name}") from e


def get_comments(repo, pr_number: int) -> list[Comment]:
    """Return a PR's conversation comments, oldest first."""
    try:
        return [
            Comment(body=c.body, author=c.user.login if c.user else None)
            for c in repo.get_issue(pr_number).get_comments()
        ]
    except TRANSPORT_ERRORS as e:
        raise TransportError(f"Could not fetch comments for PR #{pr_number}") from e


def make_comment_fetcher(repo) -> Callable[[int], list[Comment]]:
    def fetch_comments(pr_number: int) -> list[Comment]:
        logger.debug("Fetching comments for PR #%d", pr_number)
        return get_comments(repo, pr_number)

    return fetch_comments


def get_closed_pull_page(repo, base: str, page: int) -> list:
    """Return one page (0-based) of closed PRs targeting ``base``."""
    try:
        return list(repo.get_pulls(state="closed", base=base).get_page(page))
    except TRANSPORT_ERRORS as e:
        raise TransportError(f"Could not list closed pull requests on page {page + 1}") from e


def get_changed_files(pr) -> list:
    try:
        return list(pr.get_files())
    except TRANSPORT_ERRORS as e:
        raise TransportError(f"Could not fetch changed files for PR #{pr.number}") from e
