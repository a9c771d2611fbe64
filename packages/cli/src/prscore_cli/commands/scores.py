"""scores command — report scorecard regressions on a repository's pull requests."""

from __future__ import annotations

import click

from prscore_core.errors import PrScoreError
from prscore_core.gh.pull_request import get_repo, iter_pull_requests, make_comment_fetcher
from prscore_core.parser import ScoreTableParser
from prscore_core.scanner import ScoreScanner
from prscore_cli import render
from prscore_cli.commands.common import load_command_config, parse_repo_arg


@click.command("scores")
@click.argument("repo")
@click.option(
    "--min-score",
    type=click.IntRange(min=0),
    default=None,
    help="Passing total score. Overrides config file.  [default: 80]",
)
@click.option("--bot-login", default=None, help="Login of the account that posts scorecards. Overrides config file.")
@click.option(
    "--state",
    "pr_state",
    type=click.Choice(["open", "closed", "all"]),
    default=None,
    help="Which pull requests to scan. Overrides config file.  [default: open]",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.pass_context
def scores_cmd(
    ctx,
    repo: str,
    min_score: int | None,
    bot_login: str | None,
    pr_state: str | None,
    output_format: str,
):
    """Compare first and last scorecards on each pull request in REPO.

    REPO is OWNER/NAME, or just NAME to use the configured default owner.
    Only PRs labelled needs-human-review and not marked stale or do-not-merge
    are scanned. Files whose score moved, or whose latest total is below the
    minimum, are listed per PR, followed by run totals.
    """
    config = load_command_config(
        ctx, {"min_score": min_score, "bot_login": bot_login, "pr_state": pr_state}
    )
    owner, name = parse_repo_arg(repo, config["default_owner"])
    min_score = config["min_score"]

    if output_format == "text":
        render.console.print(f"Running on {owner}/{name}", highlight=False)

    try:
        this_repo = get_repo(f"{owner}/{name}", token=config["github_token"])
        scanner = ScoreScanner(make_comment_fetcher(this_repo), ScoreTableParser(owner, name), config)
        reports = scanner.run(iter_pull_requests(this_repo, state=config["pr_state"]))

        if output_format == "json":
            render.print_json(list(reports), scanner.stats, min_score)
            return

        for report in reports:
            render.print_report(report, min_score)
    except PrScoreError as e:
        render.print_error(e)
        ctx.exit(1)

    render.print_summary(scanner.stats, min_score)
