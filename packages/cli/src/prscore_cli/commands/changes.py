"""changes command — count Markdown files touched by recently merged PRs."""

from __future__ import annotations

import click

from prscore_core.changes import count_markdown_changes
from prscore_core.errors import PrScoreError
from prscore_core.gh.pull_request import get_repo
from prscore_cli import render
from prscore_cli.commands.common import load_command_config, parse_repo_arg


@click.command("changes")
@click.argument("repo")
@click.option("--base", default=None, help="Branch the PRs were merged into. Overrides config file.  [default: main]")
@click.option(
    "--months",
    type=click.IntRange(min=1),
    default=None,
    help="How many months back to look. Overrides config file.  [default: 3]",
)
@click.pass_context
def changes_cmd(ctx, repo: str, base: str | None, months: int | None):
    """Count added, updated and deleted Markdown files merged into a branch."""
    config = load_command_config(ctx, {"changes_base": base, "changes_months": months})
    owner, name = parse_repo_arg(repo, config["default_owner"])

    render.console.print(f"Running on {owner}/{name}", highlight=False)

    try:
        this_repo = get_repo(f"{owner}/{name}", token=config["github_token"])
        counts = count_markdown_changes(
            this_repo,
            base=config["changes_base"],
            months=config["changes_months"],
        )
    except PrScoreError as e:
        render.print_error(e)
        ctx.exit(1)

    render.print_change_counts(counts)
