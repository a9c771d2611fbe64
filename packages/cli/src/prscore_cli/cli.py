"""CLI entry point for prscore.

Commands:
  scores   — compare first and last scorecards on pull requests
  changes  — count Markdown files added, updated and deleted by merged PRs
"""

from __future__ import annotations

import importlib.metadata
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from prscore_cli.commands.changes import changes_cmd
from prscore_cli.commands.scores import scores_cmd


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(
    version=importlib.metadata.version("prscore"),
    prog_name="prscore",
)
@click.option(
    "--config",
    "config_path",
    default=".prscore.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="PRSCORE_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """Audit documentation pull requests for quality-score regressions."""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


main.add_command(scores_cmd)
main.add_command(changes_cmd)
