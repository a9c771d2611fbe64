"""Helpers shared by the scan commands."""

from __future__ import annotations

import click

from prscore_core.config import load_config
from prscore_core.errors import ConfigError
from prscore_cli.auth import resolve_github_token


def parse_repo_arg(value: str, default_owner: str) -> tuple[str, str]:
    """Split ``owner/name`` (or a bare ``name``) into its two parts."""
    parts = value.strip().split("/")
    if len(parts) == 1 and parts[0]:
        return default_owner, parts[0]
    if len(parts) == 2 and all(parts):
        return parts[0], parts[1]
    raise click.BadParameter(f"expected OWNER/REPO or REPO, got {value!r}", param_hint="REPO")


def load_command_config(ctx: click.Context, overrides: dict) -> dict:
    """Load config for a subcommand and attach a resolved GitHub token."""
    config_path = (ctx.obj or {}).get("config_path", ".prscore.yml")
    try:
        config = load_config(config_path, cli_overrides=overrides)
    except ConfigError as e:
        raise click.UsageError(str(e))

    token = resolve_github_token()
    if not token:
        raise click.UsageError(
            "No GitHub token found. Set GITHUB_TOKEN or run `gh auth login` first.\n"
            "Create a token at https://github.com/settings/tokens"
        )
    config["github_token"] = token
    return config
