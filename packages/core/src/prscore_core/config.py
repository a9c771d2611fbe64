import os
from pathlib import Path
from typing import Optional

import yaml

from prscore_core.errors import ConfigError

DEFAULT_CONFIG: dict = {
    "min_score": 80,
    "bot_login": "acrolinxatmsft1",  # author of the scorecard comments
    "required_label": "needs-human-review",
    "stop_markers": ["[stale]", "do not merge", "do not publish"],
    "pr_state": "open",
    "default_owner": "MicrosoftDocs",  # used when the repo argument has no owner
    "changes_base": "main",
    "changes_months": 3,
}


def load_config(config_path: str = ".prscore.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .prscore.yml in the current directory
      3. CLI argument overrides
    """
    config = {**DEFAULT_CONFIG, "stop_markers": list(DEFAULT_CONFIG["stop_markers"])}

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        if not isinstance(file_config, dict):
            raise ConfigError(f"{config_path} must contain a mapping of settings, got {type(file_config).__name__}")
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    _validate(config)
    config["github_token"] = os.environ.get("GITHUB_TOKEN")

    return config


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate(config: dict) -> None:
    min_score = config["min_score"]
    if not _is_int(min_score) or min_score < 0:
        raise ConfigError(f"min_score must be a non-negative integer, got {min_score!r}")

    months = config["changes_months"]
    if not _is_int(months) or months < 1:
        raise ConfigError(f"changes_months must be a positive integer, got {months!r}")

    markers = config["stop_markers"]
    if not isinstance(markers, list) or not all(isinstance(m, str) for m in markers):
        raise ConfigError(f"stop_markers must be a list of strings, got {markers!r}")
