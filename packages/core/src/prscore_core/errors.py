"""Exceptions raised by prscore_core."""


class PrScoreError(Exception):
    """Base exception for all prscore errors."""


class TransportError(PrScoreError):
    """GitHub could not deliver pull requests, comments or files.

    The underlying PyGithub exception is chained as ``__cause__``.
    """


class ConfigError(PrScoreError):
    """Invalid configuration value."""
