"""Command-line entry point: ``github-activity <username>``."""

from __future__ import annotations

import argparse
import os

from .client import GitHubEventsFetcher
from .config import LOG_LEVEL_ENV, FetcherConfig
from .errors import ConfigError
from .logging import (
    DEFAULT_LOG_LEVEL,
    configure_logging,
    get_logger,
    log_error,
    log_warning,
)
from .printer import print_recent_activity

logger = get_logger(__name__)


def build_fetcher(config: FetcherConfig) -> GitHubEventsFetcher:
    """Return a fetcher that owns an HTTP client built from ``config``."""
    return GitHubEventsFetcher(config)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="github-activity",
        description="Fetch recent activity of a specified GitHub user.",
    )
    parser.add_argument("username", help="GitHub username to report on")
    return parser.parse_args(argv)


def _configure_logging() -> None:
    raw_level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    normalized, invalid = configure_logging(raw_level)
    if invalid:
        log_warning(
            logger,
            "Invalid %s %r, falling back to %s",
            LOG_LEVEL_ENV,
            raw_level,
            normalized,
        )


def main(argv: list[str] | None = None) -> int:
    """Print the recent public activity of a GitHub user.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 on success. Fetch failures and invalid configuration
        exit with status 1 via :class:`SystemExit`.

    """
    args = _parse_args(argv)
    _configure_logging()

    try:
        config = FetcherConfig.from_env()
    except ConfigError as exc:
        log_error(logger, "Invalid configuration: %s", exc)
        raise SystemExit(1) from exc

    with build_fetcher(config) as fetcher:
        print_recent_activity(args.username, fetcher)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
