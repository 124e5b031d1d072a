"""Shared utility functions for CLI commands."""

import logging
import sys

import click

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Send library log records to stderr.

    Args:
        verbose: Log request-level detail (DEBUG) instead of warnings only.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    # urllib3 logs full URLs at DEBUG; one line per request from the client is enough
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def parse_target(target: str) -> tuple[str, str]:
    """Split a "user/repo/distro/version/" target.

    Args:
        target: Repository and distribution, trailing slash optional.

    Returns:
        (repo, distro), e.g. ("user/repo", "ubuntu/xenial").

    Raises:
        click.BadParameter: If the target does not have exactly four parts.
    """
    parts = target.rstrip("/").split("/")
    if len(parts) != 4 or not all(parts):
        raise click.BadParameter(
            f"{target} is not of form user/repo/distro/version/", param_hint="TARGET"
        )
    return f"{parts[0]}/{parts[1]}", f"{parts[2]}/{parts[3]}"
