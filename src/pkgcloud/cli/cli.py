#!/usr/bin/env python3
"""pkgcloud CLI - command-line client for packagecloud.io

Usage:
    pkgcloud [--dry-run] all <user/repo> [--template=T]
    pkgcloud [--dry-run] push <user/repo/distro/version/> <file>... [--force]
    pkgcloud [--dry-run] destroy <user/repo/distro/version/> <filename>...
    pkgcloud distributions [--template=T]
"""

import sys

import click

from pkgcloud import __version__
from pkgcloud.api.exceptions import (
    APIError,
    CredentialsError,
    InvalidDistroError,
    NetworkError,
    PackagecloudError,
)

from .commands.all_packages import all_packages
from .commands.destroy import destroy
from .commands.distributions import distributions
from .commands.push import push
from .utils import configure_logging


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--dry-run",
    "-d",
    is_flag=True,
    help="Do not take actions that change the state of packagecloud.io",
)
@click.option("--token", default=None, help="packagecloud API token")
@click.option("--verbose", "-v", is_flag=True, help="Log each API request")
@click.pass_context
def cli(ctx: click.Context, dry_run: bool, token: str | None, verbose: bool):
    """pkgcloud is a command-line for packagecloud.io"""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["dry_run"] = dry_run
    ctx.obj["token"] = token


cli.add_command(all_packages)
cli.add_command(distributions)
cli.add_command(push)
cli.add_command(destroy)


def _hint(error: PackagecloudError) -> str | None:
    if isinstance(error, CredentialsError):
        return "Hint: Set PACKAGECLOUD_TOKEN or pass --token."
    if isinstance(error, InvalidDistroError):
        return "Hint: Run 'pkgcloud distributions' to see valid distro names."
    if isinstance(error, NetworkError):
        return "Hint: Check your internet connection and try again."
    if isinstance(error, APIError):
        return {
            401: "Hint: Check that your packagecloud token is valid.",
            404: "Hint: Check the repository name and your access to it.",
            422: "Hint: Check your input and try again.",
            500: "Hint: This is a server issue. Please try again later.",
            502: "Hint: The server is temporarily unavailable. Please try again later.",
            503: "Hint: The service is temporarily unavailable. Please try again later.",
        }.get(error.status_code)
    return None


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except PackagecloudError as e:
        click.echo(f"Error: {e.message}", err=True)
        hint = _hint(e)
        if hint:
            click.echo(hint, err=True)
        sys.exit(1)
    except (click.Abort, KeyboardInterrupt):
        click.echo(err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
