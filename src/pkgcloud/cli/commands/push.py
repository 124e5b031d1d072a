"""Push packages to a repository.

Usage:
    pkgcloud push user/repo/ubuntu/xenial/ foo_1.0_amd64.deb
    pkgcloud push user/repo/el/7/ foo-1.0.x86_64.rpm --force
    pkgcloud --dry-run push user/repo/ubuntu/xenial/ foo_1.0_amd64.deb
"""

import os
import sys

import click

from pkgcloud.api.client import PackagecloudClient
from pkgcloud.api.exceptions import PackagecloudError

from ..utils import parse_target


@click.command()
@click.argument("target")
@click.argument("files", nargs=-1, required=True, type=click.Path())
@click.option(
    "--force", "-f", is_flag=True, help="Force overwrite of package if it already exists"
)
@click.pass_context
def push(ctx: click.Context, target: str, files: tuple[str, ...], force: bool) -> None:
    """Push package files to a repo.

    TARGET is of the form user/repo/distro/version/.
    """
    repo, distro = parse_target(target)
    repo_distro = f"{repo}/{distro}"
    dry_run = ctx.obj["dry_run"]
    prefix = "Dry Run: " if dry_run else ""

    for path in files:
        if not os.path.exists(path):
            click.echo(f"Error: {path} does not exist", err=True)
            sys.exit(1)
        if not os.path.isfile(path):
            click.echo(f"Error: {path} is not a file", err=True)
            sys.exit(1)

    client = PackagecloudClient.from_credentials(ctx.obj["token"])

    for path in files:
        filename = os.path.basename(path)
        try:
            exists = client.exists(repo, distro, filename)
        except PackagecloudError as e:
            click.echo(f"Error: {e.message}", err=True)
            sys.exit(1)

        if exists:
            if not force:
                click.echo(
                    f"Error: package {filename} already exists in repo "
                    f"{repo_distro}, use -f to force overwrite",
                    err=True,
                )
                sys.exit(1)
            click.echo(
                f"{prefix}Package {filename} already exists in repo {repo_distro}. "
                "-f provided. Deleting in preparation to push new version",
                err=True,
            )
            if not dry_run:
                try:
                    client.destroy(repo_distro, filename)
                except PackagecloudError as e:
                    click.echo(
                        f"Error: deleting {filename} from {repo_distro} in "
                        f"preparation for overwrite failed: {e.message}",
                        err=True,
                    )
                    sys.exit(1)

        if dry_run:
            click.echo(f"Dry Run: would push {path} to {repo_distro}")
            continue

        try:
            client.create_package(repo, distro, path)
        except PackagecloudError as e:
            click.echo(f"Error: pushing {path} failed: {e.message}", err=True)
            sys.exit(1)
        except OSError as e:
            click.echo(f"Error: pushing {path} failed: {e}", err=True)
            sys.exit(1)
        click.echo(f"Pushed {path} to {repo_distro}")
