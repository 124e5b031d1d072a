"""Remove packages from a repository.

Usage:
    pkgcloud destroy user/repo/ubuntu/xenial/ foo_1.0_amd64.deb
    pkgcloud --dry-run destroy user/repo/ubuntu/xenial/ foo_1.0_amd64.deb
"""

import sys

import click

from pkgcloud.api.client import PackagecloudClient
from pkgcloud.api.exceptions import PackagecloudError

from ..utils import parse_target


@click.command()
@click.argument("target")
@click.argument("filenames", nargs=-1, required=True)
@click.pass_context
def destroy(ctx: click.Context, target: str, filenames: tuple[str, ...]) -> None:
    """Destroy/remove packages from a repo.

    TARGET is of the form user/repo/distro/version/. Files that do not
    exist are skipped.
    """
    repo, distro = parse_target(target)
    repo_distro = f"{repo}/{distro}"

    client = PackagecloudClient.from_credentials(ctx.obj["token"])

    for filename in filenames:
        try:
            exists = client.exists(repo, distro, filename)
        except PackagecloudError as e:
            click.echo(f"Error: {e.message}", err=True)
            sys.exit(1)

        if not exists:
            click.echo(f"Skipping {filename}: not found on {repo_distro}", err=True)
            continue

        if ctx.obj["dry_run"]:
            click.echo(f"Dry Run: would destroy {filename} from {repo_distro}")
            continue

        try:
            client.destroy(repo_distro, filename)
        except PackagecloudError as e:
            click.echo(
                f"Error: deleting {filename} from {repo_distro} failed: {e.message}",
                err=True,
            )
            sys.exit(1)
        click.echo(f"Destroyed {filename} on {repo_distro}")
