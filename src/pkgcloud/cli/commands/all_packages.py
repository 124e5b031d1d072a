"""List all packages in a repository.

The `pkgcloud all` command walks every page of a repository's package list
and renders each package through a template. Templates can mark packages
for destruction or promotion; marked actions run after the listing.

Usage:
    pkgcloud all user/repo
    pkgcloud all user/repo -t $'{{ package.filename }} {{ package.days_old }}\\n'
    pkgcloud all user/repo -t '{% if package.days_old > 30 %}{{ package.destroy() }}{% endif %}'
    pkgcloud --dry-run all user/repo -t '{{ package.promote("user/release") }}'
"""

import sys

import click
from jinja2 import TemplateError

from pkgcloud.api.client import PackagecloudClient
from pkgcloud.api.exceptions import PackagecloudError
from pkgcloud.api.types import DestroyAction, PackageAction

from ..templating import (
    DEFAULT_PACKAGE_TEMPLATE,
    ActionBatch,
    compile_template,
    render_package,
)


def describe_action(action: PackageAction) -> str:
    if isinstance(action, DestroyAction):
        return f"destroy {action.package.package_html_url}"
    return f"promote to {action.destination} : {action.package.promote_url}"


@click.command("all")
@click.argument("repo")
@click.option(
    "--template",
    "-t",
    "template_source",
    default=DEFAULT_PACKAGE_TEMPLATE,
    show_default=True,
    help="Jinja2 template rendered for each package",
)
@click.pass_context
def all_packages(ctx: click.Context, repo: str, template_source: str) -> None:
    """List all the packages in a repo.

    REPO is of the form user/repo. The template receives `package`, which
    has every package field, `days_old`, and the destroy() and
    promote("user/repo") marks.
    """
    try:
        template = compile_template(template_source)
    except TemplateError as e:
        raise click.BadParameter(str(e), param_hint="--template") from e

    client = PackagecloudClient.from_credentials(ctx.obj["token"])
    batch = ActionBatch()

    try:
        for page in client.iter_pages(repo):
            for package in page.packages:
                click.echo(render_package(template, package, batch), nl=False)
    except TemplateError as e:
        click.echo(f"Error: template failed: {e}", err=True)
        sys.exit(1)
    except PackagecloudError as e:
        click.echo(f"Error: listing {repo} failed: {e.message}", err=True)
        sys.exit(1)

    actions = batch.actions
    if not actions:
        return

    if ctx.obj["dry_run"]:
        for action in actions:
            click.echo(f"Dry Run: would {describe_action(action)}", err=True)
        return

    try:
        client.apply_actions(actions)
    except PackagecloudError as e:
        click.echo(f"Error: applying marked actions failed: {e.message}", err=True)
        sys.exit(1)
    for action in actions:
        click.echo(f"Done: {describe_action(action)}", err=True)
