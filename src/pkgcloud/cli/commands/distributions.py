"""List supported distributions.

Usage:
    pkgcloud distributions
    pkgcloud distributions -t '{% for d in distributions.rpm %}{{ d.index_name }} {% endfor %}'
"""

import sys

import click
from jinja2 import TemplateError

from pkgcloud.api.client import PackagecloudClient
from pkgcloud.api.exceptions import PackagecloudError

from ..templating import (
    DEFAULT_DISTRIBUTIONS_TEMPLATE,
    compile_template,
    render_distributions,
)


@click.command()
@click.option(
    "--template",
    "-t",
    "template_source",
    default=DEFAULT_DISTRIBUTIONS_TEMPLATE,
    help="Jinja2 template rendered with the distributions catalog",
)
@click.pass_context
def distributions(ctx: click.Context, template_source: str) -> None:
    """List all distributions.

    The default output has one "distro/version: id" line per distribution
    version. Templates receive `distributions`, with `deb`, `dsc`, `rpm`
    and linearize().
    """
    try:
        template = compile_template(template_source)
    except TemplateError as e:
        raise click.BadParameter(str(e), param_hint="--template") from e

    client = PackagecloudClient.from_credentials(ctx.obj["token"])

    try:
        catalog = client.distributions()
    except PackagecloudError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    try:
        click.echo(render_distributions(template, catalog), nl=False)
    except TemplateError as e:
        click.echo(f"Error: template failed: {e}", err=True)
        sys.exit(1)
