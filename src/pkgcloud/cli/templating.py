"""Output templates for CLI listings.

Templates are Jinja2 strings supplied on the command line. Package templates
can mark packages for destruction or promotion; marks are collected in an
ActionBatch and only applied after the listing is complete.
"""

from __future__ import annotations

from typing import Any

from jinja2 import StrictUndefined, Template
from jinja2.sandbox import SandboxedEnvironment

from pkgcloud.api.types import (
    DestroyAction,
    Distributions,
    Package,
    PackageAction,
    PromoteAction,
)

DEFAULT_PACKAGE_TEMPLATE = "{{ package.package_html_url }}\n"
DEFAULT_DISTRIBUTIONS_TEMPLATE = (
    "{% for d in distributions.linearize() %}"
    "{{ d.distribution_index }}/{{ d.version_index }}: {{ d.id }}\n"
    "{% endfor %}"
)

_env = SandboxedEnvironment(
    keep_trailing_newline=True,
    undefined=StrictUndefined,
    autoescape=False,
)


def compile_template(source: str) -> Template:
    """Compile a user-supplied template.

    Raises:
        jinja2.TemplateSyntaxError: If the template is invalid.
    """
    return _env.from_string(source)


class ActionBatch:
    """Destroy and promote actions marked while rendering a listing."""

    def __init__(self) -> None:
        self._actions: list[PackageAction] = []

    def destroy(self, package: Package) -> None:
        self._actions.append(DestroyAction(package=package))

    def promote(self, package: Package, destination: str) -> None:
        self._actions.append(PromoteAction(package=package, destination=destination))

    @property
    def actions(self) -> list[PackageAction]:
        """Marked actions in the order they were marked."""
        return list(self._actions)

    def __len__(self) -> int:
        return len(self._actions)


class TemplatePackage:
    """Package as seen from a template.

    Exposes every Package field plus destroy() and promote(), which record
    an action in the batch and return a description for the output.
    """

    def __init__(self, package: Package, batch: ActionBatch) -> None:
        self._package = package
        self._batch = batch

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._package, name)

    def destroy(self) -> str:
        self._batch.destroy(self._package)
        return f"Marked for Destruction {self._package.package_html_url}"

    def promote(self, repo: str) -> str:
        self._batch.promote(self._package, repo)
        return f"Marked for Promotion to {repo} : {self._package.promote_url}"


def render_package(template: Template, package: Package, batch: ActionBatch) -> str:
    return template.render(package=TemplatePackage(package, batch))


def render_distributions(template: Template, distributions: Distributions) -> str:
    return template.render(distributions=distributions)
