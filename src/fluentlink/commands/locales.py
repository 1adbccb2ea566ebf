"""Command: list registered locales."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fluentlink.commands._base import FluentCommand

if TYPE_CHECKING:
    from fluentlink.commands._context import AppContext


@click.command(
    cls=FluentCommand,
    examples="""\
  fluentlink locales
  fluentlink --json locales""",
)
@click.pass_obj
def locales(app: AppContext) -> None:
    """List locales with their domains, defaults, and fallbacks."""
    from fluentlink.services.site import SiteService

    app.emit(SiteService(app.runtime("list_locales")).list_locales())
