"""Command: validate the locale and domain configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fluentlink.commands._base import FluentCommand

if TYPE_CHECKING:
    from fluentlink.commands._context import AppContext


@click.command(
    cls=FluentCommand,
    examples="""\
  fluentlink check
  fluentlink --json check
  fluentlink -c site/fluentlink.toml check""",
)
@click.pass_obj
def check(app: AppContext) -> None:
    """Validate locales, domains, and fallbacks."""
    from fluentlink.services.site import SiteService

    app.emit(SiteService(app.runtime("check")).check())
