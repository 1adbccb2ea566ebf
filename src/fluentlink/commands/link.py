"""Command: resolve the localised link of a page path."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fluentlink.commands._base import FluentCommand

if TYPE_CHECKING:
    from fluentlink.commands._context import AppContext


@click.command(
    cls=FluentCommand,
    examples="""\
  fluentlink link / --locale de_DE
  fluentlink link about-us/my-staff --locale es_ES --host www.example.com
  fluentlink link about-us --locale en_US --domain-mode --admin""",
)
@click.argument("path")
@click.option("-l", "--locale", "locale", required=True, help="Locale code to resolve in.")
@click.option("--host", default=None, help="Hostname serving the request (implies domain mode).")
@click.option("--domain-mode", is_flag=True, help="Disambiguate locales by domain.")
@click.option("--admin", is_flag=True, help="Resolve as an admin request, not frontend.")
@click.pass_obj
def link(
    app: AppContext,
    path: str,
    locale: str,
    host: str | None,
    domain_mode: bool,
    admin: bool,
) -> None:
    """Resolve the link of PATH (slash-separated URL segments, / for home)."""
    from fluentlink.services.site import SiteService

    svc = SiteService(app.runtime("resolve_link"))
    app.emit(
        svc.resolve_link(
            path,
            locale,
            host=host,
            domain_mode=domain_mode,
            frontend=not admin,
        )
    )
