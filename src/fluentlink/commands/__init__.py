"""Subcommand modules for fluentlink.

Provides register_commands() which uses deferred imports to keep
``fluentlink --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from fluentlink.commands.check import check
    from fluentlink.commands.link import link
    from fluentlink.commands.locales import locales

    cli.add_command(check)
    cli.add_command(link)
    cli.add_command(locales)
