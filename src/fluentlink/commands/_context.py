"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy Runtime initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fluentlink.domain.errors import FluentError
from fluentlink.output.formatters import format_result
from fluentlink.services.result import ServiceResult

if TYPE_CHECKING:
    from fluentlink.config.settings import FluentSettings
    from fluentlink.infrastructure.runtime import Runtime


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The runtime is built on first use so ``--help`` and ``--version`` never
    validate the locale configuration.
    """

    def __init__(self, settings: FluentSettings) -> None:
        self.settings = settings
        self._runtime: Runtime | None = None

        from fluentlink.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def runtime(self, op: str) -> Runtime:
        """The runtime, or an emitted *op* failure when the configuration is invalid."""
        if self._runtime is None:
            from fluentlink.infrastructure.runtime import Runtime

            try:
                self._runtime = Runtime(self.settings)
            except FluentError as exc:
                self.emit(ServiceResult.failure(op, exc))
                raise  # unreachable: emit() exits on failure
        return self._runtime

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(
            result, json_output=self.settings.json_output, verbose=self.settings.verbose
        )
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
