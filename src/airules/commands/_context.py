"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy library initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from airules.output.formatters import OutputSettings, format_result
from airules.output.renderers import RAW_OPS
from airules.services.result import NOT_FOUND

if TYPE_CHECKING:
    from airules.config.settings import RulesSettings
    from airules.infrastructure.library import RuleLibrary
    from airules.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The library is
    created on first use so ``--help`` and ``--version`` never touch
    the filesystem.
    """

    def __init__(self, settings: RulesSettings) -> None:
        self.settings = settings
        self._library: RuleLibrary | None = None

        from airules.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def library(self) -> RuleLibrary:
        """The rules library (created lazily on first access)."""
        if self._library is None:
            from airules.infrastructure.library import RuleLibrary

            self._library = RuleLibrary(self.settings)
        return self._library

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Not found, lenient (the default): notice on stdout, exit 0.
        * Any other failure, or not found with ``--strict``: stderr, exit 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                raw = result.op in RAW_OPS and not settings.json_output
                click.echo(output, nl=not raw)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
            return

        lenient = (
            result.error is not None
            and result.error.code == NOT_FOUND
            and not self.settings.strict_lookup
        )
        if lenient:
            click.echo(output)
            return
        click.echo(output, err=True)
        raise SystemExit(1)
