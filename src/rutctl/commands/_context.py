"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy RutService initialization and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rutctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from rutctl.config.settings import RutSettings
    from rutctl.services.result import ServiceResult
    from rutctl.services.rut import RutService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The service is lazily
    initialized on first use so ``--help`` and ``--version`` never touch
    the checksum memo.
    """

    def __init__(self, settings: RutSettings) -> None:
        self.settings = settings
        self._service: RutService | None = None

        from rutctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> RutService:
        """The RUT service (created lazily on first access)."""
        if self._service is None:
            from rutctl.services.rut import RutService

            self._service = RutService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        if settings.verbose:
            result = self._with_memo_meta(result)
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    @staticmethod
    def _with_memo_meta(result: ServiceResult) -> ServiceResult:
        """Attach checksum memo state to ``result.meta`` (verbose only)."""
        from rutctl.domain import checksum

        memo = {"memo_enabled": checksum.memo_enabled(), "memo_entries": checksum.memo_size()}
        return result.model_copy(update={"meta": {**(result.meta or {}), **memo}})
