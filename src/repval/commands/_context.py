"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the input stream, the prompt console, and
the reader built on them, and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from repval.output.formatters import format_result

if TYPE_CHECKING:
    from rich.console import Console

    from repval.config.settings import RepvalSettings
    from repval.infrastructure.stream import InputStream
    from repval.services.reader import TypedReader
    from repval.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The stream, console and reader are created lazily so ``--help`` and
    ``--version`` never touch stdin.
    """

    def __init__(self, settings: RepvalSettings) -> None:
        self.settings = settings
        self._stream: InputStream | None = None
        self._console: Console | None = None
        self._reader: TypedReader | None = None

        from repval.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def stream(self) -> InputStream:
        """Input stream over the process's stdin."""
        if self._stream is None:
            from repval.infrastructure.stream import InputStream

            self._stream = InputStream.stdin()
        return self._stream

    @property
    def console(self) -> Console:
        """Prompt console.  Writes to stderr under ``--json`` so stdout stays parseable."""
        if self._console is None:
            from repval.output.console import terminal_console

            self._console = terminal_console(
                err=self.settings.json_output,
                no_color=self.settings.no_color,
            )
        return self._console

    @property
    def reader(self) -> TypedReader:
        if self._reader is None:
            from repval.services.reader import TypedReader

            self._reader = TypedReader(
                self.stream,
                self.console,
                discard_limit=self.settings.reader.discard_limit,
            )
        return self._reader

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(
            result,
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
