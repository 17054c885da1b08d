"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Settings are loaded lazily so ``--help`` and
``--version`` never read the config file; the client is built only after
the command's arguments have parsed and the credential is present.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from bitstore.client import create_client
from bitstore.config.settings import BitstoreSettings
from bitstore.output.formatters import OutputSettings, format_result
from bitstore.services.dispatch import run_command

if TYPE_CHECKING:
    from bitstore.services.dispatch import ClientCall
    from bitstore.services.result import CommandResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj`` and hand their single
    client call to :meth:`run`.
    """

    def __init__(
        self,
        *,
        config_path: str | None = None,
        json_output: bool = False,
        verbose: bool = False,
        log_json: bool = False,
    ) -> None:
        self.config_path = config_path
        self.json_output = json_output
        self.verbose = verbose
        self.log_json = log_json
        self._settings: BitstoreSettings | None = None

        from bitstore.config.logging import configure_logging

        configure_logging(verbose=verbose, log_json=log_json)

    @property
    def settings(self) -> BitstoreSettings:
        """Settings for this invocation (loaded on first access)."""
        if self._settings is None:
            self._settings = BitstoreSettings.from_cli(
                config_path=self.config_path,
                json_output=self.json_output,
                verbose=self.verbose,
                log_json=self.log_json,
            )
        return self._settings

    def run(self, op: str, call: ClientCall) -> None:
        """Execute one client call and emit its outcome.

        Raises ConfigError (exit 1) before any client exists when the
        credential is missing.
        """
        settings = self.settings
        settings.require_private_key()
        result = run_command(op, call, lambda: create_client(settings))
        self.emit(result)

    def emit(self, result: CommandResult) -> None:
        """Format and output a CommandResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        stream = sys.stdout if result.ok else sys.stderr
        settings = OutputSettings(
            json_output=self.json_output,
            verbose=self.verbose,
            color=not self.json_output and stream.isatty(),
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
