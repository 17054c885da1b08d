"""Custom Click base classes: ``--examples``, aliases, and exit code 1 on usage errors.

BitstoreCommand accepts ``examples`` and ``aliases`` parameters.  When
``--examples`` is passed, the command prints usage examples and exits.
BitstoreGroup resolves aliases to their canonical command.

Both classes report usage errors (unknown command, missing or extra
arguments) with Click's usual message but exit with status 1, the same as
every other failure.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import click

USAGE_ERROR_EXIT_CODE = 1


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class BitstoreCommand(click.Command):
    """Click Command subclass with ``--examples`` and alias support."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        aliases: Iterable[str] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.aliases = tuple(aliases)
        if examples:
            _add_examples_option(self, examples)

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as exc:
            exc.exit_code = USAGE_ERROR_EXIT_CODE
            raise

    def get_short_help_str(self, limit: int = 45) -> str:
        text = super().get_short_help_str(limit)
        if self.aliases:
            text = f"{text} (alias: {', '.join(self.aliases)})"
        return text


class BitstoreGroup(click.Group):
    """Click Group subclass that resolves command aliases.

    Sets ``command_class = BitstoreCommand`` so all subcommands accept
    ``examples`` and ``aliases`` without explicit ``cls=`` each time.
    """

    command_class = BitstoreCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        self.alias_map: dict[str, str] = {}
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def add_command(self, cmd: click.Command, name: str | None = None) -> None:
        super().add_command(cmd, name)
        for alias in getattr(cmd, "aliases", ()):
            self.alias_map[alias] = name or cmd.name or alias

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.alias_map.get(cmd_name, cmd_name))

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as exc:
            exc.exit_code = USAGE_ERROR_EXIT_CODE
            raise

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        try:
            name, cmd, rest = super().resolve_command(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = USAGE_ERROR_EXIT_CODE
            raise
        return (cmd.name if cmd else name), cmd, rest
