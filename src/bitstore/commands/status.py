"""Command: service status."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bitstore.commands._base import BitstoreCommand

if TYPE_CHECKING:
    from bitstore.commands._context import AppContext


@click.command("status", cls=BitstoreCommand, examples="  bitstore status\n  bitstore --json status")
@click.pass_obj
def status(app: AppContext) -> None:
    """Bitstore server status."""
    app.run("status", lambda client: client.status())
