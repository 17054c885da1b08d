"""Commands: key-value store."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bitstore.commands._base import BitstoreCommand

if TYPE_CHECKING:
    from bitstore.commands._context import AppContext


@click.command("keys:put", cls=BitstoreCommand, examples="  bitstore keys:put avatar 2aae6c35c9")
@click.argument("key")
@click.argument("value")
@click.pass_obj
def keys_put(app: AppContext, key: str, value: str) -> None:
    """Put key in key-value store."""
    app.run("keys:put", lambda client: client.keys.put(key, value))


@click.command("keys:get", cls=BitstoreCommand, examples="  bitstore keys:get avatar")
@click.argument("key")
@click.pass_obj
def keys_get(app: AppContext, key: str) -> None:
    """Get key from key-value store."""
    app.run("keys:get", lambda client: client.keys.get(key))


@click.command("keys:destroy", cls=BitstoreCommand, examples="  bitstore keys:destroy avatar")
@click.argument("key")
@click.pass_obj
def keys_destroy(app: AppContext, key: str) -> None:
    """Remove key from key-value store."""
    app.run("keys:destroy", lambda client: client.keys.delete(key))
