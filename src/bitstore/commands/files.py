"""Commands: uploaded files (list, upload, metadata, torrent, delete)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bitstore.commands._base import BitstoreCommand

if TYPE_CHECKING:
    from bitstore.commands._context import AppContext


@click.command("files", cls=BitstoreCommand, examples="  bitstore files")
@click.pass_obj
def files_index(app: AppContext) -> None:
    """List uploaded files."""
    app.run("files", lambda client: client.files.index())


@click.command(
    "files:put",
    cls=BitstoreCommand,
    aliases=("upload",),
    examples="""\
  bitstore files:put ./photo.jpg
  bitstore upload https://example.com/video.mp4""",
)
@click.argument("file_path", metavar="FILEPATH")
@click.pass_obj
def files_put(app: AppContext, file_path: str) -> None:
    """Upload local file or url."""
    app.run("files:put", lambda client: client.files.put(file_path))


@click.command(
    "files:meta",
    cls=BitstoreCommand,
    examples="  bitstore files:meta 2aae6c35c94fcfb415dbe95f408b9ce91ee846ed",
)
@click.argument("sha1")
@click.pass_obj
def files_meta(app: AppContext, sha1: str) -> None:
    """File metadata."""
    app.run("files:meta", lambda client: client.files.meta(sha1))


@click.command(
    "files:torrent",
    cls=BitstoreCommand,
    examples="  bitstore files:torrent 2aae6c35c94fcfb415dbe95f408b9ce91ee846ed",
)
@click.argument("sha1")
@click.pass_obj
def files_torrent(app: AppContext, sha1: str) -> None:
    """Torrent json."""
    app.run("files:torrent", lambda client: client.files.torrent(sha1, json=True))


@click.command(
    "files:destroy",
    cls=BitstoreCommand,
    aliases=("rm",),
    examples="""\
  bitstore files:destroy 2aae6c35c94fcfb415dbe95f408b9ce91ee846ed
  bitstore rm 2aae6c35c94fcfb415dbe95f408b9ce91ee846ed""",
)
@click.argument("sha1")
@click.pass_obj
def files_destroy(app: AppContext, sha1: str) -> None:
    """Destroy file."""
    app.run("files:destroy", lambda client: client.files.destroy(sha1))
