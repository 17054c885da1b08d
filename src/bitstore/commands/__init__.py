"""Subcommand modules for bitstore.

Provides register_commands(), the one place the command set is declared.
Each command maps to exactly one client call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every bitstore command on the root CLI group."""
    from bitstore.commands.billing import payment_get, payment_set, plan_get, plan_set
    from bitstore.commands.files import (
        files_destroy,
        files_index,
        files_meta,
        files_put,
        files_torrent,
    )
    from bitstore.commands.keys import keys_destroy, keys_get, keys_put
    from bitstore.commands.status import status
    from bitstore.commands.wallet import (
        transactions_index,
        wallet_deposit,
        wallet_get,
        wallet_withdraw,
    )

    for command in (
        files_index,
        files_put,
        files_meta,
        files_torrent,
        files_destroy,
        wallet_get,
        wallet_deposit,
        wallet_withdraw,
        transactions_index,
        status,
        keys_put,
        keys_get,
        keys_destroy,
        payment_set,
        payment_get,
        plan_set,
        plan_get,
    ):
        cli.add_command(command)
