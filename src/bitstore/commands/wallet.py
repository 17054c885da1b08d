"""Commands: wallet balance, deposit address, withdrawals, transaction history."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bitstore.commands._base import BitstoreCommand

if TYPE_CHECKING:
    from bitstore.commands._context import AppContext


@click.command("wallet", cls=BitstoreCommand, examples="  bitstore wallet")
@click.pass_obj
def wallet_get(app: AppContext) -> None:
    """Show wallet."""
    app.run("wallet", lambda client: client.wallet.get())


@click.command("wallet:deposit", cls=BitstoreCommand, examples="  bitstore wallet:deposit")
@click.pass_obj
def wallet_deposit(app: AppContext) -> None:
    """Deposit to wallet."""
    app.run("wallet:deposit", lambda client: client.wallet.deposit())


@click.command(
    "wallet:withdraw",
    cls=BitstoreCommand,
    examples="  bitstore wallet:withdraw 50000 mkHS9ne12qx9pS9VojpwU5xtRd4T7X7ZUt",
)
@click.argument("amount")
@click.argument("address")
@click.pass_obj
def wallet_withdraw(app: AppContext, amount: str, address: str) -> None:
    """Withdraw from wallet."""
    app.run("wallet:withdraw", lambda client: client.wallet.withdraw(amount, address))


@click.command("transactions", cls=BitstoreCommand, examples="  bitstore transactions")
@click.pass_obj
def transactions_index(app: AppContext) -> None:
    """List transactions."""
    app.run("transactions", lambda client: client.transactions.index())
