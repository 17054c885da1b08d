"""Commands: billing card and membership plan."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bitstore.commands._base import BitstoreCommand

if TYPE_CHECKING:
    from bitstore.commands._context import AppContext


@click.command(
    "billing:payment:set",
    cls=BitstoreCommand,
    examples="""\
  bitstore billing:payment:set 4242424242424242 12 2030 123
  bitstore billing:payment:set 4242424242424242 12 2030""",
)
@click.argument("number")
@click.argument("exp_month", metavar="EXPMONTH")
@click.argument("exp_year", metavar="EXPYEAR")
@click.argument("cvc", required=False)
@click.pass_obj
def payment_set(
    app: AppContext,
    number: str,
    exp_month: str,
    exp_year: str,
    cvc: str | None,
) -> None:
    """Set or update credit card for billing."""
    card = {"number": number, "exp_month": exp_month, "exp_year": exp_year, "cvc": cvc}
    app.run("billing:payment:set", lambda client: client.billing.payment.set(card))


@click.command("billing:payment:get", cls=BitstoreCommand, examples="  bitstore billing:payment:get")
@click.pass_obj
def payment_get(app: AppContext) -> None:
    """Retrieve payment info."""
    app.run("billing:payment:get", lambda client: client.billing.payment.get())


@click.command("billing:plan:set", cls=BitstoreCommand, examples="  bitstore billing:plan:set pro")
@click.argument("plan")
@click.pass_obj
def plan_set(app: AppContext, plan: str) -> None:
    """Set or update membership plan (pro, amateur, master)."""
    app.run("billing:plan:set", lambda client: client.billing.plan.set(plan))


@click.command("billing:plan:get", cls=BitstoreCommand, examples="  bitstore billing:plan:get")
@click.pass_obj
def plan_get(app: AppContext) -> None:
    """Get current membership plan."""
    app.run("billing:plan:get", lambda client: client.billing.plan.get())
