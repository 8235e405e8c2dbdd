"""CLI commands for the BankAccount aggregate."""

from __future__ import annotations

import click

from ordering.application.bank_transactions import (
    DepositHandler,
    RenameCustomerHandler,
    WithdrawHandler,
)
from ordering.application.dto import BankAccountDTO
from ordering.application.open_bank_account import OpenBankAccountHandler
from ordering.domain.exceptions import DomainException
from ordering.infrastructure.bootstrap import container


def _echo_events(dto: BankAccountDTO) -> None:
    for event in dto.events:
        details = ", ".join(f"{k}={v}" for k, v in event.details.items())
        click.echo(f"  [{event.name}] {details}")


@click.command("run")
@click.option("--customer", required=True, help="Customer name for the new account.")
@click.option("--deposit", "deposits", multiple=True, help="Amount to deposit; repeatable.")
@click.option("--withdraw", "withdrawals", multiple=True, help="Amount to withdraw; repeatable.")
@click.option("--rename", default=None, help="Rename the customer afterwards.")
def bank_run(
    customer: str,
    deposits: tuple[str, ...],
    withdrawals: tuple[str, ...],
    rename: str | None,
) -> None:
    """Open an account, then deposit, withdraw and rename in that order.

    Every domain event raised along the way is printed.
    """
    c = container()

    try:
        dto = OpenBankAccountHandler(c.bank_accounts).handle(customer)
        _echo_events(dto)

        deposit = DepositHandler(c.bank_accounts)
        for amount in deposits:
            dto = deposit.handle(dto.id, amount)
            _echo_events(dto)

        withdraw = WithdrawHandler(c.bank_accounts)
        for amount in withdrawals:
            dto = withdraw.handle(dto.id, amount)
            _echo_events(dto)

        if rename is not None:
            dto = RenameCustomerHandler(c.bank_accounts).handle(dto.id, rename)
            _echo_events(dto)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Account {dto.id}: {dto.customer_name}, balance {dto.balance}")
