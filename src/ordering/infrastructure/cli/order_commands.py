"""CLI commands for the Order aggregate."""

from __future__ import annotations

from uuid import UUID

import click

from ordering.application.assign_account import AssignAccountHandler
from ordering.application.create_order import CreateOrderHandler
from ordering.application.dto import OrderDTO
from ordering.application.register_account import RegisterAccountHandler
from ordering.application.ship_order import ShipOrderHandler
from ordering.application.update_discount import UpdateDiscountHandler
from ordering.application.update_order_line import UpdateOrderLineHandler
from ordering.domain.exceptions import DomainException
from ordering.domain.model.value_objects import DEFAULT_CURRENCY
from ordering.infrastructure.bootstrap import container


def _parse_line(raw: str) -> tuple[str, int, str]:
    """Parse 'P1:3:10.00' into (product_id, quantity, unit_price)."""
    parts = raw.strip().rsplit(":", 2)
    if len(parts) != 3 or not parts[0].strip():
        raise click.BadParameter(
            f"Invalid line format '{raw}'. Expected 'Product:Quantity:Price'."
        )
    product_id, qty_str, price = (p.strip() for p in parts)
    try:
        qty = int(qty_str)
    except ValueError:
        raise click.BadParameter(
            f"Invalid quantity '{qty_str}' for product '{product_id}'."
        )
    return product_id, qty, price


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Account: {dto.account_id or '-'}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_id:<20} {line.quantity:>5} {line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>20}")
    click.echo(f"  {'Discount':<27} {dto.discount:>20}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("build")
@click.option(
    "--line", "lines", multiple=True,
    help="Order line as 'Product:Qty:Price'; repeat for more. Qty 0 removes the product.",
)
@click.option("--discount", default=None, help="Order discount, e.g. 5.00.")
@click.option("--account", "account_id", type=click.UUID, default=None, help="Account ID to reference.")
@click.option("--ship", is_flag=True, default=False, help="Ship the order once built.")
@click.option("--currency", default=DEFAULT_CURRENCY, show_default=True, help="Order currency.")
def order_build(
    lines: tuple[str, ...],
    discount: str | None,
    account_id: UUID | None,
    ship: bool,
    currency: str,
) -> None:
    """Create an order, apply lines, discount and account, optionally ship it."""
    parsed = [_parse_line(raw) for raw in lines]
    c = container()

    try:
        dto = CreateOrderHandler(c.orders).handle(currency=currency)

        update_line = UpdateOrderLineHandler(c.orders)
        for product_id, qty, price in parsed:
            dto = update_line.handle(dto.id, product_id, qty, price)

        if discount is not None:
            dto = UpdateDiscountHandler(c.orders).handle(dto.id, discount)

        if account_id is not None:
            RegisterAccountHandler(c.accounts).handle(account_id)
            dto = AssignAccountHandler(c.orders, c.accounts).handle(dto.id, account_id)

        if ship:
            dto = ShipOrderHandler(c.orders).handle(dto.id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
