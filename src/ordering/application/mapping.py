"""Domain -> DTO mapping shared by the application handlers."""

from __future__ import annotations

from dataclasses import fields

from ordering.application.dto import BankAccountDTO, EventDTO, OrderDTO, OrderLineDTO
from ordering.domain.model.bank_account import BankAccount
from ordering.domain.model.events import DomainEvent
from ordering.domain.model.order import Order


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        account_id=order.account_id,
        status=order.status.value,
        is_shipped=order.is_shipped,
        lines=[
            OrderLineDTO(
                product_id=line.product_id,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for line in order.order_lines
        ],
        subtotal=str(order.subtotal),
        discount=str(order.discount),
        total=str(order.total_amount),
    )


def event_to_dto(event: DomainEvent) -> EventDTO:
    details = {
        f.name: str(getattr(event, f.name))
        for f in fields(event)
        if f.name != "occurred_at"
    }
    return EventDTO(
        name=event.name,
        occurred_at=event.occurred_at.strftime("%Y-%m-%d %H:%M:%S UTC"),
        details=details,
    )


def bank_account_to_dto(
    account: BankAccount, events: list[DomainEvent] | None = None
) -> BankAccountDTO:
    return BankAccountDTO(
        id=account.id,
        customer_name=account.customer_name,
        balance=str(account.balance),
        events=[event_to_dto(e) for e in events or []],
    )
