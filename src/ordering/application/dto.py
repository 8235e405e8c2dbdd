"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single order line as displayed to the user."""

    product_id: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: UUID
    account_id: UUID | None
    status: str
    is_shipped: bool
    lines: list[OrderLineDTO]
    subtotal: str
    discount: str
    total: str


@dataclass(frozen=True)
class EventDTO:
    name: str
    occurred_at: str
    details: dict[str, str]


@dataclass(frozen=True)
class BankAccountDTO:
    """Output: a bank account plus the events its last operation raised."""

    id: UUID
    customer_name: str
    balance: str
    events: list[EventDTO] = field(default_factory=list)
