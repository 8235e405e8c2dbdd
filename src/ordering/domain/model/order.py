"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its order lines.
All business invariants are enforced here:

- at most one line per product, and every line has a positive quantity
- a shipped order cannot change (lines, discount or account)
- an order cannot be shipped without lines
- the discount is never negative
- the total always reflects the current lines and discount
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from ordering.domain.exceptions import InvalidArgumentError, InvalidStateError
from ordering.domain.model.aggregate_root import AggregateRoot
from ordering.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity


class OrderStatus(Enum):
    OPEN = "OPEN"
    SHIPPED = "SHIPPED"


@dataclass(frozen=True)
class OrderLine:
    """A product, how many units of it, and the agreed unit price.

    Immutable: changing a line means the Order replaces it with a new one.
    """

    product_id: str
    quantity: Quantity
    unit_price: Money

    def __post_init__(self) -> None:
        if not isinstance(self.unit_price, Money):
            raise InvalidArgumentError(
                f"Unit price must be Money, got {type(self.unit_price).__name__}"
            )
        if self.unit_price.is_negative:
            raise InvalidArgumentError(
                f"Unit price cannot be negative, got {self.unit_price}"
            )

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


class Order(AggregateRoot):
    """Aggregate root for orders.

    Use ``Order.create()`` for new orders.  State can only be changed
    through the behaviour methods below; ``order_lines`` is handed out as
    a tuple so callers cannot edit the collection behind the aggregate's
    back.  The order never emits domain events.
    """

    def __init__(self, order_id: UUID, currency: str = DEFAULT_CURRENCY) -> None:
        super().__init__(order_id)
        self._currency = currency
        self._lines: tuple[OrderLine, ...] = ()
        self._discount = Money.zero(currency)
        self._account_id: UUID | None = None
        self._status = OrderStatus.OPEN

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(order_id: UUID, currency: str = DEFAULT_CURRENCY) -> Order:
        """Create an empty, open order with no discount and no account."""
        return Order(order_id, currency)

    # --- Read-only view -------------------------------------------------------

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def order_lines(self) -> tuple[OrderLine, ...]:
        return self._lines

    @property
    def discount(self) -> Money:
        return self._discount

    @property
    def account_id(self) -> UUID | None:
        return self._account_id

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def is_shipped(self) -> bool:
        return self._status == OrderStatus.SHIPPED

    @property
    def subtotal(self) -> Money:
        result = Money.zero(self._currency)
        for line in self._lines:
            result = result + line.line_total
        return result

    @property
    def total_amount(self) -> Money:
        # Computed from the authoritative state on every read.
        return self.subtotal - self._discount

    # --- Behaviour ------------------------------------------------------------

    def update_order_line(self, product_id: str, quantity: int, unit_price: Money) -> None:
        """Add, replace or remove the line for *product_id*.

        A quantity of zero removes the line (a no-op if there is none).
        A positive quantity replaces the existing line in place, or
        appends a new one at the end.
        """
        self._ensure_not_shipped()

        if type(quantity) is int and quantity == 0:
            self._lines = tuple(
                line for line in self._lines if line.product_id != product_id
            )
            return

        new_line = OrderLine(product_id, Quantity(quantity), unit_price)
        self._ensure_same_currency(new_line.unit_price)

        lines = list(self._lines)
        index = self._find_line_index(product_id)
        if index is None:
            lines.append(new_line)
        else:
            lines[index] = new_line
        self._lines = tuple(lines)

    def update_discount(self, discount: Money) -> None:
        if not isinstance(discount, Money):
            raise InvalidArgumentError(
                f"Discount must be Money, got {type(discount).__name__}"
            )
        if discount.is_negative:
            raise InvalidArgumentError("Discount must be zero or more")
        self._ensure_not_shipped()
        self._ensure_same_currency(discount)

        self._discount = discount

    def update_account(self, account_id: UUID) -> None:
        """Point the order at an Account aggregate, by identity only."""
        self._ensure_not_shipped()
        self._account_id = account_id

    def ship(self) -> None:
        """Transition OPEN -> SHIPPED.  There is no way back."""
        if self.is_shipped:
            raise InvalidStateError("Order is already shipped")
        if not self._lines:
            raise InvalidStateError("Cannot ship an order with no lines")
        self._status = OrderStatus.SHIPPED

    # --- Internal helpers -----------------------------------------------------

    def _ensure_not_shipped(self) -> None:
        if self.is_shipped:
            raise InvalidStateError("Cannot modify a shipped order")

    def _ensure_same_currency(self, money: Money) -> None:
        if money.currency != self._currency:
            raise InvalidArgumentError(
                f"Order is priced in {self._currency}, got {money.currency}"
            )

    def _find_line_index(self, product_id: str) -> int | None:
        for i, line in enumerate(self._lines):
            if line.product_id == product_id:
                return i
        return None
