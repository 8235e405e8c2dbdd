"""Application service: Update Order Line use case.

Adds, replaces or (with quantity 0) removes a single line.  The price
arrives as text from the outer layer and is turned into Money in the
order's currency before the aggregate sees it.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from uuid import UUID

from ordering.application.dto import OrderDTO
from ordering.application.load import get_order
from ordering.application.mapping import order_to_dto
from ordering.domain.model.value_objects import Money
from ordering.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderLineHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        order_id: UUID,
        product_id: str,
        quantity: int,
        unit_price: str | int | Decimal = "0",
    ) -> OrderDTO:
        order = get_order(self._order_repo, order_id)

        # A removal or a shipped order never looks at the price.
        if quantity == 0 or order.is_shipped:
            price = Money.zero(order.currency)
        else:
            price = Money.of(unit_price, order.currency)
        order.update_order_line(product_id, quantity, price)
        self._order_repo.save(order)

        if quantity == 0:
            logger.info("Order %s: removed line for %s", order_id, product_id)
        else:
            logger.info(
                "Order %s: line %s set to %d x %s", order_id, product_id, quantity, unit_price
            )
        return order_to_dto(order)
