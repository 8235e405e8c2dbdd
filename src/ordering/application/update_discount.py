"""Application service: Update Discount use case."""

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


class UpdateDiscountHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: UUID, discount: str | int | Decimal) -> OrderDTO:
        order = get_order(self._order_repo, order_id)

        order.update_discount(Money.of(discount, order.currency))
        self._order_repo.save(order)

        logger.info("Order %s: discount set to %s", order_id, order.discount)
        return order_to_dto(order)
