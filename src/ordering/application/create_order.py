"""Application service: Create Order use case."""

from __future__ import annotations

import logging

from ordering.application.dto import OrderDTO
from ordering.application.mapping import order_to_dto
from ordering.domain.model.order import Order
from ordering.domain.model.value_objects import DEFAULT_CURRENCY
from ordering.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, currency: str = DEFAULT_CURRENCY) -> OrderDTO:
        """Create an empty open order under a fresh identity."""
        order = Order.create(self._order_repo.next_id(), currency)
        self._order_repo.save(order)
        logger.info("Created order %s (%s)", order.id, currency)
        return order_to_dto(order)
