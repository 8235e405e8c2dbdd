"""Application service: Ship Order use case."""

from __future__ import annotations

import logging
from uuid import UUID

from ordering.application.dto import OrderDTO
from ordering.application.load import get_order
from ordering.application.mapping import order_to_dto
from ordering.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ShipOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: UUID) -> OrderDTO:
        order = get_order(self._order_repo, order_id)

        order.ship()
        self._order_repo.save(order)

        logger.info("Order %s shipped (total %s)", order_id, order.total_amount)
        return order_to_dto(order)
