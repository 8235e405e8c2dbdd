"""Application service: Show Order use case (query)."""

from __future__ import annotations

from uuid import UUID

from ordering.application.dto import OrderDTO
from ordering.application.load import get_order
from ordering.application.mapping import order_to_dto
from ordering.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: UUID) -> OrderDTO:
        return order_to_dto(get_order(self._order_repo, order_id))
