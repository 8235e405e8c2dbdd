"""In-memory implementation of OrderRepository.

Aggregates live in a dict for the lifetime of the process; nothing is
written to disk.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from ordering.domain.model.order import Order
from ordering.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[UUID, Order] = {}
        for order in orders or []:
            self._store[order.id] = order

    def next_id(self) -> UUID:
        return uuid4()

    def get_by_id(self, order_id: UUID) -> Order | None:
        return self._store.get(order_id)

    def save(self, order: Order) -> None:
        self._store[order.id] = order

    def __len__(self) -> int:
        return len(self._store)
