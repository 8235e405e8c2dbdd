"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from ordering.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> UUID:
        """Generate a fresh order identity."""

    @abstractmethod
    def get_by_id(self, order_id: UUID) -> Order | None:
        """Return the order with this ID, or None if not found."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order."""
