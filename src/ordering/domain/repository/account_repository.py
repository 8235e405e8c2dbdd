"""Abstract repository for the Account aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from ordering.domain.model.account import Account


class AccountRepository(ABC):

    @abstractmethod
    def next_id(self) -> UUID:
        """Generate a fresh account identity."""

    @abstractmethod
    def get_by_id(self, account_id: UUID) -> Account | None:
        """Return the account with this ID, or None if not found."""

    @abstractmethod
    def save(self, account: Account) -> None:
        """Persist a new or updated account."""
