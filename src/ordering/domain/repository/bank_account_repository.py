"""Abstract repository for the BankAccount aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from ordering.domain.model.bank_account import BankAccount


class BankAccountRepository(ABC):

    @abstractmethod
    def next_id(self) -> UUID:
        """Generate a fresh bank account identity."""

    @abstractmethod
    def get_by_id(self, bank_account_id: UUID) -> BankAccount | None:
        """Return the bank account with this ID, or None if not found."""

    @abstractmethod
    def save(self, bank_account: BankAccount) -> None:
        """Persist a new or updated bank account."""
