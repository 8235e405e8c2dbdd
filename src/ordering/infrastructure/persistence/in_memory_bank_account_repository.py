"""Dict-backed BankAccountRepository."""

from __future__ import annotations

from uuid import UUID, uuid4

from ordering.domain.model.bank_account import BankAccount
from ordering.domain.repository.bank_account_repository import BankAccountRepository


class InMemoryBankAccountRepository(BankAccountRepository):

    def __init__(self, bank_accounts: list[BankAccount] | None = None) -> None:
        self._store: dict[UUID, BankAccount] = {}
        for bank_account in bank_accounts or []:
            self._store[bank_account.id] = bank_account

    def next_id(self) -> UUID:
        return uuid4()

    def get_by_id(self, bank_account_id: UUID) -> BankAccount | None:
        return self._store.get(bank_account_id)

    def save(self, bank_account: BankAccount) -> None:
        self._store[bank_account.id] = bank_account

    def __len__(self) -> int:
        return len(self._store)
