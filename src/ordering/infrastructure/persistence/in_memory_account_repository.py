"""Dict-backed AccountRepository."""

from __future__ import annotations

from uuid import UUID, uuid4

from ordering.domain.model.account import Account
from ordering.domain.repository.account_repository import AccountRepository


class InMemoryAccountRepository(AccountRepository):

    def __init__(self, accounts: list[Account] | None = None) -> None:
        self._store: dict[UUID, Account] = {}
        for account in accounts or []:
            self._store[account.id] = account

    def next_id(self) -> UUID:
        return uuid4()

    def get_by_id(self, account_id: UUID) -> Account | None:
        return self._store.get(account_id)

    def save(self, account: Account) -> None:
        self._store[account.id] = account

    def __len__(self) -> int:
        return len(self._store)
