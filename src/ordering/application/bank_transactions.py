"""Application services: deposit, withdraw and rename on a bank account.

Each handler follows the same steps: load the aggregate, call one
behaviour method, save, then drain and publish the events it recorded.
A failed operation raises before the save, so nothing is published.
"""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from ordering.application.dto import BankAccountDTO
from ordering.application.event_publishing import EventPublisher, publish_pending_events
from ordering.application.load import get_bank_account
from ordering.application.mapping import bank_account_to_dto
from ordering.domain.model.bank_account import BankAccount
from ordering.domain.model.value_objects import Money
from ordering.domain.repository.bank_account_repository import BankAccountRepository


class _BankAccountHandler:

    def __init__(
        self,
        bank_account_repo: BankAccountRepository,
        publisher: EventPublisher | None = None,
    ) -> None:
        self._repo = bank_account_repo
        self._publisher = publisher

    def _commit(self, account: BankAccount) -> BankAccountDTO:
        self._repo.save(account)
        events = publish_pending_events(account, self._publisher)
        return bank_account_to_dto(account, events)


class DepositHandler(_BankAccountHandler):

    def handle(self, account_id: UUID, amount: str | int | Decimal) -> BankAccountDTO:
        account = get_bank_account(self._repo, account_id)
        account.deposit(Money.of(amount, account.balance.currency))
        return self._commit(account)


class WithdrawHandler(_BankAccountHandler):

    def handle(self, account_id: UUID, amount: str | int | Decimal) -> BankAccountDTO:
        account = get_bank_account(self._repo, account_id)
        account.withdraw(Money.of(amount, account.balance.currency))
        return self._commit(account)


class RenameCustomerHandler(_BankAccountHandler):

    def handle(self, account_id: UUID, customer_name: str) -> BankAccountDTO:
        account = get_bank_account(self._repo, account_id)
        account.rename_customer(customer_name)
        return self._commit(account)
