"""Application service: Open Bank Account use case."""

from __future__ import annotations

from ordering.application.dto import BankAccountDTO
from ordering.application.event_publishing import EventPublisher, publish_pending_events
from ordering.application.mapping import bank_account_to_dto
from ordering.domain.model.bank_account import BankAccount
from ordering.domain.model.value_objects import DEFAULT_CURRENCY
from ordering.domain.repository.bank_account_repository import BankAccountRepository


class OpenBankAccountHandler:

    def __init__(
        self,
        bank_account_repo: BankAccountRepository,
        publisher: EventPublisher | None = None,
    ) -> None:
        self._repo = bank_account_repo
        self._publisher = publisher

    def handle(self, customer_name: str, currency: str = DEFAULT_CURRENCY) -> BankAccountDTO:
        account = BankAccount.open(self._repo.next_id(), customer_name, currency)
        self._repo.save(account)

        events = publish_pending_events(account, self._publisher)
        return bank_account_to_dto(account, events)
