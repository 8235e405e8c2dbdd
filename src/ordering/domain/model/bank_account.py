"""BankAccount aggregate.

Operations are named after what happens in banking (open, deposit,
withdraw, rename the customer) instead of setters on raw fields.  Every
successful operation records a domain event.
"""

from __future__ import annotations

from uuid import UUID

from ordering.domain.exceptions import InvalidArgumentError, InvalidStateError
from ordering.domain.model.aggregate_root import AggregateRoot
from ordering.domain.model.events import (
    BankAccountCustomerRenamed,
    BankAccountDeposited,
    BankAccountOpened,
    BankAccountWithdrawn,
)
from ordering.domain.model.value_objects import DEFAULT_CURRENCY, Money


class BankAccount(AggregateRoot):
    """Aggregate root for a customer's bank account.

    Invariants:
    - ``customer_name`` is never blank
    - ``balance`` never goes below zero
    """

    def __init__(
        self,
        account_id: UUID,
        customer_name: str,
        balance: Money | None = None,
    ) -> None:
        super().__init__(account_id)
        self._customer_name = customer_name
        self._balance = balance if balance is not None else Money.zero(DEFAULT_CURRENCY)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def open(account_id: UUID, customer_name: str, currency: str = DEFAULT_CURRENCY) -> BankAccount:
        name = _require_name(customer_name)
        account = BankAccount(account_id, name, Money.zero(currency))
        account._record(BankAccountOpened(bank_account_id=account_id, customer_name=name))
        return account

    # --- Read-only view -------------------------------------------------------

    @property
    def customer_name(self) -> str:
        return self._customer_name

    @property
    def balance(self) -> Money:
        return self._balance

    # --- Behaviour ------------------------------------------------------------

    def rename_customer(self, customer_name: str) -> None:
        name = _require_name(customer_name)
        if name == self._customer_name:
            return

        self._customer_name = name
        self._record(BankAccountCustomerRenamed(bank_account_id=self.id, customer_name=name))

    def deposit(self, amount: Money) -> None:
        self._require_positive(amount, "Deposit")

        self._balance = self._balance + amount
        self._record(
            BankAccountDeposited(bank_account_id=self.id, amount=amount, new_balance=self._balance)
        )

    def withdraw(self, amount: Money) -> None:
        self._require_positive(amount, "Withdraw")
        if self._balance < amount:
            raise InvalidStateError(
                f"Insufficient balance: {self._balance} available, {amount} requested"
            )

        self._balance = self._balance - amount
        self._record(
            BankAccountWithdrawn(bank_account_id=self.id, amount=amount, new_balance=self._balance)
        )

    # --- Internal helpers -----------------------------------------------------

    def _require_positive(self, amount: Money, operation: str) -> None:
        if not isinstance(amount, Money):
            raise InvalidArgumentError(
                f"{operation} amount must be Money, got {type(amount).__name__}"
            )
        if amount.currency != self._balance.currency:
            raise InvalidArgumentError(
                f"Account is held in {self._balance.currency}, got {amount.currency}"
            )
        if amount.amount <= 0:
            raise InvalidArgumentError(f"{operation} amount must be positive")


def _require_name(customer_name: str) -> str:
    if not customer_name or not customer_name.strip():
        raise InvalidArgumentError("Invalid customer name")
    return customer_name.strip()
