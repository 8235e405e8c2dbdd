"""Domain events — immutable records of something that already happened."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID

from ordering.domain.model.value_objects import Money


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    occurred_at: datetime = field(default_factory=_now)

    @property
    def name(self) -> str:
        return type(self).__name__


@dataclass(frozen=True, kw_only=True)
class BankAccountOpened(DomainEvent):
    bank_account_id: UUID
    customer_name: str


@dataclass(frozen=True, kw_only=True)
class BankAccountCustomerRenamed(DomainEvent):
    bank_account_id: UUID
    customer_name: str


@dataclass(frozen=True, kw_only=True)
class BankAccountDeposited(DomainEvent):
    bank_account_id: UUID
    amount: Money
    new_balance: Money


@dataclass(frozen=True, kw_only=True)
class BankAccountWithdrawn(DomainEvent):
    bank_account_id: UUID
    amount: Money
    new_balance: Money
