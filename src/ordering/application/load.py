"""Shared lookups used by the application handlers."""

from __future__ import annotations

from uuid import UUID

from ordering.domain.exceptions import EntityNotFoundError
from ordering.domain.model.bank_account import BankAccount
from ordering.domain.model.order import Order
from ordering.domain.repository.bank_account_repository import BankAccountRepository
from ordering.domain.repository.order_repository import OrderRepository


def get_order(order_repo: OrderRepository, order_id: UUID) -> Order:
    order = order_repo.get_by_id(order_id)
    if order is None:
        raise EntityNotFoundError(f"Order {order_id} not found")
    return order


def get_bank_account(repo: BankAccountRepository, account_id: UUID) -> BankAccount:
    account = repo.get_by_id(account_id)
    if account is None:
        raise EntityNotFoundError(f"Bank account {account_id} not found")
    return account
