"""Application service: Register Account use case."""

from __future__ import annotations

import logging
from uuid import UUID

from ordering.domain.model.account import Account
from ordering.domain.repository.account_repository import AccountRepository

logger = logging.getLogger(__name__)


class RegisterAccountHandler:

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    def handle(self, account_id: UUID | None = None) -> UUID:
        """Register an account, under *account_id* if given, and return its ID."""
        account = Account(account_id or self._account_repo.next_id())
        self._account_repo.save(account)
        logger.info("Registered account %s", account.id)
        return account.id
