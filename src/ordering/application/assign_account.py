"""Application service: Assign Account use case.

The only place that touches two aggregates at once: it checks that the
Account exists, then hands its *identity* to the Order.  The Order never
sees the Account object itself.
"""

from __future__ import annotations

import logging
from uuid import UUID

from ordering.application.dto import OrderDTO
from ordering.application.load import get_order
from ordering.application.mapping import order_to_dto
from ordering.domain.exceptions import EntityNotFoundError
from ordering.domain.repository.account_repository import AccountRepository
from ordering.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class AssignAccountHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        account_repo: AccountRepository,
    ) -> None:
        self._order_repo = order_repo
        self._account_repo = account_repo

    def handle(self, order_id: UUID, account_id: UUID) -> OrderDTO:
        order = get_order(self._order_repo, order_id)

        account = self._account_repo.get_by_id(account_id)
        if account is None:
            raise EntityNotFoundError(f"Account {account_id} not found")

        order.update_account(account.id)
        self._order_repo.save(order)

        logger.info("Order %s: assigned to account %s", order_id, account_id)
        return order_to_dto(order)
