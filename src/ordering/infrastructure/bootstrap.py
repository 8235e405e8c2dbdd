"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Repositories are in-memory, so each call to ``container()`` starts from
an empty world that lasts as long as the returned object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ordering.infrastructure.persistence.in_memory_account_repository import (
    InMemoryAccountRepository,
)
from ordering.infrastructure.persistence.in_memory_bank_account_repository import (
    InMemoryBankAccountRepository,
)
from ordering.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Container:
    orders: InMemoryOrderRepository = field(default_factory=InMemoryOrderRepository)
    accounts: InMemoryAccountRepository = field(default_factory=InMemoryAccountRepository)
    bank_accounts: InMemoryBankAccountRepository = field(
        default_factory=InMemoryBankAccountRepository
    )


def container() -> Container:
    return Container()


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
