"""Account aggregate.

Orders refer to an Account by its identity only, never by holding the
object, so neither aggregate needs to know the other's invariants.
"""

from __future__ import annotations

from uuid import UUID

from ordering.domain.model.aggregate_root import AggregateRoot


class Account(AggregateRoot):

    def __init__(self, account_id: UUID) -> None:
        super().__init__(account_id)

    def __repr__(self) -> str:
        return f"Account(id={self.id})"
