"""Base class for aggregate roots.

An aggregate root owns its identity and a buffer of domain events.
Events are recorded by the aggregate's own behaviour methods and are
drained by the application layer after the operation succeeds, so
nothing inside the domain ever talks to the outside world.
"""

from __future__ import annotations

from uuid import UUID

from ordering.domain.model.events import DomainEvent


class AggregateRoot:

    def __init__(self, aggregate_id: UUID) -> None:
        self._id = aggregate_id
        self._domain_events: list[DomainEvent] = []

    @property
    def id(self) -> UUID:
        return self._id

    def pull_domain_events(self) -> list[DomainEvent]:
        """Return the recorded events and clear the buffer."""
        events, self._domain_events = self._domain_events, []
        return events

    def _record(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AggregateRoot):
            return NotImplemented
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))
