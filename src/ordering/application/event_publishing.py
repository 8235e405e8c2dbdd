"""Hand-off of drained domain events to whoever wants them.

Aggregates only buffer events.  After an operation succeeds and the
aggregate is saved, the handler drains the buffer and passes each event
to an ``EventPublisher``: any callable taking one event.  Without one,
events are written to the log.
"""

from __future__ import annotations

import logging
from typing import Callable

from ordering.domain.model.aggregate_root import AggregateRoot
from ordering.domain.model.events import DomainEvent

logger = logging.getLogger(__name__)

EventPublisher = Callable[[DomainEvent], None]


def log_event(event: DomainEvent) -> None:
    logger.info("Domain event %s: %r", event.name, event)


def publish_pending_events(
    aggregate: AggregateRoot, publisher: EventPublisher | None = None
) -> list[DomainEvent]:
    """Drain *aggregate*'s events, publish each one, and return them."""
    publish = publisher or log_event
    events = aggregate.pull_domain_events()
    for event in events:
        publish(event)
    return events
