"""
CRC — domain/services.py

Name
- Domain Service Interfaces (Protocols)

Responsibilities
- Define the outbound event channel contract (EventPublisher).

Collaborators
- domain.events.ReviewEvent
- infrastructure.events: Redis Streams / in-memory implementations

Constraints
- publish() either returns (event accepted) or raises EventPublishError.
- No retries at this level; delivery guarantees belong to the broker.
"""

from typing import Protocol

from .events import ReviewEvent


class EventPublisher(Protocol):
    """R: Interface for publishing domain events."""

    def publish(self, topic: str, event: ReviewEvent) -> None:
        """R: Hand the event to the broker under `topic`."""
        ...
