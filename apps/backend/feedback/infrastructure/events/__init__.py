"""Adapters del puerto EventPublisher (Redis Streams / in-memory)."""

from .in_memory import InMemoryEventPublisher
from .redis_streams import RedisStreamConfig, RedisStreamEventPublisher

__all__ = ["InMemoryEventPublisher", "RedisStreamConfig", "RedisStreamEventPublisher"]
