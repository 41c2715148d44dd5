"""
Name: Redis Streams Event Publisher Tests

Responsibilities:
  - Verify XADD stream naming, fields and trimming options
  - Verify broker failures surface as EventPublishError

Notes:
  - redis client is a Mock; no server needed
"""

import json
from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from feedback.crosscutting.exceptions import EventPublishError
from feedback.domain.events import review_created, review_updated
from feedback.infrastructure.events import (
    RedisStreamConfig,
    RedisStreamEventPublisher,
)

pytestmark = pytest.mark.unit


def _publisher(redis_client, **config) -> RedisStreamEventPublisher:
    return RedisStreamEventPublisher(
        redis=redis_client, config=RedisStreamConfig(**config)
    )


def test_publish_writes_one_entry_per_topic_stream():
    redis_client = MagicMock()
    redis_client.xadd.return_value = b"1700000000000-0"
    event = review_created(uuid4(), 5)

    _publisher(redis_client, stream_prefix="fb:", maxlen=100).publish(
        event.topic, event
    )

    redis_client.xadd.assert_called_once()
    stream, fields = redis_client.xadd.call_args.args
    assert stream == "fb:review.created"
    assert fields["topic"] == "review.created"
    assert fields["type"] == "review.created"
    assert fields["event_id"] == str(event.event_id)
    assert json.loads(fields["data"]) == event.to_dict()
    assert redis_client.xadd.call_args.kwargs == {"maxlen": 100, "approximate": True}


def test_publish_without_maxlen_does_not_trim():
    redis_client = MagicMock()
    event = review_updated(uuid4(), 3, old_score=4)

    _publisher(redis_client, maxlen=0).publish(event.topic, event)

    assert redis_client.xadd.call_args.kwargs == {}


def test_publish_failure_raises_event_publish_error():
    redis_client = MagicMock()
    redis_client.xadd.side_effect = RedisConnectionError("connection refused")
    event = review_created(uuid4(), 1)

    with pytest.raises(EventPublishError) as exc_info:
        _publisher(redis_client).publish(event.topic, event)

    assert "review.created" in exc_info.value.message
    assert isinstance(exc_info.value.original_error, RedisConnectionError)


def test_stream_name_uses_prefix():
    publisher = _publisher(MagicMock(), stream_prefix="feedback:")

    assert publisher.stream_name("review.deleted") == "feedback:review.deleted"
