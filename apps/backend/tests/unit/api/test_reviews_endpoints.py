"""
Name: Review Endpoint Tests

Responsibilities:
  - Exercise /reviews over the full app with in-memory adapters
  - Verify camelCase wire format, status codes and RFC7807 errors
  - Verify events reach the publisher through the HTTP path
"""

from __future__ import annotations

from unittest.mock import Mock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from feedback.api.main import app
from feedback.application.usecases import (
    CreateReviewUseCase,
    DeleteReviewUseCase,
    UpdateReviewUseCase,
)
from feedback.container import (
    get_create_review_use_case,
    get_delete_review_use_case,
    get_event_publisher,
    get_review_repository,
    get_update_review_use_case,
    get_user_repository,
)
from feedback.crosscutting.exceptions import EventPublishError

pytestmark = pytest.mark.unit


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user_id(client) -> str:
    response = client.post("/users", json={"name": "Ana", "email": "ana@example.com"})
    return response.json()["id"]


def _create_review(client, user_id: str, score: int = 5, comment: str | None = "great"):
    body = {"userId": user_id, "score": score}
    if comment is not None:
        body["comment"] = comment
    return client.post("/reviews", json=body)


def test_create_review_returns_201_camel_case(client, user_id):
    response = _create_review(client, user_id)

    assert response.status_code == 201
    body = response.json()
    assert body["userId"] == user_id
    assert body["score"] == 5
    assert body["comment"] == "great"
    assert body["user"] == {"id": user_id, "name": "Ana", "email": "ana@example.com"}
    assert "createdAt" in body and "updatedAt" in body

    events = get_event_publisher().events_for("review.created")
    assert len(events) == 1
    assert events[0].payload.to_dict() == {"userId": user_id, "score": 5}


def test_create_review_unknown_user_is_404(client):
    missing = str(uuid4())

    response = _create_review(client, missing)

    assert response.status_code == 404
    body = response.json()
    assert body["code"] == "NOT_FOUND"
    assert body["detail"] == f"User with ID {missing} not found"
    assert get_event_publisher().published == []


@pytest.mark.parametrize(
    "payload",
    [
        {"userId": None, "score": 5},
        {"userId": "not-a-uuid", "score": 5},
        {"score": 0},
        {"score": 6},
        {"score": "5"},
        {"score": 4.5},
        {"score": 5, "comment": "x" * 1001},
        {"score": 5, "rating": 5},
    ],
)
def test_create_review_invalid_payload_is_400(client, user_id, payload):
    body = {"userId": user_id, **payload}
    if body["userId"] is None:
        del body["userId"]

    response = client.post("/reviews", json=body)

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert get_event_publisher().published == []


def test_list_reviews_most_recent_first(client, user_id):
    first = _create_review(client, user_id, score=1).json()
    second = _create_review(client, user_id, score=2).json()

    response = client.get("/reviews")

    assert response.status_code == 200
    assert [r["id"] for r in response.json()] == [second["id"], first["id"]]


def test_get_review_and_not_found(client, user_id):
    created = _create_review(client, user_id).json()

    ok = client.get(f"/reviews/{created['id']}")
    missing_id = str(uuid4())
    missing = client.get(f"/reviews/{missing_id}")

    assert ok.status_code == 200
    assert ok.json() == created
    assert missing.status_code == 404
    assert missing.json()["detail"] == f"Review with ID {missing_id} not found"


def test_get_review_bad_uuid_is_400(client):
    response = client.get("/reviews/123")

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_patch_review_emits_update_with_deltas(client, user_id):
    created = _create_review(client, user_id, score=5).json()
    get_event_publisher().clear()

    response = client.patch(f"/reviews/{created['id']}", json={"score": 4})

    assert response.status_code == 200
    assert response.json()["score"] == 4
    (event,) = get_event_publisher().events_for("review.updated")
    assert event.payload.to_dict() == {
        "userId": user_id,
        "score": 4,
        "oldUserId": user_id,
        "oldScore": 5,
    }


def test_patch_review_to_unknown_user_is_404(client, user_id):
    created = _create_review(client, user_id).json()

    response = client.patch(f"/reviews/{created['id']}", json={"userId": str(uuid4())})

    assert response.status_code == 404
    assert response.json()["detail"].startswith("User with ID")


def test_patch_review_invalid_score_is_400(client, user_id):
    created = _create_review(client, user_id).json()

    response = client.patch(f"/reviews/{created['id']}", json={"score": 9})

    assert response.status_code == 400


def test_delete_review_then_get_is_404(client, user_id):
    created = _create_review(client, user_id, score=3).json()
    get_event_publisher().clear()

    deleted = client.delete(f"/reviews/{created['id']}")
    after = client.get(f"/reviews/{created['id']}")

    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Review removed successfully"}
    assert after.status_code == 404
    (event,) = get_event_publisher().events_for("review.deleted")
    assert event.payload.to_dict() == {"userId": user_id, "score": 3}


def test_delete_missing_review_is_404_without_event(client):
    response = client.delete(f"/reviews/{uuid4()}")

    assert response.status_code == 404
    assert get_event_publisher().published == []


def test_publish_failure_is_502(client, user_id):
    failing = Mock()
    failing.publish.side_effect = EventPublishError("broker down")
    app.dependency_overrides[get_create_review_use_case] = lambda: CreateReviewUseCase(
        user_repository=get_user_repository(),
        review_repository=get_review_repository(),
        event_publisher=failing,
    )

    response = _create_review(client, user_id)

    assert response.status_code == 502
    body = response.json()
    assert body["code"] == "EVENT_PUBLISH_ERROR"
    assert response.headers["content-type"].startswith("application/problem+json")


def _failing_publisher() -> Mock:
    failing = Mock()
    failing.publish.side_effect = EventPublishError("broker down")
    return failing


def test_update_publish_failure_is_502_and_change_is_kept(client, user_id):
    created = _create_review(client, user_id, score=5).json()
    failing = _failing_publisher()
    app.dependency_overrides[get_update_review_use_case] = lambda: UpdateReviewUseCase(
        user_repository=get_user_repository(),
        review_repository=get_review_repository(),
        event_publisher=failing,
    )

    response = client.patch(f"/reviews/{created['id']}", json={"score": 1})

    assert response.status_code == 502
    assert response.json()["code"] == "EVENT_PUBLISH_ERROR"
    failing.publish.assert_called_once()
    assert client.get(f"/reviews/{created['id']}").json()["score"] == 1


def test_delete_publish_failure_is_502_and_review_is_gone(client, user_id):
    created = _create_review(client, user_id).json()
    failing = _failing_publisher()
    app.dependency_overrides[get_delete_review_use_case] = lambda: DeleteReviewUseCase(
        review_repository=get_review_repository(),
        event_publisher=failing,
    )

    response = client.delete(f"/reviews/{created['id']}")

    assert response.status_code == 502
    failing.publish.assert_called_once()
    assert client.get(f"/reviews/{created['id']}").status_code == 404


@pytest.mark.parametrize(
    "payload",
    [{"score": None}, {"userId": None}, {"comment": None}, {"score": None, "userId": None}],
)
def test_update_with_explicit_null_is_400_without_event(client, user_id, payload):
    created = _create_review(client, user_id).json()
    published_before = len(get_event_publisher().published)

    response = client.patch(f"/reviews/{created['id']}", json=payload)

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert len(get_event_publisher().published) == published_before


def test_integral_float_score_is_accepted(client, user_id):
    response = client.post("/reviews", json={"userId": user_id, "score": 5.0})

    assert response.status_code == 201
    assert response.json()["score"] == 5
