"""
===============================================================================
ARCHIVO: crosscutting/metrics.py
===============================================================================

Métricas Prometheus del servicio, en un CollectorRegistry propio para que
los tests no choquen con el registry global.

Labels de baja cardinalidad: las rutas se normalizan (UUID -> {id}) y los
status se agrupan por centena.

Colaboradores:
    - crosscutting.middleware (HTTP)
    - infrastructure.events (eventos de review)
    - api.main (/metrics)
===============================================================================
"""

from __future__ import annotations

import re

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry()

HTTP_REQUESTS = Counter(
    "feedback_requests",
    "HTTP requests served",
    ["endpoint", "method", "status"],
    registry=REGISTRY,
)
HTTP_LATENCY = Histogram(
    "feedback_request_latency_seconds",
    "HTTP request latency in seconds",
    ["endpoint", "method"],
    registry=REGISTRY,
)
EVENTS_PUBLISHED = Counter(
    "feedback_review_events_published",
    "Review events accepted by the broker",
    ["type"],
    registry=REGISTRY,
)
EVENTS_FAILED = Counter(
    "feedback_review_events_failed",
    "Review events the broker did not accept",
    ["type"],
    registry=REGISTRY,
)

_ID_SEGMENT = re.compile(
    r"/(?:[0-9a-fA-F]{8}(?:-[0-9a-fA-F]{4}){3}-[0-9a-fA-F]{12}|\d+)(?=/|$)"
)


def normalize_endpoint(path: str) -> str:
    return _ID_SEGMENT.sub("/{id}", path)


def status_class(status_code: int) -> str:
    if 100 <= status_code < 600:
        return f"{status_code // 100}xx"
    return "other"


def record_request_metrics(
    endpoint: str, method: str, status_code: int, latency_seconds: float
) -> None:
    route = normalize_endpoint(endpoint)
    HTTP_REQUESTS.labels(route, method, status_class(status_code)).inc()
    HTTP_LATENCY.labels(route, method).observe(latency_seconds)


def record_review_event_published(event_type: str) -> None:
    EVENTS_PUBLISHED.labels(event_type).inc()


def record_review_event_failed(event_type: str) -> None:
    EVENTS_FAILED.labels(event_type).inc()


def get_metrics_response() -> tuple[bytes, str]:
    return generate_latest(REGISTRY), CONTENT_TYPE_LATEST
