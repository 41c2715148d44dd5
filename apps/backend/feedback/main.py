"""ASGI entrypoint: `uvicorn feedback.main:app`."""

from feedback.api.main import app

__all__ = ["app"]
