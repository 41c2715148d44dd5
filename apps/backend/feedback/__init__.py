"""Feedback API: users, reviews and review domain events."""

__version__ = "1.0.0"
