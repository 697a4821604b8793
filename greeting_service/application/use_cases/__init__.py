"""Aggregate application use cases."""

from .get_greeting import DEFAULT_GREETING, create_greeting, get_message

__all__ = [
    "DEFAULT_GREETING",
    "create_greeting",
    "get_message",
]
