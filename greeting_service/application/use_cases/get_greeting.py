"""Use cases for producing the greeting message."""

from greeting_service.domain.entities.greeting import Greeting


DEFAULT_GREETING = "Hello from DevSecOps pipeline!"


def get_message() -> str:
    """Return the greeting text served for every request."""

    return DEFAULT_GREETING


def create_greeting() -> Greeting:
    return Greeting(message=get_message())
