import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import dataclasses

import pytest

from greeting_service.application.use_cases import (
    DEFAULT_GREETING,
    create_greeting,
    get_message,
)
from greeting_service.domain.entities import Greeting


def test_get_message_returns_the_fixed_greeting():
    assert get_message() == "Hello from DevSecOps pipeline!"
    assert get_message() == DEFAULT_GREETING


def test_get_message_is_stable_across_calls():
    assert {get_message() for _ in range(100)} == {DEFAULT_GREETING}


def test_create_greeting_wraps_the_message():
    assert create_greeting() == Greeting(message=DEFAULT_GREETING)


def test_greeting_is_immutable():
    greeting = create_greeting()
    with pytest.raises(dataclasses.FrozenInstanceError):
        greeting.message = "changed"  # type: ignore[misc]


def test_greeting_encodes_as_utf8():
    assert Greeting(message="café").encode() == b"caf\xc3\xa9"
