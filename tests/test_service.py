"""Tests for HelloService with a plain in-memory store."""

import pytest

from hello_core.errors import ValidationError
from hello_core.service import HelloService


class MemoryStore:
    """Satisfies MessageStore without inheriting from anything."""

    def __init__(self, message="hello"):
        self.message = message
        self.writes = []

    def get_message(self):
        return self.message

    def set_message(self, content):
        self.writes.append(content)
        self.message = content
        return content


def test_get_message_passes_through():
    assert HelloService(MemoryStore("stored")).get_message() == "stored"


def test_set_message_trims_before_storing():
    store = MemoryStore()

    result = HelloService(store).set_message("  X  ")

    assert result == "X"
    assert store.writes == ["X"]


@pytest.mark.parametrize("content", ["", "   ", "\t\n", None])
def test_set_message_rejects_empty_content(content):
    store = MemoryStore()

    with pytest.raises(ValidationError) as exc:
        HelloService(store).set_message(content)

    assert exc.value.message == "Message content cannot be empty"
    assert store.writes == []
