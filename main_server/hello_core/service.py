from __future__ import annotations

from typing import Optional

from .errors import ValidationError
from .repository import MessageStore


class HelloService:
    def __init__(self, store: MessageStore):
        self._store = store

    def get_message(self) -> str:
        return self._store.get_message()

    def set_message(self, content: Optional[str]) -> str:
        """Trim and store the message. Whitespace-only content is rejected."""
        if content is None or not content.strip():
            raise ValidationError("Message content cannot be empty")
        return self._store.set_message(content.strip())
