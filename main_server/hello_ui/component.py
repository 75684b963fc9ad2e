from __future__ import annotations

import logging
from typing import List, Optional

from .client import HelloClient, NetworkError

logger = logging.getLogger("hello_ui")


class HelloMessage:
    """
    Display/edit state for the hello message.

    loading -> displaying (or error, keeping the last message)
    displaying -> editing -> displaying (saved / cancelled)

    The draft lives apart from the confirmed message until a save succeeds.
    Nothing is retried automatically.
    """

    def __init__(self, client: HelloClient):
        self._client = client
        self.message: str = ""
        self.draft: str = ""
        self.loading: bool = True
        self.error: Optional[str] = None
        self.editing: bool = False
        self.saving: bool = False

    @property
    def can_save(self) -> bool:
        return not self.saving and bool(self.draft.strip())

    def mount(self) -> None:
        self.loading = True
        self.error = None
        try:
            message = self._client.get_message()
        except NetworkError as e:
            self.error = e.message
            logger.error("Error fetching hello message: %s", e.message)
        else:
            self.message = message
            self.draft = message
        finally:
            self.loading = False

    def start_edit(self) -> None:
        self.draft = self.message
        self.editing = True

    def set_draft(self, text: str) -> None:
        self.draft = text

    def save(self) -> None:
        if not self.draft.strip():
            self.error = "Message cannot be empty"
            return
        if self.saving:
            return

        self.saving = True
        self.error = None
        try:
            message = self._client.set_message(self.draft.strip())
        except NetworkError as e:
            # editing 유지, draft도 그대로
            self.error = e.message
            logger.error("Error saving message: %s", e.message)
        else:
            self.message = message
            self.draft = message
            self.editing = False
        finally:
            self.saving = False

    def cancel(self) -> None:
        self.draft = self.message
        self.editing = False
        self.error = None

    def handle_key(self, key: str) -> None:
        if not self.editing:
            return
        if key == "Enter":
            self.save()
        elif key == "Escape":
            self.cancel()

    def render(self) -> str:
        if self.loading:
            return "Loading..."

        lines: List[str] = []
        if self.error:
            lines.append(f"Error: {self.error}")

        if not self.editing:
            lines.append(self.message or "No message set")
            lines.append("[e] Edit Message")
        else:
            lines.append(f"> {self.draft}")
            save_label = "Saving..." if self.saving else "Save"
            if not self.can_save:
                save_label += " (disabled)"
            lines.append(f"[Enter] {save_label}  [Esc] Cancel")

        return "\n".join(lines)
