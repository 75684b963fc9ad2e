from __future__ import annotations

from typing import Protocol

import pymysql

from .db import Database
from .errors import SchemaMissingError, StorageError
from .log import get_logger

MESSAGE_ID = 1
DEFAULT_MESSAGE = "Hello World from the database!"

# MySQL ER_NO_SUCH_TABLE
_ER_NO_SUCH_TABLE = 1146


class MessageStore(Protocol):
    """Anything that can read and replace the hello message."""

    def get_message(self) -> str: ...

    def set_message(self, content: str) -> str: ...


def _is_missing_table(e: pymysql.MySQLError) -> bool:
    if e.args and e.args[0] == _ER_NO_SUCH_TABLE:
        return True
    text = str(e).lower()
    return "doesn't exist" in text or "no such table" in text


class MessageRepository:
    """
    Data access for the singleton row in `messages`.

    Only this class talks to the table. Raw pymysql errors are turned into
    SchemaMissingError / StorageError here.
    """

    def __init__(self, db: Database):
        self._db = db

    def get_message(self) -> str:
        try:
            row = self._db.query_one("SELECT content FROM messages WHERE id=%s", (MESSAGE_ID,))
        except pymysql.MySQLError as e:
            get_logger().error("Error fetching hello message: %r", e)
            if _is_missing_table(e):
                raise SchemaMissingError() from e
            raise StorageError("Failed to fetch message from database") from e

        if not row or not row.get("content"):
            # 없으면 기본값을 저장해서 다음 GET도 같은 값이 나오게 함
            return self.set_message(DEFAULT_MESSAGE)

        return str(row["content"])

    def set_message(self, content: str) -> str:
        try:
            changed = self._db.execute("UPDATE messages SET content=%s WHERE id=%s", (content, MESSAGE_ID))
            if changed == 0:
                # 동시에 첫 write가 두 번 와도 PK 충돌은 무시 → row는 항상 1개
                self._db.execute(
                    "INSERT IGNORE INTO messages (id, content) VALUES (%s,%s)",
                    (MESSAGE_ID, content),
                )
        except pymysql.MySQLError as e:
            get_logger().error("Error creating/updating message: %r", e)
            if _is_missing_table(e):
                raise SchemaMissingError() from e
            raise StorageError("Failed to create/update message in database") from e

        return content
