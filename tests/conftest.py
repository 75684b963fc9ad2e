"""Shared fixtures: an in-memory stand-in for hello_core.db.Database."""

from typing import Any, Dict, List, Optional

import pymysql
import pytest
from fastapi.testclient import TestClient

from hello_core.app_factory import create_app


class FakeDatabase:
    """Understands exactly the statements the hello server issues."""

    def __init__(self, tables=("messages", "event_log")):
        self.tables = set(tables)
        self.rows: Dict[int, str] = {}
        self.events: List[tuple] = []
        self.statements: List[str] = []
        self.fail_with: Optional[Exception] = None

    def _record(self, sql: str) -> str:
        stmt = " ".join(sql.split())
        self.statements.append(stmt)
        if self.fail_with is not None:
            raise self.fail_with
        return stmt

    def _require(self, table: str) -> None:
        if table not in self.tables:
            raise pymysql.err.ProgrammingError(1146, f"Table 'hello_server.{table}' doesn't exist")

    def execute(self, sql: str, params: tuple = ()) -> int:
        stmt = self._record(sql)

        if stmt.startswith("CREATE TABLE IF NOT EXISTS"):
            self.tables.add(stmt.split()[5])
            return 0
        if stmt.startswith("INSERT INTO event_log"):
            self._require("event_log")
            self.events.append(params)
            return 1
        if stmt.startswith("UPDATE messages"):
            self._require("messages")
            content, message_id = params
            # MySQL reports 0 affected rows when the value is unchanged
            if message_id not in self.rows or self.rows[message_id] == content:
                return 0
            self.rows[message_id] = content
            return 1
        if stmt.startswith("INSERT IGNORE INTO messages"):
            self._require("messages")
            message_id, content = params
            if message_id in self.rows:
                return 0
            self.rows[message_id] = content
            return 1

        raise AssertionError(f"unexpected statement: {stmt}")

    def query_one(self, sql: str, params: tuple = ()) -> Optional[Dict[str, Any]]:
        stmt = self._record(sql)

        if stmt == "SELECT 1 AS ok":
            return {"ok": 1}
        if stmt.startswith("SELECT content FROM messages"):
            self._require("messages")
            (message_id,) = params
            if message_id not in self.rows:
                return None
            return {"content": self.rows[message_id]}

        raise AssertionError(f"unexpected query: {stmt}")

    def query_all(self, sql: str, params: tuple = ()) -> List[Dict[str, Any]]:
        row = self.query_one(sql, params)
        return [row] if row else []

    def ping(self) -> bool:
        try:
            return bool(self.query_one("SELECT 1 AS ok"))
        except pymysql.MySQLError:
            return False

    def message_statements(self) -> List[str]:
        return [s for s in self.statements if "messages" in s and not s.startswith("CREATE")]


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def client(fake_db):
    with TestClient(create_app(database=fake_db, auto_schema=True)) as c:
        yield c
