from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import pymysql

# ===== DB CONFIG =====
DB_HOST = os.getenv("HELLO_DB_HOST", "127.0.0.1")
DB_PORT = int(os.getenv("HELLO_DB_PORT", "3306"))
DB_USER = os.getenv("HELLO_DB_USER", "hello_user")
DB_PASS = os.getenv("HELLO_DB_PASS", "")
DB_NAME = os.getenv("HELLO_DB_NAME", "hello_server")

# 짧게 잡아서, DB 문제 때 API가 “멈춘 것처럼” 안 보이게 함
DB_CONNECT_TIMEOUT_SEC = 2
DB_RW_TIMEOUT_SEC = 3


class Database:
    """
    Handle on the MySQL database.

    Every call opens its own connection and closes it again, so one handle
    can be shared by all requests without any locking. Routes never build
    this themselves; the app factory injects it (see app_factory.create_app).
    """

    def __init__(
        self,
        host: str = DB_HOST,
        port: int = DB_PORT,
        user: str = DB_USER,
        password: str = DB_PASS,
        database: str = DB_NAME,
    ) -> None:
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.database = database

    def _get_conn(self):
        return pymysql.connect(
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            database=self.database,
            autocommit=True,
            cursorclass=pymysql.cursors.DictCursor,
            charset="utf8mb4",
            connect_timeout=DB_CONNECT_TIMEOUT_SEC,
            read_timeout=DB_RW_TIMEOUT_SEC,
            write_timeout=DB_RW_TIMEOUT_SEC,
        )

    def execute(self, sql: str, params: tuple = ()) -> int:
        """Run a write statement and return the affected row count."""
        conn = self._get_conn()
        try:
            with conn.cursor() as cur:
                return cur.execute(sql, params)
        finally:
            conn.close()

    def query_one(self, sql: str, params: tuple = ()) -> Optional[Dict[str, Any]]:
        conn = self._get_conn()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                return cur.fetchone()
        finally:
            conn.close()

    def query_all(self, sql: str, params: tuple = ()) -> List[Dict[str, Any]]:
        conn = self._get_conn()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                return list(cur.fetchall())
        finally:
            conn.close()

    def ping(self) -> bool:
        try:
            row = self.query_one("SELECT 1 AS ok")
        except pymysql.MySQLError:
            return False
        return bool(row)
