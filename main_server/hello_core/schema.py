from __future__ import annotations

"""
Table bootstrap ("migrations") for the hello server.

Runs on app startup when HELLO_AUTO_SCHEMA=1, or by hand:

  python -m hello_core.schema
"""

from .db import Database


def ensure_schema(db: Database) -> None:
    # ---- Singleton message row (id=1) ----
    db.execute(
        """
        CREATE TABLE IF NOT EXISTS messages (
          id       INT NOT NULL PRIMARY KEY,
          content  TEXT NOT NULL
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4
        """
    )

    # ---- Events table ----
    db.execute(
        """
        CREATE TABLE IF NOT EXISTS event_log (
          id BIGINT NOT NULL AUTO_INCREMENT PRIMARY KEY,
          created_at DATETIME(6) NOT NULL DEFAULT CURRENT_TIMESTAMP(6),
          src VARCHAR(64) NOT NULL,
          level VARCHAR(16) NOT NULL,
          event VARCHAR(64) NOT NULL,
          detail TEXT NOT NULL,

          KEY idx_event_created (created_at),
          KEY idx_event_src_created (src, created_at)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4
        """
    )


if __name__ == "__main__":
    from .log import get_logger

    database = Database()
    ensure_schema(database)
    get_logger().warning("Schema ensured on %s:%s/%s", database.host, database.port, database.database)
