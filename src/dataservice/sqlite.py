"""Local SQLite fact service."""

import asyncio
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Optional

import structlog

from board.errors import ServiceError
from board.models import Fact, FactId
from dataservice.base import FactService
from shared_types import VoteKind

logger = structlog.get_logger(source="sqlite_facts")

_COLUMNS = {k.value for k in VoteKind}


def wal_connect(db_path: Path) -> sqlite3.Connection:
    """Open a connection in WAL mode with Row results."""
    conn = sqlite3.connect(str(db_path))
    conn.execute("PRAGMA journal_mode=WAL")
    conn.row_factory = sqlite3.Row
    return conn


class SQLiteFactService(FactService):
    """Facts table in a local database file.

    Blocking sqlite3 calls run on a worker thread so the event loop stays free.
    """

    def __init__(self, db_path: str | Path, table: str = "facts"):
        if not table.isidentifier():
            raise ValueError(f"Invalid table name: {table}")
        self.db_path = Path(db_path).expanduser()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.table = table
        self.init_schema()

    @property
    def name(self) -> str:
        return "sqlite"

    def init_schema(self) -> None:
        with closing(wal_connect(self.db_path)) as conn, conn:
            conn.execute(f"""
                CREATE TABLE IF NOT EXISTS {self.table} (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    text TEXT NOT NULL CHECK(length(text) <= 200),
                    source TEXT NOT NULL,
                    category TEXT NOT NULL,
                    votesInteresting INTEGER NOT NULL DEFAULT 0,
                    votesMindblowing INTEGER NOT NULL DEFAULT 0,
                    votesFalse INTEGER NOT NULL DEFAULT 0
                )
            """)
            conn.execute(
                f"CREATE INDEX IF NOT EXISTS idx_{self.table}_category ON {self.table}(category)"
            )

    async def select(self, category: Optional[str] = None) -> list[Fact]:
        return await self._run(self._select, category)

    async def insert(self, text: str, source: str, category: str) -> Fact:
        return await self._run(self._insert, text, source, category)

    async def update(self, fact_id: FactId, field: VoteKind, value: int) -> Fact:
        return await self._run(self._update, fact_id, field, value)

    async def _run(self, fn, *args):
        try:
            return await asyncio.to_thread(fn, *args)
        except sqlite3.Error as e:
            logger.error("sqlite_error", op=fn.__name__, error=str(e))
            raise ServiceError(str(e)) from e

    def _select(self, category: Optional[str]) -> list[Fact]:
        query = f"SELECT * FROM {self.table}"
        params: list = []
        if category:
            query += " WHERE category = ?"
            params.append(category)
        query += f" ORDER BY {VoteKind.INTERESTING.value} DESC, id ASC"
        with closing(wal_connect(self.db_path)) as conn:
            rows = conn.execute(query, params).fetchall()
        return [Fact.from_record(dict(r)) for r in rows]

    def _insert(self, text: str, source: str, category: str) -> Fact:
        with closing(wal_connect(self.db_path)) as conn, conn:
            cur = conn.execute(
                f"INSERT INTO {self.table} (text, source, category) VALUES (?, ?, ?)",
                (text, source, category),
            )
            row = conn.execute(
                f"SELECT * FROM {self.table} WHERE id = ?", (cur.lastrowid,)
            ).fetchone()
        return Fact.from_record(dict(row))

    def _update(self, fact_id: FactId, field: VoteKind, value: int) -> Fact:
        # Column names cannot be bound parameters
        if field.value not in _COLUMNS:
            raise ServiceError(f"Not a vote column: {field}")
        with closing(wal_connect(self.db_path)) as conn, conn:
            cur = conn.execute(
                f"UPDATE {self.table} SET {field.value} = ? WHERE id = ?", (value, fact_id)
            )
            if cur.rowcount == 0:
                raise ServiceError(f"No fact with id {fact_id}")
            row = conn.execute(f"SELECT * FROM {self.table} WHERE id = ?", (fact_id,)).fetchone()
        return Fact.from_record(dict(row))
