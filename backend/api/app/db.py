# app/db.py
from typing import Any, List, Optional, Sequence

import aiosqlite
from fastapi import Request

USERS_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    age INTEGER NOT NULL
)
"""


class Database:
    """
    Storage handle shared by every request: one aiosqlite connection in
    autocommit mode. aiosqlite runs statements on its own worker thread one
    at a time, so concurrent handlers are serialized by the connection itself.
    """

    def __init__(self, path: str):
        self.path = path
        self.conn: Optional[aiosqlite.Connection] = None

    async def connect(self):
        self.conn = await aiosqlite.connect(self.path, isolation_level=None)
        self.conn.row_factory = aiosqlite.Row

    async def disconnect(self):
        if self.conn:
            await self.conn.close()
            self.conn = None

    async def create_tables(self):
        await self.conn.execute(USERS_TABLE_SQL)

    async def fetch_all(self, query: str, params: Sequence[Any] = ()) -> List[aiosqlite.Row]:
        async with self.conn.execute(query, params) as cur:
            return await cur.fetchall()

    async def fetch_one(self, query: str, params: Sequence[Any] = ()) -> Optional[aiosqlite.Row]:
        async with self.conn.execute(query, params) as cur:
            return await cur.fetchone()

    async def fetch_val(self, query: str, params: Sequence[Any] = ()) -> Any:
        row = await self.fetch_one(query, params)
        return row[0] if row is not None else None

    async def execute(self, query: str, params: Sequence[Any] = ()) -> int:
        # lastrowid is only meaningful for INSERT
        async with self.conn.execute(query, params) as cur:
            return cur.lastrowid


def get_db(request: Request) -> Database:
    return request.app.state.db
