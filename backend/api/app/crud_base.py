# app/crud_base.py
from typing import Any, Dict, List, Sequence

import aiosqlite

from app.db import Database
from app.errors import NotFoundError

class CRUDBase:
    def __init__(self, db: Database, table: str, columns: Sequence[str], id_column: str = "id"):
        self.db = db
        self.table = table
        self.columns = list(columns)
        self.id_column = id_column

    async def count(self) -> int:
        return await self.db.fetch_val(f"SELECT COUNT(*) FROM {self.table}")

    async def list(self, limit: int, offset: int) -> List[aiosqlite.Row]:
        # no ORDER BY: rows come back in whatever order the engine scans them
        return await self.db.fetch_all(
            f"SELECT * FROM {self.table} LIMIT ? OFFSET ?", (limit, offset)
        )

    async def get(self, item_id: Any) -> aiosqlite.Row:
        row = await self.db.fetch_one(
            f"SELECT * FROM {self.table} WHERE {self.id_column} = ?", (item_id,)
        )
        if row is None:
            raise NotFoundError(
                f"{self.table} not found",
                developer_details=f"no row in {self.table} with {self.id_column} = {item_id!r}",
            )
        return row

    async def create(self, data: Dict[str, Any]) -> int:
        keys = [k for k in self.columns if k in data]
        query = f"""
        INSERT INTO {self.table} ({", ".join(keys)})
        VALUES ({", ".join("?" for _ in keys)})
        """
        return await self.db.execute(query, [data[k] for k in keys])

    async def update(self, item_id: Any, data: Dict[str, Any]):
        # unconditional overwrite; an unknown id touches zero rows
        keys = [k for k in self.columns if k in data]
        set_clause = ", ".join(f"{k} = ?" for k in keys)
        query = f"""
        UPDATE {self.table} SET {set_clause}
        WHERE {self.id_column} = ?
        """
        await self.db.execute(query, [data[k] for k in keys] + [item_id])

    async def delete(self, item_id: Any):
        await self.db.execute(
            f"DELETE FROM {self.table} WHERE {self.id_column} = ?", (item_id,)
        )
