"""
Product persistence (raw SQL).

Handlers depend on the `ProductRepository` protocol only; the Postgres
implementation below is wired in by `dependencies.get_product_repository`.
"""

from __future__ import annotations

from typing import Any, Protocol

from core.db import Database

PRODUCT_COLUMNS = "id, name, price, availability, created_at, updated_at"

# Columns a client may write. `id` and the timestamps belong to the store.
WRITABLE_COLUMNS = ("name", "price", "availability")

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS products (
    id SERIAL PRIMARY KEY,
    name VARCHAR(100) NOT NULL,
    price DOUBLE PRECISION NOT NULL,
    availability BOOLEAN NOT NULL DEFAULT true,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
    updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
)
"""


class ProductRepository(Protocol):
    async def find_all(self) -> list[dict[str, Any]]: ...

    async def find_by_id(self, product_id: int) -> dict[str, Any] | None: ...

    async def create(self, fields: dict[str, Any]) -> dict[str, Any]: ...

    async def update(self, product_id: int, fields: dict[str, Any]) -> dict[str, Any] | None: ...

    async def delete(self, product_id: int) -> bool: ...


def _writable(fields: dict[str, Any]) -> dict[str, Any]:
    return {k: v for (k, v) in fields.items() if k in WRITABLE_COLUMNS and v is not None}


async def ensure_schema(db: Database) -> None:
    await db.execute(CREATE_TABLE_SQL)


class PostgresProductRepository:
    def __init__(self, db: Database) -> None:
        self.db = db

    async def find_all(self) -> list[dict[str, Any]]:
        return await self.db.fetch_all(
            f"""
            SELECT {PRODUCT_COLUMNS}
            FROM products
            ORDER BY id DESC
            """
        )

    async def find_by_id(self, product_id: int) -> dict[str, Any] | None:
        return await self.db.fetch_one(
            f"""
            SELECT {PRODUCT_COLUMNS}
            FROM products
            WHERE id = $1
            """,
            product_id,
        )

    async def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        values = _writable(fields)
        if not values:
            raise ValueError("No product fields to insert.")

        columns = ", ".join(values)
        placeholders = ", ".join(f"${i}" for i in range(1, len(values) + 1))
        row = await self.db.fetch_one(
            f"""
            INSERT INTO products ({columns})
            VALUES ({placeholders})
            RETURNING {PRODUCT_COLUMNS}
            """,
            *values.values(),
        )
        if row is None:
            raise RuntimeError("Failed to create product.")
        return row

    async def update(self, product_id: int, fields: dict[str, Any]) -> dict[str, Any] | None:
        """
        Write `fields` and return the new row, or None if the row is gone.
        """
        values = _writable(fields)
        if not values:
            return await self.find_by_id(product_id)

        # $1 is the id; field values start at $2.
        assignments = ", ".join(f"{column} = ${i}" for i, column in enumerate(values, start=2))
        return await self.db.fetch_one(
            f"""
            UPDATE products
            SET {assignments},
                updated_at = now()
            WHERE id = $1
            RETURNING {PRODUCT_COLUMNS}
            """,
            product_id,
            *values.values(),
        )

    async def delete(self, product_id: int) -> bool:
        row = await self.db.fetch_one(
            """
            DELETE FROM products
            WHERE id = $1
            RETURNING id
            """,
            product_id,
        )
        return row is not None
