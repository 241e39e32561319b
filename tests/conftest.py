from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest
from starlette.testclient import TestClient

from main import create_app
from products.dependencies import get_product_repository

FRONTEND_URL = "http://localhost:5173"


class InMemoryProductRepository:
    """ProductRepository backed by a dict; records every call in `calls`."""

    def __init__(self) -> None:
        self.rows: dict[int, dict[str, Any]] = {}
        self.calls: list[str] = []
        self._next_id = 1

    def seed(self, **fields: Any) -> dict[str, Any]:
        now = datetime.now(timezone.utc)
        row = {
            "id": self._next_id,
            "availability": True,
            "created_at": now,
            "updated_at": now,
            **fields,
        }
        self.rows[row["id"]] = row
        self._next_id += 1
        return dict(row)

    @property
    def writes(self) -> list[str]:
        return [call for call in self.calls if call in {"create", "update", "delete"}]

    async def find_all(self) -> list[dict[str, Any]]:
        self.calls.append("find_all")
        return [dict(self.rows[key]) for key in sorted(self.rows, reverse=True)]

    async def find_by_id(self, product_id: int) -> dict[str, Any] | None:
        self.calls.append("find_by_id")
        row = self.rows.get(product_id)
        return dict(row) if row is not None else None

    async def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        self.calls.append("create")
        return self.seed(**fields)

    async def update(self, product_id: int, fields: dict[str, Any]) -> dict[str, Any] | None:
        self.calls.append("update")
        row = self.rows.get(product_id)
        if row is None:
            return None
        row.update(fields)
        row["updated_at"] = datetime.now(timezone.utc)
        return dict(row)

    async def delete(self, product_id: int) -> bool:
        self.calls.append("delete")
        return self.rows.pop(product_id, None) is not None


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def app(repository: InMemoryProductRepository):
    app = create_app(allowed_origin=FRONTEND_URL, allow_no_origin=False)
    app.dependency_overrides[get_product_repository] = lambda: repository
    return app


@pytest.fixture
def client(app) -> TestClient:
    # No `with`: the lifespan (and its DB connection) is not started.
    return TestClient(app, headers={"Origin": FRONTEND_URL})
