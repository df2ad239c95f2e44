"""
Shared test fixtures.

Endpoint tests run the real app against an in-memory pizza store that
replaces the repository functions, so no Postgres is needed.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from main import create_app
from pizzas import repository


class InMemoryPizzaStore:
    """Stands in for the pizzas table. `fail` makes every call return None."""

    def __init__(self) -> None:
        self.rows: dict[str, dict] = {}
        self.touched: list[str] = []
        self.fail = False

    async def list_pizzas(self, db) -> list[dict] | None:
        if self.fail:
            return None
        return [dict(row) for row in self.rows.values()]

    async def insert_pizza(self, db, *, uuid: str, pizza_name: str) -> dict | None:
        if self.fail or uuid in self.rows:
            return None
        self.rows[uuid] = {"uuid": uuid, "pizza_name": pizza_name}
        return dict(self.rows[uuid])

    async def update_pizza(self, db, uuid: str) -> dict | None:
        if self.fail or uuid not in self.rows:
            return None
        self.touched.append(uuid)
        return dict(self.rows[uuid])

    async def delete_pizza(self, db, uuid: str) -> dict | None:
        if self.fail:
            return None
        return self.rows.pop(uuid, None)


@pytest.fixture
def store(monkeypatch: pytest.MonkeyPatch) -> InMemoryPizzaStore:
    fake = InMemoryPizzaStore()
    monkeypatch.setattr(repository, "list_pizzas", fake.list_pizzas)
    monkeypatch.setattr(repository, "insert_pizza", fake.insert_pizza)
    monkeypatch.setattr(repository, "update_pizza", fake.update_pizza)
    monkeypatch.setattr(repository, "delete_pizza", fake.delete_pizza)
    return fake


@pytest.fixture
def client(store: InMemoryPizzaStore) -> Iterator[TestClient]:
    app = create_app(database=object())
    with TestClient(app) as test_client:
        yield test_client
