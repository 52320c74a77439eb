from __future__ import annotations

import copy
from types import SimpleNamespace
from typing import Any

import pytest


class FakeQuery:
    """Minimal stand-in for the supabase-py query builder."""

    def __init__(self, db: "FakeSupabase", table: str) -> None:
        self.db = db
        self.table = table
        self.filters: list = []
        self.order_by: tuple[str, bool] | None = None
        self.row_limit: int | None = None
        self.payload: Any = None
        self.count_mode: str | None = None

    def select(self, columns: str = "*", count: str | None = None) -> "FakeQuery":
        self.count_mode = count
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def gte(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append(lambda row: row.get(column) is not None and row[column] >= value)
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self.order_by = (column, desc)
        return self

    def limit(self, size: int) -> "FakeQuery":
        self.row_limit = size
        return self

    def insert(self, payload: Any) -> "FakeQuery":
        self.payload = payload
        return self

    def execute(self) -> SimpleNamespace:
        if self.payload is not None:
            return SimpleNamespace(data=self.db.insert(self.table, self.payload), count=None)

        rows = [row for row in self.db.tables.get(self.table, []) if all(f(row) for f in self.filters)]
        if self.order_by:
            column, desc = self.order_by
            rows.sort(key=lambda row: row[column], reverse=desc)
        count = len(rows)
        if self.row_limit is not None:
            rows = rows[: self.row_limit]
        return SimpleNamespace(data=copy.deepcopy(rows), count=count if self.count_mode else None)


class FakeSupabase:
    def __init__(self, tables: dict[str, list[dict]] | None = None) -> None:
        self.tables: dict[str, list[dict]] = {name: list(rows) for name, rows in (tables or {}).items()}
        self.next_customer_id = 1
        self.inserts: list[tuple[str, Any]] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def insert(self, table: str, payload: Any) -> list[dict]:
        self.inserts.append((table, payload))
        records = payload if isinstance(payload, list) else [payload]
        stored = []
        for record in records:
            row = dict(record)
            if table == "customer":
                row["customer_id"] = self.next_customer_id
                self.next_customer_id += 1
            self.tables.setdefault(table, []).append(row)
            stored.append(dict(row))
        return stored


def reference_tables() -> dict[str, list[dict]]:
    return {
        "prefecture": [
            {"prefecture_id": "01", "prefecture_name": "北海道"},
            {"prefecture_id": "13", "prefecture_name": "東京都"},
            {"prefecture_id": "27", "prefecture_name": "大阪府"},
        ],
        "prefecture_distance": [
            {"prefecture_id_from": "13", "prefecture_id_to": "27", "distance": 403.0},
            {"prefecture_id_from": "01", "prefecture_id_to": "13", "distance": 831.5},
        ],
        "package_box": [
            {"package_id": 1, "box": 1},
            {"package_id": 2, "box": 15},
            {"package_id": 3, "box": 5},
            {"package_id": 4, "box": 10},
        ],
        "truck_capacity": [
            {"max_box": 80, "price": 30000},
            {"max_box": 200, "price": 50000},
            {"max_box": 200, "price": 45000},
        ],
        "optional_service": [
            {"service_id": 1, "price": 3000},
            {"service_id": 2, "price": 5000},
        ],
    }


@pytest.fixture
def fake_db(monkeypatch: pytest.MonkeyPatch) -> FakeSupabase:
    from src.moving_estimate.data import reference_repository
    from src.moving_estimate.db import supabase as supabase_module
    from src.moving_estimate.persistence import orders

    db = FakeSupabase(reference_tables())
    monkeypatch.setattr(reference_repository, "require_supabase_client", lambda: db)
    monkeypatch.setattr(orders, "require_supabase_client", lambda: db)
    monkeypatch.setattr(supabase_module, "get_supabase_client", lambda: db)
    return db
