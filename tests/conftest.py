"""Test fixtures: an in-memory gateway that records every call."""

from __future__ import annotations

from typing import Any, Sequence

import pytest
from prometheus_client import CollectorRegistry

from colprov.errors import StoreError, StoreErrorCode
from colprov.gateway.base import DataStoreGateway
from colprov.observability.metrics import Metrics


class RecordingGateway(DataStoreGateway):
    """Gateway stub: each operation either succeeds or raises its configured error."""

    def __init__(self, rows: list[dict[str, Any]] | None = None) -> None:
        self.rows = rows or []
        self.calls: list[tuple[str, Any]] = []
        self.privileged_error: StoreError | None = None
        self.select_error: StoreError | None = None
        self.update_error: StoreError | None = None
        self.insert_error: StoreError | None = None
        self.started = False
        self.closed = False

    @property
    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    async def start(self) -> None:
        self.started = True

    async def close(self) -> None:
        self.closed = True

    async def execute_privileged_command(self, sql: str) -> None:
        self.calls.append(("privileged", sql))
        if self.privileged_error:
            raise self.privileged_error

    async def select_rows(self, table: str, columns: Sequence[str], limit: int) -> list[dict[str, Any]]:
        self.calls.append(("select", (table, list(columns), limit)))
        if self.select_error:
            raise self.select_error
        return self.rows[:limit]

    async def update_row(self, table: str, patch: dict[str, Any], match: dict[str, Any]) -> None:
        self.calls.append(("update", (table, patch, match)))
        if self.update_error:
            raise self.update_error

    async def insert_row(self, table: str, patch: dict[str, Any]) -> None:
        self.calls.append(("insert", (table, patch)))
        if self.insert_error:
            raise self.insert_error


@pytest.fixture
def gateway():
    return RecordingGateway()


@pytest.fixture
def metrics_registry():
    return CollectorRegistry()


@pytest.fixture
def metrics(metrics_registry):
    return Metrics(registry=metrics_registry)


@pytest.fixture
def settings():
    return {
        "supabase_url": "https://example.supabase.co",
        "service_role_key": "test-service-role-key",
        "target_table": "inventory",
        "log_level": "WARNING",
    }


@pytest.fixture
def capability_missing():
    return StoreError(
        "Could not find the function public.exec_sql(query) in the schema cache",
        StoreErrorCode.CAPABILITY_UNAVAILABLE,
    )
