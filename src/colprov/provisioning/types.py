"""Column request/result models and the logical-to-storage type mapping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ColumnType(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DATE = "date"
    TIMESTAMP = "timestamp"


TYPE_MAP: dict[str, str] = {
    ColumnType.TEXT.value: "TEXT",
    ColumnType.NUMBER.value: "NUMERIC",
    ColumnType.INTEGER.value: "INTEGER",
    ColumnType.BOOLEAN.value: "BOOLEAN",
    ColumnType.DATE.value: "DATE",
    ColumnType.TIMESTAMP.value: "TIMESTAMPTZ",
}

DEFAULT_STORAGE_TYPE = TYPE_MAP[ColumnType.TEXT.value]


def resolve_storage_type(column_type: str | None) -> str:
    """Map a logical type hint to a Postgres type keyword.

    Unknown or missing hints resolve to TEXT instead of failing.
    """
    if not isinstance(column_type, str):
        return DEFAULT_STORAGE_TYPE
    return TYPE_MAP.get(column_type, DEFAULT_STORAGE_TYPE)


@dataclass(frozen=True)
class ColumnRequest:
    column_name: str | None
    column_type: str | None = ColumnType.TEXT.value


@dataclass
class ProvisionResult:
    success: bool
    column_name: str | None = None
    column_type: str | None = None
    path: str | None = None  # ddl | update | insert
    error: str | None = None
    error_code: str | None = None
    client_error: bool = False
