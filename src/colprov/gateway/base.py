"""Abstract data store gateway used by the column provisioner."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

Row = dict[str, Any]


class DataStoreGateway(ABC):
    """Privileged schema commands plus ordinary row reads and writes.

    Every method raises ``colprov.errors.StoreError`` on failure.
    """

    async def start(self) -> None:
        pass

    async def close(self) -> None:
        pass

    async def health(self) -> bool:
        return True

    @abstractmethod
    async def execute_privileged_command(self, sql: str) -> None:
        ...

    @abstractmethod
    async def select_rows(self, table: str, columns: Sequence[str], limit: int) -> list[Row]:
        ...

    @abstractmethod
    async def update_row(self, table: str, patch: Row, match: Row) -> None:
        ...

    @abstractmethod
    async def insert_row(self, table: str, patch: Row) -> None:
        ...
