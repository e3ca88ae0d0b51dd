"""Async PostgREST (Supabase REST) gateway."""

from __future__ import annotations

import logging
from typing import Any, Sequence
from urllib.parse import quote

import httpx

from colprov.errors import StoreError, StoreErrorCode
from colprov.gateway.base import DataStoreGateway, Row

logger = logging.getLogger("colprov.gateway")

# PostgREST: function not found in the schema cache.
_FUNCTION_NOT_FOUND = "PGRST202"
# Postgres SQLSTATE codes.
_UNDEFINED_FUNCTION = "42883"
_UNIQUE_VIOLATION = "23505"


def classify_error(code: str | None, message: str) -> StoreErrorCode:
    if code in (_FUNCTION_NOT_FOUND, _UNDEFINED_FUNCTION):
        return StoreErrorCode.CAPABILITY_UNAVAILABLE
    if code == _UNIQUE_VIOLATION:
        return StoreErrorCode.DUPLICATE
    if code:
        return StoreErrorCode.STORE
    # Bodies without a code (proxies, older servers) only carry wording.
    lowered = message.lower()
    if "function" in lowered and "does not exist" in lowered:
        return StoreErrorCode.CAPABILITY_UNAVAILABLE
    if "duplicate" in lowered:
        return StoreErrorCode.DUPLICATE
    return StoreErrorCode.STORE


def error_from_response(resp: httpx.Response) -> StoreError:
    code: str | None = None
    message = resp.text or f"HTTP {resp.status_code}"
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        code = str(body["code"]) if body.get("code") is not None else None
        message = body.get("message") or message
    return StoreError(message, classify_error(code, message))


class PostgrestGateway(DataStoreGateway):
    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30.0,
        sql_function: str = "exec_sql",
        sql_argument: str = "query",
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.sql_function = sql_function
        self.sql_argument = sql_argument
        self._api_key = api_key
        self._client: httpx.AsyncClient | None = None

    async def start(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=f"{self.base_url}/rest/v1",
            timeout=httpx.Timeout(self.timeout, connect=10.0),
            headers={
                "apikey": self._api_key,
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
            },
        )

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("PostgrestGateway not started. Call start() first.")
        return self._client

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            resp = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise StoreError(f"Data store request failed: {exc}") from exc
        if resp.status_code >= 400:
            err = error_from_response(resp)
            logger.debug("%s %s -> %s (%s): %s", method, path, resp.status_code, err.code, err.message)
            raise err
        return resp

    @staticmethod
    def _table_path(table: str) -> str:
        return "/" + quote(table, safe="")

    async def execute_privileged_command(self, sql: str) -> None:
        await self._request(
            "POST",
            f"/rpc/{quote(self.sql_function, safe='')}",
            json={self.sql_argument: sql},
        )

    async def select_rows(self, table: str, columns: Sequence[str], limit: int) -> list[Row]:
        params = {"select": ",".join(columns) or "*", "limit": str(limit)}
        resp = await self._request("GET", self._table_path(table), params=params)
        data = resp.json() if resp.content else []
        return data if isinstance(data, list) else [data]

    async def update_row(self, table: str, patch: Row, match: Row) -> None:
        params = {key: f"eq.{value}" for key, value in match.items()}
        await self._request(
            "PATCH",
            self._table_path(table),
            params=params,
            json=patch,
            headers={"Prefer": "return=minimal"},
        )

    async def insert_row(self, table: str, patch: Row) -> None:
        await self._request(
            "POST",
            self._table_path(table),
            json=patch,
            headers={"Prefer": "return=minimal"},
        )

    async def health(self) -> bool:
        try:
            resp = await self.client.get("/")
            return resp.status_code < 400
        except Exception:
            return False
