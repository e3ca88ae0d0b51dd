"""Column provisioning: privileged DDL first, data-mutation fallback second."""

from __future__ import annotations

import logging
import time

from colprov.errors import ColprovError, InvalidInput, StoreError
from colprov.gateway.base import DataStoreGateway
from colprov.observability.metrics import Metrics
from colprov.provisioning.types import ColumnRequest, ProvisionResult, resolve_storage_type
from colprov.provisioning.validation import validate_column_name

logger = logging.getLogger("colprov.provisioning")


def add_column_sql(table: str, column_name: str, storage_type: str) -> str:
    return f'ALTER TABLE "{table}" ADD COLUMN IF NOT EXISTS "{column_name}" {storage_type};'


class ColumnProvisioner:
    """Ensure a table has a column using whatever access the gateway has.

    The privileged ``ALTER TABLE`` path is tried first. Only when the gateway
    reports the SQL procedure itself as unavailable does the provisioner fall
    back to writing a null value under the new column name, relying on the
    store to widen its schema on write: an existing row is updated when the
    table has one, otherwise a placeholder row is inserted.
    """

    def __init__(
        self,
        gateway: DataStoreGateway,
        table: str,
        key_column: str = "id",
        metrics: Metrics | None = None,
    ) -> None:
        self.gateway = gateway
        self.table = table
        self.key_column = key_column
        self.metrics = metrics

    async def provision(self, request: ColumnRequest) -> ProvisionResult:
        column_name = validate_column_name(request.column_name)
        storage_type = resolve_storage_type(request.column_type)

        sql = add_column_sql(self.table, column_name, storage_type)
        try:
            await self.gateway.execute_privileged_command(sql)
            path = "ddl"
        except StoreError as exc:
            if not exc.capability_unavailable:
                raise
            logger.warning(
                "Privileged SQL unavailable on %s (%s); falling back to data mutation",
                self.table, exc.message,
            )
            path = await self._provision_by_mutation(column_name)

        logger.info("Column %r (%s) ensured on %s via %s", column_name, storage_type, self.table, path)
        return ProvisionResult(success=True, column_name=column_name, column_type=storage_type, path=path)

    async def _provision_by_mutation(self, column_name: str) -> str:
        patch = {column_name: None}
        rows = await self.gateway.select_rows(self.table, [self.key_column], limit=1)

        if not rows:
            await self.gateway.insert_row(self.table, patch)
            return "insert"

        key = rows[0].get(self.key_column)
        if key is None:
            # No usable key to target; an update would match nothing.
            logger.warning("Row on %s has no %s value; inserting instead", self.table, self.key_column)
            await self.gateway.insert_row(self.table, patch)
            return "insert"

        match = {self.key_column: key}
        try:
            await self.gateway.update_row(self.table, patch, match)
            return "update"
        except StoreError as exc:
            logger.warning("Update of %s on %s failed (%s); trying insert", match, self.table, exc.message)

        try:
            await self.gateway.insert_row(self.table, patch)
        except StoreError as exc:
            if not exc.duplicate:
                raise
            logger.info("Insert for %r hit a duplicate; treating column as present", column_name)
        return "insert"


async def provision_or_fail(provisioner: ColumnProvisioner, request: ColumnRequest) -> ProvisionResult:
    """Run one provisioning and fold errors into a failed result."""
    metrics = provisioner.metrics
    start = time.monotonic()
    if metrics:
        metrics.provision_requests.inc()
    try:
        result = await provisioner.provision(request)
    except InvalidInput as exc:
        if metrics:
            metrics.provision_failures.labels(reason="invalid_input").inc()
        return ProvisionResult(
            success=False, column_name=request.column_name, error=exc.message, error_code=exc.code, client_error=True
        )
    except ColprovError as exc:
        logger.error("Add column failed for %r: %s", request.column_name, exc.message)
        if metrics:
            metrics.provision_failures.labels(reason=exc.code).inc()
        return ProvisionResult(success=False, column_name=request.column_name, error=exc.message, error_code=exc.code)
    except Exception:
        logger.exception("Unexpected error adding column %r", request.column_name)
        if metrics:
            metrics.provision_failures.labels(reason="internal_error").inc()
        raise
    finally:
        if metrics:
            metrics.provision_latency.observe(time.monotonic() - start)
    if metrics:
        metrics.provision_path.labels(path=result.path).inc()
    return result
