"""POST /api/db/add-column."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends

from colprov.api.errors import failure_json
from colprov.api.schemas import AddColumnRequest, AddColumnResponse
from colprov.dependencies import get_provisioner
from colprov.provisioning import ColumnProvisioner, ColumnRequest, provision_or_fail

logger = logging.getLogger("colprov.api.columns")

router = APIRouter(prefix="/api/db")


@router.post("/add-column", response_model=None)
async def add_column(
    body: AddColumnRequest,
    provisioner: ColumnProvisioner = Depends(get_provisioner),
) -> Any:
    request = ColumnRequest(column_name=body.columnName, column_type=body.columnType)
    result = await provision_or_fail(provisioner, request)

    if not result.success:
        status_code = 400 if result.client_error else 500
        return failure_json(status_code, result.error or "Failed to add column.", code=result.error_code)

    assert result.column_name is not None and result.column_type is not None
    return AddColumnResponse(
        message=f"Column '{result.column_name}' has been added.",
        columnName=result.column_name,
        columnType=result.column_type,
    )
