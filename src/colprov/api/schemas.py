"""Pydantic request/response models for the add-column endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class AddColumnRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Presence and format are checked by the provisioner so a missing
    # name yields the same 400 body as an invalid one.
    columnName: str | None = None
    columnType: str | None = "text"

    @field_validator("columnType", mode="before")
    @classmethod
    def _non_string_type_is_unknown(cls, value: Any) -> Any:
        # Unrecognised hints, whatever their JSON type, resolve to TEXT later.
        return value if isinstance(value, str) else None


class AddColumnResponse(BaseModel):
    success: bool = True
    message: str
    columnName: str
    columnType: str


class FailureResponse(BaseModel):
    success: bool = False
    error: str
    code: str | None = None

    model_config = ConfigDict(json_schema_extra={"example": {
        "success": False,
        "error": "Column name is required.",
        "code": "missing_column_name",
    }})
