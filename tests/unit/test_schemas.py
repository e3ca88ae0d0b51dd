"""Tests for API schemas."""

from colprov.api.schemas import AddColumnRequest, FailureResponse


def test_column_type_defaults_to_text():
    req = AddColumnRequest(columnName="price")
    assert req.columnType == "text"


def test_missing_name_is_allowed_at_schema_level():
    req = AddColumnRequest()
    assert req.columnName is None


def test_extra_fields_ignored():
    req = AddColumnRequest(columnName="price", tableName="other")
    assert not hasattr(req, "tableName")


def test_failure_response_shape():
    body = FailureResponse(error="boom").model_dump(exclude_none=True)
    assert body == {"success": False, "error": "boom"}


def test_non_string_column_type_becomes_unknown():
    assert AddColumnRequest(columnName="price", columnType=5).columnType is None
    assert AddColumnRequest(columnName="price", columnType=True).columnType is None
    assert AddColumnRequest(columnName="price", columnType={"t": "date"}).columnType is None
