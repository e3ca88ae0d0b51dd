"""Tests for the logical-to-storage type mapping."""

import pytest

from colprov.provisioning.types import TYPE_MAP, ColumnType, resolve_storage_type


def test_known_types():
    assert resolve_storage_type("text") == "TEXT"
    assert resolve_storage_type("number") == "NUMERIC"
    assert resolve_storage_type("integer") == "INTEGER"
    assert resolve_storage_type("boolean") == "BOOLEAN"
    assert resolve_storage_type("date") == "DATE"
    assert resolve_storage_type("timestamp") == "TIMESTAMPTZ"


def test_every_enum_member_is_mapped():
    assert set(TYPE_MAP) == {t.value for t in ColumnType}


@pytest.mark.parametrize("hint", ["varchar", "NUMBER", "", "json", None, 3])
def test_unknown_types_fall_back_to_text(hint):
    assert resolve_storage_type(hint) == "TEXT"
