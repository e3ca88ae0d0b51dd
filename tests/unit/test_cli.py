"""Tests for the typer CLI."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from colprov.cli import app
from colprov.config import Settings
from colprov.errors import StoreError

runner = CliRunner()


@pytest.fixture(autouse=True)
def _patch(settings, gateway):
    with (
        patch("colprov.cli.get_settings", return_value=Settings(**settings)),
        patch("colprov.cli.build_gateway", return_value=gateway),
    ):
        yield


def test_add_column(gateway):
    result = runner.invoke(app, ["add-column", "price", "--type", "number"])

    assert result.exit_code == 0
    assert "price\tNUMERIC\tddl" in result.output
    assert gateway.calls[0][1] == 'ALTER TABLE "inventory" ADD COLUMN IF NOT EXISTS "price" NUMERIC;'
    assert gateway.started and gateway.closed


def test_table_override(gateway):
    result = runner.invoke(app, ["add-column", "price", "--table", "stock"])

    assert result.exit_code == 0
    assert '"stock"' in gateway.calls[0][1]


def test_invalid_name_exits_2(gateway):
    result = runner.invoke(app, ["add-column", "bad name!"])

    assert result.exit_code == 2
    assert gateway.calls == []


def test_store_failure_exits_1(gateway):
    gateway.privileged_error = StoreError("permission denied")

    result = runner.invoke(app, ["add-column", "price"])

    assert result.exit_code == 1
    assert gateway.closed
