"""Integration fixtures: the app wired to an injected gateway."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from colprov.app import create_app


@pytest.fixture
def app(settings, gateway, metrics):
    return create_app(settings_override=settings, gateway=gateway, metrics=metrics)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
