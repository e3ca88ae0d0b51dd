"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Request

from colprov.gateway.base import DataStoreGateway
from colprov.provisioning.provisioner import ColumnProvisioner


def get_gateway(request: Request) -> DataStoreGateway:
    return request.app.state.gateway


def get_provisioner(request: Request) -> ColumnProvisioner:
    return request.app.state.provisioner
