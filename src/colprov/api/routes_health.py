"""Health, version, and metrics endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from colprov import __version__
from colprov.dependencies import get_gateway
from colprov.gateway.base import DataStoreGateway

router = APIRouter()


@router.get("/health")
async def health(gateway: DataStoreGateway = Depends(get_gateway)) -> dict:
    store_ok = await gateway.health()
    return {
        "status": "ok" if store_ok else "degraded",
        "store": "connected" if store_ok else "unreachable",
    }


@router.get("/version")
async def version() -> dict:
    return {"version": __version__}


@router.get("/metrics")
async def metrics() -> Response:
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
