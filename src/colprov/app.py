"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from colprov import __version__
from colprov.api.errors import request_validation_handler, unhandled_error_handler
from colprov.api.routes_columns import router as columns_router
from colprov.api.routes_health import router as health_router
from colprov.config import Settings
from colprov.gateway.base import DataStoreGateway
from colprov.gateway.postgrest import PostgrestGateway
from colprov.middleware.body_limit import BodyLimitMiddleware
from colprov.middleware.request_id import RequestIDMiddleware
from colprov.observability.logging import setup_logging
from colprov.observability.metrics import Metrics, get_metrics
from colprov.provisioning.provisioner import ColumnProvisioner

logger = logging.getLogger("colprov.app")


def build_gateway(settings: Settings) -> PostgrestGateway:
    return PostgrestGateway(
        settings.supabase_url,
        settings.service_role_key.get_secret_value(),
        timeout=settings.request_timeout,
        sql_function=settings.sql_function,
        sql_argument=settings.sql_argument,
    )


def create_app(
    settings_override: dict[str, Any] | None = None,
    gateway: DataStoreGateway | None = None,
    metrics: Metrics | None = None,
) -> FastAPI:
    settings = Settings(**(settings_override or {}))
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        # --- Startup ---
        store = gateway or build_gateway(settings)
        await store.start()
        app.state.gateway = store
        app.state.provisioner = ColumnProvisioner(
            store,
            table=settings.target_table,
            key_column=settings.key_column,
            metrics=metrics or get_metrics(),
        )

        logger.info("Column provisioner v%s started, table=%s", __version__, settings.target_table)
        yield

        # --- Shutdown ---
        await store.close()

    app = FastAPI(title="Column Provisioner", version=__version__, lifespan=lifespan)

    # Middleware (order matters: outermost first)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(BodyLimitMiddleware, max_bytes=settings.max_body_size)

    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Routes
    app.include_router(health_router)
    app.include_router(columns_router)

    return app
