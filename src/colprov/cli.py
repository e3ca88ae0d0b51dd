"""Command-line interface for column provisioning."""

from __future__ import annotations

import asyncio
from typing import Optional

import typer

from colprov.app import build_gateway
from colprov.config import get_settings
from colprov.observability.logging import setup_logging
from colprov.provisioning import ColumnProvisioner, ColumnRequest, ProvisionResult, provision_or_fail

app = typer.Typer(help="Ensure columns exist on the configured table")


async def _run(name: str, column_type: str, table: str | None) -> ProvisionResult:
    settings = get_settings()
    gateway = build_gateway(settings)
    await gateway.start()
    try:
        provisioner = ColumnProvisioner(
            gateway,
            table=table or settings.target_table,
            key_column=settings.key_column,
        )
        return await provision_or_fail(provisioner, ColumnRequest(column_name=name, column_type=column_type))
    finally:
        await gateway.close()


@app.command("add-column")
def add_column(
    name: str,
    type: str = typer.Option("text", "--type", "-t", help="text | number | integer | boolean | date | timestamp"),
    table: Optional[str] = typer.Option(None, "--table", help="Override the configured target table"),
) -> None:
    """Add NAME to the target table if it is missing."""

    setup_logging(get_settings().log_level)
    result = asyncio.run(_run(name, type, table))
    if not result.success:
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(2 if result.client_error else 1)
    typer.echo(f"{result.column_name}\t{result.column_type}\t{result.path}")


@app.command()
def serve() -> None:
    """Run the HTTP service."""

    import uvicorn

    from colprov.app import create_app

    settings = get_settings()
    uvicorn.run(create_app(), host=settings.host, port=settings.port)


if __name__ == "__main__":
    app()
