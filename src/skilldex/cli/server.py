"""Serve CLI command for the HTTP API."""

import logging
from pathlib import Path

import typer
import uvicorn

from skilldex.api import create_app
from skilldex.cli.skills import load_context
from skilldex.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def serve_command(ctx: typer.Context, source: Path | None = None) -> None:
    """Load the registry and serve it over HTTP."""
    config = ctx.obj.get("config")

    # Enable console logging for server mode
    setup_logging(config, console_output=True)

    context = load_context(ctx, source)
    api_config = context.config.api

    typer.echo(f"Serving {len(context.registry)} skills from {context.registry.source}")
    typer.echo(f"Listening on http://{api_config.host}:{api_config.port}")

    logger.info(f"Starting API server on {api_config.host}:{api_config.port}")
    app = create_app(context)
    uvicorn.run(app, host=api_config.host, port=api_config.port, log_level="info")
