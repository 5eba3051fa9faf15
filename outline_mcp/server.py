"""FastAPI MCP Server for Outline."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import Settings, settings
from .mcp.dispatcher import Dispatcher
from .mcp.jsonrpc import INTERNAL_ERROR, jsonrpc_error
from .mcp.transport import API_KEY_HEADERS
from .mcp.transport import router as mcp_router
from .tools import ToolRegistry, build_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logger.info(f"Starting Outline MCP Server v{__version__}")
    if not app.state.settings.outline_api_key:
        logger.info("OUTLINE_API_KEY not set - every request must carry an API key header")
    if not app.state.settings.debug and app.state.settings.cors_allowed_origins == "*":
        logger.warning(
            "CORS is configured to allow all origins ('*'). "
            "Set CORS_ALLOWED_ORIGINS to specific domains in production."
        )
    yield
    logger.info("Outline MCP Server shutdown complete")


def create_app(
    app_settings: Settings | None = None,
    registry: ToolRegistry | None = None,
) -> FastAPI:
    """Build the application.

    Tools are registered here, before the app can serve any request.

    Args:
        app_settings: Settings to use (defaults to the environment-loaded settings)
        registry: Tool registry to serve (defaults to all Outline tools)
    """
    app_settings = app_settings or settings
    registry = registry if registry is not None else build_registry()

    app = FastAPI(
        title="Outline MCP Server",
        description="Model Context Protocol server for the Outline API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.dispatcher = Dispatcher(registry, server_name=app_settings.service_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type", *API_KEY_HEADERS, "authorization"],
    )

    app.include_router(mcp_router)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Return a JSON-RPC internal error for anything that escapes a route."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            jsonrpc_error(None, INTERNAL_ERROR, "Internal server error"),
            status_code=500,
        )

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint (lightweight liveness check)."""
        return {
            "status": "ok",
            "timestamp": datetime.now(UTC).isoformat(),
            "service": app_settings.service_name,
        }

    @app.get("/", tags=["Health"])
    async def root() -> dict:
        """Root endpoint with API info."""
        return {
            "name": "Outline MCP Server",
            "version": __version__,
            "description": "A Model Context Protocol server for Outline API",
            "endpoints": {
                "/mcp": "POST - MCP JSON-RPC endpoint",
                "/health": "GET - Health check",
            },
        }

    return app


app = create_app()


# ============ MAIN ============


def main():
    """Run the server with uvicorn."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "outline_mcp.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
