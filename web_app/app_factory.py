"""FastAPI application factory."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from shortlink.common.logging_config import get_logger
from shortlink.results import LinkResult
from .rpc import rpc_router
from .rpc.routes import envelope_response
from .middleware.logging import LoggingMiddleware


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Answer unparseable or mistyped request bodies with the invalid input envelope."""
    get_logger("shortlink.web").warning(
        f"Rejected malformed request to {request.url.path}: {exc.errors()}"
    )
    return envelope_response(request, LinkResult.invalid_input())


def create_app(
    store_instance,
    service_instance,
    config,
    lifespan=None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store_instance: Link store instance (may be set later by the lifespan)
        service_instance: Link service instance (may be set later by the lifespan)
        config: Configuration instance
        lifespan: Optional lifespan context manager

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Shortlink",
        description="Short link issuance and resolution service",
        version="1.0.0",
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    app.state.store = store_instance
    app.state.service = service_instance
    app.state.config = config

    app.add_middleware(LoggingMiddleware)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(rpc_router, tags=["RPC"])

    return app
