"""RPC routes implementation."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from shortlink.results import LinkResult
from .schemas import HealthResponse, RPCRequest, RPCResponse

router = APIRouter()


def envelope_response(request: Request, result: LinkResult) -> JSONResponse:
    """Render a service result as the envelope, mirroring its code as HTTP status.

    The envelope code is also kept on ``request.state`` for the access log.
    """
    request.state.rpc_code = result.code
    body = RPCResponse(**result.to_envelope())
    return JSONResponse(status_code=result.code, content=body.model_dump())


@router.post(
    "/rpc/ShortLink",
    response_model=RPCResponse,
    responses={
        400: {"model": RPCResponse, "description": "Empty or invalid url"},
        500: {"model": RPCResponse, "description": "Internal server error"},
    },
    summary="CreateShortLink",
    description="Issue a short code for the URL in `input`.",
)
async def short_link(request: Request, body: RPCRequest):
    """Create a short link."""
    service = request.app.state.service
    result = await service.create_short_link(body.input)
    return envelope_response(request, result)


@router.post(
    "/rpc/FetchUrl",
    response_model=RPCResponse,
    responses={
        404: {"model": RPCResponse, "description": "Short code not found"},
        500: {"model": RPCResponse, "description": "Internal server error"},
    },
    summary="ResolveShortLink",
    description="Resolve the short code in `input` to its original URL.",
)
async def fetch_url(request: Request, body: RPCRequest):
    """Resolve a short link."""
    service = request.app.state.service
    result = await service.resolve_short_link(body.input)
    return envelope_response(request, result)


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse, "description": "Link store unreachable"}},
    summary="Health check",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = await service.health_check()

    body = HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        database="healthy" if health["database"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK if health["overall"] else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(mode="json"),
    )
