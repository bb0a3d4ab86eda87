"""Access log middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from shortlink.common.logging_config import get_logger


RPC_PREFIX = "/rpc/"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per call with the RPC operation and envelope code."""

    def __init__(self, app, logger: logging.Logger = None):
        super().__init__(app)
        self.logger = logger or get_logger("shortlink.web")

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()
        path = request.url.path
        operation = path[len(RPC_PREFIX):] if path.startswith(RPC_PREFIX) else None

        response = await call_next(request)

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        rpc_code = getattr(request.state, "rpc_code", None)

        if operation:
            summary = f"RPC {operation} -> code {rpc_code}"
        else:
            summary = f"{request.method} {path} -> {response.status_code}"

        self.logger.info(
            f"{summary} ({duration_ms:.2f}ms)",
            extra={
                "method": request.method,
                "path": path,
                "operation": operation,
                "status_code": response.status_code,
                "rpc_code": rpc_code,
                "duration_ms": duration_ms,
            },
        )

        return response
