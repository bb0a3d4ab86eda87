"""RPC endpoints for the shortlink service."""

from .routes import router as rpc_router

__all__ = ["rpc_router"]
