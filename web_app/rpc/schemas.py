"""Pydantic schemas for RPC requests and responses."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class RPCRequest(BaseModel):
    """Request for either RPC operation."""

    input: Optional[str] = Field(
        default="",
        description="URL to shorten (ShortLink) or short code to resolve (FetchUrl)",
    )

    @field_validator("input", mode="after")
    @classmethod
    def null_as_empty(cls, value: Optional[str]) -> str:
        """An explicit null is the same as an empty input."""
        return value if value is not None else ""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"input": "https://example.com/very/long/path/to/resource"},
                {"input": "aZ3kQ9x"},
            ]
        }
    }


class Message(BaseModel):
    """Success payload."""

    id: str = Field(..., description="The short code")
    url: str = Field(..., description="The original URL")


class RPCResponse(BaseModel):
    """Response envelope shared by both operations."""

    code: int = Field(..., description="Status code (200, 400, 404 or 500)")
    error: str = Field("", description="Error message, empty on success")
    message: Optional[Message] = Field(None, description="Payload, set on success")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "code": 200,
                    "error": "",
                    "message": {"id": "aZ3kQ9x", "url": "https://example.com/a"},
                },
                {"code": 404, "error": "not found", "message": None},
            ]
        }
    }


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    database: str = Field(..., description="Link store status")
    timestamp: datetime = Field(..., description="Check timestamp")
