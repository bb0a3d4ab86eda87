"""Result type returned by the link service."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class LinkStatus(Enum):
    """Caller-visible outcome of a service call, valued by its status code."""

    SUCCESS = 200
    INVALID_INPUT = 400
    NOT_FOUND = 404
    INTERNAL_ERROR = 500


ERROR_MESSAGES = {
    LinkStatus.SUCCESS: "",
    LinkStatus.INVALID_INPUT: "empty or invalid url",
    LinkStatus.NOT_FOUND: "not found",
    LinkStatus.INTERNAL_ERROR: "internal server error",
}


@dataclass(frozen=True)
class LinkResult:
    """Outcome of a create or resolve call.

    Success results carry the short code and URL; failures carry neither.
    """

    status: LinkStatus
    short_code: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def success(cls, short_code: str, url: str) -> "LinkResult":
        return cls(LinkStatus.SUCCESS, short_code=short_code, url=url)

    @classmethod
    def invalid_input(cls) -> "LinkResult":
        return cls(LinkStatus.INVALID_INPUT)

    @classmethod
    def not_found(cls) -> "LinkResult":
        return cls(LinkStatus.NOT_FOUND)

    @classmethod
    def internal_error(cls) -> "LinkResult":
        return cls(LinkStatus.INTERNAL_ERROR)

    @property
    def ok(self) -> bool:
        return self.status is LinkStatus.SUCCESS

    @property
    def code(self) -> int:
        return self.status.value

    @property
    def error(self) -> str:
        return ERROR_MESSAGES[self.status]

    def to_envelope(self) -> Dict[str, Any]:
        """Convert to the response envelope.

        Returns:
            Dictionary with code, error and message (None unless successful)
        """
        message = None
        if self.ok:
            message = {"id": self.short_code, "url": self.url}
        return {
            "code": self.code,
            "error": self.error,
            "message": message,
        }
