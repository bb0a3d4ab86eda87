"""
Error classes for the short link core.

These never reach the caller directly; the service translates them into
a LinkResult.
"""

from typing import Optional


class ShortLinkError(Exception):
    """
    Base error for the short link core.

    Attributes:
        message: Error message (default: "Short link error")
    """
    message: str = "Short link error"

    def __init__(self, message: Optional[str] = None):
        """
        Initialize error.

        Args:
            message: Error message (overrides default)
        """
        self.message = message or self.message
        super().__init__(self.message)


class GenerationError(ShortLinkError):
    """Short code generator is exhausted or misconfigured."""
    message = "Short code generation failed"


class StoreError(ShortLinkError):
    """Any failure originating in the link store."""
    message = "Link store error"


class DuplicateCodeError(StoreError):
    """Insert rejected because the short code already exists."""
    message = "Short code already exists"

    def __init__(self, short_code: str, message: Optional[str] = None):
        self.short_code = short_code
        super().__init__(message or f"Short code already exists: {short_code}")


class LinkNotFoundError(ShortLinkError):
    """No link matches the requested short code."""
    message = "Link not found"

    def __init__(self, short_code: str, message: Optional[str] = None):
        self.short_code = short_code
        super().__init__(message or f"Short code not found: {short_code}")
