"""Core business logic for the shortlink service."""

from .shortcode import ShortCodeGenerator
from .service import LinkService
from .results import LinkResult, LinkStatus

__all__ = ["ShortCodeGenerator", "LinkService", "LinkResult", "LinkStatus"]
