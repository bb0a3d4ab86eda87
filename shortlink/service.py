"""Business logic service for short links."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Dict, Optional

from .common.validators import is_valid_url
from .database.base import LinkStoreBase
from .errors import DuplicateCodeError, GenerationError, LinkNotFoundError, StoreError
from .results import LinkResult
from .shortcode import ShortCodeGenerator


class LinkService:
    """Service layer for creating and resolving short links.

    Every public call returns a LinkResult; no store or generator error
    escapes. The service keeps no per-call state, so calls may run
    concurrently.
    """

    def __init__(
        self,
        store: LinkStoreBase,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_collision_retries: int = 3,
        request_timeout_seconds: Optional[float] = 5.0,
    ):
        """Initialize link service.

        Args:
            store: Link store instance
            short_code_generator: Optional short code generator
            logger: Optional logger
            max_collision_retries: Extra insert attempts after a duplicate code
            request_timeout_seconds: Upper bound for a single store call (None disables)
        """
        self.store = store
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.max_collision_retries = max_collision_retries
        self.request_timeout_seconds = request_timeout_seconds

    async def _call_store(self, coro):
        """Await a store coroutine under the per-call timeout.

        A timeout is reported as a StoreError.
        """
        try:
            return await asyncio.wait_for(coro, timeout=self.request_timeout_seconds)
        except asyncio.TimeoutError as e:
            raise StoreError(
                f"Store call timed out after {self.request_timeout_seconds}s"
            ) from e

    async def create_short_link(self, original_url: str) -> LinkResult:
        """Issue a short code for a URL and persist the mapping.

        Args:
            original_url: The original long URL

        Returns:
            LinkResult: success with code and URL, invalid input, or internal error
        """
        is_valid, error = is_valid_url(original_url)
        if not is_valid:
            self.logger.warning(f"Rejected create request: {error}")
            return LinkResult.invalid_input()

        created_at = datetime.now(timezone.utc)

        for attempt in range(self.max_collision_retries + 1):
            try:
                short_code = self.generator.generate()
            except GenerationError as e:
                self.logger.error(f"Error generating short code: {e}")
                return LinkResult.internal_error()

            try:
                await self._call_store(
                    self.store.insert(short_code, original_url, created_at)
                )
            except DuplicateCodeError:
                self.logger.warning(
                    f"Short code collision on attempt {attempt + 1}: {short_code}"
                )
                continue
            except StoreError as e:
                self.logger.error(
                    f"Unable to insert url: {original_url} and short code: {short_code} -> {e}"
                )
                return LinkResult.internal_error()

            self.logger.info(f"Created short link: {short_code} -> {original_url}")
            return LinkResult.success(short_code, original_url)

        self.logger.error(
            f"Unable to find a free short code after "
            f"{self.max_collision_retries + 1} attempts for {original_url}"
        )
        return LinkResult.internal_error()

    async def resolve_short_link(self, short_code: str) -> LinkResult:
        """Resolve a short code to its original URL.

        Args:
            short_code: The short code to lookup

        Returns:
            LinkResult: success with code and URL, not found, or internal error
        """
        try:
            original_url = await self._call_store(self.store.lookup(short_code))
        except LinkNotFoundError:
            self.logger.info(f"Short code not found: {short_code}")
            return LinkResult.not_found()
        except StoreError as e:
            self.logger.error(f"Store error resolving {short_code}: {e}")
            return LinkResult.internal_error()

        self.logger.debug(f"Resolved short link: {short_code} -> {original_url}")
        return LinkResult.success(short_code, original_url)

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        try:
            db_healthy = await self._call_store(self.store.health_check())
        except StoreError as e:
            self.logger.error(f"Health check failed: {e}")
            db_healthy = False

        return {
            "database": db_healthy,
            "overall": db_healthy,
        }

    async def close(self) -> None:
        """Close service connections."""
        await self.store.close()
