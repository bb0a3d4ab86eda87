"""In-process implementation of the link store."""

import asyncio
import logging
from datetime import datetime
from typing import Dict, Optional

from .base import LinkStoreBase
from .models import Link
from ..errors import DuplicateCodeError, LinkNotFoundError, StoreError


class InMemoryLinkStore(LinkStoreBase):
    """Link store kept in a dict for the lifetime of the process.

    Used for local runs (``memory://``) and tests. Follows the same error
    contract as the PostgreSQL store; ``available`` can be switched off to
    simulate an unreachable backend.
    """

    def __init__(
        self,
        db_config: str = "memory://",
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(db_config)
        self.logger = logger or logging.getLogger(__name__)
        self.available = True
        self._links: Dict[str, Link] = {}
        self._lock = asyncio.Lock()

    def _check_available(self) -> None:
        if not self.available:
            raise StoreError("In-memory store is unavailable")

    async def insert(
        self,
        short_code: str,
        original_url: str,
        created_at: datetime,
    ) -> None:
        async with self._lock:
            self._check_available()
            if short_code in self._links:
                raise DuplicateCodeError(short_code)
            self._links[short_code] = Link(short_code, original_url, created_at)
        self.logger.debug(f"Inserted link: {short_code} -> {original_url}")

    async def lookup(self, short_code: str) -> str:
        async with self._lock:
            self._check_available()
            link = self._links.get(short_code)
        if link is None:
            raise LinkNotFoundError(short_code)
        return link.original_url

    def get_link(self, short_code: str) -> Optional[Link]:
        """Return the stored record, or None.

        Synchronous inspection helper for tests; does not take the lock and
        ignores ``available``.
        """
        return self._links.get(short_code)

    def __len__(self) -> int:
        return len(self._links)

    async def health_check(self) -> bool:
        return self.available

    async def close(self) -> None:
        self.logger.debug(f"Closing in-memory store with {len(self._links)} links")
