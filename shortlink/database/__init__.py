"""Link store layer."""

import logging
from typing import Optional
from urllib.parse import urlparse

from .base import LinkStoreBase
from .memory import InMemoryLinkStore
from .models import Link
from .postgres import LinkStorePostgres

__all__ = [
    "LinkStoreBase",
    "LinkStorePostgres",
    "InMemoryLinkStore",
    "Link",
    "create_link_store",
]


def create_link_store(
    db_url: str,
    logger: Optional[logging.Logger] = None,
    **postgres_options,
) -> LinkStoreBase:
    """Create a link store for a connection URL.

    Args:
        db_url: ``postgres://``/``postgresql://`` URL, or ``memory://``
        logger: Optional logger instance
        **postgres_options: Extra keyword arguments for LinkStorePostgres
            (ignored for the in-memory store)

    Returns:
        Link store instance

    Raises:
        ValueError: If the URL scheme is not supported
    """
    scheme = urlparse(db_url).scheme.lower()
    if scheme == "memory":
        return InMemoryLinkStore(db_url, logger=logger)
    if scheme in ("postgres", "postgresql"):
        return LinkStorePostgres(db_url, logger=logger, **postgres_options)
    raise ValueError(f"Unsupported database URL scheme: {scheme or db_url!r}")
