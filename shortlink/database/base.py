"""Abstract base class for link store implementations."""

from abc import ABC, abstractmethod
from datetime import datetime


class LinkStoreBase(ABC):
    """Abstract base class for link store operations.

    Implementations translate their driver's failures into the errors of
    ``shortlink.errors``: ``DuplicateCodeError`` and ``LinkNotFoundError``
    for the two expected conditions, ``StoreError`` for everything else.
    """

    def __init__(self, db_config: str):
        """Initialize the store.

        Args:
            db_config: Database connection string
        """
        self.db_config = db_config

    async def connect(self) -> None:
        """Open store resources ahead of the first call."""
        pass

    @abstractmethod
    async def insert(
        self,
        short_code: str,
        original_url: str,
        created_at: datetime,
    ) -> None:
        """Insert a new link. Never overwrites an existing short code.

        Args:
            short_code: The short code to use
            original_url: The original long URL
            created_at: Creation timestamp

        Raises:
            DuplicateCodeError: If short_code already exists
            StoreError: On any other failure
        """
        pass

    @abstractmethod
    async def lookup(self, short_code: str) -> str:
        """Get the original URL for an exact short code match.

        Args:
            short_code: The short code to lookup

        Returns:
            The original URL

        Raises:
            LinkNotFoundError: If no link matches
            StoreError: On any other failure
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release store resources."""
        pass
