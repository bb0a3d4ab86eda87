"""Data models for the link store."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Link:
    """Represents a persisted short link."""

    short_code: str
    original_url: str
    created_at: datetime
