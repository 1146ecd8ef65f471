"""Query cache keyed by resource, user and day."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID

CacheKey = tuple[str, UUID, date | None]


class Cache(Protocol):
    """Cache interface for per-user query results."""

    def get(self, key: CacheKey) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: CacheKey, value: object, ttl_seconds: int) -> None:
        """Store a cached value with a TTL in seconds."""

    def invalidate(
        self, resource: str, user_id: UUID, day: date | None = None
    ) -> None:
        """Drop cached values for a resource, optionally limited to one day."""


@dataclass
class _CacheEntry:
    value: object
    expires_at: datetime


@dataclass
class QueryCache(Cache):
    """In-memory query cache with explicit invalidation."""

    _entries: dict[CacheKey, _CacheEntry]

    def __init__(self) -> None:
        self._entries = {}

    def get(self, key: CacheKey) -> object | None:
        """Return a cached value if it hasn't expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if datetime.now(tz=UTC) >= entry.expires_at:
            self._entries.pop(key, None)
            return None
        return entry.value

    def set(self, key: CacheKey, value: object, ttl_seconds: int) -> None:
        """Store a cached value with a TTL."""
        expires_at = datetime.now(tz=UTC) + timedelta(seconds=ttl_seconds)
        self._entries[key] = _CacheEntry(value=value, expires_at=expires_at)

    def invalidate(
        self, resource: str, user_id: UUID, day: date | None = None
    ) -> None:
        """Drop matching entries; without a day every date is dropped."""
        for key in list(self._entries):
            key_resource, key_user, key_day = key
            if key_resource != resource or key_user != user_id:
                continue
            if day is None or key_day == day:
                self._entries.pop(key, None)
