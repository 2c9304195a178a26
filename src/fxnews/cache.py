import time
from dataclasses import dataclass, field
from typing import Callable

from fxnews.models import NewsEvent

DEFAULT_TTL_SECONDS = 5 * 60

@dataclass
class NewsCache:
    """
    Single-entry in-memory cache for the news list.

    Lives for the whole process; only a successful refresh overwrites it.
    """

    ttl_seconds: float = DEFAULT_TTL_SECONDS
    clock: Callable[[], float] = field(default=time.time, repr=False)

    _data: list[NewsEvent] | None = field(default=None, init=False, repr=False)
    _timestamp: float | None = field(default=None, init=False)

    @property
    def timestamp(self) -> float | None:
        return self._timestamp

    def get(self) -> list[NewsEvent] | None:
        # callers get their own list; the cached one is never handed out
        return list(self._data) if self._data is not None else None

    def set(self, data: list[NewsEvent]) -> None:
        self._data = list(data)
        self._timestamp = self.clock()

    def is_fresh(self) -> bool:
        if self._data is None or self._timestamp is None:
            return False
        return (self.clock() - self._timestamp) < self.ttl_seconds
