import asyncio
import logging
from typing import Callable

from fxnews.cache import NewsCache
from fxnews.mock import mock_events
from fxnews.models import NewsEvent
from fxnews.providers.base import Provider

log = logging.getLogger("gateway")

class NewsGateway:
    """
    Cache-aside front for one provider.

    Never raises: a failed refresh serves the previous (possibly expired)
    data, or the mock set when nothing was ever cached. Concurrent misses
    share one in-flight refresh.
    """

    def __init__(
        self,
        provider: Provider,
        cache: NewsCache,
        *,
        fallback: Callable[[], list[NewsEvent]] | None = None,
    ) -> None:
        self.provider = provider
        self.cache = cache
        self.fallback = fallback or (lambda: mock_events(provider.tz_name))
        self._inflight: asyncio.Task | None = None

    async def get_news(self) -> list[NewsEvent]:
        if self.cache.is_fresh():
            log.info("Returning cached news data")
            return self.cache.get()

        if self._inflight is None:
            self._inflight = asyncio.create_task(self._refresh())
            self._inflight.add_done_callback(self._clear_inflight)
        else:
            log.debug("Joining in-flight refresh")
        return await asyncio.shield(self._inflight)

    def _clear_inflight(self, task: asyncio.Task) -> None:
        if self._inflight is task:
            self._inflight = None

    async def _refresh(self) -> list[NewsEvent]:
        try:
            log.info("Fetching news from %s", self.provider.name)
            payload = await self.provider.fetch()
            events = self.provider.normalize(payload)
        except Exception as e:
            log.warning("Error fetching news from %s: %s", self.provider.name, e)
            stale = self.cache.get()
            if stale is not None:
                log.info("Returning expired cached data due to upstream error")
                return stale
            log.info("No cached data, falling back to mock data")
            return self.fallback()

        if not events:
            log.info("No valid news items processed, falling back to mock data")
            return self.fallback()

        self.cache.set(events)
        log.info("Successfully processed %d news items", len(events))
        return self.cache.get()
