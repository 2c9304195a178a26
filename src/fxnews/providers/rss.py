import asyncio
import logging
from typing import Any

from bs4 import BeautifulSoup

from fxnews.models import NewsEvent
from fxnews.providers.base import MalformedPayloadError, Provider
from fxnews.utils.http import HttpClient
from fxnews.utils.text import detect_currency, keyword_impact, truncate
from fxnews.utils.timeutil import fmt_date, fmt_time, parse_rfc822

log = logging.getLogger("provider.rss")

DEFAULT_RSS_FEEDS = [
    "https://www.fxstreet.com/rss/news",
    "https://www.forexlive.com/feed/news",
    "https://www.dailyfx.com/feeds/market-news",
]

class RssProvider(Provider):
    """
    Several RSS feeds fetched together and flattened in feed order.

    Any feed failing fails the whole fetch; the gateway then falls back.
    """

    name = "rss"

    def __init__(self, http: HttpClient, *, feeds: list[str] | None = None, tz_name: str = "UTC") -> None:
        super().__init__(tz_name=tz_name)
        self.http = http
        self.feeds = list(feeds or DEFAULT_RSS_FEEDS)

    async def fetch(self) -> list[str]:
        return list(await asyncio.gather(*(self.http.get_text(url) for url in self.feeds)))

    def normalize(self, payload: Any) -> list[NewsEvent]:
        documents = self.expect_list(payload)
        events: list[NewsEvent] = []
        total = 0
        for doc in documents:
            if not isinstance(doc, str):
                raise MalformedPayloadError(f"expected feed text, got {type(doc).__name__}")
            soup = BeautifulSoup(doc, "xml")
            channel = soup.find("channel")
            if channel is None:
                raise MalformedPayloadError("feed has no <channel>")

            feed_title = _text(channel.find("title", recursive=False)) or "RSS"
            items = channel.find_all("item")
            total += len(items)
            for item in items:
                try:
                    events.append(self._to_event(item, feed_title))
                except (AttributeError, TypeError, ValueError) as e:
                    log.debug("dropping item from %s: %s", feed_title, e)

        log.info("RSS: normalized %d/%d items from %d feeds", len(events), total, len(documents))
        return events

    def _to_event(self, item, feed_title: str) -> NewsEvent:
        published = parse_rfc822(_text(item.find("pubDate")))
        title = _text(item.find("title"))
        if not title:
            raise ValueError("missing title")
        # descriptions are frequently escaped HTML
        description = BeautifulSoup(_text(item.find("description")), "html.parser").get_text(" ", strip=True)
        return NewsEvent(
            date=fmt_date(published, self.tz_name),
            time=fmt_time(published, self.tz_name),
            currency=detect_currency(title, description),
            impact=keyword_impact(title, description),
            event=title,
            forecast=truncate(description),
            previous=feed_title,
        )

def _text(el) -> str:
    return el.get_text(strip=True) if el is not None else ""
