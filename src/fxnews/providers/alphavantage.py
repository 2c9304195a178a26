import logging
from typing import Any

from fxnews.models import UNKNOWN_CURRENCY, NewsEvent
from fxnews.providers.base import MalformedPayloadError, Provider
from fxnews.utils.http import HttpClient
from fxnews.utils.text import sentiment_impact, truncate
from fxnews.utils.timeutil import fmt_date, fmt_time, parse_compact

log = logging.getLogger("provider.alphavantage")

ALPHA_VANTAGE_URL = "https://www.alphavantage.co/query"

class AlphaVantageProvider(Provider):
    """
    Alpha Vantage NEWS_SENTIMENT, forex topic.

    Impact comes from overall_sentiment_score; the feed carries no usable
    currency taxonomy so every item is tagged FOREX.
    """

    name = "alphavantage"

    def __init__(self, http: HttpClient, *, api_key: str, tz_name: str = "UTC") -> None:
        super().__init__(tz_name=tz_name)
        self.http = http
        self.api_key = api_key

    async def fetch(self) -> Any:
        params = {"function": "NEWS_SENTIMENT", "topics": "forex", "apikey": self.api_key}
        return await self.http.get_json(ALPHA_VANTAGE_URL, params=params)

    def normalize(self, payload: Any) -> list[NewsEvent]:
        if isinstance(payload, dict) and "feed" not in payload:
            # rate limiting and bad keys come back as 200 with a message instead of a feed
            note = payload.get("Information") or payload.get("Note") or payload.get("Error Message")
            if note:
                raise MalformedPayloadError(f"Alpha Vantage: {note}")

        feed = self.expect_list(payload, "feed")
        events: list[NewsEvent] = []
        for item in feed:
            try:
                events.append(self._to_event(item))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                log.debug("dropping item: %s", e)
        log.info("Alpha Vantage: normalized %d/%d items", len(events), len(feed))
        return events

    def _to_event(self, item: dict) -> NewsEvent:
        published = parse_compact(item["time_published"])
        title = item["title"]
        if not title:
            raise ValueError("missing title")
        return NewsEvent(
            date=fmt_date(published, self.tz_name),
            time=fmt_time(published, self.tz_name),
            currency=UNKNOWN_CURRENCY,
            impact=sentiment_impact(item.get("overall_sentiment_score")),
            event=title,
            forecast=truncate(item.get("summary")),
            previous=item.get("source") or "",
        )
