import logging
from typing import Any

from fxnews.models import UNKNOWN_CURRENCY, NewsEvent
from fxnews.providers.base import Provider
from fxnews.utils.http import HttpClient
from fxnews.utils.text import sentiment_impact, truncate
from fxnews.utils.timeutil import fmt_date, fmt_time, parse_epoch

log = logging.getLogger("provider.finnhub")

FINNHUB_NEWS_URL = "https://finnhub.io/api/v1/news"

class FinnhubProvider(Provider):
    name = "finnhub"

    def __init__(self, http: HttpClient, *, api_key: str, tz_name: str = "UTC") -> None:
        super().__init__(tz_name=tz_name)
        self.http = http
        self.api_key = api_key

    async def fetch(self) -> Any:
        return await self.http.get_json(FINNHUB_NEWS_URL, params={"category": "forex", "token": self.api_key})

    def normalize(self, payload: Any) -> list[NewsEvent]:
        items = self.expect_list(payload)
        events: list[NewsEvent] = []
        for item in items:
            try:
                events.append(self._to_event(item))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                log.debug("dropping item: %s", e)
        log.info("Finnhub: normalized %d/%d items", len(events), len(items))
        return events

    def _to_event(self, item: dict) -> NewsEvent:
        published = parse_epoch(item["datetime"])
        headline = item["headline"]
        if not headline:
            raise ValueError("missing headline")
        return NewsEvent(
            date=fmt_date(published, self.tz_name),
            time=fmt_time(published, self.tz_name),
            currency=UNKNOWN_CURRENCY,
            impact=sentiment_impact(item.get("sentiment")),
            event=headline,
            forecast=truncate(item.get("summary")),
            previous=item.get("source") or "",
        )
