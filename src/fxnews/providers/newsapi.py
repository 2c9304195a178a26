import logging
from typing import Any

from fxnews.models import NewsEvent
from fxnews.providers.base import MalformedPayloadError, Provider
from fxnews.utils.http import HttpClient
from fxnews.utils.text import detect_currency, keyword_impact, truncate
from fxnews.utils.timeutil import fmt_date, fmt_time, parse_iso

log = logging.getLogger("provider.newsapi")

NEWSAPI_EVERYTHING_URL = "https://newsapi.org/v2/everything"
NEWSAPI_QUERY = 'forex OR currency OR "central bank"'

class NewsApiProvider(Provider):
    """
    NewsAPI /v2/everything. No sentiment upstream, so impact and currency
    are derived from headline + description.
    """

    name = "newsapi"

    def __init__(self, http: HttpClient, *, api_key: str, tz_name: str = "UTC", page_size: int = 50) -> None:
        super().__init__(tz_name=tz_name)
        self.http = http
        self.api_key = api_key
        self.page_size = page_size

    async def fetch(self) -> Any:
        params = {
            "q": NEWSAPI_QUERY,
            "language": "en",
            "sortBy": "publishedAt",
            "pageSize": self.page_size,
        }
        return await self.http.get_json(NEWSAPI_EVERYTHING_URL, params=params, headers={"X-Api-Key": self.api_key})

    def normalize(self, payload: Any) -> list[NewsEvent]:
        if isinstance(payload, dict) and payload.get("status") == "error":
            raise MalformedPayloadError(f"NewsAPI: {payload.get('code')}: {payload.get('message')}")

        articles = self.expect_list(payload, "articles")
        events: list[NewsEvent] = []
        for a in articles:
            try:
                events.append(self._to_event(a))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                log.debug("dropping article: %s", e)
        log.info("NewsAPI: normalized %d/%d articles", len(events), len(articles))
        return events

    def _to_event(self, a: dict) -> NewsEvent:
        published = parse_iso(a["publishedAt"])
        title = a["title"]
        if not title:
            raise ValueError("missing title")
        description = a.get("description") or ""
        source = a.get("source") or {}
        return NewsEvent(
            date=fmt_date(published, self.tz_name),
            time=fmt_time(published, self.tz_name),
            currency=detect_currency(title, description),
            impact=keyword_impact(title, description),
            event=title,
            forecast=truncate(description),
            previous=source.get("name") or "NewsAPI",
        )
