import logging

from fxnews.config import Settings
from fxnews.providers.alphavantage import AlphaVantageProvider
from fxnews.providers.base import Provider
from fxnews.providers.finnhub import FinnhubProvider
from fxnews.providers.newsapi import NewsApiProvider
from fxnews.providers.rss import RssProvider
from fxnews.utils.http import HttpClient

log = logging.getLogger("provider.registry")

PROVIDER_NAMES = ("alphavantage", "finnhub", "newsapi", "rss")

def _require(value: str | None, var: str, provider: str) -> str:
    if not value:
        raise RuntimeError(f"{var} is required when NEWS_PROVIDER={provider}")
    return value

def build_provider(s: Settings, http: HttpClient) -> Provider:
    name = s.news_provider
    if name == "alphavantage":
        p: Provider = AlphaVantageProvider(
            http, api_key=_require(s.alpha_vantage_api_key, "ALPHA_VANTAGE_API_KEY", name), tz_name=s.timezone
        )
    elif name == "finnhub":
        p = FinnhubProvider(http, api_key=_require(s.finnhub_api_key, "FINNHUB_API_KEY", name), tz_name=s.timezone)
    elif name == "newsapi":
        p = NewsApiProvider(http, api_key=_require(s.newsapi_api_key, "NEWSAPI_API_KEY", name), tz_name=s.timezone)
    elif name == "rss":
        p = RssProvider(http, feeds=s.rss_feeds or None, tz_name=s.timezone)
    else:
        raise RuntimeError(f"NEWS_PROVIDER must be one of {', '.join(PROVIDER_NAMES)}, got {name!r}")

    log.info("Using news provider %s", p.name)
    return p
