import os
from dataclasses import dataclass, field
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from dotenv import load_dotenv

def _get_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    return int(v)

def _get_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    return float(v)

def _get_list(name: str) -> list[str]:
    v = os.getenv(name, "")
    return [x.strip() for x in v.split(",") if x.strip()]

def _get_secret(name: str) -> str | None:
    return os.getenv(name, "").strip() or None

@dataclass(frozen=True)
class Settings:
    news_provider: str = "alphavantage"

    alpha_vantage_api_key: str | None = None
    finnhub_api_key: str | None = None
    newsapi_api_key: str | None = None

    # empty means the RSS provider's built-in feeds
    rss_feeds: list[str] = field(default_factory=list)

    cache_ttl_seconds: float = 300.0
    http_timeout_seconds: float = 20.0
    user_agent: str = "fxnews-gateway/1.0"

    timezone: str = "UTC"

    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    host: str = "0.0.0.0"
    port: int = 3001

    log_level: str = "INFO"

def _load_yaml(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def _get_timezone(name: str, default: str) -> str:
    tz = os.getenv(name, default).strip() or default
    try:
        ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise RuntimeError(f"{name} {tz!r} is not a known zone") from e
    return tz

def load_settings() -> Settings:
    """
    Environment first (a .env file is honoured), then list-valued
    fallbacks from the optional YAML file at CONFIG_PATH.
    """
    load_dotenv()

    raw: dict[str, Any] = {}
    config_path = os.getenv("CONFIG_PATH", "").strip()
    if config_path:
        raw = _load_yaml(config_path)

    rss_feeds = _get_list("RSS_FEEDS") or list(raw.get("rss_feeds") or [])
    cors_origins = _get_list("CORS_ORIGINS") or list(raw.get("cors_origins") or []) or ["*"]

    return Settings(
        news_provider=os.getenv("NEWS_PROVIDER", "alphavantage").strip().lower(),
        alpha_vantage_api_key=_get_secret("ALPHA_VANTAGE_API_KEY"),
        finnhub_api_key=_get_secret("FINNHUB_API_KEY"),
        newsapi_api_key=_get_secret("NEWSAPI_API_KEY"),
        rss_feeds=rss_feeds,
        cache_ttl_seconds=_get_float("CACHE_TTL_SECONDS", 300.0),
        http_timeout_seconds=_get_float("HTTP_TIMEOUT_SECONDS", 20.0),
        user_agent=os.getenv("USER_AGENT", "fxnews-gateway/1.0"),
        timezone=_get_timezone("TIMEZONE", "UTC"),
        cors_origins=cors_origins,
        host=os.getenv("HOST", "0.0.0.0"),
        port=_get_int("PORT", 3001),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
