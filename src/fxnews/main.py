import logging

import uvicorn
from fastapi import FastAPI

from fxnews.cache import NewsCache
from fxnews.config import Settings, load_settings
from fxnews.logging_config import setup_logging
from fxnews.providers.registry import build_provider
from fxnews.services.news_gateway import NewsGateway
from fxnews.utils.http import HttpClient, HttpPolicy
from fxnews.web.app import create_app

log = logging.getLogger("main")

def build_app(s: Settings) -> FastAPI:
    http = HttpClient(HttpPolicy(user_agent=s.user_agent, timeout_seconds=s.http_timeout_seconds))
    provider = build_provider(s, http)
    gateway = NewsGateway(provider, NewsCache(ttl_seconds=s.cache_ttl_seconds))
    return create_app(gateway, cors_origins=s.cors_origins, on_shutdown=http.aclose)

def main() -> None:
    s = load_settings()
    setup_logging(s.log_level)
    app = build_app(s)
    log.info("Server running on %s:%d", s.host, s.port)
    uvicorn.run(app, host=s.host, port=s.port, log_level="warning")

if __name__ == "__main__":
    main()
