import logging
from dataclasses import dataclass
from typing import Any

import httpx

log = logging.getLogger("http")

@dataclass(frozen=True)
class HttpPolicy:
    user_agent: str = "fxnews-gateway/1.0"
    timeout_seconds: float = 20.0

class HttpClient:
    """
    Thin async client shared by all providers:
    - explicit User-Agent
    - one timeout for every call
    - raises httpx.HTTPStatusError on non-2xx
    """

    def __init__(self, policy: HttpPolicy | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.policy = policy or HttpPolicy()
        self._client = httpx.AsyncClient(
            headers={"User-Agent": self.policy.user_agent},
            timeout=self.policy.timeout_seconds,
            follow_redirects=True,
            transport=transport,
        )

    async def get_text(self, url: str, *, params: dict[str, Any] | None = None,
                       headers: dict[str, str] | None = None) -> str:
        resp = await self._client.get(url, params=params, headers=headers)
        resp.raise_for_status()
        log.debug("GET %s -> %d", host_of(resp.request.url), resp.status_code)
        return resp.text

    async def get_json(self, url: str, *, params: dict[str, Any] | None = None,
                       headers: dict[str, str] | None = None) -> Any:
        resp = await self._client.get(url, params=params, headers=headers)
        resp.raise_for_status()
        log.debug("GET %s -> %d", host_of(resp.request.url), resp.status_code)
        return resp.json()

    async def aclose(self) -> None:
        await self._client.aclose()

def host_of(url) -> str:
    return httpx.URL(str(url)).host.lower()
