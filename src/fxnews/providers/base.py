from abc import ABC, abstractmethod
from typing import Any

from fxnews.models import NewsEvent

class ProviderError(Exception):
    pass

class MalformedPayloadError(ProviderError):
    """Upstream answered 2xx but not in the shape the provider expects."""

class Provider(ABC):
    name: str

    def __init__(self, *, tz_name: str = "UTC") -> None:
        self.tz_name = tz_name

    @abstractmethod
    async def fetch(self) -> Any:
        """
        Perform the single upstream call and return the raw payload.
        Transport and HTTP status errors propagate.
        """
        raise NotImplementedError

    @abstractmethod
    def normalize(self, payload: Any) -> list[NewsEvent]:
        """
        Map a raw payload to NewsEvents. Pure: same payload, same output.
        Raises MalformedPayloadError if the payload has the wrong shape;
        items that fail to parse are dropped.
        """
        raise NotImplementedError

    @staticmethod
    def expect_list(payload: Any, key: str | None = None) -> list:
        if key is None:
            items = payload
        elif isinstance(payload, dict):
            items = payload.get(key)
        else:
            raise MalformedPayloadError(f"expected an object with '{key}', got {type(payload).__name__}")
        if not isinstance(items, list):
            where = f"'{key}'" if key else "payload"
            raise MalformedPayloadError(f"expected {where} to be a list, got {type(items).__name__}")
        return items
