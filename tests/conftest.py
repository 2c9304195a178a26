from __future__ import annotations

from typing import Any

import pytest

from fxnews.models import NewsEvent
from fxnews.providers.base import Provider


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeProvider(Provider):
    """Provider whose fetch() replays queued payloads or raises queued errors."""

    name = "fake"

    def __init__(self, *responses: Any):
        super().__init__(tz_name="UTC")
        self.responses = list(responses)
        self.calls = 0

    async def fetch(self) -> Any:
        self.calls += 1
        r = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(r, BaseException):
            raise r
        return r

    def normalize(self, payload: Any) -> list[NewsEvent]:
        items = self.expect_list(payload)
        return [
            NewsEvent(date="2024-01-15", time="2:30:00 PM", currency="FOREX", impact="Low", event=str(t))
            for t in items
            if t
        ]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
