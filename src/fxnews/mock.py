from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from fxnews.models import NewsEvent
from fxnews.utils.timeutil import fmt_date, fmt_time

# (offset from now, currency, impact, event, forecast, previous)
_MOCK_ROWS = [
    (timedelta(0), "EUR/USD", "High", "ECB Interest Rate Decision", "4.50%", "4.50%"),
    (timedelta(hours=1), "USD/JPY", "Medium", "US Non-Farm Payrolls", "200K", "175K"),
    (timedelta(hours=2), "GBP/USD", "Low", "UK GDP", "0.2%", "0.1%"),
]

def mock_events(tz_name: str = "UTC", now: datetime | None = None) -> list[NewsEvent]:
    """Fixed illustrative events, stamped relative to `now`."""
    now = now or datetime.now(ZoneInfo(tz_name))
    today = fmt_date(now, tz_name)
    return [
        NewsEvent(
            date=today,
            time=fmt_time(now + offset, tz_name),
            currency=currency,
            impact=impact,
            event=event,
            forecast=forecast,
            previous=previous,
        )
        for offset, currency, impact, event, forecast, previous in _MOCK_ROWS
    ]
