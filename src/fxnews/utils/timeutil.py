import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from zoneinfo import ZoneInfo

# Alpha Vantage "20240115T143000" (seconds sometimes omitted)
_COMPACT_RE = re.compile(r"^(\d{4})(\d{2})(\d{2})T(\d{2})(\d{2})(\d{2})?$")

def _utc(dt: datetime) -> datetime:
    # treat naive as UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt

def parse_compact(s: str) -> datetime:
    m = _COMPACT_RE.match((s or "").strip())
    if not m:
        raise ValueError(f"bad compact timestamp: {s!r}")
    y, mo, d, hh, mm, ss = m.groups()
    return datetime(int(y), int(mo), int(d), int(hh), int(mm), int(ss or 0), tzinfo=timezone.utc)

def parse_epoch(value) -> datetime:
    if isinstance(value, bool) or value is None:
        raise ValueError(f"bad epoch timestamp: {value!r}")
    try:
        seconds = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"bad epoch timestamp: {value!r}") from e
    # OverflowError/OSError for absurd values
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError) as e:
        raise ValueError(f"bad epoch timestamp: {value!r}") from e

def parse_iso(s: str) -> datetime:
    s = (s or "").strip()
    if not s:
        raise ValueError("empty ISO timestamp")
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    return _utc(datetime.fromisoformat(s))

def parse_rfc822(s: str) -> datetime:
    """
    Parse an RSS pubDate such as 'Tue, 14 Nov 2023 22:13:20 GMT'.
    """
    s = (s or "").strip()
    if not s:
        raise ValueError("empty pubDate")
    try:
        dt = parsedate_to_datetime(s)
    except (TypeError, IndexError) as e:
        raise ValueError(f"bad pubDate: {s!r}") from e
    if dt is None:
        raise ValueError(f"bad pubDate: {s!r}")
    return _utc(dt)

def fmt_date(dt: datetime, tz_name: str) -> str:
    return _utc(dt).astimezone(ZoneInfo(tz_name)).strftime("%Y-%m-%d")

def fmt_time(dt: datetime, tz_name: str) -> str:
    # 3:04:05 PM
    return _utc(dt).astimezone(ZoneInfo(tz_name)).strftime("%I:%M:%S %p").lstrip("0")
