from dataclasses import asdict, dataclass
from typing import Literal

Impact = Literal["High", "Medium", "Low", "Neutral"]

UNKNOWN_CURRENCY = "FOREX"

@dataclass(frozen=True)
class NewsEvent:
    date: str  # YYYY-MM-DD
    time: str  # e.g. "3:04:05 PM"

    # pair like "EUR/USD", or "FOREX" when the provider gives nothing better
    currency: str

    impact: Impact

    # headline
    event: str

    # truncated summary
    forecast: str = ""
    # source attribution
    previous: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
