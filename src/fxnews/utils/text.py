import re

from fxnews.models import UNKNOWN_CURRENCY, Impact

SUMMARY_MAX_CHARS = 200

HIGH_IMPACT_TERMS = ("rate decision", "fed", "fomc", "nfp", "non-farm", "gdp", "cpi", "inflation")
MEDIUM_IMPACT_TERMS = ("pmi", "retail sales", "employment", "trade balance", "manufacturing")

# Scan order matters: the first code found wins, so crosses resolve to the non-USD leg.
CURRENCY_PAIRS = {
    "EUR": "EUR/USD",
    "GBP": "GBP/USD",
    "JPY": "USD/JPY",
    "AUD": "AUD/USD",
    "CAD": "USD/CAD",
    "CHF": "USD/CHF",
    "NZD": "NZD/USD",
    "USD": "EUR/USD",
}

def truncate(s: str | None, n: int = SUMMARY_MAX_CHARS) -> str:
    s = s or ""
    if len(s) <= n:
        return s
    return s[:n] + "..."

def sentiment_impact(score) -> Impact:
    # zero counts as "no score", same as missing
    if score is None or score == "":
        return "Neutral"
    try:
        v = float(score)
    except (TypeError, ValueError):
        return "Neutral"
    if v == 0:
        return "Neutral"
    if v >= 0.5 or v <= -0.5:
        return "High"
    if v >= 0.2 or v <= -0.2:
        return "Medium"
    return "Low"

def keyword_impact(*texts: str | None) -> Impact:
    blob = " ".join(t for t in texts if t).lower()
    if any(term in blob for term in HIGH_IMPACT_TERMS):
        return "High"
    if any(term in blob for term in MEDIUM_IMPACT_TERMS):
        return "Medium"
    return "Low"

def detect_currency(*texts: str | None) -> str:
    blob = " ".join(t for t in texts if t).upper()
    for code, pair in CURRENCY_PAIRS.items():
        # whole codes only, "SAUDI" is not AUD
        if re.search(rf"\b{code}\b", blob):
            return pair
    return UNKNOWN_CURRENCY
