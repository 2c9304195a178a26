from fxnews.cache import NewsCache
from fxnews.models import NewsEvent


def _ev(title: str) -> NewsEvent:
    return NewsEvent(date="2024-01-15", time="2:30:00 PM", currency="FOREX", impact="Low", event=title)


def test_new_cache_is_empty_and_not_fresh(clock):
    c = NewsCache(ttl_seconds=300, clock=clock)
    assert c.get() is None
    assert c.timestamp is None
    assert c.is_fresh() is False


def test_set_records_timestamp_and_is_fresh_until_ttl(clock):
    c = NewsCache(ttl_seconds=300, clock=clock)
    c.set([_ev("a")])
    assert c.timestamp == clock.now
    assert c.is_fresh()

    clock.advance(299.9)
    assert c.is_fresh()

    clock.advance(0.1)
    assert not c.is_fresh()
    # expired data is still readable for stale-serve
    assert [e.event for e in c.get()] == ["a"]


def test_set_overwrites_previous_entry(clock):
    c = NewsCache(ttl_seconds=300, clock=clock)
    c.set([_ev("a")])
    clock.advance(600)
    c.set([_ev("b"), _ev("c")])
    assert [e.event for e in c.get()] == ["b", "c"]
    assert c.timestamp == clock.now
    assert c.is_fresh()


def test_get_returns_a_copy(clock):
    c = NewsCache(ttl_seconds=300, clock=clock)
    c.set([_ev("a")])
    got = c.get()
    got.append(_ev("junk"))
    got.clear()
    assert [e.event for e in c.get()] == ["a"]
