import asyncio
import pytest
from core.integrations import ComparablesFetcher, fetch_mls_comparables, load_comparables, merge_comparables
from core.models import ComparableListing
from core.presets import DEFAULT_COMPARABLES


def test_fetch_returns_canned_listings():
    comps = asyncio.run(fetch_mls_comparables("2015 Hillwood Dr", delay=0))
    assert len(comps) == 2
    assert all(c.list_price > 0 and c.sqft > 0 for c in comps)
    assert len({c.id for c in comps}) == 2


def test_fetch_requires_address():
    with pytest.raises(ValueError):
        asyncio.run(fetch_mls_comparables("abc", delay=0))


def test_fetch_times_out():
    with pytest.raises(TimeoutError, match="Request timeout"):
        asyncio.run(fetch_mls_comparables("2015 Hillwood Dr", delay=1, timeout=0.01))


def test_merge_keeps_subject_first():
    existing = [ComparableListing(**c) for c in DEFAULT_COMPARABLES]
    fetched = load_comparables("2015 Hillwood Dr", delay=0)
    merged = merge_comparables(existing, fetched)
    assert merged[0].status == "Subject"
    assert merged[1:] == fetched


def test_fetcher_cancels_stale_address():
    async def scenario():
        fetcher = ComparablesFetcher(delay=0.05)
        first = fetcher.request("2015 Hillwood Dr")
        assert fetcher.request("2015 Hillwood Dr") is first
        second = fetcher.request("2074 Hillwood Dr")
        result = await fetcher.result()
        return first, second, result

    first, second, result = asyncio.run(scenario())
    assert first.cancelled()
    assert second.done() and not second.cancelled()
    assert len(result) == 2


def test_fetcher_result_without_request():
    with pytest.raises(RuntimeError):
        asyncio.run(ComparablesFetcher().result())
