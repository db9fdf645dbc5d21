"""Scraper backend loading and invocation."""

import asyncio
import time

import pytest

from app.scrapers import ScraperError, ScraperTimeout, call_scraper, load_backend
from app.scrapers import unconfigured


def test_load_backend_resolves_dotted_attribute():
    assert load_backend("os.path:join") is __import__("os").path.join


@pytest.mark.parametrize("path", ["json.dumps", "json:", ":dumps", "no_such_module_xyz:f", "json:nope", "json:__name__"])
def test_load_backend_rejects_bad_paths(path):
    with pytest.raises(ValueError):
        load_backend(path)


def test_call_scraper_runs_sync_callables():
    assert asyncio.run(call_scraper(lambda q, p: [q, p], "phone", None, timeout=1)) == ["phone", None]


def test_call_scraper_times_out():
    async def never(url):
        await asyncio.Event().wait()

    with pytest.raises(ScraperTimeout):
        asyncio.run(call_scraper(never, "https://www.flipkart.com/p", timeout=0.01))


def test_unconfigured_backends_fail_as_scraper_errors():
    with pytest.raises(ScraperError, match="SEARCH_BACKEND"):
        unconfigured.search("phone", None)
    with pytest.raises(ScraperError, match="PRODUCT_BACKEND"):
        unconfigured.product_details("https://www.flipkart.com/p")


def test_call_scraper_shares_one_deadline_with_returned_awaitables():
    """A sync scraper handing back a coroutine cannot double the timeout."""

    def slow_then_lazy(url):
        time.sleep(0.15)
        return asyncio.sleep(0.15, result={"url": url})

    with pytest.raises(ScraperTimeout):
        asyncio.run(call_scraper(slow_then_lazy, "https://www.flipkart.com/p", timeout=0.2))


def test_call_scraper_awaits_returned_awaitables():
    def lazy(url):
        return asyncio.sleep(0, result={"url": url})

    assert asyncio.run(call_scraper(lazy, "https://www.flipkart.com/p", timeout=1)) == {"url": "https://www.flipkart.com/p"}
