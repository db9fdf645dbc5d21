"""Orchestrators: collaborator calls and failure mapping."""

import asyncio
import math

import pytest

from app.core.errors import BindingError, DownstreamError, InternalError
from app.scrapers import ScraperError
from app.services import product_service, search_service

from tests.conftest import RecordingScraper

BASE = "https://www.flipkart.com"


@pytest.mark.parametrize("query", ["", "phone", "red shoes", "a/b"])
def test_search_passes_query_verbatim(query):
    scraper = RecordingScraper(result={"result": []})

    asyncio.run(search_service.search(query, None, scraper, timeout=1))

    assert scraper.calls == [(query, None)]


def test_search_normalizes_missing_query():
    scraper = RecordingScraper(result=[])

    asyncio.run(search_service.search(None, {"sort": "price"}, scraper, timeout=1))

    assert scraper.calls == [("", {"sort": "price"})]


def test_search_failure_is_downstream_with_verbatim_message():
    scraper = RecordingScraper(error=ScraperError("Flipkart returned 503"))

    with pytest.raises(DownstreamError) as info:
        asyncio.run(search_service.search("phone", None, scraper, timeout=1))

    assert info.value.detail.error_message == "Flipkart returned 503"


def test_search_unserializable_result_is_internal():
    scraper = RecordingScraper(result={"price": math.nan})

    with pytest.raises(InternalError):
        asyncio.run(search_service.search("phone", None, scraper, timeout=1))


def test_search_timeout_is_downstream():
    async def slow(query, params):
        await asyncio.sleep(5)

    with pytest.raises(DownstreamError) as info:
        asyncio.run(search_service.search("phone", None, slow, timeout=0.05))

    assert "Timed out after 0.05s" in info.value.detail.error_message


def test_lookup_calls_scraper_with_absolute_url():
    scraper = RecordingScraper(result={"name": "X"})

    data = asyncio.run(product_service.lookup(
        "mobiles/apple-iphone/p/itm123", {"pincode": "110001"}, BASE, scraper, timeout=1,
    ))

    assert data == {"name": "X"}
    assert scraper.calls == [("https://www.flipkart.com/mobiles/apple-iphone/p/itm123?pincode=110001",)]


def test_lookup_invalid_url_never_reaches_scraper():
    scraper = RecordingScraper(result={})

    with pytest.raises(BindingError):
        asyncio.run(product_service.lookup("p/\x01", {}, BASE, scraper, timeout=1))

    assert scraper.calls == []


def test_lookup_failure_is_downstream():
    scraper = RecordingScraper(error=RuntimeError("parse failure"))

    with pytest.raises(DownstreamError) as info:
        asyncio.run(product_service.lookup("p/itm1", {}, BASE, scraper, timeout=1))

    assert info.value.detail.error_message == "parse failure"


def test_lookup_accepts_async_scrapers():
    async def details(url):
        return {"url": url}

    data = asyncio.run(product_service.lookup("p/itm1", {}, BASE, details, timeout=1))

    assert data == {"url": "https://www.flipkart.com/p/itm1"}
