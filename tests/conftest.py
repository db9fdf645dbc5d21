"""Shared fixtures: the app wired to recording fake scrapers."""

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import app
from app.scrapers import get_product_scraper, get_search_scraper


class RecordingScraper:
    """Fake scraper remembering its calls and replaying a canned outcome."""

    def __init__(self, result=None, error=None):
        self.calls = []
        self.result = result
        self.error = error

    def __call__(self, *args):
        self.calls.append(args)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def test_settings():
    settings = Settings()
    settings.BASE_ORIGIN = "https://www.flipkart.com"
    settings.DEPLOYMENT_URL = "https://scraper.example.com"
    settings.SCRAPER_TIMEOUT = "2"
    return settings


@pytest.fixture
def search_scraper():
    return RecordingScraper(result={"result": []})


@pytest.fixture
def product_scraper():
    return RecordingScraper(result={"name": "Apple iPhone"})


@pytest.fixture
def client(test_settings, search_scraper, product_scraper):
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_search_scraper] = lambda: search_scraper
    app.dependency_overrides[get_product_scraper] = lambda: product_scraper
    yield TestClient(app)
    app.dependency_overrides.clear()
