"""
Scraper backends resolved from settings.
"""

from functools import lru_cache

from app.config import settings
from app.scrapers import unconfigured
from app.scrapers.base import (
    ProductScraper,
    ScraperError,
    ScraperTimeout,
    SearchScraper,
    call_scraper,
    load_backend,
)


@lru_cache(maxsize=None)
def get_search_scraper() -> SearchScraper:
    """FastAPI dependency returning the configured search callable."""
    if settings.SEARCH_BACKEND:
        return load_backend(settings.SEARCH_BACKEND)
    return unconfigured.search


@lru_cache(maxsize=None)
def get_product_scraper() -> ProductScraper:
    """FastAPI dependency returning the configured product-detail callable."""
    if settings.PRODUCT_BACKEND:
        return load_backend(settings.PRODUCT_BACKEND)
    return unconfigured.product_details


__all__ = [
    "ProductScraper",
    "ScraperError",
    "ScraperTimeout",
    "SearchScraper",
    "call_scraper",
    "get_product_scraper",
    "get_search_scraper",
    "load_backend",
]
