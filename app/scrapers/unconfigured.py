"""
Placeholder scrapers wired in when no backend is configured.

They keep the service answering with a 502 instead of failing at import
time, which is enough for the root endpoint and for health probes.
"""

from app.scrapers.base import ScraperError


MESSAGE = "No scraper backend configured. Set {setting} to 'package.module:attribute'"


def search(query, params=None):
    raise ScraperError(MESSAGE.format(setting="SEARCH_BACKEND"))


def product_details(url):
    raise ScraperError(MESSAGE.format(setting="PRODUCT_BACKEND"))
