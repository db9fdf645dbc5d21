"""
Search API router - handles product search endpoints.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.responses import Response

from app.config import Settings, get_settings
from app.core import envelope
from app.core.binder import bind_search, raw_capture
from app.scrapers import SearchScraper, get_search_scraper
from app.services import search_service


async def search_root(
    request: Request,
    scraper: SearchScraper = Depends(get_search_scraper),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Search with an empty query; refinements come from the query string."""
    return await _search(request, None, scraper, settings)


async def search_with_query(
    request: Request,
    query: str,
    scraper: SearchScraper = Depends(get_search_scraper),
    settings: Settings = Depends(get_settings),
) -> Response:
    """
    Search for products on the scraped site.

    Everything after ``/search/`` is the query text, so ``/search/red/shoes``
    searches for ``red/shoes``.
    """
    return await _search(request, raw_capture(request.scope, "/search/", fallback=query), scraper, settings)


async def _search(request: Request, raw_query: Optional[str], scraper: SearchScraper, settings: Settings) -> Response:
    bound = bind_search(raw_query, request.scope["query_string"])
    data = await search_service.search(bound.query, bound.params, scraper, settings.scraper_timeout)
    return envelope.success(data)
