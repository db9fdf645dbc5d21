"""
Search orchestrator - forwards a free-text query to the search scraper.
"""

import logging
from typing import Any, Mapping, Optional

from app.core.envelope import to_jsonable
from app.core.errors import DownstreamError
from app.scrapers import SearchScraper, call_scraper


logger = logging.getLogger(__name__)


async def search(
    query: Optional[str],
    params: Optional[Mapping[str, str]],
    scraper: SearchScraper,
    timeout: float,
) -> Any:
    """
    Run a product search.

    Args:
        query: Free-text query; None is searched as the empty string
        params: Optional search refinements passed through untouched
        scraper: Search collaborator
        timeout: Seconds to wait for the collaborator

    Returns:
        JSON-compatible search results

    Raises:
        DownstreamError: If the scraper fails or times out
        InternalError: If its result cannot be encoded as JSON
    """
    query = query or ""
    logger.info("Searching for %r with params %s", query, params)

    try:
        result = await call_scraper(scraper, query, params, timeout=timeout)
    except Exception as e:
        logger.warning("Search for %r failed: %s", query, e)
        raise DownstreamError(str(e) or type(e).__name__) from e

    return to_jsonable(result)
