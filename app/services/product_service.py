"""
Product orchestrator - rebuilds the product URL and fetches its details.
"""

import logging
from typing import Any, Mapping, Optional

from app.core.binder import build_product_url
from app.core.envelope import to_jsonable
from app.core.errors import DownstreamError
from app.scrapers import ProductScraper, call_scraper


logger = logging.getLogger(__name__)


async def lookup(
    fragment: str,
    params: Optional[Mapping[str, str]],
    base_origin: str,
    scraper: ProductScraper,
    timeout: float,
) -> Any:
    """
    Fetch product details for a relative product link.

    Args:
        fragment: Product path relative to ``base_origin``
        params: Query parameters merged into the product URL
        base_origin: Origin of the scraped site
        scraper: Product-detail collaborator
        timeout: Seconds to wait for the collaborator

    Returns:
        JSON-compatible product details

    Raises:
        BindingError: If no valid URL can be built (the scraper is not called)
        DownstreamError: If the scraper fails or times out
        InternalError: If its result cannot be encoded as JSON
    """
    url = build_product_url(base_origin, fragment, params)
    logger.info("Fetching product details from %s", url)

    try:
        result = await call_scraper(scraper, url, timeout=timeout)
    except Exception as e:
        logger.warning("Product lookup for %s failed: %s", url, e)
        raise DownstreamError(str(e) or type(e).__name__) from e

    return to_jsonable(result)
