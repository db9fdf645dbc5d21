"""
Product API router - product details by site-relative link.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.responses import Response

from app.config import Settings, get_settings
from app.core import envelope
from app.core.binder import bind_product, raw_capture
from app.scrapers import ProductScraper, get_product_scraper
from app.services import product_service


async def product_root(
    request: Request,
    scraper: ProductScraper = Depends(get_product_scraper),
    settings: Settings = Depends(get_settings),
) -> Response:
    """``/product`` without a link, answered with a 400."""
    return await _lookup(request, None, scraper, settings)


async def product_route(
    request: Request,
    url: str,
    scraper: ProductScraper = Depends(get_product_scraper),
    settings: Settings = Depends(get_settings),
) -> Response:
    """
    Fetch product details.

    The path after ``/product/`` is the product link relative to the
    scraped site, e.g. ``/product/mobiles/apple-iphone/p/itm123?pincode=110001``.
    Query parameters are forwarded as part of the product URL.

    Raises:
        BindingError: If the link is missing or does not form a valid URL
    """
    return await _lookup(request, raw_capture(request.scope, "/product/", fallback=url), scraper, settings)


async def _lookup(request: Request, raw_url: Optional[str], scraper: ProductScraper, settings: Settings) -> Response:
    bound = bind_product(raw_url, request.scope["query_string"])
    data = await product_service.lookup(
        bound.fragment,
        bound.params,
        settings.base_origin,
        scraper,
        settings.scraper_timeout,
    )
    return envelope.success(data)
