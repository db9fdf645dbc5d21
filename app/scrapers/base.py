"""
Boundary with the external scraper.

The scraper itself lives outside this service. It is plugged in through
``SEARCH_BACKEND`` / ``PRODUCT_BACKEND`` settings that name a callable as
``package.module:attribute``. Callables may be plain functions (run in a
worker thread) or coroutine functions.
"""

import asyncio
import importlib
import inspect
import logging
from typing import Any, Callable, Mapping, Optional, Protocol


logger = logging.getLogger(__name__)


class ScraperError(Exception):
    """Failure reported by a scraper backend."""


class ScraperTimeout(ScraperError):
    """The scraper did not answer within the configured timeout."""


class SearchScraper(Protocol):
    """Searches the remote site for products matching a free-text query."""

    def __call__(self, query: str, params: Optional[Mapping[str, str]]) -> Any:
        """
        Args:
            query: Free-text query, possibly empty
            params: Search refinements such as sort order, or None

        Returns:
            JSON-serializable search results
        """


class ProductScraper(Protocol):
    """Fetches the details of a single product page."""

    def __call__(self, url: str) -> Any:
        """
        Args:
            url: Absolute, already validated product URL

        Returns:
            JSON-serializable product details
        """


def load_backend(path: str) -> Callable[..., Any]:
    """
    Import a scraper callable from a ``package.module:attribute`` path.

    Raises:
        ValueError: If the path is malformed or does not name a callable
    """
    module_name, sep, attribute = path.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"Scraper backend must look like 'package.module:attribute', got {path!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import scraper backend module {module_name!r}: {e}") from e

    target: Any = module
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError:
            raise ValueError(f"Scraper backend {path!r} has no attribute {part!r}") from None

    if not callable(target):
        raise ValueError(f"Scraper backend {path!r} is not callable")

    logger.info("Loaded scraper backend %s", path)
    return target


async def call_scraper(func: Callable[..., Any], *args: Any, timeout: float) -> Any:
    """
    Invoke a scraper callable with a bounded wait.

    Raises:
        ScraperTimeout: If the call takes longer than ``timeout`` seconds
        Exception: Whatever the scraper raises, unchanged
    """
    if inspect.iscoroutinefunction(func) or inspect.iscoroutinefunction(getattr(func, "__call__", None)):
        call = func(*args)
    else:
        call = asyncio.to_thread(func, *args)

    async def run():
        result = await call
        # Callables that hand back an awaitable without being coroutine functions
        if inspect.isawaitable(result):
            result = await result
        return result

    # One deadline covers both awaits
    try:
        return await asyncio.wait_for(run(), timeout=timeout)
    except asyncio.TimeoutError:
        raise ScraperTimeout(f"Timed out after {timeout:g}s waiting for the scraper") from None
