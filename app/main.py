"""
FastAPI application for the Product Scraper API.

Builds the app around the single route table, configures logging and turns
every failure into the JSON error envelope, or into a redirect to ``/`` for
unknown paths.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import settings
from app.core import envelope
from app.core.errors import ApiError, BindingError, InternalError
from app.routers.table import build_router, redirect_to_root
from app.scrapers import get_product_scraper, get_search_scraper


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL = settings.log_level

# Configures the root logger; uvicorn.run installs its own handlers afterwards,
# so only the level of uvicorn's loggers is aligned here.
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, force=True)
for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
    logging.getLogger(name).setLevel(LOG_LEVEL)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Resolves the scraper backends on startup so a bad backend path fails
    the launch instead of the first request.
    """
    # Startup
    get_search_scraper()
    get_product_scraper()
    logger.info("Serving products from %s", settings.base_origin)
    yield

    # Shutdown
    logger.info("Application shutting down.")


# Create FastAPI app
app = FastAPI(
    title=settings.API_TITLE,
    version=__version__,
    lifespan=lifespan,
    description="Search products and fetch product details through a scraper backend.",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"]
)

app.include_router(build_router())


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    if isinstance(exc, InternalError):
        logger.error("Internal error on %s: %s", request.url.path, exc, exc_info=exc)
    elif isinstance(exc, BindingError):
        logger.info("Rejected %s: %s", request.url.path, exc.detail.more_details or exc)
    return envelope.from_error(exc)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return redirect_to_root()
    return envelope.error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return envelope.internal_error(str(exc) or type(exc).__name__)
