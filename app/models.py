"""
Pydantic models and data structures for the product scraper API.
"""

from typing import Any, Dict, Optional
from enum import Enum
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Error body carried by every failed response."""
    error_message: str
    more_details: Optional[str] = None


class ErrorEnvelope(BaseModel):
    """Response model for failed requests."""
    error: ErrorDetail


class DataEnvelope(BaseModel):
    """Response model for successful requests."""
    data: Any


class SearchRequest(BaseModel):
    """Bound input of the search endpoints."""
    query: str = ""
    params: Optional[Dict[str, str]] = None


class ProductRequest(BaseModel):
    """Bound input of the product endpoint."""
    fragment: str = Field(..., min_length=1)
    params: Dict[str, str] = {}


class Lang(str, Enum):
    """Languages understood by the greeting endpoint."""
    ENGLISH = "en"
    RUSSIAN = "ru"


# Accepted spellings of each language
LANG_ALIASES = {
    "en": Lang.ENGLISH,
    "ru": Lang.RUSSIAN,
    "ру": Lang.RUSSIAN,
}


class UsageHints(BaseModel):
    """Example URLs for the main endpoints."""
    search_api: str
    product_api: str


class ServiceInfo(BaseModel):
    """Metadata returned by the root endpoint."""
    name: str
    description: str
    version: str
    authors: str
    repository: str
    license: str
    usage: UsageHints
