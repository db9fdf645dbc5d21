"""
Parameter binding: raw path captures and query strings to typed values.

Everything here is synchronous and free of I/O. Failures raise
``BindingError`` so they always end up as a 400, never as a gateway error.
"""

import re
from typing import Dict, Mapping, Optional
from urllib.parse import parse_qsl, quote, unquote

import httpx

from app.core.errors import BindingError
from app.models import LANG_ALIASES, Lang, ProductRequest, SearchRequest


INVALID_QUERY = "Invalid query parameters"
INVALID_PATH = "Invalid path"
INVALID_PRODUCT_URL = "Invalid product URL"

# A '%' that does not start a two-digit hex escape
_BROKEN_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

_TRUE_FLAGS = {"", "true", "on", "yes", "1"}
_FALSE_FLAGS = {"false", "off", "no", "0"}


def _unquote_strict(text: str, message: str) -> str:
    if _BROKEN_ESCAPE.search(text):
        raise BindingError(message, f"Malformed percent-encoding in {text!r}")
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError:
        raise BindingError(message, f"Percent-encoded bytes in {text!r} are not valid UTF-8") from None


def decode_capture(raw: str) -> str:
    """
    Decode a greedy path capture into one logical string.

    Each segment is percent-decoded on its own and the segments are joined
    back with '/', so ``a/b%20c/d`` becomes ``a/b c/d``.

    Raises:
        BindingError: If a segment carries malformed percent-encoding
    """
    return "/".join(_unquote_strict(segment, INVALID_PATH) for segment in raw.split("/"))


def raw_capture(scope: Mapping, prefix: str, fallback: str = "") -> str:
    """
    Return the still-encoded part of the request path that follows ``prefix``.

    The ASGI ``path`` is already decoded, which would hide malformed escapes,
    so the capture is cut out of ``raw_path`` instead. When the server does
    not provide ``raw_path`` the decoded ``fallback`` capture is re-quoted.

    Raises:
        BindingError: If the raw path is not valid UTF-8
    """
    raw_path = scope.get("raw_path")
    if raw_path is None:
        return quote(fallback, safe="/")
    try:
        path = raw_path.split(b"?", 1)[0].decode("utf-8")
    except UnicodeDecodeError:
        raise BindingError(INVALID_PATH, "Request path is not valid UTF-8") from None
    if path == prefix.rstrip("/"):
        return ""
    if not path.startswith(prefix):
        return quote(fallback, safe="/")
    return path[len(prefix):]


def parse_query(raw: bytes) -> Optional[Dict[str, str]]:
    """
    Parse a raw query string into a mapping.

    Repeated keys resolve last-wins. Unknown keys are kept. Keys without
    ``=`` bind to the empty string.

    Args:
        raw: Query string bytes as received, without the leading '?'

    Returns:
        The parameters, or None when the request has no query string

    Raises:
        BindingError: If the query string cannot be split into key/value pairs
    """
    if not raw:
        return None

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise BindingError(INVALID_QUERY, "Query string is not valid UTF-8") from None

    if _BROKEN_ESCAPE.search(text):
        raise BindingError(INVALID_QUERY, f"Malformed percent-encoding in query string {text!r}")

    try:
        pairs = parse_qsl(text, keep_blank_values=True, errors="strict")
    except (UnicodeDecodeError, ValueError) as e:
        raise BindingError(INVALID_QUERY, f"Could not decode query string {text!r}: {e}") from None

    params = {}
    for key, value in pairs:
        if not key:
            raise BindingError(INVALID_QUERY, f"Query parameter without a name in {text!r}")
        params[key] = value
    return params


def bind_search(raw_query_capture: Optional[str], raw_query_string: bytes) -> SearchRequest:
    """Build the search input; a missing capture becomes the empty query."""
    query = decode_capture(raw_query_capture) if raw_query_capture else ""
    return SearchRequest(query=query, params=parse_query(raw_query_string))


def bind_product(raw_fragment: Optional[str], raw_query_string: bytes) -> ProductRequest:
    """Build the product input; the relative URL is mandatory."""
    fragment = decode_capture(raw_fragment) if raw_fragment else ""
    if not fragment:
        raise BindingError(
            "Missing product URL",
            "Pass the product link after /product/, e.g. /product/<category>/<name>/p/<item-id>",
        )
    return ProductRequest(fragment=fragment, params=parse_query(raw_query_string) or {})


def build_product_url(base_origin: str, fragment: str, params: Optional[Mapping[str, str]] = None) -> str:
    """
    Join a relative product path onto the base origin.

    A query string already present in ``fragment`` is kept and merged with
    ``params``; on key collisions ``params`` wins.

    Args:
        base_origin: Scheme and host, e.g. ``https://www.flipkart.com``
        fragment: Site-specific path of the product, without leading origin
        params: Extra query parameters to append

    Returns:
        The absolute product URL

    Raises:
        BindingError: If the result is not a valid absolute URL
    """
    full = f"{base_origin.rstrip('/')}/{fragment}"
    try:
        url = httpx.URL(full)
        if params:
            url = url.copy_merge_params(dict(params))
    except (httpx.InvalidURL, ValueError) as e:
        raise BindingError(INVALID_PRODUCT_URL, str(e)) from None

    if url.scheme not in ("http", "https") or not url.host:
        raise BindingError(INVALID_PRODUCT_URL, f"{full!r} is not an absolute http(s) URL")
    return str(url)


def bind_flag(params: Mapping[str, str], name: str) -> bool:
    """Boolean query flag: ``?emoji`` and ``?emoji=true`` are both true."""
    if name not in params:
        return False
    value = params[name].lower()
    if value in _TRUE_FLAGS:
        return True
    if value in _FALSE_FLAGS:
        return False
    raise BindingError(INVALID_QUERY, f"{name!r} must be a boolean, got {params[name]!r}")


def bind_lang(params: Mapping[str, str]) -> Optional[Lang]:
    value = params.get("lang")
    if value is None:
        return None
    try:
        return LANG_ALIASES[value.lower()]
    except KeyError:
        raise BindingError(INVALID_QUERY, f"Unsupported lang {value!r}") from None


def bind_age(raw: str) -> int:
    """Age segment of the wave demo, an integer from 0 to 255."""
    if not (raw.isascii() and raw.isdigit()) or int(raw) > 255:
        raise BindingError(INVALID_PATH, f"Age must be a number between 0 and 255, got {raw!r}")
    return int(raw)
