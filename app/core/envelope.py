"""
Uniform JSON envelope returned by every endpoint.

Successful responses look like ``{"data": ...}`` and failed ones like
``{"error": {"error_message": ..., "more_details": ...}}``. ``JSONResponse``
renders in strict mode, so a client never receives invalid JSON; anything
that cannot be encoded turns into a 500.
"""

import logging
from typing import Any, Union

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from app import REPOSITORY
from app.core.errors import ApiError, BindingError, DownstreamError, InternalError
from app.models import ErrorDetail


logger = logging.getLogger(__name__)

# Failures raised while encoding arbitrary scraper output
ENCODE_ERRORS = (TypeError, ValueError, RecursionError)

Detail = Union[str, ErrorDetail]


def _as_detail(detail: Detail) -> ErrorDetail:
    if isinstance(detail, ErrorDetail):
        return detail
    return ErrorDetail(error_message=str(detail))


def _error_response(status_code: int, detail: Detail) -> Response:
    body = {"error": _as_detail(detail).model_dump(exclude_none=True)}
    return JSONResponse(content=body, status_code=status_code)


def to_jsonable(value: Any) -> Any:
    """
    Convert a scraper result into JSON-compatible data.

    Args:
        value: Pydantic model, dataclass, mapping, sequence or scalar

    Returns:
        Data that ``JSONResponse`` can render

    Raises:
        InternalError: If the value cannot be represented as JSON
    """
    try:
        data = jsonable_encoder(value)
        JSONResponse(content=data)
    except ENCODE_ERRORS as e:
        raise InternalError(f"Failed to serialize the scraper response: {e}") from e
    return data


def success(value: Any) -> Response:
    """200 with ``{"data": value}``, or a 500 if ``value`` cannot be encoded."""
    try:
        return JSONResponse(content={"data": jsonable_encoder(value)}, status_code=200)
    except ENCODE_ERRORS as e:
        logger.error("Failed to serialize response payload: %s", e)
        return internal_error(f"Failed to serialize the response: {e}")


def bad_request(detail: Detail) -> Response:
    return _error_response(400, detail)


def bad_gateway(detail: Detail) -> Response:
    return _error_response(502, detail)


def internal_error(detail: Detail) -> Response:
    """500 with a generic message; ``detail`` goes into ``more_details``."""
    reason = detail.error_message if isinstance(detail, ErrorDetail) else detail
    return _error_response(500, ErrorDetail(
        error_message="Internal Server Error",
        more_details=f"There was some internal server error. {reason}. Report issues at {REPOSITORY}",
    ))


def error_response(status_code: int, detail: Detail) -> Response:
    """Error envelope for an arbitrary status, used for framework-level errors."""
    if status_code >= 500:
        return internal_error(detail)
    return _error_response(status_code, detail)


def from_error(error: ApiError) -> Response:
    """Render a failure raised by the binder or an orchestrator."""
    if isinstance(error, BindingError):
        return bad_request(error.detail)
    if isinstance(error, DownstreamError):
        return bad_gateway(error.detail)
    if isinstance(error, InternalError):
        return internal_error(error.detail)
    return _error_response(error.status_code, error.detail)
