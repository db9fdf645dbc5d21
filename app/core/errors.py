"""
Failure taxonomy shared by the binder, the orchestrators and the envelope.
"""

from typing import Optional

from app.models import ErrorDetail


class ApiError(Exception):
    """Base class for failures that end a request with an error envelope."""

    status_code = 500

    def __init__(self, error_message: str, more_details: Optional[str] = None):
        super().__init__(error_message)
        self.detail = ErrorDetail(error_message=error_message, more_details=more_details)


class BindingError(ApiError):
    """The client sent something we cannot turn into a request value."""

    status_code = 400


class DownstreamError(ApiError):
    """The scraper reported a failure or did not answer in time."""

    status_code = 502


class InternalError(ApiError):
    """We failed to produce a response for an otherwise successful call."""

    status_code = 500
