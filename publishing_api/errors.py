"""Exceptions raised by the Publishing API client."""

from typing import Any, Optional


class HTTPErrorResponse(Exception):
    """The Publishing API answered with an error, or could not be reached.

    Attributes:
        code: HTTP status code, or None for transport failures
        error_details: Parsed JSON error body when the API sent one
    """

    def __init__(self, code: Optional[int], message: str = "",
                 error_details: Optional[Any] = None):
        super().__init__(message)
        self.code = code
        self.error_details = error_details

    def __str__(self) -> str:
        base = super().__str__()
        if self.code is None:
            return base
        return f"{self.code} {base}".strip()


class HTTPNotFound(HTTPErrorResponse):
    """404: the requested content item does not exist."""


class HTTPConflict(HTTPErrorResponse):
    """409: version conflict on a write."""


class HTTPUnprocessableEntity(HTTPErrorResponse):
    """422: the API rejected the payload (e.g. base path already reserved)."""


_ERRORS_BY_STATUS = {
    404: HTTPNotFound,
    409: HTTPConflict,
    422: HTTPUnprocessableEntity,
}


def build_http_error(code: int, message: str,
                     error_details: Optional[Any] = None) -> HTTPErrorResponse:
    """Return the most specific HTTPErrorResponse subclass for *code*."""
    error_class = _ERRORS_BY_STATUS.get(code, HTTPErrorResponse)
    return error_class(code, message, error_details)
