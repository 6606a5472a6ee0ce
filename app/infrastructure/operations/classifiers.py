"""Error classifiers for outbound HTTP calls.

Converts ``requests`` exceptions and non-2xx responses into standardized
OperationResult objects so every integration client reports failures the
same way.

Key Functions:
- classify_http_status(): HTTP status code + message -> OperationResult
- classify_request_exception(): requests exceptions -> OperationResult

Usage:
    from infrastructure.operations.classifiers import classify_request_exception

    try:
        response = session.get(url, timeout=10)
    except requests.RequestException as exc:
        return classify_request_exception(exc)
"""

import requests

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


def classify_http_status(status_code: int, message: str) -> OperationResult:
    """Classify a non-2xx HTTP status code into an OperationResult.

    Status Code Mapping:
    - 401, 403: UNAUTHORIZED
    - 404: NOT_FOUND
    - 429: TRANSIENT_ERROR (rate limited)
    - other 4xx: PERMANENT_ERROR
    - 5xx: TRANSIENT_ERROR
    - anything else: TRANSIENT_ERROR

    Args:
        status_code: HTTP status code of the response
        message: Error message extracted from the response body

    Returns:
        OperationResult with error_code ``HTTP_<status>``
    """
    error_code = f"HTTP_{status_code}"

    if status_code in (401, 403):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED, message, error_code=error_code
        )

    if status_code == 404:
        return OperationResult.error(
            OperationStatus.NOT_FOUND, message, error_code=error_code
        )

    if status_code == 429:
        return OperationResult.transient_error(message, error_code="RATE_LIMITED")

    if 400 <= status_code < 500:
        return OperationResult.permanent_error(message, error_code=error_code)

    return OperationResult.transient_error(message, error_code=error_code)


def classify_request_exception(exc: Exception) -> OperationResult:
    """Classify an exception raised while sending an HTTP request.

    Timeouts and connection failures are connectivity problems and are
    reported as transient. Other ``requests`` errors (invalid URL, too many
    redirects) cannot succeed by trying again and are permanent.

    Args:
        exc: Exception raised by ``requests``

    Returns:
        OperationResult describing the failure
    """
    if isinstance(exc, requests.Timeout):
        return OperationResult.transient_error(
            f"Request timed out: {exc}", error_code="TIMEOUT"
        )

    if isinstance(exc, requests.ConnectionError):
        return OperationResult.transient_error(
            f"Connection error: {exc}", error_code="CONNECTION_ERROR"
        )

    if isinstance(exc, requests.RequestException):
        return OperationResult.permanent_error(
            f"Request error: {type(exc).__name__}: {exc}",
            error_code="REQUEST_ERROR",
        )

    return OperationResult.transient_error(
        f"Unexpected error: {type(exc).__name__}: {exc}",
        error_code="UNEXPECTED_ERROR",
    )
