"""HTTP client for calls to external JSON services.

Every integration (Tableland gateway, OpenSea, the Rigs GraphQL API) goes
through this client. It owns a pooled ``requests`` session, applies the
configured timeout and user agent, decodes JSON bodies and converts every
failure into an ``OperationResult`` instead of raising.

The client is synchronous. Command handlers run it in a worker thread with
``asyncio.to_thread`` so a slow service never blocks the event loop.

Usage:
    from infrastructure.clients.http import HttpClient

    client = HttpClient(base_url="https://tableland.network", timeout=10)
    result = client.get("/api/v1/query", params={"statement": "select 1"})

    if result.is_success:
        rows = result.data
"""

import json
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import requests
import structlog

from infrastructure.operations import (
    OperationResult,
    classify_http_status,
    classify_request_exception,
)

logger = structlog.get_logger(__name__)


class HttpClient:
    """JSON-over-HTTP client returning OperationResult values.

    Attributes:
        base_url: Base URL that relative paths are joined to
        timeout: Default timeout in seconds
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: int = 30,
        user_agent: str = "TableBot/1.0",
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: Base URL for relative paths (absolute URLs bypass it)
            timeout: Default timeout for requests in seconds
            user_agent: User-Agent header sent with every request
            headers: Extra headers sent with every request (e.g. API keys)
        """
        self.base_url = base_url
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(
            {
                "User-Agent": user_agent,
                "Accept": "application/json",
            }
        )
        if headers:
            self._session.headers.update(headers)
        self._logger = logger.bind(component="http_client", base_url=base_url)

    def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> OperationResult:
        """Send a GET request.

        Args:
            path: Path relative to ``base_url`` or an absolute URL
            params: Query parameters
            headers: Additional headers
            timeout: Request timeout (overrides default)

        Returns:
            OperationResult with the decoded JSON body or an error
        """
        return self._request(
            "GET", path, params=params, headers=headers, timeout=timeout
        )

    def post(
        self,
        path: str,
        json_data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> OperationResult:
        """Send a POST request with a JSON body.

        Args:
            path: Path relative to ``base_url`` or an absolute URL
            json_data: JSON request body
            params: Query parameters
            headers: Additional headers
            timeout: Request timeout (overrides default)

        Returns:
            OperationResult with the decoded JSON body or an error
        """
        return self._request(
            "POST",
            path,
            json_data=json_data,
            params=params,
            headers=headers,
            timeout=timeout,
        )

    def url_for(self, path: str) -> str:
        """Resolve ``path`` against the base URL."""
        if not self.base_url:
            return path
        return urljoin(self.base_url, path)

    def _request(
        self,
        method: str,
        path: str,
        json_data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> OperationResult:
        url = self.url_for(path)
        timeout = timeout or self.timeout

        log = self._logger.bind(method=method, url=url)
        log.debug("http_request")

        try:
            response = self._session.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=headers,
                timeout=timeout,
            )
        except requests.RequestException as e:
            log.error("http_request_failed", error=str(e))
            return classify_request_exception(e)

        log = log.bind(status_code=response.status_code)

        response_data: Optional[Any] = None
        if response.content:
            try:
                response_data = response.json()
            except (json.JSONDecodeError, ValueError):
                log.warning("non_json_response", content=response.text[:200])

        if 200 <= response.status_code < 300:
            if response.content and response_data is None:
                return OperationResult.permanent_error(
                    message=f"{method} {url} returned a non-JSON body",
                    error_code="INVALID_JSON",
                )
            log.debug("http_success")
            return OperationResult.success(
                data=response_data,
                message=f"{method} {url} succeeded",
            )

        error_message = self._extract_error_message(response_data, response.text)
        if response.status_code >= 500:
            log.error("http_server_error", error=error_message)
        else:
            log.warning("http_client_error", error=error_message)
        return classify_http_status(response.status_code, error_message)

    def _extract_error_message(
        self,
        response_data: Optional[Any],
        response_text: str,
    ) -> str:
        """Extract a human-readable error message from a response."""
        if isinstance(response_data, dict):
            for key in ["message", "error", "detail"]:
                if key in response_data:
                    return str(response_data[key])

        return response_text[:200] if response_text else "Unknown error"

    def close(self) -> None:
        """Close HTTP session and release connections."""
        self._session.close()
        self._logger.debug("http_client_closed")


__all__ = ["HttpClient"]
