"""City search service HTTP client."""

from __future__ import annotations

from typing import Any, Mapping

import requests

from CitySearch.sources.api.errors import ApiResponseError, ApiTransportError
from CitySearch.utils.log import log

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_TIMEOUT = 5.0

HEADERS = {
    "User-Agent": "city-search/0.1",
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class CityApiClient:
    """Low-level HTTP client for the city search service.

    The service exposes a single endpoint: every request is a JSON object
    POSTed to ``base_url`` and tagged by its ``command`` field.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize the client with a reusable HTTP session.

        Args:
            base_url: Service endpoint URL.
            timeout: Per-request socket timeout in seconds.
        """
        self.base_url = base_url
        self.timeout = timeout
        self._session = requests.Session()

    def close(self) -> None:
        """Close the underlying HTTP session.
        """
        self._session.close()

    def post(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Send one request payload and return the decoded JSON response.

        There is no retry: callers decide what a failed request means.

        Args:
            payload: Request object with a ``command`` tag.

        Returns:
            Decoded JSON response mapping.

        Raises:
            ApiTransportError: On connection failure, timeout or non-2xx status.
            ApiResponseError: If the body is not a JSON object.
        """
        log.debug("POST %s command=%s", self.base_url, payload.get("command"))
        try:
            response = self._session.post(
                self.base_url,
                json=dict(payload),
                headers=HEADERS,
                timeout=self.timeout,
            )
        except (requests.Timeout, requests.ConnectionError) as error:
            raise ApiTransportError(f"Request to {self.base_url} failed: {error}") from error

        if not response.ok:
            detail = response.text.strip() or response.reason
            raise ApiTransportError(
                f"HTTP {response.status_code}: {detail}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as error:
            raise ApiResponseError(f"Response is not valid JSON: {error}") from error
        if not isinstance(body, dict):
            raise ApiResponseError("Response root must be a JSON object")
        return body
