"""Elasticsearch HTTP client."""

from __future__ import annotations

import random
import time
from typing import Any, Mapping
from urllib.parse import quote

import requests

from ContentSearch.utils.log import log

DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_ATTEMPTS = 3
BASE_PAUSE = 0.5
MAX_SLEEP = 8.0
RETRYABLE_STATUS = {429, 500, 502, 503, 504}

HEADERS = {
    "User-Agent": "content-search/0.1",
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class ElasticsearchApiClient:
    """Low-level HTTP client for the Elasticsearch ``_search`` endpoint."""

    def __init__(
        self,
        host: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        api_key: str | None = None,
        username: str | None = None,
        password: str | None = None,
    ) -> None:
        """Initialize the client with a reusable HTTP session.

        Args:
            host: Base URL of the cluster, e.g. ``http://localhost:9200``.
            timeout: Request timeout in seconds.
            max_attempts: Attempts per request, including the first one.
            api_key: Optional API key sent as ``Authorization: ApiKey``.
            username: Optional basic-auth user.
            password: Optional basic-auth password.
        """
        self._base_url = host.rstrip("/")
        self._timeout = timeout
        self._max_attempts = max(1, max_attempts)
        self._session = requests.Session()
        self._session.headers.update(HEADERS)
        if api_key:
            self._session.headers["Authorization"] = f"ApiKey {api_key}"
        elif username:
            self._session.auth = (username, password or "")

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def search(self, index: str, body: Mapping[str, Any]) -> dict[str, Any]:
        """Run one search request against ``index``.

        Args:
            index: Index name or alias.
            body: Request body in the query DSL.

        Returns:
            Decoded JSON response, or an empty mapping if it is not an object.

        Raises:
            requests.HTTPError: On a non-success status after retries.
            requests.Timeout: If the final attempt times out.
            requests.ConnectionError: If the cluster is unreachable.
        """
        url = f"{self._base_url}/{quote(index, safe=',*')}/_search"
        response = self._post_with_retry(url=url, body=body)
        response.raise_for_status()

        payload = response.json()
        return payload if isinstance(payload, dict) else {}

    def _post_with_retry(self, *, url: str, body: Mapping[str, Any]) -> requests.Response:
        """Issue POST with retries for transient failures."""
        last_error: Exception | None = None
        for attempt in range(1, self._max_attempts + 1):
            try:
                response = self._session.post(url, json=body, timeout=self._timeout)
                if response.status_code in RETRYABLE_STATUS:
                    raise requests.HTTPError(
                        f"HTTP {response.status_code}",
                        response=response,
                    )
                return response
            except (requests.Timeout, requests.ConnectionError, requests.HTTPError) as error:
                last_error = error
                if isinstance(error, requests.HTTPError):
                    status_code = getattr(error.response, "status_code", None)
                    if status_code not in RETRYABLE_STATUS:
                        raise
                if attempt < self._max_attempts:
                    delay = min(BASE_PAUSE * (2 ** (attempt - 1)) + random.uniform(0, 0.3), MAX_SLEEP)
                    log.debug(
                        "Elasticsearch retry attempt=%d/%d delay=%.2fs error=%s",
                        attempt,
                        self._max_attempts,
                        delay,
                        error,
                    )
                    time.sleep(delay)

        assert last_error is not None
        raise last_error
