"""HTTP client for the LifeSync server."""

from __future__ import annotations

import time
from typing import Any, Optional

import httpx

from lifesync.services.config_service import get_config_service


class APIError(Exception):
    """The server answered, but not with an ``{ok: true}`` envelope."""


class APIClient:
    """HTTP client for the LifeSync API."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        retry: int | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        if base_url is None or timeout is None or retry is None:
            server = get_config_service().config.server
            base_url = base_url or server.url
            timeout = server.timeout if timeout is None else timeout
            retry = server.retry if retry is None else retry

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry = retry
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def _get_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                follow_redirects=True,
                headers=self._get_headers(),
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, Any]] = None,
        retry: Optional[int] = None,
    ) -> httpx.Response:
        """Make an HTTP request to the API."""
        if retry is None:
            retry = self.retry

        client = self._get_client()
        url = f"{path}" if path.startswith("/") else f"/{path}"

        last_exception: Optional[Exception] = None
        for attempt in range(retry + 1):
            try:
                response = client.request(method=method, url=url, json=json, params=params)
                response.raise_for_status()
                return response
            except httpx.HTTPStatusError as e:
                # Don't retry client errors (4xx)
                if 400 <= e.response.status_code < 500:
                    raise
                last_exception = e
            except httpx.RequestError as e:
                last_exception = e

            if attempt < retry:
                # Wait before retry (simple exponential backoff)
                time.sleep(2**attempt)

        # All retries failed
        if last_exception:
            raise last_exception
        raise RuntimeError("Request failed after all retries")

    def call(
        self,
        method: str,
        path: str,
        *,
        json: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Make a request and return the ``data`` member of the response envelope."""
        payload = self.request(method, path, json=json).json()
        if not isinstance(payload, dict) or not payload.get("ok"):
            raise APIError(f"{method} {path} returned an unexpected payload")
        return payload.get("data")

    def get(self, path: str, *, params: Optional[dict[str, Any]] = None) -> httpx.Response:
        """Make a GET request."""
        return self.request("GET", path, params=params)

    def post(self, path: str, *, json: Optional[dict[str, Any]] = None) -> httpx.Response:
        """Make a POST request."""
        return self.request("POST", path, json=json)

    def patch(self, path: str, *, json: Optional[dict[str, Any]] = None) -> httpx.Response:
        """Make a PATCH request."""
        return self.request("PATCH", path, json=json)

    def delete(self, path: str) -> httpx.Response:
        """Make a DELETE request."""
        return self.request("DELETE", path)


def get_client() -> APIClient:
    """Get an API client configured from the current settings."""
    return APIClient()
