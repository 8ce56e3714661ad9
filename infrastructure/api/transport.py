"""Authenticated, timeout-bounded HTTP transport for the Data API."""
from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, TypeVar

import httpx

from core.errors import APIError, DecodeError, TransportError
from core.logging.logger import get_logger

T = TypeVar("T")
Decoder = Callable[[Any], T]


class HTTPTransport:
    """Executes GET requests and classifies the outcome.

    Holds no state across calls except the shared ``httpx.Client``.
    """

    def __init__(
        self,
        api_key: str,
        timeout: float,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.timeout = timeout
        self._headers = {
            "Content-Type": "application/json; charset=utf-8",
            "Accept": "application/json; charset=utf-8",
            "Authorization": f"Bearer {api_key.strip()}",
        }
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)
        self._log = get_logger(__name__, service="transport")

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def get(
        self,
        url: str,
        decoder: Decoder[T],
        params: Optional[Mapping[str, str]] = None,
    ) -> T:
        """GET ``url`` and hand the decoded JSON body to ``decoder``."""
        try:
            response = self._client.get(url, params=params, headers=self._headers, timeout=self.timeout)
        except httpx.TimeoutException as e:
            raise TransportError(f"request to {url} timed out after {self.timeout:g}s") from e
        except httpx.HTTPError as e:
            raise TransportError(f"request to {url} failed: {e}") from e

        self._log.debug(lambda: f"GET {response.request.url} -> {response.status_code}")

        if not 200 <= response.status_code < 400:
            raise self._error_from(response)

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(f"invalid JSON body from {url}: {e}") from e
        try:
            return decoder(payload)
        except (TypeError, ValueError, KeyError, OverflowError) as e:
            raise DecodeError(f"unexpected response shape from {url}: {e}") from e

    @staticmethod
    def _error_from(response: httpx.Response) -> APIError:
        # The {code, message} envelope wins over the generic status message.
        try:
            body = response.json()
        except ValueError:
            body = None
        # Any JSON code is accepted and kept as text, not only integer codes.
        if isinstance(body, dict) and isinstance(body.get("message"), str):
            code = body.get("code")
            return APIError(body["message"], response.status_code, None if code is None else str(code))
        return APIError(f"unknown error, status code: {response.status_code}", response.status_code)
