"""HTTP transport for the issues API: one request per call, no retries."""

from collections.abc import Mapping
from typing import Protocol

import httpx
import structlog

from ghissues.adapters.errors import TransportError
from ghissues.config.config import settings

logger = structlog.get_logger(__name__)


class Transport(Protocol):
    def fetch(self, url: str) -> bytes: ...

    def submit(self, url: str, fields: Mapping[str, str]) -> bytes: ...

    def close(self) -> None: ...


class HttpTransport:
    """Transport backed by a synchronous ``httpx.Client``.

    A client passed in by the caller is used as-is and left open on ``close()``;
    otherwise one is created with the configured timeout and owned here.
    """

    def __init__(self, http: httpx.Client | None = None, timeout: float | None = None) -> None:
        self._owns_http = http is None
        if http is None:
            http = httpx.Client(timeout=settings.timeout_seconds if timeout is None else timeout)
        self._http = http

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http and not self._http.is_closed:
            self._http.close()

    def fetch(self, url: str) -> bytes:
        return self._send("GET", url)

    def submit(self, url: str, fields: Mapping[str, str]) -> bytes:
        return self._send("POST", url, data=dict(fields))

    def _send(self, method: str, url: str, data: dict[str, str] | None = None) -> bytes:
        logger.debug("issues_request", method=method, url=url)
        try:
            resp = self._http.request(method, url, data=data)
        except httpx.HTTPError as exc:
            logger.warning("issues_request_failed", method=method, url=url, error=str(exc))
            raise TransportError(f"Request to {url} failed: {exc}", url=url) from exc
        self._raise_for_status(resp, method, url)
        return resp.content

    def _raise_for_status(self, resp: httpx.Response, method: str, url: str) -> None:
        # Anything but 200 is a failure, including other 2xx codes.
        if resp.status_code != 200:
            logger.warning("issues_request_failed", method=method, url=url, status_code=resp.status_code)
            raise TransportError(
                f"Got a {resp.status_code} status code on {method} of {url}.",
                url=url,
                status_code=resp.status_code,
            )
