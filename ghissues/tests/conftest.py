from collections.abc import Mapping

import pytest

from ghissues.adapters.errors import TransportError
from ghissues.adapters.issues_client import IssuesClient

API_ROOT = "http://issues.test/api/v2/json"


class FakeTransport:
    """Records every request and replays one canned body (or error)."""

    def __init__(self, body: bytes = b"{}", error: TransportError | None = None) -> None:
        self.body = body
        self.error = error
        self.calls: list[tuple[str, str, dict[str, str] | None]] = []
        self.closed = False

    def fetch(self, url: str) -> bytes:
        self.calls.append(("GET", url, None))
        return self._reply()

    def submit(self, url: str, fields: Mapping[str, str]) -> bytes:
        self.calls.append(("POST", url, dict(fields)))
        return self._reply()

    def close(self) -> None:
        self.closed = True

    def _reply(self) -> bytes:
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def make_client():
    """Create an IssuesClient wired to a FakeTransport returning ``body``."""

    def _factory(body: bytes = b"{}", error: TransportError | None = None, **kwargs) -> tuple[IssuesClient, FakeTransport]:
        transport = FakeTransport(body=body, error=error)
        client = IssuesClient("alice", "s3cret", transport, api_root=API_ROOT, **kwargs)
        return client, transport

    return _factory
