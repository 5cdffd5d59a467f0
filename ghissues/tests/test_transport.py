from urllib.parse import parse_qs

import httpx
import pytest
import respx

from ghissues.adapters.errors import TransportError
from ghissues.adapters.transport import HttpTransport

BASE_URL = "http://issues.test"


class TestFetch:
    def test_returns_raw_body_on_200(self):
        with respx.mock(base_url=BASE_URL) as mock:
            mock.get("/api/v2/json/issues/labels/a/b/").respond(200, content=b'{"labels": []}')
            with HttpTransport() as transport:
                body = transport.fetch(f"{BASE_URL}/api/v2/json/issues/labels/a/b/")
        assert body == b'{"labels": []}'

    def test_404_carries_status_and_url(self):
        url = f"{BASE_URL}/missing"
        with respx.mock(base_url=BASE_URL) as mock:
            mock.get("/missing").respond(404, text="Not Found")
            with HttpTransport() as transport:
                with pytest.raises(TransportError) as exc_info:
                    transport.fetch(url)
        assert exc_info.value.status_code == 404
        assert exc_info.value.url == url
        assert "GET" in str(exc_info.value)

    def test_non_200_success_code_is_a_failure(self):
        with respx.mock(base_url=BASE_URL) as mock:
            mock.get("/created").respond(201, json={"issue": {}})
            with HttpTransport() as transport:
                with pytest.raises(TransportError) as exc_info:
                    transport.fetch(f"{BASE_URL}/created")
        assert exc_info.value.status_code == 201

    def test_connection_error_has_no_status(self):
        with respx.mock(base_url=BASE_URL) as mock:
            mock.get("/down").mock(side_effect=httpx.ConnectError("refused"))
            with HttpTransport() as transport:
                with pytest.raises(TransportError) as exc_info:
                    transport.fetch(f"{BASE_URL}/down")
        assert exc_info.value.status_code is None
        assert exc_info.value.url == f"{BASE_URL}/down"

    def test_timeout_is_a_transport_error(self):
        with respx.mock(base_url=BASE_URL) as mock:
            mock.get("/slow").mock(side_effect=httpx.ReadTimeout("timed out"))
            with HttpTransport() as transport:
                with pytest.raises(TransportError):
                    transport.fetch(f"{BASE_URL}/slow")


class TestSubmit:
    def test_posts_form_encoded_fields(self):
        with respx.mock(base_url=BASE_URL) as mock:
            route = mock.post("/form").respond(200, content=b"ok")
            with HttpTransport() as transport:
                body = transport.submit(f"{BASE_URL}/form", {"title": "a b", "login": "alice"})
        assert body == b"ok"
        request = route.calls.last.request
        assert request.headers["content-type"] == "application/x-www-form-urlencoded"
        assert parse_qs(request.content.decode()) == {"title": ["a b"], "login": ["alice"]}

    def test_500_raises(self):
        with respx.mock(base_url=BASE_URL) as mock:
            mock.post("/form").respond(500, text="boom")
            with HttpTransport() as transport:
                with pytest.raises(TransportError) as exc_info:
                    transport.submit(f"{BASE_URL}/form", {})
        assert exc_info.value.status_code == 500
        assert "POST" in str(exc_info.value)


class TestLifecycle:
    def test_owned_client_is_closed(self):
        transport = HttpTransport()
        transport.close()
        assert transport._http.is_closed
        # Second close is a no-op.
        transport.close()

    def test_injected_client_is_left_open(self):
        http = httpx.Client()
        with HttpTransport(http=http):
            pass
        assert not http.is_closed
        http.close()

    def test_timeout_override(self):
        with HttpTransport(timeout=1.5) as transport:
            assert transport._http.timeout.read == 1.5
