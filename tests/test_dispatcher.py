"""Tests for building and sending signed requests."""

import hashlib
import logging
import re
from urllib.parse import urlsplit

import pytest

from broadcastt.dispatcher import RequestDispatcher, parse_query
from broadcastt.exceptions import InvalidHostError, JsonEncodeError, TransportError
from broadcastt.signing import RequestSigner
from broadcastt.transport import Response


@pytest.fixture
def dispatcher(config, transport) -> RequestDispatcher:
    return RequestDispatcher(config, RequestSigner("testkey", "testsecret"), transport)


class TestBuildUri:
    """Tests for base URI construction."""

    def test_default(self, dispatcher):
        """scheme://host:port from the config."""
        assert dispatcher.build_uri() == "http://eu.broadcastt.xyz:80"

    def test_follows_config_changes(self, config, dispatcher):
        """Config changes apply to the next URI."""
        config.use_cluster("us")
        config.use_tls()

        assert dispatcher.build_uri() == "https://us.broadcastt.xyz:443"

    @pytest.mark.parametrize("host", ["http://test.xyz", "https://test.xyz"])
    def test_host_with_scheme(self, config, dispatcher, host):
        """A host with a scheme prefix is rejected."""
        config.host = host

        with pytest.raises(InvalidHostError):
            dispatcher.build_uri()


class TestBuildRequest:
    """Tests for request construction."""

    def test_app_id_substituted(self, dispatcher):
        """'{appId}' in the path is replaced before signing."""
        request = dispatcher.build_request("http://localhost:80", "/apps/{appId}/channels")

        assert urlsplit(request.url).path == "/apps/1/channels"
        assert request.method == "GET"
        assert request.body is None

    def test_headers(self, dispatcher):
        """JSON content type and library header are set."""
        request = dispatcher.build_request("http://localhost:80", "/apps/1/event", "POST")

        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["X-Library"] == "broadcastt-python 0.1.0"

    def test_query_is_signed(self, dispatcher):
        """The URL carries the signed query string."""
        request = dispatcher.build_request("http://localhost:80", "/apps/1/channels", "GET", {"info": "user_count"})

        assert re.fullmatch(
            r"auth_key=testkey&auth_signature=[0-9a-f]{64}&auth_timestamp=\d+&auth_version=1\.0&info=user_count",
            urlsplit(request.url).query,
        )


class TestSend:
    """Tests for sending requests."""

    def test_passes_timeout(self, config, dispatcher, transport):
        """The configured timeout is handed to the transport."""
        config.timeout = 5
        dispatcher.send(dispatcher.build_request(dispatcher.build_uri(), "/p"))

        assert transport.timeouts == [5]

    def test_transport_error_is_logged_and_raised(self, config, make_transport, caplog):
        """Transport errors propagate after being logged."""
        transport = make_transport([TransportError("connection refused")])
        dispatcher = RequestDispatcher(config, RequestSigner("testkey", "testsecret"), transport)

        with caplog.at_level(logging.ERROR, logger="broadcastt"):
            with pytest.raises(TransportError):
                dispatcher.send(dispatcher.build_request(dispatcher.build_uri(), "/p"))

        assert "connection refused" in caplog.text

    def test_failed_response_returned(self, config, make_transport):
        """Without raising, error responses come back as-is."""
        transport = make_transport([Response(413, "{}")], raise_for_status=False)
        dispatcher = RequestDispatcher(config, RequestSigner("testkey", "testsecret"), transport)

        response = dispatcher.send(dispatcher.build_request(dispatcher.build_uri(), "/p"))

        assert response.status_code == 413
        assert not response.ok


class TestPost:
    """Tests for POST requests."""

    def test_body_md5_is_signed(self, dispatcher, transport):
        """The MD5 of the exact body is part of the signed query."""
        dispatcher.post("/event", post_params={"name": "test-event"})

        request = transport.history[0]
        body_md5 = hashlib.md5(request.body.encode("utf-8")).hexdigest()

        assert request.method == "POST"
        assert request.body == '{"name":"test-event"}'
        assert urlsplit(request.url).path == "/apps/1/event"
        assert urlsplit(request.url).query.endswith(f"&body_md5={body_md5}")

    def test_unencodable_body(self, dispatcher, transport):
        """Unencodable post params fail before any request."""
        with pytest.raises(JsonEncodeError):
            dispatcher.post("/event", post_params={"data": b"\xb1\x31"})

        assert transport.history == []


class TestGet:
    """Tests for GET requests."""

    @pytest.mark.parametrize("query_params", [{"test-param": "test-val"}, "test-param=test-val"])
    def test_query_params(self, dispatcher, transport, query_params):
        """Query params may be a mapping or a raw query string."""
        dispatcher.get("/test/path", query_params)

        request = transport.history[0]
        url = urlsplit(request.url)
        assert request.method == "GET"
        assert url.path == "/apps/1/test/path"
        assert re.fullmatch(
            r"auth_key=testkey&auth_signature=\w+&auth_timestamp=\d+&auth_version=1\.0&test-param=test-val",
            url.query,
        )

    def test_bracketed_keys_collected(self, dispatcher, transport):
        """Repeated "key[]" params in a raw query string are sent comma-joined."""
        dispatcher.get("/test/path", "a[]=1&a[]=2")

        query = urlsplit(transport.history[0].url).query
        assert query.startswith("a=1,2&auth_key=testkey&")


class TestParseQuery:
    """Tests for raw query string parsing."""

    @pytest.mark.parametrize(
        "query,expected",
        [
            ("info=user_count", {"info": "user_count"}),
            ("a[]=1&a[]=2", {"a": ["1", "2"]}),
            ("a=1&a=2", {"a": "2"}),
            ("flag=", {"flag": ""}),
        ],
    )
    def test_parse_query(self, query, expected):
        assert parse_query(query) == expected
