"""
Unit tests for request execution, path encoding and response decoding.
"""

import base64
from unittest.mock import patch

import httpx
import pytest

from vyrest.config import ClientConfig
from vyrest.errors import (
    DecodeFailure,
    ErrorKind,
    StatusFailure,
    TransportFailure,
)
from vyrest.models import ConfigNode, MessageResponse, SessionList
from vyrest.transport import Transport, decode, encode_path, location_id

from conftest import reply


def _response(status=200, **kwargs):
    return httpx.Response(
        status, request=httpx.Request("GET", "https://router.test/rest/conf"), **kwargs
    )


class TestEncodePath:
    def test_space_encodes_as_percent_20(self):
        assert encode_path(["foo bar"]) == "/foo%20bar"
        assert "+" not in encode_path(["foo bar"])

    def test_segments_keep_order(self):
        assert encode_path(["interfaces", "ethernet", "eth0"]) == (
            "/interfaces/ethernet/eth0"
        )

    def test_slash_inside_segment_is_escaped(self):
        assert encode_path(["address", "192.0.2.1/24"]) == "/address/192.0.2.1%2F24"

    def test_reserved_characters(self):
        assert encode_path(["a+b", "c&d", "it's"]) == "/a%2Bb/c%26d/it%27s"

    def test_empty_path(self):
        assert encode_path([]) == ""


class TestDecode:
    def test_empty_body_is_zero_value(self):
        node = decode(_response(content=b""), ConfigNode)
        assert node == ConfigNode()
        assert node.children == []

    def test_whitespace_body_is_zero_value(self):
        assert decode(_response(content=b"  \n"), MessageResponse).message == ""

    def test_json_null_is_zero_value(self):
        assert decode(_response(content=b"null"), SessionList).sessions == []

    def test_malformed_body_is_decode_failure(self):
        with pytest.raises(DecodeFailure) as exc:
            decode(_response(content=b"{not json"), MessageResponse)
        assert exc.value.kind is ErrorKind.DECODE

    def test_wrong_shape_is_decode_failure(self):
        with pytest.raises(DecodeFailure):
            decode(_response(json={"session": "nope"}), SessionList)

    def test_null_fields_take_defaults(self):
        node = decode(
            _response(json={"name": "eth0", "type": None, "children": None}),
            ConfigNode,
        )
        assert node.name == "eth0"
        assert node.type == []
        assert node.children == []


class TestLocationId:
    def test_takes_last_component(self):
        resp = _response(201, headers={"Location": "/rest/conf/2A3B4C"})
        assert location_id(resp) == "2A3B4C"

    def test_absolute_url(self):
        resp = _response(201, headers={"Location": "https://router.test/rest/op/77/"})
        assert location_id(resp) == "77"

    def test_missing_header(self):
        with pytest.raises(DecodeFailure):
            location_id(_response(201))


class TestTransport:
    def test_headers(self, client, device):
        device.script("GET", "/rest/conf", reply(json={"session": []}))
        client.sessions.list_sessions()

        request = device.requests[0]
        token = base64.b64encode(b"vyatta:secret").decode()
        assert request.headers["Authorization"] == f"Basic {token}"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Vyatta-Specification-Version"] == "0.1"
        assert request.url.scheme == "https"
        assert request.url.host == "router.test"

    def test_status_failure_keeps_response(self, client, device):
        device.script("DELETE", "/rest/conf/S9", reply(403))
        with pytest.raises(StatusFailure) as exc:
            client.sessions.teardown_session("S9")

        err = exc.value
        assert err.kind is ErrorKind.STATUS
        assert err.status_code == 403
        assert err.response is not None
        assert err.response.status_code == 403
        assert str(err) == "403 Forbidden"

    def test_status_failure_prefers_server_message(self, client, device):
        device.script("DELETE", "/rest/conf/S9", reply(404, json={"message": "no such session"}))
        with pytest.raises(StatusFailure) as exc:
            client.sessions.teardown_session("S9")
        assert str(exc.value) == "no such session"
        assert exc.value.status_text == "404 Not Found"

    def test_connection_error(self, client, device):
        device.script(
            "GET",
            "/rest/conf",
            httpx.ConnectError("connection refused"),
        )
        with pytest.raises(TransportFailure) as exc:
            client.sessions.list_sessions()
        assert exc.value.kind is ErrorKind.TRANSPORT

    def test_timeout_is_transport_failure(self, client, device):
        device.script("GET", "/rest/op", httpx.ReadTimeout("read timed out"))
        with pytest.raises(TransportFailure, match="timed out"):
            client.processes.list_processes()


class TestHttpClientSettings:
    def test_timeout_reaches_http_client(self):
        with Transport(ClientConfig(host="router.test", timeout=3)) as transport:
            assert transport._http.timeout == httpx.Timeout(3)

    def test_default_timeout(self):
        with Transport(ClientConfig(host="router.test")) as transport:
            assert transport._http.timeout == httpx.Timeout(30.0)

    def test_tls_verification_off_by_default(self):
        with patch("vyrest.transport.httpx.Client") as http_client:
            Transport(ClientConfig(host="router.test"))
        assert http_client.call_args.kwargs["verify"] is False

    def test_tls_verification_opt_in(self):
        with patch("vyrest.transport.httpx.Client") as http_client:
            Transport(ClientConfig(host="router.test", verify_tls=True))
        assert http_client.call_args.kwargs["verify"] is True

    def test_base_url_reaches_http_client(self):
        with patch("vyrest.transport.httpx.Client") as http_client:
            Transport(ClientConfig(host="192.0.2.1"))
        assert http_client.call_args.kwargs["base_url"] == "https://192.0.2.1"
