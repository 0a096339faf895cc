import socket
import urllib.error
import urllib.parse

import pytest

from conftest import FakeResponse

from zkdapp.hub import HubClient, HubError


class RecordingOpener:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.requests = []

    def __call__(self, req, timeout=None):
        self.requests.append((req, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response


def test_query_builds_md5_request() -> None:
    opener = RecordingOpener(FakeResponse({"result": []}))
    client = HubClient(endpoint="https://hub.example:8090/", timeout=5, opener=opener)

    assert client.query_image("ABCDEF") is None

    req, timeout = opener.requests[0]
    parsed = urllib.parse.urlparse(req.full_url)
    assert parsed.path == "/image"
    assert urllib.parse.parse_qs(parsed.query) == {"md5": ["ABCDEF"]}
    assert req.get_method() == "GET"
    assert req.get_header("Accept") == "application/json"
    assert timeout == 5


def test_query_returns_first_record() -> None:
    payload = {"result": [
        {"md5": "ABCDEF", "checksum": {"x": ["1"]}, "name": "first", "circuit_size": 22},
        {"md5": "ABCDEF", "checksum": "second"},
    ]}
    client = HubClient(opener=RecordingOpener(FakeResponse(payload)))

    record = client.query_image("ABCDEF")

    assert record.name == "first"
    assert record.circuit_size == 22
    assert record.has_checksum
    assert record.checksum == "{'x': ['1']}"


def test_non_2xx_status_raises() -> None:
    client = HubClient(opener=RecordingOpener(FakeResponse(b"", status=503, reason="Service Unavailable")))
    with pytest.raises(HubError, match="HTTP 503"):
        client.query_image("ABCDEF")


def test_http_error_raises() -> None:
    exc = urllib.error.HTTPError("https://hub/image", 404, "Not Found", {}, None)
    client = HubClient(opener=RecordingOpener(exc=exc))
    with pytest.raises(HubError, match="HTTP 404: Not Found"):
        client.query_image("ABCDEF")


def test_network_error_raises() -> None:
    client = HubClient(opener=RecordingOpener(exc=urllib.error.URLError("Name or service not known")))
    with pytest.raises(HubError, match="Connection failed"):
        client.query_image("ABCDEF")


def test_timeout_raises() -> None:
    client = HubClient(timeout=10, opener=RecordingOpener(exc=socket.timeout("timed out")))
    with pytest.raises(HubError, match="timed out"):
        client.query_image("ABCDEF")


def test_invalid_json_raises() -> None:
    client = HubClient(opener=RecordingOpener(FakeResponse(b"<html>")))
    with pytest.raises(HubError, match="Invalid response"):
        client.query_image("ABCDEF")


def test_missing_result_field_raises() -> None:
    client = HubClient(opener=RecordingOpener(FakeResponse({"error": "nope"})))
    with pytest.raises(HubError, match="Invalid response"):
        client.query_image("ABCDEF")


def test_loose_display_fields_do_not_fail_lookup() -> None:
    payload = {"result": [{"checksum": "abc", "name": 123, "description": ["x"], "circuit_size": "big"}]}
    client = HubClient(opener=RecordingOpener(FakeResponse(payload)))

    record = client.query_image("ABCDEF")

    assert record.checksum == "abc"
    assert record.name == "123"
    assert record.circuit_size is None


def test_only_first_record_is_parsed() -> None:
    payload = {"result": [{"checksum": "abc", "circuit_size": "22"}, "garbage", 42]}
    client = HubClient(opener=RecordingOpener(FakeResponse(payload)))

    record = client.query_image("ABCDEF")

    assert record.has_checksum
    assert record.circuit_size == 22


def test_non_object_first_record_raises() -> None:
    client = HubClient(opener=RecordingOpener(FakeResponse({"result": ["garbage"]})))
    with pytest.raises(HubError, match="Invalid response"):
        client.query_image("ABCDEF")
