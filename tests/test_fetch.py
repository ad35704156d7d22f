"""
Tests for loading the protocol document
"""

import json

import pytest
import requests

from packetidgen import fetch
from packetidgen.errors import FetchError, TypeMismatchError


class FakeResponse:
    def __init__(self, payload=None, status_error=None, json_error=None):
        self.payload = payload
        self.status_error = status_error
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_error:
            raise self.status_error

    def json(self):
        if self.json_error:
            raise self.json_error
        return self.payload


class TestDownloadDocument:
    """Test HTTP download with requests mocked out"""

    def test_success(self, monkeypatch):
        """Test a JSON object is returned"""
        calls = []

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return FakeResponse({"play": {}})

        monkeypatch.setattr(fetch.requests, "get", fake_get)
        assert fetch.download_document("https://example.com/p.json", 3) == {"play": {}}
        assert calls == [("https://example.com/p.json", 3)]

    def test_http_error(self, monkeypatch):
        """Test HTTP errors raise FetchError"""
        monkeypatch.setattr(
            fetch.requests, "get",
            lambda url, timeout: FakeResponse(status_error=requests.HTTPError("404 Not Found")))
        with pytest.raises(FetchError, match="404"):
            fetch.download_document("https://example.com/p.json")

    def test_connection_error(self, monkeypatch):
        """Test connection errors raise FetchError"""
        def fake_get(url, timeout):
            raise requests.ConnectionError("unreachable")

        monkeypatch.setattr(fetch.requests, "get", fake_get)
        with pytest.raises(FetchError, match="unreachable"):
            fetch.download_document("https://example.com/p.json")

    def test_invalid_json(self, monkeypatch):
        """Test undecodable content raises FetchError"""
        monkeypatch.setattr(
            fetch.requests, "get",
            lambda url, timeout: FakeResponse(json_error=ValueError("Expecting value")))
        with pytest.raises(FetchError, match="valid JSON"):
            fetch.download_document("https://example.com/p.json")

    def test_not_an_object(self, monkeypatch):
        """Test a non-object document raises TypeMismatchError"""
        monkeypatch.setattr(fetch.requests, "get", lambda url, timeout: FakeResponse([1, 2]))
        with pytest.raises(TypeMismatchError):
            fetch.download_document("https://example.com/p.json")


class TestLoadDocument:
    """Test reading a local protocol.json"""

    def test_success(self, tmp_path, minimal_document):
        """Test a JSON object is returned"""
        path = tmp_path / "protocol.json"
        path.write_text(json.dumps(minimal_document))
        assert fetch.load_document(str(path)) == minimal_document

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FetchError"""
        with pytest.raises(FetchError):
            fetch.load_document(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        """Test undecodable content raises FetchError"""
        path = tmp_path / "protocol.json"
        path.write_text("{not json")
        with pytest.raises(FetchError):
            fetch.load_document(str(path))
