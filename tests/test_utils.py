"""Tests for processor document loading."""

import io

import pytest
import requests

from processor_codegen import utils
from processor_codegen.utils import JSONLoaderError, load_document


class FakeResponse:
    def __init__(self, text, status_code=200, content_type="application/json"):
        self.text = text
        self.status_code = status_code
        self.headers = {"content-type": content_type}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)


class TestLoadDocument:
    def test_file(self, tmp_path):
        path = tmp_path / "onvopay.json"
        path.write_text('{"type": "PayIn"}', encoding="utf-8")
        source, text = load_document(file_path=path)
        assert text == '{"type": "PayIn"}'
        assert str(path) in source

    def test_file_text_not_decoded(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_document(file_path=path)[1] == "{not json"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_document(file_path=tmp_path / "absent.json")

    def test_requires_one_source(self):
        with pytest.raises(JSONLoaderError):
            load_document()
        with pytest.raises(JSONLoaderError):
            load_document(file_path="a.json", url="https://example.com/a.json")

    def test_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO('{"type": "PayIn"}'))
        source, text = load_document(file_path="-")
        assert text == '{"type": "PayIn"}'
        assert "stdin" in source

    def test_url(self, monkeypatch):
        calls = []

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return FakeResponse('{"type": "PayIn"}')

        monkeypatch.setattr(utils.requests, "get", fake_get)
        source, text = load_document(url="https://example.com/onvopay.json", timeout=5)
        assert text == '{"type": "PayIn"}'
        assert calls == [("https://example.com/onvopay.json", 5)]

    def test_invalid_url(self):
        with pytest.raises(JSONLoaderError):
            load_document(url="not-a-url")

    def test_http_error(self, monkeypatch):
        monkeypatch.setattr(
            utils.requests, "get", lambda url, timeout: FakeResponse("", status_code=404)
        )
        with pytest.raises(JSONLoaderError, match="HTTP error 404"):
            load_document(url="https://example.com/onvopay.json")

    def test_timeout(self, monkeypatch):
        def fake_get(url, timeout):
            raise requests.exceptions.Timeout()

        monkeypatch.setattr(utils.requests, "get", fake_get)
        with pytest.raises(JSONLoaderError, match="timeout"):
            load_document(url="https://example.com/onvopay.json")
