from __future__ import annotations

import pytest
import requests

from alumni.data.io import fetch
from alumni.data.io.fetch import LOAD_ERROR_MESSAGE, DatasetFetchError, fetch_text, load_dataset

from conftest import SAMPLE


def _response(body: bytes, status_code: int = 200, content_type: str = "text/csv") -> requests.Response:
    r = requests.Response()
    r.status_code = status_code
    r._content = body
    r.headers["Content-Type"] = content_type
    # what requests.get does: text/* without a charset is guessed as ISO-8859-1
    r.encoding = requests.utils.get_encoding_from_headers(r.headers)
    return r


def test_load_local_file(tmp_path) -> None:
    p = tmp_path / "alumni.csv"
    p.write_text(SAMPLE, encoding="utf-8")
    result = load_dataset(p)
    assert result.ok
    assert result.header == ["Student_Name", "Department", "Passing_Year"]
    assert [r.name for r in result.records] == ["A", "B"]


def test_load_local_file_with_bom(tmp_path) -> None:
    p = tmp_path / "alumni.csv"
    p.write_bytes(b"\xef\xbb\xbf" + SAMPLE.encode("utf-8"))
    assert load_dataset(p).header[0] == "Student_Name"


def test_missing_file_degrades_to_empty_dataset(tmp_path) -> None:
    result = load_dataset(tmp_path / "nope.csv")
    assert not result.ok
    assert result.records == []
    assert result.error == LOAD_ERROR_MESSAGE


def test_fetch_url(monkeypatch) -> None:
    calls = {}

    def fake_get(url, timeout):
        calls["url"] = url
        calls["timeout"] = timeout
        return _response(SAMPLE.encode("utf-8"))

    monkeypatch.setattr(fetch.requests, "get", fake_get)
    result = load_dataset("https://example.org/alumni.csv", timeout=3)
    assert [r.name for r in result.records] == ["A", "B"]
    assert calls == {"url": "https://example.org/alumni.csv", "timeout": 3}


def test_fetch_url_http_error(monkeypatch) -> None:
    monkeypatch.setattr(fetch.requests, "get", lambda url, timeout: _response(b"", 404))
    with pytest.raises(DatasetFetchError, match="404"):
        fetch_text("http://example.org/alumni.csv")
    result = load_dataset("http://example.org/alumni.csv")
    assert result.error == LOAD_ERROR_MESSAGE
    assert result.records == []


def test_fetch_url_network_error(monkeypatch) -> None:
    def boom(url, timeout):
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(fetch.requests, "get", boom)
    result = load_dataset("https://example.org/alumni.csv")
    assert not result.ok


def test_load_latin1_file_degrades_to_empty_dataset(tmp_path) -> None:
    p = tmp_path / "alumni.csv"
    p.write_bytes("Student_Name,Department\nJosé,Law\n".encode("latin-1"))
    with pytest.raises(DatasetFetchError):
        fetch_text(p)
    result = load_dataset(p)
    assert result.error == LOAD_ERROR_MESSAGE
    assert result.records == []


def test_fetch_url_text_csv_without_charset_is_read_as_utf8(monkeypatch) -> None:
    body = b"\xef\xbb\xbf" + "Student_Name,Department,Passing_Year\nJosé Núñez,Law,2021\n".encode("utf-8")
    resp = _response(body)
    assert resp.encoding == "ISO-8859-1"
    monkeypatch.setattr(fetch.requests, "get", lambda url, timeout: resp)

    result = load_dataset("https://example.org/alumni.csv")
    assert result.header == ["Student_Name", "Department", "Passing_Year"]
    assert [r.name for r in result.records] == ["José Núñez"]


def test_fetch_url_invalid_utf8_degrades(monkeypatch) -> None:
    resp = _response("Student_Name\nJosé\n".encode("latin-1"))
    monkeypatch.setattr(fetch.requests, "get", lambda url, timeout: resp)
    result = load_dataset("https://example.org/alumni.csv")
    assert result.error == LOAD_ERROR_MESSAGE
