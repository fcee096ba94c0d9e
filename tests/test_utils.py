"""Tests for graph loading and source writing."""

import pytest
import requests

from safeargs.utils import (
    GraphLoaderError,
    SourceWriteError,
    load_graph,
    load_json_from_file,
    load_json_from_url,
    parse_graph,
    write_sources,
)


class FakeResponse:
    def __init__(self, data=None, status_code=200, content_type="application/json", error=None):
        self._data = data
        self.status_code = status_code
        self.headers = {"content-type": content_type}
        self._error = error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code}", response=self)

    def json(self):
        if self._error:
            raise self._error
        return self._data


def test_load_graph_from_file(graph_file):
    source, graph = load_graph(file_path=graph_file)
    assert source == str(graph_file)
    assert [d.name for d in graph.destinations] == [".MainFragment", ".DetailsFragment"]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_json_from_file(tmp_path / "nope.json")


def test_invalid_json_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(GraphLoaderError, match="Invalid JSON"):
        load_json_from_file(path)


def test_load_graph_needs_exactly_one_source(graph_file):
    with pytest.raises(GraphLoaderError, match="Either"):
        load_graph()
    with pytest.raises(GraphLoaderError, match="both"):
        load_graph(file_path=graph_file, url="https://example.com/graph.json")


def test_parse_graph_wraps_model_errors():
    with pytest.raises(GraphLoaderError, match="Invalid navigation graph in test.json"):
        parse_graph({"destinations": [{"actions": [{}]}]}, "test.json")


def test_load_graph_from_url(monkeypatch, graph_json):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse(graph_json)

    monkeypatch.setattr(requests, "get", fake_get)

    source, graph = load_graph(url="https://example.com/nav", timeout=5)
    assert source == "https://example.com/nav"
    assert len(graph.destinations) == 2
    assert calls == [("https://example.com/nav", 5)]


@pytest.mark.parametrize(
    "response,message",
    [
        (FakeResponse(status_code=404), "HTTP error 404"),
        (
            FakeResponse(error=requests.exceptions.JSONDecodeError("bad", "doc", 0)),
            "Invalid JSON response",
        ),
    ],
)
def test_url_errors(monkeypatch, response, message):
    monkeypatch.setattr(requests, "get", lambda url, timeout: response)
    with pytest.raises(GraphLoaderError, match=message):
        load_json_from_url("https://example.com/graph.json")


@pytest.mark.parametrize(
    "error,message",
    [
        (requests.exceptions.Timeout(), "timeout"),
        (requests.exceptions.ConnectionError(), "Connection error"),
    ],
)
def test_url_transport_errors(monkeypatch, error, message):
    def fake_get(url, timeout):
        raise error

    monkeypatch.setattr(requests, "get", fake_get)
    with pytest.raises(GraphLoaderError, match=message):
        load_json_from_url("https://example.com/graph.json")


def test_invalid_url():
    with pytest.raises(GraphLoaderError, match="Invalid URL"):
        load_json_from_url("not a url")


def test_write_sources(tmp_path):
    sources = {
        "com/app/FooDirections.java": "class FooDirections {\r\n}\r\n",
        "BarDirections.java": "class BarDirections {}\n",
    }
    written = write_sources(sources, tmp_path / "out")

    assert written == [
        tmp_path / "out" / "com" / "app" / "FooDirections.java",
        tmp_path / "out" / "BarDirections.java",
    ]
    assert written[0].read_bytes() == b"class FooDirections {\r\n}\r\n"
    assert written[1].read_text(encoding="utf-8") == "class BarDirections {}\n"


def test_write_sources_writes_nothing_when_a_source_cannot_be_encoded(tmp_path):
    sources = {
        "com/app/FooDirections.java": "class FooDirections {}\n",
        "com/app/BarDirections.java": "String s = \"\ud800\";\n",
    }
    with pytest.raises(SourceWriteError, match="BarDirections"):
        write_sources(sources, tmp_path / "out")
    assert not (tmp_path / "out").exists()


def test_write_sources_reports_unwritable_output(tmp_path):
    blocker = tmp_path / "out"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(SourceWriteError):
        write_sources({"com/app/FooDirections.java": "class FooDirections {}\n"}, blocker)
