"""
Tests for the Flask search page and JSON path API.
"""

import pytest

from moviegraph.data.loader import IMDBGraph
from moviegraph.exceptions import DataFilesMissingError
from ui import flask_app
from ui.flask_app import create_app


@pytest.fixture
def client(graph):
    app = create_app(graph)
    app.config["TESTING"] = True
    return app.test_client()


class TestPathAPI:
    """Test /api/path."""

    def test_path_found(self, client):
        response = client.get("/api/path", query_string={"start": "Kris", "target": "Logan"})
        assert response.status_code == 200
        data = response.get_json()
        assert data["found"] is True
        assert [n["name"] for n in data["path"]] == ["Kris", "Blah2", "Sara", "Blah4", "Logan"]
        assert [n["kind"] for n in data["path"]] == ["actor", "movie", "actor", "movie", "actor"]
        assert data["degrees"] == 2

    def test_no_path(self, client):
        response = client.get("/api/path", query_string={"start": "Logan", "target": "Finn"})
        assert response.status_code == 200
        data = response.get_json()
        assert data["found"] is False
        assert data["path"] == []
        assert data["degrees"] is None

    def test_movie_kind(self, client):
        response = client.get(
            "/api/path",
            query_string={"start": "Ryan", "target": "Blah2", "target_kind": "movie"},
        )
        assert [n["name"] for n in response.get_json()["path"]] == ["Ryan", "Blah1", "Sandy", "Blah2"]

    def test_unknown_name(self, client):
        response = client.get("/api/path", query_string={"start": "Finn", "target": "Jessie"})
        assert response.status_code == 404
        assert "Jessie" in response.get_json()["error"]

    def test_missing_parameter(self, client):
        response = client.get("/api/path", query_string={"start": "Kris"})
        assert response.status_code == 400

    def test_bad_kind(self, client):
        response = client.get(
            "/api/path",
            query_string={"start": "Kris", "target": "Logan", "start_kind": "director"},
        )
        assert response.status_code == 400


class TestPages:
    """Test the HTML pages."""

    def test_index(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert b"Find a Connection" in response.data

    def test_search_page(self, client):
        response = client.get("/search", query_string={"start": "Sandy", "target": "Kris"})
        assert response.status_code == 200
        assert b"1 degrees of separation" in response.data
        assert b"Blah2" in response.data

    def test_search_page_unknown(self, client):
        response = client.get("/search", query_string={"start": "Sandy", "target": "Nobody"})
        assert response.status_code == 404
        assert b"No actor named" in response.data


class TestGraphUnavailable:
    """Graph loading failures are reported as 503."""

    def test_missing_data_files(self, monkeypatch):
        def _missing():
            raise DataFilesMissingError(["actors", "movies"])

        monkeypatch.setattr(flask_app, "load_default_graph", _missing)
        client = create_app().test_client()

        response = client.get("/api/path", query_string={"start": "Kris", "target": "Logan"})
        assert response.status_code == 503
        assert "Missing data files" in response.get_json()["error"]

    def test_corrupt_cache(self, tmp_path, movies_path):
        cache = tmp_path / "graph.msgpack"
        cache.write_bytes(b"\xc1not msgpack")
        graph = IMDBGraph(tmp_path / "a.tsv", movies_path, cache_path=cache)
        client = create_app(graph).test_client()

        response = client.get("/api/path", query_string={"start": "Kris", "target": "Logan"})
        assert response.status_code == 503
        assert "error" in response.get_json()

    def test_search_page_reports_error(self, tmp_path, movies_path):
        graph = IMDBGraph(tmp_path / "absent.tsv", movies_path)
        client = create_app(graph).test_client()

        response = client.get("/search", query_string={"start": "Kris", "target": "Logan"})
        assert response.status_code == 503
        assert b"Graph unavailable" in response.data
