"""
Unit tests for the HTTP API.

The index is built by the app's lifespan hook from DOCS_FILE / NOISE_WORDS_FILE /
DOCS_BASE_DIR, pointed at tests/fixtures/documents.
"""

import pytest
from fastapi.testclient import TestClient

import littlesearch
from littlesearch import main


@pytest.fixture
def client(fixtures_dir, monkeypatch):
    """Client with the index built from the sample documents"""
    monkeypatch.setenv("DOCS_BASE_DIR", str(fixtures_dir))
    monkeypatch.setenv("DOCS_FILE", "docs.txt")
    monkeypatch.setenv("NOISE_WORDS_FILE", "noisewords.txt")

    with TestClient(main.app) as client:
        yield client


@pytest.fixture
def broken_client(tmp_path, monkeypatch):
    """Client whose index build failed (manifest missing)"""
    (tmp_path / "noisewords.txt").write_text("the\n")
    monkeypatch.setenv("DOCS_BASE_DIR", str(tmp_path))
    monkeypatch.setenv("DOCS_FILE", "docs.txt")
    monkeypatch.setenv("NOISE_WORDS_FILE", "noisewords.txt")

    with TestClient(main.app, raise_server_exceptions=False) as client:
        yield client


class TestServiceEndpoints:

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        data = client.get("/health").json()

        assert data["status"] == "healthy"
        assert data["index"]["documents"] == 4
        assert data["index"]["noise_words"] == 10
        assert data["error"] is None

    def test_health_degraded(self, broken_client):
        response = broken_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "degraded"
        assert data["index"] is None
        assert "docs.txt" in data["error"]

    def test_health_reports_package_version(self, client):
        assert client.get("/health").json()["version"] == littlesearch.__version__

    def test_undecodable_document_does_not_block_startup(self, tmp_path, monkeypatch):
        (tmp_path / "docs.txt").write_text("bad.txt\n")
        (tmp_path / "noisewords.txt").write_text("the\n")
        (tmp_path / "bad.txt").write_bytes(b"deep \xff\xfe water\n")
        monkeypatch.setenv("DOCS_BASE_DIR", str(tmp_path))
        monkeypatch.setenv("DOCS_FILE", "docs.txt")
        monkeypatch.setenv("NOISE_WORDS_FILE", "noisewords.txt")

        with TestClient(main.app) as client:
            data = client.get("/health").json()
            results = client.get("/v1/search", params={"kw1": "water", "kw2": "x"}).json()["results"]

        assert data["status"] == "healthy"
        assert data["index"]["keywords"] == 2
        assert results == ["bad.txt"]


class TestSearch:

    def test_search(self, client):
        response = client.get("/v1/search", params={"kw1": "deep", "kw2": "world"})

        assert response.status_code == 200
        data = response.json()
        assert data["results"] == ["wowch1.txt", "doc1.txt", "poems.txt", "doc2.txt"]
        assert data["total"] == 4

    def test_search_case_insensitive(self, client):
        data = client.get("/v1/search", params={"kw1": "SEA", "kw2": "Deep"}).json()

        assert data["results"][0] == "poems.txt"
        assert data["kw1"] == "SEA"

    def test_search_no_match(self, client):
        response = client.get("/v1/search", params={"kw1": "x", "kw2": "y"})

        assert response.status_code == 200
        assert response.json()["results"] == []
        assert response.json()["total"] == 0

    def test_search_requires_both_keywords(self, client):
        response = client.get("/v1/search", params={"kw1": "deep"})

        assert response.status_code == 422

    def test_search_unavailable_without_index(self, broken_client):
        response = broken_client.get("/v1/search", params={"kw1": "deep", "kw2": "world"})

        assert response.status_code == 503
        assert "Index not available" in response.json()["detail"]


class TestKeywordEndpoints:

    @pytest.mark.parametrize("word,keyword", [
        ("Hello!!", "hello"),
        ("world,", "world"),
        ("we're", None),
        ("of,", None),
    ])
    def test_check_keyword(self, client, word, keyword):
        data = client.get(f"/v1/keywords/{word}").json()

        assert data["word"] == word
        assert data["keyword"] == keyword
        assert data["is_keyword"] is (keyword is not None)

    def test_occurrences(self, client):
        data = client.get("/v1/index/World").json()

        assert data["keyword"] == "world"
        assert data["occurrences"] == [
            {"document": "wowch1.txt", "frequency": 3},
            {"document": "poems.txt", "frequency": 2},
            {"document": "doc2.txt", "frequency": 1},
        ]
        assert data["total"] == 3

    def test_occurrences_unknown_keyword(self, client):
        response = client.get("/v1/index/missing")

        assert response.status_code == 404
        assert "missing" in response.json()["detail"]
