"""Tests for the docs web endpoint."""

import pytest
from docdown.config import Config
from docdown.web import clean_filename, create_app

URL = "https://example.com/lodash.js"


@pytest.fixture
def client(tmp_path, sample_source, monkeypatch):
    monkeypatch.setattr(Config, "URL", None)
    (tmp_path / "lodash.js").write_text(sample_source)
    app = create_app(tmp_path)
    app.config["TESTING"] = True
    return app.test_client()


class TestCleanFilename:
    def test_strips_traversal(self):
        assert clean_filename("../../etc/passwd") == "etcpasswd.js"

    def test_adds_extension(self):
        assert clean_filename("lodash") == "lodash.js"
        assert clean_filename("lodash.php") == "lodash.php"

    def test_default(self):
        assert clean_filename(None) == "docdown.js"


class TestDocsEndpoint:
    def test_renders_markdown(self, client):
        resp = client.get("/docs", query_string={"f": "lodash", "url": URL})
        assert resp.status_code == 200
        assert resp.content_type == "text/plain; charset=utf-8"
        body = resp.get_data(as_text=True)
        assert body.startswith("# lodash.js API documentation")
        assert f"{URL}#L" in body

    def test_options_from_query(self, client):
        resp = client.get(
            "/docs",
            query_string={"f": "lodash.js", "url": URL, "toc": "categories", "title": "Lodash"},
        )
        body = resp.get_data(as_text=True)
        assert body.startswith("# Lodash\n")
        assert "## `Array`" in body

    def test_missing_url(self, client):
        resp = client.get("/docs", query_string={"f": "lodash"})
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "Path and/or URL must be specified"}

    def test_missing_file(self, client):
        resp = client.get("/docs", query_string={"f": "../missing", "url": URL})
        assert resp.status_code == 404
        assert resp.get_json() == {"error": "not found"}


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}
