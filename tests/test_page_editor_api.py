"""
Tests router page_editor — /page-editor/*
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from page_editor.router import router


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(router)
    with TestClient(app) as c:
        yield c


SITE_DATA = {
    "blocks": [
        {"id": "h1", "type": "hero", "props": {"title": "Bienvenue <chez nous>"}},
        {"id": "t1", "type": "text", "props": {"content": "<p>Texte</p>"}, "isVisible": False},
    ],
    "globalStyles": {"primaryColor": "#112233"},
}


# ── Catalogue ─────────────────────────────────────────────────────────────

class TestCatalog:
    def test_lists_all_blocks(self, client):
        r = client.get("/page-editor/catalog")
        assert r.status_code == 200
        body = r.json()
        assert body["count"] == 18
        assert len(body["blocks"]) == 18
        hero = next(b for b in body["blocks"] if b["type"] == "hero")
        assert "defaultProps" in hero
        assert "isPopular" in hero

    def test_filter_by_category(self, client):
        body = client.get("/page-editor/catalog", params={"category": "media"}).json()
        assert body["count"] > 0
        assert all(b["category"] == "media" for b in body["blocks"])

    def test_search(self, client):
        body = client.get("/page-editor/catalog", params={"search": "VIDEO"}).json()
        assert any(b["type"] == "video" for b in body["blocks"])

    def test_categories(self, client):
        cats = client.get("/page-editor/categories").json()
        assert cats[0] == {"id": "all", "name": "All Blocks", "count": 18}
        assert {c["id"] for c in cats} >= {"content", "media", "layout", "business", "forms"}


# ── Rendu ─────────────────────────────────────────────────────────────────

class TestRender:
    def test_edit_mode_wraps_blocks(self, client):
        r = client.post("/page-editor/render", json={"siteData": SITE_DATA, "selectedId": "h1"})
        assert r.status_code == 200
        assert "text/html" in r.headers["content-type"]
        assert 'data-block-id="h1"' in r.text
        assert 'data-block-id="t1"' in r.text
        assert "canvas__block--selected" in r.text
        assert "Bienvenue &lt;chez nous&gt;" in r.text

    def test_preview_hides_invisible(self, client):
        r = client.post("/page-editor/render", json={"siteData": SITE_DATA, "preview": True})
        assert "data-block-id" not in r.text
        assert "<p>Texte</p>" not in r.text

    def test_empty_document_hint(self, client):
        r = client.post("/page-editor/render", json={"siteData": {"blocks": []}})
        assert "Start Building Your Page" in r.text

    def test_invalid_site_data(self, client):
        r = client.post("/page-editor/render", json={"siteData": {"blocks": "nope"}})
        assert r.status_code == 400

    def test_render_block(self, client):
        r = client.post("/page-editor/render-block", json={
            "block": {"id": "s", "type": "spacer", "props": {"height": "large"}},
        })
        assert r.status_code == 200
        assert "128px" in r.text

    def test_render_unknown_block(self, client):
        r = client.post("/page-editor/render-block", json={
            "block": {"id": "x", "type": "mystery", "props": {}},
        })
        assert r.status_code == 200
        assert "Unknown block type: mystery" in r.text

    def test_render_invalid_block(self, client):
        r = client.post("/page-editor/render-block", json={"block": {"props": {}}})
        assert r.status_code == 400


# ── Publication / validation ──────────────────────────────────────────────

class TestPublish:
    def test_publish_document(self, client):
        r = client.post("/page-editor/publish", json={"siteData": SITE_DATA, "title": "Mon site", "lang": "fr"})
        assert r.status_code == 200
        assert r.text.startswith("<!DOCTYPE html>")
        assert '<html lang="fr">' in r.text
        assert "<title>Mon site</title>" in r.text
        assert "--color-primary:   #112233;" in r.text
        assert "<p>Texte</p>" not in r.text

    def test_validate_ok(self, client):
        body = client.post("/page-editor/validate", json={"siteData": {
            "blocks": [{"id": "a", "type": "hero", "props": {}}, {"id": "b", "type": "mystery", "props": {}}],
        }}).json()
        assert body["valid"] is True
        assert body["blocks"] == 2
        assert body["unknownTypes"] == ["mystery"]
        assert [b["id"] for b in body["siteData"]["blocks"]] == ["a", "b"]

    def test_validate_migrates_order(self, client):
        body = client.post("/page-editor/validate", json={"siteData": {
            "blocks": [
                {"id": "b", "type": "text", "content": {"text": "x"}, "order": 1},
                {"id": "a", "type": "hero", "content": {"title": "T"}, "order": 0},
            ],
        }}).json()
        blocks = body["siteData"]["blocks"]
        assert [b["id"] for b in blocks] == ["a", "b"]
        assert [b["order"] for b in blocks] == [0, 1]
        assert blocks[0]["props"]["title"] == "T"

    def test_validate_error(self, client):
        body = client.post("/page-editor/validate", json={"siteData": {"blocks": "nope"}}).json()
        assert body["valid"] is False
        assert body["error"]

    @pytest.mark.parametrize("url,expected", [
        ("https://www.youtube.com/watch?v=abc123", "https://www.youtube.com/embed/abc123"),
        ("https://youtu.be/abc123", "https://www.youtube.com/embed/abc123"),
        ("https://vimeo.com/42", "https://player.vimeo.com/video/42"),
        ("https://example.com/v.mp4", "https://example.com/v.mp4"),
    ])
    def test_embed_url(self, client, url, expected):
        body = client.post("/page-editor/embed-url", json={"url": url}).json()
        assert body == {"url": url, "embedUrl": expected}
