"""Tests renderer HTML — défauts, échappement, carousel, canvas."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unittest.mock import patch
import pytest

from page_editor.blocks import HeroProps, video_embed_url
from page_editor.core.catalog import build_default_catalog
from page_editor.core.document import make_block
from page_editor.core.schemas import BlockStyle, PageBlock, PageDocument
from page_editor.renderer import Carousel, render_block, render_canvas
from page_editor.renderer import html as html_renderer
from page_editor.renderer.base import css_value

CATALOG = build_default_catalog()


def block(type_, props=None, **kw):
    return PageBlock(id=f"{type_}-1", type=type_, props=props or {}, **kw)


# ── Défauts ───────────────────────────────────────────────────────────────

class TestDefaults:
    def test_every_catalog_default_renders(self):
        for d in CATALOG:
            html = render_block(make_block(d.type, d.default_props))
            assert "Unknown block type" not in html, d.type
            assert html.strip(), d.type

    def test_hero_title_fallback(self):
        html = render_block(block("hero"))
        assert "Welcome to Our Business" in html
        assert "Get Started" in html

    def test_empty_string_treated_as_missing(self):
        assert "Welcome to Our Business" in render_block(block("hero", {"title": ""}))

    def test_text_content_fallback(self):
        assert "<p>Add your content here...</p>" in render_block(block("text"))

    def test_empty_gallery(self):
        html = render_block(block("gallery"))
        assert "gallery--empty" in html
        assert "<img" not in html

    def test_hours_missing_day_is_closed(self):
        html = render_block(block("hours", {"hours": {"monday": "9-17"}}))
        assert "9-17" in html
        assert html.count("Closed") == 6

    def test_hours_current_status_not_rendered(self):
        hours = {"monday": "9-17"}
        with_status = render_block(block("hours", {"hours": hours, "showCurrentStatus": True}))
        assert with_status == render_block(block("hours", {"hours": hours, "showCurrentStatus": False}))

    def test_invalid_prop_falls_back(self):
        html = render_block(block("hero", {"textAlign": "diagonal", "title": "Salut"}))
        assert "hero--text-center" in html
        assert "Salut" in html

    def test_unknown_type_fallback(self):
        assert "Unknown block type: mystery" in render_block(block("mystery"))


# ── Échappement ───────────────────────────────────────────────────────────

class TestEscaping:
    def test_user_text_escaped(self):
        html = render_block(block("hero", {"title": "<script>alert(1)</script>"}))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_rich_text_not_escaped(self):
        html = render_block(block("text", {"content": "<h2>Titre</h2><p>Corps</p>"}))
        assert "<h2>Titre</h2><p>Corps</p>" in html

    def test_columns_rich_content(self):
        html = render_block(block("columns", {"leftContent": "<b>L</b>", "rightContent": "<i>R</i>"}))
        assert "<b>L</b>" in html and "<i>R</i>" in html

    def test_unknown_type_name_escaped(self):
        assert "<img" not in render_block(block("<img src=x>"))

    def test_javascript_link_neutralised(self):
        html = render_block(block("hero", {"buttonLink": "javascript:alert(1)"}))
        assert 'href="#"' in html
        assert "javascript:" not in html

    def test_css_injection_rejected(self):
        html = render_block(block("spacer", {"backgroundColor": "red;}</style><script>"}))
        assert "background-color:transparent" in html
        assert "<script>" not in html

    @pytest.mark.parametrize("value,expected", [
        ("#fff", "#fff"),
        ("  10px ", "10px"),
        ("red;color:blue", "d"),
        ("a{b}", "d"),
        (None, "d"),
        ("", "d"),
    ])
    def test_css_value(self, value, expected):
        assert css_value(value, "d") == expected


# ── Grilles ───────────────────────────────────────────────────────────────

class TestGridColumns:
    @pytest.mark.parametrize("columns,expected", [(9, 4), (0, 1), (-3, 1), (2, 2), ("abc", 3)])
    def test_features_columns_clamped(self, columns, expected):
        html = render_block(block("features", {"columns": columns, "features": [{"title": "a"}]}))
        assert f"features__grid--cols-{expected}" in html

    def test_gallery_columns_clamped(self):
        html = render_block(block("gallery", {"columns": 12}))
        assert "repeat(4, minmax(0, 1fr))" in html


# ── Vidéo ─────────────────────────────────────────────────────────────────

class TestVideo:
    @pytest.mark.parametrize("url,expected", [
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "https://www.youtube.com/embed/dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?v=abc&list=xyz", "https://www.youtube.com/embed/abc"),
        ("https://youtu.be/abc123?t=10", "https://www.youtube.com/embed/abc123"),
        ("https://vimeo.com/12345", "https://player.vimeo.com/video/12345"),
        ("https://example.com/movie.mp4", "https://example.com/movie.mp4"),
        ("", ""),
    ])
    def test_embed_url(self, url, expected):
        assert video_embed_url(url) == expected

    def test_render_embeds_youtube(self):
        html = render_block(block("video", {"videoUrl": "https://youtu.be/abc123"}))
        assert 'src="https://www.youtube.com/embed/abc123"' in html

    def test_empty_url_placeholder(self):
        html = render_block(block("video", {"videoUrl": ""}))
        assert "Add a video URL to display content" in html
        assert "<iframe" not in html

    def test_autoplay_param(self):
        html = render_block(block("video", {"videoUrl": "https://vimeo.com/1", "autoplay": True}))
        assert "https://player.vimeo.com/video/1?autoplay=1" in html


# ── Carousel ──────────────────────────────────────────────────────────────

class TestCarousel:
    def test_index_clamped(self):
        assert Carousel(3, -1).index == 0
        assert Carousel(3, 7).index == 2

    def test_saturates(self):
        c = Carousel(2)
        assert c.previous() == 0
        assert c.next() == 1
        assert c.next() == 1
        assert not c.has_next and c.has_previous

    def test_empty(self):
        c = Carousel(0, 4)
        assert c.index == 0
        assert not c.has_controls

    def test_first_testimonial_prev_disabled(self):
        html = render_block(make_block("testimonials", CATALOG.get("testimonials").default_props))
        assert "John Smith" in html
        assert 'aria-label="Previous" disabled' in html
        assert 'aria-label="Next">' in html

    def test_index_out_of_range_clamped_to_last(self):
        html = render_block(make_block("testimonials", CATALOG.get("testimonials").default_props), carousel_index=99)
        assert "Sarah Johnson" in html
        assert 'aria-label="Next" disabled' in html

    def test_single_testimonial_has_no_controls(self):
        props = {"layout": "carousel", "testimonials": [{"name": "Solo", "content": "ok"}]}
        html = render_block(block("testimonials", props))
        assert "Solo" in html
        assert "testimonials__controls" not in html

    def test_grid_layout_lists_all(self):
        props = {"layout": "grid", "testimonials": [{"name": "A"}, {"name": "B"}]}
        html = render_block(block("testimonials", props))
        assert html.count("testimonials__card") == 2


# ── Style conteneur ───────────────────────────────────────────────────────

def test_block_style_inlined():
    b = block("services", {"title": "S"}, style=BlockStyle(padding="20px", background_color="#fff"))
    assert 'style="padding:20px;background-color:#fff"' in render_block(b)


# ── Canvas ────────────────────────────────────────────────────────────────

class TestCanvas:
    def doc(self):
        return PageDocument(blocks=(
            block("hero", {"title": "Visible"}),
            PageBlock(id="t-1", type="text", props={"content": "<p>Hidden text</p>"}, is_visible=False),
            PageBlock(id="s-1", type="spacer", is_locked=True),
        ))

    def test_empty_edit_mode_shows_hint(self):
        assert "Start Building Your Page" in render_canvas(PageDocument())

    def test_empty_preview_has_no_hint(self):
        assert "Start Building Your Page" not in render_canvas(PageDocument(), preview=True)

    def test_wrappers_and_classes(self):
        html = render_canvas(self.doc(), selected_id="hero-1")
        assert 'data-block-index="0" data-block-id="hero-1"' in html
        assert "canvas__block--selected" in html
        assert "canvas__block--hidden" in html
        assert "canvas__block--locked" in html

    def test_hidden_block_dimmed_in_edit_mode(self):
        assert "Hidden text" in render_canvas(self.doc())

    def test_hidden_block_omitted_in_preview(self):
        html = render_canvas(self.doc(), preview=True)
        assert "Hidden text" not in html
        assert "Visible" in html
        assert "data-block-id" not in html

    def test_failing_renderer_isolated(self):
        def boom(props, ctx):
            raise RuntimeError("boom")

        with patch.dict(html_renderer._RENDERERS, {"hero": (HeroProps, boom)}):
            html = render_canvas(self.doc())
        assert "Unknown block type: hero" in html
        assert "Hidden text" in html
