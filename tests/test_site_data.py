"""Tests forme persistée site_data — chargement, migration, round-trip."""
import sys, os, json, re
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from page_editor.core.document import append_block, insert_existing_block, move_block, update_block_props
from page_editor.core.site_data import dump_site_data, dumps_site_data, load_document

DEFAULT_STYLES = {
    "primaryColor": "#3b82f6",
    "secondaryColor": "#10b981",
    "fontFamily": "Inter",
    "containerWidth": "1200px",
}


def site_data(*blocks, styles=None):
    return {"blocks": list(blocks), "globalStyles": styles or dict(DEFAULT_STYLES)}


# ── Chargement ────────────────────────────────────────────────────────────

class TestLoad:
    @pytest.mark.parametrize("raw", [None, "", b""])
    def test_empty_input(self, raw):
        doc = load_document(raw)
        assert doc.blocks == ()
        assert doc.global_styles.primary_color == "#3b82f6"

    def test_json_text(self):
        raw = json.dumps(site_data({"id": "h1", "type": "hero", "props": {"title": "T"}}))
        doc = load_document(raw)
        assert doc.blocks[0].id == "h1"
        assert doc.blocks[0].props == {"title": "T"}
        assert doc.blocks[0].is_visible is True

    @pytest.mark.parametrize("raw", ["{not json", "[1, 2]", {"blocks": "nope"}])
    def test_invalid_input_raises(self, raw):
        with pytest.raises(ValueError):
            load_document(raw)

    def test_missing_global_styles_uses_defaults(self):
        doc = load_document({"blocks": []})
        assert doc.global_styles.font_family == "Inter"

    def test_invalid_global_styles_fall_back(self):
        doc = load_document({"blocks": [], "globalStyles": {"primaryColor": 123}})
        assert doc.global_styles.primary_color == "#3b82f6"

    def test_invalid_global_style_keeps_valid_fields(self):
        doc = load_document({"blocks": [], "globalStyles": {
            "primaryColor": "#111111", "secondaryColor": "#222222",
            "fontFamily": "Georgia", "containerWidth": 1200,
        }})
        styles = doc.global_styles
        assert styles.primary_color == "#111111"
        assert styles.secondary_color == "#222222"
        assert styles.font_family == "Georgia"
        assert styles.container_width == "1200px"

    def test_non_object_block_skipped(self):
        doc = load_document(site_data("oops", {"id": "t1", "type": "text", "props": {}}))
        assert [b.id for b in doc.blocks] == ["t1"]

    def test_duplicate_id_renamed(self):
        doc = load_document(site_data(
            {"id": "block-1", "type": "hero", "props": {}},
            {"id": "block-1", "type": "contact", "props": {"title": "Contact"}},
        ))
        assert [b.type for b in doc.blocks] == ["hero", "contact"]
        assert doc.blocks[0].id == "block-1"
        assert doc.blocks[1].id.startswith("contact-")
        assert doc.blocks[1].props == {"title": "Contact"}

    def test_missing_id_generated(self):
        doc = load_document(site_data({"type": "text", "props": {}}))
        assert re.fullmatch(r"text-\d+-[0-9a-z]{9}", doc.blocks[0].id)

    def test_invalid_flag_falls_back_to_default(self):
        doc = load_document(site_data({"id": "a", "type": "hero", "props": {}, "isVisible": "maybe"}))
        assert doc.blocks[0].is_visible is True

    def test_non_mapping_props_replaced(self):
        doc = load_document(site_data({"id": "a", "type": "hero", "props": ["x"]}))
        assert doc.blocks[0].props == {}


# ── Variante site-builder (order + content) ───────────────────────────────

class TestSiteBuilderVariant:
    RAW = site_data(
        {"id": "c", "type": "contact", "content": {"title": "Contact"}, "order": 2},
        {"id": "h", "type": "hero", "content": {"title": "Hi", "alignment": "left"}, "order": 0},
        {"id": "t", "type": "text", "content": {"title": "About", "text": "Fish & chips"}, "order": 1},
    )

    def test_sorted_by_order_once(self):
        doc = load_document(self.RAW)
        assert [b.id for b in doc.blocks] == ["h", "t", "c"]
        assert doc.stamp_order is True

    def test_content_migrated_to_props(self):
        doc = load_document(self.RAW)
        assert doc.blocks[0].props == {"title": "Hi", "textAlign": "left"}
        assert doc.blocks[1].props == {"content": "<h2>About</h2><p>Fish &amp; chips</p>"}
        assert doc.blocks[2].props == {"title": "Contact"}

    def test_order_restamped_from_position(self):
        doc = load_document(self.RAW)
        doc = move_block(doc, 2, 0)
        dumped = dump_site_data(doc)
        assert [(b["id"], b["order"]) for b in dumped["blocks"]] == [("c", 0), ("h", 1), ("t", 2)]
        assert all("content" not in b for b in dumped["blocks"])

    def test_gapped_order_kept_untouched(self):
        raw = site_data(
            {"id": "h", "type": "hero", "props": {"title": "Hi"}, "order": 0},
            {"id": "c", "type": "contact", "props": {"title": "Contact"}, "order": 2},
            {"id": "f", "type": "features", "props": {}, "order": 5},
        )
        assert dump_site_data(load_document(raw)) == raw

    def test_appended_block_continues_order(self):
        doc = load_document(site_data(
            {"id": "h", "type": "hero", "props": {}, "order": 0},
            {"id": "c", "type": "contact", "props": {}, "order": 2},
        ))
        doc = append_block(doc, "text", {})
        assert [b["order"] for b in dump_site_data(doc)["blocks"]] == [0, 2, 3]

    def test_insert_breaking_order_renumbers(self):
        doc = load_document(site_data(
            {"id": "h", "type": "hero", "props": {}, "order": 0},
            {"id": "c", "type": "contact", "props": {}, "order": 2},
        ))
        doc = insert_existing_block(doc, doc.blocks[1].model_copy(update={"id": "c2"}), 0)
        assert [b["order"] for b in dump_site_data(doc)["blocks"]] == [0, 1, 2]

    def test_plain_documents_get_no_order(self):
        dumped = dump_site_data(load_document(site_data({"id": "a", "type": "hero", "props": {}})))
        assert "order" not in dumped["blocks"][0]


# ── Round-trip ────────────────────────────────────────────────────────────

class TestRoundTrip:
    def test_untouched_document_reproduces_stored_json(self):
        raw = site_data(
            {"id": "h1", "type": "hero", "props": {"title": "X", "overlayOpacity": 0.3}},
            {"id": "t1", "type": "text", "props": {"content": "<p>a</p>"}, "isVisible": False, "isLocked": True},
            {"id": "s1", "type": "services", "props": {"title": "S"}, "style": {"padding": "20px", "backgroundColor": "#fff"}},
            {"id": "f1", "type": "future-block", "props": {"x": 1}, "customKey": "kept"},
            styles={**DEFAULT_STYLES, "accentColor": "#f59e0b"},
        )
        assert dump_site_data(load_document(raw)) == raw

    def test_edit_only_changes_edited_block(self):
        raw = site_data(
            {"id": "h1", "type": "hero", "props": {"title": "X"}},
            {"id": "t1", "type": "text", "props": {"content": "<p>a</p>"}},
        )
        doc = update_block_props(load_document(raw), "h1", {"title": "Y"})
        dumped = dump_site_data(doc)
        assert dumped["blocks"][0] == {"id": "h1", "type": "hero", "props": {"title": "Y"}}
        assert dumped["blocks"][1] == raw["blocks"][1]

    def test_dumps_is_json(self):
        raw = site_data({"id": "h1", "type": "hero", "props": {"title": "Café"}})
        text = dumps_site_data(load_document(raw))
        assert "Café" in text
        assert json.loads(text) == raw
