"""Tests moteur drag & drop — index d'insertion, payload, drop."""
import sys, os, json, logging
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from page_editor.core.catalog import build_default_catalog
from page_editor.core.document import insert_block
from page_editor.core.drag import (
    BlockBox, DragSession, compute_insert_index, encode_payload, parse_payload,
)
from page_editor.core.errors import InvalidPayloadError
from page_editor.core.schemas import PageDocument

CATALOG = build_default_catalog()

# Trois blocs de 100px empilés : milieux à 50, 150, 250
BOXES = [BlockBox(0, 100), BlockBox(100, 100), BlockBox(200, 100)]


def three_blocks():
    doc = PageDocument()
    for t in ("hero", "text", "video"):
        doc = insert_block(doc, CATALOG.get(t), len(doc.blocks))
    return doc


# ── compute_insert_index ──────────────────────────────────────────────────

class TestInsertIndex:
    def test_above_first_midpoint(self):
        assert compute_insert_index(10, BOXES) == 0

    def test_between_midpoints(self):
        assert compute_insert_index(60, BOXES) == 1

    def test_exactly_on_midpoint_goes_after(self):
        assert compute_insert_index(150, BOXES) == 2

    def test_below_everything(self):
        assert compute_insert_index(400, BOXES) == 3

    def test_empty_canvas(self):
        assert compute_insert_index(42, []) == 0


# ── Payload ───────────────────────────────────────────────────────────────

class TestPayload:
    def test_encode_then_parse(self):
        definition = CATALOG.get("hero")
        payload = encode_payload(definition)
        assert '"defaultProps"' in payload
        assert parse_payload(payload) == definition

    def test_bytes_and_mapping_accepted(self):
        payload = encode_payload(CATALOG.get("text"))
        assert parse_payload(payload.encode()).type == "text"
        assert parse_payload(json.loads(payload)).type == "text"

    @pytest.mark.parametrize("payload", [None, "", b"", "not json", '{"type": "hero"}', "[1, 2]"])
    def test_invalid_payload(self, payload):
        with pytest.raises(InvalidPayloadError):
            parse_payload(payload)

    def test_invalid_payload_is_value_error(self):
        with pytest.raises(ValueError):
            parse_payload("{")


# ── DragSession ───────────────────────────────────────────────────────────

class TestDragSession:
    def test_drag_over_stores_index(self):
        drag = DragSession()
        assert not drag.is_active
        assert drag.drag_over(60, BOXES) == 1
        assert drag.drag_over_index == 1
        assert drag.is_active

    def test_drag_leave_inside_keeps_index(self):
        drag = DragSession()
        drag.drag_over(60, BOXES)
        drag.drag_leave(still_inside=True)
        assert drag.drag_over_index == 1
        drag.drag_leave()
        assert drag.drag_over_index is None

    def test_drop_at_computed_index(self):
        doc = three_blocks()
        drag = DragSession()
        drag.drag_over(60, BOXES)
        result = drag.drop(doc, encode_payload(CATALOG.get("spacer")), CATALOG)
        assert [b.type for b in result.document.blocks] == ["hero", "spacer", "text", "video"]
        assert result.index == 1
        assert result.block_id == result.document.blocks[1].id
        assert drag.drag_over_index is None

    def test_drop_without_drag_over_appends(self):
        doc = three_blocks()
        result = DragSession().drop(doc, encode_payload(CATALOG.get("spacer")), CATALOG)
        assert result.document.blocks[-1].type == "spacer"
        assert result.index == 3

    def test_drop_in_empty_document(self):
        drag = DragSession()
        drag.drag_over(0, [])
        result = drag.drop(PageDocument(), encode_payload(CATALOG.get("hero")), CATALOG)
        assert [b.type for b in result.document.blocks] == ["hero"]

    def test_invalid_payload_leaves_document_unchanged(self, caplog):
        doc = three_blocks()
        drag = DragSession()
        drag.drag_over(60, BOXES)
        with caplog.at_level(logging.WARNING):
            assert drag.drop(doc, "garbage", CATALOG) is None
        assert "Drop ignoré" in caplog.text
        assert len(doc.blocks) == 3
        assert drag.drag_over_index is None

    def test_unknown_type_rejected_by_catalog(self):
        payload = json.dumps({"id": "x", "type": "mystery", "category": "content", "name": "X", "defaultProps": {"a": 1}})
        assert DragSession().drop(three_blocks(), payload, CATALOG) is None

    def test_unknown_type_accepted_without_catalog(self):
        payload = json.dumps({"id": "x", "type": "mystery", "category": "content", "name": "X", "defaultProps": {"a": 1}})
        result = DragSession().drop(PageDocument(), payload)
        assert result.document.blocks[0].type == "mystery"

    def test_empty_default_props_use_catalog_definition(self):
        payload = json.dumps({"id": "hero-section", "type": "hero", "category": "content", "name": "Hero"})
        result = DragSession().drop(PageDocument(), payload, CATALOG)
        assert result.document.blocks[0].props == CATALOG.get("hero").default_props


class TestDropIndicator:
    def test_idle(self):
        assert DragSession().drop_indicator_offset(3) is None

    @pytest.mark.parametrize("index,count,expected", [
        (0, 3, "16px"),
        (3, 3, "100%"),
        (1, 4, "25%"),
        (0, 0, "16px"),
    ])
    def test_offsets(self, index, count, expected):
        drag = DragSession()
        drag.drag_over_index = index
        assert drag.drop_indicator_offset(count) == expected
