"""Core module pour page_editor."""
from .errors import PageEditorError, CatalogError, InvalidPayloadError
from .schemas import (
    WireModel,
    BlockDefinition,
    BlockStyle,
    PageBlock,
    GlobalStyles,
    PageDocument,
)
from .catalog import ALL_CATEGORIES, BlockCatalog, build_default_catalog
from .document import (
    new_block_id,
    index_of,
    find_block,
    make_block,
    insert_block,
    insert_existing_block,
    append_block,
    update_block_props,
    remove_block,
    duplicate_block,
    move_block,
    move_block_by,
    toggle_visibility,
    toggle_lock,
    replace_global_styles,
)
from .history import DEFAULT_MAX_DEPTH, EditHistory
from .drag import BlockBox, DropResult, DragSession, compute_insert_index, encode_payload, parse_payload
from .props import set_prop_path, add_array_item, remove_array_item, update_array_item
from .site_data import load_document, dump_block, dump_site_data, dumps_site_data

__all__ = [
    "PageEditorError",
    "CatalogError",
    "InvalidPayloadError",
    "WireModel",
    "BlockDefinition",
    "BlockStyle",
    "PageBlock",
    "GlobalStyles",
    "PageDocument",
    "ALL_CATEGORIES",
    "BlockCatalog",
    "build_default_catalog",
    "new_block_id",
    "index_of",
    "find_block",
    "make_block",
    "insert_block",
    "insert_existing_block",
    "append_block",
    "update_block_props",
    "remove_block",
    "duplicate_block",
    "move_block",
    "move_block_by",
    "toggle_visibility",
    "toggle_lock",
    "replace_global_styles",
    "DEFAULT_MAX_DEPTH",
    "EditHistory",
    "BlockBox",
    "DropResult",
    "DragSession",
    "compute_insert_index",
    "encode_payload",
    "parse_payload",
    "set_prop_path",
    "add_array_item",
    "remove_array_item",
    "update_array_item",
    "load_document",
    "dump_block",
    "dump_site_data",
    "dumps_site_data",
]
