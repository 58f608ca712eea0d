"""
Modèle de document — opérations pures sur PageDocument.

Chaque opération renvoie un NOUVEAU document et ne modifie jamais l'entrée
(nécessaire pour l'historique par snapshots). Un block_id inconnu est un
no-op : le document d'entrée est renvoyé tel quel.
"""
import copy
import logging
import random
import string
import time
from typing import Any, Dict, Iterable, Literal, Mapping, Optional, Sequence

from pydantic import ValidationError

from .schemas import BlockDefinition, GlobalStyles, PageBlock, PageDocument

log = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase


def new_block_id(block_type: str, existing: Iterable[str] = ()) -> str:
    """
    Génère un id "{type}-{timestamp ms}-{9 caractères base36}".
    Régénéré tant qu'il entre en collision avec un id existant.
    """
    taken = set(existing)
    while True:
        suffix = "".join(random.choices(_ID_ALPHABET, k=9))
        block_id = f"{block_type}-{int(time.time() * 1000)}-{suffix}"
        if block_id not in taken:
            return block_id


def _with_blocks(document: PageDocument, blocks: Sequence[PageBlock]) -> PageDocument:
    return document.model_copy(update={"blocks": tuple(blocks)})


# ── Lecture ───────────────────────────────────────────────────────────────────

def index_of(document: PageDocument, block_id: str) -> int:
    """Position du bloc, -1 si absent."""
    for i, block in enumerate(document.blocks):
        if block.id == block_id:
            return i
    return -1


def find_block(document: PageDocument, block_id: Optional[str]) -> Optional[PageBlock]:
    if block_id is None:
        return None
    i = index_of(document, block_id)
    return document.blocks[i] if i >= 0 else None


# ── Mutations (copie) ─────────────────────────────────────────────────────────

def make_block(
    block_type: str,
    props: Mapping[str, Any],
    existing_ids: Iterable[str] = (),
) -> PageBlock:
    """Construit un PageBlock neuf (props copiées en profondeur)."""
    return PageBlock(
        id=new_block_id(block_type, existing_ids),
        type=block_type,
        props=copy.deepcopy(dict(props)),
        is_visible=True,
        is_locked=False,
    )


def insert_block(document: PageDocument, definition: BlockDefinition, at_index: int) -> PageDocument:
    """Insère un bloc issu de `definition.default_props` à `at_index` (borné à [0, len])."""
    block = make_block(definition.type, definition.default_props, document.block_ids)
    return insert_existing_block(document, block, at_index)


def insert_existing_block(document: PageDocument, block: PageBlock, at_index: int) -> PageDocument:
    blocks = list(document.blocks)
    index = max(0, min(len(blocks), at_index))
    blocks.insert(index, block)
    return _with_blocks(document, blocks)


def append_block(document: PageDocument, block_type: str, props: Mapping[str, Any]) -> PageDocument:
    """Ajoute un bloc en fin de document (blocs générés par IA)."""
    block = make_block(block_type, props, document.block_ids)
    return insert_existing_block(document, block, len(document.blocks))


def update_block_props(
    document: PageDocument,
    block_id: str,
    partial_props: Mapping[str, Any],
) -> PageDocument:
    """Fusion superficielle de `partial_props` dans les props du bloc."""
    i = index_of(document, block_id)
    if i < 0:
        return document
    block = document.blocks[i]
    merged: Dict[str, Any] = {**block.props, **dict(partial_props)}
    blocks = list(document.blocks)
    blocks[i] = block.model_copy(update={"props": merged})
    return _with_blocks(document, blocks)


def remove_block(document: PageDocument, block_id: str) -> PageDocument:
    i = index_of(document, block_id)
    if i < 0:
        return document
    blocks = list(document.blocks)
    del blocks[i]
    return _with_blocks(document, blocks)


def duplicate_block(document: PageDocument, block_id: str) -> PageDocument:
    """Copie (nouvel id, même type/props) insérée juste après l'original."""
    i = index_of(document, block_id)
    if i < 0:
        return document
    original = document.blocks[i]
    clone = original.model_copy(
        update={
            "id": new_block_id(original.type, document.block_ids),
            "props": copy.deepcopy(original.props),
        },
        deep=True,
    )
    blocks = list(document.blocks)
    blocks.insert(i + 1, clone)
    return _with_blocks(document, blocks)


def move_block(document: PageDocument, from_index: int, to_index: int) -> PageDocument:
    """Retire puis réinsère. Indices égaux → même document (pas d'entrée d'historique)."""
    if from_index == to_index:
        return document
    if not 0 <= from_index < len(document.blocks):
        return document
    blocks = list(document.blocks)
    moved = blocks.pop(from_index)
    blocks.insert(max(0, min(len(blocks), to_index)), moved)
    return _with_blocks(document, blocks)


def move_block_by(
    document: PageDocument,
    block_id: str,
    direction: Literal["up", "down"],
) -> PageDocument:
    """Échange avec le voisin du dessus / dessous ; no-op aux bornes."""
    i = index_of(document, block_id)
    if i < 0:
        return document
    j = i - 1 if direction == "up" else i + 1
    if not 0 <= j < len(document.blocks):
        return document
    return move_block(document, i, j)


def _toggle(document: PageDocument, block_id: str, field: str) -> PageDocument:
    i = index_of(document, block_id)
    if i < 0:
        return document
    block = document.blocks[i]
    blocks = list(document.blocks)
    blocks[i] = block.model_copy(update={field: not getattr(block, field)})
    return _with_blocks(document, blocks)


def toggle_visibility(document: PageDocument, block_id: str) -> PageDocument:
    return _toggle(document, block_id, "is_visible")


def toggle_lock(document: PageDocument, block_id: str) -> PageDocument:
    return _toggle(document, block_id, "is_locked")


def replace_global_styles(document: PageDocument, **changes: Any) -> PageDocument:
    """
    Remplace des réglages globaux (primary_color=..., font_family=...).
    Valeur invalide ou aucun changement → même document.
    """
    try:
        styles = GlobalStyles.model_validate({**document.global_styles.model_dump(), **changes})
    except ValidationError as e:
        log.warning("Réglages globaux refusés %s : %s", sorted(changes), e.errors()[0]["msg"])
        return document
    if styles.model_dump() == document.global_styles.model_dump():
        return document
    return document.model_copy(update={"global_styles": styles})
