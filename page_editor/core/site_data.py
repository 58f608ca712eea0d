"""
Forme persistée `site_data` — chargement / sérialisation d'un PageDocument.

{
  "blocks": [{"id", "type", "props", "isVisible"?, "isLocked"?, "order"?}],
  "globalStyles": {"primaryColor", "secondaryColor", "fontFamily", "containerWidth"}
}

Deux variantes existent en base :
  - bibliothèque de blocs : ordre = position dans le tableau, props dans `props`
  - site-builder          : champ `order` explicite, props dans `content` + `style`
La seconde est migrée une fois au chargement. Les `order` stockés sont
relus tels quels tant qu'ils suivent l'ordre du tableau, renumérotés sinon.
"""
import json
import logging
import math
from typing import Any, Dict, List, Mapping, Optional, Union

from markupsafe import escape
from pydantic import ValidationError

from .document import new_block_id
from .schemas import GlobalStyles, PageBlock, PageDocument

log = logging.getLogger(__name__)

SiteDataInput = Union[str, bytes, Mapping[str, Any], None]


# ── Chargement ────────────────────────────────────────────────────────────────

def load_document(site_data: SiteDataInput) -> PageDocument:
    """
    Construit un PageDocument depuis `site_data` (dict ou JSON).

    Raises:
        ValueError: JSON invalide, racine non-objet ou `blocks` non-liste
    """
    if site_data is None or site_data == "" or site_data == b"":
        return PageDocument()
    if isinstance(site_data, (str, bytes)):
        try:
            site_data = json.loads(site_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"site_data n'est pas du JSON valide : {e}") from e
    if not isinstance(site_data, Mapping):
        raise ValueError("site_data doit être un objet JSON")

    raw_blocks = site_data.get("blocks") or []
    if not isinstance(raw_blocks, list):
        raise ValueError("site_data.blocks doit être une liste")

    has_order = any(isinstance(b, Mapping) and "order" in b for b in raw_blocks)
    if has_order:
        # Tri stable : les blocs sans `order` gardent leur position relative
        raw_blocks = sorted(
            raw_blocks,
            key=lambda b: _order_key(b.get("order") if isinstance(b, Mapping) else None),
        )

    blocks: List[PageBlock] = []
    seen: set = set()
    for i, raw in enumerate(raw_blocks):
        if not isinstance(raw, Mapping):
            log.warning("site_data.blocks[%d] ignoré : pas un objet", i)
            continue
        block = _load_block(raw, seen)
        if block is None:
            log.warning("site_data.blocks[%d] ignoré : bloc invalide", i)
            continue
        if block.id in seen:
            fresh_id = new_block_id(block.type or "block", seen)
            log.warning("Bloc %r dupliqué dans site_data : renommé %s", block.id, fresh_id)
            block = block.model_copy(update={"id": fresh_id})
        seen.add(block.id)
        blocks.append(block)

    global_styles = _load_global_styles(site_data.get("globalStyles"))

    return PageDocument(blocks=tuple(blocks), global_styles=global_styles, stamp_order=has_order)


def _load_global_styles(styles: Any) -> GlobalStyles:
    """Champ par champ : une valeur invalide retombe sur son défaut, les autres sont gardées."""
    if not isinstance(styles, Mapping):
        return GlobalStyles()
    data = dict(styles)
    try:
        return GlobalStyles.model_validate(data)
    except ValidationError as e:
        bad = {err["loc"][0] for err in e.errors() if err.get("loc")}
        log.warning("globalStyles : champs invalides remplacés par défaut %s", sorted(map(str, bad)))
        for key in bad:
            data.pop(key, None)
    try:
        return GlobalStyles.model_validate(data)
    except ValidationError:
        return GlobalStyles()


def _order_key(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return float("inf")


_BLOCK_FLAGS = ("isVisible", "isLocked", "is_visible", "is_locked", "style")


def _load_block(raw: Mapping[str, Any], taken: set) -> Optional[PageBlock]:
    data: Dict[str, Any] = dict(raw)
    if "props" not in data and isinstance(data.get("content"), Mapping):
        data["props"] = _migrate_content(str(data.get("type", "")), data.pop("content"))
    if not isinstance(data.get("props", {}), Mapping):
        log.warning("Bloc %r : props non-objet remplacées par {}", data.get("id"))
        data["props"] = {}
    data["type"] = str(data.get("type") or "")
    if not data.get("id"):
        data["id"] = new_block_id(data["type"] or "block", taken)
    data["id"] = str(data["id"])

    try:
        return PageBlock.model_validate(data)
    except ValidationError as e:
        # Drapeaux illisibles : on retombe sur les valeurs par défaut
        bad = {err["loc"][0] for err in e.errors() if err.get("loc")}
        if not bad or not bad <= set(_BLOCK_FLAGS):
            return None
        log.warning("Bloc %r : champs invalides ignorés %s", data["id"], sorted(map(str, bad)))
        for key in bad:
            data.pop(key, None)
    try:
        return PageBlock.model_validate(data)
    except ValidationError:
        return None


def _migrate_content(block_type: str, content: Mapping[str, Any]) -> Dict[str, Any]:
    """`content` de la variante site-builder → `props` canoniques."""
    props = dict(content)
    if block_type == "hero" and "alignment" in props:
        props.setdefault("textAlign", props.pop("alignment"))
    elif block_type == "text" and "content" not in props:
        parts = []
        if props.get("title"):
            parts.append(f"<h2>{escape(props.pop('title'))}</h2>")
        if props.get("text"):
            parts.append(f"<p>{escape(props.pop('text'))}</p>")
        props["content"] = "".join(parts)
        if "alignment" in props:
            props["textAlign"] = props.pop("alignment")
    return props


# ── Sérialisation ─────────────────────────────────────────────────────────────

def dump_block(block: PageBlock) -> Dict[str, Any]:
    """Seuls les champs présents au chargement / modifiés sont émis."""
    data = block.model_dump(by_alias=True, exclude_unset=True)
    data.update(block.model_extra or {})
    data.setdefault("id", block.id)
    data.setdefault("type", block.type)
    data.setdefault("props", block.props)
    return data


def _stamp_order(blocks: List[Dict[str, Any]]) -> None:
    """
    Les `order` stockés sont gardés tant qu'ils restent strictement croissants
    dans l'ordre du tableau (un bloc sans `order` prend le précédent + 1).
    Sinon tous les blocs sont renumérotés 0..n-1.
    """
    orders: List[Any] = []
    last = -1.0
    for data in blocks:
        order = data.get("order", math.floor(last) + 1)
        key = _order_key(order)
        if not math.isfinite(key) or key <= last:
            orders = list(range(len(blocks)))
            break
        orders.append(order)
        last = key
    for data, order in zip(blocks, orders):
        data["order"] = order


def dump_site_data(document: PageDocument) -> Dict[str, Any]:
    blocks = [dump_block(block) for block in document.blocks]
    if document.stamp_order:
        _stamp_order(blocks)
    return {
        "blocks": blocks,
        "globalStyles": document.global_styles.model_dump(by_alias=True),
    }


def dumps_site_data(document: PageDocument) -> str:
    return json.dumps(dump_site_data(document), ensure_ascii=False)
