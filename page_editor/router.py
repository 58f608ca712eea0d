"""
Router FastAPI — endpoints page_editor.

GET  /page-editor/catalog       → définitions de blocs (filtres category / search)
GET  /page-editor/categories    → catégories de la bibliothèque
POST /page-editor/render        → site_data → HTML du canvas (édition ou aperçu)
POST /page-editor/render-block  → un bloc → fragment HTML
POST /page-editor/publish       → site_data → document HTML autonome
POST /page-editor/validate      → site_data → {"valid": bool, "error"?}
POST /page-editor/embed-url     → URL vidéo → URL intégrable
"""
import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import ValidationError

from .blocks import video_embed_url
from .core.catalog import BlockCatalog, build_default_catalog
from .core.schemas import PageBlock, WireModel
from .core.site_data import dump_site_data, load_document
from .publish.serializer import serialize
from .renderer.html import has_renderer, render_block, render_canvas

log = logging.getLogger(__name__)

router = APIRouter(prefix="/page-editor", tags=["page_editor"])


@lru_cache(maxsize=1)
def get_catalog() -> BlockCatalog:
    return build_default_catalog()


class SiteDataBody(WireModel):
    site_data: Dict[str, Any] = {}


class RenderBody(SiteDataBody):
    preview: bool = False
    selected_id: Optional[str] = None
    carousel_indexes: Dict[str, int] = {}


class RenderBlockBody(WireModel):
    block: Dict[str, Any]
    carousel_index: int = 0
    publish: bool = False


class PublishBody(SiteDataBody):
    title: str = "Website"
    lang: str = "en"
    description: Optional[str] = None


class EmbedUrlBody(WireModel):
    url: str


def _load(site_data: Dict[str, Any]):
    try:
        return load_document(site_data)
    except ValueError as e:
        raise HTTPException(400, f"site_data invalide : {e}")


@router.get("/catalog", summary="Liste les définitions de blocs")
def catalog(
    category: Optional[str] = None,
    search: Optional[str] = None,
    blocks: BlockCatalog = Depends(get_catalog),
) -> dict:
    definitions = blocks.list_definitions(category=category, search=search)
    return {
        "blocks": [d.model_dump(by_alias=True) for d in definitions],
        "count": len(definitions),
    }


@router.get("/categories", summary="Catégories de la bibliothèque")
def categories(blocks: BlockCatalog = Depends(get_catalog)) -> list:
    return [
        {"id": cid, "name": label, "count": len(blocks.list_definitions(category=cid))}
        for cid, label in blocks.categories()
    ]


@router.post("/render", response_class=HTMLResponse, summary="Rend le canvas d'un document")
def render(body: RenderBody) -> HTMLResponse:
    document = _load(body.site_data)
    html = render_canvas(
        document,
        selected_id=body.selected_id,
        preview=body.preview,
        carousel_indexes=body.carousel_indexes,
    )
    return HTMLResponse(content=html)


@router.post("/render-block", response_class=HTMLResponse, summary="Rend un bloc seul")
def render_one(body: RenderBlockBody) -> HTMLResponse:
    try:
        block = PageBlock.model_validate(body.block)
    except ValidationError as e:
        raise HTTPException(400, f"Bloc invalide : {e.errors()[0]['msg']}")
    return HTMLResponse(content=render_block(block, carousel_index=body.carousel_index, publish=body.publish))


@router.post("/publish", response_class=HTMLResponse, summary="Génère la page publiée")
def publish(body: PublishBody) -> HTMLResponse:
    document = _load(body.site_data)
    html = serialize(document, title=body.title, lang=body.lang, description=body.description)
    log.info("Publication : %d bloc(s), %d octets", len(document.blocks), len(html))
    return HTMLResponse(content=html)


@router.post("/validate", summary="Valide un site_data sans le rendre")
def validate(body: SiteDataBody) -> dict:
    """Charge le document ; signale les types de blocs inconnus du renderer."""
    try:
        document = load_document(body.site_data)
    except ValueError as e:
        return {"valid": False, "error": str(e)}
    unknown = sorted({b.type for b in document.blocks if not has_renderer(b.type)})
    return {
        "valid": True,
        "blocks": len(document.blocks),
        "unknownTypes": unknown,
        "siteData": dump_site_data(document),
    }


@router.post("/embed-url", summary="Convertit une URL vidéo en URL intégrable")
def embed_url(body: EmbedUrlBody) -> dict:
    return {"url": body.url, "embedUrl": video_embed_url(body.url.strip())}
