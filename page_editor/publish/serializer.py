"""
Serializer de publication — PageDocument → document HTML autonome.

Même mapping props → markup que le canvas (render_block(publish=True)) :
aperçu et site publié ne peuvent pas diverger. Blocs masqués et types
inconnus sont omis, sans placeholder.
"""
import logging
from typing import List, Optional

from ..core.schemas import PageBlock, PageDocument
from ..renderer.base import esc
from ..renderer.html import has_renderer, render_block
from .css import generate_page_css

log = logging.getLogger(__name__)


def published_blocks(document: PageDocument) -> List[PageBlock]:
    """Blocs émis à la publication, dans l'ordre du document."""
    kept = []
    for block in document.blocks:
        if not block.is_visible:
            continue
        if not has_renderer(block.type):
            log.warning("Publication : type de bloc inconnu %r ignoré (%s)", block.type, block.id)
            continue
        kept.append(block)
    return kept


def serialize_body(document: PageDocument) -> str:
    parts = (render_block(block, publish=True) for block in published_blocks(document))
    return "\n".join(p for p in parts if p)


def serialize(
    document: PageDocument,
    *,
    title: str = "Website",
    lang: str = "en",
    description: Optional[str] = None,
    extra_head: str = "",
) -> str:
    """Génère le HTML complet (styles inline) d'une page publiée."""
    css = generate_page_css(document)
    body = serialize_body(document)
    meta_description = f'\n  <meta name="description" content="{esc(description)}">' if description else ""

    return f"""<!DOCTYPE html>
<html lang="{esc(lang)}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{esc(title)}</title>{meta_description}
  <style>{css}</style>
  {extra_head}
</head>
<body>
<main class="page">
{body}
</main>
</body>
</html>"""
