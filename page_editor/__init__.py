"""
Page Editor — modèle de document de pages à blocs, éditeur et publication.

Usage (document):
    >>> from page_editor import build_default_catalog, PageDocument, insert_block
    >>> catalog = build_default_catalog()
    >>> doc = insert_block(PageDocument(), catalog.get("hero"), 0)

Usage (session d'édition):
    >>> from page_editor import EditorSession
    >>> session = EditorSession.from_site_data(site_data)
    >>> session.insert("text")
    >>> session.undo()

Usage (publication):
    >>> from page_editor import load_document, serialize
    >>> html = serialize(load_document(site_data), title="Mon site")

Usage (FastAPI):
    >>> from page_editor.router import router
    >>> app.include_router(router)
"""

# ── Core ────────────────────────────────────────────────────────────────────
from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all

# ── Rendu / publication ─────────────────────────────────────────────────────
from .renderer import Carousel, render_block, render_canvas
from .publish import serialize

# ── Session ─────────────────────────────────────────────────────────────────
from .editor import EditorSession, SaveRequest, SaveStatus

__version__ = "0.3.0"

__all__ = [
    *_core_all,
    "Carousel",
    "render_block",
    "render_canvas",
    "serialize",
    "EditorSession",
    "SaveRequest",
    "SaveStatus",
]
