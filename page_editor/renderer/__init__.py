"""Renderers HTML du page_editor."""
from .carousel import Carousel
from .html import (
    EMPTY_CANVAS,
    RenderContext,
    has_renderer,
    registered_types,
    render_block,
    render_canvas,
    render_unknown,
    renderer,
)

__all__ = [
    "Carousel",
    "EMPTY_CANVAS",
    "RenderContext",
    "has_renderer",
    "registered_types",
    "render_block",
    "render_canvas",
    "render_unknown",
    "renderer",
]
