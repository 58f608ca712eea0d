"""Publication : document HTML autonome + CSS."""
from .css import generate_css_variables, generate_page_css, get_compiled_scss, invalidate_scss_cache
from .serializer import published_blocks, serialize, serialize_body

__all__ = [
    "generate_css_variables",
    "generate_page_css",
    "get_compiled_scss",
    "invalidate_scss_cache",
    "published_blocks",
    "serialize",
    "serialize_body",
]
