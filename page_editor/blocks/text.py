"""Bloc Texte — contenu riche (markup déjà formaté, jamais ré-échappé)."""
from typing import Literal

from ..core.schemas import BlockDefinition
from .base import BlockProps

TEXT_PLACEHOLDER = "<p>Add your content here...</p>"


class TextProps(BlockProps):
    content: str = TEXT_PLACEHOLDER
    text_align: Literal["left", "center", "right", "justify"] = "left"
    max_width: str = "100%"


DEFINITION = BlockDefinition(
    id="text-block",
    type="text",
    category="content",
    name="Text Block",
    description="Rich text editor for paragraphs, headings, and formatted content",
    is_popular=True,
    default_props={
        "content": "<h2>About Our Company</h2><p>We are dedicated to providing exceptional service and value to our customers.</p>",
        "textAlign": "left",
        "maxWidth": "100%",
    },
)
