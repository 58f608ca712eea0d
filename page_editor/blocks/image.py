"""Bloc Image — une image avec titre optionnel."""
from ..core.schemas import BlockDefinition
from .base import BlockProps


class ImageProps(BlockProps):
    image_url: str = ""
    image_alt: str = ""
    title: str = ""


DEFINITION = BlockDefinition(
    id="single-image",
    type="image",
    category="media",
    name="Image",
    description="A single image with an optional title",
    default_props={
        "imageUrl": "https://via.placeholder.com/600x400",
        "imageAlt": "Placeholder image",
        "title": "Image Block",
    },
)
