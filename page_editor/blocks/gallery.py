"""Bloc Galerie — images en grille."""
from typing import List, Literal, Optional

from ..core.schemas import BlockDefinition
from .base import BlockProps, GridColumns, PropsItem


class GalleryImage(PropsItem):
    src: str = ""
    alt: Optional[str] = None
    caption: Optional[str] = None


class GalleryProps(BlockProps):
    images: List[GalleryImage] = []
    layout: Literal["grid", "carousel", "masonry"] = "grid"
    columns: GridColumns = 3
    show_captions: bool = False


DEFINITION = BlockDefinition(
    id="image-gallery",
    type="gallery",
    category="media",
    name="Image Gallery",
    description="Display multiple images in an attractive grid or carousel",
    default_props={
        "images": [
            {"src": "https://images.unsplash.com/photo-1560472354-b33ff0c44a43?w=400&h=300&fit=crop", "alt": "Gallery Image 1"},
            {"src": "https://images.unsplash.com/photo-1560472355-b3400c4f3b26?w=400&h=300&fit=crop", "alt": "Gallery Image 2"},
            {"src": "https://images.unsplash.com/photo-1560472356-c4c1e9c7d67a?w=400&h=300&fit=crop", "alt": "Gallery Image 3"},
        ],
        "layout": "grid",
        "columns": 3,
        "showCaptions": False,
    },
)
