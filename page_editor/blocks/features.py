"""Bloc Features — grille de services / points forts."""
from typing import List

from ..core.schemas import BlockDefinition
from .base import BlockProps, GridColumns, PropsItem


class FeatureItem(PropsItem):
    icon: str = "star"
    title: str = ""
    description: str = ""


class FeaturesProps(BlockProps):
    features: List[FeatureItem] = []
    columns: GridColumns = 3
    show_icons: bool = False


DEFINITION = BlockDefinition(
    id="feature-grid",
    type="features",
    category="content",
    name="Feature Grid",
    description="Showcase your services or features in a grid layout",
    is_popular=True,
    default_props={
        "features": [
            {"icon": "star", "title": "Quality Service", "description": "We deliver top-notch quality in everything we do"},
            {"icon": "users", "title": "Expert Team", "description": "Our experienced professionals are here to help"},
            {"icon": "clock", "title": "Fast Delivery", "description": "Quick turnaround times without compromising quality"},
        ],
        "columns": 3,
        "showIcons": True,
    },
)
