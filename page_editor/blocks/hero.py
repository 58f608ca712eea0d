"""Bloc Hero — titre, sous-titre et bouton sur fond image / couleur / dégradé."""
from typing import Literal, Optional

from ..core.schemas import BlockDefinition
from .base import BlockProps, UnitFloat

HERO_GRADIENT = "linear-gradient(135deg, #667eea 0%, #764ba2 100%)"


class HeroProps(BlockProps):
    title: str = "Welcome to Our Business"
    subtitle: str = "We provide exceptional services for your needs"
    button_text: str = "Get Started"
    button_link: str = "#"
    background_image: Optional[str] = None
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    overlay_opacity: UnitFloat = 0.5
    text_align: Literal["left", "center", "right"] = "center"


DEFINITION = BlockDefinition(
    id="hero-section",
    type="hero",
    category="content",
    name="Hero Section",
    description="Eye-catching header with title, subtitle, and call-to-action",
    is_popular=True,
    default_props={
        "title": "Welcome to Our Business",
        "subtitle": "We provide exceptional services for your needs",
        "buttonText": "Get Started",
        "backgroundImage": "https://images.unsplash.com/photo-1560472354-b33ff0c44a43?w=1920&h=600&fit=crop",
        "overlayOpacity": 0.5,
        "textAlign": "center",
    },
)
