"""
Blocs — modèles de props par type + définitions du catalogue par défaut.
"""
from .base import BlockProps, PropsItem, GridColumns, UnitFloat, coerce_props, clamp
from .hero import HeroProps, DEFINITION as HERO
from .text import TextProps, DEFINITION as TEXT
from .features import FeaturesProps, FeatureItem, DEFINITION as FEATURES
from .gallery import GalleryProps, GalleryImage, DEFINITION as GALLERY
from .video import VideoProps, video_embed_url, DEFINITION as VIDEO
from .image import ImageProps, DEFINITION as IMAGE
from .columns import ColumnsProps, DEFINITION as COLUMNS
from .spacer import SpacerProps, DEFINITION as SPACER
from .testimonial import TestimonialsProps, TestimonialItem, DEFINITION as TESTIMONIALS
from .team import TeamProps, TeamMember, DEFINITION as TEAM
from .hours import HoursProps, DEFINITION as HOURS
from .map import MapProps, DEFINITION as MAP
from .form import FormProps, FormField, NewsletterProps, FORM_DEFINITION as FORM, NEWSLETTER_DEFINITION as NEWSLETTER
from .products import ProductsProps, ProductItem, DEFINITION as PRODUCTS
from .section import SectionProps, CTAProps, SERVICES_DEFINITION as SERVICES, CONTACT_DEFINITION as CONTACT, CTA_DEFINITION as CTA

# Ordre d'affichage de la bibliothèque de blocs
DEFINITIONS = (
    HERO, TEXT, FEATURES,
    GALLERY, VIDEO,
    COLUMNS, SPACER,
    TESTIMONIALS, TEAM, HOURS, MAP,
    FORM, NEWSLETTER,
    PRODUCTS,
    SERVICES, CONTACT, CTA, IMAGE,
)

# Catégories de la bibliothèque (id, libellé) ; "all" court-circuite le filtre
CATEGORIES = (
    ("all",       "All Blocks"),
    ("content",   "Content"),
    ("media",     "Media"),
    ("layout",    "Layout"),
    ("business",  "Business"),
    ("forms",     "Forms"),
    ("ecommerce", "E-commerce"),
)

__all__ = [
    "BlockProps", "PropsItem", "GridColumns", "UnitFloat", "coerce_props", "clamp",
    "HeroProps", "TextProps", "FeaturesProps", "FeatureItem",
    "GalleryProps", "GalleryImage", "VideoProps", "video_embed_url", "ImageProps",
    "ColumnsProps", "SpacerProps", "TestimonialsProps", "TestimonialItem",
    "TeamProps", "TeamMember", "HoursProps", "MapProps",
    "FormProps", "FormField", "NewsletterProps", "ProductsProps", "ProductItem",
    "SectionProps", "CTAProps",
    "DEFINITIONS", "CATEGORIES",
]
