"""Bloc Témoignages — grille ou carousel."""
from typing import List, Literal, Optional

from ..core.schemas import BlockDefinition
from .base import BlockProps, PropsItem

MAX_RATING = 5


class TestimonialItem(PropsItem):
    name: str = ""
    company: str = ""
    content: str = ""
    rating: Optional[int] = None
    avatar: Optional[str] = None


class TestimonialsProps(BlockProps):
    testimonials: List[TestimonialItem] = []
    layout: Literal["grid", "carousel"] = "grid"
    show_ratings: bool = False
    show_avatars: bool = False


DEFINITION = BlockDefinition(
    id="testimonials",
    type="testimonials",
    category="business",
    name="Testimonials",
    description="Display customer reviews and testimonials",
    is_popular=True,
    default_props={
        "testimonials": [
            {
                "name": "John Smith",
                "company": "ABC Corp",
                "content": "Excellent service and professional team. Highly recommended!",
                "rating": 5,
                "avatar": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=100&h=100&fit=crop&crop=face",
            },
            {
                "name": "Sarah Johnson",
                "company": "XYZ Inc",
                "content": "Outstanding quality and attention to detail. Very satisfied with the results.",
                "rating": 5,
                "avatar": "https://images.unsplash.com/photo-1438761681033-6461ffad8d80?w=100&h=100&fit=crop&crop=face",
            },
        ],
        "layout": "carousel",
        "showRatings": True,
        "showAvatars": True,
    },
)
