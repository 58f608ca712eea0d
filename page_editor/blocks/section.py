"""
Blocs section générique (services, contact) + CTA.
Même forme de props : titre, sous-titre, texte, bouton optionnel, alignement.
"""
from typing import Literal, Optional

from ..core.schemas import BlockDefinition
from .base import BlockProps


class SectionProps(BlockProps):
    title: str = ""
    subtitle: str = ""
    text: str = ""
    button_text: Optional[str] = None
    button_link: str = "#"
    alignment: Literal["left", "center", "right"] = "left"
    text_color: Optional[str] = None


class CTAProps(BlockProps):
    title: str = "Ready to Get Started?"
    subtitle: str = ""
    button_text: str = "Start Now"
    button_link: str = "#"


SERVICES_DEFINITION = BlockDefinition(
    id="services-section",
    type="services",
    category="business",
    name="Services",
    description="Introduce what your business offers",
    default_props={
        "title": "Our Services",
        "subtitle": "What we offer",
        "text": "Professional services tailored to your needs",
        "alignment": "center",
    },
)

CONTACT_DEFINITION = BlockDefinition(
    id="contact-section",
    type="contact",
    category="forms",
    name="Contact Section",
    description="Invite visitors to get in touch",
    default_props={
        "title": "Get In Touch",
        "subtitle": "Ready to start your project?",
        "text": "Contact us today for a free consultation",
        "alignment": "center",
    },
)

CTA_DEFINITION = BlockDefinition(
    id="call-to-action",
    type="cta",
    category="content",
    name="Call to Action",
    description="Closing banner with a single action button",
    default_props={
        "title": "Ready to Get Started?",
        "subtitle": "Join thousands of satisfied customers",
        "buttonText": "Start Now",
        "buttonLink": "#",
    },
)
