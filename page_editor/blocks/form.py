"""Blocs formulaires — contact (champs libres) et newsletter."""
from typing import List, Literal, Optional

from ..core.schemas import BlockDefinition
from .base import BlockProps, PropsItem


class FormField(PropsItem):
    type: Literal["text", "email", "tel", "number", "url", "textarea"] = "text"
    name: str = ""
    label: str = ""
    required: bool = False
    placeholder: Optional[str] = None
    rows: int = 3


class FormProps(BlockProps):
    fields: List[FormField] = []
    submit_text: str = "Send Message"
    success_message: str = "Thank you for your message! We'll get back to you soon."
    layout: Literal["stacked", "inline"] = "stacked"


class NewsletterProps(BlockProps):
    title: str = "Stay Updated"
    description: str = ""
    placeholder: str = "Enter your email address"
    button_text: str = "Subscribe"
    layout: Literal["inline", "stacked"] = "inline"


FORM_DEFINITION = BlockDefinition(
    id="contact-form",
    type="form",
    category="forms",
    name="Contact Form",
    description="Let customers get in touch with a customizable contact form",
    is_popular=True,
    default_props={
        "fields": [
            {"type": "text", "name": "name", "label": "Full Name", "required": True},
            {"type": "email", "name": "email", "label": "Email Address", "required": True},
            {"type": "tel", "name": "phone", "label": "Phone Number", "required": False},
            {"type": "textarea", "name": "message", "label": "Message", "required": True, "rows": 4},
        ],
        "submitText": "Send Message",
        "successMessage": "Thank you for your message! We'll get back to you soon.",
        "layout": "stacked",
    },
)

NEWSLETTER_DEFINITION = BlockDefinition(
    id="newsletter-signup",
    type="newsletter",
    category="forms",
    name="Newsletter Signup",
    description="Collect email addresses for your newsletter or updates",
    default_props={
        "title": "Stay Updated",
        "description": "Subscribe to our newsletter for the latest updates and offers",
        "placeholder": "Enter your email address",
        "buttonText": "Subscribe",
        "layout": "inline",
    },
)
