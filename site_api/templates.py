"""
Templates de site intégrés + construction du document initial d'un site.

Un template décrit le contenu (hero, liste de services / menu / produits,
coordonnées) ; document_from_template() le traduit en blocs du catalogue.
"""
from typing import Any, Dict, List, Mapping, Optional, Sequence

from page_editor import (
    BlockCatalog,
    PageDocument,
    append_block,
    build_default_catalog,
    replace_global_styles,
)

BASIC_TEMPLATES: List[Dict[str, Any]] = [
    {
        "name": "Professional Law Firm",
        "description": "A sophisticated template for legal professionals and law firms",
        "category": "legal",
        "features": ["Contact Forms", "Service Pages", "Team Profiles", "Case Studies"],
        "color_schemes": [{"primary": "#1e40af", "secondary": "#64748b", "accent": "#3b82f6"}],
        "template_data": {
            "hero": {"title": "Your Legal Experts", "subtitle": "Professional legal services you can trust"},
            "services": ["Corporate Law", "Family Law", "Criminal Defense", "Real Estate"],
            "contact": {"phone": "(555) 123-4567", "email": "info@lawfirm.com"},
        },
        "seo_optimized": True,
    },
    {
        "name": "Modern Restaurant",
        "description": "A beautiful template for restaurants and food businesses",
        "category": "restaurant",
        "features": ["Menu Display", "Online Reservations", "Gallery", "Contact Info"],
        "color_schemes": [{"primary": "#dc2626", "secondary": "#451a03", "accent": "#f59e0b"}],
        "template_data": {
            "hero": {"title": "Delicious Dining Experience", "subtitle": "Fresh ingredients, exceptional service"},
            "menu": ["Appetizers", "Main Courses", "Desserts", "Beverages"],
            "contact": {"phone": "(555) 234-5678", "email": "info@restaurant.com"},
        },
        "seo_optimized": True,
    },
    {
        "name": "Tech Startup",
        "description": "A sleek template for technology companies and startups",
        "category": "technology",
        "features": ["Product Showcase", "Team Section", "Blog", "Investor Relations"],
        "color_schemes": [{"primary": "#6366f1", "secondary": "#1f2937", "accent": "#10b981"}],
        "template_data": {
            "hero": {"title": "Innovation Starts Here", "subtitle": "Building the future with cutting-edge technology"},
            "products": ["AI Solutions", "Cloud Services", "Mobile Apps", "Data Analytics"],
            "contact": {"phone": "(555) 345-6789", "email": "hello@techstartup.com"},
        },
        "seo_optimized": True,
    },
]

# Listes d'offres reconnues dans template_data → titre de la section
_OFFER_SECTIONS = (
    ("services", "Our Services"),
    ("menu",     "Our Menu"),
    ("products", "Our Products"),
)


def _defaults(catalog: BlockCatalog, block_type: str) -> Dict[str, Any]:
    definition = catalog.get(block_type)
    return dict(definition.default_props) if definition else {}


def default_document(catalog: Optional[BlockCatalog] = None) -> PageDocument:
    """Document d'un site créé sans template : hero + texte."""
    catalog = catalog or build_default_catalog()
    doc = append_block(PageDocument(), "hero", _defaults(catalog, "hero"))
    return append_block(doc, "text", _defaults(catalog, "text"))


def document_from_template(
    template_data: Mapping[str, Any],
    color_schemes: Sequence[Mapping[str, Any]] = (),
    catalog: Optional[BlockCatalog] = None,
) -> PageDocument:
    """hero → (services | menu | products) → contact, couleurs du premier schéma."""
    catalog = catalog or build_default_catalog()
    doc = PageDocument()

    if color_schemes:
        scheme = color_schemes[0]
        changes = {}
        if scheme.get("primary"):
            changes["primary_color"] = scheme["primary"]
        if scheme.get("secondary"):
            changes["secondary_color"] = scheme["secondary"]
        if changes:
            doc = replace_global_styles(doc, **changes)

    hero = template_data.get("hero") or {}
    hero_props = _defaults(catalog, "hero")
    hero_props.update({k: hero[k] for k in ("title", "subtitle") if hero.get(k)})
    doc = append_block(doc, "hero", hero_props)

    for key, heading in _OFFER_SECTIONS:
        items = template_data.get(key)
        if not items:
            continue
        doc = append_block(doc, "services", {"title": heading, "subtitle": "", "text": "", "alignment": "center"})
        doc = append_block(doc, "features", {
            "features": [{"icon": "star", "title": str(item), "description": ""} for item in items],
            "columns": min(4, len(items)),
            "showIcons": True,
        })

    contact = template_data.get("contact") or {}
    contact_props = _defaults(catalog, "contact")
    details = " · ".join(str(contact[k]) for k in ("phone", "email") if contact.get(k))
    if details:
        contact_props["text"] = details
    return append_block(doc, "contact", contact_props)
