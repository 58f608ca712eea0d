"""
Helpers communs aux renderers — échappement texte / URL / valeurs CSS.

Tout texte saisi par l'utilisateur passe par `esc` (MarkupSafe). Seules les
props de contenu riche (text.content, columns.*Content) sont insérées telles
quelles via `Markup`.
"""
import re
from typing import Optional

from markupsafe import Markup, escape

# Caractères qui permettraient de sortir d'une déclaration CSS inline
_CSS_FORBIDDEN = re.compile(r"[;{}<>\"\\]")
_UNSAFE_URL = re.compile(r"^\s*(javascript|vbscript|data):", re.IGNORECASE)


def esc(value) -> Markup:
    """Texte utilisateur → HTML échappé (None → chaîne vide)."""
    return escape("" if value is None else value)


def rich(value) -> Markup:
    """Contenu riche déjà formaté : jamais ré-échappé."""
    return Markup("" if value is None else value)


def url(value: Optional[str], default: str = "#") -> Markup:
    """URL d'attribut href / src échappée ; schémas exécutables remplacés."""
    if not value or _UNSAFE_URL.match(value):
        return escape(default)
    return escape(value)


def css_value(value, default: str = "") -> str:
    """Valeur CSS inline : rejetée (→ default) si elle contient ; { } < > \" \\."""
    if value is None:
        return default
    text = str(value).strip()
    if not text or _CSS_FORBIDDEN.search(text):
        return default
    return text


def css_url(value: Optional[str]) -> str:
    """URL destinée à url('…') : vide si elle pourrait fermer la fonction CSS."""
    text = css_value(value)
    if not text or _UNSAFE_URL.match(text) or any(c in text for c in "'()"):
        return ""
    return text


def style_attr(declarations: dict) -> str:
    """{"min-height": "400px", "color": None} → ' style="min-height:400px"'."""
    parts = [f"{prop}:{val}" for prop, val in declarations.items() if val]
    return f' style="{";".join(parts)}"' if parts else ""


def classes(*names: Optional[str]) -> str:
    return " ".join(n for n in names if n)
