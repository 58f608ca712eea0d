"""
Générateur CSS de publication — variables :root (globalStyles) + SCSS compilé (libsass).

Pipeline :
  generate_css_variables(document.global_styles)  →  :root { --color-primary: ...; ... }
  get_compiled_scss()                             →  reset + conteneur + blocs (compilé une fois)
  generate_page_css(document)                     →  variables + SCSS
"""
import logging
from pathlib import Path

from ..core.schemas import GlobalStyles, PageDocument
from ..renderer.base import css_value

log = logging.getLogger(__name__)

SCSS_DIR = Path(__file__).parent / "scss"

_SCSS_CACHE: dict = {}

_DEFAULTS = GlobalStyles()


def get_compiled_scss() -> str:
    """Compile main.scss une seule fois, met en cache."""
    if "main" not in _SCSS_CACHE:
        import sass
        _SCSS_CACHE["main"] = sass.compile(
            filename=str(SCSS_DIR / "main.scss"),
            output_style="compressed",
        )
        log.info("SCSS compilé (%d octets)", len(_SCSS_CACHE["main"]))
    return _SCSS_CACHE["main"]


def invalidate_scss_cache():
    """Force la recompilation SCSS (dev only)."""
    _SCSS_CACHE.clear()


def _font_stack(font_family: str) -> str:
    font = css_value(font_family, _DEFAULTS.font_family).replace("'", "")
    if "," in font:
        return font
    return f"'{font}', sans-serif"


def generate_css_variables(styles: GlobalStyles) -> str:
    """
    Bloc :root depuis les réglages globaux.
    Une valeur invalide (; { } < >) retombe sur la valeur par défaut.
    """
    primary = css_value(styles.primary_color, _DEFAULTS.primary_color)
    secondary = css_value(styles.secondary_color, _DEFAULTS.secondary_color)
    width = css_value(styles.container_width, _DEFAULTS.container_width)
    return f""":root {{
  --color-primary:   {primary};
  --color-secondary: {secondary};
  --font-family:     {_font_stack(styles.font_family)};
  --container-width: {width};
}}"""


def generate_page_css(document: PageDocument) -> str:
    """CSS complet d'une page publiée : variables + SCSS compilé."""
    return generate_css_variables(document.global_styles) + "\n\n" + get_compiled_scss()
