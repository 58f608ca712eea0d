"""
Schémas Pydantic du Page Editor.
Structure : PageDocument → PageBlock (ordre = position dans le tuple) + GlobalStyles

Les noms côté JSON sont en camelCase (isVisible, defaultProps, globalStyles…),
les attributs Python en snake_case.
"""
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base commune : alias camelCase + population par nom."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BlockDefinition(WireModel):
    """Définition d'un type de bloc (catalogue, immuable)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    type: str
    category: str
    name: str
    description: str = ""
    default_props: Dict[str, Any] = Field(default_factory=dict)
    is_popular: bool = False
    is_premium: bool = False


class BlockStyle(WireModel):
    """Style conteneur (variante site-builder) — padding, fond, arrondi, ombre."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    padding: Optional[str] = None
    margin: Optional[str] = None
    background_color: Optional[str] = None
    border_radius: Optional[str] = None
    box_shadow: Optional[str] = None


class PageBlock(WireModel):
    """Instance de bloc dans un document. Clés inconnues conservées (round-trip)."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, extra="allow",
    )

    id: str
    type: str
    props: Dict[str, Any] = Field(default_factory=dict)
    is_visible: bool = True
    is_locked: bool = False
    style: Optional[BlockStyle] = None


class GlobalStyles(WireModel):
    """Réglages globaux de la page (couleurs, police, largeur du conteneur)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="allow")

    primary_color: str = "#3b82f6"
    secondary_color: str = "#10b981"
    font_family: str = "Inter"
    container_width: str = "1200px"


class PageDocument(WireModel):
    """Document complet : blocs ordonnés + styles globaux."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    blocks: Tuple[PageBlock, ...] = ()
    global_styles: GlobalStyles = Field(default_factory=GlobalStyles)
    # Vrai si le document vient de la variante avec champ `order` explicite
    stamp_order: bool = Field(default=False, exclude=True)

    @property
    def block_ids(self) -> list[str]:
        return [b.id for b in self.blocks]
