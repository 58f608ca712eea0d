"""
Catalogue de blocs — registre immuable des définitions.

Construit explicitement puis passé à l'éditeur : pas d'état global caché,
et un catalogue réduit suffit pour les tests.
"""
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from .errors import CatalogError
from .schemas import BlockDefinition

ALL_CATEGORIES = "all"


class BlockCatalog:
    """
    Registre ordonné de BlockDefinition.

    Usage:
        >>> catalog = build_default_catalog()
        >>> catalog.list_definitions(category="media", search="video")
    """

    def __init__(
        self,
        definitions: Iterable[BlockDefinition],
        categories: Sequence[Tuple[str, str]] = (),
    ):
        defs = tuple(definitions)
        by_type: dict = {}
        ids: set = set()
        for d in defs:
            if not d.id or not d.type:
                raise CatalogError(f"Définition sans id/type : {d!r}")
            if d.id in ids:
                raise CatalogError(f"id de bloc dupliqué : {d.id!r}")
            if d.type in by_type:
                raise CatalogError(f"type de bloc dupliqué : {d.type!r}")
            if not d.default_props:
                raise CatalogError(f"defaultProps vide pour le type {d.type!r}")
            ids.add(d.id)
            by_type[d.type] = d

        self._definitions = defs
        self._by_type = by_type
        self._categories = tuple(categories) or _derive_categories(defs)

    # ── Lookup ────────────────────────────────────────────────────────────

    def get(self, block_type: str) -> Optional[BlockDefinition]:
        return self._by_type.get(block_type)

    @property
    def types(self) -> Tuple[str, ...]:
        return tuple(d.type for d in self._definitions)

    def categories(self) -> Tuple[Tuple[str, str], ...]:
        """Catégories (id, libellé), "all" en tête."""
        return self._categories

    def __contains__(self, block_type: object) -> bool:
        return block_type in self._by_type

    def __iter__(self) -> Iterator[BlockDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    # ── Filtrage ──────────────────────────────────────────────────────────

    def list_definitions(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> Tuple[BlockDefinition, ...]:
        """
        Filtre le catalogue.

        Args:
            category: correspondance exacte ; None ou "all" = pas de filtre
            search: sous-chaîne insensible à la casse sur nom + description
        """
        needle = (search or "").strip().lower()
        return tuple(
            d for d in self._definitions
            if (not category or category == ALL_CATEGORIES or d.category == category)
            and (not needle or needle in d.name.lower() or needle in d.description.lower())
        )

    def popular(self, category: Optional[str] = None, search: Optional[str] = None) -> Tuple[BlockDefinition, ...]:
        return tuple(d for d in self.list_definitions(category, search) if d.is_popular)

    def regular(self, category: Optional[str] = None, search: Optional[str] = None) -> Tuple[BlockDefinition, ...]:
        return tuple(d for d in self.list_definitions(category, search) if not d.is_popular)


def _derive_categories(defs: Sequence[BlockDefinition]) -> Tuple[Tuple[str, str], ...]:
    seen: list = []
    for d in defs:
        if d.category not in seen:
            seen.append(d.category)
    return ((ALL_CATEGORIES, "All Blocks"),) + tuple((c, c.capitalize()) for c in seen)


def build_default_catalog() -> BlockCatalog:
    """Catalogue livré avec le module (18 types de blocs)."""
    from ..blocks import CATEGORIES, DEFINITIONS
    return BlockCatalog(DEFINITIONS, CATEGORIES)
