"""
Moteur d'insertion drag & drop.

Pendant un drag, l'index d'insertion est recalculé à chaque drag-over à partir
des boîtes des blocs rendus (ordre du document, même repère que le pointeur).
Au drop, la définition sérialisée est insérée à cet index.
"""
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from .catalog import BlockCatalog
from .document import insert_block
from .errors import InvalidPayloadError
from .schemas import BlockDefinition, PageDocument

log = logging.getLogger(__name__)

DropPayload = Union[str, bytes, Mapping[str, Any], None]


@dataclass(frozen=True)
class BlockBox:
    """Boîte verticale d'un bloc rendu (top + hauteur)."""
    top: float
    height: float

    @property
    def midpoint(self) -> float:
        return self.top + self.height / 2


@dataclass(frozen=True)
class DropResult:
    document: PageDocument
    block_id: str
    index: int


def compute_insert_index(pointer_y: float, boxes: Sequence[BlockBox]) -> int:
    """Index du premier bloc dont le milieu est sous le pointeur, sinon len(boxes)."""
    for i, box in enumerate(boxes):
        if pointer_y < box.midpoint:
            return i
    return len(boxes)


def parse_payload(payload: DropPayload) -> BlockDefinition:
    """Décode le payload de drag (définition JSON). Lève InvalidPayloadError."""
    if payload is None or payload == "" or payload == b"":
        raise InvalidPayloadError("payload de drop vide")
    try:
        if isinstance(payload, (str, bytes)):
            return BlockDefinition.model_validate_json(payload)
        return BlockDefinition.model_validate(dict(payload))
    except (ValidationError, TypeError, ValueError) as e:
        raise InvalidPayloadError(f"payload de drop illisible : {e}") from e


class DragSession:
    """
    État d'un drag sur le canvas.

    Usage:
        >>> drag = DragSession()
        >>> drag.drag_over(120, boxes)
        >>> result = drag.drop(document, payload, catalog)
    """

    def __init__(self):
        self.drag_over_index: Optional[int] = None

    @property
    def is_active(self) -> bool:
        return self.drag_over_index is not None

    def drag_over(self, pointer_y: float, boxes: Sequence[BlockBox]) -> int:
        self.drag_over_index = compute_insert_index(pointer_y, boxes)
        return self.drag_over_index

    def drag_leave(self, still_inside: bool = False) -> None:
        """Efface l'indicateur seulement si le pointeur quitte tout le canvas."""
        if not still_inside:
            self.drag_over_index = None

    def drop_indicator_offset(self, blocks_count: int) -> Optional[str]:
        """Position CSS de l'indicateur de drop (None si pas de drag)."""
        index = self.drag_over_index
        if index is None:
            return None
        if index == 0:
            return "16px"
        if index >= blocks_count:
            return "100%"
        return f"{index * 100 / blocks_count:g}%"

    def drop(
        self,
        document: PageDocument,
        payload: DropPayload,
        catalog: Optional[BlockCatalog] = None,
    ) -> Optional[DropResult]:
        """
        Insère le bloc déposé au dernier index calculé (fin du document sinon).
        Payload invalide ou type inconnu → log + None, document inchangé.
        """
        index = self.drag_over_index if self.drag_over_index is not None else len(document.blocks)
        self.drag_over_index = None

        try:
            definition = parse_payload(payload)
        except InvalidPayloadError as e:
            log.warning("Drop ignoré : %s", e)
            return None

        if catalog is not None:
            known = catalog.get(definition.type)
            if known is None:
                log.warning("Drop ignoré : type de bloc inconnu %r", definition.type)
                return None
            if not definition.default_props:
                definition = known

        new_doc = insert_block(document, definition, index)
        index = max(0, min(len(document.blocks), index))
        return DropResult(document=new_doc, block_id=new_doc.blocks[index].id, index=index)


def encode_payload(definition: BlockDefinition) -> str:
    """Sérialise une définition comme le fait la bibliothèque au dragstart."""
    return definition.model_dump_json(by_alias=True)
