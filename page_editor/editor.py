"""
Session d'édition — état d'un éditeur ouvert sur un document.

Relie le modèle de document, l'historique, le drag & drop et la sauvegarde :
  - toute mutation validée → snapshot d'historique + revision += 1
  - remove / duplicate refusés sur un bloc verrouillé
  - sauvegardes numérotées : un résultat plus ancien que le dernier appliqué
    est ignoré (le dernier état validé gagne)
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Literal, Mapping, Optional, Sequence

from .core import document as doc_ops
from .core.catalog import BlockCatalog, build_default_catalog
from .core.drag import BlockBox, DragSession, DropPayload
from .core.history import DEFAULT_MAX_DEPTH, EditHistory
from .core.props import PathPart, set_prop_path
from .core.schemas import PageBlock, PageDocument
from .core.site_data import SiteDataInput, dump_site_data, load_document
from .renderer.carousel import Carousel
from .renderer.html import render_canvas

log = logging.getLogger(__name__)


class SaveStatus(str, Enum):
    SAVED  = "saved"
    DIRTY  = "dirty"
    SAVING = "saving"
    ERROR  = "error"


@dataclass(frozen=True)
class SaveRequest:
    """Instantané envoyé à la persistance (numéro de séquence croissant)."""
    sequence: int
    revision: int
    site_data: Dict[str, Any]


class EditorSession:
    """
    Usage:
        >>> session = EditorSession.from_site_data(site.site_data)
        >>> block_id = session.insert("hero")
        >>> session.update_props(block_id, {"title": "Bonjour"})
        >>> request = session.begin_save()
        >>> session.complete_save(request)
    """

    def __init__(
        self,
        document: Optional[PageDocument] = None,
        catalog: Optional[BlockCatalog] = None,
        *,
        history_depth: Optional[int] = DEFAULT_MAX_DEPTH,
    ):
        self.catalog = catalog or build_default_catalog()
        self.document = document if document is not None else PageDocument()
        self.history = EditHistory(self.document, history_depth)
        self.drag = DragSession()
        self.selected_id: Optional[str] = None
        self.preview = False
        self.carousel_indexes: Dict[str, int] = {}

        self.revision = 0
        self.save_status = SaveStatus.SAVED
        self.notification: Optional[str] = None
        self._saved_revision = 0
        self._last_sequence = 0
        self._applied_sequence = 0

    @classmethod
    def from_site_data(cls, site_data: SiteDataInput, catalog: Optional[BlockCatalog] = None, **kwargs) -> "EditorSession":
        return cls(load_document(site_data), catalog, **kwargs)

    # ── État ──────────────────────────────────────────────────────────────

    @property
    def selected_block(self) -> Optional[PageBlock]:
        return doc_ops.find_block(self.document, self.selected_id)

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    @property
    def is_dirty(self) -> bool:
        return self.revision != self._saved_revision

    def select(self, block_id: Optional[str]) -> Optional[PageBlock]:
        block = doc_ops.find_block(self.document, block_id)
        self.selected_id = block.id if block else None
        return block

    def _commit(self, new_doc: PageDocument) -> bool:
        """Applique un document modifié. Même objet → rien (pas d'entrée d'historique)."""
        if new_doc is self.document:
            return False
        self.document = new_doc
        self.history.record(new_doc)
        self._touch()
        return True

    def _touch(self) -> None:
        self.revision += 1
        if self.save_status != SaveStatus.SAVING:
            self.save_status = SaveStatus.DIRTY
        if self.selected_id is not None and doc_ops.index_of(self.document, self.selected_id) < 0:
            self.selected_id = None

    def _refuse_locked(self, block_id: str, action: str) -> bool:
        block = doc_ops.find_block(self.document, block_id)
        if block is not None and block.is_locked:
            self.notification = f"Block is locked: cannot {action}"
            log.info("%s refusé : bloc %s verrouillé", action, block_id)
            return True
        return False

    # ── Mutations ─────────────────────────────────────────────────────────

    def insert(self, block_type: str, at_index: Optional[int] = None) -> Optional[str]:
        """Insère un bloc du catalogue ; renvoie son id (sélectionné) ou None si type inconnu."""
        definition = self.catalog.get(block_type)
        if definition is None:
            log.warning("Insertion ignorée : type de bloc inconnu %r", block_type)
            return None
        index = len(self.document.blocks) if at_index is None else at_index
        self._commit(doc_ops.insert_block(self.document, definition, index))
        index = max(0, min(len(self.document.blocks) - 1, index))
        self.selected_id = self.document.blocks[index].id
        return self.selected_id

    def update_props(self, block_id: str, partial_props: Mapping[str, Any]) -> bool:
        return self._commit(doc_ops.update_block_props(self.document, block_id, partial_props))

    def set_prop(self, block_id: str, path: Sequence[PathPart], value: Any) -> bool:
        """Mise à jour par chemin (["hours", "sunday"], ["features", 0, "title"]…)."""
        block = doc_ops.find_block(self.document, block_id)
        if block is None:
            return False
        return self.update_props(block_id, set_prop_path(block.props, path, value))

    def remove(self, block_id: str) -> bool:
        if self._refuse_locked(block_id, "remove"):
            return False
        return self._commit(doc_ops.remove_block(self.document, block_id))

    def duplicate(self, block_id: str) -> Optional[str]:
        if self._refuse_locked(block_id, "duplicate"):
            return None
        i = doc_ops.index_of(self.document, block_id)
        if not self._commit(doc_ops.duplicate_block(self.document, block_id)):
            return None
        return self.document.blocks[i + 1].id

    def move(self, from_index: int, to_index: int) -> bool:
        return self._commit(doc_ops.move_block(self.document, from_index, to_index))

    def move_by(self, block_id: str, direction: Literal["up", "down"]) -> bool:
        return self._commit(doc_ops.move_block_by(self.document, block_id, direction))

    def toggle_visibility(self, block_id: str) -> bool:
        return self._commit(doc_ops.toggle_visibility(self.document, block_id))

    def toggle_lock(self, block_id: str) -> bool:
        return self._commit(doc_ops.toggle_lock(self.document, block_id))

    def update_global_styles(self, **changes: Any) -> bool:
        if not changes:
            return False
        return self._commit(doc_ops.replace_global_styles(self.document, **changes))

    # ── Historique ────────────────────────────────────────────────────────

    def undo(self) -> bool:
        state = self.history.undo()
        if state is None:
            return False
        self.document = state
        self._touch()
        return True

    def redo(self) -> bool:
        state = self.history.redo()
        if state is None:
            return False
        self.document = state
        self._touch()
        return True

    # ── Drag & drop ───────────────────────────────────────────────────────

    def drag_over(self, pointer_y: float, boxes: Sequence[BlockBox]) -> int:
        return self.drag.drag_over(pointer_y, boxes)

    def drag_leave(self, still_inside: bool = False) -> None:
        self.drag.drag_leave(still_inside)

    def drop(self, payload: DropPayload) -> Optional[str]:
        """Dépose un bloc de la bibliothèque ; renvoie l'id du bloc créé (sélectionné)."""
        result = self.drag.drop(self.document, payload, self.catalog)
        if result is None:
            return None
        self._commit(result.document)
        self.selected_id = result.block_id
        return result.block_id

    # ── Génération externe (IA) ───────────────────────────────────────────

    def apply_generated_props(self, block_id: str, props: Mapping[str, Any]) -> bool:
        """Fusionne des props générées dans un bloc existant."""
        return self.update_props(block_id, props)

    def add_generated_block(self, block_type: str, props: Mapping[str, Any]) -> Optional[str]:
        """Ajoute en fin de document un bloc généré (type connu du catalogue)."""
        if block_type not in self.catalog:
            log.warning("Bloc généré ignoré : type inconnu %r", block_type)
            return None
        self._commit(doc_ops.append_block(self.document, block_type, props))
        return self.document.blocks[-1].id

    # ── Canvas ────────────────────────────────────────────────────────────

    def toggle_preview(self) -> bool:
        self.preview = not self.preview
        return self.preview

    def carousel(self, block_id: str) -> Carousel:
        block = doc_ops.find_block(self.document, block_id)
        items = block.props.get("testimonials") if block else None
        count = len(items) if isinstance(items, list) else 0
        return Carousel(count, self.carousel_indexes.get(block_id, 0))

    def carousel_next(self, block_id: str) -> int:
        self.carousel_indexes[block_id] = self.carousel(block_id).next()
        return self.carousel_indexes[block_id]

    def carousel_previous(self, block_id: str) -> int:
        self.carousel_indexes[block_id] = self.carousel(block_id).previous()
        return self.carousel_indexes[block_id]

    def render(self) -> str:
        return render_canvas(
            self.document,
            selected_id=self.selected_id,
            preview=self.preview,
            carousel_indexes=self.carousel_indexes,
        )

    # ── Sauvegarde ────────────────────────────────────────────────────────

    def site_data(self) -> Dict[str, Any]:
        return dump_site_data(self.document)

    def begin_save(self) -> SaveRequest:
        self._last_sequence += 1
        self.save_status = SaveStatus.SAVING
        return SaveRequest(
            sequence=self._last_sequence,
            revision=self.revision,
            site_data=self.site_data(),
        )

    def complete_save(self, request: SaveRequest, error: Optional[str] = None) -> bool:
        """
        Applique le résultat d'une sauvegarde.

        Renvoie False (résultat ignoré) si une sauvegarde plus récente a déjà
        été appliquée. En cas d'échec le document et l'historique sont intacts.
        """
        if request.sequence <= self._applied_sequence:
            log.info("Résultat de sauvegarde #%d périmé ignoré", request.sequence)
            return False
        self._applied_sequence = request.sequence

        if error:
            self.save_status = SaveStatus.ERROR
            self.notification = f"Save failed: {error}"
            log.warning("Sauvegarde #%d en échec : %s", request.sequence, error)
            return True

        self._saved_revision = request.revision
        self.save_status = SaveStatus.SAVED if request.revision == self.revision else SaveStatus.DIRTY
        self.notification = "Changes saved"
        return True
