"""
Historique d'édition — pile linéaire de snapshots complets + curseur.

Snapshots complets (pas de diffs), copiés en profondeur à l'enregistrement.
"""
import logging
import os
from typing import List, Optional

from .schemas import PageDocument

log = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = int(os.getenv("PAGE_EDITOR_HISTORY_LIMIT", "100"))


class EditHistory:
    """
    H = [s0, s1, …], curseur c avec 0 <= c <= len(H) - 1.

    record() coupe les entrées redo au-delà du curseur (pas d'historique
    en arbre). undo()/redo() renvoient None quand impossible.
    """

    def __init__(self, initial: PageDocument, max_depth: Optional[int] = DEFAULT_MAX_DEPTH):
        if max_depth is not None and max_depth < 1:
            raise ValueError("max_depth doit être >= 1")
        self.max_depth = max_depth
        self._snapshots: List[PageDocument] = [_snapshot(initial)]
        self._cursor = 0

    # ── État ──────────────────────────────────────────────────────────────

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current(self) -> PageDocument:
        return self._snapshots[self._cursor]

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def __len__(self) -> int:
        return len(self._snapshots)

    # ── Transitions ───────────────────────────────────────────────────────

    def record(self, state: PageDocument) -> None:
        """Ajoute un état après une mutation validée (discard des redo)."""
        del self._snapshots[self._cursor + 1:]
        self._snapshots.append(_snapshot(state))
        self._cursor = len(self._snapshots) - 1

        if self.max_depth is not None and len(self._snapshots) > self.max_depth:
            overflow = len(self._snapshots) - self.max_depth
            del self._snapshots[:overflow]
            self._cursor -= overflow
            log.debug("Historique : %d snapshot(s) ancien(s) évincé(s)", overflow)

    def undo(self) -> Optional[PageDocument]:
        if not self.can_undo:
            return None
        self._cursor -= 1
        return _snapshot(self.current)

    def redo(self) -> Optional[PageDocument]:
        if not self.can_redo:
            return None
        self._cursor += 1
        return _snapshot(self.current)

    def reset(self, state: PageDocument) -> None:
        """Repart d'un état unique (chargement d'un autre document)."""
        self._snapshots = [_snapshot(state)]
        self._cursor = 0


def _snapshot(document: PageDocument) -> PageDocument:
    return document.model_copy(deep=True)
