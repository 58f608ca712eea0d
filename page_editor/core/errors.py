"""Exceptions du page_editor."""


class PageEditorError(Exception):
    """Erreur de base du module."""


class CatalogError(PageEditorError):
    """Définition de bloc invalide — défaut de build, jamais causé par une donnée utilisateur."""


class InvalidPayloadError(PageEditorError, ValueError):
    """Payload de drag & drop absent ou illisible."""
