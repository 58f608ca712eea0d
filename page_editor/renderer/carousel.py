"""Curseur du carousel de témoignages."""


class Carousel:
    """
    Position courante dans une liste de `count` éléments.

    L'index est toujours ramené dans [0, count - 1] ; previous()/next()
    saturent aux bornes (pas de bouclage).
    """

    def __init__(self, count: int, index: int = 0):
        self.count = max(0, int(count))
        self.index = self._clamp(index)

    def _clamp(self, index: int) -> int:
        if self.count == 0:
            return 0
        return max(0, min(self.count - 1, int(index)))

    @property
    def has_previous(self) -> bool:
        return self.index > 0

    @property
    def has_next(self) -> bool:
        return self.index < self.count - 1

    @property
    def has_controls(self) -> bool:
        return self.count >= 2

    def previous(self) -> int:
        self.index = self._clamp(self.index - 1)
        return self.index

    def next(self) -> int:
        self.index = self._clamp(self.index + 1)
        return self.index

    def __repr__(self) -> str:
        return f"Carousel(count={self.count}, index={self.index})"
