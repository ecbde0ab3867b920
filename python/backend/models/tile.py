"""Tile model: one word on the board."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field

from backend.models.category import Category


@dataclass(eq=False)
class Tile:
    """A word tile belonging to exactly one category.

    ``word`` and ``category`` are read-only.  The ``selected`` and ``matched``
    flags only change through :meth:`select`, :meth:`toggle`,
    :meth:`mark_matched` and :meth:`reset`, which keep a matched tile
    permanently unselected.
    """

    word: str
    category: Category
    _selected: bool = field(default=False, init=False, repr=False)
    _matched: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.word is None or not self.word.strip():
            raise ValueError("Tile word cannot be empty.")
        if self.category is None:
            raise ValueError("Tile category cannot be None.")
        object.__setattr__(self, "word", self.word.strip().upper())

    def __setattr__(self, name: str, value: object) -> None:
        if name in ("word", "category") and hasattr(self, name):
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    # -- flags ----------------------------------------------------------------

    @property
    def selected(self) -> bool:
        return self._selected

    @property
    def matched(self) -> bool:
        return self._matched

    # -- transitions ----------------------------------------------------------

    def select(self, desired: bool = True) -> None:
        """Set the selection flag.  Silently ignored for matched tiles."""
        if not self._matched:
            self._selected = desired

    def toggle(self) -> bool:
        """Flip the selection flag and return the resulting state."""
        if not self._matched:
            self._selected = not self._selected
        return self._selected

    def mark_matched(self) -> None:
        self._matched = True
        self._selected = False

    def reset(self) -> None:
        self._selected = False
        self._matched = False

    # -- identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self.word == other.word and self.category == other.category

    def __hash__(self) -> int:
        return hash((self.word, self.category))

    def __str__(self) -> str:
        return self.word
