from __future__ import annotations

from dataclasses import dataclass

from backend.models.category import Category


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of checking the current selection."""

    valid: bool
    message: str
    category: Category | None = None
