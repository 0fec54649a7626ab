from __future__ import annotations

"""Editor-level services."""

from .undo_service import UndoService  # noqa: F401

__all__: list[str] = [
    "UndoService",
]
