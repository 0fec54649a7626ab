from __future__ import annotations

"""Batch-based undo/redo for a :class:`DocumentModel`.

The service listens to document changes and records every undoable batch. A
batch is one undo step no matter how many change blocks contributed to it, so
passing the same batch to several command executions coalesces them.

Design principles
-----------------
- No UI imports and no I/O.
- Undo/redo never raise for routine conditions; they return False.
- Reverting and reapplying run inside "transparent" batches, which are not
  recorded themselves.
- Redo stack is cleared whenever a new batch is recorded.
- Memory usage controlled by a max_history policy (trim oldest).
"""

import logging
from typing import List

from ..exceptions import TableToolkitError
from ..models import Batch, DocumentModel, Writer

__all__ = ["UndoService"]

logger = logging.getLogger(__name__)


class UndoService:
    """Manage undo/redo stacks of batches for a :class:`DocumentModel`.

    Parameters
    ----------
    model : DocumentModel
        Model whose changes are tracked.
    max_history : int, default=50
        Maximum number of undo steps to keep. Oldest entries are discarded
        when the capacity is exceeded. Values lower than 1 are coerced to 1.

    Examples
    --------
    >>> svc = UndoService(model, max_history=10)
    >>> model.enqueue_change(None, lambda w: w.set_attribute("width", "10px", table))
    >>> svc.undo()
    True
    >>> svc.redo()
    True
    """

    def __init__(self, model: DocumentModel, max_history: int = 50) -> None:
        self._model = model
        self._max_history: int = max(1, int(max_history))
        self._undo_stack: List[Batch] = []
        self._redo_stack: List[Batch] = []
        model.document.on_change(self._on_document_change)

    # --------------------------------------------------------------------- API

    def undo(self) -> bool:
        """Revert the most recent batch. Returns False if nothing was reverted."""
        if not self._undo_stack:
            return False

        batch = self._undo_stack.pop()
        operations = list(batch.operations)

        def revert(writer: Writer) -> None:
            for operation in reversed(operations):
                writer.apply_operation(operation.reversed())

        if not self._run_transparent(revert, "undo"):
            # Put the batch back to keep the stacks consistent
            self._undo_stack.append(batch)
            return False

        self._redo_stack.append(batch)
        self._trim(self._redo_stack)
        logger.info("Undo OK: %d operation(s) reverted", len(operations))
        return True

    def redo(self) -> bool:
        """Reapply the most recently undone batch. Returns False if nothing was reapplied."""
        if not self._redo_stack:
            return False

        batch = self._redo_stack.pop()
        operations = list(batch.operations)

        def reapply(writer: Writer) -> None:
            for operation in operations:
                writer.apply_operation(operation)

        if not self._run_transparent(reapply, "redo"):
            self._redo_stack.append(batch)
            return False

        self._undo_stack.append(batch)
        self._trim(self._undo_stack)
        logger.info("Redo OK: %d operation(s) reapplied", len(operations))
        return True

    def can_undo(self) -> bool:
        """Return True if an undo operation is currently possible."""
        return len(self._undo_stack) > 0

    def can_redo(self) -> bool:
        """Return True if a redo operation is currently possible."""
        return len(self._redo_stack) > 0

    def clear(self) -> None:
        """Clear both undo and redo histories."""
        self._undo_stack.clear()
        self._redo_stack.clear()

    def destroy(self) -> None:
        self._model.document.off_change(self._on_document_change)
        self.clear()

    # --------------------------------------------------------------- Internals

    def _on_document_change(self, batch: Batch) -> None:
        if not batch.is_undoable:
            return
        # A shared batch that is already tracked keeps being one step
        if any(tracked is batch for tracked in self._undo_stack):
            return
        self._undo_stack.append(batch)
        # New user action invalidates redo history
        self._redo_stack.clear()
        self._trim(self._undo_stack)

    def _run_transparent(self, callback, action: str) -> bool:
        try:
            self._model.enqueue_change(self._model.create_batch("transparent"), callback)
        except TableToolkitError as exc:
            logger.warning("%s failed: %s", action.capitalize(), exc)
            return False
        return True

    def _trim(self, stack: List[Batch]) -> None:
        overflow = len(stack) - self._max_history
        if overflow > 0:
            del stack[0:overflow]
