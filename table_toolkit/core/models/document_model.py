from __future__ import annotations

"""In-memory document model with scoped, batched change blocks.

All mutations of the tree go through a :class:`Writer` handed to a change
block (:meth:`DocumentModel.change` or :meth:`DocumentModel.enqueue_change`).
Blocks never interleave: a block enqueued while another one runs is executed
after it, in order, each with its own batch. When a block raises, the
operations it applied are reverted before the error propagates, so readers
never observe a half-applied block.

Examples
--------
    model = DocumentModel(root)
    model.enqueue_change(None, lambda writer: writer.set_attribute("width", "100px", table))
"""

from collections import deque
import logging
from typing import Any, Callable, Deque, List, Optional, Tuple

from lxml import etree as ET

from ..exceptions import ModelError
from .operations import AttributeOperation, Batch
from .selection import DocumentSelection

__all__ = ["Document", "DocumentModel", "Writer"]

logger = logging.getLogger(__name__)

ChangeCallback = Callable[["Writer"], Any]
ChangeListener = Callable[[Batch], None]


class Document:
    """The document tree, its selection and its change notifications.

    Attributes
    ----------
    root
        Root lxml element of the document.
    selection
        The live :class:`DocumentSelection`.
    version
        Incremented once per applied operation.
    """

    def __init__(self, root: ET._Element) -> None:
        self.root = root
        self.selection = DocumentSelection()
        self.version: int = 0
        self._listeners: List[ChangeListener] = []

    def contains(self, element: ET._Element) -> bool:
        """Return True if *element* is attached to this document's tree."""
        # Removed elements keep their lxml document, so walk the parents instead
        node = element
        parent = node.getparent()
        while parent is not None:
            node = parent
            parent = node.getparent()
        return node is self.root

    def on_change(self, listener: ChangeListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def off_change(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _fire_change(self, batch: Batch) -> None:
        for listener in list(self._listeners):
            listener(batch)


class Writer:
    """Mutation API available only inside a change block."""

    def __init__(self, model: "DocumentModel", batch: Batch) -> None:
        self._model = model
        self.batch = batch

    def set_attribute(self, key: str, value: Any, element: Optional[ET._Element]) -> None:
        """Set attribute *key* on *element*. Non-string values are stringified."""
        target = self._check_target(element, "set_attribute")
        new_value = value if isinstance(value, str) else str(value)
        old_value = target.get(key)
        if old_value == new_value:
            return
        self._apply(AttributeOperation(target, key, old_value, new_value))

    def remove_attribute(self, key: str, element: Optional[ET._Element]) -> None:
        """Remove attribute *key* from *element*; removing a missing key is a no-op."""
        target = self._check_target(element, "remove_attribute")
        old_value = target.get(key)
        if old_value is None:
            return
        self._apply(AttributeOperation(target, key, old_value, None))

    def apply_operation(self, operation: AttributeOperation) -> None:
        """Bring ``operation.key`` on ``operation.element`` to ``operation.new_value``.

        The old value is re-read from the element, so the recorded operation
        stays exact even if the stored ``old_value`` is stale.
        """
        target = self._check_target(operation.element, "apply_operation")
        current = target.get(operation.key)
        if current == operation.new_value:
            return
        self._apply(AttributeOperation(target, operation.key, current, operation.new_value))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _check_target(self, element: Optional[ET._Element], action: str) -> ET._Element:
        if self._model._current_writer is not self:
            raise ModelError(f"Writer.{action} called outside of its change block")
        if element is None:
            raise ModelError(f"Writer.{action} requires a target element, got None")
        if not self._model.document.contains(element):
            raise ModelError(f"Writer.{action} target <{element.tag}> is not part of the document")
        return element

    def _apply(self, operation: AttributeOperation) -> None:
        operation.apply()
        self.batch.add_operation(operation)
        self._model.document.version += 1
        logger.debug(
            "Operation applied: %s=%r -> %r on <%s>",
            operation.key,
            operation.old_value,
            operation.new_value,
            operation.element.tag,
        )


class DocumentModel:
    """Owns the :class:`Document` and serializes all changes made to it."""

    def __init__(self, root: ET._Element) -> None:
        self.document = Document(root)
        self._pending_changes: Deque[Tuple[Batch, ChangeCallback]] = deque()
        self._current_writer: Optional[Writer] = None

    def create_batch(self, batch_type: str = "default") -> Batch:
        return Batch(batch_type)

    def change(self, callback: ChangeCallback) -> Any:
        """Run *callback* with a writer and return its result.

        Outside of any block a new default batch is used. Inside a running
        block the callback executes immediately with the current writer, so
        its operations join the current batch. Called between two queued
        blocks (e.g. from a change listener), the callback is queued with a
        new batch and None is returned.
        """
        if self._current_writer is not None:
            return callback(self._current_writer)
        self._pending_changes.append((Batch(), callback))
        if len(self._pending_changes) == 1:
            return self._run_pending_changes()[0]
        return None

    def enqueue_change(self, batch: Optional[Batch], callback: ChangeCallback) -> None:
        """Queue *callback* to run in its own block using *batch*.

        A ``None`` batch means a new default batch. If no block is running the
        callback executes right away; otherwise it runs after the current one.
        """
        if batch is None:
            batch = Batch()
        self._pending_changes.append((batch, callback))
        if len(self._pending_changes) == 1:
            self._run_pending_changes()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _run_pending_changes(self) -> List[Any]:
        results: List[Any] = []
        try:
            while self._pending_changes:
                batch, callback = self._pending_changes[0]
                results.append(self._run_block(batch, callback))
                self._pending_changes.popleft()
        except Exception:
            self._pending_changes.clear()
            raise
        return results

    def _run_block(self, batch: Batch, callback: ChangeCallback) -> Any:
        applied_before = len(batch.operations)
        writer = Writer(self, batch)
        self._current_writer = writer
        try:
            result = callback(writer)
        except Exception as exc:
            self._rollback(batch, applied_before)
            logger.error("Change block failed, %s reverted: %s", type(exc).__name__, exc)
            raise
        finally:
            self._current_writer = None

        if len(batch.operations) > applied_before:
            self.document._fire_change(batch)
        return result

    def _rollback(self, batch: Batch, applied_before: int) -> None:
        applied = batch.operations[applied_before:]
        for operation in reversed(applied):
            operation.reversed().apply()
            self.document.version += 1
        del batch.operations[applied_before:]
