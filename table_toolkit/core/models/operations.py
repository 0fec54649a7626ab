from __future__ import annotations

"""Reversible operations and the batches that group them.

An :class:`AttributeOperation` captures both the old and the new value of a
single attribute so it can be reverted without consulting the document. A
:class:`Batch` is the unit of undo: every operation applied while the batch is
active is appended to it, and the undo service reverts a whole batch at once.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from lxml import etree as ET

from ..exceptions import ModelError

__all__ = ["AttributeOperation", "Batch", "BATCH_TYPES"]

#: "default" batches are recorded by the undo service, "transparent" ones are not.
BATCH_TYPES = ("default", "transparent")


@dataclass(frozen=True)
class AttributeOperation:
    """Set (``new_value`` is a str) or remove (``new_value`` is None) one attribute.

    Attributes
    ----------
    element
        Target element.
    key
        Attribute name.
    old_value
        Value before the operation, or None if the attribute was absent.
    new_value
        Value after the operation, or None if the attribute is removed.
    """

    element: ET._Element
    key: str
    old_value: Optional[str]
    new_value: Optional[str]

    def apply(self) -> None:
        if self.new_value is None:
            self.element.attrib.pop(self.key, None)
        else:
            self.element.set(self.key, self.new_value)

    def reversed(self) -> "AttributeOperation":
        return AttributeOperation(self.element, self.key, self.new_value, self.old_value)


@dataclass(eq=False)
class Batch:
    """Group of operations that undo and redo as a single step.

    Batches compare by identity; the same instance passed to several change
    blocks accumulates all of their operations.
    """

    type: str = "default"
    operations: List[AttributeOperation] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.type not in BATCH_TYPES:
            raise ModelError(f"Unknown batch type '{self.type}', expected one of {BATCH_TYPES}")

    @property
    def is_undoable(self) -> bool:
        return self.type == "default"

    def add_operation(self, operation: AttributeOperation) -> None:
        self.operations.append(operation)
