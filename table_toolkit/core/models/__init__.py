from __future__ import annotations

"""Document model used by the table commands.

This package exposes the tree positions, the selection, batches and the
change-block model. It is free of UI and I/O code.
"""

from .document_model import Document, DocumentModel, Writer
from .operations import AttributeOperation, Batch, BATCH_TYPES
from .position import Position
from .selection import DocumentSelection

__all__: list[str] = [
    "AttributeOperation",
    "Batch",
    "BATCH_TYPES",
    "Document",
    "DocumentModel",
    "DocumentSelection",
    "Position",
    "Writer",
]
