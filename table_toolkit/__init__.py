"""Top-level package for Table Toolkit.

Front-ends should only depend on the public API exposed here rather than
importing internal modules directly.
"""

from .core.editor import Editor  # re-export for convenience
from .core.commands import AttributeCommand, TablePropertyCommand

__all__: list[str] = [
    "AttributeCommand",
    "Editor",
    "TablePropertyCommand",
]
