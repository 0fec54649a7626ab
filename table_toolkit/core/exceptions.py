from __future__ import annotations

"""Exception classes for the table toolkit core.

Expected invalid actions (executing a disabled command, undoing with an empty
history) are not errors and never raise; they are logged and reported through
return values. The classes below cover programming errors such as writing to
a missing element or asking for a command that was never registered.
"""

from typing import Optional


class TableToolkitError(Exception):
    """Base exception for all table toolkit errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.cause = cause


class ModelError(TableToolkitError):
    """Raised when the document model is used incorrectly.

    This includes writing to a ``None`` target, writing to an element that
    does not belong to the document, and creating a batch of unknown type.
    """
    pass


class CommandNotFoundError(TableToolkitError):
    """Raised when a command name is not present in a command collection."""

    def __init__(self, command_name: str) -> None:
        super().__init__(f"Command '{command_name}' is not registered.")
        self.command_name = command_name


class CommandRegistrationError(TableToolkitError):
    """Raised when a command name is registered twice."""

    def __init__(self, command_name: str) -> None:
        super().__init__(f"Command '{command_name}' is already registered.")
        self.command_name = command_name
