from __future__ import annotations

"""Command base class and the command registry.

A command is a small stateful object bound to an editor. It exposes two
derived fields, ``is_enabled`` and ``value``, recomputed by :meth:`refresh`
whenever the document or its selection changes, and performs its action in
:meth:`execute`.

Design principles:
- ``execute`` on a disabled command is a logged no-op, never an error.
- Commands can be force-disabled by any number of named locks (read-only
  mode, modal dialogs, ...). The command stays disabled until every lock is
  cleared.
- Commands own their listeners and release them in :meth:`destroy`.
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, List, Optional, Set

from ..exceptions import CommandNotFoundError, CommandRegistrationError
from ..models import Batch, DocumentSelection

if TYPE_CHECKING:
    from ..editor import Editor

__all__ = ["Command", "CommandCollection"]

logger = logging.getLogger(__name__)


class Command:
    """Base class for editor commands.

    Subclasses override :meth:`refresh` to compute ``is_enabled``/``value``
    and :meth:`_execute` to perform the action. Callers use :meth:`execute`,
    which applies the enablement guard.

    Parameters
    ----------
    editor
        Owning editor; only ``editor.model`` is used by the base class.
    """

    def __init__(self, editor: "Editor") -> None:
        self.editor = editor
        self.value: Any = None
        self._is_enabled: bool = False
        self._disable_locks: Set[str] = set()

        document = editor.model.document
        document.on_change(self._on_document_change)
        document.selection.on_change(self._on_selection_change)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def is_enabled(self) -> bool:
        return self._is_enabled and not self._disable_locks

    @is_enabled.setter
    def is_enabled(self, enabled: bool) -> None:
        self._is_enabled = bool(enabled)

    def force_disabled(self, lock_id: str) -> None:
        """Disable the command until :meth:`clear_force_disabled` is called with *lock_id*."""
        self._disable_locks.add(lock_id)
        logger.debug("%s force-disabled by '%s'", type(self).__name__, lock_id)

    def clear_force_disabled(self, lock_id: str) -> None:
        self._disable_locks.discard(lock_id)
        self.refresh()

    def refresh(self) -> None:
        """Recompute ``is_enabled`` and ``value``. The base command is always enabled."""
        self.is_enabled = True

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------
    def execute(self, **options: Any) -> Any:
        """Run the command if it is enabled; otherwise do nothing."""
        if not self.is_enabled:
            logger.warning("Edit noop: %s is disabled, execute ignored", type(self).__name__)
            return None
        return self._execute(**options)

    def _execute(self, **options: Any) -> Any:
        raise NotImplementedError

    def destroy(self) -> None:
        """Stop listening to the document and its selection."""
        document = self.editor.model.document
        document.off_change(self._on_document_change)
        document.selection.off_change(self._on_selection_change)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def _on_document_change(self, batch: Batch) -> None:
        self.refresh()

    def _on_selection_change(self, selection: DocumentSelection) -> None:
        self.refresh()


class CommandCollection:
    """Name -> command registry owned by an editor.

    *on_add* is called with every newly registered command before its first
    refresh.
    """

    def __init__(self, on_add: Optional[Callable[[str, Command], None]] = None) -> None:
        self._commands: Dict[str, Command] = {}
        self._on_add = on_add

    def add(self, name: str, command: Command) -> None:
        """Register *command* under *name* and compute its initial state."""
        if name in self._commands:
            raise CommandRegistrationError(name)
        self._commands[name] = command
        if self._on_add is not None:
            self._on_add(name, command)
        command.refresh()
        logger.debug("Command registered: %s", name)

    def get(self, name: str) -> Optional[Command]:
        return self._commands.get(name)

    def execute(self, name: str, **options: Any) -> Any:
        command = self._commands.get(name)
        if command is None:
            raise CommandNotFoundError(name)
        return command.execute(**options)

    def names(self) -> List[str]:
        return list(self._commands)

    def commands(self) -> List[Command]:
        return list(self._commands.values())

    def destroy(self) -> None:
        for command in self._commands.values():
            command.destroy()
        self._commands.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)
