from __future__ import annotations

"""Editor: the owner of a document model, its undo history and its commands.

The editor wires the pieces together the way a host application expects:

    editor = Editor(root)
    editor.model.document.selection.set_to(cell_paragraph)
    editor.execute("tableWidth", value=200)
    editor.undo.undo()

Commands are created once at construction (table property commands are
registered by default) and destroyed with the editor.
"""

import logging
from typing import Any, Dict, Optional

from lxml import etree as ET

from table_toolkit.config import ConfigManager

from .commands import Command, CommandCollection, register_table_property_commands
from .models import DocumentModel
from .services import UndoService

logger = logging.getLogger(__name__)

__all__ = ["Editor"]

READ_ONLY_LOCK = "read-only"


class Editor:
    """Document editor hosting table property commands.

    Parameters
    ----------
    root
        Root lxml element of the edited document.
    config
        Editor configuration. Defaults to the ``editor`` section loaded by
        :class:`ConfigManager` (``editor.yml``).
    register_defaults
        When True (default), table property commands are registered.
    """

    def __init__(
        self,
        root: ET._Element,
        config: Optional[Dict[str, Any]] = None,
        register_defaults: bool = True,
    ) -> None:
        self.config: Dict[str, Any] = config if config is not None else ConfigManager().get_editor_config()
        self.model = DocumentModel(root)
        self.undo = UndoService(self.model, max_history=self.config.get("undo", {}).get("max_history", 50))
        self._read_only = False
        self.commands = CommandCollection(on_add=self._on_command_added)

        if register_defaults:
            register_table_property_commands(self)

        logger.info("Editor initialized with %d command(s)", len(self.commands))

    @property
    def is_read_only(self) -> bool:
        return self._read_only

    @is_read_only.setter
    def is_read_only(self, read_only: bool) -> None:
        """Force-disable (or re-enable) every registered command."""
        self._read_only = bool(read_only)
        for command in self.commands.commands():
            if self._read_only:
                command.force_disabled(READ_ONLY_LOCK)
            else:
                command.clear_force_disabled(READ_ONLY_LOCK)

    def _on_command_added(self, name: str, command: Command) -> None:
        if self._read_only:
            command.force_disabled(READ_ONLY_LOCK)

    def execute(self, command_name: str, **options: Any) -> Any:
        """Execute a registered command by name. Raises CommandNotFoundError if unknown."""
        return self.commands.execute(command_name, **options)

    def destroy(self) -> None:
        """Release every command and the undo history."""
        self.commands.destroy()
        self.undo.destroy()
        logger.info("Editor destroyed")
