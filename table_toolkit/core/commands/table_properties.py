from __future__ import annotations

"""Concrete table property commands.

Each command is a :class:`TablePropertyCommand` with a fixed attribute name
and the converters that attribute needs:

=====================  ===============  ================  ================
Command name           Attribute        Read              Write
=====================  ===============  ================  ================
tableBorderStyle       borderStyle      single value      as is
tableBorderColor       borderColor      single value      as is
tableBorderWidth       borderWidth      single value      default unit
tableWidth             width            as is             default unit
tableHeight            height           as is             default unit
tableBackgroundColor   backgroundColor  as is             as is
tableAlignment         alignment        as is             as is
=====================  ===============  ================  ================
"""

import logging
from typing import TYPE_CHECKING, Dict, Type

from .attribute_command import TablePropertyCommand
from .converters import default_unit_converter, get_single_value

if TYPE_CHECKING:
    from ..editor import Editor

__all__ = [
    "TableBorderStyleCommand",
    "TableBorderColorCommand",
    "TableBorderWidthCommand",
    "TableWidthCommand",
    "TableHeightCommand",
    "TableBackgroundColorCommand",
    "TableAlignmentCommand",
    "TABLE_PROPERTY_COMMANDS",
    "register_table_property_commands",
]

logger = logging.getLogger(__name__)


def _default_unit(editor: "Editor") -> str:
    return editor.config.get("table", {}).get("default_unit", "px")


class TableBorderStyleCommand(TablePropertyCommand):
    def __init__(self, editor: "Editor") -> None:
        super().__init__(editor, "borderStyle", to_view=get_single_value)


class TableBorderColorCommand(TablePropertyCommand):
    def __init__(self, editor: "Editor") -> None:
        super().__init__(editor, "borderColor", to_view=get_single_value)


class TableBorderWidthCommand(TablePropertyCommand):
    """Border width; bare numbers get the configured default unit."""

    def __init__(self, editor: "Editor") -> None:
        super().__init__(
            editor,
            "borderWidth",
            to_view=get_single_value,
            to_model=default_unit_converter(_default_unit(editor)),
        )


class TableWidthCommand(TablePropertyCommand):
    def __init__(self, editor: "Editor") -> None:
        super().__init__(editor, "width", to_model=default_unit_converter(_default_unit(editor)))


class TableHeightCommand(TablePropertyCommand):
    def __init__(self, editor: "Editor") -> None:
        super().__init__(editor, "height", to_model=default_unit_converter(_default_unit(editor)))


class TableBackgroundColorCommand(TablePropertyCommand):
    def __init__(self, editor: "Editor") -> None:
        super().__init__(editor, "backgroundColor")


class TableAlignmentCommand(TablePropertyCommand):
    def __init__(self, editor: "Editor") -> None:
        super().__init__(editor, "alignment")


TABLE_PROPERTY_COMMANDS: Dict[str, Type[TablePropertyCommand]] = {
    "tableBorderStyle": TableBorderStyleCommand,
    "tableBorderColor": TableBorderColorCommand,
    "tableBorderWidth": TableBorderWidthCommand,
    "tableWidth": TableWidthCommand,
    "tableHeight": TableHeightCommand,
    "tableBackgroundColor": TableBackgroundColorCommand,
    "tableAlignment": TableAlignmentCommand,
}


def register_table_property_commands(editor: "Editor") -> None:
    """Create every table property command and add it to ``editor.commands``."""
    for name, command_class in TABLE_PROPERTY_COMMANDS.items():
        editor.commands.add(name, command_class(editor))
    logger.info("Registered %d table property commands", len(TABLE_PROPERTY_COMMANDS))
