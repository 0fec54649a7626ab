from __future__ import annotations

"""Editor commands: base protocol, attribute commands and table properties."""

from .attribute_command import AttributeCommand, TablePropertyCommand  # noqa: F401
from .base import Command, CommandCollection  # noqa: F401
from .table_properties import TABLE_PROPERTY_COMMANDS, register_table_property_commands  # noqa: F401

__all__: list[str] = [
    "AttributeCommand",
    "Command",
    "CommandCollection",
    "TablePropertyCommand",
    "TABLE_PROPERTY_COMMANDS",
    "register_table_property_commands",
]
