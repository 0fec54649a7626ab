from __future__ import annotations

"""Commands that set or remove one attribute on an enclosing container.

:class:`AttributeCommand` is the generic protocol: on refresh it resolves the
nearest container of a given type around the selection and reads one
attribute from it; on execute it re-resolves the container and writes the
attribute inside a single change block. Read/write normalization is injected
as two pure converters instead of overridden hooks.

Examples
--------
    command = TablePropertyCommand(editor, "width", to_model=default_unit_converter("px"))
    command.refresh()
    if command.is_enabled:
        command.execute(value=100)     # stores width="100px"
        command.execute()              # removes width
"""

import logging
from typing import TYPE_CHECKING, Any, Optional

from lxml import etree as ET

from ..models import Batch, Writer
from ..utils import find_ancestor
from .base import Command
from .converters import ValueConverter, identity

if TYPE_CHECKING:
    from ..editor import Editor

__all__ = ["AttributeCommand", "TablePropertyCommand"]

logger = logging.getLogger(__name__)


class AttributeCommand(Command):
    """Toggle a single attribute on the nearest container of *element_type*.

    Parameters
    ----------
    editor
        Owning editor.
    attribute_name
        Name of the attribute this command reads and writes.
    element_type
        Local name of the container element (e.g. ``"table"``).
    to_view
        Converter applied to the stored value on refresh. Identity by default.
    to_model
        Converter applied to the ``value`` passed to :meth:`execute`.
        Identity by default.

    Notes
    -----
    - ``is_enabled`` is True exactly when a container encloses the first
      selection position (and no force-disable lock is held).
    - The container is looked up again on every refresh and execute; no
      reference is cached between calls.
    """

    def __init__(
        self,
        editor: "Editor",
        attribute_name: str,
        element_type: str,
        to_view: ValueConverter = identity,
        to_model: ValueConverter = identity,
    ) -> None:
        super().__init__(editor)
        self._attribute_name = attribute_name
        self._element_type = element_type
        self._to_view = to_view
        self._to_model = to_model

    @property
    def attribute_name(self) -> str:
        return self._attribute_name

    @property
    def element_type(self) -> str:
        return self._element_type

    def refresh(self) -> None:
        container = self._find_container()
        self.is_enabled = container is not None
        self.value = self._get_value(container)

    def _execute(self, value: Any = None, batch: Optional[Batch] = None) -> None:
        """Set the attribute to *value*, or remove it when *value* is falsy.

        Parameters
        ----------
        value
            New value, passed through ``to_model`` first. A falsy result
            removes the attribute.
        batch
            Existing batch to merge this change into (one undo step for
            several executions). None starts a new batch.
        """
        container = self._find_container()
        if container is None:
            logger.warning(
                "Edit noop: %s no <%s> around the selection", self._attribute_name, self._element_type
            )
            return

        value_to_set = self._to_model(value)
        attribute_name = self._attribute_name
        logger.info("Edit: %s value=%r element=<%s>", attribute_name, value_to_set, self._element_type)

        def apply(writer: Writer) -> None:
            if value_to_set:
                writer.set_attribute(attribute_name, value_to_set, container)
            else:
                writer.remove_attribute(attribute_name, container)

        self.editor.model.enqueue_change(batch, apply)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _find_container(self) -> Optional[ET._Element]:
        selection = self.editor.model.document.selection
        return find_ancestor(self._element_type, selection.get_first_position())

    def _get_value(self, container: Optional[ET._Element]) -> Any:
        if container is None:
            return None
        return self._to_view(container.get(self._attribute_name))


class TablePropertyCommand(AttributeCommand):
    """Attribute command bound to the editor's table element type.

    The element type comes from the editor configuration
    (``table.element_type``, ``"table"`` by default).
    """

    def __init__(
        self,
        editor: "Editor",
        attribute_name: str,
        to_view: ValueConverter = identity,
        to_model: ValueConverter = identity,
    ) -> None:
        super().__init__(
            editor,
            attribute_name,
            editor.config.get("table", {}).get("element_type", "table"),
            to_view=to_view,
            to_model=to_model,
        )
