from __future__ import annotations

"""Document selection.

The selection is a plain list of positions (a collapsed caret is one
position). Listeners registered with :meth:`DocumentSelection.on_change` are
notified synchronously whenever the selection is replaced or cleared.
"""

import logging
from typing import Callable, List, Optional

from lxml import etree as ET

from .position import Position

__all__ = ["DocumentSelection"]

logger = logging.getLogger(__name__)

SelectionListener = Callable[["DocumentSelection"], None]


class DocumentSelection:
    """Current user selection inside a document."""

    def __init__(self) -> None:
        self._positions: List[Position] = []
        self._listeners: List[SelectionListener] = []

    @property
    def is_empty(self) -> bool:
        return not self._positions

    def get_first_position(self) -> Optional[Position]:
        """Return the first selected position, or None when nothing is selected."""
        if not self._positions:
            return None
        return self._positions[0]

    def get_positions(self) -> List[Position]:
        return list(self._positions)

    def set_to(self, element: ET._Element, offset: int = 0) -> None:
        """Collapse the selection to *offset* inside *element*."""
        self.set_positions([Position(element, offset)])

    def set_position(self, position: Position) -> None:
        self.set_positions([position])

    def set_positions(self, positions: List[Position]) -> None:
        self._positions = list(positions)
        logger.debug("Selection changed: %d position(s)", len(self._positions))
        self._fire_change()

    def clear(self) -> None:
        if not self._positions:
            return
        self._positions = []
        logger.debug("Selection cleared")
        self._fire_change()

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def on_change(self, listener: SelectionListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def off_change(self, listener: SelectionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _fire_change(self) -> None:
        for listener in list(self._listeners):
            listener(self)
