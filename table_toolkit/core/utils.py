from __future__ import annotations

"""Simple reusable tree helpers.

These helpers are side-effect-free and contain no GUI or disk I/O.
"""

from typing import Optional, Union

from lxml import etree as ET

from .models.position import Position

__all__ = ["local_name", "find_ancestor"]


def local_name(element: ET._Element) -> Optional[str]:
    """Return the tag of *element* without its namespace.

    Comments, processing instructions and entities have no element name and
    return None.
    """
    tag = element.tag
    if not isinstance(tag, str):
        return None
    return ET.QName(tag).localname


def find_ancestor(
    element_type: str,
    position_or_element: Union[Position, ET._Element, None],
) -> Optional[ET._Element]:
    """Return the nearest ancestor named *element_type*, or None.

    For a :class:`Position` the walk starts at the element containing the
    position (``position.parent``), so a caret placed directly inside a
    ``<table>`` resolves to that table. For an element the walk starts at its
    parent. Namespaces are ignored when comparing names.

    Examples:
        >>> find_ancestor("table", Position(cell_paragraph))
        <Element table>
        >>> find_ancestor("table", None) is None
        True
    """
    if position_or_element is None:
        return None

    if isinstance(position_or_element, Position):
        node = position_or_element.parent
    else:
        node = position_or_element.getparent()

    while node is not None:
        if local_name(node) == element_type:
            return node
        node = node.getparent()
    return None
