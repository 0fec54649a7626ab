from __future__ import annotations

"""Positions inside the lxml document tree."""

from dataclasses import dataclass

from lxml import etree as ET

__all__ = ["Position"]


@dataclass(frozen=True)
class Position:
    """A location inside an element, expressed as ``(parent, offset)``.

    Attributes
    ----------
    parent
        The element that contains the position.
    offset
        Child index inside *parent*. ``0`` is before the first child.
    """

    parent: ET._Element
    offset: int = 0

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"Position offset must be >= 0, got {self.offset}")

    @classmethod
    def before(cls, element: ET._Element) -> "Position":
        """Return the position directly before *element* in its parent."""
        parent = element.getparent()
        if parent is None:
            raise ValueError("Cannot create a position before the root element")
        return cls(parent, parent.index(element))
