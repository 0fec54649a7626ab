from __future__ import annotations

"""Pure value converters used by attribute commands.

Each converter is a ``(value) -> value`` function. Commands receive two of
them: ``to_view`` post-processes the stored attribute on refresh, ``to_model``
normalizes the user input on execute.
"""

import math
import re
from typing import Any, Callable, List, Optional

__all__ = [
    "ValueConverter",
    "identity",
    "add_default_unit",
    "default_unit_converter",
    "get_single_value",
]

ValueConverter = Callable[[Any], Any]

_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")


def identity(value: Any) -> Any:
    return value


def add_default_unit(value: Any, default_unit: str) -> Any:
    """Append *default_unit* to a bare number.

    ``100``, ``2.5`` and ``"100"`` become ``"100px"``, ``"2.5px"`` and
    ``"100px"``. A string only counts as a bare number when it is already in
    canonical form, so ``"100.0"``, ``" 100 "`` and ``".5"`` are kept as
    given. Values that carry a unit, keywords, empty values and non-finite
    numbers are returned unchanged.

        >>> add_default_unit("10", "px")
        '10px'
        >>> add_default_unit("10em", "px")
        '10em'
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return value
        return f"{_format_number(value)}{default_unit}"
    if isinstance(value, str) and _NUMBER_RE.match(value):
        canonical = _format_number(float(value))
        if canonical == value:
            return f"{canonical}{default_unit}"
    return value


def default_unit_converter(default_unit: str) -> ValueConverter:
    """Return a ``to_model`` converter bound to *default_unit*."""

    def convert(value: Any) -> Any:
        return add_default_unit(value, default_unit)

    return convert


def get_single_value(value: Optional[str]) -> Optional[str]:
    """Collapse a four-side shorthand to a single value.

    The stored value is 1-4 whitespace-separated tokens in CSS order
    (top right bottom left). When all four sides are equal that value is
    returned, otherwise None.

        >>> get_single_value("solid")
        'solid'
        >>> get_single_value("1px 1px")
        '1px'
        >>> get_single_value("1px 2px") is None
        True
    """
    if value is None:
        return None
    tokens = value.split()
    if not tokens:
        return None
    sides = _expand_sides(tokens)
    if sides is None:
        return None
    top, right, bottom, left = sides
    if top == right == bottom == left:
        return top
    return None


def _expand_sides(tokens: List[str]) -> Optional[List[str]]:
    if len(tokens) == 1:
        return tokens * 4
    if len(tokens) == 2:
        return [tokens[0], tokens[1], tokens[0], tokens[1]]
    if len(tokens) == 3:
        return [tokens[0], tokens[1], tokens[2], tokens[1]]
    if len(tokens) == 4:
        return list(tokens)
    return None


def _format_number(number: float) -> str:
    # 100.0 -> "100", 2.50 -> "2.5"
    if float(number).is_integer():
        return str(int(number))
    return repr(float(number))
