"""
Coalescing of resolved children.

Resolved children are accumulated left to right. Adjacent text values are
joined into a single string; absent values are dropped without breaking a
run of text.
"""

import math
from typing import Any


def is_absent(value: Any) -> bool:
    """
    Check whether a resolved value means "omit this child".

    None, booleans and NaN are absent. Empty strings and zero are text.
    """
    if value is None or isinstance(value, bool):
        return True
    return isinstance(value, float) and math.isnan(value)


def is_text(value: Any) -> bool:
    """Check whether a value is a text primitive (str, int or float, not bool or NaN)."""
    return isinstance(value, str | int | float) and not is_absent(value)


def append_child(resolved_child: Any, resolved_children: list[Any]) -> None:
    """
    Merge a resolved child into the accumulated children in place.

    Params:
        resolved_child: Fully resolved value of the next child
        resolved_children: Accumulator of previously resolved siblings
    """
    if resolved_children and is_text(resolved_children[-1]) and is_text(resolved_child):
        resolved_children[-1] = f"{resolved_children[-1]}{resolved_child}"
    elif not is_absent(resolved_child):
        resolved_children.append(resolved_child)
