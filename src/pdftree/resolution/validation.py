"""
Structural validation of resolved nodes.

Only <header>, <content> and <footer> may appear directly under the
<document>, and only there. The <document> itself may only be the root.
"""

import logging
from enum import Enum
from typing import Any

from pdftree.core.node import Node
from pdftree.exceptions import (
    ErrorContext,
    ErrorLevel,
    ResolutionDepthError,
    RootElementError,
    StructuralPlacementError,
)
from pdftree.resolution.merging import is_absent, is_text

logger = logging.getLogger(__name__)

DOCUMENT_KIND = "document"

TOP_LEVEL_KINDS = frozenset({"header", "content", "footer"})

# Section kinds that accept a single page callback as their only child
RENDER_PROP_KINDS = frozenset({"header", "footer"})


class Placement(Enum):
    """Outcome of validating a fully resolved value."""

    ABSENT = "absent"
    TEXT = "text"
    TOP_LEVEL = "top_level"
    NESTED = "nested"


def describe_kind(value: Any) -> str:
    """Name a resolved value for error messages."""
    if isinstance(value, Node):
        return value.kind if isinstance(value.kind, str) else repr(value.kind)
    if is_text(value):
        return f"text {value!r}"
    return type(value).__name__


def validate_resolved(
    resolved: Any,
    top_level: bool,
    path: tuple[str, ...] = (),
    component: Any = None,
    error_level: ErrorLevel = ErrorLevel.USER,
) -> Placement:
    """
    Check that a fully resolved value may appear in its position.

    Params:
        resolved: Output of the functional resolution loop
        top_level: True when the value sits immediately under the document
        path: Concrete kinds leading to the value, used for error locations
        component: Component callable that produced the value, if any
        error_level: Detail of the location attached to raised errors

    Returns:
        Placement of the value

    Raises:
        RootElementError: When a document appears anywhere but the root
        StructuralPlacementError: When a section kind is nested, or anything
            other than a section kind sits directly under the document
    """
    if is_absent(resolved):
        return Placement.ABSENT

    kind = describe_kind(resolved)

    def location() -> ErrorContext:
        return ErrorContext.for_component(kind, path + (kind,), component)

    if not isinstance(resolved, Node):
        if top_level:
            raise StructuralPlacementError(kind, nested=False, context=location(), error_level=error_level)
        if is_text(resolved):
            return Placement.TEXT
        logger.debug("Dropping unrecognized child of type %s", kind)
        return Placement.ABSENT

    if resolved.kind == DOCUMENT_KIND:
        raise RootElementError(context=location(), error_level=error_level)

    if not top_level and resolved.kind in TOP_LEVEL_KINDS:
        raise StructuralPlacementError(kind, nested=True, context=location(), error_level=error_level)

    if top_level and resolved.kind not in TOP_LEVEL_KINDS:
        raise StructuralPlacementError(kind, nested=False, context=location(), error_level=error_level)

    return Placement.TOP_LEVEL if top_level else Placement.NESTED


def check_depth(
    depth: int,
    max_depth: int,
    path: tuple[str, ...],
    error_level: ErrorLevel = ErrorLevel.USER,
) -> None:
    """
    Guard against pathologically deep trees.

    Raises:
        ResolutionDepthError: When depth exceeds max_depth
    """
    if depth > max_depth:
        context = ErrorContext(kind=path[-1] if path else None, path=path)
        raise ResolutionDepthError(max_depth, context=context, error_level=error_level)


def is_render_prop(node: Node) -> bool:
    """True when a header/footer holds a single page callback instead of content."""
    return (
        node.kind in RENDER_PROP_KINDS
        and len(node.children) == 1
        and callable(node.children[0])
        and not isinstance(node.children[0], Node)
    )
