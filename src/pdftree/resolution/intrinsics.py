"""
Intrinsic mapping from concrete nodes to document-definition shapes.

This is where tree nodes become the nested objects the layout renderer
understands. Each handler receives the node's attributes and its already
resolved children; handlers never recurse and have no side effects.
Attributes a handler does not consume are passed through untouched.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pdftree.core.types import ResolvedValue
from pdftree.exceptions import RootElementError
from pdftree.resolution.merging import is_text

logger = logging.getLogger(__name__)

IntrinsicHandler = Callable[[Mapping[str, Any], list[Any]], ResolvedValue]

TABLE_ATTRIBUTES = ("headerRows", "widths")


def _omit(attributes: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    excluded = set(keys)
    return {key: value for key, value in attributes.items() if key not in excluded}


def _pick(attributes: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    return {key: attributes[key] for key in keys if key in attributes}


def _unwrap_text(children: list[Any]) -> Any:
    if len(children) == 1 and is_text(children[0]):
        return children[0]
    return children


def _wrap(key: str) -> IntrinsicHandler:
    def handler(attributes: Mapping[str, Any], children: list[Any]) -> dict[str, Any]:
        return {key: children, **attributes}

    handler.__name__ = f"_{key}"
    return handler


def _from_attribute(key: str, source: str) -> IntrinsicHandler:
    def handler(attributes: Mapping[str, Any], children: list[Any]) -> dict[str, Any]:
        return {key: attributes.get(source), **_omit(attributes, [source])}

    handler.__name__ = f"_{key}"
    return handler


def _text(attributes: Mapping[str, Any], children: list[Any]) -> dict[str, Any]:
    return {"text": _unwrap_text(children), **attributes}


def _table(attributes: Mapping[str, Any], children: list[Any]) -> dict[str, Any]:
    return {
        "table": {"body": children, **_pick(attributes, TABLE_ATTRIBUTES)},
        **_omit(attributes, TABLE_ATTRIBUTES),
    }


def _row(attributes: Mapping[str, Any], children: list[Any]) -> list[Any]:
    return children


def _document(attributes: Mapping[str, Any], children: list[Any]) -> None:
    raise RootElementError()


_stack = _wrap("stack")

_HANDLERS: dict[str, IntrinsicHandler] = {
    "header": _stack,
    "content": _stack,
    "footer": _stack,
    "stack": _stack,
    "column": _stack,
    "cell": _stack,
    "text": _text,
    "columns": _wrap("columns"),
    "image": _from_attribute("image", "src"),
    "svg": _from_attribute("svg", "content"),
    "qr": _from_attribute("qr", "content"),
    "table": _table,
    "row": _row,
    "ul": _wrap("ul"),
    "ol": _wrap("ol"),
    "document": _document,
}

INTRINSIC_KINDS = frozenset(_HANDLERS)


def map_intrinsic(kind: str, attributes: Mapping[str, Any], children: list[Any]) -> ResolvedValue:
    """
    Convert a concrete node into its document-definition shape.

    Params:
        kind: Symbolic kind of the node
        attributes: Node attributes, passed through opaquely
        children: Resolved and coalesced children

    Returns:
        The renderer shape, or None for unrecognized kinds

    Raises:
        RootElementError: For the document kind, which is only valid as root
    """
    handler = _HANDLERS.get(kind)
    if handler is None:
        logger.debug("Unrecognized kind %r resolves to nothing", kind)
        return None
    return handler(attributes, children)
