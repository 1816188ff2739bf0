"""
Node builder for pdftree component trees.

Nodes are immutable (kind, attributes, children) triples. A kind is either a
symbolic tag understood by the intrinsic mapper ("text", "stack", ...) or a
component callable that the resolution loop expands into other nodes.
"""

from collections.abc import Iterable, Mapping
from types import GeneratorType, MappingProxyType
from typing import Any

from attrs import field, frozen

from pdftree.core.types import Child, Kind

_GROUPINGS = (list, tuple, GeneratorType)


def flatten_children(children: Iterable[Child]) -> tuple[Child, ...]:
    """
    Flatten arbitrarily nested child groupings into one ordered tuple.

    Lists, tuples and generators are expanded recursively; empty groupings
    vanish. Nodes, strings, mappings and every other value are kept as-is.

    Params:
        children: Child values, possibly nested in groupings

    Returns:
        Flat tuple of children in source order
    """
    flat: list[Child] = []
    stack = [iter(children)]
    while stack:
        for child in stack[-1]:
            if isinstance(child, _GROUPINGS):
                stack.append(iter(child))
                break
            flat.append(child)
        else:
            stack.pop()
    return tuple(flat)


def _freeze_attributes(attributes: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(attributes or {}))


@frozen
class Node:
    """
    Immutable element of a component tree.

    Params:
        kind: Symbolic tag or component callable
        attributes: Renderer attributes, passed through opaquely
        children: Child values, flattened on construction
    """

    kind: Kind
    attributes: Mapping[str, Any] = field(factory=dict, converter=_freeze_attributes)
    children: tuple[Child, ...] = field(factory=tuple, converter=flatten_children)

    @property
    def is_composite(self) -> bool:
        """True when the kind is a component callable rather than a tag."""
        return not isinstance(self.kind, str)

    def props(self) -> dict[str, Any]:
        """Attributes merged with the child list, as handed to a component."""
        return {**self.attributes, "children": list(self.children)}


def build(kind: Kind, attributes: Mapping[str, Any] | None = None, *children: Child) -> Node:
    """
    Construct a node from a kind, optional attributes and children.

    No validation is performed; nested child groupings are flattened.

    Params:
        kind: Symbolic tag or component callable
        attributes: Attribute mapping, None for no attributes
        *children: Child values or groupings of child values

    Returns:
        The constructed Node
    """
    return Node(kind, attributes, children)


def Fragment(props: Mapping[str, Any], *_: Any) -> Node:  # noqa: N802
    """Group children under a plain stack."""
    return build("stack", None, props.get("children", []))
