"""
Core pdftree components.

This package provides the fundamental building blocks of a component tree:
the immutable Node, the branch-scoped Context and shared type aliases.
"""

from pdftree.core.context import Context
from pdftree.core.node import Fragment, Node, build, flatten_children
from pdftree.core.types import (
    Attributes,
    Child,
    DocumentDefinition,
    Kind,
    Primitive,
    RenderProp,
    ResolvedValue,
    UpdateContext,
)

__all__ = [
    "Node",
    "Context",
    "Fragment",
    "build",
    "flatten_children",
    "Attributes",
    "Child",
    "DocumentDefinition",
    "Kind",
    "Primitive",
    "RenderProp",
    "ResolvedValue",
    "UpdateContext",
]
