"""
Core type definitions for the pdftree resolution engine.

This module contains the type aliases shared by the node builder, the
context model and both resolution drivers.
"""

from collections.abc import Callable, Mapping
from typing import Any

# A symbolic tag such as "text" or "stack", or a component callable.
Kind = str | Callable[..., Any]

Attributes = Mapping[str, Any]

Primitive = str | int | float

# Anything accepted as a child before flattening: nodes, primitives,
# nested groupings, awaitables and render-prop callables.
Child = Any

UpdateContext = Callable[..., None]

# Deferred section produced for header/footer render props.
RenderProp = Callable[..., dict[str, Any]]

ResolvedValue = Primitive | dict[str, Any] | list[Any] | RenderProp | None

DocumentDefinition = dict[str, Any]
