"""
Functional resolution loop.

A node whose kind is a component callable is invoked with its props, the
branch context and the context's update method; the return value replaces
the node. This repeats until the result is no longer a component node, so
chains of components collapse fully before validation or mapping.
"""

import inspect
import logging
from typing import Any

from attrs import frozen

from pdftree.core.context import Context
from pdftree.core.node import Node

logger = logging.getLogger(__name__)


@frozen
class Resolution:
    """
    Result of running the loop.

    Params:
        value: First value that is not a component node
        component: Last component invoked to produce it, None if none ran
    """

    value: Any
    component: Any = None


def component_name(component: Any) -> str:
    """Readable name of a component callable for logs and errors."""
    return getattr(component, "__qualname__", None) or repr(component)


def _invoke(node: Node, context: Context) -> Any:
    logger.debug("Invoking component %s", component_name(node.kind))
    return node.kind(node.props(), context, context.update)


def resolve_component(candidate: Any, context: Context) -> Resolution:
    """
    Expand component nodes without awaiting anything.

    An awaitable returned by a component stops the loop and is handed back
    as the resolved value; the synchronous resolver rejects it.

    Params:
        candidate: Node or value to resolve
        context: Context of the current branch, updated in place by components

    Returns:
        Resolution holding the concrete value
    """
    component = None
    while isinstance(candidate, Node) and candidate.is_composite:
        component = candidate.kind
        candidate = _invoke(candidate, context)
    return Resolution(candidate, component)


async def resolve_component_async(candidate: Any, context: Context) -> Resolution:
    """
    Expand component nodes, awaiting pending values along the way.

    Params:
        candidate: Node, value or awaitable to resolve
        context: Context of the current branch, updated in place by components

    Returns:
        Resolution holding the concrete value
    """
    if inspect.isawaitable(candidate):
        candidate = await candidate

    component = None
    while isinstance(candidate, Node) and candidate.is_composite:
        component = candidate.kind
        candidate = _invoke(candidate, context)
        if inspect.isawaitable(candidate):
            candidate = await candidate
    return Resolution(candidate, component)
