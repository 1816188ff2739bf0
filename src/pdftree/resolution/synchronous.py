"""
Synchronous child resolver.

A variant of the asynchronous resolver that guarantees nothing below it
suspends. Content produced by header/footer render props is resolved here,
because the layout renderer calls them synchronously for every page.
"""

import inspect
import logging
from typing import Any

from pdftree.core.context import Context
from pdftree.core.node import Node
from pdftree.core.types import RenderProp, ResolvedValue
from pdftree.exceptions import AsyncComponentError, ErrorContext
from pdftree.options import DEFAULT_OPTIONS, ResolveOptions
from pdftree.resolution.functional import Resolution, component_name, resolve_component
from pdftree.resolution.intrinsics import map_intrinsic
from pdftree.resolution.merging import append_child
from pdftree.resolution.validation import (
    Placement,
    check_depth,
    is_render_prop,
    validate_resolved,
)

logger = logging.getLogger(__name__)


def _reject_awaitable(
    value: Any, path: tuple[str, ...], component: Any, options: ResolveOptions
) -> None:
    if not inspect.isawaitable(value):
        return
    # Close pending coroutines so they are not reported as never awaited
    close = getattr(value, "close", None)
    if callable(close):
        close()
    context = ErrorContext.for_component(None, path, component)
    raise AsyncComponentError(context=context, error_level=options.error_level)


def resolve_component_sync(
    tag: Any,
    context: Context,
    path: tuple[str, ...] = (),
    options: ResolveOptions = DEFAULT_OPTIONS,
) -> Resolution:
    """
    Run the functional resolution loop, failing on any suspension.

    Params:
        tag: Node or value to resolve
        context: Context of the current branch
        path: Concrete kinds leading to the value, used for error locations
        options: Resolution options

    Returns:
        Resolution holding the concrete value

    Raises:
        AsyncComponentError: If the value or a component's result is awaitable
    """
    _reject_awaitable(tag, path, None, options)
    resolution = resolve_component(tag, context)
    _reject_awaitable(resolution.value, path, resolution.component, options)
    return resolution


def make_render_prop(
    node: Node,
    context: Context,
    path: tuple[str, ...],
    depth: int,
    options: ResolveOptions,
) -> RenderProp:
    """
    Defer a header/footer page callback until the renderer calls it.

    The returned function passes its arguments (current page, page count,
    page size) to the stored callback and resolves the callback's result
    synchronously against a fresh copy of the branch context.

    Params:
        node: Header or footer node whose only child is the page callback
        context: Branch context at the time the wrapper is produced
        path: Concrete kinds leading to the node
        depth: Depth of the node
        options: Resolution options

    Returns:
        Callable producing the section's renderer shape for one page
    """
    render = node.children[0]
    attributes = dict(node.attributes)
    snapshot = context.branch()
    section_path = path + (node.kind,)
    logger.debug("Deferring <%s> render prop %s", node.kind, component_name(render))

    def render_section(*page_args: Any) -> dict[str, Any]:
        resolved = resolve_children_sync(
            render(*page_args),
            snapshot.branch(),
            path=section_path,
            depth=depth + 1,
            options=options,
        )
        stack: list[Any] = []
        append_child(resolved, stack)
        return {"stack": stack, **attributes}

    return render_section


def resolve_children_sync(
    tag: Any,
    parent_context: Context,
    top_level: bool = False,
    *,
    path: tuple[str, ...] = (),
    depth: int = 0,
    options: ResolveOptions = DEFAULT_OPTIONS,
) -> ResolvedValue:
    """
    Resolve a node and its subtree without permitting suspension.

    Children are resolved depth-first, left to right, each against its own
    branch of the context, coalesced, and mapped to the renderer shape.

    Params:
        tag: Node or value to resolve
        parent_context: Context of this branch; components may update it
        top_level: True when the node sits immediately under the document
        path: Concrete kinds leading to the node
        depth: Nesting depth of the node
        options: Resolution options

    Returns:
        The resolved value, None when absent

    Raises:
        AsyncComponentError: If anything in the subtree is awaitable
        StructuralPlacementError: On section kinds in the wrong position
        RootElementError: On a nested document
        ResolutionDepthError: When the subtree exceeds options.max_depth
    """
    resolution = resolve_component_sync(tag, parent_context, path, options)
    resolved = resolution.value

    placement = validate_resolved(
        resolved, top_level, path, resolution.component, options.error_level
    )
    if placement is Placement.ABSENT:
        return None
    if placement is Placement.TEXT:
        return resolved

    child_path = path + (resolved.kind,)
    check_depth(depth, options.max_depth, child_path, options.error_level)

    if is_render_prop(resolved):
        return make_render_prop(resolved, parent_context, path, depth, options)

    resolved_children: list[Any] = []
    for child in resolved.children:
        resolved_child = resolve_children_sync(
            child,
            parent_context.branch(),
            path=child_path,
            depth=depth + 1,
            options=options,
        )
        append_child(resolved_child, resolved_children)

    return map_intrinsic(resolved.kind, resolved.attributes, resolved_children)
