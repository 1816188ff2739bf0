"""
Asynchronous child resolver.

Components may be coroutine functions and children may be awaitables; both
are awaited before their kind is examined. Siblings are still resolved
strictly one after another, in tree order, so text coalescing and context
isolation behave exactly as in the synchronous resolver.
"""

from typing import Any

from pdftree.core.context import Context
from pdftree.core.types import ResolvedValue
from pdftree.options import DEFAULT_OPTIONS, ResolveOptions
from pdftree.resolution.functional import resolve_component_async
from pdftree.resolution.intrinsics import map_intrinsic
from pdftree.resolution.merging import append_child
from pdftree.resolution.synchronous import make_render_prop
from pdftree.resolution.validation import (
    Placement,
    check_depth,
    is_render_prop,
    validate_resolved,
)


async def resolve_children(
    tag: Any,
    parent_context: Context,
    top_level: bool = False,
    *,
    path: tuple[str, ...] = (),
    depth: int = 0,
    options: ResolveOptions = DEFAULT_OPTIONS,
) -> ResolvedValue:
    """
    Resolve a node and its subtree, awaiting suspending components.

    A header or footer whose only child is a plain callable is not
    descended into; it resolves to a render prop instead (see
    make_render_prop), whose content may not suspend.

    Params:
        tag: Node, value or awaitable to resolve
        parent_context: Context of this branch; components may update it
        top_level: True when the node sits immediately under the document
        path: Concrete kinds leading to the node
        depth: Nesting depth of the node
        options: Resolution options

    Returns:
        The resolved value, None when absent

    Raises:
        StructuralPlacementError: On section kinds in the wrong position
        RootElementError: On a nested document
        ResolutionDepthError: When the subtree exceeds options.max_depth
    """
    resolution = await resolve_component_async(tag, parent_context)
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
        resolved_child = await resolve_children(
            child,
            parent_context.branch(),
            path=child_path,
            depth=depth + 1,
            options=options,
        )
        append_child(resolved_child, resolved_children)

    return map_intrinsic(resolved.kind, resolved.attributes, resolved_children)
