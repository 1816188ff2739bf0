"""
Document assembly.

Entry points that turn a component tree rooted at a <document> into the
document definition consumed by the layout renderer: one key per section
present under the root, plus the document's own attributes.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pdftree.core.context import Context
from pdftree.core.node import Node
from pdftree.core.types import DocumentDefinition
from pdftree.exceptions import ErrorContext, RootElementError
from pdftree.options import DEFAULT_OPTIONS, ResolveOptions
from pdftree.resolution.asynchronous import resolve_children
from pdftree.resolution.functional import Resolution, resolve_component_async
from pdftree.resolution.synchronous import resolve_children_sync, resolve_component_sync
from pdftree.resolution.validation import (
    DOCUMENT_KIND,
    Placement,
    describe_kind,
    validate_resolved,
)

logger = logging.getLogger(__name__)

_ROOT_PATH = (DOCUMENT_KIND,)


def _require_document(resolution: Resolution, options: ResolveOptions) -> Node:
    resolved = resolution.value
    if isinstance(resolved, Node) and resolved.kind == DOCUMENT_KIND:
        return resolved

    kind = describe_kind(resolved)
    context = ErrorContext.for_component(kind, (kind,), resolution.component)
    raise RootElementError(kind, context=context, error_level=options.error_level)


def _merge_attributes(
    sections: dict[str, Any], attributes: Mapping[str, Any]
) -> DocumentDefinition:
    definition = dict(sections)
    for key, value in attributes.items():
        if key in sections:
            logger.warning(
                "Document attribute %r collides with a section of the same name and is ignored",
                key,
            )
            continue
        definition[key] = value
    return definition


def _section_placement(resolution: Resolution, options: ResolveOptions) -> Placement:
    placement = validate_resolved(
        resolution.value,
        True,
        _ROOT_PATH,
        resolution.component,
        options.error_level,
    )
    if placement is Placement.ABSENT:
        logger.debug("Skipping absent top-level child")
    return placement


async def resolve_pdf(
    root: Any,
    context: Mapping[str, Any] | None = None,
    options: ResolveOptions | None = None,
) -> DocumentDefinition:
    """
    Resolve a component tree into a document definition.

    The root is expanded through any wrapping components and must end up as
    a <document>. Each section under it is resolved in tree order against its
    own branch of the root context.

    Params:
        root: Root node of the tree
        context: Initial values visible to every component
        options: Resolution options, defaults apply when None

    Returns:
        The document definition mapping

    Raises:
        RootElementError: If the root does not resolve to a document, or a
            document appears anywhere below it
        StructuralPlacementError: On section kinds in the wrong position
        AsyncComponentError: Only when a render prop is later invoked and its
            content suspends
    """
    options = options or DEFAULT_OPTIONS
    root_context = Context(context)

    document = _require_document(await resolve_component_async(root, root_context), options)

    sections: dict[str, Any] = {}
    for child in document.children:
        section_context = root_context.branch()
        resolution = await resolve_component_async(child, section_context)
        if _section_placement(resolution, options) is Placement.ABSENT:
            continue

        section = resolution.value
        logger.debug("Assembling <%s> section", section.kind)
        sections[section.kind] = await resolve_children(
            section,
            section_context,
            True,
            path=_ROOT_PATH,
            depth=1,
            options=options,
        )

    return _merge_attributes(sections, document.attributes)


def resolve_pdf_sync(
    root: Any,
    context: Mapping[str, Any] | None = None,
    options: ResolveOptions | None = None,
) -> DocumentDefinition:
    """
    Resolve a component tree into a document definition without suspending.

    Produces the same definition as resolve_pdf for trees that contain no
    asynchronous components.

    Params:
        root: Root node of the tree
        context: Initial values visible to every component
        options: Resolution options, defaults apply when None

    Returns:
        The document definition mapping

    Raises:
        AsyncComponentError: If any component or child is awaitable
        RootElementError: If the root does not resolve to a document, or a
            document appears anywhere below it
        StructuralPlacementError: On section kinds in the wrong position
    """
    options = options or DEFAULT_OPTIONS
    root_context = Context(context)

    document = _require_document(
        resolve_component_sync(root, root_context, (), options), options
    )

    sections: dict[str, Any] = {}
    for child in document.children:
        section_context = root_context.branch()
        resolution = resolve_component_sync(child, section_context, _ROOT_PATH, options)
        if _section_placement(resolution, options) is Placement.ABSENT:
            continue

        section = resolution.value
        logger.debug("Assembling <%s> section", section.kind)
        sections[section.kind] = resolve_children_sync(
            section,
            section_context,
            True,
            path=_ROOT_PATH,
            depth=1,
            options=options,
        )

    return _merge_attributes(sections, document.attributes)
