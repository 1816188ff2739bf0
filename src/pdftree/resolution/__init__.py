"""
pdftree resolution engine.

This package provides the functional resolution loop, structural validation,
child coalescing, intrinsic mapping and the synchronous and asynchronous
resolvers that drive them, plus the document assembly entry points.
"""

from pdftree.resolution.asynchronous import resolve_children
from pdftree.resolution.document import resolve_pdf, resolve_pdf_sync
from pdftree.resolution.functional import (
    Resolution,
    resolve_component,
    resolve_component_async,
)
from pdftree.resolution.intrinsics import INTRINSIC_KINDS, map_intrinsic
from pdftree.resolution.merging import append_child, is_absent, is_text
from pdftree.resolution.synchronous import (
    make_render_prop,
    resolve_children_sync,
    resolve_component_sync,
)
from pdftree.resolution.validation import (
    DOCUMENT_KIND,
    RENDER_PROP_KINDS,
    TOP_LEVEL_KINDS,
    Placement,
    validate_resolved,
)

__all__ = [
    "resolve_pdf",
    "resolve_pdf_sync",
    "resolve_children",
    "resolve_children_sync",
    "resolve_component",
    "resolve_component_async",
    "resolve_component_sync",
    "make_render_prop",
    "Resolution",
    "map_intrinsic",
    "INTRINSIC_KINDS",
    "append_child",
    "is_absent",
    "is_text",
    "validate_resolved",
    "Placement",
    "DOCUMENT_KIND",
    "TOP_LEVEL_KINDS",
    "RENDER_PROP_KINDS",
]
