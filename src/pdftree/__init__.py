"""
pdftree - Resolve component trees into pdfmake-style document definitions

pdftree lets documents be composed from small component functions and
resolves the resulting tree into the plain nested object a document-layout
renderer consumes.
"""

import logging
from importlib.metadata import version

from pdftree.core import Context, Fragment, Node, build
from pdftree.exceptions import (
    AsyncComponentError,
    ErrorLevel,
    PdfTreeError,
    ResolutionDepthError,
    RootElementError,
    StructuralPlacementError,
)
from pdftree.options import ResolveOptions
from pdftree.resolution import resolve_pdf, resolve_pdf_sync

__version__ = version("pdftree")

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "build",
    "Fragment",
    "Node",
    "Context",
    "resolve_pdf",
    "resolve_pdf_sync",
    "ResolveOptions",
    "ErrorLevel",
    "PdfTreeError",
    "StructuralPlacementError",
    "RootElementError",
    "AsyncComponentError",
    "ResolutionDepthError",
]
