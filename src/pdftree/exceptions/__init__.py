"""
pdftree exception classes.

This package provides all exception types raised while resolving a
component tree, for consistent error handling and reporting.
"""

from pdftree.exceptions.core import (
    AsyncComponentError,
    ErrorContext,
    ErrorLevel,
    PdfTreeError,
    ResolutionDepthError,
    RootElementError,
    StructuralPlacementError,
)

__all__ = [
    "PdfTreeError",
    "StructuralPlacementError",
    "RootElementError",
    "AsyncComponentError",
    "ResolutionDepthError",
    "ErrorContext",
    "ErrorLevel",
]
