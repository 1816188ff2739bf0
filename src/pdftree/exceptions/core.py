"""
Exception classes for pdftree tree resolution.

This module defines specific exception types for the error conditions that
can occur while resolving a component tree into a document definition:
structural placement violations, root element violations and suspension
inside a synchronous resolution.
"""

import inspect
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Tree path only
    DEVELOPER = "developer"  # Tree path plus component source locations


@dataclass
class ErrorContext:
    """
    Location information for resolution errors.

    Captures where an error occurred in tree terms (the chain of concrete
    kinds leading to the failing node) and in Python source terms (the last
    component function that produced the failing node).

    Params:
        kind: Kind of the node that triggered the error
        path: Concrete kinds from the section down to the failing node
        component: Qualified name of the component that produced the node
        component_file: Python file where the component is defined
        component_line: Line number where the component starts
    """

    kind: str | None = None
    path: tuple[str, ...] = field(default_factory=tuple)
    component: str | None = None
    component_file: str | None = None
    component_line: int | None = None

    @classmethod
    def for_component(
        cls, kind: str | None, path: tuple[str, ...], component: Any = None
    ) -> "ErrorContext":
        """
        Build a context, introspecting the component callable when given.

        Params:
            kind: Kind of the offending node
            path: Concrete kinds leading to the offending node
            component: The component callable that returned the node, if any

        Returns:
            ErrorContext with source information filled in where available
        """
        if component is None:
            return cls(kind=kind, path=path)

        name = getattr(component, "__qualname__", None) or repr(component)
        try:
            source_file = inspect.getsourcefile(component)
            _, source_line = inspect.getsourcelines(component)
        except (OSError, TypeError):
            source_file, source_line = None, None

        return cls(
            kind=kind,
            path=path,
            component=name,
            component_file=source_file,
            component_line=source_line,
        )

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        lines = []

        if self.path:
            lines.append(f"  at {' > '.join(self.path)}")

        if self.component:
            lines.append(f"  returned by {self.component}")

        if error_level == ErrorLevel.DEVELOPER:
            if self.component_file and self.component_line:
                lines.append(
                    f"  component at {self.component_file}:{self.component_line}"
                )

        return "\n".join(lines)


class PdfTreeError(Exception):
    """Base exception for all pdftree errors."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            message: Primary error message
            context: ErrorContext with tree location information
            error_level: Level of detail to show in error message
        """
        self.message = message
        self.context = context
        self.error_level = error_level

        location_info = context.format_location(error_level) if context else ""
        full_message = f"{message}\n{location_info}" if location_info else message
        super().__init__(full_message)


class StructuralPlacementError(PdfTreeError):
    """Raised when a section kind is nested or a non-section kind sits under the root."""

    def __init__(
        self,
        kind: str,
        nested: bool,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            kind: The kind found in the wrong position
            nested: True when a section kind was found below the top level,
                False when a non-section kind was found at the top level
            context: ErrorContext with tree location information
            error_level: Level of detail to show in error message
        """
        self.kind = kind
        self.nested = nested
        if nested:
            message = (
                "<header>, <content> and <footer> elements can only appear as "
                f"immediate descendants of the <document>, found <{kind}>"
            )
        else:
            message = (
                "The <document> element can only contain <header>, <content>, "
                f"and <footer> elements but found {kind}"
            )
        super().__init__(message, context=context, error_level=error_level)


class RootElementError(PdfTreeError):
    """Raised when the root is not a document or a document appears below the root."""

    def __init__(
        self,
        kind: str | None = None,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            kind: The kind the root resolved to, or None when a nested
                document was found
            context: ErrorContext with tree location information
            error_level: Level of detail to show in error message
        """
        self.kind = kind
        if kind is None:
            message = "<document> can only appear as the root element"
        else:
            message = (
                "The root element must resolve to a <document>, "
                f"actually resolved to {kind}"
            )
        super().__init__(message, context=context, error_level=error_level)


class AsyncComponentError(PdfTreeError, TypeError):
    """Raised when an awaitable is produced during synchronous resolution."""

    def __init__(
        self,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            context: ErrorContext with tree location information
            error_level: Level of detail to show in error message
        """
        super().__init__(
            "Async components are not permitted in a synchronous context",
            context=context,
            error_level=error_level,
        )


class ResolutionDepthError(PdfTreeError, RecursionError):
    """Raised when the tree nests deeper than the configured maximum."""

    def __init__(
        self,
        max_depth: int,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            max_depth: The configured depth limit that was exceeded
            context: ErrorContext with tree location information
            error_level: Level of detail to show in error message
        """
        self.max_depth = max_depth
        super().__init__(
            f"Tree nesting exceeds the maximum depth of {max_depth}",
            context=context,
            error_level=error_level,
        )
