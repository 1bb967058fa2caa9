"""Error taxonomy for the render pipeline.

Every stage raises a subclass of `MizuiError`; the renderer is the only place that
turns one into the empty-string public result.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    TEMPLATE_NOT_FOUND = "template_not_found"
    COMPONENT_NOT_FOUND = "component_not_found"
    RECURSION_TOO_DEEP = "recursion_too_deep"
    SYNTAX = "syntax"
    INTERPOLATION = "interpolation"
    COMPILATION = "compilation"
    RENDER_INVOCATION = "render_invocation"


class MizuiError(Exception):
    """Base error; carries the failing template identifier and a kind tag."""

    kind: ErrorKind

    def __init__(self, message: str, *, identifier: str | None = None):
        super().__init__(message)
        self.message = message
        self.identifier = identifier

    def __str__(self) -> str:
        return self.message


class TemplateNotFound(MizuiError):
    kind = ErrorKind.TEMPLATE_NOT_FOUND


class ComponentNotFound(MizuiError):
    kind = ErrorKind.COMPONENT_NOT_FOUND

    def __init__(self, path: str, *, identifier: str | None = None):
        super().__init__(f"Component not found: {path}", identifier=identifier)
        self.path = path


class RecursionTooDeep(MizuiError):
    kind = ErrorKind.RECURSION_TOO_DEEP


class TemplateSyntaxError(MizuiError):
    """Unbalanced delimiters on a single line (1-based `line`)."""

    kind = ErrorKind.SYNTAX

    def __init__(self, message: str, *, identifier: str | None = None, line: int):
        super().__init__(message, identifier=identifier)
        self.line = line


class InterpolationError(MizuiError):
    kind = ErrorKind.INTERPOLATION


class CompilationError(MizuiError):
    kind = ErrorKind.COMPILATION


class RenderInvocationError(MizuiError):
    """Raised while running a compiled template against a data context."""

    kind = ErrorKind.RENDER_INVOCATION


__all__ = [
    "CompilationError",
    "ComponentNotFound",
    "ErrorKind",
    "InterpolationError",
    "MizuiError",
    "RecursionTooDeep",
    "RenderInvocationError",
    "TemplateNotFound",
    "TemplateSyntaxError",
]
