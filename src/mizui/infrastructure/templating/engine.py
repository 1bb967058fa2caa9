"""Template compilation: `Program` -> `CompiledTemplate` (a direct interpreter).

Current goals:
  * No runtime code generation; a compiled template is a tuple of literal text and
    pre-split lookup paths.
  * Lookups are property traversal only: mapping keys, integer indexes into
    sequences, plain attributes. Missing or `None` values render as "".
  * Pure with respect to the data context: nothing mutable is captured.
"""
from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from mizui.domain.errors import CompilationError
from mizui.infrastructure.templating.interpolate import Lookup, Program

_PATH = re.compile(r"\w+(?:\.\w+)*")
_MISSING = object()


def _step(value: Any, part: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(part, _MISSING)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if not part.isdigit():
            return _MISSING
        idx = int(part)
        return value[idx] if idx < len(value) else _MISSING
    if part.startswith("_"):
        return _MISSING
    return getattr(value, part, _MISSING)


def resolve_path(data: Any, path: tuple[str, ...]) -> Any:
    """Walk `path` through `data`; returns None when any step is undefined."""
    value = data
    for part in path:
        if value is None:
            return None
        value = _step(value, part)
        if value is _MISSING:
            return None
    return value


class CompiledTemplate:
    """Callable `data -> str` built once per distinct `Program`."""

    __slots__ = ("_parts",)

    def __init__(self, parts: tuple[str | tuple[str, ...], ...]):
        self._parts = parts

    def __call__(self, data: Mapping[str, Any] | None = None) -> str:
        ctx: Any = {} if data is None else data
        out: list[str] = []
        for part in self._parts:
            if isinstance(part, str):
                out.append(part)
                continue
            value = resolve_path(ctx, part)
            out.append("" if value is None else str(value))
        return "".join(out)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"CompiledTemplate({self._parts!r})"


def compile_program(program: Program, identifier: str) -> CompiledTemplate:
    parts: list[str | tuple[str, ...]] = []
    for seg in program.segments:
        if not isinstance(seg, Lookup):
            parts.append(seg.value)
            continue
        if not _PATH.fullmatch(seg.expr):
            raise CompilationError(
                f"Compilation error in {identifier}: "
                f"{seg.expr!r} is not a dotted property path",
                identifier=identifier,
            )
        parts.append(tuple(seg.expr.split(".")))
    return CompiledTemplate(tuple(parts))


__all__ = ["CompiledTemplate", "compile_program", "resolve_path"]
