"""Render orchestration: Fetch -> Inline -> Interpolate -> CompileOrReuse -> Invoke.

Any failure moves the render to the failed state: the error is logged, crash
records are written for failures raised by the compiled template itself, and the
caller gets an empty string. Nothing raises past `render`.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from mizui.domain.errors import (
    CompilationError,
    InterpolationError,
    RenderInvocationError,
    TemplateSyntaxError,
)
from mizui.domain.models import MizuiConfig, RenderResult
from mizui.infrastructure.cache import TemplateCache, build_cache
from mizui.infrastructure.fs import FileSystem, LocalFileSystem
from mizui.infrastructure.logging import ErrorSink
from mizui.infrastructure.templating.engine import CompiledTemplate, compile_program
from mizui.infrastructure.templating.interpolate import Program, interpolate
from mizui.services.inliner import ComponentInliner
from mizui.services.store import TemplateStore

log = logging.getLogger(__name__)

Compiler = Callable[[Program, str], CompiledTemplate]


class Renderer:
    """Owns the cache for its lifetime; one renderer per configuration."""

    def __init__(
        self,
        config: MizuiConfig | None = None,
        *,
        fs: FileSystem | None = None,
        cache: TemplateCache | None = None,
        sink: ErrorSink | None = None,
        compiler: Compiler = compile_program,
    ):
        self.config = config or MizuiConfig()
        self.fs = fs or LocalFileSystem()
        self.cache = cache if cache is not None else build_cache(self.config.cache_size)
        self.sink = sink or ErrorSink(self.config.error_log, self.config.crash_log)
        self.compiler = compiler
        self.store = TemplateStore(self.fs, self.cache, self.sink)
        self.inliner = ComponentInliner(self.config, self.fs, self.store, self.sink)

    # ------------------------------ stages ------------------------------ #

    def _interpolate(self, text: str, identifier: str) -> Program:
        try:
            return interpolate(text, identifier, self.config.open, self.config.close)
        except (TemplateSyntaxError, InterpolationError) as err:
            self.sink.log_error(f"Parsing error in {identifier}: {err}")
            raise

    def _compile(self, program: Program, identifier: str) -> CompiledTemplate:
        try:
            return self.cache.get_or_create(program, lambda: self.compiler(program, identifier))
        except CompilationError as err:
            self.sink.log_error(str(err))
            raise

    def prepare(self, identifier: str | Path) -> tuple[Program, CompiledTemplate]:
        """Run every stage up to (not including) invocation; stage errors propagate."""
        key = str(identifier)
        text = self.store.load(key)
        text = self.inliner.inline(text, 0, key)
        program = self._interpolate(text, key)
        return program, self._compile(program, key)

    # ------------------------------ public ------------------------------ #

    def render_result(
        self, identifier: str | Path, data: Mapping[str, Any] | None = None
    ) -> RenderResult:
        key = str(identifier)
        try:
            _, template = self.prepare(key)
        except Exception as err:  # MizuiError, or file-system collaborator failures
            return self._fail(key, err)
        try:
            text = template(data)
        except Exception as exc:
            err = RenderInvocationError(f"{type(exc).__name__}: {exc}", identifier=key)
            self.sink.log_crash(key, data, err)
            return self._fail(key, err)
        log.debug("rendered %s (%d chars)", key, len(text))
        return RenderResult(identifier=key, text=text)

    def render(self, identifier: str | Path, data: Mapping[str, Any] | None = None) -> str:
        return self.render_result(identifier, data).text

    def clear_cache(self) -> None:
        self.cache.clear()

    def _fail(self, identifier: str, err: Exception) -> RenderResult:
        self.sink.log_error(f"Rendering error in {identifier}: {err}")
        return RenderResult(
            identifier=identifier,
            error=str(err),
            error_kind=getattr(err, "kind", None),
        )


__all__ = ["Renderer"]
