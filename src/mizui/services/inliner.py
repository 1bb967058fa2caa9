"""Recursive `component(name)` expansion bounded by the configured depth ceiling."""
from __future__ import annotations

from pathlib import Path

from mizui.domain.errors import ComponentNotFound, RecursionTooDeep
from mizui.domain.models import MizuiConfig
from mizui.infrastructure.fs import FileSystem
from mizui.infrastructure.logging import ErrorSink
from mizui.infrastructure.templating.scanner import ComponentToken, LiteralToken, scan
from mizui.services.store import TemplateStore


class ComponentInliner:
    def __init__(
        self,
        config: MizuiConfig,
        fs: FileSystem,
        store: TemplateStore,
        sink: ErrorSink,
    ):
        self.config = config
        self.fs = fs
        self.store = store
        self.sink = sink

    def component_path(self, name: str) -> Path:
        return self.config.base_path / f"{name}{self.config.extension}"

    def inline(self, text: str, depth: int = 0, identifier: str = "") -> str:
        """Replace every component marker in `text` with the component's inlined text.

        Expansion is depth-first: a component's own markers are expanded (at
        `depth + 1`) before the scan of `text` moves on. A marker found while
        `depth` exceeds `max_depth` raises `RecursionTooDeep`, so self-including
        components always terminate.
        """
        parts: list[str] = []
        for token in scan(text, self.config.open, self.config.close):
            if isinstance(token, LiteralToken):
                parts.append(token.text)
                continue
            if not isinstance(token, ComponentToken):
                parts.append(token.raw)
                continue
            path = self.component_path(token.name)
            if depth > self.config.max_depth:
                err = RecursionTooDeep(
                    f"Infinite recursion detected in {identifier}", identifier=identifier
                )
                self.sink.log_error(str(err))
                raise err
            if not self.fs.exists(path):
                err = ComponentNotFound(str(path), identifier=identifier)
                self.sink.log_error(str(err))
                raise err
            parts.append(self.inline(self.store.get(path), depth + 1, str(path)))
        return "".join(parts)


__all__ = ["ComponentInliner"]
