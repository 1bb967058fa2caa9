"""Template store: identifier -> raw text, cache-or-load over the file-system collaborator."""
from __future__ import annotations

from pathlib import Path

from mizui.domain.errors import TemplateNotFound
from mizui.infrastructure.cache import TemplateCache
from mizui.infrastructure.fs import FileSystem
from mizui.infrastructure.logging import ErrorSink


class TemplateStore:
    def __init__(self, fs: FileSystem, cache: TemplateCache, sink: ErrorSink):
        self.fs = fs
        self.cache = cache
        self.sink = sink

    def load(self, identifier: str | Path) -> str:
        """Return raw text for `identifier`, raising `TemplateNotFound` if absent.

        Cached text is returned unchanged even if the file has since changed.
        """
        key = str(identifier)

        def _read() -> str:
            if not self.fs.exists(key):
                err = TemplateNotFound(f"Template file not found: {key}", identifier=key)
                self.sink.log_error(str(err))
                raise err
            return self.fs.read_text(key)

        return self.cache.get_or_create(key, _read)

    def get(self, identifier: str | Path) -> str:
        """Like `load` but a missing template yields "" (the error is only logged)."""
        try:
            return self.load(identifier)
        except TemplateNotFound:
            return ""


__all__ = ["TemplateStore"]
