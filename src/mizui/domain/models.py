"""Domain models (Pydantic) for configuration, crash records and render outcomes."""
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from mizui.domain.errors import ErrorKind

# -------------------- Configuration -------------------- #


class MizuiConfig(BaseModel):
    """Static renderer configuration (normally read from `mizui.yaml`).

    `syntax` is the placeholder delimiter pair, matched literally everywhere.
    `cache_size` of None keeps every cache entry for the renderer's lifetime.
    """

    syntax: tuple[str, str] = ("{{", "}}")
    base_path: Path = Path("components")
    extension: str = ".mizui"
    max_depth: int = Field(default=10, ge=0)
    error_log: Path = Path("error.log")
    crash_log: Path = Path("crash.log")
    cache_size: int | None = Field(default=None, ge=1)

    @field_validator("syntax")
    @classmethod
    def _non_empty_delimiters(cls, value: tuple[str, str]) -> tuple[str, str]:
        open_, close = value
        if not open_ or not close:
            raise ValueError("syntax delimiters must be non-empty strings")
        return value

    @property
    def open(self) -> str:
        return self.syntax[0]

    @property
    def close(self) -> str:
        return self.syntax[1]


# -------------------- Crash & Render Outcome -------------------- #


class CrashRecord(BaseModel):
    """Forensic record persisted when a compiled template fails on its data."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    template_path: str
    data: Any = None
    error: str


class RenderResult(BaseModel):
    """Explicit outcome of a render; `text` is empty whenever `error` is set."""

    identifier: str
    text: str = ""
    error: str | None = None
    error_kind: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


__all__ = ["CrashRecord", "MizuiConfig", "RenderResult"]
