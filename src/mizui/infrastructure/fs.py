"""File-system collaborator & append-only log helpers isolated from the pipeline."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

import orjson


class FileSystem(Protocol):
    def exists(self, path: str | Path) -> bool: ...

    def read_text(self, path: str | Path) -> str: ...


class LocalFileSystem:
    """Default collaborator reading UTF-8 text from the local disk."""

    def exists(self, path: str | Path) -> bool:
        return Path(path).is_file()

    def read_text(self, path: str | Path) -> str:
        return Path(path).read_text(encoding="utf-8")


def append_line(path: str | Path, line: str) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("a", encoding="utf-8") as f:
        f.write(line.rstrip("\n") + "\n")


def _json_default(obj: Any) -> str:
    try:
        return str(obj)
    except Exception:
        return repr(obj)


def append_jsonl_line(path: str | Path, record: dict[str, Any]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("ab") as f:
        line = orjson.dumps(record, default=_json_default, option=orjson.OPT_NON_STR_KEYS)
        f.write(line + b"\n")


__all__ = ["FileSystem", "LocalFileSystem", "append_jsonl_line", "append_line"]
