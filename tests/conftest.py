"""Shared test fixtures for mizui tests."""
from collections import Counter
from pathlib import Path

import orjson
import pytest

from mizui.domain.models import MizuiConfig
from mizui.infrastructure.fs import LocalFileSystem
from mizui.services.renderer import Renderer


class CountingFileSystem(LocalFileSystem):
    """Local file system that records how often each path is read."""

    def __init__(self):
        self.reads: Counter[str] = Counter()

    def read_text(self, path):
        self.reads[str(path)] += 1
        return super().read_text(path)


@pytest.fixture
def components_dir(tmp_path: Path) -> Path:
    d = tmp_path / "components"
    d.mkdir()
    return d


@pytest.fixture
def config(tmp_path: Path, components_dir: Path) -> MizuiConfig:
    return MizuiConfig(
        base_path=components_dir,
        error_log=tmp_path / "logs" / "error.log",
        crash_log=tmp_path / "logs" / "crash.log",
    )


@pytest.fixture
def fs() -> CountingFileSystem:
    return CountingFileSystem()


@pytest.fixture
def renderer(config: MizuiConfig, fs: CountingFileSystem) -> Renderer:
    return Renderer(config, fs=fs)


@pytest.fixture
def write_template(tmp_path: Path):
    """Write `text` to `tmp_path/name` and return the path."""

    def _write(name: str, text: str) -> Path:
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
        return p

    return _write


@pytest.fixture
def write_component(components_dir: Path):
    def _write(name: str, text: str) -> Path:
        p = components_dir / f"{name}.mizui"
        p.write_text(text, encoding="utf-8")
        return p

    return _write


@pytest.fixture
def error_lines(config: MizuiConfig):
    """Return the current error.log lines (empty when nothing was logged)."""

    def _read() -> list[str]:
        if not config.error_log.exists():
            return []
        return config.error_log.read_text(encoding="utf-8").splitlines()

    return _read


@pytest.fixture
def crash_records(config: MizuiConfig):
    """Return the JSON records appended to crash.log so far."""

    def _read() -> list[dict]:
        if not config.crash_log.exists():
            return []
        lines = config.crash_log.read_bytes().splitlines()
        return [orjson.loads(line) for line in lines if line.strip()]

    return _read
