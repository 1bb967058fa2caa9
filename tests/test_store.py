"""Tests for the template store."""

import pytest

from mizui.domain.errors import TemplateNotFound
from mizui.infrastructure.cache import TemplateCache
from mizui.infrastructure.logging import ErrorSink
from mizui.services.store import TemplateStore


@pytest.fixture
def store(config, fs):
    return TemplateStore(fs, TemplateCache(), ErrorSink(config.error_log, config.crash_log))


def test_get_reads_once_then_serves_cache(store, fs, write_template):
    path = write_template("page.mizui", "hello")
    assert store.get(path) == "hello"
    assert store.get(str(path)) == "hello"
    assert fs.reads[str(path)] == 1


def test_cached_text_is_not_invalidated(store, write_template):
    path = write_template("page.mizui", "v1")
    assert store.get(path) == "v1"
    path.write_text("v2", encoding="utf-8")
    assert store.get(path) == "v1"


def test_missing_template_returns_empty_and_logs(store, tmp_path, error_lines):
    missing = tmp_path / "nope.mizui"
    assert store.get(missing) == ""
    lines = error_lines()
    assert len(lines) == 1
    assert lines[0].endswith(f"ERROR: Template file not found: {missing}")
    assert lines[0].startswith("[")


def test_load_raises_for_missing_template(store, tmp_path):
    with pytest.raises(TemplateNotFound):
        store.load(tmp_path / "nope.mizui")
