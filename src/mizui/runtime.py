"""Runtime context & bootstrap utilities."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from mizui.domain.models import MizuiConfig
from mizui.infrastructure.logging import setup_logging
from mizui.services.renderer import Renderer

DEFAULT_CONFIG_PATH = "mizui.yaml"


class AppContext:
    """Process-level holder of the configured renderer (and therefore its cache)."""

    _instance: AppContext | None = None

    def __init__(self, config: MizuiConfig, config_path: Path):
        self.config = config
        self.config_path = config_path
        self.renderer = Renderer(config)

    @classmethod
    def init(cls, config: MizuiConfig, config_path: Path) -> AppContext:
        if cls._instance is None:
            cls._instance = cls(config, config_path)
        return cls._instance

    @classmethod
    def get(cls) -> AppContext:
        if cls._instance is None:
            raise RuntimeError("AppContext not initialized")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None


def load_config(path: Path) -> MizuiConfig:
    """Read `path` (YAML) into a `MizuiConfig`; a missing file yields defaults.

    Relative `base_path` / log paths are resolved against the config file's directory.
    """
    if not path.exists():
        return MizuiConfig()
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping")
    config = MizuiConfig(**data)
    root = path.resolve().parent
    updates = {
        name: root / getattr(config, name)
        for name in ("base_path", "error_log", "crash_log")
        if name in data and not getattr(config, name).is_absolute()
    }
    return config.model_copy(update=updates)


def bootstrap(force: bool = False, config_path: Path | None = None) -> AppContext:
    if not force:
        try:
            return AppContext.get()
        except RuntimeError:
            pass
    else:
        AppContext.reset()
    load_dotenv(override=False)
    setup_logging()
    cfg_path = config_path or Path(os.getenv("MIZUI_CONFIG", DEFAULT_CONFIG_PATH))
    return AppContext.init(load_config(cfg_path), cfg_path)


def render(identifier: str | Path, data: Mapping[str, Any] | None = None) -> str:
    """Render `identifier` with the bootstrapped renderer; "" on any failure."""
    return bootstrap().renderer.render(identifier, data)


__all__ = ["AppContext", "bootstrap", "load_config", "render"]
