"""Command line interface (render / check)."""

from __future__ import annotations

import math
import re
from pathlib import Path
from typing import Annotated, Any

import orjson
import typer
import yaml
from dotenv import load_dotenv
from rich.markup import escape

from mizui.domain.errors import MizuiError
from mizui.infrastructure.logging import render_panel, setup_logging
from mizui.runtime import bootstrap
from mizui.services.renderer import Renderer

app = typer.Typer(help="mizui template CLI")

_INT = re.compile(r"[+-]?\d+")


@app.callback()
def init(
    json_logs: Annotated[bool, typer.Option("--json-logs", help="Emit JSON log lines")] = False,
) -> None:  # load env once
    load_dotenv(override=False)
    setup_logging(json_mode=json_logs)


def _load_data(path: Path) -> dict[str, Any]:
    raw = path.read_bytes()
    try:
        if path.suffix.lower() in {".yaml", ".yml"}:
            data = yaml.safe_load(raw) or {}
        else:
            data = orjson.loads(raw)
    except (orjson.JSONDecodeError, yaml.YAMLError) as err:
        raise typer.BadParameter(f"Cannot parse data file {path}: {err}") from err
    if not isinstance(data, dict):
        raise typer.BadParameter(f"Data root must be a mapping: {path}")
    return data


def _coerce(value: str) -> Any:
    if _INT.fullmatch(value):
        return int(value)
    try:
        number = float(value)
    except ValueError:
        pass
    else:
        if math.isfinite(number):
            return number
    if value.lower() in {"true", "false"}:
        return value.lower() == "true"
    return value


def _apply_sets(data: dict[str, Any], values: list[str]) -> dict[str, Any]:
    for item in values:
        if "=" not in item:
            raise typer.BadParameter(f"Expected key=value, got: {item}")
        key, value = item.split("=", 1)
        *parents, leaf = key.split(".")
        target = data
        for part in parents:
            nxt = target.get(part)
            if not isinstance(nxt, dict):
                nxt = target[part] = {}
            target = nxt
        target[leaf] = _coerce(value)
    return data


def _renderer(config: Path | None) -> Renderer:
    try:
        return bootstrap(force=True, config_path=config).renderer
    except (ValueError, yaml.YAMLError) as err:  # pydantic ValidationError is a ValueError
        raise typer.BadParameter(f"Invalid config {config}: {err}") from err


@app.command("render")
def render_cmd(
    template: Path,
    data_file: Annotated[
        Path | None, typer.Option("--data", help="JSON or YAML data context")
    ] = None,
    set_: Annotated[
        list[str] | None, typer.Option("--set", help="dotted.key=value overrides")
    ] = None,
    config: Annotated[Path | None, typer.Option(help="mizui.yaml path")] = None,
) -> None:
    data = _load_data(data_file) if data_file else {}
    data = _apply_sets(data, set_ or [])
    renderer = _renderer(config)
    result = renderer.render_result(template, data)
    if not result.ok:
        render_panel("render failed", f"[red]{escape(result.error or '')}[/red]", style="red")
        raise typer.Exit(code=1)
    typer.echo(result.text, nl=False)


@app.command("check")
def check_cmd(
    template: Path,
    config: Annotated[Path | None, typer.Option(help="mizui.yaml path")] = None,
) -> None:
    renderer = _renderer(config)
    try:
        program, _ = renderer.prepare(template)
    except MizuiError as err:
        body = f"[red]{err.kind.value}[/red]: {escape(str(err))}"
        render_panel(str(template), body, style="red")
        raise typer.Exit(code=1) from err
    paths = program.paths
    body = "\n".join(f"- {p}" for p in paths) if paths else "[dim]no placeholders[/dim]"
    render_panel(f"{template} ok", body, style="green")


if __name__ == "__main__":  # pragma: no cover
    app()
