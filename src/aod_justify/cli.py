from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TypedDict

import typer
import yaml

from .config import JustifyConfig, load_config
from .encoding import validate_latin1
from .errors import ConfigurationError, JustifyError
from .files import derive_output_path, map_source
from .models import JustifyResult
from .pipeline import justify as justify_bytes
from .pipeline import validate_target_width

PROGRAM_NAME = "AODjustify"

app = typer.Typer(help="Optimal paragraph justification CLI.", no_args_is_help=True)


class RunSummary(TypedDict):
    input: str
    output: str
    width: int
    paragraphs: int
    words: int
    total_cost: int


@app.command()
def justify(
    width: str = typer.Argument(..., help="Target line width M (1..max_line_len)."),
    input_path: Path = typer.Argument(
        ..., dir_okay=False, help="ISO-8859-1 text file to justify."
    ),
    output_path: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        dir_okay=False,
        help="Destination file (defaults to the input name with .in -> .out).",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    validate_encoding: bool | None = typer.Option(
        None,
        "--validate-encoding/--no-validate-encoding",
        help="Override config validate_encoding flag.",
    ),
    summary_json: Path | None = typer.Option(
        None, "--summary-json", dir_okay=False, help="Write a JSON run summary here."
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING...)."
    ),
) -> None:
    """Justify INPUT_PATH to WIDTH columns and report the total cost on stderr."""
    try:
        _configure_logging(log_level)
        cfg = load_config(config)
        _apply_overrides(cfg, validate_encoding)
        target_width = validate_target_width(_parse_width(width), cfg)
        destination = output_path or derive_output_path(input_path, cfg)
        with map_source(input_path) as source:
            if cfg.validate_encoding:
                validate_latin1(source)
            result = justify_bytes(source, target_width, cfg)
    except JustifyError as exc:
        typer.echo(f"{PROGRAM_NAME} ERROR> {exc}", err=True)
        raise typer.Exit(code=1) from exc

    # Written only once the whole document succeeded.
    try:
        destination.write_bytes(result.output)
    except OSError as exc:
        typer.echo(f"{PROGRAM_NAME} ERROR> cannot write output file: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if summary_json is not None:
        summary = _summary_dict(input_path, destination, target_width, result)
        summary_json.parent.mkdir(parents=True, exist_ok=True)
        summary_json.write_text(json.dumps(summary, indent=2), encoding="utf-8")
    typer.echo(f"{PROGRAM_NAME} CORRECT> {result.total_cost}", err=True)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = JustifyConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(log_level: str) -> None:
    """Configure root logging, rejecting unknown level names."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"unknown log level {log_level!r}")
    logging.basicConfig(level=level)


def _apply_overrides(config: JustifyConfig, validate_encoding: bool | None) -> None:
    """Apply CLI overrides to config fields when provided."""
    if validate_encoding is not None:
        config.validate_encoding = validate_encoding


def _parse_width(raw: str) -> object:
    """Convert the WIDTH argument, leaving unparsable values for validation."""
    try:
        return int(raw)
    except ValueError:
        return raw


def _summary_dict(
    input_path: Path, output_path: Path, width: int, result: JustifyResult
) -> RunSummary:
    return {
        "input": str(input_path),
        "output": str(output_path),
        "width": width,
        "paragraphs": result.paragraph_count,
        "words": result.word_count,
        "total_cost": result.total_cost,
    }


if __name__ == "__main__":
    main()
