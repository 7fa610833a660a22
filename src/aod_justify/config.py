from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .errors import ConfigurationError

MAX_WORD_LEN = 256
MAX_WORDS = 1_000_000
MAX_PARAGRAPHS = 1000
MAX_LINE_LEN = 10_000

LIMIT_FIELDS = ("max_word_len", "max_words", "max_paragraphs", "max_line_len")
SUFFIX_FIELDS = ("input_suffix", "output_suffix")


@dataclass(slots=True)
class JustifyConfig:
    """Configuration options for the justification pipeline."""

    max_word_len: int = MAX_WORD_LEN
    max_words: int = MAX_WORDS
    max_paragraphs: int = MAX_PARAGRAPHS
    max_line_len: int = MAX_LINE_LEN
    validate_encoding: bool = True
    input_suffix: str = ".in"
    output_suffix: str = ".out"

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(JustifyConfig)}
    return {key: data[key] for key in data if key in allowed}


def validate_config(config: JustifyConfig) -> JustifyConfig:
    """Check field types and ranges, raising ConfigurationError on the first bad one."""
    for name in LIMIT_FIELDS:
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
    if not isinstance(config.validate_encoding, bool):
        raise ConfigurationError(
            f"validate_encoding must be a boolean, got {config.validate_encoding!r}"
        )
    for name in SUFFIX_FIELDS:
        value = getattr(config, name)
        if not isinstance(value, str):
            raise ConfigurationError(f"{name} must be a string, got {value!r}")
    return config


def config_from_dict(data: Mapping[str, Any] | None) -> JustifyConfig:
    """Build a validated JustifyConfig from a dictionary-like input."""
    if data is None:
        return JustifyConfig()
    return validate_config(JustifyConfig(**_build_kwargs(data)))


def config_from_yaml(path: str | Path) -> JustifyConfig:
    """Load configuration from a YAML file."""
    try:
        contents = Path(path).read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"cannot read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(contents) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"invalid configuration YAML in {path}: {exc}") from exc
    if not isinstance(parsed, MutableMapping):
        raise ConfigurationError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> JustifyConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return JustifyConfig()
    return config_from_yaml(path)
