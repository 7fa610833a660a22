from __future__ import annotations

import logging
import mmap
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import JustifyConfig
from .errors import InputError

logger = logging.getLogger(__name__)


@contextmanager
def map_source(path: Path) -> Iterator[mmap.mmap]:
    """Memory-map ``path`` read-only for the duration of the block."""
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise InputError(f"cannot open input file {path}: {exc.strerror}") from exc
    with handle:
        size = path.stat().st_size
        if size == 0:
            raise InputError(f"empty input file: {path}")
        try:
            mapped = mmap.mmap(handle.fileno(), 0, access=mmap.ACCESS_READ)
        except (OSError, ValueError) as exc:
            raise InputError(f"cannot map input file {path}: {exc}") from exc
    logger.debug("Mapped %d bytes from %s", size, path)
    try:
        yield mapped
    finally:
        mapped.close()


def derive_output_path(path: Path, config: JustifyConfig | None = None) -> Path:
    """Swap a trailing input suffix for the output suffix, or append it."""
    if config is None:
        config = JustifyConfig()
    name = path.name
    if config.input_suffix and name.endswith(config.input_suffix):
        name = name[: -len(config.input_suffix)]
    return path.with_name(name + config.output_suffix)
