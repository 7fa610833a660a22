from __future__ import annotations

import io
import logging
from typing import BinaryIO

from .config import JustifyConfig
from .cost import saturating_add
from .errors import ConfigurationError, InputError
from .models import Document, JustifyResult, Source
from .optimizer import justify_paragraph
from .rendering import render_paragraph, write_paragraph_separator
from .tokenization import tokenize_document

logger = logging.getLogger(__name__)


def validate_target_width(width: object, config: JustifyConfig) -> int:
    """Return ``width`` when it is an integer within ``1..max_line_len``."""
    if isinstance(width, bool) or not isinstance(width, int):
        raise ConfigurationError(f"invalid target width {width!r}")
    if width < 1 or width > config.max_line_len:
        raise ConfigurationError(
            f"target width {width} outside 1..{config.max_line_len}"
        )
    return width


def check_word_widths(document: Document, width: int) -> None:
    """Reject any word that cannot fit on a line of ``width`` characters."""
    for index, paragraph in enumerate(document.paragraphs):
        for word in paragraph.words:
            if word.length > width:
                raise InputError(
                    f"word too long for target width: paragraph {index + 1} has a "
                    f"word of {word.length} characters, justification on {width} "
                    "characters is impossible"
                )


def justify_document(
    source: Source, document: Document, width: int, sink: BinaryIO
) -> int:
    """Optimize and render every paragraph in order, returning the total cost."""
    total_cost = 0
    last_index = len(document.paragraphs) - 1
    for index, paragraph in enumerate(document.paragraphs):
        plan = justify_paragraph(paragraph, width)
        render_paragraph(source, paragraph, plan.next_break, width, sink)
        if index < last_index:
            write_paragraph_separator(sink)
        total_cost = saturating_add(total_cost, plan.total_cost)
    return total_cost


def justify(
    document_bytes: Source, target_width: int, config: JustifyConfig | None = None
) -> JustifyResult:
    """Justify a whole document and return the output bytes and total cost."""
    if config is None:
        config = JustifyConfig()
    width = validate_target_width(target_width, config)
    if len(document_bytes) == 0:
        raise InputError("empty input")

    document = tokenize_document(document_bytes, config)
    if not document.paragraphs:
        raise InputError("no paragraph detected")
    check_word_widths(document, width)

    sink = io.BytesIO()
    total_cost = justify_document(document_bytes, document, width, sink)
    logger.info(
        "Justified %d paragraphs at width %d (total cost %d)",
        len(document.paragraphs),
        width,
        total_cost,
    )
    return JustifyResult(
        output=sink.getvalue(),
        total_cost=total_cost,
        paragraph_count=len(document.paragraphs),
        word_count=document.word_count,
    )
