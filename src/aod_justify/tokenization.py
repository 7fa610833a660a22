from __future__ import annotations

import re
from typing import Iterator, List, Tuple

from .config import JustifyConfig
from .errors import InputError
from .models import Document, Paragraph, Source, Word

# Two consecutive line feeds end a paragraph; any other whitespace separates words.
PARAGRAPH_BREAK = re.compile(rb"\n\n")
# Visible ASCII plus the upper ISO-8859-1 range. Every other byte ends a word.
WORD_PATTERN = re.compile(rb"[\x21-\x7e\xa0-\xff]+")


def iter_paragraph_spans(source: Source) -> Iterator[Tuple[int, int]]:
    """Yield the (start, end) byte range of each blank-line-separated block."""
    start = 0
    for match in PARAGRAPH_BREAK.finditer(source):
        yield start, match.start()
        start = match.end()
    yield start, len(source)


def tokenize_words(
    source: Source, start: int, end: int, config: JustifyConfig
) -> List[Word]:
    """Tokenize ``source[start:end]`` into word spans with absolute offsets."""
    words: List[Word] = []
    for match in WORD_PATTERN.finditer(source, start, end):
        length = match.end() - match.start()
        if length > config.max_word_len:
            raise InputError(
                f"word at offset {match.start()} is longer than "
                f"{config.max_word_len} characters"
            )
        words.append(Word(offset=match.start(), length=length))
        if len(words) > config.max_words:
            raise InputError(
                f"too many words in a paragraph (limit {config.max_words})"
            )
    return words


def tokenize_document(source: Source, config: JustifyConfig | None = None) -> Document:
    """Split a byte buffer into paragraphs of word spans, dropping empty ones."""
    if config is None:
        config = JustifyConfig()
    document = Document()
    for start, end in iter_paragraph_spans(source):
        words = tokenize_words(source, start, end, config)
        if not words:
            continue
        document.paragraphs.append(Paragraph(words=words))
        if len(document.paragraphs) > config.max_paragraphs:
            raise InputError(
                f"too many paragraphs (limit {config.max_paragraphs})"
            )
    return document
