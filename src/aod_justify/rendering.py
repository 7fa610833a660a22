from __future__ import annotations

from typing import BinaryIO, Sequence

from .errors import InternalConsistencyError
from .models import Paragraph, Source, Word

SPACE = b" "
LINE_BREAK = b"\n"
PARAGRAPH_SEPARATOR = b"\n\n"


def write_justified_line(
    sink: BinaryIO, source: Source, words: Sequence[Word], total_spaces: int
) -> None:
    """
    Write ``words`` padded with ``total_spaces`` extra spaces.

    Each gap gets one mandatory space plus an even share of the extra ones;
    the remainder goes to the leftmost gaps. A lone word is written as is.
    """
    if len(words) == 1:
        sink.write(words[0].text(source))
        return

    gaps = len(words) - 1
    base, extra = divmod(total_spaces, gaps)
    for position, word in enumerate(words):
        sink.write(word.text(source))
        if position < gaps:
            sink.write(SPACE * (base + 1 + (1 if position < extra else 0)))


def write_last_line(sink: BinaryIO, source: Source, words: Sequence[Word]) -> None:
    """Write the final line of a paragraph with single spaces and no padding."""
    sink.write(SPACE.join(word.text(source) for word in words))


def render_paragraph(
    source: Source,
    paragraph: Paragraph,
    next_break: Sequence[int],
    width: int,
    sink: BinaryIO,
) -> int:
    """Write a paragraph following ``next_break`` and return its line count."""
    words = paragraph.words
    n = len(words)
    lines = 0
    i = 0
    while i < n:
        k = next_break[i]
        if k <= i:
            raise InternalConsistencyError(
                f"breakpoint table does not advance at word {i} (next break {k})"
            )
        line = words[i:k]
        if k == n:
            write_last_line(sink, source, line)
        else:
            natural = sum(word.length for word in line) + len(line) - 1
            write_justified_line(sink, source, line, width - natural)
            sink.write(LINE_BREAK)
        lines += 1
        i = k
    return lines


def write_paragraph_separator(sink: BinaryIO) -> None:
    sink.write(PARAGRAPH_SEPARATOR)
