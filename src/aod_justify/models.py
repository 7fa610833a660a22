from __future__ import annotations

import mmap
from dataclasses import dataclass, field
from typing import Union

# Anything sliceable into bytes: an in-memory buffer or a read-only memory map.
Source = Union[bytes, bytearray, mmap.mmap]


@dataclass(frozen=True, slots=True)
class Word:
    """A word as an offset/length span into the source buffer."""

    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length

    def text(self, source: Source) -> bytes:
        """Return the bytes this span covers in ``source``."""
        return source[self.offset : self.end]


@dataclass(slots=True)
class Paragraph:
    """An ordered run of words plus its optimal cost once computed."""

    words: list[Word] = field(default_factory=list)
    optimal_cost: int | None = None

    @property
    def word_count(self) -> int:
        return len(self.words)

    def word_lengths(self) -> list[int]:
        return [word.length for word in self.words]


@dataclass(slots=True)
class Document:
    """Paragraphs in source order."""

    paragraphs: list[Paragraph] = field(default_factory=list)

    @property
    def word_count(self) -> int:
        return sum(paragraph.word_count for paragraph in self.paragraphs)


@dataclass(slots=True)
class JustifyResult:
    """Justified output plus the aggregate cost reported to the caller."""

    output: bytes
    total_cost: int
    paragraph_count: int
    word_count: int
