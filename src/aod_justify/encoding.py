from __future__ import annotations

import re

from .errors import EncodingError
from .models import Source

# Whitespace separators, visible ASCII and the upper ISO-8859-1 range.
REJECTED_BYTE = re.compile(rb"[^\t\n\r\x20-\x7e\xa0-\xff]")
NON_ASCII_BYTE = re.compile(rb"[\x80-\xff]")


def validate_latin1(source: Source) -> None:
    """
    Ensure ``source`` is single-byte ISO-8859-1 (or plain ASCII) text.

    Raises
    ------
    EncodingError
        If a control byte or a C1 byte is present, or if the non-ASCII bytes
        form valid UTF-8 sequences (a multi-byte encoding).
    """
    rejected = REJECTED_BYTE.search(source)
    if rejected is not None:
        raise EncodingError(
            f"input is not ISO-8859-1 text: byte 0x{rejected.group()[0]:02x} "
            f"at offset {rejected.start()}"
        )
    if looks_like_utf8(source):
        raise EncodingError("input is not ISO-8859-1 text: it is UTF-8 encoded")


def looks_like_utf8(source: Source) -> bool:
    """Return True when ``source`` has non-ASCII bytes that decode as UTF-8."""
    if NON_ASCII_BYTE.search(source) is None:
        return False
    try:
        str(source, "utf-8")
    except UnicodeDecodeError:
        return False
    return True
