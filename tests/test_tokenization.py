import pytest

from aod_justify.config import JustifyConfig
from aod_justify.errors import InputError
from aod_justify.tokenization import tokenize_document


def _texts(source: bytes, config: JustifyConfig | None = None) -> list[list[bytes]]:
    document = tokenize_document(source, config)
    return [[word.text(source) for word in p.words] for p in document.paragraphs]


def test_tokenize_document_returns_offsets():
    source = b"one two\nthree\n\nfour"
    document = tokenize_document(source)

    assert len(document.paragraphs) == 2
    first = document.paragraphs[0].words
    assert [(w.offset, w.length) for w in first] == [(0, 3), (4, 3), (8, 5)]
    assert document.paragraphs[1].words[0].offset == 15
    assert document.paragraphs[1].words[0].text(source) == b"four"
    assert document.word_count == 4


def test_extra_blank_lines_do_not_create_paragraphs():
    assert _texts(b"\n\n\n\nalpha\n\n\n\n\nbeta\n") == [[b"alpha"], [b"beta"]]


def test_only_two_consecutive_line_feeds_split_paragraphs():
    assert _texts(b"a\r\n\r\nb") == [[b"a", b"b"]]
    assert _texts(b"a\n \nb\tc") == [[b"a", b"b", b"c"]]


def test_non_printable_bytes_end_words():
    assert _texts(b"ab\x00cd\x85ef\x7fgh") == [[b"ab", b"cd", b"ef", b"gh"]]


def test_upper_latin1_bytes_are_printable():
    assert _texts(b"caf\xe9 \xa0x") == [[b"caf\xe9", b"\xa0x"]]


def test_word_length_limit():
    assert _texts(b"x" * 256) == [[b"x" * 256]]
    with pytest.raises(InputError, match="longer than 256"):
        tokenize_document(b"ok " + b"x" * 257)


def test_word_count_limit():
    config = JustifyConfig(max_words=3)
    assert _texts(b"a b c", config) == [[b"a", b"b", b"c"]]
    with pytest.raises(InputError, match="too many words"):
        tokenize_document(b"a b c d", config)


def test_paragraph_count_limit_ignores_empty_paragraphs():
    config = JustifyConfig(max_paragraphs=2)
    assert len(tokenize_document(b"a\n\n\n\n\n\nb", config).paragraphs) == 2
    with pytest.raises(InputError, match="too many paragraphs"):
        tokenize_document(b"a\n\nb\n\nc", config)


def test_whitespace_only_input_has_no_paragraphs():
    assert tokenize_document(b" \t\r\n\n\n").paragraphs == []
