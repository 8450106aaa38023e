import pytest

from atom_intern.errors import BufferTooSmall, InvalidBuffer, InvalidLength
from atom_intern.normalize import (
    Converted,
    Unchanged,
    latin1_to_text,
    latin1_to_utf8,
    quote_atom,
)
from atom_intern.rules import MAX_ATOM_CHARACTERS, MAX_ATOM_SZ_FROM_LATIN1


def test_ascii_name_is_returned_without_copy():
    name = b"hello_world"
    result = latin1_to_utf8(name)
    assert isinstance(result, Unchanged)
    assert result.converted is False
    assert result.data is name
    assert result.length == len(name)


def test_ascii_bytearray_keeps_identity():
    name = bytearray(b"ok")
    result = latin1_to_utf8(name)
    assert result.data is name
    assert result.content == b"ok"


def test_high_bytes_expand_to_two_bytes():
    result = latin1_to_utf8(bytes([206, 169]))
    assert isinstance(result, Converted)
    assert result.converted is True
    assert result.data == bytes([0xC3, 0x8E, 0xC2, 0xA9])
    assert result.length == 4


def test_ascii_prefix_is_copied_verbatim():
    result = latin1_to_utf8(b"abc\xe9d")
    assert result.content == b"abc\xc3\xa9d"
    assert result.length == 6


def test_every_latin1_byte_matches_utf8():
    for b in range(256):
        raw = bytes([b])
        assert latin1_to_utf8(raw).content == raw.decode("latin-1").encode("utf-8")


def test_output_length_bounds():
    names = [b"", b"a", b"\xff", b"Montr\xe9al", bytes(range(256))[:MAX_ATOM_CHARACTERS]]
    for name in names:
        result = latin1_to_utf8(name)
        assert len(name) <= result.length <= 2 * len(name)
        assert len(result.content) == result.length


def test_declared_length_limits_what_is_read():
    result = latin1_to_utf8(b"ab\xe9", 2)
    assert isinstance(result, Unchanged)
    assert result.length == 2
    assert result.content == b"ab"


def test_caller_buffer_is_not_aliased():
    buf = bytearray(MAX_ATOM_SZ_FROM_LATIN1)
    result = latin1_to_utf8(b"\xff" * MAX_ATOM_CHARACTERS, buf=buf)
    assert result.length == MAX_ATOM_SZ_FROM_LATIN1
    assert result.content == b"\xc3\xbf" * MAX_ATOM_CHARACTERS
    buf[0] = 0
    assert result.content[0] == 0xC3


def test_converted_name_is_written_into_caller_buffer():
    buf = bytearray(MAX_ATOM_SZ_FROM_LATIN1)
    result = latin1_to_utf8(b"ab\xe9", buf=buf)
    assert buf[:4] == b"ab\xc3\xa9"
    assert result.content == b"ab\xc3\xa9"
    assert result.data is not buf


def test_immutable_buffer_is_rejected():
    with pytest.raises(InvalidBuffer):
        latin1_to_utf8(b"\xe9", buf=bytes(MAX_ATOM_SZ_FROM_LATIN1))


def test_results_are_hashable():
    assert isinstance(hash(latin1_to_utf8(bytearray(b"ok"))), int)
    assert isinstance(hash(latin1_to_utf8(b"\xe9")), int)


def test_small_buffer_is_rejected():
    with pytest.raises(BufferTooSmall):
        latin1_to_utf8(b"\xe9", buf=bytearray(MAX_ATOM_SZ_FROM_LATIN1 - 1))


def test_name_over_character_limit_is_rejected():
    with pytest.raises(InvalidLength):
        latin1_to_utf8(b"a" * (MAX_ATOM_CHARACTERS + 1))


def test_declared_length_past_buffer_is_rejected():
    with pytest.raises(InvalidLength):
        latin1_to_utf8(b"abc", 4)
    with pytest.raises(InvalidLength):
        latin1_to_utf8(b"abc", -1)


def test_latin1_to_text():
    assert latin1_to_text(b"Montr\xe9al") == "Montréal"
    assert latin1_to_text(b"\xce\xa9") == "Î©"


def test_quote_atom_escapes():
    assert quote_atom("ok") == "'ok'"
    assert quote_atom("it's") == "'it\\'s'"
    assert quote_atom("a\\b") == "'a\\\\b'"
