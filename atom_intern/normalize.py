"""
Atom name normalization.

Responsibilities:
- re-encode Latin-1 atom names into the UTF-8 form used internally
- leave ASCII-only names untouched (no copy, same object back)
- decode and quote names for display
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .errors import BufferTooSmall, InvalidBuffer, check_length
from .rules import MAX_ATOM_CHARACTERS, MAX_ATOM_SZ_FROM_LATIN1


@dataclass(frozen=True, eq=False)
class Unchanged:
    """The name was pure ASCII; `data` is the caller's own object."""

    data: Union[bytes, bytearray, memoryview]
    length: int
    converted: bool = False

    @property
    def content(self) -> bytes:
        return bytes(self.data[: self.length])


@dataclass(frozen=True, eq=False)
class Converted:
    """The name held Latin-1 bytes >= 0x80 and was rewritten into `data`."""

    data: bytes
    length: int
    converted: bool = True

    @property
    def content(self) -> bytes:
        return self.data


Conversion = Union[Unchanged, Converted]


def latin1_to_utf8(name, length: Optional[int] = None, buf: Optional[bytearray] = None) -> Conversion:
    """
    Re-encode a Latin-1 atom name as UTF-8.

    Rules:
    - Every byte is one Latin-1 character (U+0000..U+00FF).
    - If all bytes are < 0x80 the name is returned as-is (Unchanged).
    - Otherwise the ASCII prefix is copied, and each byte >= 0x80 becomes
      0xC0 | (b >> 6), 0x80 | (b & 0x3F) (Converted).
    - `buf` is scratch space, a bytearray of at least MAX_ATOM_SZ_FROM_LATIN1
      bytes. The converted name is written into it; the result never refers
      to it.
    """
    length = check_length(name, length, MAX_ATOM_CHARACTERS)
    if buf is not None and not isinstance(buf, bytearray):
        raise InvalidBuffer(f"conversion buffer must be a bytearray, got {type(buf).__name__}")
    if buf is not None and len(buf) < MAX_ATOM_SZ_FROM_LATIN1:
        raise BufferTooSmall(
            f"conversion buffer holds {len(buf)} bytes, need {MAX_ATOM_SZ_FROM_LATIN1}"
        )

    for i in range(length):
        if name[i] & 0x80:
            break
    else:
        return Unchanged(data=name, length=length)

    if buf is None:
        buf = bytearray(MAX_ATOM_SZ_FROM_LATIN1)

    buf[:i] = name[:i]
    dst = i
    for i in range(i, length):
        chr_ = name[i]
        if not chr_ & 0x80:
            buf[dst] = chr_
            dst += 1
        else:
            buf[dst] = 0xC0 | (chr_ >> 6)
            buf[dst + 1] = 0x80 | (chr_ & 0x3F)
            dst += 2

    return Converted(data=bytes(buf[:dst]), length=dst)


def latin1_to_text(name, length: Optional[int] = None) -> str:
    length = check_length(name, length, MAX_ATOM_CHARACTERS)
    return bytes(name[:length]).decode("latin-1")


def quote_atom(text: str) -> str:
    """Printed form of an atom: 'name', with backslash and quote escaped."""
    return "'" + text.replace("\\", "\\\\").replace("'", "\\'") + "'"
