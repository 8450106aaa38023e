from __future__ import annotations

from typing import Optional, Tuple

from .errors import check_length
from .normalize import Conversion, latin1_to_utf8
from .rules import HASH_HIGH_NIBBLE, HASH_MASK


def atom_hash(name, length: Optional[int] = None) -> int:
    """
    hashpjw over the first `length` bytes of an atom name.

    A UTF-8 encoded Latin-1 Supplement character (0xC2/0xC3 followed by a
    continuation byte) is folded back to its single Latin-1 byte before
    mixing, so a name hashes the same in either encoding.
    """
    length = check_length(name, length)
    h = 0
    i = 0
    while i < length:
        v = name[i]
        i += 1
        # latin1 clutch; v stays 8 bits wide
        if i < length and (v & 0xFE) == 0xC2 and (name[i] & 0xC0) == 0x80:
            v = ((v << 6) | (name[i] & 0x3F)) & 0xFF
            i += 1
        h = ((h << 4) + v) & HASH_MASK
        g = h & HASH_HIGH_NIBBLE
        if g:
            h ^= g >> 24
            h ^= g
    return h


def atom_key(name) -> Tuple[Conversion, int]:
    """Finalize a Latin-1 name and hash it, the way the atom table places it."""
    result = latin1_to_utf8(name)
    return result, atom_hash(result.content)
