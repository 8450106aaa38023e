"""
Fixed atom limits.

These values are part of the bit-exact contract shared with the symbol table,
so they are constants rather than settings.
"""

MAX_ATOM_CHARACTERS = 255
MAX_ATOM_SZ_FROM_LATIN1 = 2 * MAX_ATOM_CHARACTERS  # every Latin-1 byte >= 0x80 becomes 2 bytes
MAX_ATOM_SZ_LIMIT = 4 * MAX_ATOM_CHARACTERS  # theoretical byte limit

HASH_MASK = 0xFFFFFFFF
HASH_HIGH_NIBBLE = 0xF0000000

if MAX_ATOM_SZ_FROM_LATIN1 != 2 * MAX_ATOM_CHARACTERS:
    raise RuntimeError("MAX_ATOM_SZ_FROM_LATIN1 must be twice MAX_ATOM_CHARACTERS")
if MAX_ATOM_SZ_FROM_LATIN1 > MAX_ATOM_SZ_LIMIT:
    raise RuntimeError("MAX_ATOM_SZ_FROM_LATIN1 must not exceed MAX_ATOM_SZ_LIMIT")
