"""
Response envelopes for the HTTP layer.

Each function takes the raw uploaded atom name and returns a dict matching
the corresponding API model.
"""

from __future__ import annotations

import base64
from typing import Any, Dict

from .hashing import atom_hash, atom_key
from .normalize import latin1_to_text, latin1_to_utf8, quote_atom


def _hash_hex(h: int) -> str:
    return f"0x{h:08x}"


def _encoded_name(content: bytes) -> Dict[str, Any]:
    return {
        "encoding": "utf-8",
        "length": len(content),
        "content_b64": base64.b64encode(content).decode("ascii"),
        "hex": content.hex(),
    }


def encode_atom_bytes(raw: bytes) -> Dict[str, Any]:
    result = latin1_to_utf8(raw)
    return {
        "converted": result.converted,
        "input_length": len(raw),
        "name": _encoded_name(result.content),
    }


def hash_atom_bytes(raw: bytes) -> Dict[str, Any]:
    h = atom_hash(raw)
    return {"length": len(raw), "hash": h, "hash_hex": _hash_hex(h)}


def intern_atom_bytes(raw: bytes) -> Dict[str, Any]:
    """
    Encode, then hash the finalized name.

    The hash is taken over the UTF-8 form so bucket placement matches what
    the atom table computes.
    """
    result, h = atom_key(raw)
    content = result.content
    return {
        "converted": result.converted,
        "name": _encoded_name(content),
        "display": quote_atom(latin1_to_text(raw)),
        "hash": h,
        "hash_hex": _hash_hex(h),
    }
