from __future__ import annotations

from typing import Optional


class AtomContractError(ValueError):
    """A caller broke a precondition of the encoder or the hasher."""


class InvalidLength(AtomContractError):
    pass


class BufferTooSmall(AtomContractError):
    pass


class InvalidBuffer(AtomContractError):
    pass


def check_length(name, length, limit: Optional[int] = None) -> int:
    """
    Resolve the declared length of `name` and validate it.

    `length` defaults to the whole buffer. It may be shorter than the buffer
    (only that prefix is read), never longer.
    """
    size = len(name)
    if length is None:
        length = size
    if length < 0 or length > size:
        raise InvalidLength(f"declared length {length} does not fit a {size}-byte name")
    if limit is not None and length > limit:
        raise InvalidLength(f"atom length {length} exceeds limit of {limit}")
    return length
