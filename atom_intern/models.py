from __future__ import annotations

from pydantic import BaseModel, Field


class EncodedName(BaseModel):
    encoding: str = Field(default="utf-8")
    length: int
    content_b64: str
    hex: str


class EncodeResponse(BaseModel):
    converted: bool
    input_length: int
    name: EncodedName


class HashResponse(BaseModel):
    length: int
    hash: int = Field(examples=[3465])
    hash_hex: str = Field(examples=["0x00000d89"])


class AtomResponse(BaseModel):
    converted: bool
    name: EncodedName
    display: str
    hash: int
    hash_hex: str


class HealthResponse(BaseModel):
    ok: bool = True
