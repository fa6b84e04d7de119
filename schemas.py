from typing import Literal

from pydantic import BaseModel, Field

class EncodeRequest(BaseModel):
    """Schema for a request to encode numbers."""
    # Negative values are accepted here and answered with an empty hashid
    numbers: list[int] = Field(..., max_length=1000)

class DecodeRequest(BaseModel):
    """Schema for a request to decode a hashid."""
    hashid: str = Field(..., max_length=4096)
    # Integer width the caller will store the numbers in
    width: Literal[32, 64] = 64

class HexEncodeRequest(BaseModel):
    hex: str = Field(..., max_length=4096)

class HexDecodeRequest(BaseModel):
    hashid: str = Field(..., max_length=4096)

class HashResponse(BaseModel):
    """Schema for an encoded hashid. Empty when the input was rejected."""
    hashid: str

class NumbersResponse(BaseModel):
    """Schema for decoded numbers. Empty when the hashid was rejected."""
    numbers: list[int]

class HexResponse(BaseModel):
    hex: str

class IdResponse(BaseModel):
    id: int
