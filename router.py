import logging

from fastapi import APIRouter, Depends, Request

import config
from codec import IdCodec
from core_logic import ResourceNotFoundException, ValidationException
from encoding import get_codec
from limiter import limiter
from schemas import (
    DecodeRequest, EncodeRequest, HashResponse, HexDecodeRequest, HexEncodeRequest,
    HexResponse, IdResponse, NumbersResponse,
)

# --- Router Setup ---

api_router = APIRouter(
    prefix="/api/v1",
    tags=["Codec"],  # Group endpoints in the docs
)

logger = logging.getLogger("idcodec.router")

# --- Number Routes ---

@api_router.post("/encode", response_model=HashResponse, summary="Encode numbers")
@limiter.limit(config.RATE_LIMIT_ENCODE)
async def encode_numbers(request: Request, payload: EncodeRequest, codec: IdCodec = Depends(get_codec)):
    """Encodes a list of non-negative integers. Any negative value yields an empty hashid."""
    hashid = codec.encode(payload.numbers)
    if not hashid and payload.numbers:
        logger.warning(f"Refused to encode {len(payload.numbers)} numbers: out of range")
    return HashResponse(hashid=hashid)


@api_router.post("/decode", response_model=NumbersResponse, summary="Decode a hashid")
@limiter.limit(config.RATE_LIMIT_DECODE)
async def decode_hashid(request: Request, payload: DecodeRequest, codec: IdCodec = Depends(get_codec)):
    """Decodes a hashid. Foreign or tampered hashids yield an empty list."""
    if payload.width == 32:
        try:
            numbers = codec.decode_int32(payload.hashid)
        except OverflowError as e:
            raise ValidationException(str(e))
    else:
        numbers = codec.decode(payload.hashid)
    return NumbersResponse(numbers=list(numbers))

# --- Hex Routes ---

@api_router.post("/hex/encode", response_model=HashResponse, summary="Encode a hex string")
@limiter.limit(config.RATE_LIMIT_ENCODE)
async def encode_hex(request: Request, payload: HexEncodeRequest, codec: IdCodec = Depends(get_codec)):
    """Encodes a hex string such as an ObjectId. Non-hex input yields an empty hashid."""
    return HashResponse(hashid=codec.encode_hex(payload.hex))


@api_router.post("/hex/decode", response_model=HexResponse, summary="Decode a hex hashid")
@limiter.limit(config.RATE_LIMIT_DECODE)
async def decode_hex(request: Request, payload: HexDecodeRequest, codec: IdCodec = Depends(get_codec)):
    return HexResponse(hex=codec.decode_hex(payload.hashid))

# --- Single ID Lookup ---

@api_router.get("/ids/{hashid}", response_model=IdResponse, summary="Resolve a single-ID hashid")
@limiter.limit(config.RATE_LIMIT_DECODE)
async def resolve_id(request: Request, hashid: str, codec: IdCodec = Depends(get_codec)):
    """Resolves a hashid that encodes exactly one ID."""
    numbers = codec.decode(hashid)
    if len(numbers) != 1:
        raise ResourceNotFoundException(f"No ID found for '{hashid}'")
    return IdResponse(id=numbers[0])
