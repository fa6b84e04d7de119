"""
Handles the encoding and decoding of database IDs into short, non-sequential,
and reversible strings using the process-wide codec. This is the protection
against scraping and enumeration of sequential IDs.
"""
from functools import lru_cache

from codec import IdCodec
from config import get_settings


@lru_cache()
def get_codec() -> IdCodec:
    """
    Returns a cached, singleton instance of the codec.
    This ensures the alphabet partition is computed only once with the final settings.
    """
    settings = get_settings()
    return IdCodec(
        salt=settings.CODEC_SALT,
        min_length=settings.CODEC_MIN_LENGTH,
        alphabet=settings.CODEC_ALPHABET,
        separators=settings.CODEC_SEPARATORS,
    )


def encode_id(n: int) -> str:
    """Encodes a single integer ID into a short, non-sequential string."""
    return get_codec().encode(n)


def decode_id(s: str) -> int | None:
    """Decodes a short string back into an integer ID, or None if it is not a single-ID hash."""
    decoded = get_codec().decode(s)
    if len(decoded) == 1:
        return decoded[0]
    return None
