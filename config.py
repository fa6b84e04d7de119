import os
from functools import lru_cache

# ============================================================================
# CONFIGURATION CLASS
# ============================================================================

class Config:
    """Centralized configuration with validation"""

    # Codec Constants
    DEFAULT_ALPHABET: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890"
    DEFAULT_SEPS: str = "cfhistuCFHISTU"
    SEP_DIV: float = 3.5
    GUARD_DIV: float = 12.0
    MIN_ALPHABET_LENGTH: int = 16
    HEX_CHUNK_SIZE: int = 12

    # Numeric domain (non-negative half of a signed 64-bit integer)
    MAX_INT64: int = 2**63 - 1
    MAX_INT32: int = 2**31 - 1

    # Process-wide codec
    CODEC_SALT: str = os.getenv("CODEC_SALT", "")
    # Converted to int by validate()
    CODEC_MIN_LENGTH: int | str = os.getenv("CODEC_MIN_LENGTH", "0")
    CODEC_ALPHABET: str = os.getenv("CODEC_ALPHABET", DEFAULT_ALPHABET)
    CODEC_SEPARATORS: str = os.getenv("CODEC_SEPARATORS", DEFAULT_SEPS)

    # Rate limiting
    RATE_LIMIT_ENCODE: str = os.getenv("RATE_LIMIT_ENCODE", "120/minute")
    RATE_LIMIT_DECODE: str = os.getenv("RATE_LIMIT_DECODE", "240/minute")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str | None = os.getenv("LOG_DIR")

    @classmethod
    def validate(cls):
        """Validate configuration on startup"""
        try:
            cls.CODEC_MIN_LENGTH = int(cls.CODEC_MIN_LENGTH)
        except (TypeError, ValueError):
            raise ValueError(f"CODEC_MIN_LENGTH must be an integer, got {cls.CODEC_MIN_LENGTH!r}") from None
        if cls.CODEC_MIN_LENGTH < 0:
            raise ValueError("CODEC_MIN_LENGTH must not be negative")
        if not cls.CODEC_ALPHABET or cls.CODEC_ALPHABET.isspace():
            raise ValueError("CODEC_ALPHABET must not be blank")
        if not cls.RATE_LIMIT_ENCODE or not cls.RATE_LIMIT_DECODE:
            raise ValueError("RATE_LIMIT_ENCODE and RATE_LIMIT_DECODE must be set")
        if cls.LOG_LEVEL.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown LOG_LEVEL: {cls.LOG_LEVEL}")

# ============================================================================
# SINGLETON INSTANCE & DERIVED CONSTANTS
# ============================================================================

config = Config()

# --- Expose class attributes as module constants for convenience ---
for attr in [a for a in dir(config) if not a.startswith('__') and not callable(getattr(config, a))]:
    globals()[attr] = getattr(config, attr)


@lru_cache()
def get_settings() -> Config:
    """Returns the validated configuration singleton."""
    config.validate()
    return config
