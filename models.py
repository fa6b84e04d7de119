from pydantic import BaseModel, ConfigDict, Field, field_validator

import config
from alphabet import unique_characters

class CodecOptions(BaseModel):
    """Immutable configuration of a codec instance."""
    model_config = ConfigDict(frozen=True, strict=True)

    salt: str = ""
    min_length: int = Field(0, ge=0)
    # De-duplicated, first occurrence wins
    alphabet: str = config.DEFAULT_ALPHABET
    separators: str = config.DEFAULT_SEPS

    @field_validator('alphabet')
    def validate_alphabet(cls, value):
        if not value or value.isspace():
            raise ValueError("alphabet must not be blank")

        value = unique_characters(value)
        if len(value) < config.MIN_ALPHABET_LENGTH:
            raise ValueError(
                f"alphabet must contain at least {config.MIN_ALPHABET_LENGTH} unique characters"
            )
        return value
