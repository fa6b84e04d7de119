"""
Positional base conversion over an arbitrary digit alphabet, plus the hex
chunking used by the hex adapter.
"""
import string

import config

HEX_DIGITS = frozenset(string.hexdigits)


def to_alphabet_base(n: int, alphabet: str) -> str:
    """
    Converts a non-negative integer into its base-len(alphabet) representation,
    most significant digit first. Zero becomes the first character of the alphabet.
    """
    if n < 0:
        raise ValueError("Input must be a non-negative integer")
    base = len(alphabet)
    result = []
    while True:
        n, remainder = divmod(n, base)
        result.append(alphabet[remainder])
        if n == 0:
            break
    return "".join(reversed(result))


def from_alphabet_base(s: str, alphabet: str) -> int:
    """
    Converts a string written in ``alphabet`` digits back to an integer.
    """
    if not s:
        raise ValueError("Cannot convert an empty string")
    base = len(alphabet)
    n = 0
    for char in s:
        position = alphabet.find(char)
        if position < 0:
            raise ValueError(f"Invalid character '{char}' not in alphabet")
        n = n * base + position
    return n


def hex_to_numbers(hex_string: str) -> tuple[int, ...]:
    """
    Splits a hex string into chunks of up to 12 digits and parses each one with
    a leading "1" digit so that leading zero nibbles survive the round trip.

    Raises ValueError for an empty string or any non-hex character.
    """
    if not hex_string or not all(c in HEX_DIGITS for c in hex_string):
        raise ValueError("Invalid hex string")
    size = config.HEX_CHUNK_SIZE
    return tuple(
        int("1" + hex_string[i:i + size], 16)
        for i in range(0, len(hex_string), size)
    )


def numbers_to_hex(numbers) -> str:
    """Reassembles chunks produced by hex_to_numbers into an uppercase hex string."""
    return "".join(format(n, "X")[1:] for n in numbers)
