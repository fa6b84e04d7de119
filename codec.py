"""
Reversible, salted obfuscation of non-negative integers into short strings.

A hash is laid out as ``[guard] lottery digits (separator digits)* [guard]``
optionally wrapped in alphabet padding. The lottery character is derived from
the numbers themselves and seeds every per-number reshuffle of the working
alphabet, so the same number encodes differently depending on its neighbours.

This is obfuscation, not encryption: anyone holding the salt and alphabet can
reverse it.
"""
from collections.abc import Iterable

from pydantic import ValidationError

import config
from alphabet import partition_alphabet
from core_logic import ConfigurationError, logger
from models import CodecOptions
from mymath import from_alphabet_base, hex_to_numbers, numbers_to_hex, to_alphabet_base
from obfuscation import consistent_shuffle


def _is_encodable(n) -> bool:
    return isinstance(n, int) and not isinstance(n, bool) and 0 <= n <= config.MAX_INT64


def _split_on(text: str, delimiters: str) -> list[str]:
    """Splits ``text`` on any character in ``delimiters``, dropping empty pieces."""
    pieces = []
    current = []
    for char in text:
        if char in delimiters:
            if current:
                pieces.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        pieces.append("".join(current))
    return pieces


class IdCodec:
    """
    Encodes sequences of non-negative integers into hashids and back.

    The derived alphabet, separators and guards are computed once here and never
    written to again; every call works on local copies, so one instance can be
    shared between threads.
    """

    def __init__(
        self,
        salt: str = "",
        min_length: int = 0,
        alphabet: str = config.DEFAULT_ALPHABET,
        separators: str = config.DEFAULT_SEPS,
    ):
        try:
            self._options = CodecOptions(
                salt=salt, min_length=min_length, alphabet=alphabet, separators=separators
            )
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise ConfigurationError(f"{field}: {error['msg']}") from e

        sets = partition_alphabet(self._options.alphabet, self._options.separators, self._options.salt)
        if len(sets.alphabet) < 2 or not sets.separators:
            raise ConfigurationError(
                "alphabet leaves too few characters once separators and guards are reserved"
            )
        self._alphabet, self._separators, self._guards = sets

        logger.debug(
            f"Codec ready: {len(self._alphabet)} alphabet, "
            f"{len(self._separators)} separator, {len(self._guards)} guard characters"
        )

    @property
    def options(self) -> CodecOptions:
        return self._options

    @property
    def salt(self) -> str:
        return self._options.salt

    @property
    def min_length(self) -> int:
        return self._options.min_length

    @property
    def alphabet(self) -> str:
        """The working alphabet, with separators and guards removed."""
        return self._alphabet

    @property
    def separators(self) -> str:
        return self._separators

    @property
    def guards(self) -> str:
        return self._guards

    def __repr__(self) -> str:
        return f"IdCodec(min_length={self.min_length}, alphabet_size={len(self._alphabet)})"

    # --- ENCODING ---

    def encode(self, *numbers) -> str:
        """
        Encodes one or more non-negative integers, given positionally or as a
        single iterable.

        Returns an empty string when there is nothing to encode or when any value
        is negative, above 2**63 - 1, or not an integer.
        """
        single = numbers[0] if len(numbers) == 1 else None
        # Strings and bytes are single (rejected) values, not sequences of numbers
        if isinstance(single, Iterable) and not isinstance(single, (str, bytes, bytearray)):
            numbers = tuple(single)
        if not numbers or not all(_is_encodable(n) for n in numbers):
            return ""
        return self._encode(numbers)

    def encode_hex(self, hex_string: str) -> str:
        """Encodes a hex string; returns an empty string if it is not pure hex."""
        try:
            numbers = hex_to_numbers(hex_string)
        except ValueError:
            return ""
        return self.encode(numbers)

    def _reshuffle(self, alphabet: str, lottery: str) -> str:
        seed = (lottery + self._options.salt + alphabet)[:len(alphabet)]
        return consistent_shuffle(alphabet, seed)

    def _encode(self, numbers: tuple[int, ...]) -> str:
        alphabet = self._alphabet
        separators = self._separators

        numbers_hash = sum(n % (i + 100) for i, n in enumerate(numbers))
        lottery = alphabet[numbers_hash % len(alphabet)]

        parts = [lottery]
        for i, number in enumerate(numbers):
            alphabet = self._reshuffle(alphabet, lottery)
            last = to_alphabet_base(number, alphabet)
            parts.append(last)

            if i + 1 < len(numbers):
                number %= ord(last[0]) + i
                parts.append(separators[number % len(separators)])

        return self._pad("".join(parts), numbers_hash, alphabet)

    def _pad(self, hashid: str, numbers_hash: int, alphabet: str) -> str:
        min_length = self._options.min_length
        guards = self._guards

        if len(hashid) < min_length:
            hashid = guards[(numbers_hash + ord(hashid[0])) % len(guards)] + hashid

            if len(hashid) < min_length:
                hashid += guards[(numbers_hash + ord(hashid[2])) % len(guards)]

        half = len(alphabet) // 2
        while len(hashid) < min_length:
            alphabet = consistent_shuffle(alphabet, alphabet)
            hashid = alphabet[half:] + hashid + alphabet[:half]

            excess = len(hashid) - min_length
            if excess > 0:
                start = excess // 2
                hashid = hashid[start:start + min_length]

        return hashid

    # --- DECODING ---

    def decode(self, hashid: str) -> tuple[int, ...]:
        """
        Decodes a hashid back into the numbers it was built from.

        Anything that would not re-encode to exactly ``hashid`` with this
        configuration decodes to an empty tuple.
        """
        if not isinstance(hashid, str) or not hashid or hashid.isspace():
            return ()

        try:
            numbers = self._decode(hashid)
        except ValueError as e:
            logger.debug(f"Rejected hashid {hashid!r}: {e}")
            return ()

        if self.encode(numbers) != hashid:
            logger.debug(f"Rejected hashid {hashid!r}: does not re-encode to itself")
            return ()
        return numbers

    def decode_int32(self, hashid: str) -> tuple[int, ...]:
        """Like decode, but raises OverflowError if a value does not fit a signed 32-bit integer."""
        numbers = self.decode(hashid)
        for n in numbers:
            if n > config.MAX_INT32:
                raise OverflowError(f"Decoded value {n} does not fit in a 32-bit integer")
        return numbers

    def decode_hex(self, hashid: str) -> str:
        """Decodes a hashid produced by encode_hex; returns an uppercase hex string."""
        return numbers_to_hex(self.decode(hashid))

    def _decode(self, hashid: str) -> tuple[int, ...]:
        segments = _split_on(hashid, self._guards)
        if not segments:
            raise ValueError("hashid holds nothing but guards")

        payload = segments[1] if len(segments) in (2, 3) else segments[0]
        lottery, payload = payload[0], payload[1:]

        alphabet = self._alphabet
        numbers = []
        for chunk in _split_on(payload, self._separators):
            alphabet = self._reshuffle(alphabet, lottery)
            numbers.append(from_alphabet_base(chunk, alphabet))

        if not numbers:
            raise ValueError("hashid carries no numbers")
        return tuple(numbers)
