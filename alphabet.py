"""
Splits a configured alphabet into the three disjoint character sets the codec
works with: the working alphabet (digits), the separators (between numbers) and
the guards (padding). The split is order dependent: separators are carved out
first, guards come out of whatever is left.
"""
import math
from typing import Iterable, NamedTuple

import config
from obfuscation import consistent_shuffle


class AlphabetSets(NamedTuple):
    alphabet: str
    separators: str
    guards: str


def unique_characters(chars: Iterable[str]) -> str:
    """Drops repeated characters, keeping the first occurrence of each."""
    return "".join(dict.fromkeys(chars))


def split_separators(alphabet: str, separators: str, salt: str) -> tuple[str, str]:
    """
    Moves the separator candidates that actually occur in ``alphabet`` out of it,
    then rebalances so there is roughly one separator per 3.5 alphabet characters.

    Returns the shuffled ``(alphabet, separators)`` pair.
    """
    separators = unique_characters(c for c in separators if c in alphabet)
    alphabet = "".join(c for c in alphabet if c not in separators)
    separators = consistent_shuffle(separators, salt)

    if not separators or len(alphabet) // len(separators) > config.SEP_DIV:
        target = max(math.ceil(len(alphabet) / config.SEP_DIV), 2)
        if target > len(separators):
            diff = target - len(separators)
            separators += alphabet[:diff]
            alphabet = alphabet[diff:]
        else:
            separators = separators[:target]

    return consistent_shuffle(alphabet, salt), separators


def carve_guards(alphabet: str, separators: str) -> AlphabetSets:
    """Reserves about one in twelve characters as guards."""
    guard_count = math.ceil(len(alphabet) / config.GUARD_DIV)

    if len(alphabet) < 3:
        guards, separators = separators[:guard_count], separators[guard_count:]
    else:
        guards, alphabet = alphabet[:guard_count], alphabet[guard_count:]

    return AlphabetSets(alphabet, separators, guards)


def partition_alphabet(alphabet: str, separators: str, salt: str) -> AlphabetSets:
    """Derives the working alphabet, separators and guards for a codec."""
    alphabet, separators = split_separators(unique_characters(alphabet), separators, salt)
    return carve_guards(alphabet, separators)
