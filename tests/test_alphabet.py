import os
import sys

import pytest

# Add the project root to sys.path to resolve module imports correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import config
from alphabet import carve_guards, partition_alphabet, split_separators, unique_characters


def test_unique_characters_keeps_first_occurrence():
    assert unique_characters("abcabcd") == "abcd"
    assert unique_characters("") == ""


@pytest.mark.parametrize("salt", ["", "this is my salt", "janottaa"])
def test_default_partition_is_disjoint_and_complete(salt):
    sets = partition_alphabet(config.DEFAULT_ALPHABET, config.DEFAULT_SEPS, salt)

    assert not set(sets.alphabet) & set(sets.separators)
    assert not set(sets.alphabet) & set(sets.guards)
    assert not set(sets.separators) & set(sets.guards)
    assert sorted(sets.alphabet + sets.separators + sets.guards) == sorted(config.DEFAULT_ALPHABET)

    # 48 non-separator characters, 14 separators, ceil(48 / 12) guards
    assert len(sets.separators) == 14
    assert len(sets.guards) == 4
    assert len(sets.alphabet) == 44
    assert set(sets.separators) == set(config.DEFAULT_SEPS)


def test_missing_separators_are_pulled_from_alphabet():
    """With no usable separator candidates, about one in 3.5 characters becomes a separator."""
    sets = partition_alphabet("0123456789ABDEGJ", config.DEFAULT_SEPS, "")
    assert sets.separators == "01234"
    assert sets.guards == "5"
    assert sets.alphabet == "6789ABDEGJ"


def test_guards_come_from_separators_for_tiny_alphabets():
    sets = partition_alphabet("cfhistuCFHISTUab", config.DEFAULT_SEPS, "")
    assert sets.alphabet == "ab"
    assert sets.guards == "c"
    assert sets.separators == "fhistuCFHISTU"


def test_separator_candidates_outside_alphabet_are_ignored():
    alphabet, separators = split_separators("abcdefghijklmnopqrstuvwxyz", "cfhistuCFHISTU", "")
    assert separators == "cfhistu"
    assert alphabet == "abdegjklmnopqrvwxyz"


def test_carve_guards_from_alphabet():
    sets = carve_guards("abcdefghijklmnopqrstuvwxyz", "0123456")
    assert sets.guards == "abc"
    assert sets.alphabet == "defghijklmnopqrstuvwxyz"
    assert sets.separators == "0123456"
