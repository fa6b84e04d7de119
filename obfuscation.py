"""
The salt-driven permutation that every other part of the codec is built on.

This is a Fisher-Yates style shuffle where the "random" choices are taken from
the character codes of the salt instead of a random source. The same
(alphabet, salt) pair always produces the same permutation, which is what makes
decoding possible. It is not cryptographically secure.
"""


def consistent_shuffle(alphabet: str, salt: str) -> str:
    """Deterministically permutes ``alphabet`` using the character codes of ``salt``.

    An empty or whitespace-only salt leaves the alphabet untouched.
    """
    if not salt or salt.isspace():
        return alphabet

    letters = list(alphabet)
    salt_length = len(salt)
    v = p = 0
    for i in range(len(letters) - 1, 0, -1):
        v %= salt_length
        n = ord(salt[v])
        p += n
        j = (n + v + p) % i
        letters[i], letters[j] = letters[j], letters[i]
        v += 1
    return "".join(letters)
