"""
Alphabet
========
The 26-letter Latin alphabet used by the cipher, its explicit
letter <-> value mapping, and the text normalizer.

Every letter is addressed through ``LETTER_VALUES`` / ``ALPHABET``
rather than code-point arithmetic, so the modular maths stays
independent of the text encoding.
"""

import re

ALPHABET      = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE = len(ALPHABET)
LETTER_VALUES = {letter: value for value, letter in enumerate(ALPHABET)}

_NON_LETTERS = re.compile(r"[^a-zA-Z]")


def normalize(text: str) -> str:
    """
    Strip everything but ASCII letters and uppercase the rest.

    Never fails: an empty (or letter-free) input gives "".
    """
    return _NON_LETTERS.sub("", text).upper()


def value_letter(value: int) -> str:
    """Letter for any integer, reduced mod 26."""
    return ALPHABET[value % ALPHABET_SIZE]
