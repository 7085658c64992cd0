"""
Substitution Table
==================
The classical 26x26 Vigenère square ("tabula recta"):

    table[row][col] = ALPHABET[(row + col) mod 26]

Each row is the alphabet rotated left by ``row`` places. The table is
pure modular addition laid out as a grid; the cipher itself uses the
arithmetic directly and keeps the table for display and lookups.

Built once and cached. Rows are strings inside a tuple, so the value
can be shared freely between callers.
"""

import logging
from functools import lru_cache
from typing import Tuple

from .alphabet import ALPHABET, ALPHABET_SIZE, LETTER_VALUES
from .errors import InvalidLetterError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def generate_table() -> Tuple[str, ...]:
    """Return the 26x26 substitution table as a tuple of 26 row strings."""
    table = tuple(
        "".join(ALPHABET[(row + col) % ALPHABET_SIZE] for col in range(ALPHABET_SIZE))
        for row in range(ALPHABET_SIZE)
    )
    logger.debug("Built %dx%d substitution table", len(table), len(table[0]))
    return table


def _value_of(letter: str) -> int:
    if not isinstance(letter, str) or len(letter) != 1:
        raise InvalidLetterError(f"Expected a single letter, got {letter!r}.")
    try:
        return LETTER_VALUES[letter.upper()]
    except KeyError:
        raise InvalidLetterError(f"{letter!r} is not a letter A-Z.") from None


def table_lookup(row: str, col: str) -> str:
    """
    Read the cell at (row letter, column letter).

    table_lookup(plain, key) gives the cipher letter, the same
    result as encrypting one letter. Case-insensitive.
    """
    return generate_table()[_value_of(row)][_value_of(col)]
