"""
Vigenère Polyalphabetic Cipher
==============================
Key derivation, encryption and decryption over A-Z.

Historical note: Blaise de Vigenère, 1553. Called "le chiffre
indéchiffrable" for 300 years. Not modern-secure: a repeating key
falls to Kasiski and Friedman analysis. Educational use only.

All input is normalized first (letters only, uppercased), so
"Mi-Chi.Gan Tech!" and "MICHIGANTECH" encrypt identically.
"""

import logging
from typing import Tuple

from .alphabet import LETTER_VALUES, normalize, value_letter
from .errors import EmptyKeywordError, KeyLengthMismatchError
from .table import generate_table

logger = logging.getLogger(__name__)


def generate_key(keyword: str, key_length: int) -> str:
    """
    Repeat the normalized keyword until it is exactly `key_length`
    letters long, truncating the last repetition.

        generate_key("HOUGHTON", 10) -> "HOUGHTONHO"

    Raises EmptyKeywordError if the keyword has no letters, and
    ValueError for a negative or non-integer length.
    """
    if isinstance(key_length, bool) or not isinstance(key_length, int):
        raise ValueError(f"Key length must be an integer, got {key_length!r}.")
    if key_length < 0:
        raise ValueError(f"Key length must be non-negative, got {key_length}.")
    checked = normalize(keyword)
    if not checked:
        raise EmptyKeywordError("Keyword must contain at least one letter A-Z.")
    period = len(checked)
    logger.debug("Deriving %d-letter key from %d-letter keyword", key_length, period)
    return "".join(checked[i % period] for i in range(key_length))


def _checked_pair(key: str, text: str) -> Tuple[str, str]:
    checked_key  = normalize(key)
    checked_text = normalize(text)
    if len(checked_key) != len(checked_text):
        raise KeyLengthMismatchError(len(checked_key), len(checked_text))
    return checked_key, checked_text


def encrypt(key: str, plaintext: str) -> str:
    """
    Encrypt plaintext under a key of the same (normalized) length.

    Each letter becomes (plain + key) mod 26.
    Raises KeyLengthMismatchError when the lengths differ.
    """
    checked_key, checked_text = _checked_pair(key, plaintext)
    logger.debug("Encrypting %d letters", len(checked_text))
    return "".join(
        value_letter(LETTER_VALUES[p] + LETTER_VALUES[k])
        for p, k in zip(checked_text, checked_key)
    )


def decrypt(key: str, ciphertext: str) -> str:
    """
    Decrypt ciphertext under a key of the same (normalized) length.

    Each letter becomes (cipher - key) mod 26.
    Raises KeyLengthMismatchError when the lengths differ.
    """
    checked_key, checked_text = _checked_pair(key, ciphertext)
    logger.debug("Decrypting %d letters", len(checked_text))
    return "".join(
        value_letter(LETTER_VALUES[c] - LETTER_VALUES[k])
        for c, k in zip(checked_text, checked_key)
    )


class VigenereCipher:
    """
    Keyword-bound Vigenère cipher.

    Derives a key sized to each message, so callers never handle
    key lengths themselves:

        v  = VigenereCipher("HOUGHTON")
        ct = v.encrypt("Michigan Tech")
        v.decrypt(ct)  # "MICHIGANTECH"
    """

    def __init__(self, keyword: str):
        checked = normalize(keyword)
        if not checked:
            raise EmptyKeywordError("Vigenère keyword must contain at least one letter A-Z.")
        self._keyword = checked

    @property
    def keyword(self) -> str:
        return self._keyword

    @property
    def table(self) -> Tuple[str, ...]:
        return generate_table()

    def key_for(self, text: str) -> str:
        """Key matching the normalized length of `text`."""
        return generate_key(self._keyword, len(normalize(text)))

    def encrypt(self, plaintext: str) -> str:
        return encrypt(self.key_for(plaintext), plaintext)

    def decrypt(self, ciphertext: str) -> str:
        return decrypt(self.key_for(ciphertext), ciphertext)

    def __repr__(self) -> str:
        return f"VigenereCipher(period={len(self._keyword)})"
