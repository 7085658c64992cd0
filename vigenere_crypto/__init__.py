"""
vigenere_crypto
===============
The classical Vigenère polyalphabetic cipher over A-Z (1553).

Modules:
    alphabet  — A-Z <-> 0-25 mapping, text normalizer
    table     — 26x26 substitution table (tabula recta)
    cipher    — key derivation, encrypt / decrypt, VigenereCipher
    display   — printing helpers, HOUGHTON demonstration
    cli       — `vigenere-crypto` command line

Not secure. For teaching and puzzles only.

License: Apache 2.0
"""

__version__  = "1.0.0"

from .alphabet import ALPHABET, normalize
from .table    import generate_table, table_lookup
from .cipher   import VigenereCipher, generate_key, encrypt, decrypt
from .display  import (
    format_table, print_table, print_key, print_message, print_cipher, run_demo,
)
from .errors   import (
    VigenereError, KeyLengthMismatchError, EmptyKeywordError, InvalidLetterError,
)

__all__ = [
    "ALPHABET",
    "normalize",
    "generate_table",
    "table_lookup",
    "VigenereCipher",
    "generate_key",
    "encrypt",
    "decrypt",
    "format_table",
    "print_table",
    "print_key",
    "print_message",
    "print_cipher",
    "run_demo",
    "VigenereError",
    "KeyLengthMismatchError",
    "EmptyKeywordError",
    "InvalidLetterError",
]
