"""
Error types for vigenere_crypto.
"""


class VigenereError(Exception):
    """Base exception for Vigenère cipher operations."""
    pass


class KeyLengthMismatchError(VigenereError, ValueError):
    """Raised when a normalized key and text differ in length."""

    def __init__(self, key_length: int, text_length: int):
        self.key_length  = key_length
        self.text_length = text_length
        super().__init__(
            f"length mismatch: key has {key_length} letters, "
            f"text has {text_length}"
        )


class EmptyKeywordError(VigenereError, ValueError):
    """Raised when a keyword contains no A-Z letters."""
    pass


class InvalidLetterError(VigenereError, ValueError):
    """Raised when a single A-Z letter was expected."""
    pass
