"""
Presentation helpers and the demonstration scenario.

Output goes to `stream` (default: sys.stdout). None of these
functions touch any state besides the stream they write to.
"""

import sys
from typing import NamedTuple, Optional, TextIO

from .alphabet import normalize
from .cipher import decrypt, encrypt, generate_key
from .table import generate_table

DEMO_KEYWORD = "HOUGHTON"
DEMO_MESSAGE = "MICHIGANTECHNOLOGICALUNIVERSITY"


class DemoResult(NamedTuple):
    key:        str
    message:    str
    ciphertext: str
    decrypted:  str


def format_table() -> str:
    """Table as text, each cell right-aligned in a 2-char field."""
    return "\n".join("".join(f"{cell:>2}" for cell in row) for row in generate_table())


def print_table(stream: Optional[TextIO] = None) -> None:
    print(format_table(), file=stream or sys.stdout)


def print_key(key: str, stream: Optional[TextIO] = None) -> None:
    print(normalize(key), file=stream or sys.stdout)


def print_message(plaintext: str, stream: Optional[TextIO] = None) -> None:
    print(normalize(plaintext), file=stream or sys.stdout)


def print_cipher(ciphertext: str, stream: Optional[TextIO] = None) -> None:
    print(normalize(ciphertext), file=stream or sys.stdout)


def run_demo(stream: Optional[TextIO] = None) -> DemoResult:
    """
    Fixed smoke-test scenario.

    Prints the table, the key derived from HOUGHTON, the message,
    its ciphertext and the decrypted ciphertext, then returns them.
    """
    key        = generate_key(DEMO_KEYWORD, len(DEMO_MESSAGE))
    ciphertext = encrypt(key, DEMO_MESSAGE)
    decrypted  = decrypt(key, ciphertext)

    print_table(stream)
    print_key(key, stream)
    print_message(DEMO_MESSAGE, stream)
    print_cipher(ciphertext, stream)
    print_message(decrypted, stream)
    return DemoResult(key, DEMO_MESSAGE, ciphertext, decrypted)
