"""
Command-line front end.

    vigenere-crypto encrypt -k HOUGHTON "Michigan Tech"
    vigenere-crypto decrypt -k HOUGHTON TWWNPZOAASWN
    vigenere-crypto key -k HOUGHTON -n 12
    vigenere-crypto table
    vigenere-crypto demo

TEXT may be omitted, in which case it is read from stdin.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .cipher import VigenereCipher, generate_key
from .display import print_key, print_table, run_demo
from .errors import VigenereError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging for the command-line tool."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def _read_text(parts: List[str]) -> str:
    if parts:
        return " ".join(parts)
    logger.debug("No TEXT given, reading stdin")
    return sys.stdin.read()


def _cmd_encrypt(args) -> None:
    print(VigenereCipher(args.keyword).encrypt(_read_text(args.text)))


def _cmd_decrypt(args) -> None:
    print(VigenereCipher(args.keyword).decrypt(_read_text(args.text)))


def _cmd_key(args) -> None:
    print_key(generate_key(args.keyword, args.length))


def _cmd_table(args) -> None:
    print_table()


def _cmd_demo(args) -> None:
    run_demo()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vigenere-crypto",
        description="Encrypt or decrypt A-Z text with the classical Vigenère cipher. "
                    "Everything but letters is discarded.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    for name, func, help_ in (
        ("encrypt", _cmd_encrypt, "encrypt TEXT under KEYWORD"),
        ("decrypt", _cmd_decrypt, "decrypt TEXT under KEYWORD"),
    ):
        p = sub.add_parser(name, help=help_)
        p.add_argument("-k", "--keyword", required=True, help="keyword (letters only are used)")
        p.add_argument("text", nargs="*", metavar="TEXT", help="text to process (default: stdin)")
        p.set_defaults(func=func)

    p = sub.add_parser("key", help="print the key derived from KEYWORD")
    p.add_argument("-k", "--keyword", required=True)
    p.add_argument("-n", "--length", type=int, required=True, help="key length in letters")
    p.set_defaults(func=_cmd_key)

    p = sub.add_parser("table", help="print the 26x26 substitution table")
    p.set_defaults(func=_cmd_table)

    p = sub.add_parser("demo", help="run the HOUGHTON / MICHIGANTECH demonstration")
    p.set_defaults(func=_cmd_demo)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        args.func(args)
    except (VigenereError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0
