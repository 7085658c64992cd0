"""
vigenere_crypto — Live Demo
===========================
Run:  python examples/demo_vigenere.py

Prints the substitution table, then walks the HOUGHTON keyword
through key derivation, encryption and decryption.
"""

import sys, os, io, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_crypto import (
    VigenereCipher, KeyLengthMismatchError, EmptyKeywordError,
    encrypt, normalize, run_demo, table_lookup,
)

LINE = "═" * 70

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
header("Demonstration scenario — HOUGHTON / MICHIGANTECHNOLOGICALUNIVERSITY")
t0     = time.perf_counter()
buf    = io.StringIO()
result = run_demo(buf)
elapsed = time.perf_counter() - t0
print(buf.getvalue(), end="")
ok("Key",        result.key)
ok("Ciphertext", result.ciphertext)
ok("Round-trip", f"{elapsed*1000:.2f} ms")
ok("Recovered",  str(result.decrypted == result.message))

# ─────────────────────────────────────────────────────────────────────────────
header("Normalization — punctuation, spaces and case are discarded")
raw = "Mi-Chi.Gan Tech!"
v   = VigenereCipher("Houghton")
ok("Input",      raw)
ok("Normalized", normalize(raw))
ok("Encrypted",  v.encrypt(raw))
ok("Decrypted",  v.decrypt(v.encrypt(raw)))

# ─────────────────────────────────────────────────────────────────────────────
header("Table lookup == modular addition")
ok("table['M']['H']", table_lookup("M", "H"))
ok("encrypt('H', 'M')", encrypt("H", "M"))

# ─────────────────────────────────────────────────────────────────────────────
header("Errors")
try:
    encrypt("AB", "ABC")
except KeyLengthMismatchError as e:
    ok("KeyLengthMismatchError", str(e))
try:
    VigenereCipher("1234 !!")
except EmptyKeywordError as e:
    ok("EmptyKeywordError", str(e))

print(f"\n{LINE}\n")
