"""
vgnr: Live Demo
===============
Run:  python examples/demo_vigenere.py

Encrypts and decrypts the classic vectors, prints a corner of the
tabula recta, and shows how errors report the offending symbol.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vgnr import Vigenere, AlphabetMembershipError

LINE = "═" * 70
MSG  = "attackatdawn"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

if "-v" in sys.argv:
    logging.basicConfig(level=logging.DEBUG, format=' %(name)s: %(message)s')

# ─────────────────────────────────────────────────────────────────────────────
header("Key \"lemon\"")
v  = Vigenere("lemon")
ct = v.encrypt(MSG)
ok("Key-stream", "".join(v.keystream(len(MSG))))
ok("Encrypted",  ct)
ok("Decrypted",  v.decrypt(ct))

# ─────────────────────────────────────────────────────────────────────────────
header("Caesar: one-letter key \"d\"")
c  = Vigenere("d")
ct = c.encrypt(MSG)
ok("Encrypted", ct)
ok("Decrypted", c.decrypt(ct))

# ─────────────────────────────────────────────────────────────────────────────
header("Tabula recta (first 6 rows x 12 columns)")
for row in v.matrix[:6]:
    print("     " + " ".join(row[:12]))

# ─────────────────────────────────────────────────────────────────────────────
header("Custom alphabet: C A E S A R")
custom = Vigenere.with_alphabet("AS", ['C', 'A', 'E', 'S', 'A', 'R'])
for row in custom.matrix:
    print("     " + " ".join(row))
ok("Encrypted CRESCAR", "".join(custom.encrypt(list("CRESCAR"))))

# ─────────────────────────────────────────────────────────────────────────────
header("Invalid input")
try:
    v.encrypt("attack at dawn")
except AlphabetMembershipError as e:
    ok("Rejected", str(e))

print(f"\n{LINE}\n")
