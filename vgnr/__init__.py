"""
vgnr: Le Chiffre Indéchiffrable
===============================
The Vigenère polyalphabetic substitution cipher over any finite alphabet.

Modules:
    tabula      tabula recta (N×N cyclic-shift substitution matrix)
    keystream   key repeated out to the message length
    cipher      Vigenere scheme: encrypt / decrypt
    errors      AlphabetMembershipError, EmptyKeyError, EmptyAlphabetError

A sixteenth-century cipher. Do not use it to protect anything.

License: Apache 2.0
"""

import logging

__version__ = "1.0.0"

from .cipher import Vigenere, ALPHABET, ALPHABET_LEN
from .errors import (
    VigenereError,
    AlphabetMembershipError,
    EmptyKeyError,
    EmptyAlphabetError,
)

# silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Vigenere",
    "ALPHABET",
    "ALPHABET_LEN",
    "VigenereError",
    "AlphabetMembershipError",
    "EmptyKeyError",
    "EmptyAlphabetError",
]
