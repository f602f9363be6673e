"""
Le Chiffre Indéchiffrable: the Vigenère cipher
==============================================
A polyalphabetic substitution cipher. Each message symbol is substituted
using a different row of the tabula recta; the row is chosen by the key
symbol at the same position, with the key repeated out to the message
length.

    key        lemonlemonle
    plaintext  attackatdawn
    ciphertext lxfopvefrnhr

A one-symbol key picks the same row for every position, which is the
Caesar cipher: key "d" shifts "attackatdawn" by three to "dwwdfndwgdzq".

Historical note: first described by Giovan Battista Bellaso in 1553 and
later misattributed to Blaise de Vigenère. Broken in the 19th century by
the Kasiski examination: repeated plaintext fragments that happen to line
up with the same key symbols produce repeated ciphertext fragments, and
the distance between them is a multiple of the key length. Once the key
length is known every column is a plain Caesar cipher.

Not secure. Teaching and reference use only.
"""

import logging
from typing import Sequence, Tuple

from . import keystream, tabula
from .errors import AlphabetMembershipError, EmptyKeyError

logger = logging.getLogger(__name__)

ALPHABET     = tuple("abcdefghijklmnopqrstuvwxyz")
ALPHABET_LEN = len(ALPHABET)


class Vigenere:
    """
    Vigenère scheme over an arbitrary alphabet.

    Immutable once built: the alphabet, the matrix and the key are fixed
    at construction, and encrypt/decrypt only read them. An instance can
    be shared freely between threads.

    Messages passed as `str` come back as `str` when every alphabet symbol
    is a single character; otherwise, and for any other sequence, the
    result is a list of alphabet symbols, one per message symbol.

    Symbols are matched by equality. Hashable alphabets get a reverse
    index; an alphabet with unhashable symbols falls back to scanning.

    If the alphabet holds the same symbol twice, lookups resolve to the
    first occurrence. Decryption is then ambiguous and round-trips are not
    guaranteed; that is a property of the cipher, not something corrected
    here.
    """

    def __init__(self, key: Sequence, alphabet: Sequence = ALPHABET):
        self._alphabet  = tuple(alphabet)
        self._matrix    = tabula.build(self._alphabet)
        try:
            self._positions = tabula.index(self._alphabet)
        except TypeError:
            self._positions = None
        self._distinct = (self._positions is not None
                          and len(self._positions) == len(self._alphabet))
        self._joinable = all(isinstance(s, str) and len(s) == 1
                             for s in self._alphabet)

        # copied so the caller cannot change it after validation
        key = key if isinstance(key, str) else tuple(key)
        if len(key) == 0:
            raise EmptyKeyError()
        for i, symbol in enumerate(key):
            self._position_of(symbol, i, "key")
        self._key = key

        logger.debug(
            f"Vigenere: N={len(self._alphabet)} key_len={len(key)} "
            f"distinct={self._distinct}"
        )

    @classmethod
    def with_alphabet(cls, key: Sequence, alphabet: Sequence) -> "Vigenere":
        """Scheme over a caller-supplied alphabet (any symbols, any order)."""
        return cls(key, alphabet)

    # ── read-only state ──────────────────────────────────────────────────────

    @property
    def alphabet(self) -> Tuple:
        return self._alphabet

    @property
    def key(self) -> Sequence:
        return self._key

    @property
    def matrix(self) -> Tuple[Tuple, ...]:
        return self._matrix

    def keystream(self, length: int) -> Tuple:
        """The key repeated to exactly `length` symbols."""
        return keystream.expand(self._key, length)

    # ── transforms ───────────────────────────────────────────────────────────

    def encrypt(self, plaintext: Sequence):
        """
        Encrypt: row from the key symbol, column from the plaintext symbol.

        Raises AlphabetMembershipError on the first plaintext symbol that
        is not in the alphabet.
        """
        logger.debug(f"encrypt: {len(plaintext)} symbols")
        out = []
        for i, (p, k) in enumerate(zip(plaintext, keystream.iter_keystream(self._key))):
            row = self._position_of(k, i, "key")
            col = self._position_of(p, i, "plaintext")
            out.append(self._matrix[row][col])
        return self._collect(plaintext, out)

    def decrypt(self, ciphertext: Sequence):
        """
        Decrypt: find the ciphertext symbol in the key symbol's row and
        emit the alphabet symbol heading that column.

        Raises AlphabetMembershipError on the first ciphertext symbol
        that is not in the row.
        """
        logger.debug(f"decrypt: {len(ciphertext)} symbols")
        n = len(self._alphabet)
        out = []
        for i, (c, k) in enumerate(zip(ciphertext, keystream.iter_keystream(self._key))):
            row = self._position_of(k, i, "key")
            if self._distinct:
                col = (self._position_of(c, i, "ciphertext") - row) % n
            else:
                col = self._column_in_row(row, c, i)
            out.append(self._alphabet[col])
        return self._collect(ciphertext, out)

    # ── helpers ──────────────────────────────────────────────────────────────

    def _position_of(self, symbol, position: int, source: str) -> int:
        if self._positions is None:
            for i, candidate in enumerate(self._alphabet):
                if candidate == symbol:
                    return i
            raise AlphabetMembershipError(symbol, position, source)
        try:
            return self._positions[symbol]
        except (KeyError, TypeError):
            raise AlphabetMembershipError(symbol, position, source) from None

    def _column_in_row(self, row: int, symbol, position: int) -> int:
        # first match wins when the alphabet repeats a symbol
        for col, candidate in enumerate(self._matrix[row]):
            if candidate == symbol:
                return col
        raise AlphabetMembershipError(symbol, position, "ciphertext")

    def _collect(self, message: Sequence, symbols: list):
        if self._joinable and isinstance(message, str):
            return "".join(symbols)
        return symbols

    def __repr__(self):
        return f"Vigenere(N={len(self._alphabet)}, key_len={len(self._key)})"
