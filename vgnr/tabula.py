"""
Tabula recta builder
====================
The Vigenère square: N rows of the alphabet, each row shifted cyclically
one position to the left of the row above it.

    matrix[i][j] = alphabet[(i + j) % N]

Symbols are never treated as ordinals. Positions are resolved purely by
equality, so any alphabet works in any order, including one with repeated
symbols (degenerate: decryption then picks the first matching column).
"""

import logging
from typing import Dict, Hashable, Sequence, Tuple

from .errors import EmptyAlphabetError

logger = logging.getLogger(__name__)


def rotate(alphabet: Sequence, shift: int) -> Tuple:
    """Return the alphabet rotated left by `shift` positions (one matrix row)."""
    n = len(alphabet)
    if n == 0:
        raise EmptyAlphabetError()
    return tuple(alphabet[(shift + j) % n] for j in range(n))


def build(alphabet: Sequence) -> Tuple[Tuple, ...]:
    """
    Build the N×N substitution matrix for `alphabet`.

    Row 0 is the alphabet itself; row i is row 0 rotated left by i.
    Raises EmptyAlphabetError if the alphabet is empty.
    """
    if len(alphabet) == 0:
        raise EmptyAlphabetError()
    matrix = tuple(rotate(alphabet, i) for i in range(len(alphabet)))
    logger.debug(f"Tabula recta: {len(matrix)}x{len(matrix)}")
    return matrix


def index(alphabet: Sequence[Hashable]) -> Dict:
    """
    Map each symbol to the position of its FIRST occurrence.

    Later duplicates are ignored, which keeps lookups first-match-wins.
    Raises TypeError if a symbol is unhashable.
    """
    positions = {}
    for i, symbol in enumerate(alphabet):
        positions.setdefault(symbol, i)
    return positions
