"""
Key scheduler: repeat a short key out to the length of a message.

Key "lemon" over a 12-symbol message gives "lemonlemonle". Encryption and
decryption use the identical stream.
"""

import itertools
from typing import Iterator, Sequence, Tuple

from .errors import EmptyKeyError


def iter_keystream(key: Sequence) -> Iterator:
    """Endless iterator cycling through the key symbols."""
    if len(key) == 0:
        raise EmptyKeyError()
    return itertools.cycle(key)


def expand(key: Sequence, length: int) -> Tuple:
    """Return exactly `length` key symbols; position i is key[i % len(key)]."""
    if length < 0:
        raise ValueError(f"Key-stream length must be non-negative, got {length}.")
    return tuple(itertools.islice(iter_keystream(key), length))
