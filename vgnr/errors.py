"""
Errors raised by the Vigenère scheme.

Every error is a local precondition violation detected at the first
offending symbol. Nothing is retried and the scheme instance is left
untouched, so it stays usable for the next valid call.
"""


class VigenereError(Exception):
    """Base class for everything this package raises."""


class AlphabetMembershipError(VigenereError, LookupError):
    """A key or message symbol is not a member of the configured alphabet."""

    def __init__(self, symbol, position: int, source: str):
        self.symbol   = symbol
        self.position = position
        self.source   = source
        super().__init__(
            f"{source} symbol {symbol!r} at position {position} "
            f"is not in the Vigenère alphabet."
        )


class EmptyKeyError(VigenereError, ValueError):
    """The key has no symbols, so the key-stream has no period."""

    def __init__(self):
        super().__init__("Vigenère key must contain at least one symbol.")


class EmptyAlphabetError(VigenereError, ValueError):
    """The alphabet has no symbols, so no tabula recta can be built."""

    def __init__(self):
        super().__init__("Vigenère alphabet must contain at least one symbol.")
