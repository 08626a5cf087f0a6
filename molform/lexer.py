"""
Formula lexer.

Splits a formula string into atom, index and bracket tokens:

    >>> lex("Mg(OH)2")
    [AtomToken(symbol='Mg', offset=0), BracketToken(char='(', offset=2), ...]
"""

from __future__ import annotations

from typing import Final

from molform.exceptions import IndexOverflowError, LexError
from molform.types import AtomToken, BracketToken, IndexToken, Token

# Largest index accepted, the range of an unsigned 64-bit count
MAX_INDEX: Final[int] = 2**64 - 1

BRACKETS: Final[frozenset[str]] = frozenset("()[]{}")

_UPPER: Final[frozenset[str]] = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_LOWER: Final[frozenset[str]] = frozenset("abcdefghijklmnopqrstuvwxyz")
_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


class _Scanner:
    """Character cursor over a formula string."""

    __slots__ = ("_string", "_pos")

    def __init__(self, string: str) -> None:
        self._string = string
        self._pos = 0

    @property
    def position(self) -> int:
        """Current position in the string."""
        return self._pos

    def peek(self) -> str | None:
        """Current character without consuming, or None at end."""
        if self._pos >= len(self._string):
            return None
        return self._string[self._pos]

    def next(self) -> str | None:
        """Consume and return the current character, or None at end."""
        char = self.peek()
        if char is not None:
            self._pos += 1
        return char

    def read_while(self, allowed: frozenset[str]) -> str:
        """Consume the run of characters belonging to ``allowed``."""
        start = self._pos
        while self._pos < len(self._string) and self._string[self._pos] in allowed:
            self._pos += 1
        return self._string[start:self._pos]

    def is_eof(self) -> bool:
        return self._pos >= len(self._string)


def _read_index(scanner: _Scanner, formula: str) -> IndexToken:
    start = scanner.position
    digits = scanner.read_while(_DIGITS)
    value = 0
    for digit in digits:
        value = value * 10 + (ord(digit) - ord("0"))
        if value > MAX_INDEX:
            raise IndexOverflowError(digits, start, formula)
    return IndexToken(value, start, len(digits))


def lex(formula: str) -> list[Token]:
    """Split a formula into tokens.

    Args:
        formula: Formula text, e.g. ``"K4[ON(SO3)2]2"``.

    Returns:
        Tokens in input order.

    Raises:
        LexError: On a character that starts no token (lowercase letter,
            whitespace, punctuation).
        IndexOverflowError: If a digit run exceeds ``MAX_INDEX``.
    """
    scanner = _Scanner(formula)
    tokens: list[Token] = []

    while not scanner.is_eof():
        char = scanner.peek()
        start = scanner.position

        if char in _UPPER:
            scanner.next()
            symbol = char + scanner.read_while(_LOWER)
            tokens.append(AtomToken(symbol, start))
        elif char in _DIGITS:
            tokens.append(_read_index(scanner, formula))
        elif char in BRACKETS:
            scanner.next()
            tokens.append(BracketToken(char, start))
        else:
            raise LexError(char, start, formula)

    return tokens
