"""Custom exceptions for molform."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from molform.types import Token


class ChemError(Exception):
    """Base exception for chemistry-related errors."""
    pass


class FormulaError(ChemError):
    """Error while parsing a molecular formula.

    When both the formula and a character offset are known, the message
    points at the offending character:

        Unexpected character 'p' at 0
          pie
          ^
    """

    def __init__(self, message: str, formula: str | None = None, position: int | None = None):
        self.message = message
        self.formula = formula
        self.position = position

        if formula is not None and position is not None:
            super().__init__(f"{message}\n  {formula}\n  {' ' * position}^")
        elif formula is not None:
            super().__init__(f"{message} in: {formula}")
        else:
            super().__init__(message)


class LexError(FormulaError):
    """Character that does not start any token."""

    def __init__(self, char: str, position: int, formula: str | None = None):
        self.char = char
        super().__init__(f"Unexpected character {char!r} at {position}", formula, position)


class IndexOverflowError(FormulaError):
    """Index too large to be represented as an unsigned 64-bit count."""

    def __init__(self, digits: str, position: int, formula: str | None = None):
        self.digits = digits
        super().__init__(f"Index {digits} at {position} is out of range", formula, position)


class UnexpectedTokenError(FormulaError):
    """Parser expected an atom or an opening bracket."""

    def __init__(
        self,
        found: Token | None,
        token_index: int,
        formula: str | None = None,
        position: int | None = None,
    ):
        self.found = found
        self.token_index = token_index
        what = "end of input" if found is None else repr(found.text)
        super().__init__(f"Unexpected token {what}", formula, position)


class MismatchedBracketError(FormulaError):
    """Group not closed by the bracket matching its opening one."""

    def __init__(
        self,
        expected: str,
        found: Token | None,
        token_index: int,
        formula: str | None = None,
        position: int | None = None,
    ):
        self.expected = expected
        self.found = found
        self.token_index = token_index
        what = "end of input" if found is None else repr(found.text)
        super().__init__(f"Expected {expected!r} but found {what}", formula, position)


class NestingTooDeepError(FormulaError):
    """Groups nested deeper than the parser allows."""

    def __init__(self, limit: int, formula: str | None = None, position: int | None = None):
        self.limit = limit
        super().__init__(f"Groups nested deeper than {limit} levels", formula, position)


class TrailingTokensError(FormulaError):
    """Tokens left over after a complete molecule, e.g. a stray ')'."""

    def __init__(self, token_index: int, formula: str | None = None, position: int | None = None):
        self.token_index = token_index
        super().__init__("Not all tokens were parsed", formula, position)
