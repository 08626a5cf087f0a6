"""
Molecular formula parser.

A recursive descent parser over the tokens produced by ``molform.lexer``.
The grammar:

    molecule  := unit*
    unit      := atomUnit | groupUnit
    atomUnit  := ATOM index?
    groupUnit := OPEN unit* CLOSE index?
    index     := INDEX | <empty, meaning 1>

Groups may use ``()``, ``[]`` or ``{}`` but must be closed by the bracket
matching the one that opened them. Parsing builds a small tree of
ParseNodes that is flattened into a list of atoms, multiplying by every
enclosing index, and then merged so that each element appears once:

    K4[ON(SO3)2]2 -> [K4, O2, N2, S4, O12] -> [K4, O14, N2, S4]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, Union

from molform.exceptions import (
    MismatchedBracketError,
    NestingTooDeepError,
    TrailingTokensError,
    UnexpectedTokenError,
)
from molform.lexer import lex
from molform.types import Atom, AtomToken, BracketToken, IndexToken, Molecule, Token

logger = logging.getLogger(__name__)

_MATCHING: Final[dict[str, str]] = {
    "(": ")",
    "[": "]",
    "{": "}",
    ")": "(",
    "]": "[",
    "}": "{",
}

# Deepest group nesting accepted; keeps the descent well inside the
# interpreter recursion limit
MAX_DEPTH: Final[int] = 200


def matching_bracket(char: str) -> str:
    """Return the bracket that pairs with ``char``, in either direction.

    Raises:
        ValueError: If ``char`` is not one of ``()[]{}``.
    """
    try:
        return _MATCHING[char]
    except KeyError:
        raise ValueError(f"Expected a bracket, but found {char!r}") from None


@dataclass(slots=True)
class ParseNode:
    """Node of the formula tree.

    ``entry`` is either an Atom, for a leaf without children, or an int
    multiplier applied to everything below the node.
    """

    entry: Union[Atom, int]
    children: list[ParseNode] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.entry, Atom)

    def flatten(self) -> Molecule:
        """Concatenate the atoms under this node, scaled by every multiplier."""
        if isinstance(self.entry, Atom):
            return Molecule([self.entry])

        atoms: list[Atom] = []
        for child in self.children:
            atoms.extend(child.flatten())
        return Molecule(atoms).multiplied(self.entry)


def merge_atoms(molecule: Molecule) -> Molecule:
    """Sum duplicate elements, keeping each at its first position."""
    return molecule.merged()


class FormulaParser:
    """Recursive descent parser for molecular formulas.

    Positions passed to and returned by the ``parse_*`` methods are indices
    into the token list; errors report the character offset of the
    offending token.

    Example:
        >>> FormulaParser("Mg(OH)2").parse()
        Molecule([('Mg', 1), ('O', 2), ('H', 2)])

    For convenience, use the module-level ``parse_molecule()`` function.
    """

    def __init__(self, formula: str) -> None:
        """Tokenize ``formula``.

        Raises:
            LexError: If the formula contains an invalid character.
            IndexOverflowError: If an index is out of range.
        """
        self._formula = formula
        self._tokens: list[Token] = lex(formula)
        self._depth = 0

    @property
    def tokens(self) -> list[Token]:
        return self._tokens

    def parse(self) -> Molecule:
        """Parse the whole formula into a merged Molecule.

        Raises:
            MismatchedBracketError: If a group is not closed properly.
            NestingTooDeepError: If groups nest deeper than ``MAX_DEPTH``.
            TrailingTokensError: If tokens remain after the last unit.
        """
        root, pos = self.parse_units(0)
        if pos != len(self._tokens):
            raise TrailingTokensError(pos, self._formula, self._offset(pos))
        return merge_atoms(root.flatten())

    def parse_units(self, pos: int) -> tuple[ParseNode, int]:
        """Parse atoms and groups until a token that starts neither."""
        children: list[ParseNode] = []

        while True:
            token = self._token(pos)
            if isinstance(token, AtomToken):
                node, pos = self.parse_atom_unit(pos)
            elif isinstance(token, BracketToken) and token.is_open:
                node, pos = self.parse_group_unit(pos)
            else:
                break
            children.append(node)

        return ParseNode(1, children), pos

    def parse_atom_unit(self, pos: int) -> tuple[ParseNode, int]:
        """Parse one atom and its index, if present.

            K4[ON(SO3)2]2
                ^^ ^       atoms without index
            ^^      ^^     atoms with index
        """
        token = self._token(pos)
        if not isinstance(token, AtomToken):
            raise UnexpectedTokenError(token, pos, self._formula, self._offset(pos))

        count, pos = self.parse_index(pos + 1)
        return ParseNode(Atom(token.symbol, count)), pos

    def parse_group_unit(self, pos: int) -> tuple[ParseNode, int]:
        """Parse a bracketed group and its index, if present.

            K4[ON(SO3)2]2
                  ^^^^^^     inner group
              ^^^^^^^^^^^    group holding the inner one
        """
        token = self._token(pos)
        if not (isinstance(token, BracketToken) and token.is_open):
            raise UnexpectedTokenError(token, pos, self._formula, self._offset(pos))

        if self._depth >= MAX_DEPTH:
            raise NestingTooDeepError(MAX_DEPTH, self._formula, token.offset)

        self._depth += 1
        try:
            inner, pos = self.parse_units(pos + 1)
        finally:
            self._depth -= 1

        expected = matching_bracket(token.char)
        closing = self._token(pos)
        if not (isinstance(closing, BracketToken) and closing.char == expected):
            raise MismatchedBracketError(
                expected, closing, pos, self._formula, self._offset(pos)
            )

        multiplier, pos = self.parse_index(pos + 1)
        return ParseNode(multiplier, [inner]), pos

    def parse_index(self, pos: int) -> tuple[int, int]:
        """Parse an optional index, defaulting to 1 without consuming."""
        token = self._token(pos)
        if isinstance(token, IndexToken):
            return token.value, pos + 1
        return 1, pos

    def _token(self, pos: int) -> Token | None:
        if pos < len(self._tokens):
            return self._tokens[pos]
        return None

    def _offset(self, pos: int) -> int:
        """Character offset of token ``pos``, or the end of the formula."""
        token = self._token(pos)
        return len(self._formula) if token is None else token.offset


def parse_molecule(formula: str) -> Molecule:
    """Parse a molecular formula into element counts.

    Args:
        formula: Formula such as ``"H2O"`` or ``"K4[ON(SO3)2]2"``.

    Returns:
        Molecule with one entry per element, in order of first occurrence.

    Raises:
        FormulaError: If the formula is malformed; see the subclasses in
            ``molform.exceptions``.

    Example:
        >>> parse_molecule("K4[ON(SO3)2]2").to_pairs()
        [('K', 4), ('O', 14), ('N', 2), ('S', 4)]
    """
    molecule = FormulaParser(formula).parse()
    logger.debug("formula %r result %r", formula, molecule)
    return molecule


parse = parse_molecule
