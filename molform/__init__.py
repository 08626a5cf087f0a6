"""
Molform - Pure Python molecular formula parser.

A zero-dependency library that turns formulas with nested, indexed groups
into per-element atom counts.

    >>> from molform import parse_molecule
    >>> parse_molecule("K4[ON(SO3)2]2").to_pairs()
    [('K', 4), ('O', 14), ('N', 2), ('S', 4)]

Modules:
    molform.lexer   - Tokenization
    molform.parser  - Recursive descent parser, flatten and merge
    molform.writer  - Formula strings from molecules
    molform.cli     - Command-line entry point
"""

__version__ = "0.1.0"

# Core types
from molform.types import Atom, AtomToken, BracketToken, IndexToken, Molecule, Token

# Lexing, parsing and writing
from molform.lexer import MAX_INDEX, lex
from molform.parser import MAX_DEPTH, FormulaParser, ParseNode, matching_bracket, merge_atoms, parse, parse_molecule
from molform.writer import hill_order, to_formula

# Exceptions
from molform.exceptions import (
    ChemError,
    FormulaError,
    IndexOverflowError,
    LexError,
    MismatchedBracketError,
    NestingTooDeepError,
    TrailingTokensError,
    UnexpectedTokenError,
)

__all__ = [
    # Types
    "Atom", "Molecule", "Token", "AtomToken", "BracketToken", "IndexToken",
    # Lexing
    "lex", "MAX_INDEX", "MAX_DEPTH",
    # Parsing
    "parse", "parse_molecule", "FormulaParser", "ParseNode", "matching_bracket", "merge_atoms",
    # Writing
    "to_formula", "hill_order",
    # Exceptions
    "ChemError", "FormulaError", "LexError", "IndexOverflowError",
    "UnexpectedTokenError", "MismatchedBracketError", "NestingTooDeepError", "TrailingTokensError",
]
