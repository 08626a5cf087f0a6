"""
Core formula data types.

This module defines the value types passed between the stages of the
pipeline: the tokens produced by the lexer, and the Atom and Molecule
classes returned to callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass(frozen=True, slots=True)
class BracketToken:
    """One of the six bracket characters ``()[]{}``.

    Attributes:
        char: The bracket character.
        offset: Character offset in the source formula.
    """

    char: str
    offset: int

    @property
    def text(self) -> str:
        return self.char

    @property
    def is_open(self) -> bool:
        return self.char in "([{"


@dataclass(frozen=True, slots=True)
class AtomToken:
    """Element symbol: an uppercase letter followed by lowercase letters.

    Attributes:
        symbol: Element symbol (e.g., "K", "Mg").
        offset: Character offset in the source formula.
    """

    symbol: str
    offset: int

    @property
    def text(self) -> str:
        return self.symbol


@dataclass(frozen=True, slots=True)
class IndexToken:
    """Unsigned integer following an atom or a closing bracket.

    Attributes:
        value: Numeric value of the digit run.
        offset: Character offset in the source formula.
        length: Number of digits consumed.
    """

    value: int
    offset: int
    length: int = 1

    @property
    def text(self) -> str:
        return str(self.value)


Token = Union[BracketToken, AtomToken, IndexToken]


@dataclass(frozen=True, slots=True)
class Atom:
    """An element symbol with its count.

    Unpacks like a 2-tuple:

        >>> symbol, count = Atom("H", 2)
    """

    symbol: str
    count: int = 1

    def added(self, number: int) -> Atom:
        """Return a copy with ``number`` added to the count."""
        return Atom(self.symbol, self.count + number)

    def multiplied(self, multiplier: int) -> Atom:
        """Return a copy with the count multiplied by ``multiplier``."""
        return Atom(self.symbol, self.count * multiplier)

    def __iter__(self) -> Iterator[str | int]:
        yield self.symbol
        yield self.count

    def __repr__(self) -> str:
        return f"({self.symbol!r}, {self.count})"


@dataclass(slots=True)
class Molecule:
    """Ordered collection of (element, count) pairs.

    A molecule returned by the parser holds each symbol once, in order of
    first occurrence in the formula. Molecules built by hand or by
    concatenation may hold duplicates until ``merged()`` is called.

    Attributes:
        atoms: Atoms in order.
    """

    atoms: list[Atom] = field(default_factory=list)

    @classmethod
    def from_pairs(cls, pairs) -> Molecule:
        """Build a molecule from an iterable of (symbol, count) pairs."""
        return cls([Atom(symbol, count) for symbol, count in pairs])

    def __len__(self) -> int:
        return len(self.atoms)

    def __iter__(self) -> Iterator[Atom]:
        return iter(self.atoms)

    def __getitem__(self, idx: int) -> Atom:
        return self.atoms[idx]

    def __contains__(self, symbol: object) -> bool:
        return any(atom.symbol == symbol for atom in self.atoms)

    def __add__(self, other: Molecule) -> Molecule:
        if not isinstance(other, Molecule):
            return NotImplemented
        return Molecule(self.atoms + other.atoms)

    def __repr__(self) -> str:
        return f"Molecule({self.atoms!r})"

    @property
    def symbols(self) -> list[str]:
        """Element symbols in order."""
        return [atom.symbol for atom in self.atoms]

    def count(self, symbol: str) -> int:
        """Total count of ``symbol``, 0 if absent."""
        return sum(atom.count for atom in self.atoms if atom.symbol == symbol)

    def to_pairs(self) -> list[tuple[str, int]]:
        return [(atom.symbol, atom.count) for atom in self.atoms]

    def as_dict(self) -> dict[str, int]:
        """Symbol -> total count, in first-occurrence order."""
        return {atom.symbol: atom.count for atom in self.merged()}

    def multiplied(self, multiplier: int) -> Molecule:
        """Return a copy with every count multiplied by ``multiplier``."""
        return Molecule([atom.multiplied(multiplier) for atom in self.atoms])

    def merged(self) -> Molecule:
        """Return a copy with duplicate symbols summed.

        Each symbol stays at the position of its first occurrence:

            [K4, O2, N2, S4, O12] -> [K4, O14, N2, S4]
        """
        totals: dict[str, Atom] = {}
        for atom in self.atoms:
            seen = totals.get(atom.symbol)
            totals[atom.symbol] = atom if seen is None else seen.added(atom.count)
        return Molecule(list(totals.values()))
