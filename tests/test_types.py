"""Tests for the Atom and Molecule value types."""

import pytest

from molform import Atom, Molecule, parse_molecule


class TestAtom:
    """Test Atom."""

    def test_default_count(self):
        """Count defaults to 1."""
        assert Atom("H").count == 1

    def test_unpacking(self):
        """An atom unpacks like a (symbol, count) pair."""
        symbol, count = Atom("O", 2)
        assert (symbol, count) == ("O", 2)

    def test_added(self):
        """added() returns a new atom."""
        atom = Atom("H", 2)
        assert atom.added(1) == Atom("H", 3)
        assert atom.count == 2

    def test_multiplied(self):
        """multiplied() scales the count only."""
        assert Atom("H", 2).multiplied(2) == Atom("H", 4)

    def test_frozen(self):
        """Atoms are immutable."""
        with pytest.raises(AttributeError):
            Atom("H").count = 5

    def test_repr(self):
        """repr looks like a pair."""
        assert repr(Atom("Mg", 1)) == "('Mg', 1)"


class TestMolecule:
    """Test Molecule."""

    def test_from_pairs(self):
        """Build from plain pairs."""
        mol = Molecule.from_pairs([("H", 2), ("O", 1)])
        assert mol.to_pairs() == [("H", 2), ("O", 1)]
        assert mol[0] == Atom("H", 2)

    def test_len_and_iter(self):
        """Molecules are sized, iterable sequences of atoms."""
        mol = parse_molecule("Mg(OH)2")
        assert len(mol) == 3
        assert [atom.symbol for atom in mol] == ["Mg", "O", "H"]

    def test_contains(self):
        """Membership tests by symbol."""
        mol = parse_molecule("H2O")
        assert "O" in mol
        assert "C" not in mol

    def test_count(self):
        """count() sums a symbol, 0 when absent."""
        mol = Molecule.from_pairs([("O", 2), ("H", 1), ("O", 3)])
        assert mol.count("O") == 5
        assert mol.count("N") == 0

    def test_as_dict(self):
        """as_dict() merges duplicates and keeps order."""
        mol = Molecule.from_pairs([("O", 2), ("H", 1), ("O", 3)])
        assert list(mol.as_dict().items()) == [("O", 5), ("H", 1)]

    def test_multiplied(self):
        """Every count is scaled."""
        mol = Molecule.from_pairs([("O", 1), ("H", 1)]).multiplied(2)
        assert mol.to_pairs() == [("O", 2), ("H", 2)]

    def test_add_concatenates(self):
        """+ concatenates without merging."""
        mol = Molecule.from_pairs([("H", 2)]) + Molecule.from_pairs([("H", 1)])
        assert mol.to_pairs() == [("H", 2), ("H", 1)]
        assert mol.merged().to_pairs() == [("H", 3)]

    def test_merged_keeps_first_position(self):
        """A later duplicate is folded into the first entry."""
        mol = Molecule.from_pairs([("C", 1), ("O", 1), ("C", 2), ("H", 4)])
        assert mol.merged().to_pairs() == [("C", 3), ("O", 1), ("H", 4)]

    def test_equality(self):
        """Molecules compare by their atoms in order."""
        assert parse_molecule("H2O") == Molecule.from_pairs([("H", 2), ("O", 1)])
        assert parse_molecule("H2O") != Molecule.from_pairs([("O", 1), ("H", 2)])

    def test_repr(self):
        """Debug representation lists the pairs."""
        assert repr(parse_molecule("H2O")) == "Molecule([('H', 2), ('O', 1)])"
