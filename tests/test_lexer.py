"""Tests for the formula lexer."""

import pytest

from molform import MAX_INDEX, AtomToken, BracketToken, IndexToken, lex
from molform.exceptions import FormulaError, IndexOverflowError, LexError


class TestTokens:
    """Test token kinds produced by lex()."""

    def test_empty(self):
        """Empty input gives no tokens."""
        assert lex("") == []

    def test_single_letter_atom(self):
        """A lone uppercase letter is an atom."""
        assert lex("H") == [AtomToken("H", 0)]

    def test_two_letter_atom(self):
        """Lowercase letters continue the symbol."""
        assert lex("Mg") == [AtomToken("Mg", 0)]

    def test_long_symbol(self):
        """Any number of lowercase letters is absorbed."""
        assert lex("Uuo") == [AtomToken("Uuo", 0)]

    def test_consecutive_atoms(self):
        """An uppercase letter always starts a new atom."""
        assert lex("CO") == [AtomToken("C", 0), AtomToken("O", 1)]

    def test_index(self):
        """Digits after an atom form an index."""
        assert lex("O2") == [AtomToken("O", 0), IndexToken(2, 1, 1)]

    def test_multi_digit_index(self):
        """Digit runs are read greedily."""
        assert lex("C12") == [AtomToken("C", 0), IndexToken(12, 1, 2)]

    def test_leading_zeros(self):
        """Leading zeros do not change the value."""
        tokens = lex("H007")
        assert tokens[1].value == 7
        assert tokens[1].length == 3

    @pytest.mark.parametrize("char", list("()[]{}"))
    def test_brackets(self, char):
        """Each bracket character is its own token."""
        assert lex(char) == [BracketToken(char, 0)]

    def test_fremys_salt(self):
        """Tokens of K4[ON(SO3)2]2 in order."""
        tokens = lex("K4[ON(SO3)2]2")
        assert [t.text for t in tokens] == [
            "K", "4", "[", "O", "N", "(", "S", "O", "3", ")", "2", "]", "2",
        ]

    def test_offsets(self):
        """Tokens record where they start in the source."""
        tokens = lex("Mg(OH)12")
        assert [t.offset for t in tokens] == [0, 2, 3, 4, 5, 6]

    def test_bracket_is_open(self):
        """Opening brackets are flagged."""
        assert [t.is_open for t in lex("([{)]}")] == [True] * 3 + [False] * 3


class TestLexErrors:
    """Test characters that start no token."""

    def test_lowercase_start(self):
        """A symbol cannot start lowercase."""
        with pytest.raises(LexError) as exc_info:
            lex("pie")
        assert exc_info.value.char == "p"
        assert exc_info.value.position == 0

    def test_whitespace(self):
        """Whitespace is rejected with its position."""
        with pytest.raises(LexError) as exc_info:
            lex("H 2")
        assert exc_info.value.char == " "
        assert exc_info.value.position == 1

    @pytest.mark.parametrize("formula", ["H-O", "H.O", "H+", "Ä", "H٢"])
    def test_other_characters(self, formula):
        """Punctuation and non-ASCII letters or digits are rejected."""
        with pytest.raises(LexError):
            lex(formula)

    def test_is_formula_error(self):
        """LexError belongs to the FormulaError hierarchy."""
        with pytest.raises(FormulaError):
            lex("x")

    def test_message_points_at_character(self):
        """The message shows a caret under the bad character."""
        with pytest.raises(LexError) as exc_info:
            lex("H2o")
        assert str(exc_info.value).endswith("  H2o\n    ^")


class TestIndexOverflow:
    """Test index range checks."""

    def test_max_index_accepted(self):
        """The largest unsigned 64-bit value is a valid index."""
        tokens = lex(f"H{MAX_INDEX}")
        assert tokens[1].value == MAX_INDEX

    def test_overflow(self):
        """One past the range fails instead of wrapping."""
        with pytest.raises(IndexOverflowError) as exc_info:
            lex(f"H{MAX_INDEX + 1}")
        assert exc_info.value.position == 1

    def test_overflow_with_leading_zeros(self):
        """Leading zeros alone do not overflow."""
        tokens = lex("H" + "0" * 40 + "5")
        assert tokens[1].value == 5
