"""Tests for the alphabet index."""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "scripts"))

from alphabet import Alphabet, parse_alphabet


class TestLookup:
    def test_position_of_each_symbol(self):
        abc = Alphabet("xyz")
        assert abc.position("x") == 0
        assert abc.position("y") == 1
        assert abc.position("z") == 2

    def test_missing_symbol_is_none(self):
        assert Alphabet("abc").position("!") is None

    def test_case_sensitive(self):
        abc = Alphabet("abc")
        assert abc.position("A") is None
        assert "A" not in abc
        assert "a" in abc

    def test_symbol_at_wraps(self):
        abc = Alphabet("abc")
        assert abc.symbol_at(0) == "a"
        assert abc.symbol_at(3) == "a"
        assert abc.symbol_at(5) == "c"

    def test_length_and_iteration(self, abc):
        assert len(abc) == 27
        assert "".join(abc) == abc.symbols

    def test_multibyte_symbols(self):
        abc = Alphabet("абвгд")
        assert abc.position("г") == 3
        assert len(abc) == 5


class TestDuplicates:
    def test_first_occurrence_wins(self):
        abc = Alphabet("abca")
        assert abc.position("a") == 0
        assert len(abc) == 4

    def test_duplicates_reported_once(self):
        assert Alphabet("abcaab").duplicates() == ["a", "b"]

    def test_no_duplicates(self, abc):
        assert abc.duplicates() == []


class TestConstruction:
    def test_empty_alphabet_rejected(self):
        with pytest.raises(ValueError):
            Alphabet("")

    def test_equality(self):
        assert Alphabet("ab") == Alphabet("ab")
        assert Alphabet("ab") != Alphabet("ba")


class TestParseAlphabet:
    def test_strips_brackets(self):
        assert parse_alphabet("[abc]").symbols == "abc"

    def test_keeps_inner_space(self):
        assert parse_alphabet("[ab ]").symbols == "ab "

    def test_too_short(self):
        assert parse_alphabet("[]") is None
        assert parse_alphabet("a") is None
        assert parse_alphabet(None) is None

    def test_single_symbol(self):
        assert parse_alphabet("[a]").symbols == "a"
