"""Tests for the match predicate."""

import pytest

from vnwordle.matcher import matches
from vnwordle.pattern import parse, WildcardQuery, SyllableQuery


class TestWildcard:
    def test_syllables(self):
        assert matches(parse("viet ***"), "viet nam")
        assert matches(parse("viet ***"), "viet hoa")
        assert not matches(parse("viet ***"), "viet")
        assert not matches(parse("viet ***"), "viet nam hoc")

    def test_syllable_length(self):
        assert not matches(parse("viet ***"), "viet ngon")
        assert not matches(parse("viet ***"), "viet an")

    def test_literals(self):
        assert matches(parse("*an"), "can")
        assert not matches(parse("*an"), "con")
        assert not matches(parse("nam ***"), "viet nam")

    def test_all_literal(self):
        assert matches(parse("con meo"), "con meo")
        assert not matches(parse("con meo"), "con mao")

    def test_excluded(self):
        assert not matches(parse("viet *** -oh"), "viet hoa")
        assert matches(parse("viet *** -oh"), "viet nam")

    def test_required(self):
        assert not matches(parse("viet *** +a"), "viet ngu")
        assert matches(parse("viet *** +a"), "viet nam")
        assert matches(parse("viet *** +am"), "viet nam")
        assert not matches(parse("viet *** +an"), "viet hoa")

    def test_literal_positions_exempt(self):
        # the v, i, e, t are fixed so excluding/requiring them only looks under the *
        assert matches(parse("viet *** -v"), "viet nam")
        assert not matches(parse("viet *** +v"), "viet nam")
        assert matches(parse("v*et ***  -t"), "viet nam")

    def test_empty_pattern_matches_nothing(self):
        assert not matches(parse(""), "viet")
        assert not matches(parse("-a"), "viet")


class TestSyllables:
    def test_lengths(self):
        assert matches(parse("3-4"), "con meoo")
        assert matches(parse("3-4"), "anh dung")
        assert not matches(parse("3-4"), "con meo")
        assert not matches(parse("3-4"), "conmeoo")

    def test_syllable_count(self):
        assert not matches(parse("3-4"), "con meoo ba")
        assert not matches(parse("3-4-3"), "con meoo")
        assert matches(parse("3-4-3"), "con meoo bay")

    def test_must_contain_whole_word(self):
        assert matches(parse("3-4-aug"), "gau nuoc")
        assert matches(parse("3-4-aug"), "gai ruou")
        assert not matches(parse("3-4-aug"), "con nuoc")

    def test_bad_numbers_become_letters(self):
        query = parse("3-4-abc")
        assert not matches(query, "con meoo")
        assert matches(query, "cab mooo")

    def test_no_constraints(self):
        assert not matches(parse("viet-nam"), "viet nam")


class TestDispatch:
    def test_variants(self):
        assert matches(WildcardQuery(["**"]), "an")
        assert matches(SyllableQuery([2]), "an")

    def test_unknown_query(self):
        with pytest.raises(TypeError):
            matches("viet ***", "viet nam")
