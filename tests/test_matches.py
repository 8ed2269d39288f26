"""Tests for match records and parsing."""

import pytest

from core.matches import (
    Pattern,
    MatchError,
    DictionaryMatch,
    SpatialMatch,
    RepeatMatch,
    SequenceMatch,
    RegexMatch,
    DateMatch,
    BruteforceMatch,
    OtherMatch,
    match_from_dict,
    sequence_from_dicts,
)


class TestMatchTypes:
    """Pattern tags on typed matches."""

    def test_known_pattern_tags(self):
        """Each match class reports its own pattern tag."""
        assert DictionaryMatch(token="a").pattern == "dictionary"
        assert SpatialMatch(token="a").pattern == "spatial"
        assert RepeatMatch(token="a").pattern == "repeat"
        assert SequenceMatch(token="a").pattern == "sequence"
        assert RegexMatch(token="a").pattern == "regex"
        assert DateMatch(token="a").pattern == "date"
        assert BruteforceMatch(token="a").pattern == "bruteforce"

    def test_other_match_keeps_its_tag(self):
        match = OtherMatch(token="a", tag="emoji")
        assert match.pattern == "emoji"
        assert match.kind is None

    def test_matches_are_frozen(self):
        match = SpatialMatch(token="qwerty", turns=1)
        with pytest.raises(AttributeError):
            match.turns = 2


class TestMatchFromDict:
    """Parsing matcher records."""

    def test_dictionary_record(self):
        """zxcvbn-style dictionary records parse with extra keys ignored."""
        match = match_from_dict({
            "pattern": "dictionary",
            "i": 0,
            "j": 7,
            "token": "password",
            "matched_word": "password",
            "rank": 2,
            "dictionary_name": "passwords",
            "reversed": False,
            "l33t": False,
            "guesses": 2,
            "guesses_log10": 0.301,
        })
        assert match == DictionaryMatch(
            token="password",
            dictionary_name="passwords",
            rank=2,
            guesses_log10=0.301,
        )
        assert match.kind is Pattern.DICTIONARY

    def test_dictionary_flags_default_false(self):
        match = match_from_dict({
            "pattern": "dictionary",
            "token": "monkey",
            "dictionary_name": "passwords",
            "rank": 14,
            "guesses_log10": 1.15,
        })
        assert match.l33t is False
        assert match.reversed is False

    def test_integer_guesses_log10(self):
        match = match_from_dict({
            "pattern": "dictionary",
            "token": "monkey",
            "dictionary_name": "passwords",
            "rank": 14,
            "guesses_log10": 1,
        })
        assert match.guesses_log10 == 1

    @pytest.mark.parametrize("record, expected", [
        ({"pattern": "spatial", "token": "qwerty", "turns": 1, "graph": "qwerty"},
         SpatialMatch(token="qwerty", turns=1)),
        ({"pattern": "repeat", "token": "aaa", "base_token": "a"},
         RepeatMatch(token="aaa", base_token="a")),
        ({"pattern": "sequence", "token": "abc", "ascending": True},
         SequenceMatch(token="abc")),
        ({"pattern": "regex", "token": "2019", "regex_name": "recent_year"},
         RegexMatch(token="2019", regex_name="recent_year")),
        ({"pattern": "date", "token": "1/1/1990", "year": 1990},
         DateMatch(token="1/1/1990")),
        ({"pattern": "bruteforce", "token": "x9"},
         BruteforceMatch(token="x9")),
    ])
    def test_other_known_patterns(self, record, expected):
        assert match_from_dict(record) == expected

    def test_unknown_pattern(self):
        """Unknown tags become OtherMatch instead of failing."""
        match = match_from_dict({"pattern": "emoji", "token": "xx", "whatever": 1})
        assert match == OtherMatch(token="xx", tag="emoji")

    @pytest.mark.parametrize("record", [
        {"token": "abc"},
        {"pattern": "sequence"},
        {"pattern": 3, "token": "abc"},
        {"pattern": "sequence", "token": None},
    ])
    def test_missing_base_fields(self, record):
        with pytest.raises(MatchError):
            match_from_dict(record)

    @pytest.mark.parametrize("record", [
        {"pattern": "spatial", "token": "qwe"},
        {"pattern": "repeat", "token": "aa"},
        {"pattern": "regex", "token": "2019"},
        {"pattern": "dictionary", "token": "x", "rank": 1, "guesses_log10": 1.0},
        {"pattern": "dictionary", "token": "x", "dictionary_name": "passwords", "guesses_log10": 1.0},
        {"pattern": "spatial", "token": "qwe", "turns": None},
    ])
    def test_missing_required_field(self, record):
        """Known patterns must carry the fields their rules read."""
        with pytest.raises(MatchError, match="missing required field"):
            match_from_dict(record)

    @pytest.mark.parametrize("record", [
        {"pattern": "spatial", "token": "qwe", "turns": "1"},
        {"pattern": "spatial", "token": "qwe", "turns": True},
        {"pattern": "dictionary", "token": "x", "dictionary_name": "passwords",
         "rank": 1, "guesses_log10": 1.0, "l33t": "yes"},
        {"pattern": "repeat", "token": "aa", "base_token": 1},
    ])
    def test_wrong_field_type(self, record):
        with pytest.raises(MatchError, match="must be"):
            match_from_dict(record)


class TestSequenceFromDicts:
    """Parsing whole sequences."""

    def test_order_is_preserved(self):
        sequence = sequence_from_dicts([
            {"pattern": "sequence", "token": "abc"},
            {"pattern": "date", "token": "1990"},
        ])
        assert [m.pattern for m in sequence] == ["sequence", "date"]

    def test_empty(self):
        assert sequence_from_dicts([]) == []

    def test_error_names_index(self):
        """Errors point at the offending record."""
        with pytest.raises(MatchError, match="Match #1"):
            sequence_from_dicts([
                {"pattern": "sequence", "token": "abc"},
                {"pattern": "spatial", "token": "qwe"},
            ])

    def test_non_object_record(self):
        with pytest.raises(MatchError, match="must be an object"):
            sequence_from_dicts(["qwerty"])
