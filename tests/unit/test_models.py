"""Tests for filter matching"""
import pytest

from string_analyzer.models import FilterSpec
from string_analyzer.utils import analyze_string


@pytest.fixture
def record():
    return analyze_string("Level up")


def test_empty_spec_matches_everything(record):
    spec = FilterSpec()
    assert spec.is_empty()
    assert spec.matches(record)
    assert spec.matches(analyze_string(""))


def test_each_field_constrains(record):
    assert FilterSpec(is_palindrome=False).matches(record)
    assert not FilterSpec(is_palindrome=True).matches(record)
    assert FilterSpec(min_length=8).matches(record)
    assert not FilterSpec(min_length=9).matches(record)
    assert FilterSpec(max_length=8).matches(record)
    assert not FilterSpec(max_length=7).matches(record)
    assert FilterSpec(word_count=2).matches(record)
    assert not FilterSpec(word_count=1).matches(record)


def test_contains_character_is_case_insensitive(record):
    assert FilterSpec(contains_character="l").matches(record)
    assert FilterSpec(contains_character="U").matches(record)
    assert not FilterSpec(contains_character="z").matches(record)


@pytest.mark.parametrize("first,second", [
    ({"is_palindrome": False}, {"word_count": 2}),
    ({"min_length": 3}, {"contains_character": "z"}),
    ({"max_length": 4}, {"word_count": 2}),
])
def test_fields_combine_with_and(record, first, second):
    combined = FilterSpec(**first, **second)
    expected = FilterSpec(**first).matches(record) and FilterSpec(**second).matches(record)
    assert combined.matches(record) is expected


def test_inverted_range_matches_nothing(record):
    spec = FilterSpec(min_length=10, max_length=2)
    assert spec.has_conflicting_length_range()
    assert not spec.matches(record)


def test_applied_keeps_field_order():
    spec = FilterSpec(contains_character="a", word_count=0, is_palindrome=False)
    assert spec.applied() == [
        ("is_palindrome", False),
        ("word_count", 0),
        ("contains_character", "a"),
    ]
