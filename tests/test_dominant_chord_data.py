"""Tests for the dominant chord tables."""

import pytest

from chord_substituter.dominant_chord_data import (
    dominant_qualities,
    expand_quality_abbreviation,
    get_intervals,
    interval_map,
    is_dominant,
    quality_abbreviations,
)
from chord_substituter.result import Ok


class TestGetIntervals:
    def test_basic_dominants(self):
        assert get_intervals("dominant7") == Ok((0, 4, 7, 10))
        assert get_intervals("dominant9") == Ok((0, 4, 7, 10, 14))
        assert get_intervals("dominant11") == Ok((0, 4, 7, 10, 14, 17))
        assert get_intervals("dominant13") == Ok((0, 4, 7, 10, 14, 17, 21))

    def test_altered_dominants(self):
        assert get_intervals("dominant13_flat9_sharp11") == Ok((0, 4, 7, 10, 13, 18, 21))
        assert get_intervals("dominant11_flat13") == Ok((0, 4, 7, 10, 14, 17, 20))

    def test_suspended_dominants(self):
        assert get_intervals("7sus2") == Ok((0, 2, 7, 10))
        assert get_intervals("13sus4") == Ok((0, 5, 7, 10, 14, 17, 21))

    def test_non_dominant_quality(self):
        result = get_intervals("major")
        assert result.is_err()
        assert result.error.message == "Not a dominant chord quality: major"


class TestExpandQualityAbbreviation:
    @pytest.mark.parametrize(
        ("abbreviation", "expected"),
        [
            ("7", "dominant7"),
            ("dom13", "dominant13"),
            ("13#9", "dominant13_sharp9"),
            ("7sus", "7sus4"),
            ("9sus", "9sus4"),
            ("unknown", "unknown"),
            ("m7", "m7"),
        ],
    )
    def test_expands(self, abbreviation, expected):
        assert expand_quality_abbreviation(abbreviation) == expected

    def test_every_abbreviation_targets_a_dominant_entry(self):
        for abbreviation, quality in quality_abbreviations().items():
            assert quality in interval_map(), abbreviation


class TestIsDominant:
    def test_abbreviated_and_canonical(self):
        assert is_dominant("7")
        assert is_dominant("dominant7")
        assert is_dominant("dominant")

    def test_empty_quality(self):
        assert is_dominant("")

    def test_case_sensitive(self):
        assert not is_dominant("Dom7")

    def test_non_dominant(self):
        assert not is_dominant("major")
        assert not is_dominant("minor7")

    def test_every_entry_and_abbreviation_is_dominant(self):
        assert set(interval_map()) <= dominant_qualities()
        assert set(quality_abbreviations()) <= dominant_qualities()
        assert len(dominant_qualities()) == 46
