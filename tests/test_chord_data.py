"""Tests for the chord quality dictionary."""

import pytest

from chord_substituter import chord_data, dominant_chord_data
from chord_substituter.chord_data import (
    all_quality_entries,
    expand_quality_abbreviation,
    get_intervals,
    interval_map,
    is_dominant,
    normalize_quality,
    quality_abbreviations,
)
from chord_substituter.result import Err, Ok


class TestGetIntervals:
    def test_basic_triads(self):
        assert get_intervals("major") == Ok((0, 4, 7))
        assert get_intervals("minor") == Ok((0, 3, 7))
        assert get_intervals("diminished") == Ok((0, 3, 6))
        assert get_intervals("augmented") == Ok((0, 4, 8))

    def test_seventh_chords(self):
        assert get_intervals("major7") == Ok((0, 4, 7, 11))
        assert get_intervals("minor7") == Ok((0, 3, 7, 10))
        assert get_intervals("dominant7") == Ok((0, 4, 7, 10))
        assert get_intervals("diminished7") == Ok((0, 3, 6, 9))
        assert get_intervals("half_diminished7") == Ok((0, 3, 6, 10))

    def test_extended_chords(self):
        assert get_intervals("major9") == Ok((0, 4, 7, 11, 14))
        assert get_intervals("minor11") == Ok((0, 3, 7, 10, 14, 17))
        assert get_intervals("dominant13") == Ok((0, 4, 7, 10, 14, 17, 21))
        assert get_intervals("augmented13") == Ok((0, 4, 8, 10, 14, 18, 21))

    def test_altered_chords(self):
        assert get_intervals("dominant7_sharp9") == Ok((0, 4, 7, 10, 15))
        assert get_intervals("dominant7_flat9") == Ok((0, 4, 7, 10, 13))
        assert get_intervals("dominant7_sharp11") == Ok((0, 4, 7, 10, 18))
        assert get_intervals("minor11_sharp9") == Ok((0, 3, 7, 10, 15, 17))

    def test_suspended_chords(self):
        assert get_intervals("sus2") == Ok((0, 2, 7))
        assert get_intervals("sus4") == Ok((0, 5, 7))
        assert get_intervals("7sus4") == Ok((0, 5, 7, 10))
        assert get_intervals("maj7_sus2") == Ok((0, 2, 7, 11))
        assert get_intervals("11sus2") == Ok((0, 2, 7, 10, 14, 17))

    def test_empty_defaults_to_major(self):
        assert get_intervals("") == Ok((0, 4, 7))

    def test_unknown_quality(self):
        result = get_intervals("unknown")
        assert isinstance(result, Err)
        assert result.error.kind == "unknown_quality"
        assert result.error.message == "Unknown chord quality: unknown"

    def test_abbreviations_are_not_looked_up(self):
        assert get_intervals("m7").is_err()


class TestExpandQualityAbbreviation:
    @pytest.mark.parametrize(
        ("abbreviation", "expected"),
        [
            ("maj", "major"),
            ("m", "minor"),
            ("°", "diminished"),
            ("+", "augmented"),
            ("-7", "minor7"),
            ("m7b5", "half_diminished7"),
            ("ø9", "half_diminished9"),
            ("+13", "augmented13"),
            ("m11#9", "minor11_sharp9"),
            ("sus", "sus4"),
            ("maj13sus", "maj13_sus4"),
            ("7", "dominant7"),
            ("dom9", "dominant9"),
            ("7alt", "dominant7_sharp9"),
            ("13b9#11", "dominant13_flat9_sharp11"),
            ("13sus", "13sus4"),
        ],
    )
    def test_expands(self, abbreviation, expected):
        assert expand_quality_abbreviation(abbreviation) == expected

    def test_unknown_passes_through(self):
        assert expand_quality_abbreviation("major") == "major"
        assert expand_quality_abbreviation("nonsense") == "nonsense"

    def test_every_abbreviation_targets_a_known_quality(self):
        for abbreviation, quality in quality_abbreviations().items():
            assert quality in interval_map(), abbreviation


class TestNormalizeQuality:
    def test_lowercases_and_trims(self):
        assert normalize_quality("  MAJOR7  ") == "major7"
        assert normalize_quality("Dom7") == "dom7"

    def test_keeps_internal_whitespace(self):
        assert normalize_quality(" major 7 ") == "major 7"


class TestIsDominant:
    @pytest.mark.parametrize("quality", ["7", "dom7", "dominant7", "dominant", "13#9#11", "9sus", ""])
    def test_dominant(self, quality):
        assert is_dominant(quality) is True

    @pytest.mark.parametrize("quality", ["major", "m7", "maj7", "sus4", "half_diminished7"])
    def test_not_dominant(self, quality):
        assert is_dominant(quality) is False


class TestTables:
    def test_merged_entry_count(self):
        assert len(chord_data.INTERVAL_MAP) == 40
        assert len(dominant_chord_data.DOMINANT_INTERVAL_MAP) == 21
        assert len(all_quality_entries()) == 61

    def test_general_entries_come_first(self):
        names = [name for name, _ in all_quality_entries()]
        assert names[0] == "major"
        assert names[40] == "dominant7"
        assert names[-1] == "13sus4"

    def test_intervals_start_at_root(self):
        for name, intervals in all_quality_entries():
            assert intervals[0] == 0, name
            assert all(i >= 0 for i in intervals), name

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            interval_map()["major"] = (0,)  # type: ignore[index]
        with pytest.raises(TypeError):
            quality_abbreviations()["x"] = "major"  # type: ignore[index]
