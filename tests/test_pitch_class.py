"""Tests for the chromatic pitch model."""

import pytest

from chord_substituter.pitch_class import (
    ENHARMONIC_EQUIVALENTS,
    NOTE_NAMES,
    is_valid_note,
    normalize_note,
    note_index,
    transpose_note,
)
from chord_substituter.result import Err, Ok


class TestNormalizeNote:
    @pytest.mark.parametrize(
        ("note", "expected"),
        [
            ("Db", "C#"),
            ("Eb", "D#"),
            ("Gb", "F#"),
            ("Ab", "G#"),
            ("Bb", "A#"),
            ("E#", "F"),
            ("B#", "C"),
            ("C", "C"),
            ("F#", "F#"),
        ],
    )
    def test_enharmonic_spellings(self, note, expected):
        assert normalize_note(note) == expected

    def test_unknown_note_passes_through(self):
        assert normalize_note("H") == "H"
        assert normalize_note("Cb") == "Cb"

    @pytest.mark.parametrize("note", [*NOTE_NAMES, *ENHARMONIC_EQUIVALENTS, "H", "", "x#"])
    def test_idempotent(self, note):
        assert normalize_note(normalize_note(note)) == normalize_note(note)

    def test_enharmonic_targets_are_canonical(self):
        assert all(target in NOTE_NAMES for target in ENHARMONIC_EQUIVALENTS.values())


class TestNoteIndex:
    def test_canonical_order(self):
        assert [note_index(n) for n in NOTE_NAMES] == list(range(12))

    def test_enharmonic(self):
        assert note_index("Db") == 1
        assert note_index("B#") == 0

    def test_unknown(self):
        assert note_index("H") is None
        assert note_index("Fb") is None


class TestIsValidNote:
    @pytest.mark.parametrize("note", ["C", "C#", "Db", "E#", "B#", "Bb"])
    def test_valid(self, note):
        assert is_valid_note(note) is True

    @pytest.mark.parametrize("note", ["H", "Cb", "Fb", "c", "", "C##"])
    def test_invalid(self, note):
        assert is_valid_note(note) is False


class TestTransposeNote:
    @pytest.mark.parametrize(
        ("note", "semitones", "expected"),
        [
            ("C", 6, "F#"),
            ("G", 6, "C#"),
            ("F#", 6, "C"),
            ("C", 0, "C"),
            ("B", 1, "C"),
            ("C", -1, "B"),
            ("D", -14, "C"),
            ("Db", 12, "C#"),
            ("A", 21, "F#"),
        ],
    )
    def test_transpose(self, note, semitones, expected):
        assert transpose_note(note, semitones) == Ok(expected)

    def test_tritone_is_self_inverse(self):
        for note in NOTE_NAMES:
            once = transpose_note(note, 6).unwrap()
            assert transpose_note(once, 6) == Ok(note)

    def test_invalid_root(self):
        result = transpose_note("H", 6)
        assert isinstance(result, Err)
        assert result.error.kind == "invalid_root"
        assert result.error.message == "Invalid root note: H"
