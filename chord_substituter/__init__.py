"""Chord substituter library for chord notes, reverse lookup and tritone substitution.

This library converts chord names (e.g., "C major", "G7", "Bbmaj7") into
their pitch classes, finds the chords that contain a set of pitches, and
performs tritone substitution on dominant chords. Operations return
``Ok`` or ``Err`` values instead of raising.

Examples
--------
>>> from chord_substituter import notes, find_chords_with_pitches, substitute

>>> notes("G7")
Ok(value=['G', 'B', 'D', 'F'])

>>> "C major7" in find_chords_with_pitches("CEG").unwrap()
True

>>> substitute("G7#9")
Ok(value='C# 7#9')
>>> substitute("C major").error.message
'Tritone substitution only applies to dominant 7th chords'
"""

import logging

from chord_substituter.chord import (
    all_chords,
    build,
    find_chords_with_pitches,
    notes,
    notes_from_chord_array,
)
from chord_substituter.converter import from_pychord, to_pychord
from chord_substituter.models import Chord
from chord_substituter.result import ChordError, ChordSubstituterError, Err, Ok, Result
from chord_substituter.tritone import substitute, substitute_with_notes

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Chord",
    "ChordError",
    "ChordSubstituterError",
    "Err",
    "Ok",
    "Result",
    "all_chords",
    "build",
    "find_chords_with_pitches",
    "from_pychord",
    "notes",
    "notes_from_chord_array",
    "substitute",
    "substitute_with_notes",
    "to_pychord",
]
