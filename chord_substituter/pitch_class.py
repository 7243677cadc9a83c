"""Pitch class model for the 12-tone chromatic scale.

This module provides the canonical sharp note names, the enharmonic
alias table, and transposition on pitch classes (0-11, where C=0).
"""

from __future__ import annotations

from chord_substituter.result import Ok, Result, err

# Canonical note names in chromatic order (prefer sharps for consistency)
NOTE_NAMES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

# Alternate spelling to canonical note name
ENHARMONIC_EQUIVALENTS: dict[str, str] = {
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
    "E#": "F",
    "B#": "C",
}

_NOTE_TO_PC: dict[str, int] = {name: pc for pc, name in enumerate(NOTE_NAMES)}


def normalize_note(note: str) -> str:
    """Convert an enharmonic spelling to its canonical note name.

    Unknown strings are returned unchanged.

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "Db", "E#").

    Returns
    -------
    str
        Canonical note name.

    Examples
    --------
    >>> normalize_note("Db")
    'C#'
    >>> normalize_note("C")
    'C'
    >>> normalize_note("H")
    'H'
    """
    return ENHARMONIC_EQUIVALENTS.get(note, note)


def note_index(note: str) -> int | None:
    """Return the pitch class (0-11) of a note, or None if unknown.

    Examples
    --------
    >>> note_index("C")
    0
    >>> note_index("Db")
    1
    >>> note_index("H") is None
    True
    """
    return _NOTE_TO_PC.get(normalize_note(note))


def is_valid_note(note: str) -> bool:
    """Check if a note is canonical or a known enharmonic spelling.

    Examples
    --------
    >>> is_valid_note("Db")
    True
    >>> is_valid_note("H")
    False
    """
    return note in _NOTE_TO_PC or note in ENHARMONIC_EQUIVALENTS


def pitch_class_to_note(pc: int) -> str:
    """Return the canonical note name for any integer pitch class."""
    return NOTE_NAMES[pc % len(NOTE_NAMES)]


def transpose_note(note: str, semitones: int) -> Result[str]:
    """Transpose a note by a number of semitones.

    Parameters
    ----------
    note : str
        Root note name; enharmonic spellings are accepted.
    semitones : int
        Number of semitones to transpose (positive = up, may be negative).

    Returns
    -------
    Result[str]
        ``Ok`` with the canonical target note, or ``Err`` of kind
        ``"invalid_root"`` if the note is not recognized.

    Examples
    --------
    >>> transpose_note("C", 6)
    Ok(value='F#')
    >>> transpose_note("C", -1)
    Ok(value='B')
    >>> transpose_note("H", 6).is_err()
    True
    """
    root_pc = note_index(note)
    if root_pc is None:
        return err("invalid_root", f"Invalid root note: {note}")
    return Ok(pitch_class_to_note(root_pc + semitones))
