"""Tritone substitution for dominant chords.

A tritone substitution replaces a dominant chord with the dominant chord
whose root is a tritone (6 semitones) away. Both chords share the same
tritone between their 3rd and 7th, inverted. Substituting twice returns
the original root.
"""

from __future__ import annotations

import logging

from chord_substituter import dominant_chord_data
from chord_substituter.chord import build, notes
from chord_substituter.chord_data import normalize_quality
from chord_substituter.pitch_class import transpose_note
from chord_substituter.result import Err, Ok, Result, err

logger = logging.getLogger(__name__)

TRITONE_SEMITONES = 6

# Qualities written directly after the root, as in "G7" or "C13"
_UNSPACED_SUFFIXES = frozenset({"7", "9", "11", "13"})


def is_valid_dominant_quality(quality: str) -> bool:
    """Check a chord quality, as written, for dominant-ness.

    Examples
    --------
    >>> is_valid_dominant_quality("Dom7")
    True
    >>> is_valid_dominant_quality("")
    True
    >>> is_valid_dominant_quality("maj7")
    False
    """
    normalized = normalize_quality(quality)
    expanded = dominant_chord_data.expand_quality_abbreviation(normalized)
    return (
        dominant_chord_data.is_dominant(normalized)
        or dominant_chord_data.is_dominant(expanded)
        or normalized == ""
    )


def format_quality_suffix(quality: str) -> str:
    """Render the original quality for appending to a substitute root.

    Examples
    --------
    >>> format_quality_suffix("")
    '7'
    >>> format_quality_suffix("13")
    '13'
    >>> format_quality_suffix("7#9")
    ' 7#9'
    """
    quality = quality.strip()
    if quality == "":
        return "7"
    if quality == "dominant":
        return " dominant7"
    if quality in _UNSPACED_SUFFIXES:
        return quality
    if dominant_chord_data.is_dominant(quality):
        return f" {quality}"
    return quality


def substitute(chord_string: str) -> Result[str]:
    """Perform a tritone substitution on a dominant chord.

    Parameters
    ----------
    chord_string : str
        Dominant chord such as "G7", "C dominant7" or "F7alt". A bare
        root is treated as a dominant seventh.

    Returns
    -------
    Result[str]
        ``Ok`` with the substitute chord name, or ``Err`` of kind
        ``"invalid_format"``, ``"unknown_quality"`` or
        ``"dominant_required"``.

    Examples
    --------
    >>> substitute("G7")
    Ok(value='C#7')
    >>> substitute("C dominant7")
    Ok(value='F# dominant7')
    >>> substitute("C major").error.kind
    'dominant_required'
    """
    built = build(chord_string)
    if isinstance(built, Err):
        return built
    chord = built.value

    if not is_valid_dominant_quality(chord.quality):
        return err("dominant_required", "Tritone substitution only applies to dominant 7th chords")

    new_root = transpose_note(chord.root, TRITONE_SEMITONES)
    if isinstance(new_root, Err):
        return new_root

    result = f"{new_root.value}{format_quality_suffix(chord.quality)}"
    logger.debug("Tritone substitute for %r is %r", chord_string, result)
    return Ok(result)


def substitute_with_notes(chord_string: str) -> Result[tuple[str, list[str]]]:
    """Perform a tritone substitution and return the new chord's notes too.

    Examples
    --------
    >>> substitute_with_notes("G7")
    Ok(value=('C#7', ['C#', 'F', 'G#', 'B']))
    """
    substituted = substitute(chord_string)
    if isinstance(substituted, Err):
        return substituted

    chord_notes = notes(substituted.value)
    if isinstance(chord_notes, Err):
        return chord_notes
    return Ok((substituted.value, chord_notes.value))
