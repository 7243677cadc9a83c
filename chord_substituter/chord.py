"""Chord parsing, note building and reverse pitch lookup.

Examples
--------
>>> notes("C major")
Ok(value=['C', 'E', 'G'])
>>> notes("Bb min")
Ok(value=['A#', 'C#', 'F'])
>>> build("F#", "m7").unwrap().notes
('F#', 'A', 'C#', 'E')
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from chord_substituter import chord_data
from chord_substituter.models import Chord
from chord_substituter.pitch_class import (
    NOTE_NAMES,
    is_valid_note,
    normalize_note,
    note_index,
    pitch_class_to_note,
)
from chord_substituter.result import Err, Ok, Result, err

logger = logging.getLogger(__name__)

SUBSET_MATCH_MIN_PITCHES = 2
EXACT_MATCH_MIN_PITCHES = 3

# Root (A-G) with optional accidental, then the rest of the line
# ("$" also accepts a single trailing newline)
CHORD_RE = re.compile(r"(?P<root>[A-G][b#]?)(?P<quality>.*)$")
PITCH_RE = re.compile(r"[A-G][b#]?")

INVALID_FORMAT = "Invalid chord format"


def parse_root_and_quality(chord_string: str) -> Result[tuple[str, str]]:
    """Split a chord string into its root and trimmed quality.

    Parameters
    ----------
    chord_string : str
        Chord such as "C major", "Bbm7" or "G".

    Returns
    -------
    Result[tuple[str, str]]
        ``Ok((root, quality))``, or ``Err`` of kind ``"invalid_format"``
        when the string does not start with a known root.

    Examples
    --------
    >>> parse_root_and_quality("Bb  major7 ")
    Ok(value=('Bb', 'major7'))
    >>> parse_root_and_quality("H major").error.message
    'Invalid chord format'
    """
    match = CHORD_RE.match(chord_string)
    if match is None or not is_valid_note(match["root"]):
        logger.debug("Rejected chord string %r", chord_string)
        return err("invalid_format", INVALID_FORMAT)
    return Ok((match["root"], match["quality"].strip()))


def _intervals_for(quality: str) -> Result[tuple[int, ...]]:
    full_quality = chord_data.expand_quality_abbreviation(chord_data.normalize_quality(quality))
    return chord_data.get_intervals(full_quality)


def _build_notes(root: str, intervals: Iterable[int]) -> Result[list[str]]:
    root_pc = note_index(root)
    if root_pc is None:
        return err("invalid_root", f"Invalid root note: {root}")
    return Ok([pitch_class_to_note(root_pc + interval) for interval in intervals])


def notes(chord_string: str) -> Result[list[str]]:
    """Return the notes of a chord in chord-tone order.

    Parameters
    ----------
    chord_string : str
        Chord such as "C major", "Am7" or "Db".

    Returns
    -------
    Result[list[str]]
        ``Ok`` with canonical note names, or ``Err`` of kind
        ``"invalid_format"`` or ``"unknown_quality"``.

    Examples
    --------
    >>> notes("G7")
    Ok(value=['G', 'B', 'D', 'F'])
    >>> notes("C unknown").error.message
    'Unknown chord quality: unknown'
    """
    parsed = parse_root_and_quality(chord_string)
    if isinstance(parsed, Err):
        return parsed
    root, quality = parsed.value

    intervals = _intervals_for(quality)
    if isinstance(intervals, Err):
        return intervals

    return _build_notes(root, intervals.value)


def notes_from_chord_array(chord_strings: Iterable[str]) -> list[Result[list[str]]]:
    """Apply ``notes`` to each chord string independently.

    Examples
    --------
    >>> [r.is_ok() for r in notes_from_chord_array(["C major", "invalid", "Am"])]
    [True, False, True]
    """
    return [notes(chord_string) for chord_string in chord_strings]


def build(root: str, quality: str | None = None) -> Result[Chord]:
    """Build a Chord from a root and quality, or from one chord string.

    Parameters
    ----------
    root : str
        Root note, or a whole chord string when ``quality`` is None.
    quality : str | None
        Chord quality; the empty string means major.

    Returns
    -------
    Result[Chord]
        ``Ok`` with a Chord keeping ``root`` and ``quality`` as given.

    Examples
    --------
    >>> build("Db", "major").unwrap()
    Chord(root='Db', quality='major', notes=('C#', 'F', 'G#'))
    >>> build("Am7").unwrap()
    Chord(root='A', quality='m7', notes=('A', 'C', 'E', 'G'))
    """
    if quality is None:
        parsed = parse_root_and_quality(root)
        if isinstance(parsed, Err):
            return parsed
        return build(*parsed.value)

    chord_notes = notes(f"{root} {quality}")
    if isinstance(chord_notes, Err):
        return chord_notes
    return Ok(Chord(root=root, quality=quality, notes=tuple(chord_notes.value)))


def all_chords() -> list[tuple[str, list[str]]]:
    """Return every (chord name, notes) pair for all roots and qualities.

    Roots follow chromatic order; qualities follow dictionary order.
    """
    chords: list[tuple[str, list[str]]] = []
    for root_pc, root in enumerate(NOTE_NAMES):
        for quality, intervals in chord_data.all_quality_entries():
            chord_notes = [pitch_class_to_note(root_pc + interval) for interval in intervals]
            chords.append((f"{root} {quality}", chord_notes))
    return chords


def parse_pitches(pitches: str) -> list[str]:
    """Extract pitch names from free text, ignoring everything else.

    Examples
    --------
    >>> parse_pitches("CEGBb")
    ['C', 'E', 'G', 'Bb']
    >>> parse_pitches("C, E and X")
    ['C', 'E']
    """
    return PITCH_RE.findall(pitches)


def _unique_pitches(pitches: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(normalize_note(pitch) for pitch in pitches))


def _matches(pitches: list[str], chord_notes: list[str], match_exact: bool) -> bool:
    if match_exact and len(chord_notes) != len(pitches):
        return False
    note_set = set(chord_notes)
    return all(pitch in note_set for pitch in pitches)


def find_chords_with_pitches(
    pitches: str | Iterable[str],
    *,
    match_exact: bool = False,
) -> Result[list[str]]:
    """Find all chords containing the given pitches.

    Parameters
    ----------
    pitches : str | Iterable[str]
        Free text such as "CEG" or "Bb C# E", or a list of pitch names.
    match_exact : bool
        If True, a chord matches only when it has exactly as many notes as
        there are distinct pitches, all of them given; otherwise it may
        contain extra notes.

    Returns
    -------
    Result[list[str]]
        ``Ok`` with "{root} {quality}" names in enumeration order, or
        ``Err`` of kind ``"insufficient_pitches"`` when fewer than 2
        (3 for exact matching) distinct pitches are given.

    Examples
    --------
    >>> "A minor7" in find_chords_with_pitches("CEG").unwrap()
    True
    >>> find_chords_with_pitches(["C"]).error.kind
    'insufficient_pitches'
    """
    if isinstance(pitches, str):
        pitches = parse_pitches(pitches)
    elif not isinstance(pitches, Iterable):
        msg = f"pitches must be a string or an iterable of strings, not {type(pitches).__name__}"
        raise TypeError(msg)

    unique_pitches = _unique_pitches(pitches)
    required = EXACT_MATCH_MIN_PITCHES if match_exact else SUBSET_MATCH_MIN_PITCHES
    if len(unique_pitches) < required:
        return err("insufficient_pitches", "Insufficient unique pitches to match against.")

    matches = [
        name for name, chord_notes in all_chords() if _matches(unique_pitches, chord_notes, match_exact)
    ]
    logger.debug(
        "Pitches %s matched %d chords (exact=%s)",
        unique_pitches,
        len(matches),
        match_exact,
    )
    return Ok(matches)
