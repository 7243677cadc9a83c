"""Chord quality dictionary.

Maps canonical chord qualities (e.g., "minor7", "half_diminished9") to
interval lists in semitones from the root, and shorthand tokens (e.g.,
"m7", "ø9", "sus") to those canonical names. The dominant tables from
``chord_substituter.dominant_chord_data`` are merged in.

Interval lists keep their chord-tone order and are never sorted.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from chord_substituter import dominant_chord_data
from chord_substituter.result import Ok, Result, err

DEFAULT_QUALITY = "major"

# Canonical quality to semitone offsets from the root
INTERVAL_MAP: Mapping[str, tuple[int, ...]] = MappingProxyType({
    # Triads
    "major": (0, 4, 7),
    "minor": (0, 3, 7),
    "diminished": (0, 3, 6),
    "augmented": (0, 4, 8),
    # Seventh chords
    "major7": (0, 4, 7, 11),
    "minor7": (0, 3, 7, 10),
    "diminished7": (0, 3, 6, 9),
    "half_diminished7": (0, 3, 6, 10),
    # Ninth chords
    "major9": (0, 4, 7, 11, 14),
    "minor9": (0, 3, 7, 10, 14),
    "diminished9": (0, 3, 6, 9, 13),
    "half_diminished9": (0, 3, 6, 10, 13),
    "augmented9": (0, 4, 8, 10, 14),
    # Eleventh chords
    "major11": (0, 4, 7, 11, 14, 17),
    "minor11": (0, 3, 7, 10, 14, 17),
    "diminished11": (0, 3, 6, 9, 13, 16),
    "half_diminished11": (0, 3, 6, 10, 13, 16),
    "augmented11": (0, 4, 8, 10, 14, 18),
    # Thirteenth chords
    "major13": (0, 4, 7, 11, 14, 17, 21),
    "minor13": (0, 3, 7, 10, 14, 17, 21),
    "diminished13": (0, 3, 6, 9, 13, 16, 20),
    "half_diminished13": (0, 3, 6, 10, 13, 16, 20),
    "augmented13": (0, 4, 8, 10, 14, 18, 21),
    # Altered chords
    "major7_sharp9": (0, 4, 7, 11, 15),
    "major7_flat9": (0, 4, 7, 11, 13),
    "major7_sharp11": (0, 4, 7, 11, 18),
    "major9_sharp11": (0, 4, 7, 11, 14, 18),
    "minor7_sharp9": (0, 3, 7, 10, 15),
    "minor7_flat9": (0, 3, 7, 10, 13),
    "minor9_sharp11": (0, 3, 7, 10, 14, 18),
    "minor11_sharp9": (0, 3, 7, 10, 15, 17),
    # Suspended chords
    "sus2": (0, 2, 7),
    "sus4": (0, 5, 7),
    "maj7_sus2": (0, 2, 7, 11),
    "maj7_sus4": (0, 5, 7, 11),
    "maj9_sus4": (0, 5, 7, 11, 14),
    "11sus2": (0, 2, 7, 10, 14, 17),
    "maj11_sus2": (0, 2, 7, 11, 14, 17),
    "maj13_sus2": (0, 2, 7, 11, 14, 17, 21),
    "maj13_sus4": (0, 5, 7, 11, 14, 17, 21),
})

# Shorthand to canonical quality
QUALITY_ABBREVIATIONS: Mapping[str, str] = MappingProxyType({
    # Triads
    "maj": "major",
    "min": "minor",
    "m": "minor",
    "dim": "diminished",
    "°": "diminished",
    "aug": "augmented",
    "+": "augmented",
    # Seventh chords
    "maj7": "major7",
    "min7": "minor7",
    "m7": "minor7",
    "-7": "minor7",
    "dim7": "diminished7",
    "°7": "diminished7",
    "half_dim7": "half_diminished7",
    "m7b5": "half_diminished7",
    "ø7": "half_diminished7",
    # Ninth chords
    "maj9": "major9",
    "min9": "minor9",
    "m9": "minor9",
    "-9": "minor9",
    "dim9": "diminished9",
    "°9": "diminished9",
    "half_dim9": "half_diminished9",
    "m9b5": "half_diminished9",
    "ø9": "half_diminished9",
    "aug9": "augmented9",
    "+9": "augmented9",
    # Eleventh chords
    "maj11": "major11",
    "min11": "minor11",
    "m11": "minor11",
    "-11": "minor11",
    "dim11": "diminished11",
    "°11": "diminished11",
    "half_dim11": "half_diminished11",
    "m11b5": "half_diminished11",
    "ø11": "half_diminished11",
    "aug11": "augmented11",
    "+11": "augmented11",
    # Thirteenth chords
    "maj13": "major13",
    "min13": "minor13",
    "m13": "minor13",
    "-13": "minor13",
    "dim13": "diminished13",
    "°13": "diminished13",
    "half_dim13": "half_diminished13",
    "m13b5": "half_diminished13",
    "ø13": "half_diminished13",
    "aug13": "augmented13",
    "+13": "augmented13",
    # Altered chords
    "maj7#9": "major7_sharp9",
    "maj7b9": "major7_flat9",
    "maj7#11": "major7_sharp11",
    "maj9#11": "major9_sharp11",
    "m7#9": "minor7_sharp9",
    "m7b9": "minor7_flat9",
    "m9#11": "minor9_sharp11",
    "m11#9": "minor11_sharp9",
    # Suspended chords
    "sus": "sus4",
    "sus2": "sus2",
    "sus4": "sus4",
    "maj7sus2": "maj7_sus2",
    "maj7sus4": "maj7_sus4",
    "maj7sus": "maj7_sus4",
    "maj9sus4": "maj9_sus4",
    "maj9sus": "maj9_sus4",
    "maj11sus2": "maj11_sus2",
    "maj13sus2": "maj13_sus2",
    "maj13sus4": "maj13_sus4",
    "maj13sus": "maj13_sus4",
})

_MERGED_INTERVAL_MAP: Mapping[str, tuple[int, ...]] = MappingProxyType(
    {**INTERVAL_MAP, **dominant_chord_data.interval_map()}
)
_MERGED_ABBREVIATIONS: Mapping[str, str] = MappingProxyType(
    {**QUALITY_ABBREVIATIONS, **dominant_chord_data.quality_abbreviations()}
)


def interval_map() -> Mapping[str, tuple[int, ...]]:
    """Return the merged general and dominant quality to interval mapping."""
    return _MERGED_INTERVAL_MAP


def quality_abbreviations() -> Mapping[str, str]:
    """Return the merged general and dominant abbreviation mapping."""
    return _MERGED_ABBREVIATIONS


def all_quality_entries() -> list[tuple[str, tuple[int, ...]]]:
    """Return every (quality, intervals) pair, general entries first."""
    return list(_MERGED_INTERVAL_MAP.items())


def normalize_quality(quality: str) -> str:
    """Lowercase a quality string and trim surrounding whitespace.

    Examples
    --------
    >>> normalize_quality("  MAJOR7  ")
    'major7'
    >>> normalize_quality("Dom7")
    'dom7'
    """
    return quality.lower().strip()


def expand_quality_abbreviation(quality: str) -> str:
    """Expand a shorthand token to its canonical quality.

    Unknown tokens are returned unchanged so the failure surfaces in
    ``get_intervals``.

    Examples
    --------
    >>> expand_quality_abbreviation("m7")
    'minor7'
    >>> expand_quality_abbreviation("7")
    'dominant7'
    >>> expand_quality_abbreviation("unknown")
    'unknown'
    """
    return _MERGED_ABBREVIATIONS.get(quality, quality)


def get_intervals(quality: str) -> Result[tuple[int, ...]]:
    """Look up the intervals of a canonical quality.

    Parameters
    ----------
    quality : str
        Canonical quality name. The empty string means major.

    Returns
    -------
    Result[tuple[int, ...]]
        ``Ok`` with semitone offsets from the root, or ``Err`` of kind
        ``"unknown_quality"``.

    Examples
    --------
    >>> get_intervals("minor7")
    Ok(value=(0, 3, 7, 10))
    >>> get_intervals("")
    Ok(value=(0, 4, 7))
    >>> get_intervals("unknown").error.message
    'Unknown chord quality: unknown'
    """
    quality = quality or DEFAULT_QUALITY
    intervals = _MERGED_INTERVAL_MAP.get(quality)
    if intervals is None:
        return err("unknown_quality", f"Unknown chord quality: {quality}")
    return Ok(intervals)


def is_dominant(quality: str) -> bool:
    """Check whether a quality is dominant before or after expansion.

    Examples
    --------
    >>> is_dominant("dom7")
    True
    >>> is_dominant("m7")
    False
    """
    return dominant_chord_data.is_dominant(quality) or dominant_chord_data.is_dominant(
        expand_quality_abbreviation(quality)
    )
