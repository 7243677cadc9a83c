"""Interval and abbreviation tables for dominant chords.

The dominant tables are merged into the general dictionary in
``chord_substituter.chord_data`` and are also used on their own by
tritone substitution.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from chord_substituter.result import Ok, Result, err

# Dominant quality to semitone offsets from the root
DOMINANT_INTERVAL_MAP: Mapping[str, tuple[int, ...]] = MappingProxyType({
    "dominant7": (0, 4, 7, 10),
    "dominant9": (0, 4, 7, 10, 14),
    "dominant11": (0, 4, 7, 10, 14, 17),
    "dominant13": (0, 4, 7, 10, 14, 17, 21),
    "dominant7_sharp9": (0, 4, 7, 10, 15),
    "dominant7_flat9": (0, 4, 7, 10, 13),
    "dominant9_sharp11": (0, 4, 7, 10, 14, 18),
    "dominant7_sharp11": (0, 4, 7, 10, 18),
    "dominant13_flat9": (0, 4, 7, 10, 13, 17, 21),
    "dominant13_sharp9": (0, 4, 7, 10, 15, 17, 21),
    "dominant13_sharp11": (0, 4, 7, 10, 14, 18, 21),
    "dominant13_flat9_sharp11": (0, 4, 7, 10, 13, 18, 21),
    "dominant13_sharp9_sharp11": (0, 4, 7, 10, 15, 18, 21),
    "dominant7_flat13": (0, 4, 7, 10, 20),
    "dominant9_flat13": (0, 4, 7, 10, 14, 20),
    "dominant11_flat13": (0, 4, 7, 10, 14, 17, 20),
    # Suspended dominants
    "7sus2": (0, 2, 7, 10),
    "7sus4": (0, 5, 7, 10),
    "9sus4": (0, 5, 7, 10, 14),
    "13sus2": (0, 2, 7, 10, 14, 17, 21),
    "13sus4": (0, 5, 7, 10, 14, 17, 21),
})

# Dominant shorthand to canonical quality
DOMINANT_QUALITY_ABBREVIATIONS: Mapping[str, str] = MappingProxyType({
    # Basic
    "7": "dominant7",
    "dom7": "dominant7",
    "9": "dominant9",
    "dom9": "dominant9",
    "11": "dominant11",
    "dom11": "dominant11",
    "13": "dominant13",
    "dom13": "dominant13",
    # Altered
    "7#9": "dominant7_sharp9",
    "7alt": "dominant7_sharp9",
    "7b9": "dominant7_flat9",
    "9#11": "dominant9_sharp11",
    "7#11": "dominant7_sharp11",
    "13b9": "dominant13_flat9",
    "13#9": "dominant13_sharp9",
    "13#11": "dominant13_sharp11",
    "13b9#11": "dominant13_flat9_sharp11",
    "13#9#11": "dominant13_sharp9_sharp11",
    "7b13": "dominant7_flat13",
    "9b13": "dominant9_flat13",
    "11b13": "dominant11_flat13",
    # Suspended
    "7sus2": "7sus2",
    "7sus4": "7sus4",
    "7sus": "7sus4",
    "9sus4": "9sus4",
    "9sus": "9sus4",
    "13sus2": "13sus2",
    "13sus4": "13sus4",
    "13sus": "13sus4",
})

# Every spelling accepted as a dominant chord, abbreviated or canonical.
# "dominant" has no interval entry of its own.
DOMINANT_QUALITIES: frozenset[str] = frozenset({
    # Basic
    "7", "dom7", "dominant7", "dominant",
    "9", "dom9", "dominant9",
    "11", "dom11", "dominant11",
    "13", "dom13", "dominant13",
    # Altered
    "7#9", "7alt", "7b9", "9#11", "7#11", "13b9", "13#9", "13#11",
    "13b9#11", "13#9#11", "7b13", "9b13", "11b13",
    "dominant7_sharp9", "dominant7_flat9", "dominant9_sharp11",
    "dominant7_sharp11", "dominant13_flat9", "dominant13_sharp9",
    "dominant13_sharp11", "dominant13_flat9_sharp11", "dominant13_sharp9_sharp11",
    "dominant7_flat13", "dominant9_flat13", "dominant11_flat13",
    # Suspended
    "7sus2", "7sus4", "7sus", "9sus4", "9sus", "13sus2", "13sus4", "13sus",
})


def interval_map() -> Mapping[str, tuple[int, ...]]:
    """Return the dominant quality to interval mapping."""
    return DOMINANT_INTERVAL_MAP


def quality_abbreviations() -> Mapping[str, str]:
    """Return the dominant abbreviation mapping."""
    return DOMINANT_QUALITY_ABBREVIATIONS


def dominant_qualities() -> frozenset[str]:
    """Return every quality spelling treated as dominant."""
    return DOMINANT_QUALITIES


def get_intervals(quality: str) -> Result[tuple[int, ...]]:
    """Look up the intervals of a canonical dominant quality.

    Examples
    --------
    >>> get_intervals("dominant7")
    Ok(value=(0, 4, 7, 10))
    >>> get_intervals("major").error.message
    'Not a dominant chord quality: major'
    """
    intervals = DOMINANT_INTERVAL_MAP.get(quality)
    if intervals is None:
        return err("unknown_quality", f"Not a dominant chord quality: {quality}")
    return Ok(intervals)


def expand_quality_abbreviation(quality: str) -> str:
    """Expand a dominant abbreviation, passing unknown strings through.

    Examples
    --------
    >>> expand_quality_abbreviation("13#9")
    'dominant13_sharp9'
    >>> expand_quality_abbreviation("unknown")
    'unknown'
    """
    return DOMINANT_QUALITY_ABBREVIATIONS.get(quality, quality)


def is_dominant(quality: str) -> bool:
    """Check whether a quality belongs to the dominant family.

    The empty quality counts as dominant: a bare root such as "G" is
    substituted as a dominant seventh.

    Examples
    --------
    >>> is_dominant("7")
    True
    >>> is_dominant("")
    True
    >>> is_dominant("major")
    False
    """
    return quality == "" or quality in DOMINANT_QUALITIES
