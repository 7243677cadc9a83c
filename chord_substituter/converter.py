"""Chord notation converter between pychord symbols and this package.

pychord writes chords compactly (e.g., "Gm7", "Bb7#9"), while chords
here carry a canonical quality (e.g., "minor7", "dominant7_sharp9").
Only qualities both vocabularies share can be converted.
"""

from __future__ import annotations

import logging

from chord_substituter import chord_data
from chord_substituter.chord import build
from chord_substituter.models import Chord
from chord_substituter.result import Err, Ok, Result, err

logger = logging.getLogger(__name__)

# Mapping from pychord quality names to canonical qualities
PYCHORD_TO_QUALITY: dict[str, str] = {
    "": "major",
    "maj": "major",
    "m": "minor",
    "min": "minor",
    "dim": "diminished",
    "aug": "augmented",
    "sus2": "sus2",
    "sus4": "sus4",
    "sus": "sus4",
    "7": "dominant7",
    "maj7": "major7",
    "M7": "major7",
    "m7": "minor7",
    "dim7": "diminished7",
    "m7-5": "half_diminished7",
    "m7b5": "half_diminished7",
    "7sus4": "7sus4",
    "9": "dominant9",
    "maj9": "major9",
    "M9": "major9",
    "m9": "minor9",
    "9sus4": "9sus4",
    "11": "dominant11",
    "m11": "minor11",
    "13": "dominant13",
    "maj13": "major13",
    "M13": "major13",
    "m13": "minor13",
    "7-9": "dominant7_flat9",
    "7b9": "dominant7_flat9",
    "7+9": "dominant7_sharp9",
    "7#9": "dominant7_sharp9",
    "7+11": "dominant7_sharp11",
    "7#11": "dominant7_sharp11",
    "9+11": "dominant9_sharp11",
    "9#11": "dominant9_sharp11",
    "7-13": "dominant7_flat13",
    "7b13": "dominant7_flat13",
    "13-9": "dominant13_flat9",
    "13b9": "dominant13_flat9",
    "13+9": "dominant13_sharp9",
    "13#9": "dominant13_sharp9",
    "13+11": "dominant13_sharp11",
    "13#11": "dominant13_sharp11",
}

# Reverse mapping from canonical qualities to pychord quality names
QUALITY_TO_PYCHORD: dict[str, str] = {
    "major": "",
    "minor": "m",
    "diminished": "dim",
    "augmented": "aug",
    "sus2": "sus2",
    "sus4": "sus4",
    "dominant7": "7",
    "major7": "maj7",
    "minor7": "m7",
    "diminished7": "dim7",
    "half_diminished7": "m7-5",
    "7sus4": "7sus4",
    "dominant9": "9",
    "major9": "maj9",
    "minor9": "m9",
    "9sus4": "9sus4",
    "dominant11": "11",
    "minor11": "m11",
    "dominant13": "13",
    "major13": "maj13",
    "minor13": "m13",
    "dominant7_flat9": "7b9",
    "dominant7_sharp9": "7#9",
    "dominant7_sharp11": "7#11",
    "dominant9_sharp11": "9#11",
    "dominant7_flat13": "7b13",
    "dominant13_flat9": "13b9",
    "dominant13_sharp9": "13#9",
    "dominant13_sharp11": "13#11",
}


def from_pychord(chord_str: str) -> Result[Chord]:
    """Parse a pychord notation string into a Chord.

    A slash bass ("C/E") is parsed by pychord but dropped.

    Parameters
    ----------
    chord_str : str
        Chord in pychord notation (e.g., "Gm7", "C", "F#dim7").

    Returns
    -------
    Result[Chord]
        ``Ok`` with a chord whose quality is canonical, or ``Err`` of
        kind ``"invalid_format"`` (pychord rejected the symbol) or
        ``"unknown_quality"`` (no canonical equivalent).
    """
    from pychord import Chord as PyChord

    try:
        pc = PyChord(chord_str)
    except ValueError as e:
        logger.debug("pychord rejected %r: %s", chord_str, e)
        return err("invalid_format", "Invalid chord format")

    quality_name = str(pc.quality)
    quality = PYCHORD_TO_QUALITY.get(quality_name)
    if quality is None:
        return err("unknown_quality", f"Unknown chord quality: {quality_name}")
    return build(pc.root, quality)


def to_pychord(chord: Chord | str) -> Result[str]:
    """Render a Chord, or a chord string, in pychord notation.

    Examples
    --------
    >>> to_pychord("Bb minor7")
    Ok(value='Bbm7')
    >>> to_pychord("G 7#9")
    Ok(value='G7#9')
    >>> to_pychord("C").unwrap()
    'C'
    """
    if isinstance(chord, str):
        built = build(chord)
        if isinstance(built, Err):
            return built
        chord = built.value

    quality = chord_data.expand_quality_abbreviation(chord_data.normalize_quality(chord.quality))
    quality = quality or chord_data.DEFAULT_QUALITY
    pychord_quality = QUALITY_TO_PYCHORD.get(quality)
    if pychord_quality is None:
        return err("unknown_quality", f"Unknown chord quality: {quality}")
    return Ok(f"{chord.root}{pychord_quality}")
