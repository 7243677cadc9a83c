"""Chord value object.

A chord is a root, a quality as written by the caller, and the notes
derived from both.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Chord:
    """Built chord.

    Parameters
    ----------
    root : str
        The root note as given (e.g., "C", "F#", "Bb").
    quality : str
        The chord quality as given, possibly abbreviated or empty
        (e.g., "major", "m7", "").
    notes : tuple[str, ...]
        Canonical note names in chord-tone order.

    Examples
    --------
    >>> chord = Chord(root="Bb", quality="m7", notes=("A#", "C#", "F", "G#"))
    >>> chord.name
    'Bb m7'
    >>> str(Chord(root="C", quality="", notes=("C", "E", "G")))
    'C'
    """

    root: str
    quality: str
    notes: tuple[str, ...]

    @property
    def name(self) -> str:
        """Chord name in "{root} {quality}" form."""
        if not self.quality:
            return self.root
        return f"{self.root} {self.quality}"

    def to_pychord(self) -> str:
        """Convert to pychord notation string.

        Raises
        ------
        ChordSubstituterError
            If the quality has no pychord spelling.
        """
        from chord_substituter.converter import to_pychord

        return to_pychord(self).unwrap()

    def __str__(self) -> str:
        """Return the chord name as default string representation."""
        return self.name
