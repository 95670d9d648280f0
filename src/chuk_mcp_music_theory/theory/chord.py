"""
Chords - tonic plus chord type.

A chord name is an optional tonic glued to (or separated by a space from)
a symbol of the chord dictionary: 'Cmaj7', 'Bb m7', 'dim7'. Every function
takes an optional dictionary; None means the built-in chord dictionary.

Examples:
    notes('Cmaj7') -> ['C', 'E', 'G', 'B']
    detect(['E', 'C', 'A', 'G']) -> ['C6', 'Am7']
    get_full('maj7', 'Eb4') -> ['Eb4', 'G4', 'Bb4', 'D5']
"""

from __future__ import annotations

from typing import Callable

from chuk_mcp_music_theory.constants import CHORD_JOINER
from chuk_mcp_music_theory.core import pcset
from chuk_mcp_music_theory.core.distance import harmonize, transpose
from chuk_mcp_music_theory.core.pitch import Pitch, parse_note
from chuk_mcp_music_theory.detect import NotesLike
from chuk_mcp_music_theory.detect import detect as detect_names
from chuk_mcp_music_theory.dictionary import (
    DictionaryEntry,
    TypeDictionary,
    default_chords,
    default_scales,
)


def _chords(dictionary: TypeDictionary | None) -> TypeDictionary:
    return dictionary if dictionary is not None else default_chords()


def tokenize(name: str, dictionary: TypeDictionary | None = None) -> tuple[str | None, str]:
    """
    Split a chord name into (tonic, symbol).

    Examples:
        tokenize('Cmaj7') -> ('C', 'maj7')
        tokenize('F# m7b5') -> ('F#', 'm7b5')
        tokenize('dim') -> (None, 'dim')
    """
    return _chords(dictionary).tokenize(name)


def get(name: str, dictionary: TypeDictionary | None = None) -> DictionaryEntry | None:
    """The chord type of a name (the tonic is ignored), None if unknown."""
    return _chords(dictionary).get(name)


def names(aliases: bool = False, dictionary: TypeDictionary | None = None) -> list[str]:
    """Available chord symbols."""
    return _chords(dictionary).names(aliases=aliases)


def exists(name: str, dictionary: TypeDictionary | None = None) -> bool:
    return get(name, dictionary) is not None


def intervals(name: str, dictionary: TypeDictionary | None = None) -> list[str]:
    """Intervals of a chord type, empty for unknown chords."""
    entry = get(name, dictionary)
    return entry.interval_names if entry else []


def notes(
    name: str,
    tonic: str | Pitch | None = None,
    dictionary: TypeDictionary | None = None,
) -> list[str]:
    """
    Pitch classes of a chord.

    Args:
        name: Chord name, with or without tonic
        tonic: Overrides the tonic in the name

    Returns:
        The pitch classes, or an empty list without a valid tonic and type
    """
    chord_types = _chords(dictionary)
    if not isinstance(name, str):
        return []
    name_tonic, symbol = chord_types.tokenize(name)
    root = parse_note(tonic) if tonic else parse_note(name_tonic or "")
    entry = chord_types.get(symbol)
    if root is None or entry is None:
        return []
    return [transpose(root.pitch_class, ivl) for ivl in entry.intervals]


def detect(notes: NotesLike, dictionary: TypeDictionary | None = None) -> list[str]:
    """Chords with exactly the given pitch classes, as '<tonic><symbol>'."""
    return detect_names(notes, _chords(dictionary), joiner=CHORD_JOINER)


def get_full(
    type_name: str,
    tonic: str | Pitch | None = None,
    dictionary: TypeDictionary | None = None,
) -> list[str] | None:
    """
    Notes of a chord type from a tonic, keeping the tonic's octave.

    Without a tonic the interval names are returned; None if the type is unknown.
    """
    entry = _chords(dictionary).get(type_name)
    if entry is None:
        return None
    return harmonize(entry.intervals, tonic)


def make_transposer(
    type_name: str, dictionary: TypeDictionary | None = None
) -> Callable[[str | Pitch | None], list[str] | None]:
    """A function that builds a chord type from any tonic."""

    def transposer(tonic: str | Pitch | None) -> list[str] | None:
        return get_full(type_name, tonic, dictionary)

    return transposer


def extended(name: str, dictionary: TypeDictionary | None = None) -> list[str]:
    """Chord types that add notes to this chord (maj7 -> maj9, maj13, ...)."""
    chord_types = _chords(dictionary)
    entry = chord_types.get(name)
    if entry is None:
        return []
    return [
        c.name for c in chord_types.all() if pcset.is_superset_of(c.chroma, entry.chroma)
    ]


def reduced(name: str, dictionary: TypeDictionary | None = None) -> list[str]:
    """Chord types made only of notes of this chord (maj7 -> M, 5, ...)."""
    chord_types = _chords(dictionary)
    entry = chord_types.get(name)
    if entry is None:
        return []
    return [c.name for c in chord_types.all() if pcset.is_subset_of(c.chroma, entry.chroma)]


def chord_scales(
    name: str,
    dictionary: TypeDictionary | None = None,
    scale_dictionary: TypeDictionary | None = None,
) -> list[str]:
    """Scale types that contain the chord when built on the same tonic."""
    entry = get(name, dictionary)
    if entry is None:
        return []
    scale_types = scale_dictionary if scale_dictionary is not None else default_scales()
    return [s.name for s in scale_types.all() if pcset.is_superset_of(s.chroma, entry.chroma)]
