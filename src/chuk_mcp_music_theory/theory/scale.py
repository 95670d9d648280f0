"""
Scales - tonic plus scale type.

A scale name is an optional tonic followed by a type from the scale
dictionary: 'C major', 'Ab bebop', 'melodic minor'. Every function takes an
optional dictionary; None means the built-in scale dictionary.

Examples:
    notes('C major') -> ['C', 'D', 'E', 'F', 'G', 'A', 'B']
    notes('Ab bebop') -> ['Ab', 'Bb', 'C', 'Db', 'Eb', 'F', 'Gb', 'G']
    modes('major', 'C') -> ['C major', 'D dorian', 'E phrygian', ...]
    detect('f5 d2 c5 b5 a2 e4 g') -> ['C major', 'D dorian', ...]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from chuk_mcp_music_theory.constants import SCALE_JOINER
from chuk_mcp_music_theory.core import pcset
from chuk_mcp_music_theory.core.distance import harmonize, transpose
from chuk_mcp_music_theory.core.pitch import Pitch, parse_note
from chuk_mcp_music_theory.detect import NotesLike, best_match
from chuk_mcp_music_theory.detect import detect as detect_names
from chuk_mcp_music_theory.dictionary import (
    DictionaryEntry,
    TypeDictionary,
    default_chords,
    default_scales,
)


@dataclass(frozen=True)
class ScaleName:
    """A parsed scale name. tonic is None when the name has no tonic."""

    tonic: str | None
    type: str


def _scales(dictionary: TypeDictionary | None) -> TypeDictionary:
    return dictionary if dictionary is not None else default_scales()


def parse_name(name: str) -> ScaleName:
    """
    Split a scale name into tonic and type.

    The type is not checked against any dictionary.

    Examples:
        parse_name('C mixolydian') -> ScaleName('C', 'mixolydian')
        parse_name('anything is valid') -> ScaleName(None, 'anything is valid')
    """
    name = name.strip()
    head, sep, rest = name.partition(" ")
    if sep:
        pitch = parse_note(head)
        if pitch is not None:
            return ScaleName(pitch.name, rest.strip())
    return ScaleName(None, name)


def get(name: str, dictionary: TypeDictionary | None = None) -> DictionaryEntry | None:
    """The scale type of a name, a tonic before a space ignored. None if unknown."""
    if not isinstance(name, str):
        return None
    return _scales(dictionary).lookup(parse_name(name).type)


def names(aliases: bool = False, dictionary: TypeDictionary | None = None) -> list[str]:
    """Available scale type names."""
    return _scales(dictionary).names(aliases=aliases)


def exists(name: str, dictionary: TypeDictionary | None = None) -> bool:
    return get(name, dictionary) is not None


def intervals(name: str, dictionary: TypeDictionary | None = None) -> list[str]:
    """
    Intervals of a scale type. The tonic, if given, is ignored.

    Returns an empty list for unknown scales.
    """
    entry = get(name, dictionary)
    return entry.interval_names if entry else []


def notes(
    name: str,
    tonic: str | Pitch | None = None,
    dictionary: TypeDictionary | None = None,
) -> list[str]:
    """
    Pitch classes of a scale.

    Args:
        name: Scale name, with or without tonic
        tonic: Overrides the tonic in the name

    Returns:
        The pitch classes, or an empty list without a valid tonic and type
    """
    parsed = parse_name(name)
    root = parse_note(tonic) if tonic else parse_note(parsed.tonic or "")
    entry = _scales(dictionary).lookup(parsed.type)
    if root is None or entry is None:
        return []
    return [transpose(root.pitch_class, ivl) for ivl in entry.intervals]


def detect(notes: NotesLike, dictionary: TypeDictionary | None = None) -> list[str]:
    """Scales with exactly the given pitch classes, as '<tonic> <type>'."""
    return detect_names(notes, _scales(dictionary), joiner=SCALE_JOINER)


def modes(
    name: str,
    tonic: str | Pitch | None = None,
    dictionary: TypeDictionary | None = None,
) -> list[str | None]:
    """
    Name every mode of a scale.

    Each degree of the scale becomes the tonic of a rotation, and the
    rotation is named by the first scale type with that exact chroma.
    Rotations with no known name are None, so the result always has one
    item per scale degree.

    Returns:
        Mode names in degree order, or an empty list without tonic and type
    """
    scales = _scales(dictionary)
    parsed = parse_name(name)
    root = parse_note(tonic) if tonic else parse_note(parsed.tonic or "")
    entry = scales.lookup(parsed.type)
    if root is None or entry is None:
        return []

    # one degree per pitch class, ascending, matching pcset.modes order
    degrees: dict[int, str] = {}
    for ivl in entry.intervals:
        degrees.setdefault(ivl.semitones % 12, transpose(root.pitch_class, ivl))
    tonics = [degrees[pc] for pc in sorted(degrees)]

    result: list[str | None] = []
    for degree_tonic, mode in zip(tonics, pcset.modes(entry.chroma)):
        match = best_match(mode, scales)
        result.append(f"{degree_tonic}{SCALE_JOINER}{match.name}" if match else None)
    return result


def get_full(
    type_name: str,
    tonic: str | Pitch | None = None,
    dictionary: TypeDictionary | None = None,
) -> list[str] | None:
    """
    Notes of a scale type from a tonic, keeping the tonic's octave.

    Without a tonic the interval names are returned.

    Examples:
        get_full('bebop', 'Eb') -> ['Eb', 'F', 'G', 'Ab', 'Bb', 'C', 'Db', 'D']
        get_full('major', 'Db3') -> ['Db3', 'Eb3', 'F3', 'Gb3', 'Ab3', 'Bb3', 'C4']
        get_full('major') -> ['1P', '2M', '3M', '4P', '5P', '6M', '7M']

    Returns:
        None if the type is unknown
    """
    entry = _scales(dictionary).lookup(type_name)
    if entry is None:
        return None
    return harmonize(entry.intervals, tonic)


def make_transposer(
    type_name: str, dictionary: TypeDictionary | None = None
) -> Callable[[str | Pitch | None], list[str] | None]:
    """A function that builds a scale type from any tonic."""

    def transposer(tonic: str | Pitch | None) -> list[str] | None:
        return get_full(type_name, tonic, dictionary)

    return transposer


def extended(name: str, dictionary: TypeDictionary | None = None) -> list[str]:
    """Scale types that contain every note of this scale, plus more."""
    scales = _scales(dictionary)
    entry = get(name, scales)
    if entry is None:
        return []
    return [s.name for s in scales.all() if pcset.is_superset_of(s.chroma, entry.chroma)]


def reduced(name: str, dictionary: TypeDictionary | None = None) -> list[str]:
    """Scale types made only of notes of this scale."""
    scales = _scales(dictionary)
    entry = get(name, scales)
    if entry is None:
        return []
    return [s.name for s in scales.all() if pcset.is_subset_of(s.chroma, entry.chroma)]


def chords(
    name: str,
    dictionary: TypeDictionary | None = None,
    chord_dictionary: TypeDictionary | None = None,
) -> list[str]:
    """Chord types that fit inside the scale when built on its tonic."""
    entry = get(name, dictionary)
    if entry is None:
        return []
    chord_types = chord_dictionary if chord_dictionary is not None else default_chords()
    return [c.name for c in chord_types.all() if pcset.is_subset_of(c.chroma, entry.chroma)]
