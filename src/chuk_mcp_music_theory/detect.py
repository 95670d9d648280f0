"""
Detector - names a collection of notes.

The notes are reduced to a chroma, then every pitch class of the input is
tried as the tonic: the chroma is rotated so that tonic becomes pitch class
0 and looked up in the dictionary's chroma index. Only exact matches count,
so C E G A is both C6 and Am7 but never C major.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from chuk_mcp_music_theory.core.pcset import Chroma, PcsetLike
from chuk_mcp_music_theory.core.pitch import Pitch, parse_note
from chuk_mcp_music_theory.dictionary.registry import DictionaryEntry, TypeDictionary

logger = logging.getLogger(__name__)

NotesLike = str | Iterable[str | Pitch]


@dataclass(frozen=True)
class Detection:
    """A dictionary entry matched from a tonic."""

    tonic: str
    entry: DictionaryEntry

    @property
    def name(self) -> str:
        return self.entry.name

    def label(self, joiner: str = " ") -> str:
        """'<tonic><joiner><type>', e.g. 'C major' or 'Am7'."""
        return f"{self.tonic}{joiner}{self.entry.name}"


def _spell_tonics(notes: NotesLike) -> dict[int, str]:
    """First spelling of each pitch class, keyed by pitch class."""
    if isinstance(notes, str):
        notes = notes.split()
    spelled: dict[int, str] = {}
    for note in notes:
        pitch = parse_note(note)
        if pitch is not None:
            spelled.setdefault(pitch.chroma, pitch.pitch_class.name)
    return spelled


def find_matches(notes: NotesLike, dictionary: TypeDictionary) -> list[Detection]:
    """
    Find every (tonic, type) whose pitch-class set equals the notes.

    Results are ordered by tonic pitch class (C first), then by dictionary
    insertion order. Octaves, duplicates and invalid names are ignored.

    Args:
        notes: Note names (a list or a whitespace separated string)
        dictionary: The dictionary to search

    Returns:
        The matches, empty if there are none
    """
    spelled = _spell_tonics(notes)
    if not spelled:
        return []

    pcset = Chroma.from_pitch_classes(spelled)
    matches = [
        Detection(spelled[tonic], entry)
        for tonic in sorted(spelled)
        for entry in dictionary.find(pcset.rotate(tonic))
    ]
    logger.debug(f"Detected {len(matches)} {dictionary.name} matches for {pcset}")
    return matches


def detect(notes: NotesLike, dictionary: TypeDictionary, joiner: str = " ") -> list[str]:
    """
    Name a collection of notes.

    Examples:
        detect(['C', 'E', 'G'], chords, joiner='') -> ['CM', 'Em#5']
        detect('e c a g', chords, joiner='') -> ['C6', 'Am7']

    Returns:
        '<tonic><joiner><type>' strings, empty if nothing matches
    """
    return [match.label(joiner) for match in find_matches(notes, dictionary)]


def best_match(items: PcsetLike, dictionary: TypeDictionary) -> DictionaryEntry | None:
    """The first entry registered with exactly this chroma, if any."""
    entries = dictionary.find(items)
    return entries[0] if entries else None
