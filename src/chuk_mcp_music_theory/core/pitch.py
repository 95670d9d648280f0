"""
Pitch primitives - the note codec.

A Pitch is a spelled note: a letter step, an alteration in semitones and an
optional octave. Pitches without an octave are pitch classes.

Pitches are encoded as coordinates on the line of fifths:
    (fifths,)            for pitch classes
    (fifths, octaves)    for pitches with an octave

Coordinates are plain integers, so transposition is exact addition.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from chuk_mcp_music_theory.constants import (
    FIFTHS,
    FIFTHS_TO_STEPS,
    NOTE_REGEX,
    STEP_LETTERS,
    STEP_SEMITONES,
    STEPS_TO_OCTS,
)

Coordinate = tuple[int] | tuple[int, int]

# Accidental symbol -> semitones per symbol
_ACCIDENTALS: dict[str, int] = {"#": 1, "b": -1, "x": 2}

_SHARP_SPELLINGS: list[tuple[int, int]] = [
    (0, 0),
    (0, 1),
    (1, 0),
    (1, 1),
    (2, 0),
    (3, 0),
    (3, 1),
    (4, 0),
    (4, 1),
    (5, 0),
    (5, 1),
    (6, 0),
]
_FLAT_SPELLINGS: list[tuple[int, int]] = [
    (0, 0),
    (1, -1),
    (1, 0),
    (2, -1),
    (2, 0),
    (3, 0),
    (4, -1),
    (4, 0),
    (5, -1),
    (5, 0),
    (6, -1),
    (6, 0),
]


@dataclass(frozen=True)
class Pitch:
    """
    A spelled pitch.

    step is 0-6 (C D E F G A B), alt is the alteration in semitones
    (-1 = flat, +1 = sharp) and octave is None for a pitch class.

    Examples:
        Pitch(0) = C
        Pitch(6, -1, 3) = Bb3
        Pitch(3, 2) = F##

    Immutable and hashable.
    """

    step: int
    alt: int = 0
    octave: int | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.step <= 6:
            raise ValueError(f"Step must be 0-6, got {self.step}")

    @property
    def letter(self) -> str:
        return STEP_LETTERS[self.step]

    @property
    def accidental(self) -> str:
        return "#" * self.alt if self.alt > 0 else "b" * -self.alt

    @property
    def name(self) -> str:
        """Scientific pitch notation, e.g. 'C#4' or 'Bb'."""
        octave = "" if self.octave is None else str(self.octave)
        return f"{self.letter}{self.accidental}{octave}"

    @property
    def is_pitch_class(self) -> bool:
        return self.octave is None

    @property
    def pitch_class(self) -> Pitch:
        """This pitch without its octave."""
        return Pitch(self.step, self.alt)

    @property
    def chroma(self) -> int:
        """Pitch class number 0-11 (C = 0)."""
        return (STEP_SEMITONES[self.step] + self.alt) % 12

    @property
    def midi(self) -> int | None:
        """MIDI note number (C4 = 60), None for pitch classes."""
        if self.octave is None:
            return None
        return STEP_SEMITONES[self.step] + self.alt + (self.octave + 1) * 12

    @property
    def height(self) -> int:
        """Semitones from C-1; pitch classes count as octave 4."""
        octave = 4 if self.octave is None else self.octave
        return STEP_SEMITONES[self.step] + self.alt + (octave + 1) * 12

    @property
    def coord(self) -> Coordinate:
        return encode(self)

    @classmethod
    def from_midi(cls, midi_note: int, prefer_flats: bool = False) -> Pitch:
        """Spell a MIDI note number. Black keys use sharps unless prefer_flats."""
        spellings = _FLAT_SPELLINGS if prefer_flats else _SHARP_SPELLINGS
        step, alt = spellings[midi_note % 12]
        return cls(step, alt, midi_note // 12 - 1)

    def __str__(self) -> str:
        return self.name


def parse_note(name: str | Pitch) -> Pitch | None:
    """
    Parse a note name like 'C', 'f#4', 'Bb-1' or 'Dx'.

    The letter is case-insensitive. Accidentals accumulate:
    '#' is +1, 'b' is -1 and 'x' is +2 semitones per symbol.

    Returns:
        The parsed Pitch, or None if the name is not a note
    """
    if isinstance(name, Pitch):
        return name
    if not isinstance(name, str):
        return None

    match = NOTE_REGEX.match(name.strip())
    if not match:
        return None

    letter, accidentals, octave = match.groups()
    alt = 0
    if accidentals:
        alt = _ACCIDENTALS[accidentals[0]] * len(accidentals)

    return Pitch(
        step=STEP_LETTERS.index(letter.upper()),
        alt=alt,
        octave=int(octave) if octave is not None else None,
    )


def encode(pitch: Pitch) -> Coordinate:
    """Encode a pitch as a (fifths[, octaves]) coordinate."""
    fifths = FIFTHS[pitch.step] + 7 * pitch.alt
    if pitch.octave is None:
        return (fifths,)
    octaves = pitch.octave - STEPS_TO_OCTS[pitch.step] - 4 * pitch.alt
    return (fifths, octaves)


def decode(coord: Coordinate) -> Pitch:
    """Decode a (fifths[, octaves]) coordinate into a pitch."""
    fifths = coord[0]
    step = FIFTHS_TO_STEPS[(fifths + 1) % 7]
    alt = (fifths + 1) // 7
    if len(coord) == 1:
        return Pitch(step, alt)
    octave = coord[1] + 4 * alt + STEPS_TO_OCTS[step]
    return Pitch(step, alt, octave)


def pitch_class(note: str | Pitch) -> Pitch | None:
    """Strip the octave from a note. Returns None for invalid names."""
    pitch = parse_note(note)
    return pitch.pitch_class if pitch else None


def note_name(note: str | Pitch) -> str:
    """Normalized name of a note, or an empty string if it is not one."""
    pitch = parse_note(note)
    return pitch.name if pitch else ""


def sort_notes(notes: Iterable[str | Pitch]) -> list[str]:
    """
    Sort note names from lowest to highest, dropping invalid ones.

    Pitch classes sort as if they were in octave 4.
    """
    pitches = [p for p in (parse_note(n) for n in notes) if p is not None]
    return [p.name for p in sorted(pitches, key=lambda p: p.height)]
