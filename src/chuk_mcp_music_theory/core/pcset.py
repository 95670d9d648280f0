"""
Pitch-class sets - the chroma engine.

A pitch-class set is identified by its chroma: a 12-bit mask where bit i
is set when pitch class i (C = 0) is present. The chroma is order and
octave independent, so it is the canonical identity of a chord or scale
shape once it is rotated to its tonic.

The string form is twelve '0'/'1' characters, pitch class 0 first:
    C major triad  -> '100010010000'
    C major scale  -> '101011010101'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from chuk_mcp_music_theory.constants import CHROMA_INTERVALS, CHROMA_REGEX
from chuk_mcp_music_theory.core.interval import Interval, parse_interval
from chuk_mcp_music_theory.core.pitch import Pitch, parse_note

_FULL_MASK = 0xFFF


@dataclass(frozen=True)
class Chroma:
    """
    A 12-bit pitch-class set.

    Immutable and hashable. len() is the number of pitch classes,
    iteration yields the pitch classes in ascending order.
    """

    mask: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.mask <= _FULL_MASK:
            raise ValueError(f"Chroma mask must be 0-{_FULL_MASK}, got {self.mask}")

    @classmethod
    def from_string(cls, value: str) -> Chroma:
        """Parse a 12-character binary chroma string."""
        if not CHROMA_REGEX.match(value):
            raise ValueError(f"Invalid chroma string: {value!r}")
        return cls(sum(1 << i for i, bit in enumerate(value) if bit == "1"))

    @classmethod
    def from_pitch_classes(cls, pitch_classes: Iterable[int]) -> Chroma:
        mask = 0
        for pc in pitch_classes:
            mask |= 1 << (pc % 12)
        return cls(mask)

    @property
    def pitch_classes(self) -> list[int]:
        return [pc for pc in range(12) if self.mask >> pc & 1]

    def transpose(self, semitones: int) -> Chroma:
        """Move every pitch class up by a number of semitones."""
        return Chroma.from_pitch_classes(pc + semitones for pc in self)

    def rotate(self, tonic: int) -> Chroma:
        """Rotate the set so that the given pitch class becomes 0."""
        return self.transpose(-tonic)

    def __str__(self) -> str:
        return "".join("1" if self.mask >> pc & 1 else "0" for pc in range(12))

    def __repr__(self) -> str:
        return f"Chroma('{self}')"

    def __len__(self) -> int:
        return bin(self.mask).count("1")

    def __iter__(self) -> Iterator[int]:
        return iter(self.pitch_classes)

    def __contains__(self, pitch_class: object) -> bool:
        if not isinstance(pitch_class, int):
            return False
        return bool(self.mask >> (pitch_class % 12) & 1)

    def __and__(self, other: Chroma) -> Chroma:
        if not isinstance(other, Chroma):
            return NotImplemented
        return Chroma(self.mask & other.mask)

    def __or__(self, other: Chroma) -> Chroma:
        if not isinstance(other, Chroma):
            return NotImplemented
        return Chroma(self.mask | other.mask)


EMPTY_CHROMA = Chroma(0)

# Anything chroma() accepts
PcsetLike = Union[Chroma, str, Iterable[Union[str, int, Pitch, Interval]]]


def _pitch_class_of(item: str | int | Pitch | Interval) -> int | None:
    if isinstance(item, bool):
        return None
    if isinstance(item, int):
        return item % 12
    if isinstance(item, Pitch):
        return item.chroma
    if isinstance(item, Interval):
        return item.semitones % 12
    if isinstance(item, str):
        pitch = parse_note(item)
        if pitch is not None:
            return pitch.chroma
        ivl = parse_interval(item)
        if ivl is not None:
            return ivl.semitones % 12
    return None


def chroma(items: PcsetLike) -> Chroma:
    """
    Get the chroma of a collection of notes or intervals.

    Accepts a Chroma, a 12-character chroma string, a whitespace separated
    string of note or interval names, or an iterable of names, Pitch,
    Interval or pitch class numbers. Items that are neither notes nor
    intervals are ignored and repeated pitch classes collapse.

    Examples:
        chroma(['C', 'E', 'G']) -> Chroma('100010010000')
        chroma(['1P', '3M', '5P']) -> Chroma('100010010000')
        chroma('c4 e5 g2 c3') -> Chroma('100010010000')
    """
    if isinstance(items, Chroma):
        return items
    if isinstance(items, str):
        if CHROMA_REGEX.match(items):
            return Chroma.from_string(items)
        items = items.split()

    pitch_classes = (_pitch_class_of(item) for item in items)
    return Chroma.from_pitch_classes(pc for pc in pitch_classes if pc is not None)


def num(items: PcsetLike) -> int:
    """Set number: the chroma string read as a binary number (C is the high bit)."""
    return int(str(chroma(items)), 2)


def is_chroma(value: object) -> bool:
    """True for Chroma values and valid chroma strings."""
    if isinstance(value, Chroma):
        return True
    return isinstance(value, str) and CHROMA_REGEX.match(value) is not None


def modes(items: PcsetLike, normalize: bool = True) -> list[Chroma]:
    """
    Get every rotation of a pitch-class set.

    With normalize (the default) only rotations that start on a pitch class
    of the set are returned, one per pitch class in ascending order, so the
    result has one mode per note. Without it all 12 rotations are returned.
    """
    pcset = chroma(items)
    tonics = pcset.pitch_classes if normalize else range(12)
    return [pcset.rotate(tonic) for tonic in tonics]


def intervals(items: PcsetLike) -> list[Interval]:
    """The intervals of a set measured from pitch class 0."""
    return [_CHROMA_INTERVALS[pc] for pc in chroma(items)]


def is_subset_of(a: PcsetLike, b: PcsetLike) -> bool:
    """True if every pitch class of a is in b and the sets differ."""
    first, second = chroma(a), chroma(b)
    return first != second and (first.mask & second.mask) == first.mask


def is_superset_of(a: PcsetLike, b: PcsetLike) -> bool:
    """True if every pitch class of b is in a and the sets differ."""
    first, second = chroma(a), chroma(b)
    return first != second and (first.mask & second.mask) == second.mask


def is_equal(a: PcsetLike, b: PcsetLike) -> bool:
    return chroma(a) == chroma(b)


def includes(items: PcsetLike, note: str | Pitch) -> bool:
    """True if the note's pitch class belongs to the set."""
    pitch = parse_note(note)
    return pitch is not None and pitch.chroma in chroma(items)


def filter_notes(items: PcsetLike, notes: Iterable[str | Pitch]) -> list[str]:
    """Keep the notes whose pitch class belongs to the set."""
    pcset = chroma(items)
    pitches = (parse_note(n) for n in notes)
    return [p.name for p in pitches if p is not None and p.chroma in pcset]


_CHROMA_INTERVALS: tuple[Interval, ...] = tuple(
    Interval(int(name[:-1]), name[-1]) for name in CHROMA_INTERVALS
)
