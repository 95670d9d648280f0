"""
Interval primitives - the interval algebra.

An Interval is a number (1 = unison, negative = descending) and a quality
(P, M, m, A, AA, d, dd, ...). Intervals are encoded on the same line-of-fifths
coordinates as pitches, so addition, subtraction and inversion are exact
integer arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_music_theory.constants import (
    FIFTHS,
    FIFTHS_TO_STEPS,
    INTERVAL_REGEX,
    QUALITY_FIRST_INTERVAL_REGEX,
    STEP_SEMITONES,
    STEP_TYPES,
    STEPS_TO_OCTS,
    IntervalType,
    QualityKind,
)

# Interval number and quality for each size in semitones (0-11)
_SEMITONE_NUMBERS: list[int] = [1, 2, 2, 3, 3, 4, 5, 5, 6, 6, 7, 7]
_SEMITONE_QUALITIES: list[str] = ["P", "m", "M", "m", "M", "P", "d", "P", "m", "M", "m", "M"]


def _quality_to_alt(interval_type: IntervalType, quality: str) -> int | None:
    """Alteration of a quality for an interval type, None if they don't combine."""
    if interval_type == IntervalType.PERFECTABLE:
        if quality == "P":
            return 0
        if quality in ("M", "m"):
            return None
    else:
        if quality == "M":
            return 0
        if quality == "m":
            return -1
        if quality == "P":
            return None

    if quality and quality == "A" * len(quality):
        return len(quality)
    if quality and quality == "d" * len(quality):
        if interval_type == IntervalType.PERFECTABLE:
            return -len(quality)
        return -(len(quality) + 1)
    return None


def _alt_to_quality(interval_type: IntervalType, alt: int) -> str:
    if alt == 0:
        return "M" if interval_type == IntervalType.MAJORABLE else "P"
    if alt == -1 and interval_type == IntervalType.MAJORABLE:
        return "m"
    if alt > 0:
        return "A" * alt
    if interval_type == IntervalType.PERFECTABLE:
        return "d" * -alt
    return "d" * -(alt + 1)


def _build(step: int, alt: int, octaves: int, direction: int) -> Interval:
    number = direction * (step + 1 + 7 * octaves)
    return Interval(number, _alt_to_quality(STEP_TYPES[step], alt))


@dataclass(frozen=True)
class Interval:
    """
    A spelled interval.

    Examples:
        Interval(3, "M") = major third
        Interval(-5, "P") = descending perfect fifth
        Interval(9, "m") = minor ninth (compound)
        Interval(4, "A") = augmented fourth

    Immutable and hashable.
    """

    number: int
    quality: str

    def __post_init__(self) -> None:
        if self.number == 0:
            raise ValueError("Interval number cannot be 0")
        if _quality_to_alt(self.type, self.quality) is None:
            raise ValueError(f"Invalid quality '{self.quality}' for interval {self.number}")

    @property
    def direction(self) -> int:
        """1 for ascending, -1 for descending."""
        return -1 if self.number < 0 else 1

    @property
    def step(self) -> int:
        """Simple step 0-6 (unison to seventh)."""
        return (abs(self.number) - 1) % 7

    @property
    def octaves(self) -> int:
        """Number of whole octaves in a compound interval."""
        return (abs(self.number) - 1) // 7

    @property
    def type(self) -> IntervalType:
        return STEP_TYPES[self.step]

    @property
    def kind(self) -> QualityKind:
        return QualityKind(self.quality[0])

    @property
    def alteration(self) -> int:
        """Semitones away from the perfect or major interval of this number."""
        alt = _quality_to_alt(self.type, self.quality)
        return 0 if alt is None else alt

    @property
    def simple(self) -> int:
        """The interval number reduced to within an octave, keeping direction."""
        return self.direction * (self.step + 1)

    @property
    def semitones(self) -> int:
        return self.direction * (STEP_SEMITONES[self.step] + self.alteration + 12 * self.octaves)

    @property
    def coord(self) -> tuple[int, int]:
        return encode_interval(self)

    @property
    def name(self) -> str:
        return f"{self.number}{self.quality}"

    def __str__(self) -> str:
        return self.name


def parse_interval(name: str | Interval) -> Interval | None:
    """
    Parse an interval name like '3M', '-5P', '9m', '4A' or 'M3'.

    Returns:
        The parsed Interval, or None if the name is not a valid interval
        (including impossible combinations like '2P' or '5M')
    """
    if isinstance(name, Interval):
        return name
    if not isinstance(name, str):
        return None

    name = name.strip()
    match = INTERVAL_REGEX.match(name)
    if match:
        number, quality = match.groups()
    else:
        match = QUALITY_FIRST_INTERVAL_REGEX.match(name)
        if not match:
            return None
        quality, number = match.groups()

    try:
        return Interval(int(number), quality)
    except ValueError:
        return None


def encode_interval(interval: Interval) -> tuple[int, int]:
    """Encode an interval as a (fifths, octaves) coordinate, direction applied."""
    alt = interval.alteration
    fifths = FIFTHS[interval.step] + 7 * alt
    octaves = interval.octaves - STEPS_TO_OCTS[interval.step] - 4 * alt
    return (interval.direction * fifths, interval.direction * octaves)


def _decode_ascending(fifths: int, octaves: int) -> tuple[int, int, int]:
    """Step, alteration and whole octaves of an ascending coordinate."""
    step = FIFTHS_TO_STEPS[(fifths + 1) % 7]
    alt = (fifths + 1) // 7
    return step, alt, octaves + 4 * alt + STEPS_TO_OCTS[step]


def decode_interval(coord: tuple[int, ...]) -> Interval:
    """
    Decode a coordinate into an interval.

    A coordinate without octaves is read as the ascending simple interval.
    Otherwise the direction follows the letter steps spanned, so 2dd stays
    ascending and a unison-sized -2d stays descending. Unisons below zero
    semitones decode as descending.
    """
    fifths = coord[0]
    if len(coord) < 2:
        octaves = -((fifths * 7) // 12)
        step, alt, octs = _decode_ascending(fifths, octaves)
        if octs < 0:
            # Zero semitones spelled downwards, e.g. 7A rather than -2d
            step, alt, octs = _decode_ascending(fifths, octaves + 1)
        return _build(step, alt, octs, 1)

    octaves = coord[1]
    step, alt, octs = _decode_ascending(fifths, octaves)
    letter_steps = step + 7 * octs
    descending = letter_steps < 0 or (letter_steps == 0 and fifths * 7 + octaves * 12 < 0)
    if descending:
        step, alt, octs = _decode_ascending(-fifths, -octaves)
        return _build(step, alt, octs, -1)
    return _build(step, alt, octs, 1)


def add(a: str | Interval, b: str | Interval) -> Interval | None:
    """Add two intervals. Returns None if either is invalid."""
    first, second = parse_interval(a), parse_interval(b)
    if first is None or second is None:
        return None
    fa, oa = first.coord
    fb, ob = second.coord
    return decode_interval((fa + fb, oa + ob))


def subtract(a: str | Interval, b: str | Interval) -> Interval | None:
    """Subtract interval b from interval a. Returns None if either is invalid."""
    first, second = parse_interval(a), parse_interval(b)
    if first is None or second is None:
        return None
    fa, oa = first.coord
    fb, ob = second.coord
    return decode_interval((fa - fb, oa - ob))


def invert(interval: str | Interval) -> Interval | None:
    """
    Invert an interval within the octave.

    3M -> 6m, 5P -> 4P, 2m -> 7M, 4A -> 5d. Octaves and direction are kept,
    so a simple interval plus its inversion is an octave (1P inverts to itself).
    """
    i = parse_interval(interval)
    if i is None:
        return None
    step = (7 - i.step) % 7
    alt = -i.alteration if i.type == IntervalType.PERFECTABLE else -(i.alteration + 1)
    return _build(step, alt, i.octaves, i.direction)


def simplify(interval: str | Interval) -> Interval | None:
    """
    Reduce a compound interval to within an octave.

    9M -> 2M, -10m -> -3m, 8P -> 1P. Quality and direction are kept.
    """
    i = parse_interval(interval)
    if i is None:
        return None
    return Interval(i.simple, i.quality)


def negate(interval: str | Interval) -> Interval | None:
    """Reverse the direction of an interval."""
    i = parse_interval(interval)
    if i is None:
        return None
    return Interval(-i.number, i.quality)


def semitones(interval: str | Interval) -> int | None:
    """Size of an interval in semitones, from its coordinate."""
    i = parse_interval(interval)
    if i is None:
        return None
    fifths, octaves = i.coord
    return fifths * 7 + octaves * 12


def from_semitones(size: int) -> Interval:
    """
    The most common interval spanning a number of semitones.

    Examples:
        from_semitones(6) -> 5d
        from_semitones(14) -> 9M
        from_semitones(-7) -> -5P
    """
    direction = -1 if size < 0 else 1
    size = abs(size)
    octaves, rest = divmod(size, 12)
    number = _SEMITONE_NUMBERS[rest] + 7 * octaves
    return Interval(direction * number, _SEMITONE_QUALITIES[rest])


def interval_name(interval: str | Interval) -> str:
    """Normalized name of an interval, or an empty string if it is not one."""
    i = parse_interval(interval)
    return i.name if i else ""
