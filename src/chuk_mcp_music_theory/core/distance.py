"""
Transposition and distance between pitches.

Both work by adding or subtracting line-of-fifths coordinates, so
spelling is preserved: C + 3M is E, C + 4d is Fb.
"""

from __future__ import annotations

from typing import Iterable

from chuk_mcp_music_theory.core.interval import Interval, decode_interval, parse_interval
from chuk_mcp_music_theory.core.pitch import Pitch, decode, parse_note


def transpose(note: str | Pitch, interval: str | Interval) -> str:
    """
    Transpose a note by an interval.

    Pitch classes stay pitch classes: transpose('C', '9M') == 'D'.

    Returns:
        The transposed note name, or an empty string if either argument is invalid
    """
    pitch = parse_note(note)
    ivl = parse_interval(interval)
    if pitch is None or ivl is None:
        return ""

    fifths, octaves = ivl.coord
    coord = pitch.coord
    if len(coord) == 1:
        return decode((coord[0] + fifths,)).name
    return decode((coord[0] + fifths, coord[1] + octaves)).name


def distance(from_note: str | Pitch, to_note: str | Pitch) -> str:
    """
    The interval between two notes.

    Between pitch classes the result is always an ascending simple interval.

    Returns:
        The interval name, or an empty string if either note is invalid
    """
    start = parse_note(from_note)
    end = parse_note(to_note)
    if start is None or end is None:
        return ""

    start_coord, end_coord = start.coord, end.coord
    fifths = end_coord[0] - start_coord[0]
    if len(start_coord) == 2 and len(end_coord) == 2:
        return decode_interval((fifths, end_coord[1] - start_coord[1])).name
    return decode_interval((fifths,)).name


def harmonize(intervals: Iterable[str | Interval], tonic: str | Pitch | None) -> list[str]:
    """
    Transpose a list of intervals from a tonic.

    Without a tonic the normalized interval names are returned instead.
    Invalid intervals are dropped.
    """
    ivls = [i for i in (parse_interval(x) for x in intervals) if i is not None]
    if not tonic:
        return [i.name for i in ivls]
    return [n for n in (transpose(tonic, i) for i in ivls) if n]
