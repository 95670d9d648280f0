"""
Core music theory primitives - the Radix layer.

These are the mathematical invariants that everything else composes on:
- Pitch: Spelled notes and pitch classes on the line of fifths
- Interval: Spelled intervals with exact coordinate arithmetic
- Chroma: 12-bit pitch-class sets and their modes
- transpose / distance: Coordinate addition between pitches and intervals
"""

from chuk_mcp_music_theory.core.distance import distance, harmonize, transpose
from chuk_mcp_music_theory.core.interval import (
    Interval,
    decode_interval,
    encode_interval,
    from_semitones,
    parse_interval,
)
from chuk_mcp_music_theory.core.pcset import Chroma, chroma, modes
from chuk_mcp_music_theory.core.pitch import Pitch, decode, encode, parse_note, pitch_class

__all__ = [
    # Pitch
    "Pitch",
    "parse_note",
    "encode",
    "decode",
    "pitch_class",
    # Interval
    "Interval",
    "parse_interval",
    "encode_interval",
    "decode_interval",
    "from_semitones",
    # Distance
    "transpose",
    "distance",
    "harmonize",
    # Pcset
    "Chroma",
    "chroma",
    "modes",
]
