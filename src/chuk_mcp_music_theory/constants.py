"""
Constants and enums for the music theory system.

No magic strings - use enums and Literal types for constrained values.
"""

import re
from enum import Enum
from typing import Literal

# Letters in step order (C = 0 ... B = 6)
STEP_LETTERS = "CDEFGAB"

# Position of each step on the line of fifths, relative to C
FIFTHS: tuple[int, ...] = (0, 2, 4, -1, 1, 3, 5)

# Octave correction of each step when walking the line of fifths
STEPS_TO_OCTS: tuple[int, ...] = tuple((f * 7) // 12 for f in FIFTHS)

# Step for each position on the line of fifths (F C G D A E B)
FIFTHS_TO_STEPS: tuple[int, ...] = (3, 0, 4, 1, 5, 2, 6)

# Semitones from C of each natural step
STEP_SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Interval names of the twelve chromatic pitch classes, from pitch class 0
CHROMA_INTERVALS: tuple[str, ...] = (
    "1P",
    "2m",
    "2M",
    "3m",
    "3M",
    "4P",
    "5d",
    "5P",
    "6m",
    "6M",
    "7m",
    "7M",
)

NOTE_REGEX = re.compile(r"^([A-Ga-g])(#+|b+|x+)?(-?\d+)?$")
INTERVAL_REGEX = re.compile(r"^(-?\d+)(d+|m|M|P|A+)$")
QUALITY_FIRST_INTERVAL_REGEX = re.compile(r"^(d+|m|M|P|A+)(-?\d+)$")
CHROMA_REGEX = re.compile(r"^[01]{12}$")


class QualityKind(str, Enum):
    """The five interval quality families."""

    DIMINISHED = "d"
    MINOR = "m"
    PERFECT = "P"
    MAJOR = "M"
    AUGMENTED = "A"


class IntervalType(str, Enum):
    """Whether an interval number takes perfect or major/minor qualities."""

    PERFECTABLE = "perfectable"  # unisons, fourths, fifths
    MAJORABLE = "majorable"  # seconds, thirds, sixths, sevenths


# Interval type of each simple step (1, 2, 3, 4, 5, 6, 7)
STEP_TYPES: tuple[IntervalType, ...] = (
    IntervalType.PERFECTABLE,
    IntervalType.MAJORABLE,
    IntervalType.MAJORABLE,
    IntervalType.PERFECTABLE,
    IntervalType.PERFECTABLE,
    IntervalType.MAJORABLE,
    IntervalType.MAJORABLE,
)


class DictionaryKind(str, Enum):
    """The built-in type dictionaries."""

    CHORD = "chord"
    SCALE = "scale"


# Schema versions - frozen for v1
SchemaVersion = Literal["dictionary/v1"]

# Separator between tonic and type name in detection results
CHORD_JOINER = ""
SCALE_JOINER = " "


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Invalid note: '{note}'."
    INVALID_INTERVAL = "Invalid interval: '{interval}'."
    UNKNOWN_TYPE = "Unknown {kind} type: '{name}'."
    UNKNOWN_KIND = "Unknown dictionary kind: '{kind}'. Expected 'chord' or 'scale'."
    NAME_COLLISION = "Name '{name}' is already registered in the {dictionary} dictionary."


class SuccessMessages:
    """Standardized success messages."""

    TYPE_ADDED = "Added {kind} type '{name}'."
