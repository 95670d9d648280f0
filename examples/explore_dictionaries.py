#!/usr/bin/env python3
"""
Example: Exploring chords and scales.

This demonstrates spelled transposition, chord and scale detection, scale
modes, and extending the chord dictionary with a project table.

Usage:
    python examples/explore_dictionaries.py
"""

import tempfile
from pathlib import Path

from chuk_mcp_music_theory.constants import DictionaryKind
from chuk_mcp_music_theory.core import distance, transpose
from chuk_mcp_music_theory.dictionary import DictionaryLoader
from chuk_mcp_music_theory.theory import chord, scale

PROJECT_CHORDS = """\
schema: dictionary/v1
kind: chord
types:
  - name: "maj7no5"
    full_name: "major seventh no fifth"
    intervals: [1P, 3M, 7M]
aliases:
  "M7no5": "maj7no5"
"""


def main() -> None:
    """Demonstrate the theory modules."""
    print("CHUK Music Theory Demo")
    print("=" * 40)
    print()

    # Spelling is kept through transposition
    print("Transposition:")
    for note, interval in [("C4", "3M"), ("C", "4d"), ("E", "9M"), ("C4", "-3m")]:
        print(f"  {note} + {interval} = {transpose(note, interval)}")
    print(f"  distance C4 -> G5 = {distance('C4', 'G5')}")
    print()

    # Chords
    print("Chords:")
    for name in ["Cmaj7", "Bb m7b5", "F#7"]:
        print(f"  {name}: {' '.join(chord.notes(name))}")
    print(f"  C E G detected as: {chord.detect(['C', 'E', 'G'])}")
    print(f"  E C A G detected as: {chord.detect(['E', 'C', 'A', 'G'])}")
    print(f"  Scales for maj7: {', '.join(chord.chord_scales('maj7')[:6])}...")
    print()

    # Scales
    print("Scales:")
    print(f"  Ab bebop: {' '.join(scale.notes('Ab bebop'))}")
    print(f"  Db3 major: {' '.join(scale.get_full('major', 'Db3'))}")
    print("  Modes of C major:")
    for mode in scale.modes("C major"):
        print(f"    {mode}")
    print()

    # Project tables extend the built-in dictionaries
    with tempfile.TemporaryDirectory() as tmp:
        project_path = Path(tmp)
        (project_path / "chords.yaml").write_text(PROJECT_CHORDS, encoding="utf-8")

        chords = DictionaryLoader(project_path=project_path).load(DictionaryKind.CHORD)
        print(f"Chord dictionary with project table: {len(chords)} types")
        print(f"  CM7no5: {' '.join(chord.notes('CM7no5', dictionary=chords))}")
        print(f"  C E B detected as: {chord.detect(['C', 'E', 'B'], dictionary=chords)}")


if __name__ == "__main__":
    main()
