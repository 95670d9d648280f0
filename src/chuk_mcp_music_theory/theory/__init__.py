"""
Chords and scales - dictionary types built from a tonic.

Use the modules directly:

    from chuk_mcp_music_theory.theory import chord, scale

    chord.notes('Cmaj7')
    scale.modes('C major')
"""

from chuk_mcp_music_theory.theory import chord, scale

__all__ = [
    "chord",
    "scale",
]
