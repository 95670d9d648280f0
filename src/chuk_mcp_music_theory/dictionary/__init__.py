"""
Type dictionaries - named chord and scale types.

Dictionaries are built from YAML tables and indexed by chroma for
reverse lookup.
"""

from chuk_mcp_music_theory.dictionary.loader import (
    DictionaryLoader,
    default_chords,
    default_scales,
)
from chuk_mcp_music_theory.dictionary.registry import (
    DictionaryEntry,
    InconsistentChromaError,
    NameCollisionError,
    TypeDictionary,
    split_tonic,
)

__all__ = [
    "DictionaryEntry",
    "DictionaryLoader",
    "InconsistentChromaError",
    "NameCollisionError",
    "TypeDictionary",
    "default_chords",
    "default_scales",
    "split_tonic",
]
