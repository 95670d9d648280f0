"""
Pydantic models for the music theory system.

This module provides:
- DictionaryTable: A chord or scale table as stored in YAML
- TypeDefinition: A single named type inside a table
"""

from chuk_mcp_music_theory.models.dictionary import DictionaryTable, TypeDefinition

__all__ = [
    "DictionaryTable",
    "TypeDefinition",
]
