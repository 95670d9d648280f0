"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_music_theory.constants import DictionaryKind
from chuk_mcp_music_theory.dictionary import DictionaryLoader, TypeDictionary


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for project tables."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def chord_dictionary() -> TypeDictionary:
    """A fresh copy of the built-in chord dictionary, safe to modify."""
    return DictionaryLoader().load(DictionaryKind.CHORD)


@pytest.fixture
def scale_dictionary() -> TypeDictionary:
    """A fresh copy of the built-in scale dictionary, safe to modify."""
    return DictionaryLoader().load(DictionaryKind.SCALE)


@pytest.fixture
def triads() -> TypeDictionary:
    """A small chord dictionary with the four triads."""
    dictionary = TypeDictionary("chord")
    dictionary.add("M", ["1P", "3M", "5P"], aliases=["maj"], full_name="major")
    dictionary.add("m", ["1P", "3m", "5P"], aliases=["min", "-"], full_name="minor")
    dictionary.add("dim", ["1P", "3m", "5d"], aliases=["°"], full_name="diminished")
    dictionary.add("aug", ["1P", "3M", "5A"], aliases=["+"], full_name="augmented")
    return dictionary
