"""
Dictionary loader - builds type dictionaries from YAML tables.

Tables can come from:
1. Built-in library (shipped with package)
2. Project tables (user's project/dictionaries directory)

Project tables extend the library table of the same kind; they cannot
redefine a built-in name.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import yaml

from chuk_mcp_music_theory.constants import DictionaryKind
from chuk_mcp_music_theory.dictionary.registry import TypeDictionary
from chuk_mcp_music_theory.models.dictionary import DictionaryTable

logger = logging.getLogger(__name__)

LIBRARY_PATH = Path(__file__).parent / "library"


class DictionaryLoader:
    """
    Loads chord and scale dictionaries.

    Each kind lives in '<kind>s.yaml' (chords.yaml, scales.yaml) in the
    library directory and, optionally, in the project directory.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the loader.

        Args:
            library_path: Path to built-in dictionary tables
            project_path: Path to project tables (user additions)
        """
        self.library_path = library_path or LIBRARY_PATH
        self.project_path = project_path

    def load(self, kind: DictionaryKind | str) -> TypeDictionary:
        """
        Build a dictionary from the library table plus any project table.

        Args:
            kind: 'chord' or 'scale'

        Returns:
            A new TypeDictionary

        Raises:
            ValueError: For an unknown kind
            pydantic.ValidationError: If a table is malformed
            NameCollisionError: If a project table redefines a name
        """
        kind = DictionaryKind(kind)
        dictionary = TypeDictionary(kind.value)

        library_file = self.library_path / f"{kind.value}s.yaml"
        if library_file.exists():
            count = self.apply(dictionary, self.load_table(library_file))
            logger.debug(f"Loaded {count} {kind.value} types from {library_file}")
        else:
            logger.warning(f"No {kind.value} table in library: {library_file}")

        if self.project_path:
            project_file = self.project_path / f"{kind.value}s.yaml"
            if project_file.exists():
                count = self.apply(dictionary, self.load_table(project_file))
                logger.info(f"Loaded {count} project {kind.value} types from {project_file}")

        return dictionary

    def load_table(self, path: Path) -> DictionaryTable:
        """Read and validate a YAML table."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return DictionaryTable.model_validate(data)

    @staticmethod
    def apply(dictionary: TypeDictionary, table: DictionaryTable) -> int:
        """
        Add every type of a table to a dictionary.

        Returns:
            Number of types added
        """
        if table.kind.value != dictionary.name:
            raise ValueError(
                f"Cannot load a {table.kind.value} table into the {dictionary.name} dictionary"
            )

        aliases = table.aliases_by_type()
        for definition in table.types:
            dictionary.add(
                definition.name,
                definition.intervals,
                aliases=aliases.get(definition.name, []),
                full_name=definition.full_name,
            )
        return len(table.types)


@lru_cache(maxsize=1)
def default_chords() -> TypeDictionary:
    """The built-in chord dictionary (shared, loaded once)."""
    return DictionaryLoader().load(DictionaryKind.CHORD)


@lru_cache(maxsize=1)
def default_scales() -> TypeDictionary:
    """The built-in scale dictionary (shared, loaded once)."""
    return DictionaryLoader().load(DictionaryKind.SCALE)
