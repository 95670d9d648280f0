"""
Dictionary table models - the static chord and scale definitions.

Tables are YAML documents validated with these models before they are
loaded into a TypeDictionary:

    schema: dictionary/v1
    kind: chord
    types:
      - name: maj7
        full_name: major seventh
        intervals: [1P, 3M, 5P, 7M]
    aliases:
      M7: maj7
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_mcp_music_theory.constants import DictionaryKind, SchemaVersion
from chuk_mcp_music_theory.core.interval import parse_interval


class TypeDefinition(BaseModel):
    """A single chord or scale type: a name and its intervals from the tonic."""

    name: str = Field(..., min_length=1, description="Canonical type name")
    full_name: str = Field("", description="Descriptive name (e.g. 'major seventh')")
    intervals: list[str] = Field(..., min_length=1, description="Intervals from the tonic")

    model_config = {"frozen": True}

    @field_validator("intervals")
    @classmethod
    def validate_intervals(cls, v: list[str]) -> list[str]:
        """Every interval must parse."""
        invalid = [name for name in v if parse_interval(name) is None]
        if invalid:
            raise ValueError(f"Invalid intervals: {', '.join(invalid)}")
        return v


class DictionaryTable(BaseModel):
    """
    A complete dictionary table.

    Aliases map an alternative name to the canonical name of a type
    declared in the same table.
    """

    schema_version: SchemaVersion = Field(
        "dictionary/v1", alias="schema", description="Schema version"
    )
    kind: DictionaryKind = Field(..., description="chord or scale")
    types: list[TypeDefinition] = Field(default_factory=list, description="Type definitions")
    aliases: dict[str, str] = Field(default_factory=dict, description="Alias to canonical name")

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def validate_aliases(self) -> DictionaryTable:
        """Aliases must point at a declared type."""
        declared = {t.name for t in self.types}
        unknown = sorted(alias for alias, name in self.aliases.items() if name not in declared)
        if unknown:
            raise ValueError(f"Aliases point to unknown types: {', '.join(unknown)}")
        return self

    def aliases_by_type(self) -> dict[str, list[str]]:
        """Group the aliases by the type they point to, in table order."""
        grouped: dict[str, list[str]] = {}
        for alias, name in self.aliases.items():
            grouped.setdefault(name, []).append(alias)
        return grouped
