"""
Tests for type dictionaries.

Tests the registry (names, aliases, chroma index), the pydantic table
models and the YAML loader.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chuk_mcp_music_theory.constants import DictionaryKind
from chuk_mcp_music_theory.core.interval import Interval
from chuk_mcp_music_theory.core.pcset import Chroma, chroma
from chuk_mcp_music_theory.dictionary import (
    DictionaryEntry,
    DictionaryLoader,
    InconsistentChromaError,
    NameCollisionError,
    TypeDictionary,
    default_chords,
    default_scales,
    split_tonic,
)
from chuk_mcp_music_theory.models import DictionaryTable, TypeDefinition


class TestDictionaryEntry:
    """Tests for DictionaryEntry."""

    def test_create(self) -> None:
        """create() parses intervals and computes the chroma."""
        entry = DictionaryEntry.create("maj7", ["1P", "3M", "5P", "7M"], aliases=["M7"])
        assert entry.intervals[1] == Interval(3, "M")
        assert str(entry.chroma) == "100010010001"
        assert entry.names == ("maj7", "M7")
        assert entry.interval_names == ["1P", "3M", "5P", "7M"]

    def test_create_invalid(self) -> None:
        """Empty names, empty interval lists and bad intervals are rejected."""
        with pytest.raises(ValueError):
            DictionaryEntry.create("", ["1P"])
        with pytest.raises(ValueError):
            DictionaryEntry.create("empty", [])
        with pytest.raises(ValueError):
            DictionaryEntry.create("bad", ["1P", "3P"])

    def test_inconsistent_chroma(self) -> None:
        """An entry cannot carry a chroma other than its intervals'."""
        with pytest.raises(InconsistentChromaError):
            DictionaryEntry(
                name="M",
                intervals=(Interval(1, "P"), Interval(3, "M"), Interval(5, "P")),
                chroma=Chroma.from_pitch_classes([0, 3, 7]),
            )

    def test_immutable(self) -> None:
        """Entries are frozen."""
        entry = DictionaryEntry.create("5", ["1P", "5P"])
        with pytest.raises(AttributeError):
            entry.name = "power"  # type: ignore[misc]


class TestSplitTonic:
    """Tests for split_tonic."""

    def test_space_separated(self) -> None:
        """A leading note followed by a space is the tonic."""
        assert split_tonic("C major") == ("C", "major")
        assert split_tonic("f# melodic minor") == ("F#", "melodic minor")

    def test_glued(self) -> None:
        """A tonic glued to the symbol."""
        assert split_tonic("Cmaj7") == ("C", "maj7")
        assert split_tonic("Bbm7b5") == ("Bb", "m7b5")

    def test_no_tonic(self) -> None:
        """Names without a leading note keep everything as the type."""
        assert split_tonic("melodic minor") == (None, "melodic minor")
        assert split_tonic("7") == (None, "7")


class TestTypeDictionary:
    """Tests for the TypeDictionary registry."""

    def test_add_and_get(self, triads: TypeDictionary) -> None:
        """Types are found by name and alias."""
        assert triads.get("M").name == "M"
        assert triads.get("maj").name == "M"
        assert triads.get("°").name == "dim"
        assert triads.get("sus4") is None
        assert len(triads) == 4

    def test_get_strips_tonic(self, triads: TypeDictionary) -> None:
        """A leading tonic is ignored by get."""
        assert triads.get("Cmaj").name == "M"
        assert triads.get("Eb m").name == "m"
        assert triads.get("F#dim").name == "dim"

    def test_known_names_are_not_split(self, triads: TypeDictionary) -> None:
        """'dim' is a type, not D + 'im'."""
        assert triads.tokenize("dim") == (None, "dim")
        assert triads.tokenize("Ddim") == ("D", "dim")

    def test_lookup_is_exact(self, triads: TypeDictionary) -> None:
        """lookup matches only registered names and aliases."""
        assert triads.lookup("maj").name == "M"
        assert triads.lookup(" dim ").name == "dim"
        assert triads.lookup("Cmaj") is None
        assert triads.lookup(None) is None  # type: ignore[arg-type]

    def test_get_invalid(self, triads: TypeDictionary) -> None:
        """Non-strings and unknown names give None."""
        assert triads.get(None) is None  # type: ignore[arg-type]
        assert triads.get("") is None
        assert "m" in triads
        assert "nope" not in triads

    def test_name_collision(self, triads: TypeDictionary) -> None:
        """Names and aliases cannot be registered twice."""
        with pytest.raises(NameCollisionError) as exc_info:
            triads.add("M", ["1P", "3M", "5P", "7M"])
        assert exc_info.value.name == "M"
        assert exc_info.value.dictionary == "chord"

        with pytest.raises(NameCollisionError):
            triads.add("maj", ["1P", "3M", "5P"])
        with pytest.raises(NameCollisionError):
            triads.add("maj7", ["1P", "3M", "5P", "7M"], aliases=["-"])
        assert len(triads) == 4
        assert triads.get("maj7") is None

    def test_collision_is_value_error(self, triads: TypeDictionary) -> None:
        """NameCollisionError is a ValueError."""
        with pytest.raises(ValueError):
            triads.add("m", ["1P", "3m", "5P"])

    def test_invalid_interval(self, triads: TypeDictionary) -> None:
        """Invalid intervals are rejected and nothing is registered."""
        with pytest.raises(ValueError):
            triads.add("weird", ["1P", "3X"])
        assert "weird" not in triads

    def test_insertion_order(self, triads: TypeDictionary) -> None:
        """all() and names() keep insertion order."""
        assert [e.name for e in triads.all()] == ["M", "m", "dim", "aug"]
        assert triads.names() == ["M", "m", "dim", "aug"]
        assert triads.names(aliases=True) == ["M", "maj", "m", "min", "-", "dim", "°", "aug", "+"]
        assert [e.name for e in triads] == ["M", "m", "dim", "aug"]

    def test_find(self, triads: TypeDictionary) -> None:
        """Reverse lookup by chroma."""
        assert [e.name for e in triads.find(["C", "Eb", "G"])] == ["m"]
        assert [e.name for e in triads.find("100010001000")] == ["aug"]
        assert triads.find(["C", "D"]) == []

    def test_find_shared_chroma(self, triads: TypeDictionary) -> None:
        """Types with the same chroma are all returned, in insertion order."""
        triads.add("M#5", ["1P", "3M", "6m"])
        assert [e.name for e in triads.find(["1P", "3M", "5A"])] == ["aug", "M#5"]

    def test_index_invalidated_on_add(self, triads: TypeDictionary) -> None:
        """The chroma index sees types added after a lookup."""
        assert triads.find(["C", "F", "G"]) == []
        triads.add("sus4", ["1P", "4P", "5P"])
        assert [e.name for e in triads.find(["C", "F", "G"])] == ["sus4"]

    def test_remove_all(self, triads: TypeDictionary) -> None:
        """remove_all empties names, aliases and the index."""
        assert triads.find(["C", "E", "G"])
        triads.remove_all()
        assert len(triads) == 0
        assert triads.get("maj") is None
        assert triads.find(["C", "E", "G"]) == []
        triads.add("M", ["1P", "3M", "5P"])
        assert triads.names() == ["M"]

    def test_duplicate_aliases_collapse(self) -> None:
        """Repeated aliases and the name itself are not registered twice."""
        dictionary = TypeDictionary("chord")
        entry = dictionary.add("M", ["1P", "3M", "5P"], aliases=["maj", "maj", "M", ""])
        assert entry.aliases == ("maj",)

    def test_single_string_alias(self) -> None:
        """A bare string is one alias, not one alias per character."""
        dictionary = TypeDictionary("chord")
        entry = dictionary.add("M", ["1P", "3M", "5P"], aliases="maj")
        assert entry.aliases == ("maj",)
        assert DictionaryEntry.create("m", ["1P", "3m", "5P"], aliases="min").aliases == ("min",)
        assert dictionary.get("maj").name == "M"
        assert dictionary.lookup("m") is None

    def test_repr(self, triads: TypeDictionary) -> None:
        """repr shows the name and size."""
        assert repr(triads) == "TypeDictionary('chord', 4 entries)"


class TestDictionaryTable:
    """Tests for the pydantic table models."""

    def test_valid_table(self) -> None:
        """A table parses with the schema alias."""
        table = DictionaryTable.model_validate(
            {
                "schema": "dictionary/v1",
                "kind": "chord",
                "types": [{"name": "maj7", "intervals": ["1P", "3M", "5P", "7M"]}],
                "aliases": {"M7": "maj7", "Δ": "maj7"},
            }
        )
        assert table.kind == DictionaryKind.CHORD
        assert table.schema_version == "dictionary/v1"
        assert table.aliases_by_type() == {"maj7": ["M7", "Δ"]}

    def test_invalid_interval(self) -> None:
        """Intervals are validated."""
        with pytest.raises(ValidationError):
            TypeDefinition(name="bad", intervals=["1P", "2P"])

    def test_empty_intervals(self) -> None:
        """A type needs at least one interval."""
        with pytest.raises(ValidationError):
            TypeDefinition(name="empty", intervals=[])

    def test_unknown_alias_target(self) -> None:
        """Aliases must point at a declared type."""
        with pytest.raises(ValidationError):
            DictionaryTable(kind="scale", types=[], aliases={"ionian": "major"})

    def test_unknown_kind(self) -> None:
        """Only chord and scale tables exist."""
        with pytest.raises(ValidationError):
            DictionaryTable(kind="rhythm")

    def test_unknown_schema(self) -> None:
        """Only dictionary/v1 is accepted."""
        with pytest.raises(ValidationError):
            DictionaryTable.model_validate({"schema": "dictionary/v2", "kind": "chord"})


class TestDictionaryLoader:
    """Tests for loading YAML tables."""

    def test_builtin_chords(self, chord_dictionary: TypeDictionary) -> None:
        """The built-in chord table has 229 names."""
        assert len(chord_dictionary) == 105
        assert len(chord_dictionary.names(aliases=True)) == 229
        assert chord_dictionary.get("Mb5") is not None
        assert chord_dictionary.get("M7").name == "maj7"
        assert chord_dictionary.get("dom7").name == "7"
        assert chord_dictionary.get("Cmi").name == "m"

    def test_every_chord_name_resolves(self, chord_dictionary: TypeDictionary) -> None:
        """Every name and alias resolves to its own entry."""
        for entry in chord_dictionary:
            for name in entry.names:
                assert chord_dictionary.get(name) is entry

    def test_builtin_scales(self, scale_dictionary: TypeDictionary) -> None:
        """The built-in scale table."""
        assert len(scale_dictionary) == 85
        assert scale_dictionary.names()[0] == "major"
        assert scale_dictionary.get("ionian").name == "major"
        assert scale_dictionary.get("minor").name == "aeolian"
        for entry in scale_dictionary:
            for name in entry.names:
                assert scale_dictionary.get(name) is entry

    def test_builtin_chromas_match_intervals(self, chord_dictionary: TypeDictionary) -> None:
        """Every entry's chroma is the chroma of its intervals."""
        for entry in chord_dictionary:
            assert entry.chroma == chroma(entry.intervals)

    def test_defaults_are_cached(self) -> None:
        """The default dictionaries are loaded once."""
        assert default_chords() is default_chords()
        assert default_scales() is default_scales()
        assert default_chords().name == "chord"
        assert default_scales().name == "scale"

    def test_project_table(self, temp_dir: Path) -> None:
        """Project tables add types and aliases on top of the library."""
        (temp_dir / "chords.yaml").write_text(
            "schema: dictionary/v1\n"
            "kind: chord\n"
            "types:\n"
            '  - name: "maj7no5"\n'
            "    intervals: [1P, 3M, 7M]\n"
            "aliases:\n"
            '  "Δno5": "maj7no5"\n',
            encoding="utf-8",
        )
        dictionary = DictionaryLoader(project_path=temp_dir).load("chord")
        assert len(dictionary) == 106
        assert dictionary.get("Δno5").name == "maj7no5"
        assert dictionary.get("maj7") is not None

    def test_project_table_cannot_redefine(self, temp_dir: Path) -> None:
        """A project table that reuses a built-in name is rejected."""
        (temp_dir / "scales.yaml").write_text(
            "schema: dictionary/v1\n"
            "kind: scale\n"
            "types:\n"
            '  - name: "major"\n'
            "    intervals: [1P, 2M, 3M]\n"
        )
        with pytest.raises(NameCollisionError):
            DictionaryLoader(project_path=temp_dir).load(DictionaryKind.SCALE)

    def test_missing_project_table(self, temp_dir: Path) -> None:
        """A project directory without tables only loads the library."""
        dictionary = DictionaryLoader(project_path=temp_dir).load("scale")
        assert len(dictionary) == 85

    def test_malformed_table(self, temp_dir: Path) -> None:
        """Malformed tables fail validation."""
        (temp_dir / "chords.yaml").write_text(
            "schema: dictionary/v1\n"
            "kind: chord\n"
            "types:\n"
            "  - name: broken\n"
            "    intervals: [1P, 5M]\n"
        )
        with pytest.raises(ValidationError):
            DictionaryLoader(project_path=temp_dir).load("chord")

    def test_kind_mismatch(self, temp_dir: Path) -> None:
        """A scale table cannot be applied to a chord dictionary."""
        path = temp_dir / "table.yaml"
        path.write_text("schema: dictionary/v1\nkind: scale\ntypes: []\n")
        loader = DictionaryLoader()
        table = loader.load_table(path)
        with pytest.raises(ValueError):
            loader.apply(TypeDictionary("chord"), table)

    def test_empty_library(self, temp_dir: Path) -> None:
        """A library without tables gives an empty dictionary."""
        dictionary = DictionaryLoader(library_path=temp_dir).load("chord")
        assert len(dictionary) == 0

    def test_unknown_kind(self) -> None:
        """Unknown kinds are rejected."""
        with pytest.raises(ValueError):
            DictionaryLoader().load("rhythm")
