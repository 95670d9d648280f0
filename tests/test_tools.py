"""
Tests for MCP tools.

Tests the MCP tool implementations for notes, intervals, chromas,
detection and dictionary management.
"""

import json

import pytest

from chuk_mcp_music_theory.dictionary import TypeDictionary
from chuk_mcp_music_theory.tools import register_theory_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def tools(chord_dictionary: TypeDictionary, scale_dictionary: TypeDictionary) -> dict:
    """Theory tools bound to fresh dictionaries."""
    mcp = MockMCPServer("test")
    return register_theory_tools(mcp, chord_dictionary, scale_dictionary)


class TestRegistration:
    """Tests for tool registration."""

    def test_all_tools_registered(
        self, chord_dictionary: TypeDictionary, scale_dictionary: TypeDictionary
    ) -> None:
        """Every tool is registered with the server and returned."""
        mcp = MockMCPServer("test")
        tools = register_theory_tools(mcp, chord_dictionary, scale_dictionary)
        assert set(tools) == set(mcp.tools)
        assert set(tools) == {
            "music_parse_note",
            "music_parse_interval",
            "music_transpose",
            "music_chroma",
            "music_detect_chord",
            "music_detect_scale",
            "music_scale_notes",
            "music_scale_modes",
            "music_chord_notes",
            "music_list_types",
            "music_add_type",
        }


class TestNoteTools:
    """Tests for note and interval tools."""

    @pytest.mark.asyncio
    async def test_parse_note(self, tools: dict):
        """Parse note tool."""
        data = json.loads(await tools["music_parse_note"](note="bb3"))
        assert data["status"] == "success"
        assert data["note"]["name"] == "Bb3"
        assert data["note"]["pitch_class"] == "Bb"
        assert data["note"]["midi"] == 58
        assert data["note"]["coord"] == [-2, 5]

    @pytest.mark.asyncio
    async def test_parse_note_invalid(self, tools: dict):
        """Parse note returns error for invalid names."""
        data = json.loads(await tools["music_parse_note"](note="H5"))
        assert data["status"] == "error"
        assert "H5" in data["message"]

    @pytest.mark.asyncio
    async def test_parse_interval(self, tools: dict):
        """Parse interval tool."""
        data = json.loads(await tools["music_parse_interval"](interval="M3"))
        assert data["status"] == "success"
        assert data["interval"]["name"] == "3M"
        assert data["interval"]["semitones"] == 4
        assert data["interval"]["inversion"] == "6m"

    @pytest.mark.asyncio
    async def test_parse_interval_invalid(self, tools: dict):
        """Parse interval returns error for impossible intervals."""
        data = json.loads(await tools["music_parse_interval"](interval="5M"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_transpose(self, tools: dict):
        """Transpose tool."""
        data = json.loads(await tools["music_transpose"](note="C4", interval="-3m"))
        assert data["status"] == "success"
        assert data["result"] == "A3"

    @pytest.mark.asyncio
    async def test_transpose_invalid(self, tools: dict):
        """Transpose returns error for invalid arguments."""
        data = json.loads(await tools["music_transpose"](note="C4", interval="3P"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_chroma(self, tools: dict):
        """Chroma tool."""
        data = json.loads(await tools["music_chroma"](notes=["C", "E", "G"]))
        assert data["status"] == "success"
        assert data["chroma"] == "100010010000"
        assert data["pitch_classes"] == [0, 4, 7]
        assert data["intervals"] == ["1P", "3M", "5P"]
        assert len(data["modes"]) == 3


class TestDetectionTools:
    """Tests for detection tools."""

    @pytest.mark.asyncio
    async def test_detect_chord(self, tools: dict):
        """Detect chord tool."""
        data = json.loads(await tools["music_detect_chord"](notes=["E", "C", "A", "G"]))
        assert data["status"] == "success"
        assert data["chords"] == ["C6", "Am7"]
        assert data["count"] == 2

    @pytest.mark.asyncio
    async def test_detect_scale(self, tools: dict):
        """Detect scale tool."""
        data = json.loads(
            await tools["music_detect_scale"](notes=["C", "D", "E", "F", "G", "A", "B"])
        )
        assert data["status"] == "success"
        assert data["scales"][0] == "C major"
        assert data["count"] == 7

    @pytest.mark.asyncio
    async def test_detect_nothing(self, tools: dict):
        """Detection succeeds with no matches."""
        data = json.loads(await tools["music_detect_chord"](notes=["C", "C#", "D"]))
        assert data["status"] == "success"
        assert data["chords"] == []


class TestScaleAndChordTools:
    """Tests for scale and chord tools."""

    @pytest.mark.asyncio
    async def test_scale_notes(self, tools: dict):
        """Scale notes tool."""
        data = json.loads(await tools["music_scale_notes"](name="Ab bebop"))
        assert data["status"] == "success"
        assert data["type"] == "bebop"
        assert data["notes"] == ["Ab", "Bb", "C", "Db", "Eb", "F", "Gb", "G"]

    @pytest.mark.asyncio
    async def test_scale_notes_unknown(self, tools: dict):
        """Scale notes returns error for unknown scales."""
        data = json.loads(await tools["music_scale_notes"](name="C nope"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_scale_modes(self, tools: dict):
        """Scale modes tool."""
        data = json.loads(await tools["music_scale_modes"](name="major", tonic="C"))
        assert data["status"] == "success"
        assert data["modes"][1] == "D dorian"
        assert data["count"] == 7

    @pytest.mark.asyncio
    async def test_chord_notes(self, tools: dict):
        """Chord notes tool."""
        data = json.loads(await tools["music_chord_notes"](name="CM7"))
        assert data["status"] == "success"
        assert data["symbol"] == "maj7"
        assert data["notes"] == ["C", "E", "G", "B"]
        assert "lydian" in data["chord_scales"]

    @pytest.mark.asyncio
    async def test_chord_notes_unknown(self, tools: dict):
        """Chord notes returns error for unknown chords."""
        data = json.loads(await tools["music_chord_notes"](name="Cnope"))
        assert data["status"] == "error"


class TestDictionaryTools:
    """Tests for listing and adding types."""

    @pytest.mark.asyncio
    async def test_list_types(self, tools: dict):
        """List types tool."""
        data = json.loads(await tools["music_list_types"](kind="chord"))
        assert data["status"] == "success"
        assert data["count"] == 105
        assert data["types"][0]["name"] == "M"
        assert "aliases" not in data["types"][0]

    @pytest.mark.asyncio
    async def test_list_types_with_aliases(self, tools: dict):
        """List types with aliases."""
        data = json.loads(await tools["music_list_types"](kind="scale", include_aliases=True))
        assert data["status"] == "success"
        assert data["types"][0]["aliases"] == ["ionian"]

    @pytest.mark.asyncio
    async def test_list_types_unknown_kind(self, tools: dict):
        """List types returns error for unknown kinds."""
        data = json.loads(await tools["music_list_types"](kind="rhythm"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_add_type(self, tools: dict, chord_dictionary: TypeDictionary):
        """Added types are detected."""
        data = json.loads(
            await tools["music_add_type"](
                kind="chord",
                name="maj7no5",
                intervals=["1P", "3M", "7M"],
                aliases=["Δno5"],
            )
        )
        assert data["status"] == "success"
        assert data["type"]["chroma"] == "100010000001"
        assert chord_dictionary.get("Δno5").name == "maj7no5"

        detected = json.loads(await tools["music_detect_chord"](notes=["C", "E", "B"]))
        assert "Cmaj7no5" in detected["chords"]

    @pytest.mark.asyncio
    async def test_add_type_collision(self, tools: dict):
        """Adding an existing name returns an error."""
        data = json.loads(
            await tools["music_add_type"](kind="scale", name="major", intervals=["1P", "3M"])
        )
        assert data["status"] == "error"
        assert "major" in data["message"]

    @pytest.mark.asyncio
    async def test_add_type_invalid_interval(self, tools: dict):
        """Adding a type with invalid intervals returns an error."""
        data = json.loads(
            await tools["music_add_type"](kind="chord", name="bad", intervals=["1P", "2P"])
        )
        assert data["status"] == "error"
