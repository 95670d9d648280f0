"""
Theory tools - MCP tools for notes, intervals, chords and scales.

Tools for parsing and transposing notes, naming pitch-class sets,
detecting chords and scales, and extending the type dictionaries.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_music_theory.constants import DictionaryKind, ErrorMessages, SuccessMessages
from chuk_mcp_music_theory.core import pcset
from chuk_mcp_music_theory.core.distance import transpose
from chuk_mcp_music_theory.core.interval import invert, parse_interval
from chuk_mcp_music_theory.core.pitch import parse_note
from chuk_mcp_music_theory.dictionary import TypeDictionary
from chuk_mcp_music_theory.theory import chord, scale

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_theory_tools(
    mcp: ChukMCPServer,
    chords: TypeDictionary,
    scales: TypeDictionary,
) -> dict[str, Any]:
    """
    Register music theory tools with the MCP server.

    Args:
        mcp: The MCP server instance
        chords: The chord dictionary
        scales: The scale dictionary

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    dictionaries = {DictionaryKind.CHORD: chords, DictionaryKind.SCALE: scales}

    def get_dictionary(kind: str) -> TypeDictionary | None:
        try:
            return dictionaries[DictionaryKind(kind)]
        except ValueError:
            return None

    @mcp.tool  # type: ignore[arg-type]
    async def music_parse_note(note: str) -> str:
        """
        Parse a note name.

        Accepts letters A-G in either case, any number of '#', 'b' or 'x'
        (double sharp) accidentals and an optional octave.

        Args:
            note: Note name, e.g. 'C#4', 'bb', 'Fx'

        Returns:
            JSON string with the note's spelling, pitch class and coordinates

        Example:
            music_parse_note(note="Bb3")
        """
        try:
            pitch = parse_note(note)
            if pitch is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_NOTE.format(note=note)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "note": {
                        "name": pitch.name,
                        "letter": pitch.letter,
                        "accidental": pitch.accidental,
                        "alt": pitch.alt,
                        "octave": pitch.octave,
                        "pitch_class": pitch.pitch_class.name,
                        "chroma": pitch.chroma,
                        "midi": pitch.midi,
                        "coord": list(pitch.coord),
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to parse note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_parse_note"] = music_parse_note

    @mcp.tool  # type: ignore[arg-type]
    async def music_parse_interval(interval: str) -> str:
        """
        Parse an interval name.

        Accepts number-first ('3M', '-5P', '9m') and quality-first
        ('M3', 'P5') notation.

        Args:
            interval: Interval name

        Returns:
            JSON string with size, quality, semitones and inversion

        Example:
            music_parse_interval(interval="3M")
        """
        try:
            ivl = parse_interval(interval)
            if ivl is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_INTERVAL.format(interval=interval),
                    }
                )

            inverted = invert(ivl)
            return json.dumps(
                {
                    "status": "success",
                    "interval": {
                        "name": ivl.name,
                        "number": ivl.number,
                        "quality": ivl.quality,
                        "type": ivl.type.value,
                        "direction": ivl.direction,
                        "simple": ivl.simple,
                        "octaves": ivl.octaves,
                        "semitones": ivl.semitones,
                        "coord": list(ivl.coord),
                        "inversion": inverted.name if inverted else None,
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to parse interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_parse_interval"] = music_parse_interval

    @mcp.tool  # type: ignore[arg-type]
    async def music_transpose(note: str, interval: str) -> str:
        """
        Transpose a note by an interval, keeping the spelling.

        Args:
            note: Note name or pitch class
            interval: Interval name (negative numbers go down)

        Returns:
            JSON string with the transposed note

        Example:
            music_transpose(note="C4", interval="-3m")
        """
        try:
            result = transpose(note, interval)
            if not result:
                return json.dumps(
                    {
                        "status": "error",
                        "message": f"Cannot transpose '{note}' by '{interval}'",
                    }
                )

            return json.dumps(
                {"status": "success", "note": note, "interval": interval, "result": result}
            )
        except Exception as e:
            logger.exception("Failed to transpose")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_transpose"] = music_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def music_chroma(notes: list[str]) -> str:
        """
        Get the pitch-class set of some notes or intervals.

        Invalid items are ignored.

        Args:
            notes: Note or interval names

        Returns:
            JSON string with the chroma, its pitch classes, intervals and modes

        Example:
            music_chroma(notes=["C", "E", "G"])
        """
        try:
            value = pcset.chroma(notes)
            return json.dumps(
                {
                    "status": "success",
                    "chroma": str(value),
                    "num": value.mask,
                    "pitch_classes": value.pitch_classes,
                    "intervals": [i.name for i in pcset.intervals(value)],
                    "modes": [str(m) for m in pcset.modes(value)],
                }
            )
        except Exception as e:
            logger.exception("Failed to compute chroma")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_chroma"] = music_chroma

    @mcp.tool  # type: ignore[arg-type]
    async def music_detect_chord(notes: list[str]) -> str:
        """
        Name the chords made of exactly these pitch classes.

        Args:
            notes: Note names (octaves and duplicates are ignored)

        Returns:
            JSON string with chord names such as 'CM' or 'Am7'

        Example:
            music_detect_chord(notes=["E", "C", "A", "G"])
        """
        try:
            names = chord.detect(notes, dictionary=chords)
            return json.dumps({"status": "success", "chords": names, "count": len(names)})
        except Exception as e:
            logger.exception("Failed to detect chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_detect_chord"] = music_detect_chord

    @mcp.tool  # type: ignore[arg-type]
    async def music_detect_scale(notes: list[str]) -> str:
        """
        Name the scales made of exactly these pitch classes.

        Args:
            notes: Note names (octaves and duplicates are ignored)

        Returns:
            JSON string with scale names such as 'C major'

        Example:
            music_detect_scale(notes=["C", "D", "E", "F", "G", "A", "B"])
        """
        try:
            names = scale.detect(notes, dictionary=scales)
            return json.dumps({"status": "success", "scales": names, "count": len(names)})
        except Exception as e:
            logger.exception("Failed to detect scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_detect_scale"] = music_detect_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_scale_notes(name: str, tonic: str | None = None) -> str:
        """
        Get the notes of a scale.

        Args:
            name: Scale name, e.g. 'C major' or 'bebop'
            tonic: Optional tonic, overrides the one in the name

        Returns:
            JSON string with the scale's notes and intervals

        Example:
            music_scale_notes(name="Ab bebop")
        """
        try:
            entry = scale.get(name, scales)
            if entry is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNKNOWN_TYPE.format(kind="scale", name=name),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "type": entry.name,
                    "notes": scale.notes(name, tonic, dictionary=scales),
                    "intervals": entry.interval_names,
                    "chroma": str(entry.chroma),
                }
            )
        except Exception as e:
            logger.exception("Failed to get scale notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_scale_notes"] = music_scale_notes

    @mcp.tool  # type: ignore[arg-type]
    async def music_scale_modes(name: str, tonic: str | None = None) -> str:
        """
        Name every mode of a scale.

        Args:
            name: Scale name with a tonic, e.g. 'C major'
            tonic: Optional tonic, overrides the one in the name

        Returns:
            JSON string with one mode name per degree (null when unnamed)

        Example:
            music_scale_modes(name="major", tonic="C")
        """
        try:
            if scale.get(name, scales) is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNKNOWN_TYPE.format(kind="scale", name=name),
                    }
                )

            modes = scale.modes(name, tonic, dictionary=scales)
            return json.dumps({"status": "success", "modes": modes, "count": len(modes)})
        except Exception as e:
            logger.exception("Failed to get scale modes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_scale_modes"] = music_scale_modes

    @mcp.tool  # type: ignore[arg-type]
    async def music_chord_notes(name: str, tonic: str | None = None) -> str:
        """
        Get the notes of a chord.

        Args:
            name: Chord name, e.g. 'Cmaj7' or 'Bb m7b5'
            tonic: Optional tonic, overrides the one in the name

        Returns:
            JSON string with the chord's notes, intervals and fitting scales

        Example:
            music_chord_notes(name="Cmaj7")
        """
        try:
            entry = chord.get(name, chords)
            if entry is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNKNOWN_TYPE.format(kind="chord", name=name),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "symbol": entry.name,
                    "aliases": list(entry.aliases),
                    "notes": chord.notes(name, tonic, dictionary=chords),
                    "intervals": entry.interval_names,
                    "chord_scales": chord.chord_scales(
                        entry.name, dictionary=chords, scale_dictionary=scales
                    ),
                }
            )
        except Exception as e:
            logger.exception("Failed to get chord notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_chord_notes"] = music_chord_notes

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_types(kind: str, include_aliases: bool = False) -> str:
        """
        List the chord or scale types in a dictionary.

        Args:
            kind: 'chord' or 'scale'
            include_aliases: Also list each type's aliases

        Returns:
            JSON string with type summaries

        Example:
            music_list_types(kind="scale")
        """
        try:
            dictionary = get_dictionary(kind)
            if dictionary is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.UNKNOWN_KIND.format(kind=kind)}
                )

            types = []
            for entry in dictionary:
                summary: dict[str, Any] = {
                    "name": entry.name,
                    "full_name": entry.full_name,
                    "intervals": entry.interval_names,
                }
                if include_aliases:
                    summary["aliases"] = list(entry.aliases)
                types.append(summary)

            return json.dumps(
                {"status": "success", "kind": kind, "types": types, "count": len(types)}
            )
        except Exception as e:
            logger.exception("Failed to list types")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_list_types"] = music_list_types

    @mcp.tool  # type: ignore[arg-type]
    async def music_add_type(
        kind: str,
        name: str,
        intervals: list[str],
        aliases: list[str] | None = None,
        full_name: str = "",
    ) -> str:
        """
        Add a chord or scale type to a dictionary.

        Names and aliases must not already be registered.

        Args:
            kind: 'chord' or 'scale'
            name: New type name
            intervals: Intervals from the tonic, e.g. ["1P", "3M", "5P", "7M", "9M"]
            aliases: Optional alternative names
            full_name: Optional descriptive name

        Returns:
            JSON string with the new type

        Example:
            music_add_type(kind="chord", name="maj9no5", intervals=["1P", "3M", "7M", "9M"])
        """
        try:
            dictionary = get_dictionary(kind)
            if dictionary is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.UNKNOWN_KIND.format(kind=kind)}
                )

            entry = dictionary.add(name, intervals, aliases=aliases or [], full_name=full_name)
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.TYPE_ADDED.format(kind=kind, name=entry.name),
                    "type": {
                        "name": entry.name,
                        "aliases": list(entry.aliases),
                        "intervals": entry.interval_names,
                        "chroma": str(entry.chroma),
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to add type")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_add_type"] = music_add_type

    return tools
