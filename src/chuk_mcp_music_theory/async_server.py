#!/usr/bin/env python3
"""
Async Music Theory MCP Server using chuk-mcp-server

This server provides MCP tools for music theory: spelled notes and
intervals, pitch-class sets, and named chord and scale types. Chord and
scale dictionaries come from the built-in YAML tables, extended by any
tables in the project's dictionaries/ directory.

The server provides tools for:
- Parsing notes and intervals, transposing with correct spelling
- Computing pitch-class sets (chromas) and their modes
- Detecting chords and scales from notes
- Listing and extending the chord and scale dictionaries
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_music_theory.constants import DictionaryKind
from chuk_mcp_music_theory.dictionary import DictionaryLoader
from chuk_mcp_music_theory.dictionary.loader import LIBRARY_PATH
from chuk_mcp_music_theory.tools import register_theory_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-music-theory")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
DICTIONARIES_DIR = Path(os.environ.get("MUSIC_THEORY_DICTIONARIES", BASE_PATH / "dictionaries"))

# music_add_type mutates these, never the shared default dictionaries
dictionary_loader = DictionaryLoader(
    library_path=LIBRARY_PATH,
    project_path=DICTIONARIES_DIR,
)
chord_dictionary = dictionary_loader.load(DictionaryKind.CHORD)
scale_dictionary = dictionary_loader.load(DictionaryKind.SCALE)

# Register all tools
theory_tools = register_theory_tools(mcp, chord_dictionary, scale_dictionary)

# Export tool functions for direct access
music_parse_note = theory_tools["music_parse_note"]
music_parse_interval = theory_tools["music_parse_interval"]
music_transpose = theory_tools["music_transpose"]
music_chroma = theory_tools["music_chroma"]
music_detect_chord = theory_tools["music_detect_chord"]
music_detect_scale = theory_tools["music_detect_scale"]
music_scale_notes = theory_tools["music_scale_notes"]
music_scale_modes = theory_tools["music_scale_modes"]
music_chord_notes = theory_tools["music_chord_notes"]
music_list_types = theory_tools["music_list_types"]
music_add_type = theory_tools["music_add_type"]

logger.info("CHUK Music Theory MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Dictionaries dir: {DICTIONARIES_DIR}")
logger.info(f"  Chord types: {len(chord_dictionary)}, scale types: {len(scale_dictionary)}")
