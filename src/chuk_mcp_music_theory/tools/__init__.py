"""
MCP tool implementations.

Tools are organized by domain:
- theory - Notes, intervals, pitch-class sets, chord and scale types
"""

from chuk_mcp_music_theory.tools.theory import register_theory_tools

__all__ = [
    "register_theory_tools",
]
