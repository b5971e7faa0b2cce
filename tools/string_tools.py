#!/usr/bin/env python3
"""
MCP tools for string utilities.
"""

from fastmcp import FastMCP

from cargo_tools import strings


def register_string_tools(mcp: FastMCP):
    """Register string utility MCP tools."""

    @mcp.tool
    async def capitalize(text: str) -> str:
        """Upper-case the first character of text, leaving the rest unchanged."""
        return strings.capitalize(text)

    @mcp.tool
    async def reverse(text: str) -> str:
        """Reverse text character by character."""
        return strings.reverse(text)

    @mcp.tool
    async def word_count(text: str) -> int:
        """Count whitespace-separated words in text."""
        return strings.word_count(text)

    @mcp.tool
    async def validate_email(email: str) -> bool:
        """
        Coarse email check: true when the address contains both '@' and '.'.

        This does not implement the full email grammar.
        """
        return strings.validate_email(email)
