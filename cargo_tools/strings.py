#!/usr/bin/env python3
"""
String utilities.

Small text transformations used by the examples and the MCP tools.
"""

import re

# Unicode White_Space; str.split() would also break on the \x1c-\x1f separators
WHITESPACE_RUN = re.compile(r"[^\S\x1c-\x1f]+")


def capitalize(s: str) -> str:
    """
    Upper-case the first character of ``s`` and leave the rest untouched.

    Unlike ``str.capitalize`` the remainder is not lower-cased. The first
    character uses the full Unicode mapping, so it may expand ("ß" -> "SS").
    """
    if not s:
        return ""
    return s[0].upper() + s[1:]


def reverse(s: str) -> str:
    """Reverse ``s`` by code point."""
    return s[::-1]


def word_count(s: str) -> int:
    """Count whitespace-separated words in ``s``."""
    return len([word for word in WHITESPACE_RUN.split(s) if word])


def validate_email(email: str) -> bool:
    """
    Coarse shape check: the address must contain an '@' and a '.'.

    Position and order are not checked. This is not an RFC 5322 validator.
    """
    return '@' in email and '.' in email
