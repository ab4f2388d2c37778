#!/usr/bin/env python3
"""
md.py
-------------------
Markdown helpers for rendering day documents.

Functions:
    extract_title: First '#' heading of a body, or "Untitled"
    insert_date_after_heading: Put the display date under the first line
    escape_quotes: Escape double quotes for a quoted front-matter value
    relref: Hugo cross-reference shortcode for a content file
"""
from __future__ import annotations

# --- Standard library imports ---
import re


UNTITLED = "Untitled"
TITLE_RE = re.compile(r"^#[ \t]*(?P<title>\S.*)$")


def extract_title(body: str) -> str:
    """
    Return the first heading line of the body, without the leading '#'.

    Scans line by line and stops at the first line that starts with '#'
    followed by a non-blank remainder. The heading may appear anywhere in
    the body.

    Examples:
        >>> extract_title("# My Day\\nSome text")
        'My Day'
        >>> extract_title("No heading here")
        'Untitled'
    """
    for line in body.splitlines():
        match = TITLE_RE.match(line)
        if match:
            return match.group("title").strip()
    return UNTITLED


def insert_date_after_heading(body: str, display_date: str) -> str:
    """
    Insert the display date as a subtitle below the first line.

    A single-line body is returned unchanged.

    Examples:
        >>> insert_date_after_heading("# Title\\nLine two", "5 March 2021")
        '# Title\\n\\n5 March 2021\\n\\nLine two'
    """
    parts = body.split("\n", 1)
    if len(parts) == 2:
        return f"{parts[0]}\n\n{display_date}\n\n{parts[1]}"
    return body


def escape_quotes(value: str) -> str:
    """
    Escape double quotes for a double-quoted YAML scalar.

    Only '"' is escaped; other characters pass through.

    >>> escape_quotes('He said "hi"')
    'He said \\\\"hi\\\\"'
    """
    return value.replace('"', '\\"')


def relref(target: str) -> str:
    """Hugo relref shortcode line for ``target``."""
    return f'{{{{< relref "{target}" >}}}}'
