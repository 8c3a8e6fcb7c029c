"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Infer the indentation style of existing JSON text.
"""
from __future__ import annotations

import re
from typing import Union

from .debug import debug_echo

TAB = '\t'

# widest indent a serializer will emit; wider requests are clamped
MAX_INDENT = 10

Indent = Union[str, int]

STRUCTURE_INDENT_RE = re.compile(r'^( +)["\[{]')
ANY_INDENT_RE = re.compile(r'^( +)\S')


def detect_indentation(text: str) -> Indent | None:
    """Return TAB, a space count, or None when no line is indented.

    Lines are scanned top to bottom and the first signal wins: a leading tab,
    then 2 or 4 spaces before a quote/bracket/brace, then any run of leading
    spaces before content.
    """
    for lineno, line in enumerate(re.split(r'\r?\n', text), 1):
        if line.startswith(TAB):
            debug_echo(2, 'indent', f"line {lineno}: tab")
            return TAB

        m = STRUCTURE_INDENT_RE.match(line)
        if m and len(m.group(1)) in (2, 4):
            debug_echo(2, 'indent', f"line {lineno}: {len(m.group(1))} spaces before structure")
            return len(m.group(1))

        m = ANY_INDENT_RE.match(line)
        if m:
            debug_echo(2, 'indent', f"line {lineno}: {len(m.group(1))} spaces (fallback)")
            return len(m.group(1))

    return None


def clamp_indent(indent: Indent) -> Indent:
    if isinstance(indent, int):
        return max(0, min(indent, MAX_INDENT))
    return indent
