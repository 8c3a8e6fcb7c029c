"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Line-ending detection and normalization.
"""
from __future__ import annotations

import re

LF = '\n'
CRLF = '\r\n'

NEWLINE_RE = re.compile(r'\r?\n')


def detect_line_ending(text: str) -> str:
    """CRLF if the text contains any CRLF, otherwise LF."""
    return CRLF if CRLF in text else LF


def normalize_line_endings(text: str, eol: str) -> str:
    if eol not in (LF, CRLF):
        raise ValueError(f"unsupported line ending: {eol!r}")
    return NEWLINE_RE.sub(eol, text)


def eol_name(eol: str) -> str:
    return 'CRLF' if eol == CRLF else 'LF'
