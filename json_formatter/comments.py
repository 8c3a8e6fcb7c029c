"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Strip `//` and `/* */` comments and trailing commas from JSONC text.

The default is a regex heuristic: it does not look at string literals, so a
`//` or `/*` inside a string value is removed as well (e.g. URLs). Pass
`string_aware=True` to match string literals first and leave them alone.

Neither mode raises; the output may still be invalid JSON and the caller's
parser decides.
"""
from __future__ import annotations

import re

LINE_COMMENT_RE = re.compile(r'//.*$', re.MULTILINE)
BLOCK_COMMENT_RE = re.compile(r'/\*[\s\S]*?\*/')
TRAILING_COMMA_RE = re.compile(r',(\s*[}\]])')

# a double-quoted literal with escapes; an unclosed one runs to the end
STRING_PATTERN = r'("(?:[^"\\]|\\[\s\S])*"?)'
STRING_OR_COMMENT_RE = re.compile(STRING_PATTERN + r'|//[^\n]*|/\*[\s\S]*?(?:\*/|\Z)')
STRING_OR_TRAILING_COMMA_RE = re.compile(STRING_PATTERN + r'|,(\s*[}\]])')


def strip_comments(text: str, string_aware: bool = False) -> str:
    """Return `text` with comments and trailing commas removed.

    Order matters: line comments go first, then block comments (shortest
    match, may span lines), then any comma followed only by whitespace and a
    closing `}` or `]`.
    """
    if string_aware:
        return remove_trailing_commas(remove_comments(text))
    result = LINE_COMMENT_RE.sub('', text)
    result = BLOCK_COMMENT_RE.sub('', result)
    result = TRAILING_COMMA_RE.sub(r'\1', result)
    return result


def remove_comments(text: str) -> str:
    """Remove // and /* */ comments while respecting double-quoted strings.

    Newlines that end a line comment are kept so line numbers in parser
    messages still point at the original lines. An unclosed block comment
    runs to the end of the text.
    """
    return STRING_OR_COMMENT_RE.sub(_keep_string, text)


def remove_trailing_commas(text: str) -> str:
    """Drop a comma whose next non-space character is `}` or `]`.

    Assumes comments are already gone; commas inside strings are kept.
    """
    return STRING_OR_TRAILING_COMMA_RE.sub(_keep_string, text)


def _keep_string(match: re.Match) -> str:
    # group 1 is a string literal, group 2 (if any) is what follows a dropped comma
    if match.group(1) is not None:
        return match.group(1)
    return match.group(2) if match.re.groups > 1 else ''
