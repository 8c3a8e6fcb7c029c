"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Parse -> transform -> serialize -> normalize for one piece of JSON/JSONC text.

`format_text` is pure: it takes a `FormatRequest`, returns the formatted
string, and raises `InvalidJson` without touching anything when the input
does not parse.
"""
from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from typing import Any

from .comments import strip_comments
from .debug import debug_echo
from .errors import InvalidJson
from .indentation import Indent, clamp_indent, detect_indentation
from .line_endings import detect_line_ending, eol_name, normalize_line_endings
from .sorting import sort_keys

BEAUTIFY = 'beautify'
MINIFY = 'minify'
SORT = 'sort'
BEAUTIFY_SORT = 'beautifySort'

ACTIONS = (BEAUTIFY, MINIFY, SORT, BEAUTIFY_SORT)

LONE_SURROGATE_RE = re.compile(r'[\ud800-\udfff]')

ACTION_LABELS = {
    BEAUTIFY: 'beautified',
    MINIFY: 'minified',
    SORT: 'sorted',
    BEAUTIFY_SORT: 'beautified and sorted',
}

DEFAULT_INDENT = 2


@dataclass(frozen=True)
class FormatRequest:
    text: str
    action: str = BEAUTIFY
    recursive: bool = True
    case_insensitive: bool = True
    # comment-bearing source (.jsonc or jsonc language id)
    jsonc: bool = False
    # original text used for indentation/line-ending inference; defaults to `text`
    source_text: str | None = None
    eol: str | None = None
    default_indent: Indent = DEFAULT_INDENT
    string_aware: bool = False
    final_newline: bool = False


def action_label(action: str) -> str:
    return ACTION_LABELS.get(action, 'formatted')


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise ValueError(f"number out of range: {literal}")
    return value


def parse_json(text: str) -> Any:
    """json.loads that refuses NaN/Infinity literals and numbers like 1e400
    that only fit as infinity."""
    return json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)


def parse_source(text: str, jsonc: bool = False, string_aware: bool = False) -> Any:
    """Parse `text`, stripping comments first for JSONC.

    Plain JSON gets one retry after stripping so stray comments or trailing
    commas in a `.json` file are tolerated. The reported message is always
    the one from the first attempt.
    """
    if jsonc:
        text = strip_comments(text, string_aware)
    try:
        return parse_json(text)
    except ValueError as e:
        first_error = e
    if not jsonc:
        debug_echo(1, 'parse', f"plain parse failed ({first_error}); retrying without comments")
        try:
            return parse_json(strip_comments(text, string_aware))
        except ValueError:
            pass
    raise InvalidJson(str(first_error)) from first_error


def _escape_surrogate(match: re.Match) -> str:
    return '\\u%04x' % ord(match.group())


def serialize(value: Any, indent: Indent | None = None) -> str:
    """Compact when `indent` is None/0/empty, else pretty-printed.

    Non-ASCII text is written as-is, except lone surrogates (`"\\ud800"` in
    the source), which go back out as `\\uXXXX` escapes so the result still
    encodes as UTF-8.
    """
    if indent is None or indent == 0 or indent == '':
        text = json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(',', ':'))
    else:
        text = json.dumps(value, ensure_ascii=False, allow_nan=False, indent=clamp_indent(indent))
    return LONE_SURROGATE_RE.sub(_escape_surrogate, text)


def format_text(request: FormatRequest) -> str:
    if request.action not in ACTIONS:
        raise ValueError(f"unknown action: {request.action!r}")

    source = request.text if request.source_text is None else request.source_text

    data = parse_source(request.text, jsonc=request.jsonc, string_aware=request.string_aware)

    indent = detect_indentation(source)
    if indent is None:
        indent = request.default_indent
        debug_echo(1, 'indent', f"no indentation detected; using default {indent!r}")
    else:
        debug_echo(1, 'indent', f"detected {indent!r}")

    if request.action == MINIFY:
        formatted = serialize(data)
    else:
        if request.action in (SORT, BEAUTIFY_SORT):
            data = sort_keys(data, request.recursive, request.case_insensitive)
        formatted = serialize(data, indent)

    eol = request.eol or detect_line_ending(source)
    debug_echo(1, 'eol', f"normalizing to {eol_name(eol)}")
    formatted = normalize_line_endings(formatted, eol)

    if request.final_newline and not formatted.endswith(eol):
        formatted += eol

    return formatted
