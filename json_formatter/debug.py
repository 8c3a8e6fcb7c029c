"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Leveled, filterable debug output written to stderr.

Levels are integers; a message is emitted when its level is <= the configured
level and the optional category filter matches. Coloring follows `--color`
(`auto` colors only when stderr is a tty).
"""
from __future__ import annotations

import os
import re
import sys

# color default output value, options: 'auto'|'always'|'never'
COLOR: str = 'auto'

# debug defaults
DEBUG_LEVEL: int = 0  # off
DEBUG_TARGET_CATEGORY: str | None = None  # set via --debug target=['parse', 'indent', 'sort', ...]

DEBUG_ENV = 'JSON_FORMAT_DEBUG'


def _color_enabled() -> bool:
    if COLOR == 'never':
        return False
    if COLOR == 'always':
        return True
    try:
        # auto (default)
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


def debug_color(text: str, level: int) -> str:
    if not _color_enabled():
        return text

    # simple level -> color mapping
    colors = {
        1: '\x1b[33m',
        2: '\x1b[36m',
        3: '\x1b[35m',
        4: '\x1b[34m',
    }

    code = colors.get(level, '\x1b[37m')
    return f"{code}{text}\x1b[0m"


def debug_enabled(level: int = 1, category: str | None = None) -> bool:
    if DEBUG_LEVEL <= 0 or level > DEBUG_LEVEL:
        return False
    if DEBUG_TARGET_CATEGORY and DEBUG_TARGET_CATEGORY != 'all' and category != DEBUG_TARGET_CATEGORY:
        return False
    return True


def debug_echo(level: int, category: str, msg: str) -> None:
    """Emit a filtered, leveled debug message to stderr.

    Messages are emitted when `level` <= `DEBUG_LEVEL` and the category
    filter (if set) matches. Always writes to stderr.
    """
    if not debug_enabled(level, category):
        return
    out = f"[DEBUG:{level}:{category}] {msg}"
    out = debug_color(out, level)
    try:
        sys.stderr.write(out + '\n')
    except (OSError, ValueError):
        # stderr closed or broken pipe; debug output is best-effort
        pass


def parse_debug_specs(specs: list[str | None] | None) -> tuple[int, str | None]:
    """Fold repeated `--debug` values into (level, category).

    Each spec is a positive integer level, `level=N`, or `target=NAME`
    (alias `category=NAME`). A bare `--debug` means level 1.
    """
    if not specs:
        return 0, None
    max_level = 0
    category = None
    for spec in specs:
        if spec is None:
            spec = '1'
        spec = str(spec).strip()
        # numeric spec
        if re.fullmatch(r'\d+', spec):
            max_level = max(max_level, int(spec))
            continue
        # key=value spec
        if '=' in spec:
            k, v = spec.split('=', 1)
            k = k.strip().lower()
            v = v.strip().strip('"').strip("'")
            if k in ('target', 'category'):
                category = v
            elif k == 'level' and re.fullmatch(r'\d+', v):
                max_level = max(max_level, int(v))
    if max_level == 0:
        max_level = 1
    return max_level, category


def configure(level: int = 0, category: str | None = None, color: str = 'auto') -> None:
    """Set module debug globals; falls back to $JSON_FORMAT_DEBUG when level is 0."""
    global DEBUG_LEVEL, DEBUG_TARGET_CATEGORY, COLOR
    if level <= 0:
        env_level = os.environ.get(DEBUG_ENV, '').strip()
        if re.fullmatch(r'\d+', env_level):
            level = int(env_level)
    DEBUG_LEVEL = level
    DEBUG_TARGET_CATEGORY = category
    COLOR = color
