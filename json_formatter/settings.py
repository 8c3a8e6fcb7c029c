"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Configuration lookup shaped like an editor's `getConfiguration(section)`.

Values come from an optional VS Code style settings file (JSONC, flat dotted
keys such as `"jsonFormatter.sort.recursive": false`) and are overridden by
explicit values, typically from the command line. A value whose type does not
match the default is ignored.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

from .comments import strip_comments
from .debug import debug_echo

SETTINGS_ENV = 'JSON_FORMAT_SETTINGS'

# option name -> default; everything the formatter reads
DEFAULTS: Dict[str, Any] = {
    'jsonFormatter.sort.recursive': True,
    'jsonFormatter.sort.caseInsensitive': True,
    'jsonFormatter.showSuccessToast': False,
    'jsonFormatter.stripComments.stringAware': False,
    'files.insertFinalNewline': False,
    'editor.insertSpaces': True,
    'editor.tabSize': 2,
}


def _type_matches(value: Any, default: Any) -> bool:
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, type(default))


class Settings:
    def __init__(self, values: Dict[str, Any] | None = None):
        self._values: Dict[str, Any] = {}
        if values:
            self.update(values)

    def update(self, values: Dict[str, Any]) -> None:
        """Merge `values`; None entries mean "not given" and are skipped."""
        for name, value in values.items():
            if value is None:
                continue
            default = DEFAULTS.get(name)
            if default is not None and not _type_matches(value, default):
                debug_echo(1, 'settings', f"ignoring {name}={value!r}: expected {type(default).__name__}")
                continue
            self._values[name] = value

    def get(self, section: str, key: str, default: Any = None) -> Any:
        name = f"{section}.{key}" if section else key
        if name in self._values:
            return self._values[name]
        if default is not None:
            return default
        return DEFAULTS.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._values

    @classmethod
    def from_file(cls, path: str | os.PathLike) -> 'Settings':
        """Load a JSONC settings file; non-object content is an error."""
        text = Path(path).read_text(encoding='utf-8')
        data = json.loads(strip_comments(text))
        if not isinstance(data, dict):
            raise ValueError(f"settings file '{path}' must contain a JSON object")
        debug_echo(2, 'settings', f"loaded {len(data)} value(s) from {path}")
        return cls(data)


def load_settings(path: str | os.PathLike | None = None, overrides: Dict[str, Any] | None = None) -> Settings:
    """Settings from `path` (or $JSON_FORMAT_SETTINGS) plus `overrides`."""
    if path is None:
        path = os.environ.get(SETTINGS_ENV) or None
    settings = Settings.from_file(path) if path else Settings()
    if overrides:
        settings.update(overrides)
    return settings
