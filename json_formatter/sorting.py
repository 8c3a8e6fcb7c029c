"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Deterministic key ordering for parsed JSON values.

Arrays keep their element order at every depth; only object keys move.
"""
from __future__ import annotations

import unicodedata
from typing import Any

from .debug import debug_echo


def base_key(key: str) -> str:
    """Comparison form that ignores case and accents ("Éclair" ~ "eclair")."""
    decomposed = unicodedata.normalize('NFKD', key)
    stripped = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def collation_key(key: str) -> tuple:
    """Alphabetical order with accents, then case, breaking ties.

    Base letters decide first, then accents ("e" < "é"), then case with
    lowercase ahead of uppercase ("b" < "B"), so `Cherry` lands between
    `banana` and `zebra`.
    """
    accented = unicodedata.normalize('NFKD', key).casefold()
    return (base_key(key), accented, key.swapcase(), key)


def sorted_keys(keys, case_insensitive: bool = True) -> list[str]:
    if case_insensitive:
        # stable: case and accent variants keep their original relative order
        return sorted(keys, key=base_key)
    return sorted(keys, key=collation_key)


def sort_keys(value: Any, recursive: bool = True, case_insensitive: bool = True) -> Any:
    """Return `value` with object keys reordered.

    Non-recursive mode reorders only the top-level object and hands nested
    values back untouched. The input is never mutated.
    """
    if isinstance(value, list):
        if not recursive:
            return value
        return [sort_keys(item, recursive, case_insensitive) for item in value]

    if not isinstance(value, dict):
        return value

    keys = sorted_keys(value.keys(), case_insensitive)
    debug_echo(3, 'sort', f"keys={keys!r}")

    result = {}
    for key in keys:
        result[key] = sort_keys(value[key], recursive, case_insensitive) if recursive else value[key]
    return result
