"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Beautify, minify and sort-keys for JSON / JSONC text.
"""
from .comments import strip_comments
from .commands import COMMANDS, CommandResult, execute_command, resolve_indentation, run_command
from .errors import EditApplicationFailure, FormatError, InvalidJson, NoTarget, UnsupportedFileType
from .formatter import (
    ACTIONS,
    BEAUTIFY,
    BEAUTIFY_SORT,
    MINIFY,
    SORT,
    FormatRequest,
    action_label,
    format_text,
    parse_source,
    serialize,
)
from .host import Document, Editor, EditorHost, FileSystemHost
from .indentation import TAB, detect_indentation
from .line_endings import CRLF, LF, detect_line_ending, normalize_line_endings
from .settings import Settings, load_settings
from .sorting import sort_keys

__version__ = '0.1.0'

__all__ = [
    'ACTIONS',
    'BEAUTIFY',
    'BEAUTIFY_SORT',
    'COMMANDS',
    'CRLF',
    'CommandResult',
    'Document',
    'EditApplicationFailure',
    'Editor',
    'EditorHost',
    'FileSystemHost',
    'FormatError',
    'FormatRequest',
    'InvalidJson',
    'LF',
    'MINIFY',
    'NoTarget',
    'SORT',
    'Settings',
    'TAB',
    'UnsupportedFileType',
    'action_label',
    'detect_indentation',
    'detect_line_ending',
    'execute_command',
    'format_text',
    'load_settings',
    'normalize_line_endings',
    'parse_source',
    'resolve_indentation',
    'run_command',
    'serialize',
    'sort_keys',
    'strip_comments',
]
