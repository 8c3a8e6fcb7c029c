#!/usr/bin/env python3
"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Beautify, minify, or sort the keys of JSON / JSONC files.

Usage

```
json-format.py ACTION [FILE ...] [OPTIONS]

# rewrite files in place
json-format.py beautify package.json tsconfig.jsonc

# read from stdin and write to stdout
cat settings.jsonc | json-format.py sort --language jsonc > settings.sorted.json
```

Actions

- `beautify` — pretty-print using the indentation found in the file.
- `minify` — remove all non-essential whitespace.
- `sort` — sort object keys and pretty-print.
- `beautifySort` (alias `beautify-sort`) — same output as `sort`.

Options

- `-h, --help` — show help and exit.
- `--recursive / --no-recursive` — sort nested objects too (default: recursive).
- `--case-insensitive / --case-sensitive` — key comparison (default: case-insensitive).
- `--tab-size N`, `--insert-spaces / --use-tabs` — indentation used when none can be detected.
- `--string-aware` — do not treat `//` or `/*` inside strings as comments.
- `--final-newline` — end rewritten files with a line break.
- `--language {json,jsonc}` — content type of stdin (default: json).
- `--settings FILE` — JSONC settings file with `jsonFormatter.*` / `editor.*` keys (env: JSON_FORMAT_SETTINGS).
- `--toast` — report success as a message instead of a status line.
- `--quiet, -q` — suppress status lines.
- `--color, -c` — control ANSI coloring of debug output: `auto` (default), `always`, `never`.
- `--debug, -d` — repeatable; a numeric level (e.g. `3`) or `target=NAME` (parse, indent, sort, eol, command, settings).

Behavior

- Files ending in `.jsonc` have comments and trailing commas stripped before parsing; `.json` files get the same treatment only if they fail to parse as-is. Comments are never written back.
- Indentation (tab or N spaces) and line endings (LF or CRLF) follow the original text.
- Invalid JSON is reported and the file is left untouched.
- Output written to stdout always ends with a line break.

Exit codes

```
0   Success
1   Usage / bad args / no target / not a JSON file
2   Invalid JSON, file read/write or other runtime error
```
"""
from __future__ import annotations

import argparse
import os
import sys
from typing import List

from json_formatter import ACTIONS, Document, FileSystemHost, load_settings, run_command
from json_formatter.debug import configure, debug_echo, parse_debug_specs
from json_formatter.errors import NoTarget, UnsupportedFileType
from json_formatter.line_endings import detect_line_ending

ACTION_ALIASES = {'beautify-sort': 'beautifySort'}

USAGE_EXIT_CODE = 1
ERROR_EXIT_CODE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Beautify, minify, or sort the keys of JSON / JSONC files.',
        epilog="Example: cat settings.jsonc | %(prog)s sort --language jsonc",
    )

    parser.add_argument('action', choices=list(ACTIONS) + list(ACTION_ALIASES),
                        help="What to do with the input.")

    parser.add_argument('files', nargs='*', metavar='FILE',
                        help="Files to rewrite in place. Without files, stdin is formatted to stdout.")

    parser.add_argument('--recursive', action=argparse.BooleanOptionalAction, default=None,
                        help="Sort nested objects as well as the top level (default: on).")

    parser.add_argument('--case-insensitive', dest='case_insensitive', action='store_const', const=True, default=None,
                        help="Compare keys ignoring case (default).")
    parser.add_argument('--case-sensitive', dest='case_insensitive', action='store_const', const=False,
                        help="Order keys alphabetically with accents and case breaking ties.")

    parser.add_argument('--tab-size', dest='tab_size', type=int, default=None,
                        help="Spaces per level when indentation cannot be detected (default: 2).")
    parser.add_argument('--insert-spaces', dest='insert_spaces', action='store_const', const=True, default=None,
                        help="Indent with spaces when indentation cannot be detected (default).")
    parser.add_argument('--use-tabs', dest='insert_spaces', action='store_const', const=False,
                        help="Indent with tabs when indentation cannot be detected.")

    parser.add_argument('--string-aware', dest='string_aware', action='store_const', const=True, default=None,
                        help="Leave // and /* inside string literals alone when stripping comments.")

    parser.add_argument('--final-newline', dest='final_newline', action='store_const', const=True, default=None,
                        help="End rewritten output with a line break.")

    parser.add_argument('--language', choices=['json', 'jsonc'], default='json',
                        help="Content type of stdin (default: json).")

    parser.add_argument('--settings', default=None, metavar='FILE',
                        help="JSONC settings file (default: $JSON_FORMAT_SETTINGS).")

    parser.add_argument('--toast', dest='toast', action='store_const', const=True, default=None,
                        help="Report success as a message rather than a status line.")

    parser.add_argument('--quiet', '-q', action='store_true',
                        help="Suppress status lines.")

    parser.add_argument('--color', '-c', dest='color', choices=['auto', 'always', 'never'], default='auto',
                        help='Colorize debug output (auto|always|never)')

    parser.add_argument('--debug', '-d', nargs='?', const='1', action='append', dest='debug',
                        help="Enable debug. Use a level (integer) or a filter like \"target=NAME\".")

    return parser


def exit_code_for(result) -> int:
    if result.ok:
        return 0
    if isinstance(result.error, (NoTarget, UnsupportedFileType)):
        return USAGE_EXIT_CODE
    return ERROR_EXIT_CODE


def format_stdin(host: FileSystemHost, action: str, language: str) -> int:
    """Format stdin as an open, unsaved document and print the result."""
    # bytes, so CRLF input is not folded to LF by universal newlines
    text = sys.stdin.buffer.read().decode('utf-8')
    doc = Document(
        path=f"<stdin>.{language}",
        text=text,
        eol=detect_line_ending(text),
        language_id=language,
    )
    host.documents.append(doc)
    result = run_command(host, action, doc.path)
    if not result.ok:
        return exit_code_for(result)
    out = doc.text
    if not out.endswith('\n'):
        out += doc.eol
    sys.stdout.buffer.write(out.encode('utf-8'))
    sys.stdout.flush()
    return 0


def main(argv: List[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    parser = build_parser()
    args = parser.parse_args(argv)

    level, category = parse_debug_specs(args.debug)
    configure(level, category, args.color)

    if args.tab_size is not None and args.tab_size < 1:
        parser.error('--tab-size must be a positive integer')

    action = ACTION_ALIASES.get(args.action, args.action)

    overrides = {
        'jsonFormatter.sort.recursive': args.recursive,
        'jsonFormatter.sort.caseInsensitive': args.case_insensitive,
        'jsonFormatter.showSuccessToast': args.toast,
        'jsonFormatter.stripComments.stringAware': args.string_aware,
        'files.insertFinalNewline': args.final_newline,
        'editor.insertSpaces': args.insert_spaces,
        'editor.tabSize': args.tab_size,
    }
    try:
        settings = load_settings(args.settings, overrides)
    except (OSError, ValueError) as e:
        print(f"error: failed to load settings: {e}", file=sys.stderr)
        return ERROR_EXIT_CODE

    use_stdin = not args.files and not sys.stdin.isatty()
    host = FileSystemHost(settings=settings, quiet=args.quiet or use_stdin)

    if use_stdin:
        try:
            return format_stdin(host, action, args.language)
        except UnicodeDecodeError as e:
            print(f"error: failed to read input: {e}", file=sys.stderr)
            return ERROR_EXIT_CODE

    if not args.files:
        # no file and nothing piped; reported as a missing target
        return exit_code_for(run_command(host, action))

    rc = 0
    for path in args.files:
        debug_echo(1, 'command', f"{action} {os.path.abspath(path)}")
        try:
            result = run_command(host, action, path)
        except (OSError, UnicodeDecodeError) as e:
            print(f"error: {path}: {e}", file=sys.stderr)
            rc = max(rc, ERROR_EXIT_CODE)
            continue
        rc = max(rc, exit_code_for(result))
    return rc


if __name__ == "__main__":
    raise SystemExit(main())
