"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Editor commands: resolve the target, read it, format it, write it back, and
tell the user what happened.

Failures from the `FormatError` family are reported through the host and
returned in the `CommandResult`; nothing is written on failure. I/O errors
from the host propagate to the caller.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .debug import debug_echo
from .errors import EditApplicationFailure, FormatError, NoTarget, UnsupportedFileType
from .formatter import ACTIONS, FormatRequest, action_label, format_text
from .host import EditorHost
from .indentation import TAB, Indent
from .line_endings import detect_line_ending

JSON_EXTENSIONS = ('.json', '.jsonc')
JSON_LANGUAGES = ('json', 'jsonc')

STATUS_TIMEOUT_MS = 3000

COMMANDS = {f"jsonFormatter.{action}": action for action in ACTIONS}


@dataclass
class CommandResult:
    action: str
    path: str | None = None
    ok: bool = False
    message: str = ''
    text: str | None = None
    error: FormatError | None = None


def resolve_indentation(host: EditorHost) -> Indent:
    """Fallback indentation when the content gives no signal.

    The active editor's own options win when it reports them; otherwise the
    `editor.insertSpaces` / `editor.tabSize` settings.
    """
    insert_spaces = host.get_config('editor', 'insertSpaces', True)
    tab_size = host.get_config('editor', 'tabSize', 2)

    editor = host.active_editor()
    if editor is not None and isinstance(editor.insert_spaces, bool):
        if editor.insert_spaces:
            return editor.tab_size if isinstance(editor.tab_size, int) else tab_size
        return TAB

    return tab_size if insert_spaces else TAB


def _report(host: EditorHost, result: CommandResult, error: FormatError) -> CommandResult:
    result.ok = False
    result.error = error
    result.message = str(error)
    if error.severity == 'warning':
        host.show_warning(result.message)
    else:
        host.show_error(result.message)
    debug_echo(1, 'command', f"{result.action} {result.path}: {type(error).__name__}: {result.message}")
    return result


def run_command(host: EditorHost, action: str, target: str | None = None) -> CommandResult:
    """Run `action` against `target` (a path) or the active document."""
    if action not in ACTIONS:
        raise ValueError(f"unknown action: {action!r}")
    result = CommandResult(action=action)

    try:
        if target is None:
            editor = host.active_editor()
            target = editor.document.path if editor is not None else None
        if not target:
            raise NoTarget()
        result.path = target

        doc = host.find_open_document(target)
        language_id = doc.language_id if doc is not None else None
        suffix = Path(target).suffix
        if suffix not in JSON_EXTENSIONS and language_id not in JSON_LANGUAGES:
            raise UnsupportedFileType()

        editor = host.active_editor()
        selection = None
        if doc is not None:
            if editor is not None and editor.document is doc and editor.has_selection():
                selection = editor.selection
            text = doc.get_text(selection)
            source_text = doc.get_text()
            eol = doc.eol
        else:
            text = host.read_file(target).decode('utf-8')
            source_text = text
            eol = detect_line_ending(text)

        request = FormatRequest(
            text=text,
            action=action,
            recursive=host.get_config('jsonFormatter', 'sort.recursive', True),
            case_insensitive=host.get_config('jsonFormatter', 'sort.caseInsensitive', True),
            jsonc=suffix == '.jsonc' or language_id == 'jsonc',
            source_text=source_text,
            eol=eol,
            default_indent=resolve_indentation(host),
            string_aware=host.get_config('jsonFormatter', 'stripComments.stringAware', False),
            final_newline=selection is None and host.get_config('files', 'insertFinalNewline', False),
        )
        debug_echo(2, 'command', f"{action} {target}: jsonc={request.jsonc} selection={selection!r}")

        formatted = format_text(request)

        if doc is not None:
            was_dirty = doc.is_dirty
            rng = selection if selection is not None else doc.full_range()
            if not host.apply_edit(doc, rng, formatted):
                raise EditApplicationFailure()
            if selection is None and was_dirty:
                host.save_document(doc)
        else:
            host.write_file(target, formatted.encode('utf-8'))
    except FormatError as e:
        return _report(host, result, e)

    label = action_label(action)
    result.ok = True
    result.text = formatted
    if host.get_config('jsonFormatter', 'showSuccessToast', False):
        result.message = f"JSON {label} completed successfully."
        host.show_information(result.message)
    else:
        result.message = f"JSON {label} done"
        host.set_status_message(result.message, STATUS_TIMEOUT_MS)
    return result


def execute_command(host: EditorHost, command_id: str, target: str | None = None) -> CommandResult:
    """Dispatch a `jsonFormatter.*` command id; unknown ids raise KeyError."""
    return run_command(host, COMMANDS[command_id], target)
