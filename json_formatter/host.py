"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

The editor surface the formatter talks to.

`EditorHost` is the seam between the pure core and whatever owns documents,
files, settings and notifications. The base class does file I/O on disk and
keeps a list of open documents; subclasses decide how notifications are
shown. `FileSystemHost` is the command-line host: no editor, messages on
stderr.
"""
from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from .line_endings import LF
from .settings import Settings

# (start, end) character offsets into a document's text
Range = Tuple[int, int]


@dataclass
class Document:
    path: str
    text: str
    eol: str = LF
    language_id: str = 'json'
    is_dirty: bool = False
    save_count: int = 0

    def get_text(self, rng: Range | None = None) -> str:
        if rng is None:
            return self.text
        start, end = rng
        return self.text[start:end]

    def full_range(self) -> Range:
        return (0, len(self.text))

    def replace(self, rng: Range, new_text: str) -> None:
        start, end = rng
        if not 0 <= start <= end <= len(self.text):
            raise ValueError(f"range {rng!r} outside document of length {len(self.text)}")
        self.text = self.text[:start] + new_text + self.text[end:]
        self.is_dirty = True

    def save(self) -> None:
        Path(self.path).write_text(self.text, encoding='utf-8', newline='')
        self.is_dirty = False
        self.save_count += 1


@dataclass
class Editor:
    document: Document
    selection: Range | None = None
    insert_spaces: bool | None = None
    tab_size: int | None = None

    def has_selection(self) -> bool:
        return self.selection is not None and self.selection[0] != self.selection[1]


def same_path(a: str, b: str) -> bool:
    return os.path.normcase(os.path.abspath(a)) == os.path.normcase(os.path.abspath(b))


class EditorHost:
    """Documents, files, settings and notifications for one command run.

    Subclasses must override the four notification methods; the rest have
    working defaults for in-memory documents and files on disk.
    """

    def __init__(self, settings: Settings | None = None, documents: List[Document] | None = None,
                 editor: Editor | None = None):
        self.settings = settings if settings is not None else Settings()
        self.documents: List[Document] = list(documents or [])
        self.editor = editor
        if editor is not None and editor.document not in self.documents:
            self.documents.append(editor.document)

    # documents

    def active_editor(self) -> Editor | None:
        return self.editor

    def find_open_document(self, path: str) -> Document | None:
        for doc in self.documents:
            if same_path(doc.path, path):
                return doc
        return None

    def apply_edit(self, document: Document, rng: Range, text: str) -> bool:
        try:
            document.replace(rng, text)
        except ValueError:
            return False
        return True

    def save_document(self, document: Document) -> None:
        document.save()

    # files

    def read_file(self, path: str) -> bytes:
        return Path(path).read_bytes()

    def write_file(self, path: str, data: bytes) -> None:
        Path(path).write_bytes(data)

    # configuration

    def get_config(self, section: str, key: str, default=None):
        return self.settings.get(section, key, default)

    # notifications

    def show_warning(self, message: str) -> None:
        raise NotImplementedError

    def show_error(self, message: str) -> None:
        raise NotImplementedError

    def show_information(self, message: str) -> None:
        raise NotImplementedError

    def set_status_message(self, message: str, timeout_ms: int) -> None:
        raise NotImplementedError


class FileSystemHost(EditorHost):
    """Host for the command line: files on disk, messages on a text stream."""

    def __init__(self, settings: Settings | None = None, stream=None, quiet: bool = False):
        super().__init__(settings=settings)
        self.stream = stream if stream is not None else sys.stderr
        self.quiet = quiet

    def _emit(self, text: str) -> None:
        self.stream.write(text + '\n')
        self.stream.flush()

    def show_warning(self, message: str) -> None:
        self._emit(f"warning: {message}")

    def show_error(self, message: str) -> None:
        self._emit(f"error: {message}")

    def show_information(self, message: str) -> None:
        self._emit(message)

    def set_status_message(self, message: str, timeout_ms: int) -> None:
        # a terminal has no status bar; transient messages only when not quiet
        if not self.quiet:
            self._emit(message)
