"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Failure taxonomy for a single format invocation.

Every failure is terminal for its invocation: nothing is retried and nothing
is partially written. `severity` decides whether the command layer reports it
as a warning or an error.
"""
from __future__ import annotations


class FormatError(Exception):
    severity = 'error'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NoTarget(FormatError):
    severity = 'warning'

    def __init__(self, message: str = 'No file selected.'):
        super().__init__(message)


class UnsupportedFileType(FormatError):
    severity = 'warning'

    def __init__(self, message: str = 'File must be a JSON or JSONC file.'):
        super().__init__(message)


class InvalidJson(FormatError):
    """Text did not parse, even after the comment-stripping fallback.

    `message` is the underlying parser message; `str()` gives the text shown
    to the user.
    """

    def __str__(self) -> str:
        return f"Invalid JSON: {self.message}"


class EditApplicationFailure(FormatError):

    def __init__(self, message: str = 'Failed to apply formatting.'):
        super().__init__(message)
