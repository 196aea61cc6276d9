#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the PyREACLIB package

All exceptions raised by PyREACLIB inherit from :class:`PyReaclibError`,
making it possible to catch every library-specific error with a single
``except`` clause while still allowing fine-grained handling when needed.

Exception Hierarchy
-------------------
::

    PyReaclibError
    ├── ParseError          # Malformed token or line content
    │   └── DecodeError     # A reaclib record failed to decode (kind + line)
    ├── ValidationError     # Model invariants violated
    ├── FileFormatError     # Missing or unreadable input file
    └── ConversionError     # HDF5 / JSON interchange failures

:class:`DecodeError` is special: the streaming iterator *yields* it as the
element for a failed record instead of raising it, so one bad record does
not abort the whole stream.
"""

from __future__ import annotations

import enum


class PyReaclibError(Exception):
    """Base exception for all PyREACLIB errors

    Every exception raised by PyREACLIB is a subclass of this type.
    Catching ``PyReaclibError`` therefore catches any library-specific
    failure while still allowing standard Python exceptions (``KeyError``,
    ``TypeError``, etc.) to propagate normally.
    """


class ParseError(PyReaclibError):
    """Raised when a token or line contains malformed or unparseable content

    Low-level helpers in :mod:`pyreaclib.utils.parsing` raise this for a
    single field (a number that is not a number, a nuclide that is not a
    nuclide).  The record decoder wraps it in a :class:`DecodeError` that
    adds the line number and the failure kind.
    """


class ErrorKind(enum.Enum):
    """Discriminates the ways a reaclib record can fail to decode"""

    IO = "io"
    LINE_TOO_SHORT = "line_too_short"
    UNEXPECTED_EOF = "unexpected_eof"
    INVALID_CHAPTER = "invalid_chapter"
    UNEXPECTED_IDENTIFIER = "unexpected_identifier"
    UNKNOWN_NUCLIDE = "unknown_nuclide"
    INVALID_NUMBER = "invalid_number"
    COEFFICIENT_COUNT_MISMATCH = "coefficient_count_mismatch"
    INVALID_FLAG = "invalid_flag"


_KIND_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.IO: "read error",
    ErrorKind.LINE_TOO_SHORT: "line too short",
    ErrorKind.UNEXPECTED_EOF: "header line has no coefficient line",
    ErrorKind.INVALID_CHAPTER: "invalid chapter",
    ErrorKind.UNEXPECTED_IDENTIFIER: "unexpected identifier slot content",
    ErrorKind.UNKNOWN_NUCLIDE: "unknown nuclide",
    ErrorKind.INVALID_NUMBER: "invalid number",
    ErrorKind.COEFFICIENT_COUNT_MISMATCH: "wrong number of coefficients",
    ErrorKind.INVALID_FLAG: "invalid flag",
}


class DecodeError(ParseError):
    """A reaclib record failed to decode

    Parameters
    ----------
    kind : ErrorKind
        What went wrong.
    line : int
        1-based physical line number where the failure occurred.
    field : str | None, optional
        Name of the offending field (``"q_value"``, ``"coefficient"``,
        ``"resonance"``, ...).
    index : int | None, optional
        Position of the offending identifier slot or coefficient.
    value : str | None, optional
        The raw token that failed.
    expected, found : int | None, optional
        Counts for :attr:`ErrorKind.COEFFICIENT_COUNT_MISMATCH` and
        :attr:`ErrorKind.LINE_TOO_SHORT`.
    detail : str | None, optional
        Free-form extra context (e.g. the message of an underlying
        ``OSError``).

    Notes
    -----
    Every attribute is set once in ``__init__``; instances are treated as
    immutable values by the rest of the package.

    Examples
    --------
    >>> err = DecodeError(ErrorKind.INVALID_CHAPTER, line=3, value="12")
    >>> str(err)
    "line 3: invalid chapter (value='12')"
    """

    def __init__(
        self,
        kind: ErrorKind,
        line: int,
        *,
        field: str | None = None,
        index: int | None = None,
        value: str | None = None,
        expected: int | None = None,
        found: int | None = None,
        detail: str | None = None,
    ) -> None:
        self.kind = kind
        self.line = line
        self.field = field
        self.index = index
        self.value = value
        self.expected = expected
        self.found = found
        self.detail = detail
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []
        if self.field is not None:
            parts.append(f"field={self.field}")
        if self.index is not None:
            parts.append(f"index={self.index}")
        if self.value is not None:
            parts.append(f"value={self.value!r}")
        if self.expected is not None:
            parts.append(f"expected={self.expected}")
        if self.found is not None:
            parts.append(f"found={self.found}")
        if self.detail:
            parts.append(self.detail)

        message = f"line {self.line}: {_KIND_MESSAGES[self.kind]}"
        if parts:
            message += f" ({', '.join(parts)})"
        return message

    def __repr__(self) -> str:
        return f"DecodeError(kind={self.kind.name}, line={self.line})"

    def __reduce__(self):
        details = {
            "field": self.field,
            "index": self.index,
            "value": self.value,
            "expected": self.expected,
            "found": self.found,
            "detail": self.detail,
        }
        return _rebuild_decode_error, (self.kind, self.line, details)


def _rebuild_decode_error(kind: ErrorKind, line: int, details: dict) -> DecodeError:
    """Unpickling hook for :class:`DecodeError` (keyword-only fields)"""
    return DecodeError(kind, line, **details)


class ValidationError(PyReaclibError):
    """Raised when a model is constructed with inconsistent content

    Checked when a :class:`~pyreaclib.models.records.Set` is built outside
    the decoder (for example from a JSON or HDF5 file): chapter range,
    chapter/arity consistency, and the coefficient count.

    Parameters
    ----------
    message : str
        Description of the failed check, including the field name,
        expected constraint, and actual value.
    """


class FileFormatError(PyReaclibError):
    """Raised when an input file cannot be opened as reaclib text

    This is raised *before* any record is decoded, e.g. when the path
    does not exist or is a directory.

    Parameters
    ----------
    message : str
        Description of the problem, including the path.
    """


class ConversionError(PyReaclibError):
    """Raised when writing or reading an interchange file fails

    This covers HDF5 files (permission denied, existing file without
    ``overwrite``, missing datasets) and malformed JSON documents.

    Parameters
    ----------
    message : str
        Description of the conversion failure and the target path.
    """
