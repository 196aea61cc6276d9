#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Streaming iterator over reaclib records

:class:`SetIterator` pulls physical lines from any iterable of strings
(an open file, :class:`io.StringIO`, a list), pairs them into records, and
yields one element per record: the decoded
:class:`~pyreaclib.models.records.Set`, or the
:class:`~pyreaclib.exceptions.DecodeError` that record produced.

Errors are *yielded*, not raised, so a caller can log a bad record and keep
going::

    for item in SetIterator(fh, Format.REACLIB2):
        if isinstance(item, DecodeError):
            logger.warning("%s", item)
            continue
        use(item)

Only a failure of the line source itself (``OSError`` or a decoding error
while reading) ends the sequence early, after one ``IO`` element.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import BinaryIO, Union

from pyreaclib.exceptions import DecodeError, ErrorKind, FileFormatError
from pyreaclib.models.records import Format, Set
from pyreaclib.readers.decoder import decode_record

logger = logging.getLogger(__name__)

DecodeResult = Union[Set, DecodeError]
"""Type alias for one element of a :class:`SetIterator`."""


class SetIterator:
    """Lazy, forward-only sequence of decode results

    Parameters
    ----------
    source : Iterable[str]
        Produces one physical line per item.  Trailing ``\\n`` / ``\\r\\n``
        are removed.
    fmt : Format | int | str
        Layout variant; anything :meth:`Format.from_value` accepts.

    Notes
    -----
    * Blank lines in front of a header are skipped but still counted.
    * A header with no following line yields one ``UNEXPECTED_EOF`` and
      the sequence ends.
    * After a format error the next record is read from the line after the
      failed pair; earlier failures never affect later records.
    * There is no rewind.  Build a new instance over a fresh source.

    Examples
    --------
    >>> import io
    >>> text = (
    ...     "1        n    p" + " " * 28 + "wc12" + " " * 5 + " 7.82300e-01\\n"
    ...     + "-6.781610e+00" + " 0.000000e+00" * 6 + "\\n"
    ... )
    >>> results = list(SetIterator(io.StringIO(text), Format.REACLIB2))
    >>> len(results), results[0].products
    (1, ('p',))
    """

    def __init__(self, source: Iterable[str], fmt: Format | int | str) -> None:
        self.format = Format.from_value(fmt)
        self._lines: Iterator[str] = iter(source)
        self._line_number = 0
        self._finished = False

    @property
    def line_number(self) -> int:
        """Number of physical lines consumed so far."""
        return self._line_number

    def __iter__(self) -> SetIterator:
        return self

    def _read_line(self) -> str | None:
        """Return the next line without its newline, or ``None`` at the end

        Raises
        ------
        DecodeError
            ``IO`` if the source fails while producing the line.
        """
        try:
            line = next(self._lines)
        except StopIteration:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise DecodeError(
                ErrorKind.IO, self._line_number + 1, detail=str(exc)
            ) from exc

        self._line_number += 1
        return line.rstrip("\r\n")

    def __next__(self) -> DecodeResult:
        if self._finished:
            raise StopIteration

        try:
            header = self._read_line()
            while header is not None and not header.strip():
                header = self._read_line()
            if header is None:
                self._finished = True
                raise StopIteration
            header_number = self._line_number
            coefficients = self._read_line()
        except DecodeError as exc:
            logger.warning("Line source failed at line %d: %s", exc.line, exc.detail)
            self._finished = True
            return exc

        if coefficients is None:
            self._finished = True
            return DecodeError(ErrorKind.UNEXPECTED_EOF, header_number)

        try:
            return decode_record(
                header, coefficients, self.format, line_number=header_number
            )
        except DecodeError as exc:
            logger.debug("Record at line %d failed: %s", header_number, exc)
            return exc


def iter_sets(path: Path | str, fmt: Format | int | str) -> Iterator[DecodeResult]:
    """Open a reaclib file and iterate over its decode results

    The file is decoded as UTF-8 line by line and closed when the iterator
    is exhausted or discarded.  An undecodable line yields an ``IO``
    element at that line, after every record before it.

    Parameters
    ----------
    path : Path | str
        Filesystem path to the reaclib file.
    fmt : Format | int | str
        Layout variant.

    Returns
    -------
    Iterator[Set | DecodeError]
        One element per record, as produced by :class:`SetIterator`.

    Raises
    ------
    FileFormatError
        If *path* does not name a readable file.
    """
    filepath = Path(path)
    fmt = Format.from_value(fmt)
    logger.debug("Opening reaclib file: %s", filepath)

    if not filepath.is_file():
        raise FileFormatError(f"Reaclib file not found: {filepath}")

    try:
        fh = filepath.open("rb")
    except OSError as exc:
        raise FileFormatError(f"Failed to open {filepath}: {exc}") from exc

    return _iter_and_close(fh, fmt)


def _decoded_lines(fh: BinaryIO) -> Iterator[str]:
    """Decode one physical line at a time so a bad byte fails on its own line"""
    for raw in fh:
        yield raw.decode("utf-8")


def _iter_and_close(fh: BinaryIO, fmt: Format) -> Iterator[DecodeResult]:
    with fh:
        yield from SetIterator(_decoded_lines(fh), fmt)
