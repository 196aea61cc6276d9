#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared reaclib parsing helpers for the PyREACLIB package

All low-level text handling lives here: slicing a physical line into
fixed-width fields, numeric conversion, and nuclide-token checks.  The
record decoder in :mod:`pyreaclib.readers.decoder` only strings these
together; none of the column arithmetic is repeated elsewhere.

Numeric Notation
----------------
REACLIB 2 writes every number as ``%13.6e`` (e.g. ``-6.781610e+00``).
REACLIB 1 files were produced by Fortran and may use ``D`` as the exponent
marker, or omit the marker when the exponent sign follows the mantissa
directly (``-6.781610-01``).  :func:`float_reaclib` normalises both when
the layout asks for it and otherwise accepts only the strict form.
Python extras such as ``nan``, ``inf`` and digit underscores are never
accepted.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from pyreaclib.exceptions import DecodeError, ErrorKind, ParseError
from pyreaclib.utils.constants import (
    ISOMER_TOKENS,
    MAX_MASS_DIGITS,
    SPECIAL_PARTICLES,
    SYMBOL_TO_Z,
)
from pyreaclib.utils.grammar import CoefficientLayout, FieldSpan, HeaderLayout

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Token patterns
# ---------------------------------------------------------------------------

NUMBER_PATTERN: re.Pattern[str] = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
)
"""Strict decimal / scientific notation accepted for every numeric field."""

_IMPLICIT_EXPONENT: re.Pattern[str] = re.compile(
    r"^([+-]?(?:\d+(?:\.\d*)?|\.\d+))([+-]\d+)$"
)

NUCLIDE_PATTERN: re.Pattern[str] = re.compile(
    rf"^([a-z]{{1,2}})(\d{{1,{MAX_MASS_DIGITS}}})$"
)
"""Element symbol followed by a mass number, e.g. ``he4`` or ``fe56``."""


# ---------------------------------------------------------------------------
# Numeric conversion
# ---------------------------------------------------------------------------

def float_reaclib(s: str, *, compressed: bool = False) -> float:
    """Convert a reaclib numeric field to a Python float

    Parameters
    ----------
    s : str
        A field slice.  May contain leading/trailing whitespace.
    compressed : bool, optional
        Accept Fortran notation: ``D`` for ``E`` and an implicit exponent
        marker before a trailing signed exponent.

    Returns
    -------
    float
        The converted value.

    Raises
    ------
    ParseError
        If the field is blank or does not match the numeric grammar.

    Notes
    -----
    Conversion strategy in compressed mode:

    1. Replace ``D``/``d`` with ``E``.
    2. If no ``E`` is present and the token ends in ``[+-]digits`` after a
       mantissa, insert ``E`` before that sign.
    3. Match :data:`NUMBER_PATTERN` and call ``float()``.

    Examples
    --------
    >>> float_reaclib(" -6.781610e+00")
    -6.78161
    >>> float_reaclib(" 1.23456-03", compressed=True)
    0.00123456
    >>> float_reaclib(" 1.23456D+03", compressed=True)
    1234.56
    """
    t = s.strip()
    if compressed:
        t = t.replace("D", "E").replace("d", "E")
        if "E" not in t.upper():
            m = _IMPLICIT_EXPONENT.match(t)
            if m is not None:
                t = f"{m.group(1)}E{m.group(2)}"

    if not NUMBER_PATTERN.fullmatch(t):
        raise ParseError(f"Cannot convert reaclib field {s!r} to float")

    value = float(t)
    if math.isinf(value):
        raise ParseError(f"Reaclib field {s!r} overflows a double")
    return value


def int_reaclib(s: str) -> int:
    """Convert an unsigned integer field (the chapter number)

    Raises
    ------
    ParseError
        If the stripped field is empty or contains anything but ASCII digits.

    Examples
    --------
    >>> int_reaclib("11   ")
    11
    """
    t = s.strip()
    if not (t.isascii() and t.isdigit()):
        raise ParseError(f"Cannot convert reaclib field {s!r} to int")
    return int(t)


# ---------------------------------------------------------------------------
# Nuclide tokens
# ---------------------------------------------------------------------------

def parse_nuclide(token: str) -> str:
    """Check *token* against the nuclide naming grammar

    Accepted forms are the special particles (``n``, ``p``, ``d``, ``t``,
    ``e-``, ``e+``, ``g``), the 26Al level tokens (``al-6``, ``al*6``),
    and an element symbol followed by a positive mass number (``he4``,
    ``c12``, ``fe56``).  Matching is case-insensitive; the token is
    returned unchanged.

    Raises
    ------
    ParseError
        If the token is not a recognised nuclide.

    Examples
    --------
    >>> parse_nuclide("he4")
    'he4'
    >>> parse_nuclide("xx4")  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pyreaclib.exceptions.ParseError: ...
    """
    key = token.strip().lower()
    if key in SPECIAL_PARTICLES or key in ISOMER_TOKENS:
        return token

    m = NUCLIDE_PATTERN.match(key)
    if m is None or m.group(1) not in SYMBOL_TO_Z or int(m.group(2)) < 1:
        raise ParseError(f"Unknown nuclide {token!r}")
    return token


# ---------------------------------------------------------------------------
# Line tokenizer
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HeaderTokens:
    """Stripped field slices of one header line"""

    chapter: str
    identifiers: tuple[str, ...]
    label: str
    resonance: str | None
    reverse: str
    q_value: str


def slice_field(line: str, span: FieldSpan) -> str:
    """Return ``line[span.start:span.end]`` with surrounding blanks removed"""
    return line[span.start : span.end].strip()


def split_header(line: str, layout: HeaderLayout, line_number: int) -> HeaderTokens:
    """Slice a header line into its fields

    Parameters
    ----------
    line : str
        The physical line, without its newline.
    layout : HeaderLayout
        Column table of the active variant.
    line_number : int
        1-based line number used in error reports.

    Returns
    -------
    HeaderTokens
        One stripped substring per field.  ``resonance`` is ``None`` when
        the variant has no resonance column.

    Raises
    ------
    DecodeError
        ``LINE_TOO_SHORT`` if the line ends before the right-most field.
    """
    if len(line) < layout.min_length:
        raise DecodeError(
            ErrorKind.LINE_TOO_SHORT,
            line_number,
            expected=layout.min_length,
            found=len(line),
        )

    return HeaderTokens(
        chapter=slice_field(line, layout.chapter),
        identifiers=tuple(slice_field(line, span) for span in layout.identifiers),
        label=slice_field(line, layout.label),
        resonance=(
            slice_field(line, layout.resonance)
            if layout.resonance is not None
            else None
        ),
        reverse=slice_field(line, layout.reverse),
        q_value=slice_field(line, layout.q_value),
    )


def split_coefficients(
    line: str,
    layout: CoefficientLayout,
    line_number: int,
) -> tuple[str, ...]:
    """Slice a coefficient line into ``layout.count`` stripped fields

    The number of slices present is ``ceil(len(line.rstrip()) / width)``,
    so trailing blanks never matter while a missing or surplus field does.

    Raises
    ------
    DecodeError
        ``COEFFICIENT_COUNT_MISMATCH`` if the slice count differs from
        ``layout.count``.

    Examples
    --------
    >>> from pyreaclib.utils.grammar import CoefficientLayout
    >>> split_coefficients(" 1.0e+00 2.0e+00", CoefficientLayout(2, 8), 2)
    ('1.0e+00', '2.0e+00')
    """
    content = line.rstrip()
    found = math.ceil(len(content) / layout.width)
    if found != layout.count:
        raise DecodeError(
            ErrorKind.COEFFICIENT_COUNT_MISMATCH,
            line_number,
            expected=layout.count,
            found=found,
        )
    return tuple(slice_field(content, span) for span in layout.spans)
