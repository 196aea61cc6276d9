#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Record decoder: one header line + one coefficient line → one Set

The decoder is a pure function.  It slices both lines with the layout of
the requested :class:`~pyreaclib.models.records.Format`, checks every field
in a fixed order, and either returns a
:class:`~pyreaclib.models.records.Set` or raises a
:class:`~pyreaclib.exceptions.DecodeError` that names the failing line and
field.

Check Order
-----------
1. Header length (``LINE_TOO_SHORT``).
2. Chapter number 1–11 (``INVALID_CHAPTER``).
3. Identifier slots used exactly as the chapter's arity requires
   (``UNEXPECTED_IDENTIFIER``).
4. Nuclide grammar of every used slot (``UNKNOWN_NUCLIDE``).
5. Resonance and reverse flags (``INVALID_FLAG``).
6. Q-value (``INVALID_NUMBER``).
7. Coefficient line slice count (``COEFFICIENT_COUNT_MISMATCH``) and
   values (``INVALID_NUMBER``).

Errors on the coefficient line carry the coefficient line's own number,
i.e. one past the header.
"""

from __future__ import annotations

import logging

from pyreaclib.exceptions import DecodeError, ErrorKind, ParseError
from pyreaclib.models.records import Format, Reaction, Resonance, Set
from pyreaclib.utils.constants import CHAPTER_ARITY
from pyreaclib.utils.grammar import get_layout
from pyreaclib.utils.parsing import (
    HeaderTokens,
    float_reaclib,
    int_reaclib,
    parse_nuclide,
    split_coefficients,
    split_header,
)

logger = logging.getLogger(__name__)

REVERSE_FLAG: str = "v"
"""Character marking a rate derived from its reverse by detailed balance."""


def _decode_chapter(tokens: HeaderTokens, line_number: int) -> int:
    try:
        chapter = int_reaclib(tokens.chapter)
    except ParseError as exc:
        raise DecodeError(
            ErrorKind.INVALID_CHAPTER, line_number, value=tokens.chapter
        ) from exc
    if chapter not in CHAPTER_ARITY:
        raise DecodeError(ErrorKind.INVALID_CHAPTER, line_number, value=tokens.chapter)
    return chapter


def _decode_identifiers(
    tokens: HeaderTokens,
    chapter: int,
    line_number: int,
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    n_reactants, n_products = CHAPTER_ARITY[chapter]
    n_used = n_reactants + n_products

    for index, token in enumerate(tokens.identifiers):
        if (index < n_used) != bool(token):
            raise DecodeError(
                ErrorKind.UNEXPECTED_IDENTIFIER,
                line_number,
                index=index,
                value=token,
            )

    used = tokens.identifiers[:n_used]
    for index, token in enumerate(used):
        try:
            parse_nuclide(token)
        except ParseError as exc:
            raise DecodeError(
                ErrorKind.UNKNOWN_NUCLIDE,
                line_number,
                index=index,
                value=token,
            ) from exc

    return used[:n_reactants], used[n_reactants:]


def _decode_flags(tokens: HeaderTokens, line_number: int) -> tuple[Resonance, bool]:
    resonance = Resonance.NON_RESONANT
    if tokens.resonance is not None:
        try:
            resonance = Resonance.from_flag(tokens.resonance)
        except ValueError as exc:
            raise DecodeError(
                ErrorKind.INVALID_FLAG,
                line_number,
                field="resonance",
                value=tokens.resonance,
            ) from exc

    if tokens.reverse not in ("", REVERSE_FLAG):
        raise DecodeError(
            ErrorKind.INVALID_FLAG,
            line_number,
            field="reverse",
            value=tokens.reverse,
        )
    return resonance, tokens.reverse == REVERSE_FLAG


def decode_record(
    header_line: str,
    coefficient_line: str,
    fmt: Format | int | str,
    *,
    line_number: int = 1,
) -> Set:
    """Decode one two-line reaclib record

    Parameters
    ----------
    header_line : str
        Line carrying chapter, identifiers, label, flags and Q-value,
        without its newline.
    coefficient_line : str
        Line carrying the seven rate-fit coefficients, without its newline.
    fmt : Format | int | str
        Layout variant to apply.
    line_number : int, optional
        1-based number of *header_line* in its source.  Default 1.

    Returns
    -------
    Set
        The validated record.

    Raises
    ------
    DecodeError
        On the first field that violates the grammar (see module docs for
        the check order).

    Examples
    --------
    >>> header = "1        n    p" + " " * 28 + "wc12" + " " * 5 + " 7.82300e-01"
    >>> coeffs = "-6.781610e+00" + " 0.000000e+00" * 6
    >>> s = decode_record(header, coeffs, Format.REACLIB2)
    >>> s.chapter, s.reactants, s.products, s.q_value
    (1, ('n',), ('p',), 0.7823)
    """
    layout = get_layout(fmt)
    coefficient_line_number = line_number + 1

    tokens = split_header(header_line, layout.header, line_number)
    chapter = _decode_chapter(tokens, line_number)
    reactants, products = _decode_identifiers(tokens, chapter, line_number)
    resonance, reverse = _decode_flags(tokens, line_number)

    try:
        q_value = float_reaclib(tokens.q_value, compressed=layout.compressed_numbers)
    except ParseError as exc:
        raise DecodeError(
            ErrorKind.INVALID_NUMBER,
            line_number,
            field="q_value",
            value=tokens.q_value,
        ) from exc

    fields = split_coefficients(
        coefficient_line, layout.coefficients, coefficient_line_number
    )
    coefficients = []
    for index, text in enumerate(fields):
        try:
            coefficients.append(
                float_reaclib(text, compressed=layout.compressed_numbers)
            )
        except ParseError as exc:
            raise DecodeError(
                ErrorKind.INVALID_NUMBER,
                coefficient_line_number,
                field="coefficient",
                index=index,
                value=text,
            ) from exc

    reaction = Reaction(
        reactants=reactants,
        products=products,
        label=tokens.label,
        resonance=resonance,
        reverse=reverse,
    )
    record = Set(
        reaction=reaction,
        chapter=chapter,
        q_value=q_value,
        coefficients=tuple(coefficients),
    )
    logger.debug("Decoded set at line %d: %s (chapter %d)", line_number, reaction, chapter)
    return record
