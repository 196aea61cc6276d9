#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Fixed-column field grammar for both reaclib variants

Each record is two physical lines.  Columns below are 0-based and
half-open, exactly as they are sliced in Python.

Header line
-----------
* **Columns 0–4**   (5 chars):  chapter number.
* **Columns 5–34**  (30 chars): six identifier slots, 5 chars each,
  reactants first, then products, right-aligned.
* **Columns 35–42** (8 chars):  unused.
* **Columns 43–46** (4 chars):  source label (e.g. ``wc12``).
* **Column  47**    (1 char):   resonance flag (REACLIB 2 only).
* **Column  48**    (1 char):   reverse-rate flag (``v``).
* **Columns 49–51** (3 chars):  unused.
* **Columns 52–63** (12 chars): Q-value (MeV).

Coefficient line
----------------
* **Columns 0–90** (91 chars): seven numeric fields, 13 chars each.

REACLIB 1 files predate the resonance column and were written by Fortran
code that may drop the exponent letter (``1.234-05``), so their numeric
fields are flagged as *compressed*.
"""

from __future__ import annotations

from dataclasses import dataclass

from pyreaclib.models.records import Format
from pyreaclib.utils.constants import N_COEFFICIENTS


@dataclass(frozen=True)
class FieldSpan:
    """A half-open column range ``[start, end)`` on a single line"""

    start: int
    end: int

    @property
    def width(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class HeaderLayout:
    """Column layout of the header line

    Parameters
    ----------
    chapter : FieldSpan
        Chapter number column range.
    identifiers : tuple[FieldSpan, ...]
        One span per identifier slot, in reading order.
    label : FieldSpan
        Source label column range.
    resonance : FieldSpan | None
        Resonance flag column, or ``None`` when the variant has none.
    reverse : FieldSpan
        Reverse-rate flag column.
    q_value : FieldSpan
        Q-value column range.
    """

    chapter: FieldSpan
    identifiers: tuple[FieldSpan, ...]
    label: FieldSpan
    resonance: FieldSpan | None
    reverse: FieldSpan
    q_value: FieldSpan

    @property
    def min_length(self) -> int:
        """End column of the right-most field; shorter lines are rejected."""
        spans = [self.chapter, self.label, self.reverse, self.q_value, *self.identifiers]
        if self.resonance is not None:
            spans.append(self.resonance)
        return max(span.end for span in spans)


@dataclass(frozen=True)
class CoefficientLayout:
    """Column layout of the coefficient line: ``count`` fields of ``width``"""

    count: int
    width: int

    @property
    def spans(self) -> tuple[FieldSpan, ...]:
        return tuple(
            FieldSpan(i * self.width, (i + 1) * self.width) for i in range(self.count)
        )


@dataclass(frozen=True)
class RecordLayout:
    """Complete two-line layout of one variant"""

    header: HeaderLayout
    coefficients: CoefficientLayout
    compressed_numbers: bool


# ---------------------------------------------------------------------------
# Shared column constants
# ---------------------------------------------------------------------------

IDENTIFIER_SLOTS: int = 6
"""Number of identifier slots on a header line."""

IDENTIFIER_WIDTH: int = 5
"""Width of one identifier slot."""

IDENTIFIER_START: int = 5
"""Column of the first identifier slot."""

COEFFICIENT_WIDTH: int = 13
"""Width of one rate-fit coefficient field."""


def _identifier_spans(start: int, width: int, count: int) -> tuple[FieldSpan, ...]:
    return tuple(
        FieldSpan(start + i * width, start + (i + 1) * width) for i in range(count)
    )


_REACLIB1_HEADER = HeaderLayout(
    chapter=FieldSpan(0, 5),
    identifiers=_identifier_spans(IDENTIFIER_START, IDENTIFIER_WIDTH, IDENTIFIER_SLOTS),
    label=FieldSpan(43, 47),
    resonance=None,
    reverse=FieldSpan(48, 49),
    q_value=FieldSpan(52, 64),
)

_REACLIB2_HEADER = HeaderLayout(
    chapter=FieldSpan(0, 5),
    identifiers=_identifier_spans(IDENTIFIER_START, IDENTIFIER_WIDTH, IDENTIFIER_SLOTS),
    label=FieldSpan(43, 47),
    resonance=FieldSpan(47, 48),
    reverse=FieldSpan(48, 49),
    q_value=FieldSpan(52, 64),
)

LAYOUTS: dict[Format, RecordLayout] = {
    Format.REACLIB1: RecordLayout(
        header=_REACLIB1_HEADER,
        coefficients=CoefficientLayout(count=N_COEFFICIENTS, width=COEFFICIENT_WIDTH),
        compressed_numbers=True,
    ),
    Format.REACLIB2: RecordLayout(
        header=_REACLIB2_HEADER,
        coefficients=CoefficientLayout(count=N_COEFFICIENTS, width=COEFFICIENT_WIDTH),
        compressed_numbers=False,
    ),
}
"""Layout table keyed by :class:`~pyreaclib.models.records.Format`."""


def get_layout(fmt: Format | int | str) -> RecordLayout:
    """Return the :class:`RecordLayout` for *fmt*

    Parameters
    ----------
    fmt : Format | int | str
        The reaclib variant.

    Returns
    -------
    RecordLayout
        Column tables for the header and coefficient lines.

    Examples
    --------
    >>> get_layout(Format.REACLIB2).header.min_length
    64
    >>> get_layout(Format.REACLIB1).header.resonance is None
    True
    """
    return LAYOUTS[Format.from_value(fmt)]
