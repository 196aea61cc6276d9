#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Model invariant checks for reaclib sets

Every validation function raises :class:`~pyreaclib.exceptions.ValidationError`
when a constraint is violated.  The record decoder enforces the same rules
with line-level :class:`~pyreaclib.exceptions.DecodeError` kinds before a
model is ever built; these functions guard every *other* way of building a
:class:`~pyreaclib.models.records.Set` (by hand, from JSON, from HDF5).

Checked Constraints
-------------------
* Chapter number must be in the range 1 ≤ chapter ≤ 11.
* Reactant and product counts must match the chapter's arity.
* Exactly seven rate-fit coefficients.

Design Note
-----------
Validation functions accept plain integers, not model instances, and do
not import the ``models`` layer::

    utils.validation ← models ← utils.grammar ← readers ← converters
"""

from __future__ import annotations

import logging

from pyreaclib.exceptions import ValidationError
from pyreaclib.utils.constants import (
    CHAPTER_ARITY,
    MAX_CHAPTER,
    MIN_CHAPTER,
    N_COEFFICIENTS,
)

logger = logging.getLogger(__name__)


def validate_chapter(chapter: int) -> None:
    """Verify that *chapter* is a known chapter number

    Raises
    ------
    ValidationError
        If *chapter* is outside the range [1, 11].

    Examples
    --------
    >>> validate_chapter(5)
    >>> validate_chapter(12)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pyreaclib.exceptions.ValidationError: ...
    """
    if chapter not in CHAPTER_ARITY:
        raise ValidationError(
            f"Chapter {chapter} is outside the valid range "
            f"[{MIN_CHAPTER}, {MAX_CHAPTER}]."
        )


def validate_arity(chapter: int, n_reactants: int, n_products: int) -> None:
    """Verify that reactant/product counts agree with *chapter*

    Parameters
    ----------
    chapter : int
        A valid chapter number.
    n_reactants, n_products : int
        Counts found in the reaction.

    Raises
    ------
    ValidationError
        If the chapter is invalid or the counts differ from
        :data:`~pyreaclib.utils.constants.CHAPTER_ARITY`.
    """
    validate_chapter(chapter)
    expected = CHAPTER_ARITY[chapter]
    if (n_reactants, n_products) != expected:
        raise ValidationError(
            f"Chapter {chapter} requires {expected[0]} reactant(s) and "
            f"{expected[1]} product(s), got {n_reactants} and {n_products}."
        )


def validate_coefficient_count(count: int) -> None:
    """Verify that exactly seven rate-fit coefficients are present"""
    if count != N_COEFFICIENTS:
        raise ValidationError(
            f"Expected {N_COEFFICIENTS} coefficients, got {count}."
        )


def validate_set_fields(
    chapter: int,
    n_reactants: int,
    n_products: int,
    n_coefficients: int,
) -> None:
    """Run every set-level check

    Raises
    ------
    ValidationError
        If any sub-check fails.
    """
    validate_arity(chapter, n_reactants, n_products)
    validate_coefficient_count(n_coefficients)
    logger.debug(
        "Set fields passed validation (chapter=%d, %d -> %d).",
        chapter, n_reactants, n_products,
    )
