#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Group decoded sets by reaction

A rate is often described by several sets (resonant and non-resonant
pieces, fits over different temperature ranges).  :func:`to_dict` folds a
whole stream into ``{Reaction: [Set, ...]}``.  It is fail-fast: the first
:class:`~pyreaclib.exceptions.DecodeError` is raised and nothing is
returned.  Drive :class:`~pyreaclib.readers.stream.SetIterator` directly
when partial results are wanted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pyreaclib.exceptions import DecodeError
from pyreaclib.models.records import Format, Reaction, Set
from pyreaclib.readers.stream import SetIterator, iter_sets

logger = logging.getLogger(__name__)


def _group(results: Iterable[Set | DecodeError]) -> dict[Reaction, list[Set]]:
    grouped: dict[Reaction, list[Set]] = {}
    n_sets = 0
    for item in results:
        if isinstance(item, DecodeError):
            raise item
        grouped.setdefault(item.reaction, []).append(item)
        n_sets += 1

    logger.debug("Grouped %d sets into %d reactions", n_sets, len(grouped))
    return grouped


def to_dict(source: Iterable[str], fmt: Format | int | str) -> dict[Reaction, list[Set]]:
    """Decode every record of *source* and group the sets by reaction

    Parameters
    ----------
    source : Iterable[str]
        Line source, e.g. an open text file.
    fmt : Format | int | str
        Layout variant.

    Returns
    -------
    dict[Reaction, list[Set]]
        Keys in first-seen order; each list in file order.

    Raises
    ------
    DecodeError
        The first record failure of any kind.  Sets grouped so far are
        discarded.

    Examples
    --------
    >>> to_dict([], 2)
    {}
    """
    return _group(SetIterator(source, fmt))


def read_reaclib(path: Path | str, fmt: Format | int | str) -> dict[Reaction, list[Set]]:
    """Open a reaclib file and group its sets by reaction

    Raises
    ------
    FileFormatError
        If *path* does not name a readable file.
    DecodeError
        The first record failure.
    """
    return _group(iter_sets(path, fmt))
