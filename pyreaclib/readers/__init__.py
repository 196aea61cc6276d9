#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Readers for reaclib rate files

* :func:`~pyreaclib.readers.decoder.decode_record` — one two-line record
* :class:`~pyreaclib.readers.stream.SetIterator` — lazy stream of results
* :func:`~pyreaclib.readers.collection.to_dict` — fail-fast grouping
"""

from __future__ import annotations

from pyreaclib.readers.decoder import decode_record
from pyreaclib.readers.stream import DecodeResult, SetIterator, iter_sets
from pyreaclib.readers.collection import read_reaclib, to_dict

__all__ = [
    "decode_record",
    "DecodeResult",
    "SetIterator",
    "iter_sets",
    "to_dict",
    "read_reaclib",
]
