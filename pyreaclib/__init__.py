#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyREACLIB - Python library for reading REACLIB nuclear reaction rates

Parse the fixed-column REACLIB 1 and REACLIB 2 rate libraries into typed
sets of rate-fit coefficients, one set per two-line record, and convert
them to JSON or HDF5.

Pipeline
--------
1. **Check** a file and list malformed records:
   ``python -m pyreaclib.cli check reaclib.dat --format 2``

2. **Group** sets by reaction:
   ``python -m pyreaclib.cli group reaclib.dat --format 2``

3. **Export** to JSON or HDF5:
   ``python -m pyreaclib.cli json reaclib.dat --format 2 -o sets.json``
   ``python -m pyreaclib.cli hdf5 reaclib.dat sets.h5 --format 2``

Modules
-------
readers
    Record decoder, streaming iterator and grouping helpers.
models
    Typed dataclass records returned by the readers.
converters
    JSON and HDF5 interchange.
utils
    Column layouts, parsing helpers and validation logic.

Examples
--------
>>> from pyreaclib import Format, SetIterator, DecodeError
>>> with open("reaclib.dat") as fh:
...     for item in SetIterator(fh, Format.REACLIB2):
...         if isinstance(item, DecodeError):
...             print(item)
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from pyreaclib.models.records import Format, Reaction, Resonance, Set
from pyreaclib.readers.decoder import decode_record
from pyreaclib.readers.stream import DecodeResult, SetIterator, iter_sets
from pyreaclib.readers.collection import read_reaclib, to_dict
from pyreaclib.exceptions import (
    PyReaclibError,
    ParseError,
    DecodeError,
    ErrorKind,
    ValidationError,
    FileFormatError,
    ConversionError,
)

__all__ = [
    # Version
    "__version__",
    # Models
    "Format",
    "Resonance",
    "Reaction",
    "Set",
    # Readers
    "decode_record",
    "DecodeResult",
    "SetIterator",
    "iter_sets",
    "to_dict",
    "read_reaclib",
    # Exceptions
    "PyReaclibError",
    "ParseError",
    "DecodeError",
    "ErrorKind",
    "ValidationError",
    "FileFormatError",
    "ConversionError",
]
