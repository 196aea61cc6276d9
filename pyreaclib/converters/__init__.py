#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Interchange converters for decoded reaclib sets

* :mod:`~pyreaclib.converters.serialize`
    Plain dicts and JSON documents with stable field names.
* :mod:`~pyreaclib.converters.hdf5`
    Columnar HDF5 files.  Import it explicitly; it needs ``h5py``.
"""

from __future__ import annotations

from pyreaclib.converters.serialize import (
    reaction_from_dict,
    reaction_to_dict,
    set_from_dict,
    set_to_dict,
    sets_from_json,
    sets_to_json,
)

__all__ = [
    "reaction_to_dict",
    "reaction_from_dict",
    "set_to_dict",
    "set_from_dict",
    "sets_to_json",
    "sets_from_json",
]
