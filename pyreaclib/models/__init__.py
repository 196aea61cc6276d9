#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for decoded reaclib data

All models are frozen ``dataclasses``.  They are the sole output format of
the reader layer and the sole input format accepted by the converter layer.
"""

from __future__ import annotations

from pyreaclib.models.records import Format, Reaction, Resonance, Set

__all__ = ["Format", "Resonance", "Reaction", "Set"]
