#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities for parsing and validation

This sub-package centralises the column layouts, the fixed-width field
helpers and the model checks so that the decoder only strings them
together.
"""

from __future__ import annotations
