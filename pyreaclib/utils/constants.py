#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Lookup tables used across PyREACLIB

Chapter arity, the nuclide-naming vocabulary, and the numeric constants of
the REACLIB rate parameterisation [1]_.  All tables are plain module-level
data so that lookups are O(1) and trivially importable from every layer.

References
----------
.. [1] Cyburt, R. H. et al. (2010). The JINA REACLIB Database: Its Recent
   Updates and Impact on Type-I X-ray Bursts. *ApJS*, 189, 240.
   Format help: https://reaclib.jinaweb.org/help.php?topic=reaclib_format
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Chapters
# ---------------------------------------------------------------------------

CHAPTER_ARITY: dict[int, tuple[int, int]] = {
    1:  (1, 1),   # e1 -> e2
    2:  (1, 2),   # e1 -> e2 + e3
    3:  (1, 3),   # e1 -> e2 + e3 + e4
    4:  (2, 1),   # e1 + e2 -> e3
    5:  (2, 2),   # e1 + e2 -> e3 + e4
    6:  (2, 3),   # e1 + e2 -> e3 + e4 + e5
    7:  (2, 4),   # e1 + e2 -> e3 + e4 + e5 + e6
    8:  (3, 1),   # e1 + e2 + e3 -> e4
    9:  (3, 2),   # e1 + e2 + e3 -> e4 + e5
    10: (4, 2),   # e1 + e2 + e3 + e4 -> e5 + e6
    11: (1, 4),   # e1 -> e2 + e3 + e4 + e5
}
"""Mapping from chapter number to ``(n_reactants, n_products)``.

Older files used chapter 8 for both 3 -> 1 and 3 -> 2 reactions; chapter 9
now carries the second kind and the table follows the current convention.
"""

MIN_CHAPTER: int = min(CHAPTER_ARITY)
"""Smallest valid chapter number."""

MAX_CHAPTER: int = max(CHAPTER_ARITY)
"""Largest valid chapter number."""

N_COEFFICIENTS: int = 7
"""Number of rate-fit parameters ``a0 … a6`` in every set."""

MAX_LABEL_LENGTH: int = 4
"""Width of the source label field (e.g. ``"wc12"``, ``"nacr"``)."""


# ---------------------------------------------------------------------------
# Nuclide vocabulary
# ---------------------------------------------------------------------------

ELEMENT_SYMBOLS: tuple[str, ...] = (
    "n",
    "h", "he", "li", "be", "b", "c", "n", "o", "f", "ne",
    "na", "mg", "al", "si", "p", "s", "cl", "ar", "k", "ca",
    "sc", "ti", "v", "cr", "mn", "fe", "co", "ni", "cu", "zn",
    "ga", "ge", "as", "se", "br", "kr", "rb", "sr", "y", "zr",
    "nb", "mo", "tc", "ru", "rh", "pd", "ag", "cd", "in", "sn",
    "sb", "te", "i", "xe", "cs", "ba", "la", "ce", "pr", "nd",
    "pm", "sm", "eu", "gd", "tb", "dy", "ho", "er", "tm", "yb",
    "lu", "hf", "ta", "w", "re", "os", "ir", "pt", "au", "hg",
    "tl", "pb", "bi", "po", "at", "rn", "fr", "ra", "ac", "th",
    "pa", "u", "np", "pu", "am", "cm", "bk", "cf", "es", "fm",
    "md", "no", "lr", "rf", "db", "sg", "bh", "hs", "mt", "ds",
    "rg", "cn", "nh", "fl", "mc", "lv", "ts", "og",
)
"""Lower-case element symbols indexed by atomic number (index 0 = neutron)."""

SYMBOL_TO_Z: dict[str, int] = {
    sym: z for z, sym in enumerate(ELEMENT_SYMBOLS) if z > 0
}
"""Reverse mapping: lower-case element symbol → atomic number Z."""

SPECIAL_PARTICLES: dict[str, str] = {
    "n": "neutron",
    "p": "proton",
    "d": "deuteron",
    "t": "triton",
    "e-": "electron",
    "e+": "positron",
    "g": "photon",
}
"""Single-token particle names accepted in identifier slots."""

ISOMER_TOKENS: dict[str, str] = {
    "al-6": "26Al ground state",
    "al*6": "26Al isomeric state",
}
"""Reaclib's spellings of the thermalised 26Al levels."""

MAX_MASS_DIGITS: int = 3
"""Longest mass number that fits a 5-column identifier slot."""


# ---------------------------------------------------------------------------
# Rate parameterisation
# ---------------------------------------------------------------------------

RATE_EXPONENT_DENOMINATOR: float = 3.0
"""Parameters ``a1 … a5`` multiply ``T9 ** ((2i - 5) / 3)``."""

Q_VALUE_UNITS: str = "MeV"
"""Units of the Q-value field."""

TEMPERATURE_UNITS: str = "GK"
"""Units of the temperature argument to :meth:`Set.rate`."""
