#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for PyREACLIB tests

Provides synthetic reaclib records, built column by column, for testing
the tokenizer, the decoder, the streaming iterator and the converters
without requiring real library files.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from pyreaclib.models.records import Reaction, Resonance, Set


def build_header(
    chapter: int | str,
    nuclides: Sequence[str],
    *,
    label: str = "",
    resonance: str = "",
    reverse: str = "",
    q_value: float | str = 0.0,
) -> str:
    """Lay out a 64-column header line"""
    slots = "".join(f"{n:>5}" for n in nuclides).ljust(30)
    q_text = q_value if isinstance(q_value, str) else f"{q_value:12.5e}"
    return (
        f"{str(chapter):<5}{slots}{'':8}{label:<4}{resonance:1}{reverse:1}"
        f"{'':3}{q_text:>12}"
    )


def build_coefficients(values: Sequence[float | str]) -> str:
    """Lay out a coefficient line of 13-column fields"""
    return "".join(v.rjust(13) if isinstance(v, str) else f"{v:13.6e}" for v in values)


# -----------------------------------------------------------------------
# Line builders
# -----------------------------------------------------------------------

@pytest.fixture
def make_header() -> Callable[..., str]:
    return build_header


@pytest.fixture
def make_coefficients() -> Callable[[Sequence[float | str]], str]:
    return build_coefficients


# -----------------------------------------------------------------------
# Sample records
# -----------------------------------------------------------------------

NEUTRON_DECAY_COEFFICIENTS = (-6.781610, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
C12_AG_COEFFICIENTS = (
    2.546340e02, -1.840970e00, 1.034110e02, -4.205670e02,
    6.408740e01, -1.246240e01, 1.373030e02,
)
HE3_HE3_COEFFICIENTS = (
    2.477880e01, 0.0, -1.227700e01, -1.030000e-01,
    -6.499670e-02, 1.668670e-02, -6.666670e-01,
)


@pytest.fixture
def neutron_decay_lines() -> tuple[str, str]:
    """n -> p, chapter 1, weak rate"""
    return (
        build_header(1, ["n", "p"], label="wc12", resonance="w", q_value=0.7823),
        build_coefficients(NEUTRON_DECAY_COEFFICIENTS),
    )


@pytest.fixture
def reaclib2_text() -> str:
    """Four records, two of which belong to the same reaction"""
    lines = [
        build_header(1, ["n", "p"], label="wc12", resonance="w", q_value=0.7823),
        build_coefficients(NEUTRON_DECAY_COEFFICIENTS),
        build_header(4, ["he4", "c12", "o16"], label="nac2", resonance="r",
                     q_value=7.16192),
        build_coefficients(C12_AG_COEFFICIENTS),
        build_header(6, ["he3", "he3", "p", "p", "he4"],
                     label="nacr", q_value=12.86),
        build_coefficients(HE3_HE3_COEFFICIENTS),
        build_header(1, ["n", "p"], label="wc12", resonance="w", q_value=0.7823),
        build_coefficients((-7.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)),
    ]
    return "\n".join(lines) + "\n"


@pytest.fixture
def reaclib2_file(tmp_path, reaclib2_text: str):
    path = tmp_path / "reaclib2.dat"
    path.write_text(reaclib2_text, encoding="utf-8")
    return path


@pytest.fixture
def sample_set() -> Set:
    """He4(C12, g)O16 resonant set"""
    return Set(
        reaction=Reaction(
            reactants=("he4", "c12"),
            products=("o16",),
            label="nac2",
            resonance=Resonance.RESONANT,
        ),
        chapter=4,
        q_value=7.16192,
        coefficients=C12_AG_COEFFICIENTS,
    )


@pytest.fixture
def sample_sets(sample_set: Set) -> list[Set]:
    """Sets from several chapters, including a reverse rate"""
    return [
        Set(
            reaction=Reaction(("n",), ("p",), label="wc12", resonance=Resonance.WEAK),
            chapter=1,
            q_value=0.7823,
            coefficients=NEUTRON_DECAY_COEFFICIENTS,
        ),
        sample_set,
        Set(
            reaction=Reaction(("o16",), ("he4", "c12"), label="nac2", reverse=True),
            chapter=2,
            q_value=-7.16192,
            coefficients=C12_AG_COEFFICIENTS,
        ),
        Set(
            reaction=Reaction(("c12", "c12"), ("p", "p", "he4", "o16"), label="cf88"),
            chapter=7,
            q_value=1.5,
            coefficients=HE3_HE3_COEFFICIENTS,
        ),
    ]
