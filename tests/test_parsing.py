#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the field grammar and line tokenizer

Covers numeric conversion in strict and compressed notation, the nuclide
grammar, and slicing of header and coefficient lines per layout.
"""

from __future__ import annotations

import pytest

from pyreaclib.exceptions import DecodeError, ErrorKind, ParseError
from pyreaclib.models.records import Format
from pyreaclib.utils.grammar import get_layout
from pyreaclib.utils.parsing import (
    float_reaclib,
    int_reaclib,
    parse_nuclide,
    split_coefficients,
    split_header,
)


class TestLayouts:
    """Column tables of both variants"""

    def test_header_min_length(self) -> None:
        assert get_layout(Format.REACLIB1).header.min_length == 64
        assert get_layout(Format.REACLIB2).header.min_length == 64

    def test_reaclib1_has_no_resonance_column(self) -> None:
        assert get_layout(Format.REACLIB1).header.resonance is None
        assert get_layout(Format.REACLIB2).header.resonance.start == 47

    def test_identifier_slots(self) -> None:
        spans = get_layout(2).header.identifiers
        assert len(spans) == 6
        assert spans[0].start == 5
        assert spans[-1].end == 35
        assert all(span.width == 5 for span in spans)

    def test_coefficient_spans(self) -> None:
        spans = get_layout("REACLIB2").coefficients.spans
        assert len(spans) == 7
        assert spans[-1].end == 91

    def test_compressed_numbers(self) -> None:
        assert get_layout(Format.REACLIB1).compressed_numbers
        assert not get_layout(Format.REACLIB2).compressed_numbers


class TestFloatReaclib:
    """Numeric token conversion"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("-6.781610e+00", -6.78161),
            ("  1.0E-03 ", 1.0e-3),
            ("42", 42.0),
            ("+.5", 0.5),
            ("3.", 3.0),
        ],
    )
    def test_strict(self, text: str, expected: float) -> None:
        assert float_reaclib(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "   ", "nan", "inf", "1_000", "1.2.3", "e5", "abc"])
    def test_strict_rejects(self, text: str) -> None:
        with pytest.raises(ParseError):
            float_reaclib(text)

    def test_strict_rejects_fortran_notation(self) -> None:
        with pytest.raises(ParseError):
            float_reaclib("1.23456D+03")
        with pytest.raises(ParseError):
            float_reaclib("1.23456-03")

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1.23456D+03", 1234.56),
            ("1.23456d-01", 0.123456),
            ("-6.781610-01", -0.678161),
            ("1.5+2", 150.0),
            ("-6.781610e+00", -6.78161),
        ],
    )
    def test_compressed(self, text: str, expected: float) -> None:
        assert float_reaclib(text, compressed=True) == pytest.approx(expected)

    def test_overflow_rejected(self) -> None:
        with pytest.raises(ParseError):
            float_reaclib("1.0e+999")


class TestIntReaclib:

    def test_valid(self) -> None:
        assert int_reaclib(" 11  ") == 11

    @pytest.mark.parametrize("text", ["", "1.0", "-1", "x", "٣"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ParseError):
            int_reaclib(text)


class TestParseNuclide:
    """Nuclide token grammar"""

    @pytest.mark.parametrize(
        "token",
        ["n", "p", "d", "t", "g", "e-", "e+", "he4", "c12", "fe56", "AL-6", "al*6", "Og294"],
    )
    def test_accepted(self, token: str) -> None:
        assert parse_nuclide(token) == token

    @pytest.mark.parametrize("token", ["xx4", "he", "4he", "c0", "fe1234", "", "q"])
    def test_rejected(self, token: str) -> None:
        with pytest.raises(ParseError):
            parse_nuclide(token)


class TestSplitHeader:
    """Header line slicing"""

    def test_fields(self, make_header) -> None:
        line = make_header(4, ["he4", "c12", "o16"], label="nac2", resonance="r",
                           reverse="v", q_value=7.16192)
        tokens = split_header(line, get_layout(2).header, 1)
        assert tokens.chapter == "4"
        assert tokens.identifiers == ("he4", "c12", "o16", "", "", "")
        assert tokens.label == "nac2"
        assert tokens.resonance == "r"
        assert tokens.reverse == "v"
        assert float(tokens.q_value) == pytest.approx(7.16192)

    def test_reaclib1_resonance_is_none(self, make_header) -> None:
        line = make_header(1, ["n", "p"], resonance="r")
        tokens = split_header(line, get_layout(1).header, 1)
        assert tokens.resonance is None

    def test_too_short(self, make_header) -> None:
        line = make_header(1, ["n", "p"])[:60]
        with pytest.raises(DecodeError) as info:
            split_header(line, get_layout(2).header, 7)
        assert info.value.kind is ErrorKind.LINE_TOO_SHORT
        assert info.value.line == 7
        assert info.value.expected == 64
        assert info.value.found == 60

    def test_trailing_content_ignored(self, make_header) -> None:
        line = make_header(1, ["n", "p"], q_value=1.0) + "   extra"
        tokens = split_header(line, get_layout(2).header, 1)
        assert float(tokens.q_value) == 1.0


class TestSplitCoefficients:
    """Coefficient line slicing"""

    def test_seven_fields(self, make_coefficients) -> None:
        line = make_coefficients([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0])
        fields = split_coefficients(line, get_layout(2).coefficients, 2)
        assert [float(f) for f in fields] == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0]

    def test_trailing_blanks_ignored(self, make_coefficients) -> None:
        line = make_coefficients([0.0] * 7) + "      "
        assert len(split_coefficients(line, get_layout(2).coefficients, 2)) == 7

    @pytest.mark.parametrize("count", [6, 8])
    def test_count_mismatch(self, make_coefficients, count: int) -> None:
        line = make_coefficients([0.0] * count)
        with pytest.raises(DecodeError) as info:
            split_coefficients(line, get_layout(2).coefficients, 2)
        assert info.value.kind is ErrorKind.COEFFICIENT_COUNT_MISMATCH
        assert info.value.expected == 7
        assert info.value.found == count
        assert info.value.line == 2

    def test_partial_field_counts_as_present(self, make_coefficients) -> None:
        line = make_coefficients([0.0] * 6) + " 1.0"
        fields = split_coefficients(line, get_layout(2).coefficients, 2)
        assert fields[-1] == "1.0"

    def test_empty_line(self) -> None:
        with pytest.raises(DecodeError) as info:
            split_coefficients("", get_layout(2).coefficients, 4)
        assert info.value.found == 0
