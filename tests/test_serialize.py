#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for dict and JSON interchange

Covers the stable field names, round trips through JSON, and rejection
of documents that break a set invariant.
"""

from __future__ import annotations

import json

import pytest

from pyreaclib.converters.serialize import (
    reaction_from_dict,
    reaction_to_dict,
    set_from_dict,
    set_to_dict,
    sets_from_json,
    sets_to_json,
)
from pyreaclib.exceptions import ConversionError, ValidationError
from pyreaclib.models.records import Reaction, Resonance, Set


class TestDicts:

    def test_reaction_fields(self, sample_set: Set) -> None:
        data = reaction_to_dict(sample_set.reaction)
        assert data == {
            "reactants": ["he4", "c12"],
            "products": ["o16"],
            "label": "nac2",
            "resonance": "RESONANT",
            "reverse": False,
        }

    def test_set_fields(self, sample_set: Set) -> None:
        data = set_to_dict(sample_set)
        assert set(data) == {"reaction", "chapter", "q_value", "coefficients"}
        assert data["chapter"] == 4
        assert len(data["coefficients"]) == 7

    def test_reaction_round_trip(self) -> None:
        rxn = Reaction(("o16",), ("he4", "c12"), label="nac2",
                       resonance=Resonance.S, reverse=True)
        assert reaction_from_dict(reaction_to_dict(rxn)) == rxn

    def test_set_round_trip(self, sample_set: Set) -> None:
        assert set_from_dict(set_to_dict(sample_set)) == sample_set


class TestInvalidDicts:

    def test_missing_field(self, sample_set: Set) -> None:
        data = set_to_dict(sample_set)
        del data["q_value"]
        with pytest.raises(ValidationError, match="q_value"):
            set_from_dict(data)

    def test_unknown_resonance(self, sample_set: Set) -> None:
        data = reaction_to_dict(sample_set.reaction)
        data["resonance"] = "r"
        with pytest.raises(ValidationError):
            reaction_from_dict(data)

    def test_reactants_not_a_list(self, sample_set: Set) -> None:
        data = reaction_to_dict(sample_set.reaction)
        data["reactants"] = "he4"
        with pytest.raises(ValidationError):
            reaction_from_dict(data)

    def test_arity_checked(self, sample_set: Set) -> None:
        data = set_to_dict(sample_set)
        data["chapter"] = 1
        with pytest.raises(ValidationError):
            set_from_dict(data)

    def test_coefficient_count_checked(self, sample_set: Set) -> None:
        data = set_to_dict(sample_set)
        data["coefficients"] = data["coefficients"][:6]
        with pytest.raises(ValidationError):
            set_from_dict(data)

    def test_non_numeric_coefficient(self, sample_set: Set) -> None:
        data = set_to_dict(sample_set)
        data["coefficients"][2] = "x"
        with pytest.raises(ValidationError):
            set_from_dict(data)

    def test_bool_chapter_rejected(self, sample_set: Set) -> None:
        data = set_to_dict(sample_set)
        data["chapter"] = True
        with pytest.raises(ValidationError):
            set_from_dict(data)

    def test_not_a_mapping(self) -> None:
        with pytest.raises(ValidationError):
            set_from_dict(["reaction"])


class TestJSON:

    def test_round_trip(self, sample_sets: list[Set]) -> None:
        text = sets_to_json(sample_sets, fmt=2)
        assert sets_from_json(text) == sample_sets

    def test_document_shape(self, sample_sets: list[Set]) -> None:
        document = json.loads(sets_to_json(sample_sets, fmt=1, indent=2))
        assert document["format"] == "REACLIB1"
        assert len(document["sets"]) == len(sample_sets)

    def test_format_optional(self) -> None:
        assert json.loads(sets_to_json([]))["format"] is None
        assert sets_from_json(sets_to_json([])) == []

    def test_invalid_json(self) -> None:
        with pytest.raises(ConversionError):
            sets_from_json("{not json")

    def test_unknown_format(self) -> None:
        with pytest.raises(ValidationError):
            sets_from_json('{"format": "REACLIB9", "sets": []}')

    def test_missing_sets(self) -> None:
        with pytest.raises(ValidationError):
            sets_from_json('{"format": "REACLIB2"}')
