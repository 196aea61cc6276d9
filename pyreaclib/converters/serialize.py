#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Plain-dict and JSON interchange for decoded sets

Field names are part of the public interface and do not change between
releases:

===========  =========================================================
Object       Keys
===========  =========================================================
Reaction     ``reactants``, ``products``, ``label``, ``resonance``,
             ``reverse``
Set          ``reaction``, ``chapter``, ``q_value``, ``coefficients``
Document     ``format``, ``sets``
===========  =========================================================

Enumerations are written by member name (``"REACLIB2"``,
``"NON_RESONANT"``).  Reading validates every object through the model
constructors, so a hand-edited document that breaks a set invariant is
rejected with :class:`~pyreaclib.exceptions.ValidationError`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pyreaclib.exceptions import ConversionError, ValidationError
from pyreaclib.models.records import Format, Reaction, Resonance, Set

logger = logging.getLogger(__name__)

_REACTION_KEYS = ("reactants", "products", "label", "resonance", "reverse")
_SET_KEYS = ("reaction", "chapter", "q_value", "coefficients")


def _require(data: Mapping[str, Any], keys: tuple[str, ...], what: str) -> None:
    if not isinstance(data, Mapping):
        raise ValidationError(f"{what} must be a mapping, got {type(data).__name__}.")
    missing = [k for k in keys if k not in data]
    if missing:
        raise ValidationError(f"{what} is missing field(s): {', '.join(missing)}.")


def _str_tuple(value: Any, what: str) -> tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ValidationError(f"{what} must be a list of strings.")
    if not all(isinstance(v, str) for v in value):
        raise ValidationError(f"{what} must be a list of strings.")
    return tuple(value)


# ---------------------------------------------------------------------------
# Reaction
# ---------------------------------------------------------------------------

def reaction_to_dict(reaction: Reaction) -> dict[str, Any]:
    """Return a JSON-compatible dict for *reaction*

    Examples
    --------
    >>> reaction_to_dict(Reaction(("n",), ("p",), label="wc12"))["resonance"]
    'NON_RESONANT'
    """
    return {
        "reactants": list(reaction.reactants),
        "products": list(reaction.products),
        "label": reaction.label,
        "resonance": reaction.resonance.name,
        "reverse": reaction.reverse,
    }


def reaction_from_dict(data: Mapping[str, Any]) -> Reaction:
    """Build a :class:`Reaction` from :func:`reaction_to_dict` output

    Raises
    ------
    ValidationError
        If a field is missing or has the wrong type.
    """
    _require(data, _REACTION_KEYS, "Reaction")

    try:
        resonance = Resonance[data["resonance"]]
    except (KeyError, TypeError) as exc:
        raise ValidationError(
            f"Unknown resonance {data['resonance']!r}."
        ) from exc

    label = data["label"]
    if not isinstance(label, str):
        raise ValidationError("Reaction label must be a string.")
    if not isinstance(data["reverse"], bool):
        raise ValidationError("Reaction reverse flag must be a boolean.")

    return Reaction(
        reactants=_str_tuple(data["reactants"], "reactants"),
        products=_str_tuple(data["products"], "products"),
        label=label,
        resonance=resonance,
        reverse=data["reverse"],
    )


# ---------------------------------------------------------------------------
# Set
# ---------------------------------------------------------------------------

def set_to_dict(record: Set) -> dict[str, Any]:
    """Return a JSON-compatible dict for *record*"""
    return {
        "reaction": reaction_to_dict(record.reaction),
        "chapter": record.chapter,
        "q_value": record.q_value,
        "coefficients": list(record.coefficients),
    }


def set_from_dict(data: Mapping[str, Any]) -> Set:
    """Build a :class:`Set` from :func:`set_to_dict` output

    Raises
    ------
    ValidationError
        If a field is missing, has the wrong type, or the assembled set
        breaks a chapter/arity/coefficient invariant.
    """
    _require(data, _SET_KEYS, "Set")
    reaction = reaction_from_dict(data["reaction"])

    chapter = data["chapter"]
    if isinstance(chapter, bool) or not isinstance(chapter, int):
        raise ValidationError(f"Chapter must be an integer, got {chapter!r}.")

    coefficients = data["coefficients"]
    if not isinstance(coefficients, (list, tuple)):
        raise ValidationError("Coefficients must be a list of numbers.")

    try:
        q_value = float(data["q_value"])
        values = tuple(float(c) for c in coefficients)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Non-numeric set field: {exc}") from exc

    return Set(
        reaction=reaction,
        chapter=chapter,
        q_value=q_value,
        coefficients=values,
    )


# ---------------------------------------------------------------------------
# JSON documents
# ---------------------------------------------------------------------------

def sets_to_json(
    sets: Iterable[Set],
    *,
    fmt: Format | int | str | None = None,
    indent: int | None = None,
) -> str:
    """Serialize *sets* to a JSON document

    Parameters
    ----------
    sets : Iterable[Set]
        Sets in the order they should appear.
    fmt : Format | int | str, optional
        Source layout, recorded as ``"format"``.  ``None`` writes ``null``.
    indent : int, optional
        Passed to :func:`json.dumps`.

    Returns
    -------
    str
        ``{"format": ..., "sets": [...]}``
    """
    document = {
        "format": Format.from_value(fmt).name if fmt is not None else None,
        "sets": [set_to_dict(s) for s in sets],
    }
    logger.debug("Serialized %d sets to JSON", len(document["sets"]))
    return json.dumps(document, indent=indent)


def sets_from_json(text: str) -> list[Set]:
    """Parse a document written by :func:`sets_to_json`

    Raises
    ------
    ConversionError
        If *text* is not valid JSON.
    ValidationError
        If the document structure or any set is invalid.
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConversionError(f"Invalid JSON document: {exc}") from exc

    _require(document, ("sets",), "Document")
    fmt = document.get("format")
    if fmt is not None and fmt not in Format.__members__:
        raise ValidationError(f"Unknown format {fmt!r}.")
    if not isinstance(document["sets"], list):
        raise ValidationError("Document 'sets' must be a list.")

    return [set_from_dict(item) for item in document["sets"]]
