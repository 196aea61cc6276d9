#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for decoded reaclib data

Models are frozen ``dataclasses``: they are the sole output of the reader
layer and the sole input accepted by the converter layer.  Because they are
immutable and compare structurally, a :class:`Reaction` can be used
directly as a dictionary key when grouping sets.

Hierarchy
---------
::

    Format      — which of the two column layouts to expect
    Resonance   — the resonance flag of a set
    Reaction    — reactants, products, label and flags (grouping key)
    Set         — Reaction + chapter + Q-value + seven rate parameters

Units
-----
* Q-values are in **MeV**.
* Temperatures passed to :meth:`Set.rate` are in **GK** (T9).
* Rates are in the units implied by the chapter (s⁻¹ for chapters 1–3,
  cm³ mol⁻¹ s⁻¹ for two-body reactions, and so on).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np

from pyreaclib.utils.constants import RATE_EXPONENT_DENOMINATOR, TEMPERATURE_UNITS
from pyreaclib.utils.validation import validate_set_fields


class Format(enum.Enum):
    """The reaclib layout variant to parse

    The files do not describe themselves, so the caller must pick one.
    """

    REACLIB1 = 1
    REACLIB2 = 2

    @classmethod
    def from_value(cls, value: Format | int | str) -> Format:
        """Coerce ``1``, ``"2"``, ``"reaclib1"`` or ``"REACLIB2"`` to a member

        Raises
        ------
        ValueError
            If *value* does not name a variant.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().upper()
            if text in cls.__members__:
                return cls[text]
            if text.isdigit():
                value = int(text)
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown reaclib format {value!r}; expected 1, 2, "
                f"'REACLIB1' or 'REACLIB2'."
            ) from None


class Resonance(enum.Enum):
    """Resonance flag of a set (column 47 in REACLIB 2)

    ``S`` is undocumented but occurs in published libraries.
    """

    NON_RESONANT = "n"
    RESONANT = "r"
    WEAK = "w"
    S = "s"

    @classmethod
    def from_flag(cls, flag: str) -> Resonance:
        """Map a flag character (blank means non-resonant) to a member

        Raises
        ------
        ValueError
            If *flag* is not one of ``""``, ``"n"``, ``"r"``, ``"w"``, ``"s"``.
        """
        text = flag.strip()
        if not text:
            return cls.NON_RESONANT
        return cls(text)


@dataclass(frozen=True)
class Reaction:
    """Identity of a nuclear reaction

    Two sets belong to the same reaction iff every field matches, so the
    resonant and non-resonant components of a rate with the same label are
    kept apart.

    Parameters
    ----------
    reactants : tuple[str, ...]
        Nuclide tokens going into the reaction, in file order.
    products : tuple[str, ...]
        Nuclide tokens coming out, in file order.
    label : str
        Source label (at most four characters).
    resonance : Resonance
        Resonance flag.
    reverse : bool
        ``True`` when the rate was derived from the reverse rate by
        detailed balance and must be corrected with partition functions.
    """

    reactants: tuple[str, ...]
    products: tuple[str, ...]
    label: str = ""
    resonance: Resonance = Resonance.NON_RESONANT
    reverse: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "reactants", tuple(self.reactants))
        object.__setattr__(self, "products", tuple(self.products))

    @property
    def resonant(self) -> bool:
        return self.resonance is Resonance.RESONANT

    def __str__(self) -> str:
        text = f"{' + '.join(self.reactants)} -> {' + '.join(self.products)}"
        if self.label:
            text += f" [{self.label}]"
        return text


@dataclass(frozen=True)
class Set:
    """One decoded rate record

    Parameters
    ----------
    reaction : Reaction
        The reaction this set belongs to.
    chapter : int
        Chapter number 1–11; fixes the reactant/product counts.
    q_value : float
        Energy release (MeV).
    coefficients : tuple[float, ...]
        The seven fit parameters ``a0 … a6``.

    Raises
    ------
    ValidationError
        If the chapter is out of range, disagrees with the reaction's
        arity, or the coefficient count is not seven.

    Examples
    --------
    >>> rxn = Reaction(("n",), ("p",), label="wc12")
    >>> s = Set(rxn, 1, 0.7823, (-6.78161, 0, 0, 0, 0, 0, 0))
    >>> s.reactants
    ('n',)
    """

    reaction: Reaction
    chapter: int
    q_value: float
    coefficients: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "chapter", int(self.chapter))
        object.__setattr__(self, "q_value", float(self.q_value))
        object.__setattr__(
            self, "coefficients", tuple(float(c) for c in self.coefficients)
        )
        validate_set_fields(
            self.chapter,
            len(self.reaction.reactants),
            len(self.reaction.products),
            len(self.coefficients),
        )

    @property
    def reactants(self) -> tuple[str, ...]:
        return self.reaction.reactants

    @property
    def products(self) -> tuple[str, ...]:
        return self.reaction.products

    @property
    def label(self) -> str:
        return self.reaction.label

    @property
    def resonance(self) -> Resonance:
        return self.reaction.resonance

    @property
    def reverse(self) -> bool:
        return self.reaction.reverse

    def rate(self, temperature: float | np.ndarray) -> float | np.ndarray:
        """Evaluate the rate fit at *temperature*

        .. math::

            \\lambda = \\exp\\left(a_0 + \\sum_{i=1}^{5} a_i\\,
                       T_9^{(2i-5)/3} + a_6 \\ln T_9\\right)

        Parameters
        ----------
        temperature : float | numpy.ndarray
            Temperature(s) in GK.  Must be strictly positive.

        Returns
        -------
        float | numpy.ndarray
            A float for scalar input, an array of the same shape otherwise.

        Raises
        ------
        ValueError
            If any temperature is not strictly positive.

        Examples
        --------
        >>> rxn = Reaction(("n",), ("p",))
        >>> Set(rxn, 1, 0.0, (0.0,) * 7).rate(1.0)
        1.0
        """
        t9 = np.asarray(temperature, dtype="f8")
        if np.any(t9 <= 0.0):
            raise ValueError(
                f"Temperature must be strictly positive ({TEMPERATURE_UNITS})."
            )

        a = self.coefficients
        exponent = np.full_like(t9, a[0])
        for i in range(1, 6):
            exponent = exponent + a[i] * t9 ** ((2 * i - 5) / RATE_EXPONENT_DENOMINATOR)
        exponent = exponent + a[6] * np.log(t9)

        result = np.exp(exponent)
        if result.ndim == 0:
            return float(result)
        return result
