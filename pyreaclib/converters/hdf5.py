#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HDF5 converter for decoded reaclib sets

Writes deterministic, self-documenting HDF5 files from the typed
dataclass models returned by the reader layer, and reads them back.

HDF5 Layout
-----------
One column per set field, one row per set, in input order::

    /metadata/              attrs: format, n_sets, creator
    /sets/
        chapter             int64[N]
        q_value             float64[N]      units: MeV
        coefficients        float64[N, 7]
        reactants           S5[N, 4]        blank-padded
        products            S5[N, 4]        blank-padded
        label               S4[N]
        resonance           S1[N]           n / r / w / s
        reverse             bool[N]

Unused nuclide slots hold the empty string.  ``metadata.attrs["format"]``
is the member name of the source :class:`~pyreaclib.models.records.Format`,
or the empty string when it was not given.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import numpy as np

try:
    import h5py
except ImportError as _exc:  # pragma: no cover
    raise ImportError(
        "The 'h5py' package is required by the HDF5 converter.  "
        "Install it with: pip install h5py"
    ) from _exc

from pyreaclib import __version__
from pyreaclib.exceptions import ConversionError
from pyreaclib.models.records import Format, Reaction, Resonance, Set
from pyreaclib.utils.constants import (
    CHAPTER_ARITY,
    MAX_LABEL_LENGTH,
    N_COEFFICIENTS,
    Q_VALUE_UNITS,
)
from pyreaclib.utils.grammar import IDENTIFIER_WIDTH

logger = logging.getLogger(__name__)

MAX_NUCLIDES: int = max(max(arity) for arity in CHAPTER_ARITY.values())
"""Row width of the ``reactants`` / ``products`` columns."""

CREATOR: str = f"pyreaclib {__version__}"

_COLUMNS = (
    "chapter",
    "q_value",
    "coefficients",
    "reactants",
    "products",
    "label",
    "resonance",
    "reverse",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _encode(text: str, width: int, what: str) -> bytes:
    try:
        raw = text.encode("ascii")
    except UnicodeEncodeError as exc:
        raise ConversionError(f"{what} {text!r} is not ASCII.") from exc
    if len(raw) > width:
        raise ConversionError(f"{what} {text!r} is wider than {width} characters.")
    return raw


def _nuclide_table(rows: list[tuple[str, ...]], what: str) -> np.ndarray:
    table = np.zeros((len(rows), MAX_NUCLIDES), dtype=f"S{IDENTIFIER_WIDTH}")
    for i, row in enumerate(rows):
        for j, token in enumerate(row):
            table[i, j] = _encode(token, IDENTIFIER_WIDTH, what)
    return table


def _decode_row(row: np.ndarray) -> tuple[str, ...]:
    return tuple(v.decode("ascii") for v in row if v)


def _write_sets(h5f: h5py.File, sets: list[Set], fmt: Format | None) -> None:
    """Write ``/metadata`` and the ``/sets`` columns

    Parameters
    ----------
    h5f : h5py.File
        Open HDF5 file handle (write mode).
    sets : list[Set]
        Rows to write, in order.
    fmt : Format | None
        Source layout recorded in the metadata.
    """
    n = len(sets)

    meta = h5f.create_group("metadata")
    meta.attrs["format"] = fmt.name if fmt is not None else ""
    meta.attrs["n_sets"] = np.int64(n)
    meta.attrs["creator"] = CREATOR

    grp = h5f.create_group("sets")
    grp.create_dataset(
        "chapter", data=np.array([s.chapter for s in sets], dtype="i8")
    )
    ds_q = grp.create_dataset(
        "q_value", data=np.array([s.q_value for s in sets], dtype="f8")
    )
    ds_q.attrs["units"] = Q_VALUE_UNITS

    coefficients = np.array([s.coefficients for s in sets], dtype="f8")
    grp.create_dataset(
        "coefficients", data=coefficients.reshape(n, N_COEFFICIENTS)
    )

    grp.create_dataset(
        "reactants", data=_nuclide_table([s.reactants for s in sets], "Reactant")
    )
    grp.create_dataset(
        "products", data=_nuclide_table([s.products for s in sets], "Product")
    )
    grp.create_dataset(
        "label",
        data=np.array(
            [_encode(s.label, MAX_LABEL_LENGTH, "Label") for s in sets],
            dtype=f"S{MAX_LABEL_LENGTH}",
        ),
    )
    grp.create_dataset(
        "resonance",
        data=np.array([s.resonance.value.encode("ascii") for s in sets], dtype="S1"),
    )
    grp.create_dataset(
        "reverse", data=np.array([s.reverse for s in sets], dtype=bool)
    )


def _read_sets(h5f: h5py.File) -> list[Set]:
    if "sets" not in h5f:
        raise ConversionError("HDF5 file has no /sets group.")
    grp = h5f["sets"]
    missing = [name for name in _COLUMNS if name not in grp]
    if missing:
        raise ConversionError(f"HDF5 /sets is missing column(s): {', '.join(missing)}.")

    chapter = grp["chapter"][()]
    q_value = grp["q_value"][()]
    coefficients = grp["coefficients"][()]
    reactants = grp["reactants"][()]
    products = grp["products"][()]
    label = grp["label"][()]
    resonance = grp["resonance"][()]
    reverse = grp["reverse"][()]

    n = len(chapter)
    if any(len(col) != n for col in (q_value, coefficients, reactants, products,
                                     label, resonance, reverse)):
        raise ConversionError("HDF5 /sets columns have inconsistent lengths.")

    sets = []
    for i in range(n):
        try:
            flag = Resonance.from_flag(resonance[i].decode("ascii"))
        except ValueError as exc:
            raise ConversionError(
                f"Row {i}: unknown resonance flag {resonance[i]!r}."
            ) from exc
        reaction = Reaction(
            reactants=_decode_row(reactants[i]),
            products=_decode_row(products[i]),
            label=label[i].decode("ascii"),
            resonance=flag,
            reverse=bool(reverse[i]),
        )
        sets.append(
            Set(
                reaction=reaction,
                chapter=int(chapter[i]),
                q_value=float(q_value[i]),
                coefficients=tuple(float(c) for c in coefficients[i]),
            )
        )
    return sets


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def write_sets_hdf5(
    sets: Iterable[Set],
    output_path: Path | str,
    *,
    fmt: Format | int | str | None = None,
    overwrite: bool = False,
) -> None:
    """Write decoded sets to a columnar HDF5 file

    Parameters
    ----------
    sets : Iterable[Set]
        Sets to write, in order.
    output_path : Path | str
        Path for the output HDF5 file.  Parent directories are created
        automatically.
    fmt : Format | int | str, optional
        Source layout, recorded in ``/metadata``.
    overwrite : bool, optional
        If ``True``, overwrite an existing HDF5 file.  If ``False``
        (default), raise :class:`~pyreaclib.exceptions.ConversionError`
        when the output file already exists.

    Raises
    ------
    ConversionError
        If *overwrite* is ``False`` and *output_path* exists, if a token
        does not fit its column, or if any HDF5 write operation fails.

    Examples
    --------
    >>> from pyreaclib import read_reaclib
    >>> groups = read_reaclib("reaclib.dat", 2)
    >>> sets = [s for group in groups.values() for s in group]
    >>> write_sets_hdf5(sets, "output/reaclib.h5", fmt=2, overwrite=True)
    """
    out = Path(output_path)
    if out.exists() and not overwrite:
        raise ConversionError(f"Output file {out} already exists and overwrite=False.")

    rows = list(sets)
    fmt = Format.from_value(fmt) if fmt is not None else None

    out.parent.mkdir(parents=True, exist_ok=True)
    try:
        mode = "w" if overwrite else "w-"
        with h5py.File(str(out), mode) as h5f:
            _write_sets(h5f, rows, fmt)
    except Exception as exc:
        if isinstance(exc, ConversionError):
            raise
        raise ConversionError(f"Failed to write HDF5 file {out}: {exc}") from exc

    logger.info("Wrote %d sets to HDF5: %s", len(rows), out)


def read_sets_hdf5(path: Path | str) -> list[Set]:
    """Read sets written by :func:`write_sets_hdf5`

    Returns
    -------
    list[Set]
        Sets in file order.

    Raises
    ------
    ConversionError
        If the file cannot be opened or does not have the expected layout.
    ValidationError
        If a row breaks a set invariant.
    """
    src = Path(path)
    if not src.is_file():
        raise ConversionError(f"HDF5 file not found: {src}")

    try:
        with h5py.File(str(src), "r") as h5f:
            sets = _read_sets(h5f)
    except OSError as exc:
        raise ConversionError(f"Failed to read HDF5 file {src}: {exc}") from exc

    logger.debug("Read %d sets from HDF5: %s", len(sets), src)
    return sets
