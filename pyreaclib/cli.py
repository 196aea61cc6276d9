#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyREACLIB command-line interface

Provides batch commands over a single reaclib file:

1. **check** — Decode every record and report the ones that fail
2. **group** — Group sets by reaction and print a count per reaction
3. **json**  — Write every set as a JSON document
4. **hdf5**  — Write every set to a columnar HDF5 file

Usage
-----
::

    # List malformed records of a REACLIB 2 file
    python -m pyreaclib.cli check reaclib.dat --format 2

    # Export a REACLIB 1 file to HDF5, replacing an older export
    python -m pyreaclib.cli hdf5 reaclib1.dat rates.h5 --format 1 --overwrite
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from pyreaclib.exceptions import DecodeError, PyReaclibError
from pyreaclib.models.records import Format, Set
from pyreaclib.readers.collection import read_reaclib
from pyreaclib.readers.stream import iter_sets

logger = logging.getLogger("pyreaclib.cli")


def _collect_sets(path: Path, fmt: Format) -> list[Set]:
    """Decode *path* fail-fast and return its sets in file order."""
    sets = []
    for item in iter_sets(path, fmt):
        if isinstance(item, DecodeError):
            raise item
        sets.append(item)
    return sets


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_check(args) -> int:
    """Decode every record and print one line per failure."""
    n_ok = 0
    n_fail = 0
    for item in iter_sets(args.file, args.format):
        if isinstance(item, DecodeError):
            print(f"{args.file}:{item}")
            n_fail += 1
        else:
            n_ok += 1

    print(f"\n{args.file}: {n_ok} sets OK, {n_fail} failed")
    return 0 if n_fail == 0 else 1


def cmd_group(args) -> int:
    """Group sets by reaction and print the set count of each."""
    grouped = read_reaclib(args.file, args.format)
    for reaction, sets in grouped.items():
        print(f"{len(sets):3d}  {reaction}")

    n_sets = sum(len(sets) for sets in grouped.values())
    print(f"\n{len(grouped)} reactions, {n_sets} sets")
    return 0


def cmd_json(args) -> int:
    """Write all sets as a JSON document."""
    from pyreaclib.converters.serialize import sets_to_json

    sets = _collect_sets(args.file, args.format)
    text = sets_to_json(sets, fmt=args.format, indent=args.indent)

    if args.output is None:
        print(text)
    else:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote %d sets to %s", len(sets), out)
    return 0


def cmd_hdf5(args) -> int:
    """Write all sets to a columnar HDF5 file."""
    from pyreaclib.converters.hdf5 import write_sets_hdf5

    sets = _collect_sets(args.file, args.format)
    write_sets_hdf5(sets, args.out, fmt=args.format, overwrite=args.overwrite)
    print(f"{args.file} -> {args.out}: {len(sets)} sets")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _format_arg(value: str) -> Format:
    try:
        return Format.from_value(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pyreaclib",
        description="PyREACLIB rate-file CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    python -m pyreaclib.cli check reaclib.dat --format 2
    python -m pyreaclib.cli group reaclib1.dat --format 1
    python -m pyreaclib.cli json reaclib.dat --format 2 -o sets.json
    python -m pyreaclib.cli hdf5 reaclib.dat sets.h5 --format 2 --overwrite
""",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    # Arguments shared by every subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("file", type=Path, help="Reaclib rate file")
    common.add_argument(
        "--format", "-f",
        type=_format_arg,
        required=True,
        help="Layout variant: 1 (REACLIB 1) or 2 (REACLIB 2)",
    )

    sub = parser.add_subparsers(dest="command", help="Command to run")

    sub.add_parser("check", parents=[common], help="List records that fail to decode")
    sub.add_parser("group", parents=[common], help="Count sets per reaction")

    p_json = sub.add_parser("json", parents=[common], help="Write sets as JSON")
    p_json.add_argument(
        "--output", "-o",
        default=None,
        help="Output path (default: standard output)",
    )
    p_json.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )

    p_hdf5 = sub.add_parser("hdf5", parents=[common], help="Write sets to HDF5")
    p_hdf5.add_argument("out", type=Path, help="Output HDF5 path")
    p_hdf5.add_argument(
        "--overwrite",
        action="store_true",
        help="Overwrite an existing output file",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    t0 = time.time()

    commands = {
        "check": cmd_check,
        "group": cmd_group,
        "json": cmd_json,
        "hdf5": cmd_hdf5,
    }

    try:
        rc = commands[args.command](args)
    except PyReaclibError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    logger.debug("Completed in %.1fs", time.time() - t0)
    return rc


if __name__ == "__main__":
    sys.exit(main())
