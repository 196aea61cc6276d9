#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the command-line interface

Runs :func:`pyreaclib.cli.main` in-process and checks exit codes and
printed output.
"""

from __future__ import annotations

import json

import pytest

from pyreaclib.cli import build_parser, main
from pyreaclib.models.records import Format

ZEROS = [0.0] * 7


@pytest.fixture
def broken_file(tmp_path, make_header, make_coefficients, neutron_decay_lines):
    """One good record, then a bad chapter on line 3"""
    lines = [
        *neutron_decay_lines,
        make_header(12, ["n", "p"]),
        make_coefficients(ZEROS),
    ]
    path = tmp_path / "broken.dat"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestParser:

    def test_format_option(self, tmp_path) -> None:
        args = build_parser().parse_args(["check", str(tmp_path / "x"), "--format", "1"])
        assert args.format is Format.REACLIB1

    @pytest.mark.parametrize("command", ["check", "group", "json"])
    def test_format_required(self, tmp_path, capsys, command: str) -> None:
        with pytest.raises(SystemExit) as info:
            build_parser().parse_args([command, str(tmp_path / "x")])
        assert info.value.code == 2
        assert "--format" in capsys.readouterr().err

    def test_bad_format(self, tmp_path) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["check", str(tmp_path / "x"), "--format", "7"])

    def test_no_command(self, capsys) -> None:
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out


class TestCheck:

    def test_clean_file(self, reaclib2_file, capsys) -> None:
        assert main(["check", str(reaclib2_file), "--format", "2"]) == 0
        assert "4 sets OK, 0 failed" in capsys.readouterr().out

    def test_reports_line_numbers(self, broken_file, capsys) -> None:
        assert main(["check", str(broken_file), "-f", "2"]) == 1
        out = capsys.readouterr().out
        assert "line 3: invalid chapter" in out
        assert "1 sets OK, 1 failed" in out

    def test_missing_file(self, tmp_path, capsys) -> None:
        assert main(["check", str(tmp_path / "nonexistent.dat"), "-f", "2"]) == 1
        assert "ERROR" in capsys.readouterr().err


class TestGroup:

    def test_counts(self, reaclib2_file, capsys) -> None:
        assert main(["group", str(reaclib2_file), "-f", "2"]) == 0
        out = capsys.readouterr().out
        assert "n -> p [wc12]" in out
        assert "3 reactions, 4 sets" in out

    def test_fail_fast(self, broken_file, capsys) -> None:
        assert main(["group", str(broken_file), "-f", "2"]) == 1
        assert "line 3" in capsys.readouterr().err


class TestJSON:

    def test_stdout(self, reaclib2_file, capsys) -> None:
        assert main(["json", str(reaclib2_file), "-f", "2"]) == 0
        document = json.loads(capsys.readouterr().out)
        assert document["format"] == "REACLIB2"
        assert len(document["sets"]) == 4

    def test_output_file(self, reaclib2_file, tmp_path) -> None:
        out = tmp_path / "sets.json"
        assert main(["json", str(reaclib2_file), "-o", str(out), "-f", "2"]) == 0
        assert len(json.loads(out.read_text())["sets"]) == 4


class TestHDF5:

    def test_writes_file(self, reaclib2_file, tmp_path) -> None:
        pytest.importorskip("h5py")
        out = tmp_path / "sets.h5"
        assert main(["hdf5", str(reaclib2_file), str(out), "-f", "2"]) == 0
        assert out.exists()
        assert main(["hdf5", str(reaclib2_file), str(out), "-f", "2"]) == 1
        assert main(["hdf5", str(reaclib2_file), str(out), "--overwrite", "-f", "2"]) == 0
