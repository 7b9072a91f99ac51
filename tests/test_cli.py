# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import io
import json
import sys

import pytest

from postpath import __version__
from postpath.cli import main
from postpath.cli_args import build_argument_parser, system_params_from_args


@pytest.fixture
def square(tmp_path):
    path = tmp_path / "square.ps"
    path.write_bytes(b"newpath 0 0 moveto 10 0 lineto 10 10 lineto closepath stroke\n")
    return str(path)


def test_text_output(square, capsys):
    assert main([square]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "MOVE 0 0", "LINE 10 0", "LINE 10 10", "MOVE 0 0", "END",
    ]


def test_json_output(square, capsys):
    assert main(["-f", "json", square]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data[0] == {"kind": "MOVE", "points": [[0, 0]]}
    assert data[-1] == {"kind": "END", "points": []}
    assert len(data) == 5


def test_json_output_several_files(square, capsys):
    assert main(["--format", "json", square, square]) == 0
    data = json.loads(capsys.readouterr().out)
    assert len(data) == 2
    assert data[0] == data[1]


def test_output_file(square, tmp_path, capsys):
    out = tmp_path / "out.txt"
    assert main(["-o", str(out), square]) == 0
    assert out.read_text().splitlines()[-1] == "END"
    assert capsys.readouterr().out == ""


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"1 2 moveto stroke\n")))
    assert main(["-"]) == 0
    assert capsys.readouterr().out.splitlines() == ["MOVE 1 2", "END"]


def test_import_error(tmp_path, capsys):
    path = tmp_path / "bad.ps"
    path.write_bytes(b"0 0 moveto\nfrobnicate\n")
    assert main([str(path)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("PostPath Error: ")
    assert "/undefined in --frobnicate-- (line 2)" in err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ps")]) == 1
    assert "PostPath Error" in capsys.readouterr().err


def test_unknown_encoding(square, capsys):
    assert main(["--encoding", "no-such-codec", square]) == 1
    assert "unknown encoding" in capsys.readouterr().err


def test_max_stack(tmp_path, capsys):
    path = tmp_path / "deep.ps"
    path.write_bytes(b"1 2 3 4\n")
    assert main(["--max-stack", "3", str(path)]) == 1
    assert "/stackoverflow" in capsys.readouterr().err


def test_prolog_marker(tmp_path, capsys):
    path = tmp_path / "prolog.ps"
    path.write_bytes(b"/F findfont\n%%EndSetup\n5 5 moveto stroke\n")
    assert main(["--prolog-marker", "%%EndSetup", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["MOVE 5 5", "END"]


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_negative_max_stack_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_argument_parser().parse_args(["--max-stack", "-1", "x.ps"])
    assert excinfo.value.code == 2


def test_system_params_from_args():
    parser = build_argument_parser()
    assert system_params_from_args(parser.parse_args(["x.ps"])) == {}
    args = parser.parse_args(
        ["--encoding", "utf-8", "--prolog-marker", "%%End", "--max-stack", "50", "x.ps"]
    )
    assert system_params_from_args(args) == {
        "Encoding": "utf-8", "PrologMarker": "%%End", "MaxOpStack": 50,
    }
