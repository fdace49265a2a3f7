"""Tests for the command-line interface."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from pydantic import ValidationError

from pathfit.cli import build_parser, dimension, main, precision
from pathfit.config import Settings
from tests.conftest import CURVE_SVG, DEGENERATE_SVG, RELATIVE_SVG, SQUARE_SVG

SVG_NS = "{http://www.w3.org/2000/svg}"


def test_success_writes_output(write_svg_file, tmp_path):
    src = write_svg_file(SQUARE_SVG)
    dst = tmp_path / "out.svg"

    assert main(["-i", str(src), "-o", str(dst), "-w", "100", "-l", "50"]) == 0

    root = ET.fromstring(dst.read_text(encoding="utf-8"))
    assert root.get("viewBox") == "0 0 100 50"
    assert root.find(f"{SVG_NS}path").get("d") == "M0,0 L100,0 L100,50 L0,50 Z"


def test_long_options(write_svg_file, tmp_path):
    src = write_svg_file(SQUARE_SVG)
    dst = tmp_path / "out.svg"
    assert main(["--input", str(src), "--output", str(dst)]) == 0
    assert ET.fromstring(dst.read_text(encoding="utf-8")).get("viewBox") == "0 0 10 10"


def test_relative_input_cannot_get_size(write_svg_file, tmp_path, capsys):
    src = write_svg_file(RELATIVE_SVG)
    dst = tmp_path / "out.svg"

    assert main(["-i", str(src), "-o", str(dst)]) == 3
    assert "cannot get size" in capsys.readouterr().err
    assert not dst.exists()


def test_degenerate_input(write_svg_file, tmp_path, capsys):
    src = write_svg_file(DEGENERATE_SVG)
    dst = tmp_path / "out.svg"

    assert main(["-i", str(src), "-o", str(dst)]) == 3
    assert not dst.exists()


def test_unsupported_command_exit_code(write_svg_file, tmp_path, capsys):
    src = write_svg_file(CURVE_SVG)
    dst = tmp_path / "out.svg"

    assert main(["-i", str(src), "-o", str(dst)]) == 4
    err = capsys.readouterr().err
    assert "'C'" in err
    assert "cannot get size" not in err
    assert not dst.exists()


def test_missing_input_is_io_error(tmp_path, capsys):
    code = main(["-i", str(tmp_path / "missing.svg"), "-o", str(tmp_path / "out.svg")])
    assert code == 5
    assert "cannot read" in capsys.readouterr().err


def test_unwritable_output(write_svg_file, tmp_path):
    src = write_svg_file(SQUARE_SVG)
    dst = tmp_path / "no-such-dir" / "out.svg"
    assert main(["-i", str(src), "-o", str(dst)]) == 5


def test_infinite_number_exit_code(write_svg_file, tmp_path, capsys):
    src = write_svg_file('<svg xmlns="http://www.w3.org/2000/svg"><path d="M0,0 L1e400,10 Z"/></svg>')
    dst = tmp_path / "out.svg"

    assert main(["-i", str(src), "-o", str(dst)]) == 4
    assert "out of range" in capsys.readouterr().err
    assert not dst.exists()


def test_overflowing_extent_exit_code(write_svg_file, tmp_path):
    src = write_svg_file('<svg xmlns="http://www.w3.org/2000/svg"><path d="M-1e308,0 L1e308,10 Z"/></svg>')
    dst = tmp_path / "out.svg"

    assert main(["-i", str(src), "-o", str(dst)]) == 3
    assert not dst.exists()


@pytest.mark.parametrize("value", ["0", "256", "-3", "ten"])
def test_dimension_out_of_range(value):
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["-i", "a", "-o", "b", "-w", value])
    assert exc.value.code == 2


def test_required_arguments():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-i", "a"])


def test_dimension_bounds():
    assert dimension("1") == 1
    assert dimension("255") == 255


@pytest.mark.parametrize("value", ["-1", "two"])
def test_precision_rejected(value):
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["-i", "a", "-o", "b", "-p", value])
    assert exc.value.code == 2


def test_precision_zero_accepted():
    assert precision("0") == 0
    assert build_parser().parse_args(["-i", "a", "-o", "b", "-p", "0"]).precision == 0


def test_negative_precision_setting_rejected(monkeypatch):
    monkeypatch.setenv("PATHFIT_PRECISION", "-2")
    with pytest.raises(ValidationError):
        Settings()
