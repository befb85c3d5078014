"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys

import pytest

from tnvframe import __version__
from tnvframe.cli.main import main


def run_cli(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "tnvframe.cli.main", *args],
        capture_output=True,
        text=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = run_cli("--help")
    assert result.returncode == 0
    assert "tnvframe: Compact TNV payload encoder" in result.stdout
    assert "--decoder" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert f"tnvframe {__version__}" in result.stdout


def test_cli_encode_example() -> None:
    """Test scalar prefix followed by a TNV record."""
    result = run_cli("--uint16", "0x1234", "volumetric_water_content:3:500")
    assert result.returncode == 0
    assert result.stdout.strip() == "34120303F401"


def test_cli_no_args_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "usage:" in capsys.readouterr().out


def test_cli_scalar_order(capsys: pytest.CaptureFixture[str]) -> None:
    """Test scalars keep command-line order across options."""
    assert main(["--int8", "-1", "--uint16", "2", "--uint8", "3"]) == 0
    assert capsys.readouterr().out.strip() == "FF020003"


def test_cli_spaced(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--spaced", "version:0:1"]) == 0
    assert capsys.readouterr().out.strip() == "0x00 0x00 0x01"


def test_cli_negative_record(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["soil_temperature:1:-125"]) == 0
    assert capsys.readouterr().out.strip() == "010183FF"


def test_cli_decoder(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--decoder", "soil_humidity:0:10"]) == 0
    out = capsys.readouterr().out
    assert "case 0x02:" in out
    assert out.strip().splitlines()[-1] == "02000A00"


def test_cli_verbose(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--verbose", "--uint8", "7"]) == 0
    assert "Added uint8: 7" in capsys.readouterr().out


def test_cli_list_types(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--list-types"]) == 0
    out = capsys.readouterr().out
    assert "SOIL_TEMPERATURE" in out
    assert "0x03" in out


def test_cli_rejection_warns(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--capacity", "4", "--uint32", "1", "version:0:1"]) == 0
    captured = capsys.readouterr()
    assert captured.out.strip() == "01000000"
    assert "capacity_exceeded" in captured.err


def test_cli_strict_fails(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--strict", "--capacity", "4", "--uint32", "1", "version:0:1"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_value_out_of_range(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["version:0:300"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_bad_capacity(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--capacity", "0", "version:0:1"]) == 1
    assert "capacity" in capsys.readouterr().err


def test_cli_unknown_type() -> None:
    """Test an unknown type name is a usage error."""
    result = run_cli("rainfall:0:1")
    assert result.returncode == 2
    assert "unknown value type" in result.stderr
