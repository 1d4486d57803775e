"""Tests for the orientation-tools command line."""

from __future__ import annotations

import io
import sys

import numpy as np
import pytest

from orientation_tools.cli import main as cli_main
from orientation_tools.constants import BODY_NAMES


def test_cli_raw_saturn_at_epoch(capsys: pytest.CaptureFixture[str]) -> None:
    """--raw prints the report angles."""
    rc = cli_main.main(['Saturn', '--millennia', '0', '--raw'])
    assert rc == 0
    out = capsys.readouterr().out
    assert out.split() == ['Saturn', '40.58900000', '83.53700000', '38.90000000']


def test_cli_defaults_to_all_bodies(capsys: pytest.CaptureFixture[str]) -> None:
    """No bodies means every supported body, in order."""
    rc = cli_main.main(['--jd', '2451545.0'])
    assert rc == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == list(BODY_NAMES)
    # VSOP87 third component is always zero
    assert all(float(line.split()[3]) == 0.0 for line in lines)


def test_cli_converted_sol(capsys: pytest.CaptureFixture[str]) -> None:
    """Default output is the VSOP87 conversion."""
    rc = cli_main.main(['Sol', '--millennia', '0'])
    assert rc == 0
    fields = capsys.readouterr().out.split()
    assert float(fields[1]) == pytest.approx(63.87 + 90.0 - 23.4392803055555555556, abs=1e-8)
    assert float(fields[2]) == pytest.approx(190.3060275, abs=1e-8)


def test_cli_dms(capsys: pytest.CaptureFixture[str]) -> None:
    """--dms formats angles as degrees, minutes and seconds."""
    rc = cli_main.main(['Uranus', '--raw', '--dms'])
    assert rc == 0
    assert '-15d 10m 30.000s' in capsys.readouterr().out


def test_cli_unsupported_body(capsys: pytest.CaptureFixture[str]) -> None:
    """Unknown bodies exit 1 with an error message."""
    rc = cli_main.main(['Pluto'])
    assert rc == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert "Unsupported body 'Pluto'" in captured.err


def test_cli_invalid_dtype(capsys: pytest.CaptureFixture[str]) -> None:
    """Unknown precision names exit 1."""
    assert cli_main.main(['Mars', '--dtype', 'half']) == 1
    assert 'Invalid precision' in capsys.readouterr().err


def test_cli_time_string(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """--time goes through millennia_from_string; parse failure exits 1."""
    monkeypatch.setattr(cli_main, 'millennia_from_string', lambda s: 0.0)
    assert cli_main.main(['Earth', '--time', '2000-01-01 12:00', '--raw']) == 0
    assert capsys.readouterr().out.split()[1:3] == ['0.00000000', '90.00000000']

    monkeypatch.setattr(cli_main, 'millennia_from_string', lambda s: None)
    assert cli_main.main(['Earth', '--time', 'garbage']) == 1
    assert "Invalid date/time 'garbage'" in capsys.readouterr().err


def test_write_orientations_single_precision() -> None:
    """write_orientations honors the working precision."""
    stream = io.StringIO()
    cli_main.write_orientations(stream, ['Venus'], 0.0, raw=True, dtype=np.float32)
    assert stream.getvalue().split()[:3] == ['Venus', '272.76000977', '67.16000366']


def test_cli_main_exit_code(monkeypatch: pytest.MonkeyPatch) -> None:
    """cli_main exits with main()'s return code."""
    monkeypatch.setattr(sys, 'argv', ['orientation-tools', 'Pluto'])
    with pytest.raises(SystemExit) as excinfo:
        cli_main.cli_main()
    assert excinfo.value.code == 1
