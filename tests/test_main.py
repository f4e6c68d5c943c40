"""Tests for the command line entry point."""
import logging

import pytest

from reverseendian import __main__ as cli


@pytest.fixture(autouse=True)
def restore_log_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_single_value(capsys):
    cli.main(["0x12345678"])
    out = capsys.readouterr().out
    assert "Original:  0x12345678 (12 34 56 78)" in out
    assert "Reversed:  0x78563412 (78 56 34 12)" in out
    assert out.rstrip().endswith("---")


def test_value_without_prefix(capsys):
    cli.main(["deadbeef"])
    assert "Reversed:  0xEFBEADDE (EF BE AD DE)" in capsys.readouterr().out


def test_multiple_values(capsys):
    cli.main(["ff", "0x00FF00FF"])
    out = capsys.readouterr().out
    assert out.count("---") == 2
    assert "Reversed:  0xFF000000" in out
    assert "Reversed:  0xFF00FF00" in out


def test_no_arguments_prints_usage(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == cli.EXIT_FAILED
    assert "usage: reverseendian" in capsys.readouterr().err


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--help"])
    assert exc.value.code == 0
    assert "--test" in capsys.readouterr().out


def test_invalid_value(capsys, caplog):
    with pytest.raises(SystemExit) as exc:
        cli.main(["0x12", "nothex"])
    assert exc.value.code == cli.EXIT_BAD_VALUE
    assert "Invalid hex value 'nothex'" in caplog.text
    assert "--help" in caplog.text
    # nothing printed once any value is rejected
    assert capsys.readouterr().out == ""


def test_wide_value_warns(capsys, caplog):
    with caplog.at_level(logging.WARNING):
        cli.main(["0x112345678"])
    assert "does not fit in 32 bits" in caplog.text
    assert "Original:  0x12345678" in capsys.readouterr().out


def test_test_mode(capsys):
    cli.main(["--test"])
    out = capsys.readouterr().out
    assert out.startswith("=== 32-bit Endian Reversal Tests ===")
    assert out.count("(match: True)") == 5
    assert out.count("(original: True)") == 5
    assert "reverse32(0x12345678) => 0x78563412" in out
    assert "reverse32_buffer(0x12345678) => 0x78563412" in out


def test_test_mode_reports_failure(monkeypatch, capsys):
    monkeypatch.setattr(cli.Reversal, "ok", property(lambda self: False))
    with pytest.raises(SystemExit) as exc:
        cli.main(["-t"])
    assert exc.value.code == cli.EXIT_FAILED


def test_debug_enables_lane_logging(caplog):
    logging.getLogger().setLevel(logging.INFO)
    cli.main(["-d", "0x12345678"])
    assert logging.getLogger().level == logging.DEBUG
    assert "lanes of 0x12345678: 12 34 56 78" in caplog.text
    assert "0x12345678 little-endian bytes: 78563412" in caplog.text


def test_lane_logging_off_without_debug(caplog):
    logging.getLogger().setLevel(logging.INFO)
    cli.main(["0x12345678"])
    assert logging.getLogger().level == logging.INFO
    assert "lanes of" not in caplog.text
    assert "little-endian bytes" not in caplog.text
