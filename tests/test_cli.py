# cli wiring: argument parsing, env defaults and output format

import logging

import pytest

from bodytemp.cli import main
from bodytemp.config import ENV_CONVERT_MIXED, ENV_FORCE_CONVERT, ENV_INPUT_UNIT


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # keep the developer's shell or .env from leaking into the tests
    for name in (ENV_INPUT_UNIT, ENV_FORCE_CONVERT, ENV_CONVERT_MIXED):
        monkeypatch.delenv(name, raising=False)


def test_prints_stats(capsys):
    main(["98.6", "98.2", "97.8", "102.2", "--unit", "F"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["Average: 99.20 F", "Min: 97.80 F", "Max: 102.20 F"]


def test_celsius_readings(capsys):
    main(["37.0", "36.6", "39.0", "--unit", "c"])
    out = capsys.readouterr().out
    assert "Average: 99.56 F" in out


def test_no_readings_prints_nan(capsys):
    main([])
    assert "Average: nan F" in capsys.readouterr().out


def test_flags(capsys):
    main(["35.5", "36.0", "--unit", "F", "--force-convert"])
    assert "Average: 96.35 F" in capsys.readouterr().out

    main(["98.6", "37.0", "99.1", "--convert-mixed"])
    assert "Average: 98.77 F" in capsys.readouterr().out


def test_env_defaults(monkeypatch, capsys):
    monkeypatch.setenv(ENV_INPUT_UNIT, "C")
    main(["37.0"])
    assert "Average: 98.60 F" in capsys.readouterr().out


def test_error_exits_non_zero(capsys):
    with pytest.raises(SystemExit) as info:
        main(["35.5", "36.0", "--unit", "F"])
    assert info.value.code == 1
    assert 'error: input_unit "F" mismatch' in capsys.readouterr().err


def test_missing_unit_exits(capsys):
    with pytest.raises(SystemExit):
        main(["35.5"])
    assert "input_unit must be specified" in capsys.readouterr().err


def test_unit_full_names(capsys):
    main(["37.0", "--unit", "celsius"])
    assert "Average: 98.60 F" in capsys.readouterr().out


def test_unknown_unit_exits(capsys):
    with pytest.raises(SystemExit) as info:
        main(["98.6", "--unit", "kelvin"])
    assert info.value.code == 1
    assert "error: Unsupported temperature unit: 'kelvin'" in capsys.readouterr().err


def test_bad_env_value_exits(monkeypatch, capsys):
    monkeypatch.setenv(ENV_FORCE_CONVERT, "maybe")
    with pytest.raises(SystemExit) as info:
        main(["98.6", "--unit", "F"])
    assert info.value.code == 1
    assert f"error: {ENV_FORCE_CONVERT} must be a boolean" in capsys.readouterr().err


def test_verbose_logs_chosen_action(monkeypatch, caplog, capsys):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    with caplog.at_level(logging.DEBUG, logger="bodytemp.service"):
        main(["37.0", "--unit", "C", "-v"])
    assert "Average: 98.60 F" in capsys.readouterr().out
    assert "unit=C any_f=False any_c=True -> convert_all" in caplog.text
    assert calls[0]["level"] == logging.DEBUG
