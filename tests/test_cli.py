import json

import pytest

import cli
from config import config


@pytest.fixture(autouse=True)
def standard_pressure(monkeypatch):
    monkeypatch.setattr(config, "USE_ELEVATION_PRESSURE", False)


def test_demo_prints_each_elevation(capsys):
    assert cli.main([]) == 0
    lines = capsys.readouterr().out.split()
    assert lines == ["3.93"] * 5


def test_single_elevation(capsys):
    assert cli.main(["--temp", "77", "--rh", "70", "--elevation", "0"]) == 0
    assert capsys.readouterr().out.strip() == "98.34"


def test_elevation_pressure_flag(capsys):
    assert cli.main(["--elevation", "0", "--elevation", "1500", "--use-elevation-pressure"]) == 0
    sea, high = [float(v) for v in capsys.readouterr().out.split()]
    assert sea == 3.93
    assert high > sea


def test_details_json(capsys):
    assert cli.main(["--temp", "72", "--rh", "10", "--elevation", "0", "--details"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["gpp"] == 11.82
    assert payload["atmospheric_pressure_inhg"] == 29.921


def test_explicit_demo_values_use_default_elevation(capsys, monkeypatch):
    monkeypatch.setattr(config, "DEFAULT_ELEVATION", 0.0)
    assert cli.main(["--temp", "42", "--rh", "10"]) == 0
    assert capsys.readouterr().out.split() == ["3.93"]


def test_partial_arguments_keep_demo_defaults(capsys, monkeypatch):
    monkeypatch.setattr(config, "DEFAULT_ELEVATION", 0.0)
    assert cli.main(["--rh", "70", "--temp", "77"]) == 0
    assert capsys.readouterr().out.split() == ["98.34"]
    assert cli.main(["--rh", "10"]) == 0
    assert capsys.readouterr().out.split() == ["3.93"]


def test_out_of_range_exit_code(capsys):
    assert cli.main(["--rh", "150"]) == 2
    err = capsys.readouterr().err
    assert err.count("rel_humidity") == 1
    assert err.startswith("error: ")


def test_high_elevation_demo_reports_standard_gpp(capsys):
    assert cli.main(["--elevation", "50000", "--details"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["gpp"] == 3.93
    assert payload["atmospheric_pressure_inhg"] is None
