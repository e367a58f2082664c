"""Tests for scripts/lookup_number.py."""

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "lookup_number.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("lookup_number", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_phone_number(script, capsys):
    assert script.main(["99893592902"]) == 0
    out = capsys.readouterr().out
    assert "country: UZ (Uzbekistan)" in out
    assert "prefix: 998" in out


def test_country_code(script, capsys):
    assert script.main(["US"]) == 0
    assert "calling code: 1" in capsys.readouterr().out


def test_not_found(script, capsys):
    assert script.main(["12229359290"]) == 1
    assert "not found (no_match)" in capsys.readouterr().out


def test_malformed(script, capsys):
    assert script.main(["+12069359290"]) == 1
    assert "not found (malformed)" in capsys.readouterr().out


def test_unknown_country(script, capsys):
    assert script.main(["ZZ"]) == 1
    assert "calling code: not found" in capsys.readouterr().out


def test_usage(script, capsys):
    assert script.main([]) == 1
    assert "Usage" in capsys.readouterr().out
