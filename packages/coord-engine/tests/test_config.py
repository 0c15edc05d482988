import pytest
from pydantic import ValidationError

from coord_engine.config import ConverterSettings, load_settings


def test_load_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("COORD_INVERSE_ITERATIONS", raising=False)
    monkeypatch.delenv("COORD_STRICT_VALIDATION", raising=False)
    monkeypatch.delenv("COORD_OUTPUT_PRECISION", raising=False)
    settings = load_settings()

    assert settings.INVERSE_ITERATIONS == 0
    assert settings.STRICT_VALIDATION is True
    assert settings.OUTPUT_PRECISION == 6


def test_load_settings_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("COORD_INVERSE_ITERATIONS", "2")
    monkeypatch.setenv("COORD_STRICT_VALIDATION", "false")
    monkeypatch.setenv("COORD_OUTPUT_PRECISION", "8")
    settings = load_settings()

    assert settings.INVERSE_ITERATIONS == 2
    assert settings.STRICT_VALIDATION is False
    assert settings.OUTPUT_PRECISION == 8


def test_load_settings_overrides_win(monkeypatch) -> None:
    monkeypatch.setenv("COORD_INVERSE_ITERATIONS", "2")

    assert load_settings(INVERSE_ITERATIONS=1).INVERSE_ITERATIONS == 1


def test_settings_reject_negative_iterations() -> None:
    with pytest.raises(ValidationError):
        ConverterSettings(INVERSE_ITERATIONS=-1)
