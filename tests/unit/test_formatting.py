"""Unit tests for result formatting and engine settings."""

import pytest
from pydantic import ValidationError

from countonme import EngineSettings, ExpressionEngine, format_result


class TestFormatResult:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (6.0, "6"),
            (10, "10"),
            (2.5, "2.5"),
            (-3.0, "-3"),
            (1 / 3, "0.33333"),
            (2 / 3, "0.66667"),
            (0.1 + 0.2, "0.3"),
            (1234567.0, "1234567"),
            (1e20, "100000000000000000000"),
            (0.000001, "0"),
            (-0.000001, "0"),
            (-0.0, "0"),
        ],
    )
    def test_default_format(self, value, expected):
        assert format_result(value) == expected

    def test_no_grouping_separator(self):
        assert "," not in format_result(9876543210.125)

    def test_largest_double(self):
        text = format_result(1.7976931348623157e308)
        assert len(text) == 309
        assert text.startswith("17976931348623157")

    def test_max_fraction_digits(self):
        assert format_result(1 / 3, EngineSettings(max_fraction_digits=2)) == "0.33"

    def test_zero_fraction_digits(self):
        assert format_result(2.5, EngineSettings(max_fraction_digits=0)) == "2"
        assert format_result(3.5, EngineSettings(max_fraction_digits=0)) == "4"

    def test_min_fraction_digits(self):
        assert format_result(2.0, EngineSettings(min_fraction_digits=2)) == "2.00"
        assert format_result(2.125, EngineSettings(min_fraction_digits=2)) == "2.125"


def clear_env(monkeypatch) -> None:
    monkeypatch.delenv("COUNTONME_MIN_FRACTION_DIGITS", raising=False)
    monkeypatch.delenv("COUNTONME_MAX_FRACTION_DIGITS", raising=False)


class TestEngineSettings:
    def test_defaults(self, monkeypatch):
        clear_env(monkeypatch)
        settings = EngineSettings()
        assert settings.min_fraction_digits == 0
        assert settings.max_fraction_digits == 5

    def test_rejects_negative_minimum(self):
        with pytest.raises(ValidationError):
            EngineSettings(min_fraction_digits=-1)

    def test_rejects_max_below_min(self):
        with pytest.raises(ValidationError) as exc_info:
            EngineSettings(min_fraction_digits=3, max_fraction_digits=2)
        assert "max_fraction_digits must not be below min_fraction_digits" in str(exc_info.value)

    def test_is_frozen(self, monkeypatch):
        clear_env(monkeypatch)
        settings = EngineSettings()
        with pytest.raises(ValidationError):
            settings.max_fraction_digits = 2

    def test_reads_environment(self, monkeypatch):
        clear_env(monkeypatch)
        monkeypatch.setenv("COUNTONME_MAX_FRACTION_DIGITS", "3")
        settings = EngineSettings()
        assert settings.max_fraction_digits == 3
        assert settings.min_fraction_digits == 0
        assert format_result(1 / 3, settings) == "0.333"

    def test_blank_environment_uses_defaults(self, monkeypatch):
        clear_env(monkeypatch)
        monkeypatch.setenv("COUNTONME_MAX_FRACTION_DIGITS", "")
        assert EngineSettings().max_fraction_digits == 5

    def test_rejects_non_integer_environment(self, monkeypatch):
        clear_env(monkeypatch)
        monkeypatch.setenv("COUNTONME_MIN_FRACTION_DIGITS", "two")
        with pytest.raises(ValidationError) as exc_info:
            EngineSettings()
        assert "min_fraction_digits" in str(exc_info.value)

    def test_environment_range_is_checked(self, monkeypatch):
        clear_env(monkeypatch)
        monkeypatch.setenv("COUNTONME_MIN_FRACTION_DIGITS", "6")
        with pytest.raises(ValidationError):
            EngineSettings()

    def test_engine_uses_environment_by_default(self, monkeypatch):
        clear_env(monkeypatch)
        monkeypatch.setenv("COUNTONME_MAX_FRACTION_DIGITS", "2")
        engine = ExpressionEngine.from_text("1 / 3")
        engine.reduce()
        assert engine.text == "0.33"
