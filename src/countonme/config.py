"""Engine settings loaded from the environment."""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """
    Formatting limits for reduced results.

    Read from COUNTONME_MIN_FRACTION_DIGITS / COUNTONME_MAX_FRACTION_DIGITS;
    blank variables fall back to the defaults.

    Attributes:
        min_fraction_digits: Fraction digits always shown
        max_fraction_digits: Results are rounded to this many fraction digits
    """

    min_fraction_digits: int = Field(0, ge=0)
    max_fraction_digits: int = Field(5, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="COUNTONME_",
        env_ignore_empty=True,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def check_fraction_range(self) -> EngineSettings:
        if self.max_fraction_digits < self.min_fraction_digits:
            raise ValueError("max_fraction_digits must not be below min_fraction_digits")
        return self
