from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConverterSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="COORD_", extra="ignore")

    INVERSE_ITERATIONS: int = Field(default=0, ge=0)
    STRICT_VALIDATION: bool = True
    OUTPUT_PRECISION: int = Field(default=6, ge=0)


def load_settings(**overrides: Any) -> ConverterSettings:
    return ConverterSettings(**overrides)
