"""Application configuration via pydantic-settings.

Values are read from environment variables (.env file). Insurer fees change
more often than the billing rules, so they live here rather than in code.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FeeSettings(BaseSettings):
    """Document fees charged by each insurer at subscription."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    neoliane_fee_sante_seule: Decimal = Field(
        default=Decimal("30"),
        description="Néoliane document fee for a health-only contract (collected separately)",
    )
    neoliane_fee_couple: Decimal = Field(
        default=Decimal("0"),
        description="Néoliane document fee when bundled with a prévoyance contract",
    )
    kereis_included_fee: Decimal = Field(
        default=Decimal("15"),
        description="Kereis fee included in the first payment",
    )
    april_included_fee: Decimal = Field(
        default=Decimal("20"),
        description="April fee included in the first payment",
    )

    @field_validator("*")
    @classmethod
    def validate_non_negative(cls, v: Decimal) -> Decimal:
        """Fees are never negative."""
        if v < 0:
            msg = f"Invalid fee: {v}. Fees must be >= 0"
            raise ValueError(msg)
        return v


class Settings(BaseSettings):
    """Root settings.

    Usage:
        settings = Settings()
        settings.fees.kereis_included_fee
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    fees: FeeSettings = Field(default_factory=FeeSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


# Module-level singleton — import this wherever settings are needed.
settings = Settings()
