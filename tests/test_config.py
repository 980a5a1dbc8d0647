"""Tests for settings loading and validation."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from first_debit.config import FeeSettings, Settings


class TestFeeSettings:
    def test_defaults(self) -> None:
        fees = FeeSettings(_env_file=None)
        assert fees.neoliane_fee_sante_seule == Decimal("30")
        assert fees.neoliane_fee_couple == Decimal("0")
        assert fees.kereis_included_fee == Decimal("15")
        assert fees.april_included_fee == Decimal("20")

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KEREIS_INCLUDED_FEE", "18.50")
        assert FeeSettings(_env_file=None).kereis_included_fee == Decimal("18.50")

    def test_negative_fee_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FeeSettings(_env_file=None, april_included_fee=Decimal("-1"))


class TestSettings:
    def test_log_level_normalized(self) -> None:
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="verbose")

    def test_is_production(self) -> None:
        assert Settings(_env_file=None, environment="production").is_production is True
        assert Settings(_env_file=None, environment="development").is_production is False
