"""Tests for logging setup."""

from __future__ import annotations

import logging

import structlog

from first_debit.config import settings
from first_debit.log import configure_logging


def test_configure_logging_sets_package_level() -> None:
    configure_logging("debug")
    assert logging.getLogger("first_debit").level == logging.DEBUG
    assert structlog.is_configured()


def test_configure_logging_defaults_to_settings() -> None:
    configure_logging()
    assert logging.getLogger("first_debit").level == getattr(logging, settings.log_level)
