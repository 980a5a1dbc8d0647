"""Theoretical first premium debit for health-insurance subscriptions."""

__version__ = "1.0.0"
