"""Insurer first-debit policies and the dispatcher that selects them."""

from first_debit.policies.engine import evaluate, evaluate_form, parse_form, validate
from first_debit.policies.insurers import DEBIT_DAY_OPTIONS, INSURER_LABELS, Insurer
from first_debit.policies.rules import (
    POLICY_EVALUATORS,
    evaluate_april,
    evaluate_kereis,
    evaluate_neoliane,
)

__all__ = [
    "evaluate",
    "evaluate_form",
    "parse_form",
    "validate",
    "DEBIT_DAY_OPTIONS",
    "INSURER_LABELS",
    "Insurer",
    "POLICY_EVALUATORS",
    "evaluate_april",
    "evaluate_kereis",
    "evaluate_neoliane",
]
