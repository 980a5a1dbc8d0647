"""First-debit engine — parses the form and dispatches to an insurer rule.

Pure Python orchestrator. No state between calls: the calling screen
re-invokes ``evaluate_form`` on every field change and may memoize results.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from first_debit.calculators.dates import parse_date_dmy
from first_debit.calculators.money import parse_money
from first_debit.errors import DebitValidationError
from first_debit.policies.insurers import (
    DEBIT_DAY_OPTIONS,
    FEE_OPTION_ALIASES,
    INSURER_LABELS,
    Insurer,
)
from first_debit.policies.rules import POLICY_EVALUATORS
from first_debit.schemas.debit import (
    DebitForm,
    DebitInputs,
    DebitResult,
    FailureReason,
    FeeOption,
)

logger = logging.getLogger(__name__)

INVALID_DATES_MESSAGE = "Saisissez dates au format jj/mm/aaaa."
EFFECT_BEFORE_SIGNATURE_MESSAGE = "La date d’effet doit être postérieure à la date de signature."


def _parse_debit_day(value: int | str | None) -> int | None:
    """Debit day as an int; None when empty or not a number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _parse_fee_option(value: str | None) -> FeeOption:
    """Fee option from its name or legacy amount; defaults to health-only."""
    if value is None or not str(value).strip():
        return FeeOption.SANTE_SEULE
    raw = str(value).strip()
    if raw in FEE_OPTION_ALIASES:
        return FEE_OPTION_ALIASES[raw]
    return FeeOption(raw)


def parse_form(form: DebitForm) -> DebitInputs:
    """Normalize raw field values. Bad premium → 0, bad dates → None.

    The fee option only matters to Néoliane and is ignored for the others.
    """
    if form.insurer == Insurer.NEOLIANE:
        fee_option = _parse_fee_option(form.fee_option)
    else:
        fee_option = FeeOption.SANTE_SEULE
    return DebitInputs(
        premium=parse_money(form.premium),
        signature_date=parse_date_dmy(form.signature_date),
        effect_date=parse_date_dmy(form.effect_date),
        debit_day=_parse_debit_day(form.debit_day),
        fee_option=fee_option,
    )


def validate(inputs: DebitInputs) -> None:
    """Check the dates shared by every insurer.

    Raises:
        DebitValidationError: a date is missing/invalid, or the effect date
            precedes the signature date.
    """
    if inputs.signature_date is None or inputs.effect_date is None:
        raise DebitValidationError(FailureReason.INVALID_DATES, INVALID_DATES_MESSAGE)
    if inputs.effect_date < inputs.signature_date:
        raise DebitValidationError(
            FailureReason.EFFECT_BEFORE_SIGNATURE,
            EFFECT_BEFORE_SIGNATURE_MESSAGE,
        )


def check_debit_day(insurer: Insurer, inputs: DebitInputs) -> None:
    """Reject a debit day the insurer does not offer.

    An empty day is left to the insurer rule, which reports incomplete fields.
    """
    if not inputs.debit_day:
        return
    allowed = DEBIT_DAY_OPTIONS[insurer]
    if inputs.debit_day not in allowed:
        days = " / ".join(str(d) for d in allowed)
        raise DebitValidationError(
            FailureReason.INVALID_DEBIT_DAY,
            f"Jour de prélèvement non proposé par {INSURER_LABELS[insurer]} (jours possibles : {days}).",
        )


def evaluate(insurer: Insurer | str, inputs: DebitInputs) -> DebitResult:
    """Run the rule of one insurer on normalized inputs.

    Raises:
        ValueError: unknown insurer identifier.
    """
    key = Insurer(insurer)
    result = POLICY_EVALUATORS[key](inputs)
    if result.ok:
        logger.debug(
            "First debit estimated for %s: %s on %s (%d alerts)",
            key.value, result.amount, result.debit_date, len(result.alerts),
        )
    else:
        logger.debug("First debit not estimated for %s: %s", key.value, result.reason.value)
    return result


def evaluate_form(form: DebitForm | Mapping[str, Any]) -> DebitResult:
    """Parse, validate and evaluate the calculator form.

    Returns a DebitRejected for any validation failure; an unknown insurer,
    or an unknown Néoliane fee option, raises ValueError.
    """
    if not isinstance(form, DebitForm):
        form = DebitForm.model_validate(form)

    insurer = Insurer(form.insurer)
    inputs = parse_form(form)

    try:
        validate(inputs)
        check_debit_day(insurer, inputs)
    except DebitValidationError as exc:
        logger.info("Form rejected for %s: %s", insurer.value, exc.reason.value)
        return exc.to_result()

    return evaluate(insurer, inputs)
