"""Per-insurer first-debit rules.

Each function takes normalized DebitInputs and returns a DebitResult with the
theoretical amount, date, itemized lines, remarks, and alerts. Pure Python,
deterministic — no clock, no I/O. The insurer's own schedule (échéancier,
sent by e-mail before the effect date) always prevails over these estimates.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, timedelta
from decimal import Decimal

from first_debit.calculators.dates import (
    add_months,
    days_between,
    end_of_month,
    format_date_dmy,
    month_start,
    set_day_of_month,
)
from first_debit.calculators.money import format_euro, to_euro
from first_debit.config import settings
from first_debit.policies.insurers import (
    FEE_OPTION_LABELS,
    INSURER_LABELS,
    Insurer,
    neoliane_fee,
)
from first_debit.schemas.debit import (
    ChargeLine,
    DebitComputed,
    DebitInputs,
    DebitRejected,
    DebitResult,
    FailureReason,
)

INCOMPLETE_FIELDS_MESSAGE = "Renseignez tous les champs."

# Néoliane: signatures after the 25th skip one month
NEOLIANE_SIGNATURE_CUTOFF = 25
# Néoliane: effect this close to month end may be deferred by the company
NEOLIANE_LATE_EFFECT_DAYS = 3
# Kereis: same-month signatures after the 15th pay 2 months
KEREIS_HALF_MONTH_DAY = 15
# April: fewer days than this between signature and effect → likely deferral
APRIL_SHORT_DELAY_DAYS = 12
# April: contribution call sent this many days before the effect date
APRIL_CALL_NOTICE_DAYS = 15


def _check_complete(inputs: DebitInputs) -> DebitRejected | None:
    """Return a rejection when a required input is missing, or None."""
    if (
        not inputs.premium
        or inputs.signature_date is None
        or inputs.effect_date is None
        or not inputs.debit_day
    ):
        return DebitRejected(
            reason=FailureReason.INCOMPLETE_FIELDS,
            message=INCOMPLETE_FIELDS_MESSAGE,
        )
    return None


def _total(charges: list[ChargeLine]) -> Decimal:
    return sum((c.amount for c in charges), Decimal("0"))


def _count_started_periods(effect: date, debit_date: date) -> int:
    """Date-to-date periods (effect, effect + 1 month, …) started by debit_date.

    At least 1: the first debit pays for the first period even when it
    happens before the effect date.
    """
    count = 0
    while add_months(effect, count) <= debit_date:
        count += 1
    return max(count, 1)


# ── Néoliane ──────────────────────────────────────────────────────────────


def evaluate_neoliane(inputs: DebitInputs) -> DebitResult:
    """Néoliane Santé: date-to-date billing, never prorated.

    - Signature ≤ 25 → first debit in M+1, otherwise M+2, on the chosen day
      (5 or 10). Never in the effect month itself: at the earliest in the
      month after it.
    - The first debit charges every date-to-date period already started.
    - The document fee is collected separately.
    """
    rejected = _check_complete(inputs)
    if rejected:
        return rejected

    premium = inputs.premium
    signature = inputs.signature_date
    effect = inputs.effect_date
    alerts: list[str] = []

    early_signature = signature.day <= NEOLIANE_SIGNATURE_CUTOFF
    debit_month = month_start(add_months(signature, 1 if early_signature else 2))

    # Earliest debit month is the one following the effect month
    first_allowed = month_start(add_months(month_start(effect), 1))
    if debit_month < first_allowed:
        debit_month = first_allowed
    offset = (debit_month.year - signature.year) * 12 + debit_month.month - signature.month

    debit_date = set_day_of_month(debit_month, inputs.debit_day)

    periods = _count_started_periods(effect, debit_date)
    amount = to_euro(premium * periods)
    charges = [ChargeLine(label=f"{periods} mois", amount=amount)]

    if periods >= 2:
        alerts.append(
            f"Le 1er prélèvement regroupe {periods} périodes déjà commencées "
            f"(de date à date depuis le {format_date_dmy(effect)}). "
            "Regroupement à confirmer par l’échéancier Néoliane."
        )

    if days_between(effect, end_of_month(effect)) <= NEOLIANE_LATE_EFFECT_DAYS:
        alerts.append(
            "Effet très tard dans le mois : Néoliane peut décaler le 1er prélèvement "
            "d’un mois. L’échéancier (envoyé par la compagnie) confirmera."
        )

    fee = neoliane_fee(inputs.fee_option)

    return DebitComputed(
        insurer=Insurer.NEOLIANE.value,
        insurer_label=INSURER_LABELS[Insurer.NEOLIANE],
        amount=amount,
        charges=charges,
        debit_date=debit_date,
        remarks=[
            "Cotisations de date à date (pas de prorata).",
            f"1er passage théorique en M+{offset} (signature "
            f"{'≤' if early_signature else '>'} {NEOLIANE_SIGNATURE_CUTOFF} → "
            f"{'M+1' if early_signature else 'M+2'}, jamais dans le mois d’effet).",
            "Toutes les périodes commencées à la date du 1er passage sont prélevées "
            "ensemble : règle approximative, non confirmée par la compagnie.",
            f"Frais de dossier ({FEE_OPTION_LABELS[inputs.fee_option]}) : "
            f"{format_euro(fee)}, prélevés séparément (souvent autour du 15).",
        ],
        alerts=alerts,
        separate_fee=to_euro(fee),
    )


# ── Kereis ────────────────────────────────────────────────────────────────


def evaluate_kereis(inputs: DebitInputs) -> DebitResult:
    """Kereis (Cegema): 1 or 2 months depending on the half-month rule.

    - Signature and effect in the same month: signature 1–15 → 1 month,
      16–31 → 2 months. Otherwise 1 month.
    - Debit on the chosen day (5, 12 or 24) of the effect month; rolled to
      the next month when that day is already past the signature.
    - Fee included in the first payment.
    """
    rejected = _check_complete(inputs)
    if rejected:
        return rejected

    premium = inputs.premium
    signature = inputs.signature_date
    effect = inputs.effect_date
    alerts: list[str] = []

    same_month = (signature.year, signature.month) == (effect.year, effect.month)
    months = 2 if same_month and signature.day > KEREIS_HALF_MONTH_DAY else 1

    debit_date = set_day_of_month(effect, inputs.debit_day)
    if same_month and debit_date < signature:
        debit_date = set_day_of_month(add_months(month_start(effect), 1), inputs.debit_day)
        alerts.append(
            "Chez Kereis, le 1er passage est souvent le 24 quand effet et souscription "
            "sont le même mois. L’échéancier confirmera la date exacte."
        )

    amount = to_euro(premium * months)
    fee = to_euro(settings.fees.kereis_included_fee)

    return DebitComputed(
        insurer=Insurer.KEREIS.value,
        insurer_label=INSURER_LABELS[Insurer.KEREIS],
        amount=amount,
        charges=[ChargeLine(label=f"{months} mois", amount=amount)],
        debit_date=debit_date,
        remarks=[
            f"Règle : 1–{KEREIS_HALF_MONTH_DAY} → 1 mois ; "
            f"{KEREIS_HALF_MONTH_DAY + 1}–31 → 2 mois si effet le même mois.",
            "Sinon : 1 mois, prélevé au jour choisi dans le mois d’effet.",
            "Jours possibles : 5 / 12 / 24.",
            f"Frais {format_euro(fee)} inclus au 1er paiement.",
        ],
        alerts=alerts,
        included_fee=fee,
    )


# ── April ─────────────────────────────────────────────────────────────────


def evaluate_april(inputs: DebitInputs) -> DebitResult:
    """April (santé): prorata of the effect month, or deferral with bundling.

    - Effect on the 1st → 1 full month; otherwise prorata of the days left
      in the effect month (effect day included).
    - Debit day (1–10) before the effect day → the debit moves to the next
      month and also collects that month's full premium.
    - The fixed fee is always part of the first debit.
    """
    rejected = _check_complete(inputs)
    if rejected:
        return rejected

    premium = inputs.premium
    signature = inputs.signature_date
    effect = inputs.effect_date
    alerts: list[str] = []

    in_effect_month = inputs.debit_day >= effect.day
    if in_effect_month:
        debit_date = set_day_of_month(effect, inputs.debit_day)
    else:
        debit_date = set_day_of_month(add_months(month_start(effect), 1), inputs.debit_day)

    charges: list[ChargeLine] = []
    if effect.day == 1:
        charges.append(ChargeLine(label="1 mois complet", amount=to_euro(premium)))
    else:
        days_in_month = end_of_month(effect).day
        remaining = days_in_month - effect.day + 1
        prorata = to_euro(premium * remaining / days_in_month)
        charges.append(ChargeLine(label=f"Prorata ({remaining} j)", amount=prorata))

    if not in_effect_month:
        charges.append(ChargeLine(label="1 mois complet (mois suivant)", amount=to_euro(premium)))

    fee = to_euro(settings.fees.april_included_fee)
    charges.append(ChargeLine(label="Frais de dossier", amount=fee, is_fee=True))

    if not in_effect_month:
        alerts.append(
            "Jour choisi antérieur à la date d’effet : le 1er prélèvement est reporté au "
            "mois suivant avec la 2e cotisation. April peut aussi effectuer un prélèvement "
            "exceptionnel du prorata fin de mois d’effet (rare). L’échéancier confirmera."
        )

    if days_between(signature, effect) < APRIL_SHORT_DELAY_DAYS:
        alerts.append(
            "Délais courts entre signature et effet : fortes chances de décalage vers fin "
            "de mois d’effet ou début du mois suivant. L’échéancier (envoyé par la "
            "compagnie) fera foi."
        )

    # Call for contribution: ~15 days before effect, never before signature
    call_date = max(signature, effect - timedelta(days=APRIL_CALL_NOTICE_DAYS))

    remarks = [
        "Effet au 1er : 1 mois complet ; effet en cours de mois : prorata des jours restants.",
        "Jour de prélèvement : 1 à 10.",
        f"Appel de cotisation envoyé ~{APRIL_CALL_NOTICE_DAYS} jours avant l’effet "
        f"(raccourci si <{APRIL_CALL_NOTICE_DAYS} j) : attendu vers le {format_date_dmy(call_date)}.",
        f"Frais {format_euro(fee)} inclus au 1er paiement.",
    ]
    if not in_effect_month:
        remarks.append(
            "Report au mois suivant : mois d’effet et mois suivant prélevés ensemble "
            "(règle approximative, non confirmée par la compagnie)."
        )

    return DebitComputed(
        insurer=Insurer.APRIL.value,
        insurer_label=INSURER_LABELS[Insurer.APRIL],
        amount=_total(charges),
        charges=charges,
        debit_date=debit_date,
        remarks=remarks,
        alerts=alerts,
        included_fee=fee,
    )


# Registry for the dispatcher
POLICY_EVALUATORS: dict[Insurer, Callable[[DebitInputs], DebitResult]] = {
    Insurer.NEOLIANE: evaluate_neoliane,
    Insurer.KEREIS: evaluate_kereis,
    Insurer.APRIL: evaluate_april,
}
