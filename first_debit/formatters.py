"""Plain-text rendering of estimates for the calculator screen.

Amounts use two decimals and a period ("156.67 €"), dates DD/MM/YYYY.
"""

from __future__ import annotations

from first_debit.calculators.dates import format_date_dmy
from first_debit.calculators.money import format_euro
from first_debit.policies.insurers import INSURER_LABELS, RULE_MEMOS, Insurer
from first_debit.schemas.debit import DebitResult


def format_result(result: DebitResult) -> list[str]:
    """Render a DebitResult as display lines.

    A rejection renders as its message alone. A computed estimate renders
    the result card: insurer, amount, date, detail, "À savoir" remarks, then
    the "Cas à confirmer" alerts when there are any.
    """
    if not result.ok:
        return [result.message]

    lines = [
        f"Compagnie : {result.insurer_label}",
        f"Montant du 1er prélèvement : {format_euro(result.amount)}",
        f"Date estimée du 1er prélèvement : {format_date_dmy(result.debit_date)}",
        "Détail :",
    ]
    lines.extend(f"  - {c.label} : {format_euro(c.amount)}" for c in result.charges)
    if result.separate_fee is not None and result.separate_fee > 0:
        lines.append(f"  - Frais de dossier (prélevés séparément) : {format_euro(result.separate_fee)}")
    # April itemizes the fee among the charges already
    if result.included_fee and not any(c.is_fee for c in result.charges):
        lines.append(f"  - Frais {format_euro(result.included_fee)} inclus au 1er paiement")

    if result.remarks:
        lines.append("À savoir :")
        lines.extend(f"  - {r}" for r in result.remarks)

    if result.alerts:
        lines.append("⚠ Cas à confirmer :")
        lines.extend(f"  - {a}" for a in result.alerts)

    return lines


def rule_memo(insurer: Insurer | str) -> list[str]:
    """The "rules at a glance" bullets for one insurer."""
    key = Insurer(insurer)
    return [INSURER_LABELS[key], *(f"  - {line}" for line in RULE_MEMOS[key])]
