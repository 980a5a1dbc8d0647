"""Insurer definitions: identifiers, display labels, allowed debit days."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from first_debit.config import settings
from first_debit.schemas.debit import FeeOption


class Insurer(StrEnum):
    """The 3 health insurers whose first debit can be estimated."""

    NEOLIANE = "neoliane"
    KEREIS = "kereis"
    APRIL = "april"


INSURER_LABELS: dict[Insurer, str] = {
    Insurer.NEOLIANE: "Néoliane Santé",
    Insurer.KEREIS: "Kereis (Cegema)",
    Insurer.APRIL: "April (santé)",
}

# Debit days each insurer lets the agent pick
DEBIT_DAY_OPTIONS: dict[Insurer, tuple[int, ...]] = {
    Insurer.NEOLIANE: (5, 10),
    Insurer.KEREIS: (5, 12, 24),
    Insurer.APRIL: tuple(range(1, 11)),
}

FEE_OPTION_LABELS: dict[FeeOption, str] = {
    FeeOption.SANTE_SEULE: "santé seule",
    FeeOption.COUPLE_PREVOYANCE: "couplé prévoyance",
}

# Legacy form values: the fee amount itself
FEE_OPTION_ALIASES: dict[str, FeeOption] = {
    "30": FeeOption.SANTE_SEULE,
    "0": FeeOption.COUPLE_PREVOYANCE,
}


def neoliane_fee(option: FeeOption) -> Decimal:
    """Document fee amount for a Néoliane fee option."""
    if option == FeeOption.COUPLE_PREVOYANCE:
        return settings.fees.neoliane_fee_couple
    return settings.fees.neoliane_fee_sante_seule


# "Rules at a glance" bullets shown next to the calculator
RULE_MEMOS: dict[Insurer, tuple[str, ...]] = {
    Insurer.NEOLIANE: (
        "1er prélèvement : 5 ou 10.",
        "Signature ≤25 → M+1 ; >25 → M+2 (au plus tôt le mois suivant l’effet).",
        "Jamais de prorata : mois pleins de date à date.",
        "Frais 30 € (santé seule) prélevés séparément (~15) ; 0 € si couplé.",
    ),
    Insurer.KEREIS: (
        "Jours : 5 / 12 / 24.",
        "Si effet = mois de souscription : 1–15 → 1 mois ; 16–31 → 2 mois.",
        "Sinon : 1 mois, au jour choisi dans le mois d’effet.",
        "Cas rares : date exacte ajustée → échéancier Kereis.",
    ),
    Insurer.APRIL: (
        "Effet au 1er : 1 mois. Effet en cours : prorata jours restants.",
        "Jour 1 à 10. Jour antérieur à l’effet → report au mois suivant avec la 2e cotisation.",
        "Délais courts → possible décalage fin de mois d’effet / début mois suivant.",
        "Appel de cotisation ~15 j avant l’effet (raccourci si <15 j). Frais 20 € inclus.",
    ),
}
