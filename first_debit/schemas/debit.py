"""Pydantic schemas for the first-debit estimator.

Pure data classes — no business logic. ``DebitForm`` holds the raw field
values, ``DebitInputs`` the normalized values handed to a policy, and
``DebitResult`` is the tagged success/failure record returned to the caller.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class FeeOption(str, Enum):
    """Néoliane document fee option, chosen by the agent."""

    SANTE_SEULE = "sante_seule"              # health only → 30 €
    COUPLE_PREVOYANCE = "couple_prevoyance"  # bundled with prévoyance → 0 €


class FailureReason(str, Enum):
    """Why an estimate could not be computed."""

    INVALID_DATES = "invalid_dates"
    EFFECT_BEFORE_SIGNATURE = "effect_before_signature"
    INCOMPLETE_FIELDS = "incomplete_fields"
    INVALID_DEBIT_DAY = "invalid_debit_day"


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class DebitForm(BaseModel):
    """Raw values as typed in the form. Nothing is validated yet."""

    insurer: str
    premium: str | int | float | Decimal | None = None
    signature_date: str | None = None      # jj/mm/aaaa
    effect_date: str | None = None         # jj/mm/aaaa
    debit_day: int | str | None = None
    fee_option: str | None = None          # "sante_seule" / "30", "couple_prevoyance" / "0"


class DebitInputs(BaseModel):
    """Normalized inputs shared by every insurer policy."""

    model_config = ConfigDict(frozen=True)

    premium: Decimal = Field(default=Decimal("0"), ge=0)
    signature_date: date | None = None
    effect_date: date | None = None
    debit_day: int | None = None
    fee_option: FeeOption = FeeOption.SANTE_SEULE


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


class ChargeLine(BaseModel):
    """One itemized line of the first debit."""

    label: str                         # e.g. "2 mois", "Prorata (11 j)"
    amount: Decimal
    is_fee: bool = False               # the document fee itself


class DebitRejected(BaseModel):
    """Failure variant: the message is shown verbatim to the agent."""

    ok: Literal[False] = False
    reason: FailureReason
    message: str

    def raise_for_rejection(self) -> None:
        """Raise DebitValidationError carrying this rejection."""
        from first_debit.errors import DebitValidationError

        raise DebitValidationError(self.reason, self.message)


class DebitComputed(BaseModel):
    """Success variant: theoretical first debit plus remarks and alerts."""

    ok: Literal[True] = True
    insurer: str                       # Insurer value, e.g. "kereis"
    insurer_label: str                 # e.g. "Kereis (Cegema)"
    amount: Decimal                    # total of the first debit
    charges: list[ChargeLine] = Field(default_factory=list)
    debit_date: date
    remarks: list[str] = Field(default_factory=list)   # always displayed
    alerts: list[str] = Field(default_factory=list)    # uncertain cases only
    separate_fee: Decimal | None = None  # collected apart from the first debit
    included_fee: Decimal | None = None  # announced as part of the first payment

    @model_validator(mode="after")
    def check_single_fee_kind(self) -> DebitComputed:
        """A fee is either collected separately or included, never both."""
        if self.separate_fee is not None and self.included_fee is not None:
            msg = "separate_fee and included_fee are mutually exclusive"
            raise ValueError(msg)
        return self

    def raise_for_rejection(self) -> None:
        """Successful estimates never raise."""


# Tagged on ``ok``: True → DebitComputed, False → DebitRejected
DebitResult = Annotated[Union[DebitComputed, DebitRejected], Field(discriminator="ok")]
