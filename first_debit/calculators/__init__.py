"""Date and money helpers shared by every insurer policy."""

from first_debit.calculators.dates import (
    add_months,
    days_between,
    end_of_month,
    format_date_dmy,
    month_start,
    parse_date_dmy,
    set_day_of_month,
)
from first_debit.calculators.money import format_euro, parse_money, to_euro

__all__ = [
    "add_months",
    "days_between",
    "end_of_month",
    "format_date_dmy",
    "month_start",
    "parse_date_dmy",
    "set_day_of_month",
    "format_euro",
    "parse_money",
    "to_euro",
]
