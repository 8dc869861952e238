"""
Rate selection and conversion arithmetic.

A quotation applies to a transaction when its record date lies in the
closed window [transaction_date - N months, transaction_date]. Among those,
the most recent one wins.
"""

from datetime import date, timedelta
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, Optional

from apps.transactions.domain.errors import RateFormatError
from apps.transactions.domain.models import ExchangeRateQuotation

LOOKBACK_MONTHS = 6
CENTS = Decimal("0.01")


def subtract_months(value: date, months: int) -> date:
    """
    Go back whole calendar months keeping the day number.

    A day the target month does not have rolls over into the next month,
    so 2023-12-31 minus 6 months is 2023-07-01.
    """
    month_index = value.year * 12 + (value.month - 1) - months
    year, month = divmod(month_index, 12)
    return date(year, month + 1, 1) + timedelta(days=value.day - 1)


def lookback_window(transaction_date: date, months: int = LOOKBACK_MONTHS) -> tuple[date, date]:
    return subtract_months(transaction_date, months), transaction_date


def select_quotation(
    quotations: Iterable[ExchangeRateQuotation],
    transaction_date: date,
    months: int = LOOKBACK_MONTHS
) -> Optional[ExchangeRateQuotation]:
    """
    Pick the quotation with the latest record date not after the transaction.

    Does not rely on the order the provider returned. Quotations outside the
    window are ignored; on a same-day tie the first one seen is kept.

    Returns:
        The selected quotation, or None if the window is empty
    """
    date_from, date_to = lookback_window(transaction_date, months)
    selected = None
    for quotation in quotations:
        if not date_from <= quotation.record_date <= date_to:
            continue
        if selected is None or quotation.record_date > selected.record_date:
            selected = quotation
    return selected


def parse_rate(raw_rate: str) -> Decimal:
    try:
        rate = Decimal(str(raw_rate).strip())
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise RateFormatError(f"invalid exchange rate {raw_rate!r}") from exc

    if not rate.is_finite():
        raise RateFormatError(f"invalid exchange rate {raw_rate!r}")

    return rate


def convert_amount(amount: Decimal, rate: Decimal) -> Decimal:
    # Rounded once, half away from zero.
    try:
        return (amount * rate).quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise RateFormatError(f"exchange rate {rate} is out of range") from exc
