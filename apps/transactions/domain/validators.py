"""
Validation rules for incoming requests.
Each check raises ValidationError on the first violated rule.
"""

import uuid
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from apps.transactions.domain.errors import ValidationError

DESCRIPTION_MAX_LENGTH = 50
# decimal(12,2) column
MAX_AMOUNT = Decimal("10000000000")


def validate_description(description: str | None) -> None:
    if not description:
        raise ValidationError("description is required")
    if len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(f"description must not exceed {DESCRIPTION_MAX_LENGTH} characters")


def validate_transaction_date(transaction_date: date | None) -> None:
    if transaction_date is None:
        raise ValidationError("transaction date is required")
    # datetime is a date subclass but carries a time of day
    if isinstance(transaction_date, datetime) or not isinstance(transaction_date, date):
        raise ValidationError("invalid date format, expected YYYY-MM-DD")


def to_decimal(amount) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, bool):
        raise ValidationError("amount must be a number")
    try:
        # str() first so floats keep their shortest repr (9.55, not 9.5500000000000007105)
        return Decimal(str(amount))
    except (InvalidOperation, ValueError):
        raise ValidationError("amount must be a number")


def validate_amount(amount) -> None:
    if amount is None:
        raise ValidationError("amount is required")

    value = to_decimal(amount)
    if not value.is_finite():
        raise ValidationError("amount is required")
    if value < 0:
        raise ValidationError("amount must not be negative")
    if value >= MAX_AMOUNT:
        raise ValidationError("amount exceeds 9999999999.99")
    if value != value.quantize(Decimal("0.01")):
        raise ValidationError("amount must be rounded to two decimal places")


def validate_create_request(request) -> None:
    """
    Check a CreateTransactionDTO against the domain rules.

    Rules, in order:
        - description is present and at most 50 characters
        - transaction_date is a calendar date
        - amount is present, not negative and below 10,000,000,000
        - amount has at most two fractional digits

    Raises:
        ValidationError: naming the first violated rule
    """
    if request is None:
        raise ValidationError("transaction is required")

    validate_description(request.description)
    validate_transaction_date(request.transaction_date)
    validate_amount(request.amount)


def validate_transaction_id(transaction_id: str | None) -> None:
    if not transaction_id:
        raise ValidationError("id is required")
    try:
        uuid.UUID(str(transaction_id))
    except ValueError:
        raise ValidationError("id must be a valid UUID")


def validate_retrieve_request(request) -> None:
    if request is None:
        raise ValidationError("request is required")

    validate_transaction_id(request.id)
    if not request.country:
        raise ValidationError("country_currency is required")
    if not request.currency:
        raise ValidationError("currency is required")
