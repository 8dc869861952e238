"""
Pure domain entities (POPOs).
No dependency on Django or the ORM.
Also holds the request and result DTOs of TransactionService.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Transaction:
    """An immutable recorded purchase. Never updated once stored."""

    id: str
    description: str
    transaction_date: date
    amount: Decimal


@dataclass(frozen=True)
class ExchangeRateQuotation:
    """A rate published by the exchange-rate feed for one record date."""

    country_currency_desc: str
    exchange_rate: str
    record_date: date


@dataclass
class CreateTransactionDTO:
    """Request DTO for recording a purchase transaction."""
    description: str
    transaction_date: Optional[date]
    amount: Optional[Decimal]


@dataclass
class RetrieveTransactionDTO:
    """Request DTO for retrieving a transaction converted to another currency."""
    id: str
    country: str
    currency: str


@dataclass
class ConversionResultDTO:
    """Result DTO for a retrieved transaction. Built on every request, never stored."""
    id: str
    description: str
    transaction_date: date
    original_amount: Decimal
    exchange_rate: Decimal
    converted_amount: Decimal
