"""
Mock provider for testing and local development.
Serves quotations from memory instead of calling the Treasury API.
"""

from datetime import date
from decimal import Decimal

from apps.transactions.domain.interfaces import BaseExchangeRateProvider
from apps.transactions.domain.models import ExchangeRateQuotation


class MockExchangeRateProvider(BaseExchangeRateProvider):
    """
    Mock provider with the same contract as TreasuryExchangeRateProvider.

    When built with explicit quotations it serves exactly those. Otherwise it
    publishes one quotation per quarter end for each pair in BASE_RATES,
    the same cadence as the Treasury dataset.
    """

    # Approximate units of currency per U.S. dollar
    BASE_RATES = {
        "Brazil-Real": Decimal("4.858"),
        "Canada-Dollar": Decimal("1.354"),
        "Euro Zone-Euro": Decimal("0.944"),
        "Mexico-Peso": Decimal("17.37"),
        "United Kingdom-Pound": Decimal("0.819"),
    }

    QUARTER_ENDS = ((3, 31), (6, 30), (9, 30), (12, 31))

    def __init__(self, quotations: list[ExchangeRateQuotation] | None = None):
        self.quotations = quotations
        self.calls: list[tuple[str, str, date, date]] = []

    def get_quotations(
        self,
        country: str,
        currency: str,
        date_from: date,
        date_to: date
    ) -> list[ExchangeRateQuotation]:
        self.calls.append((country, currency, date_from, date_to))
        description = f"{country}-{currency}"

        if self.quotations is not None:
            candidates = self.quotations
        else:
            candidates = self._quarterly_quotations(description, date_from, date_to)

        matching = [
            q for q in candidates
            if q.country_currency_desc == description and date_from <= q.record_date <= date_to
        ]
        return sorted(matching, key=lambda q: q.record_date, reverse=True)

    def _quarterly_quotations(self, description: str, date_from: date, date_to: date) -> list[ExchangeRateQuotation]:
        rate = self.BASE_RATES.get(description)
        if rate is None:
            return []

        return [
            ExchangeRateQuotation(description, str(rate), date(year, month, day))
            for year in range(date_from.year, date_to.year + 1)
            for month, day in self.QUARTER_ENDS
        ]
