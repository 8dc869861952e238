from abc import ABC, abstractmethod
from datetime import date

from apps.transactions.domain.conversion import LOOKBACK_MONTHS, lookback_window, select_quotation
from apps.transactions.domain.errors import RateUnavailableError
from apps.transactions.domain.models import ExchangeRateQuotation, Transaction


class BaseTransactionLedger(ABC):
    @abstractmethod
    def create(self, transaction: Transaction) -> str:
        """Store a new transaction and return its id. Raises StorageError."""

    @abstractmethod
    def find_by_id(self, transaction_id: str) -> Transaction:
        """Raises NotFoundError when absent, StorageError on I/O failure."""


class BaseExchangeRateProvider(ABC):
    lookback_months: int = LOOKBACK_MONTHS

    @abstractmethod
    def get_quotations(
        self,
        country: str,
        currency: str,
        date_from: date,
        date_to: date
    ) -> list[ExchangeRateQuotation]:
        """
        Return published quotations for "<country>-<currency>" with a record
        date in [date_from, date_to], most recent first. Raises UpstreamError.
        """

    def get_rate(self, transaction_date: date, country: str, currency: str) -> ExchangeRateQuotation:
        """
        Return the quotation that applies to a transaction made on transaction_date.

        Raises:
            RateUnavailableError: nothing was published inside the lookback window
            UpstreamError: the provider could not be queried
        """
        date_from, date_to = lookback_window(transaction_date, self.lookback_months)
        quotations = self.get_quotations(country, currency, date_from, date_to)

        quotation = select_quotation(quotations, transaction_date, self.lookback_months)
        if quotation is None:
            raise RateUnavailableError(
                f"the purchase cannot be converted to {country}-{currency}: "
                f"no exchange rate between {date_from.isoformat()} and {date_to.isoformat()}"
            )
        return quotation
