import logging
from datetime import date

import requests
from django.conf import settings

from apps.transactions.domain.errors import UpstreamError
from apps.transactions.domain.interfaces import BaseExchangeRateProvider
from apps.transactions.domain.models import ExchangeRateQuotation

logger = logging.getLogger(__name__)

FIELDS = "country_currency_desc,exchange_rate,record_date"
SORT = "-record_date"


class TreasuryExchangeRateProvider(BaseExchangeRateProvider):
    """
    U.S. Treasury Reporting Rates of Exchange provider.
    Uses the rates_of_exchange dataset of the Fiscal Data API.
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = base_url or settings.TREASURY_API_URL
        self.timeout = timeout or settings.EXCHANGE_RATE_TIMEOUT
        self.lookback_months = settings.RATE_LOOKBACK_MONTHS

    def get_quotations(
        self,
        country: str,
        currency: str,
        date_from: date,
        date_to: date
    ) -> list[ExchangeRateQuotation]:
        """
        Fetch the rates published for a country-currency pair between two dates.

        Args:
            country: Country name as published by the Treasury (e.g. Brazil)
            currency: Currency name as published by the Treasury (e.g. Real)
            date_from: Earliest record date, inclusive
            date_to: Latest record date, inclusive

        Returns:
            Quotations ordered by record date, most recent first
        """
        # Format: ...rates_of_exchange?fields=...&filter=country_currency_desc:eq:Brazil-Real,record_date:lte:2023-09-21,record_date:gte:2023-03-21&sort=-record_date
        params = {
            "fields": FIELDS,
            "filter": (
                f"country_currency_desc:eq:{country}-{currency},"
                f"record_date:lte:{date_to.isoformat()},"
                f"record_date:gte:{date_from.isoformat()}"
            ),
            "sort": SORT,
        }
        logger.debug("Querying Treasury rates: %s", params["filter"])

        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            logger.error("Timeout calling Treasury API for %s-%s", country, currency)
            raise UpstreamError(f"failed to fetch exchange rates: {e}") from e
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            logger.error("HTTP error from Treasury API: %s", e)
            raise UpstreamError(f"API request failed with status code: {status_code}") from e
        except requests.exceptions.RequestException as e:
            logger.error("Error calling Treasury API: %s", e)
            raise UpstreamError(f"failed to fetch exchange rates: {e}") from e

        try:
            data = response.json()
            # Response format: {"data": [{"country_currency_desc": "Brazil-Real", "exchange_rate": "4.858", "record_date": "2023-06-30"}]}
            return [
                ExchangeRateQuotation(
                    country_currency_desc=row["country_currency_desc"],
                    exchange_rate=row["exchange_rate"],
                    record_date=date.fromisoformat(row["record_date"]),
                )
                for row in data["data"]
            ]
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Unexpected payload from Treasury API: %s", e)
            raise UpstreamError(f"failed to decode exchange rates response: {e}") from e
