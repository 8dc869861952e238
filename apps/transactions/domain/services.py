"""
Domain services - Core business logic.
Orchestrates validation, the ledger and the exchange-rate provider.
"""

import logging
import uuid
from typing import Callable

from apps.transactions.domain.conversion import convert_amount, parse_rate
from apps.transactions.domain.errors import (
    NotFoundError,
    RateUnavailableError,
    StorageError,
    TransactionError,
    ValidationError,
)
from apps.transactions.domain.interfaces import BaseExchangeRateProvider, BaseTransactionLedger
from apps.transactions.domain.models import (
    ConversionResultDTO,
    CreateTransactionDTO,
    RetrieveTransactionDTO,
    Transaction,
)
from apps.transactions.domain.validators import (
    to_decimal,
    validate_create_request,
    validate_retrieve_request,
)

logger = logging.getLogger(__name__)

BUSINESS_ERRORS = (ValidationError, NotFoundError, RateUnavailableError)


def new_transaction_id() -> str:
    return str(uuid.uuid4())


class TransactionService:
    """
    Records purchase transactions and converts them on retrieval.

    Holds no mutable state: every collaborator is passed in at construction,
    so a service can be built per request.
    """

    def __init__(
        self,
        ledger: BaseTransactionLedger,
        rate_provider: BaseExchangeRateProvider,
        id_generator: Callable[[], str] = new_transaction_id
    ):
        self.ledger = ledger
        self.rate_provider = rate_provider
        self.id_generator = id_generator

    def create(self, request: CreateTransactionDTO) -> str:
        """
        Validate and store a new transaction.

        Returns:
            The identifier assigned to the transaction

        Raises:
            ValidationError: the request breaks a domain rule, nothing is stored
            StorageError: the ledger failed to write
        """
        try:
            validate_create_request(request)
        except ValidationError as e:
            self._log_failure("create", e)
            raise

        transaction = Transaction(
            id=self.id_generator(),
            description=request.description,
            transaction_date=request.transaction_date,
            amount=to_decimal(request.amount),
        )

        try:
            transaction_id = self.ledger.create(transaction)
        except StorageError as e:
            self._log_failure("create", e)
            raise
        except Exception as e:
            error = StorageError(f"failed to save transaction: {e}")
            self._log_failure("create", error)
            raise error from e

        logger.info("Transaction created: id=%s", transaction_id)
        return transaction_id

    def retrieve(self, request: RetrieveTransactionDTO) -> ConversionResultDTO:
        """
        Load a transaction and convert its amount into the requested currency.

        The rate used is the latest one published on or before the transaction
        date, within the lookback window.

        Raises:
            ValidationError: malformed id or missing currency, storage is not touched
            NotFoundError: no transaction has this id
            StorageError: the ledger failed to read
            RateUnavailableError: no rate inside the lookback window
            UpstreamError: the provider could not be queried
            RateFormatError: the provider returned an unparsable rate
        """
        try:
            validate_retrieve_request(request)
            transaction = self.ledger.find_by_id(request.id)
            quotation = self.rate_provider.get_rate(
                transaction.transaction_date,
                request.country,
                request.currency,
            )
            rate = parse_rate(quotation.exchange_rate)
        except TransactionError as e:
            self._log_failure("retrieve", e)
            raise

        converted_amount = convert_amount(transaction.amount, rate)

        logger.info(
            "Transaction retrieved: id=%s currency=%s rate=%s record_date=%s",
            transaction.id,
            quotation.country_currency_desc,
            rate,
            quotation.record_date,
        )

        return ConversionResultDTO(
            id=transaction.id,
            description=transaction.description,
            transaction_date=transaction.transaction_date,
            original_amount=transaction.amount,
            exchange_rate=rate,
            converted_amount=converted_amount,
        )

    @staticmethod
    def _log_failure(operation: str, error: TransactionError) -> None:
        category = error.__class__.__name__
        if isinstance(error, BUSINESS_ERRORS):
            logger.warning("%s rejected (%s): %s", operation, category, error.message)
        else:
            logger.error("%s failed (%s): %s", operation, category, error.message)
