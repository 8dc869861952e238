import pytest
from decimal import Decimal
from datetime import date
from unittest.mock import MagicMock

from apps.transactions.domain.models import CreateTransactionDTO, RetrieveTransactionDTO
from apps.transactions.domain.errors import (
    NotFoundError,
    RateFormatError,
    RateUnavailableError,
    StorageError,
    UpstreamError,
    ValidationError,
)
from apps.transactions.domain.models import ExchangeRateQuotation, Transaction
from apps.transactions.domain.services import TransactionService, new_transaction_id
from apps.transactions.infrastructure.persistence.memory import InMemoryTransactionLedger
from apps.transactions.infrastructure.providers.mock import MockExchangeRateProvider

TRANSACTION_ID = "b62a64c9-0008-4148-99f6-9c8086a1dd42"


@pytest.fixture
def ledger():
    return InMemoryTransactionLedger()


@pytest.fixture
def provider():
    return MockExchangeRateProvider([
        ExchangeRateQuotation("Brazil-Real", "3.456", date(2023, 9, 1)),
        ExchangeRateQuotation("Brazil-Real", "3.0", date(2023, 6, 30)),
    ])


@pytest.fixture
def service(ledger, provider):
    return TransactionService(ledger, provider, id_generator=lambda: TRANSACTION_ID)


@pytest.fixture
def stored_transaction(ledger):
    transaction = Transaction(
        id=TRANSACTION_ID,
        description="food",
        transaction_date=date(2023, 9, 21),
        amount=Decimal("23.12"),
    )
    ledger.create(transaction)
    return transaction


def create_request(**overrides):
    fields = {
        "description": "food",
        "transaction_date": date(2023, 9, 21),
        "amount": Decimal("20.47"),
    }
    fields.update(overrides)
    return CreateTransactionDTO(**fields)


def retrieve_request(transaction_id=TRANSACTION_ID):
    return RetrieveTransactionDTO(id=transaction_id, country="Brazil", currency="Real")


def test_new_transaction_id_is_unique_uuid():
    first, second = new_transaction_id(), new_transaction_id()

    assert first != second
    assert len(first) == 36


class TestCreate:
    """Tests for TransactionService.create."""

    def test_create_stores_transaction(self, service, ledger):
        """Test create assigns the id and writes exactly one transaction."""
        transaction_id = service.create(create_request())

        assert transaction_id == TRANSACTION_ID
        assert ledger.transactions == {
            TRANSACTION_ID: Transaction(
                id=TRANSACTION_ID,
                description="food",
                transaction_date=date(2023, 9, 21),
                amount=Decimal("20.47"),
            )
        }

    def test_create_generates_id_once(self, ledger, provider):
        id_generator = MagicMock(return_value=TRANSACTION_ID)
        service = TransactionService(ledger, provider, id_generator=id_generator)

        service.create(create_request())

        id_generator.assert_called_once_with()

    def test_create_converts_float_amount(self, service, ledger):
        service.create(create_request(amount=9.55))

        assert ledger.transactions[TRANSACTION_ID].amount == Decimal("9.55")

    @pytest.mark.parametrize("amount", [Decimal("9.555"), Decimal("-5")])
    def test_create_invalid_amount_does_not_write(self, service, ledger, amount):
        with pytest.raises(ValidationError):
            service.create(create_request(amount=amount))

        assert ledger.transactions == {}

    def test_create_rejects_long_description(self, service, ledger):
        with pytest.raises(ValidationError, match="50 characters"):
            service.create(create_request(description="x" * 51))

        assert ledger.transactions == {}

    def test_create_accepts_50_character_description(self, service):
        assert service.create(create_request(description="x" * 50)) == TRANSACTION_ID

    def test_create_storage_error_propagates(self, provider):
        ledger = MagicMock()
        ledger.create.side_effect = StorageError("disk full")
        service = TransactionService(ledger, provider, id_generator=lambda: TRANSACTION_ID)

        with pytest.raises(StorageError, match="disk full"):
            service.create(create_request())

    def test_create_wraps_unexpected_ledger_failure(self, provider):
        ledger = MagicMock()
        ledger.create.side_effect = OSError("database is locked")
        service = TransactionService(ledger, provider, id_generator=lambda: TRANSACTION_ID)

        with pytest.raises(StorageError, match="database is locked"):
            service.create(create_request())


class TestRetrieve:
    """Tests for TransactionService.retrieve."""

    def test_retrieve_converts_amount(self, service, stored_transaction):
        """23.12 at 3.456 is 79.90."""
        result = service.retrieve(retrieve_request())

        assert result.id == TRANSACTION_ID
        assert result.description == "food"
        assert result.transaction_date == date(2023, 9, 21)
        assert result.original_amount == Decimal("23.12")
        assert result.exchange_rate == Decimal("3.456")
        assert result.converted_amount == Decimal("79.90")

    def test_retrieve_queries_six_month_window(self, service, provider, stored_transaction):
        service.retrieve(retrieve_request())

        assert provider.calls == [("Brazil", "Real", date(2023, 3, 21), date(2023, 9, 21))]

    def test_round_trip(self, service):
        transaction_id = service.create(create_request(amount=Decimal("23.12")))

        result = service.retrieve(retrieve_request(transaction_id))

        assert result.description == "food"
        assert result.transaction_date == date(2023, 9, 21)
        assert result.original_amount == Decimal("23.12")

    def test_retrieve_invalid_id_skips_storage(self, provider):
        ledger = MagicMock()
        service = TransactionService(ledger, provider)

        with pytest.raises(ValidationError, match="valid UUID"):
            service.retrieve(retrieve_request("invalid-uuid"))

        ledger.find_by_id.assert_not_called()

    def test_retrieve_not_found(self, service):
        with pytest.raises(NotFoundError):
            service.retrieve(retrieve_request())

    def test_retrieve_storage_error(self, provider):
        ledger = MagicMock()
        ledger.find_by_id.side_effect = StorageError("connection reset")
        service = TransactionService(ledger, provider)

        with pytest.raises(StorageError):
            service.retrieve(retrieve_request())

    def test_retrieve_rate_unavailable(self, ledger, stored_transaction):
        service = TransactionService(ledger, MockExchangeRateProvider([]))

        with pytest.raises(RateUnavailableError, match="cannot be converted"):
            service.retrieve(retrieve_request())

    def test_retrieve_upstream_error(self, ledger, stored_transaction):
        provider = MockExchangeRateProvider()
        provider.get_quotations = MagicMock(side_effect=UpstreamError("status code: 503"))
        service = TransactionService(ledger, provider)

        with pytest.raises(UpstreamError):
            service.retrieve(retrieve_request())

    def test_retrieve_rate_format_error(self, ledger, stored_transaction):
        provider = MockExchangeRateProvider([
            ExchangeRateQuotation("Brazil-Real", "not-a-number", date(2023, 9, 1)),
        ])
        service = TransactionService(ledger, provider)

        with pytest.raises(RateFormatError):
            service.retrieve(retrieve_request())

    def test_retrieve_does_not_mutate_ledger(self, service, ledger, stored_transaction):
        service.retrieve(retrieve_request())

        assert ledger.transactions == {TRANSACTION_ID: stored_transaction}
