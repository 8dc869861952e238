import pytest
from io import StringIO
from decimal import Decimal
from datetime import date

from django.core.management import call_command
from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import CommandError

from apps.transactions.infrastructure.persistence.models import TransactionRecord

TRANSACTION_ID = "b62a64c9-0008-4148-99f6-9c8086a1dd42"


@pytest.fixture(autouse=True)
def mock_provider_setting(settings):
    settings.EXCHANGE_RATE_PROVIDER = "mock"


@pytest.mark.django_db
class TestConvertTransactionCommand:

    def test_prints_conversion(self):
        TransactionRecord.objects.create(
            id=TRANSACTION_ID,
            description="food",
            date=date(2023, 9, 21),
            amount=Decimal("10.00"),
        )
        out = StringIO()

        call_command("convert_transaction", TRANSACTION_ID, "--country", "Canada", "--currency", "Dollar", stdout=out)

        output = out.getvalue()
        assert "Original amount (USD): 10.00" in output
        assert "Exchange rate: 1.354" in output
        assert "13.54" in output

    def test_unknown_transaction(self):
        with pytest.raises(CommandError, match="NotFoundError"):
            call_command("convert_transaction", TRANSACTION_ID, "--country", "Canada", "--currency", "Dollar")

    def test_invalid_provider_setting(self, settings):
        settings.EXCHANGE_RATE_PROVIDER = "nonexistent"

        with pytest.raises(ImproperlyConfigured, match="not registered"):
            call_command("convert_transaction", TRANSACTION_ID, "--country", "Canada", "--currency", "Dollar")
