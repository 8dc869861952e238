"""
Builds the dependency graph of TransactionService for one request.
"""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from apps.transactions.domain.services import TransactionService, new_transaction_id
from apps.transactions.infrastructure.persistence.repositories import TransactionLedger
from apps.transactions.infrastructure.providers.registry import get_provider_instance


def build_transaction_service() -> TransactionService:
    provider = get_provider_instance(settings.EXCHANGE_RATE_PROVIDER)
    if provider is None:
        raise ImproperlyConfigured(
            f"EXCHANGE_RATE_PROVIDER '{settings.EXCHANGE_RATE_PROVIDER}' is not registered"
        )

    return TransactionService(
        ledger=TransactionLedger(),
        rate_provider=provider,
        id_generator=new_transaction_id,
    )
