"""
Provider Registry - Maps provider names to adapter classes.
The EXCHANGE_RATE_PROVIDER setting picks the one wired into the service.
"""

import logging

from apps.transactions.domain.interfaces import BaseExchangeRateProvider
from apps.transactions.infrastructure.providers.mock import MockExchangeRateProvider
from apps.transactions.infrastructure.providers.treasury import TreasuryExchangeRateProvider

logger = logging.getLogger(__name__)


PROVIDER_REGISTRY: dict[str, type[BaseExchangeRateProvider]] = {
    "treasury": TreasuryExchangeRateProvider,
    "mock": MockExchangeRateProvider,
}


def get_provider_instance(provider_name: str) -> BaseExchangeRateProvider | None:
    """
    Get an instance of a provider by its name.

    Args:
        provider_name: A key of PROVIDER_REGISTRY

    Returns:
        Instance of the provider adapter, or None if not found
    """
    provider_class = PROVIDER_REGISTRY.get(provider_name)

    if provider_class is None:
        logger.warning("Provider '%s' not found in registry", provider_name)
        return None

    return provider_class()
