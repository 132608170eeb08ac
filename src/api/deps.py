"""FastAPI dependency injection."""

from functools import lru_cache

from src.data.exchange_rates import ExchangeRateClient, RateProviderPool


@lru_cache
def get_rate_providers() -> RateProviderPool:
    """Process-wide pool holding one rate provider per base currency."""
    return RateProviderPool(ExchangeRateClient())
