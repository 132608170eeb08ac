"""Exchange rate routes."""

from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_rate_providers
from src.api.schemas import RatesResponse
from src.data.exchange_rates import RateProviderPool

router = APIRouter(prefix="/api/v1/rates", tags=["rates"])


@router.get("/{base_currency}", response_model=RatesResponse)
async def get_rates(base_currency: str, providers: RateProviderPool = Depends(get_rate_providers)):
    """Current rate table for ``base_currency``.

    A failed fetch is not an HTTP error: the response reports ``available=false``.
    """
    if len(base_currency) != 3 or not base_currency.isalpha():
        raise HTTPException(status_code=422, detail=f"Invalid currency code: {base_currency}")

    provider = providers.for_base(base_currency)
    await provider.select_base_currency(base_currency)
    if not provider.is_current:
        return RatesResponse(
            base_currency=provider.base_currency,
            available=False,
            rates={},
            error=provider.last_error,
        )
    return RatesResponse(
        base_currency=provider.table.base_currency,
        available=True,
        rates=provider.table.rates,
    )
