"""Amortization routes — the primary computation entry point."""

from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_rate_providers
from src.api.schemas import (
    AmortizationRequest,
    AmortizationResponse,
    AmortizationRowResponse,
    DisplayAmortizationRequest,
    DisplayAmortizationResponse,
    YearlySummaryResponse,
)
from src.config import settings
from src.data.exchange_rates import RateProviderPool
from src.engine.conversion import convert_result
from src.engine.debt import amortization_schedule, yearly_summary
from src.models.loan import AmortizationResult, InvalidLoanParameters, LoanParameters
from src.models.rates import DisplayConfig

router = APIRouter(prefix="/api/v1", tags=["amortization"])


def _compute(req: AmortizationRequest) -> AmortizationResult:
    try:
        params = LoanParameters(
            principal=req.principal,
            annual_rate_percent=req.annual_rate_percent,
            term_months=req.term_months,
        )
    except InvalidLoanParameters as e:
        raise HTTPException(status_code=422, detail=str(e))
    return amortization_schedule(params)


def _yearly(result: AmortizationResult) -> list[YearlySummaryResponse]:
    return [
        YearlySummaryResponse(
            year=y["year"],
            principal=y["principal"],
            interest=y["interest"],
            payments=y["payments"],
            ending_balance=y["ending_balance"],
        )
        for y in yearly_summary(result)
    ]


@router.post("/amortization", response_model=AmortizationResponse)
async def compute_amortization(req: AmortizationRequest):
    """Compute the EMI and full schedule in the base currency."""
    result = _compute(req)
    return AmortizationResponse(
        installment_amount=result.installment_amount,
        total_interest=result.total_interest,
        total_payment=result.total_payment,
        currency=result.base_currency,
        schedule=[
            AmortizationRowResponse(
                period=row.period,
                principal_portion=row.principal_portion,
                interest_portion=row.interest_portion,
                remaining_balance=row.remaining_balance,
            )
            for row in result.schedule
        ],
        yearly=_yearly(result),
    )


@router.post("/amortization/display", response_model=DisplayAmortizationResponse)
async def compute_display_amortization(
    req: DisplayAmortizationRequest,
    providers: RateProviderPool = Depends(get_rate_providers),
):
    """Compute in the base currency, then project into ``display_currency``.

    Falls back to base-currency figures (labelled as such) when no rate is available.
    """
    result = _compute(req)
    provider = providers.for_base(settings.base_currency)
    table = await provider.select_base_currency(settings.base_currency)
    config = DisplayConfig(
        base_currency=settings.base_currency,
        display_currency=req.display_currency,
    )
    display = convert_result(result, config, table)

    return DisplayAmortizationResponse(
        installment_amount=display.installment_amount,
        total_interest=display.total_interest,
        total_payment=display.total_payment,
        currency=display.currency,
        requested_currency=display.requested_currency,
        rate=display.rate,
        converted=display.converted,
        schedule=[
            AmortizationRowResponse(
                period=row.period,
                principal_portion=row.principal_portion,
                interest_portion=row.interest_portion,
                remaining_balance=row.remaining_balance,
            )
            for row in display.rows
        ],
    )
