"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field


# 100 years of monthly installments
MAX_TERM_MONTHS = 1200


# ---- Request schemas ----

class AmortizationRequest(BaseModel):
    principal: Decimal = Field(..., ge=0, description="Loan amount in base currency units")
    annual_rate_percent: Decimal = Field(..., ge=0, description="Annual rate, 9.25 means 9.25%")
    term_months: int = Field(..., ge=1, le=MAX_TERM_MONTHS, description="Number of monthly installments")


class DisplayAmortizationRequest(AmortizationRequest):
    display_currency: str = Field("USD", min_length=3, max_length=3)


# ---- Response schemas ----

class AmortizationRowResponse(BaseModel):
    period: int
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal


class YearlySummaryResponse(BaseModel):
    year: int
    principal: Decimal
    interest: Decimal
    payments: Decimal
    ending_balance: Decimal


class AmortizationResponse(BaseModel):
    installment_amount: Decimal
    total_interest: Decimal
    total_payment: Decimal
    currency: str
    schedule: list[AmortizationRowResponse]
    yearly: list[YearlySummaryResponse] = []


class DisplayAmortizationResponse(AmortizationResponse):
    requested_currency: str
    rate: Decimal
    converted: bool


class RatesResponse(BaseModel):
    base_currency: str
    available: bool
    rates: dict[str, Decimal]
    error: str | None = None
