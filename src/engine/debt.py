"""Equal-installment (EMI) amortization schedule computation.

Pure functions: Decimal in, dataclass out. No I/O.

Running balances are carried at full Decimal precision; every figure is
rounded to cents only when a row is emitted. Rounding the balance before it is
reused drifts the final balance away from zero on long terms.
"""

from decimal import Decimal, ROUND_HALF_UP

from src.config import settings
from src.models.loan import AmortizationResult, AmortizationRow, LoanParameters

TWO_PLACES = Decimal("0.01")


def _cents(value: Decimal) -> Decimal:
    rounded = value.quantize(TWO_PLACES, ROUND_HALF_UP)
    # -0.00 shows up when a balance lands a hair below zero
    return rounded if rounded else Decimal("0.00")


def monthly_installment(params: LoanParameters) -> Decimal:
    """Fixed monthly payment at full precision.

    M = P * r * (1+r)^n / ((1+r)^n - 1), or P / n for an interest-free loan.
    """
    r = params.monthly_rate
    n = params.term_months
    if r == 0:
        return params.principal / n

    factor = (1 + r) ** n
    return params.principal * r * factor / (factor - 1)


def amortization_schedule(
    params: LoanParameters,
    installment: Decimal | None = None,
    base_currency: str | None = None,
) -> AmortizationResult:
    """Generate the month-by-month schedule.

    Args:
        params: Validated loan inputs
        installment: Override the computed payment. A payment that does not
            match the annuity formula is applied as-is; the final balance is
            not clamped and may end slightly negative or positive.
        base_currency: Label for the figures (defaults to settings.base_currency)
    """
    pmt = monthly_installment(params) if installment is None else Decimal(str(installment))
    r = params.monthly_rate

    rows: list[AmortizationRow] = []
    balance = params.principal
    total_interest = Decimal("0")

    for period in range(1, params.term_months + 1):
        interest = balance * r
        principal_paid = pmt - interest
        balance -= principal_paid
        total_interest += interest

        rows.append(AmortizationRow(
            period=period,
            principal_portion=_cents(principal_paid),
            interest_portion=_cents(interest),
            remaining_balance=_cents(balance),
        ))

    return AmortizationResult(
        installment_amount=_cents(pmt),
        schedule=rows,
        total_interest=_cents(total_interest),
        total_payment=_cents(pmt * params.term_months),
        base_currency=(base_currency or settings.base_currency).upper(),
        parameters=params,
    )


def yearly_summary(result: AmortizationResult) -> list[dict]:
    """Aggregate a schedule by loan year (12 periods each, last year may be short).

    Returns list of dicts with keys: year, principal, interest, payments, ending_balance
    """
    yearly: list[dict] = []
    year_principal = Decimal("0")
    year_interest = Decimal("0")
    year_payments = Decimal("0")

    for row in result.schedule:
        year_principal += row.principal_portion
        year_interest += row.interest_portion
        year_payments += result.installment_amount

        if row.period % 12 == 0 or row.period == len(result.schedule):
            yearly.append({
                "year": (row.period - 1) // 12 + 1,
                "principal": year_principal,
                "interest": year_interest,
                "payments": year_payments,
                "ending_balance": row.remaining_balance,
            })
            year_principal = Decimal("0")
            year_interest = Decimal("0")
            year_payments = Decimal("0")

    return yearly
