"""Loan inputs and amortization outputs."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation


class InvalidLoanParameters(ValueError):
    """Loan inputs that cannot produce a schedule."""


@dataclass(frozen=True)
class LoanParameters:
    principal: Decimal
    annual_rate_percent: Decimal  # 9.25 means 9.25%, 0 means interest-free
    term_months: int

    def __post_init__(self) -> None:
        # Accept ints/floats/strings from callers; arithmetic stays in Decimal
        for name in ("principal", "annual_rate_percent"):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                try:
                    value = Decimal(str(value))
                except InvalidOperation:
                    raise InvalidLoanParameters(f"{name} must be a number, got {value!r}") from None
                object.__setattr__(self, name, value)
            if not value.is_finite():
                raise InvalidLoanParameters(f"{name} must be a finite number, got {value}")

        if self.principal < 0:
            raise InvalidLoanParameters(f"principal must be >= 0, got {self.principal}")
        if self.annual_rate_percent < 0:
            raise InvalidLoanParameters(
                f"annual_rate_percent must be >= 0, got {self.annual_rate_percent}"
            )
        if isinstance(self.term_months, bool) or not isinstance(self.term_months, int):
            raise InvalidLoanParameters(f"term_months must be an integer, got {self.term_months!r}")
        if self.term_months < 1:
            raise InvalidLoanParameters(f"term_months must be >= 1, got {self.term_months}")

    @property
    def monthly_rate(self) -> Decimal:
        return self.annual_rate_percent / 12 / 100


@dataclass(frozen=True)
class AmortizationRow:
    period: int
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class AmortizationResult:
    installment_amount: Decimal
    schedule: list[AmortizationRow]
    total_interest: Decimal
    total_payment: Decimal
    base_currency: str = "USD"
    parameters: LoanParameters | None = field(default=None, compare=False)
