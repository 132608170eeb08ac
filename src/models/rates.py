"""Exchange rate table and display configuration."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class ExchangeRateTable:
    """Units of each currency per 1 unit of ``base_currency``."""
    base_currency: str
    rates: dict[str, Decimal] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.rates

    def get(self, currency: str) -> Decimal | None:
        return self.rates.get(currency.upper())


@dataclass(frozen=True)
class DisplayConfig:
    base_currency: str = "USD"
    display_currency: str = "USD"
    dark_mode: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_currency", self.base_currency.upper())
        object.__setattr__(self, "display_currency", self.display_currency.upper())


@dataclass(frozen=True)
class DisplayRow:
    period: int
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class DisplaySchedule:
    """Read-time projection of an AmortizationResult into a display currency.

    ``currency`` is the label the figures are actually denominated in. When no
    rate is available it is the base currency, not the requested one.
    """
    currency: str
    requested_currency: str
    rate: Decimal
    converted: bool
    installment_amount: Decimal
    total_interest: Decimal
    total_payment: Decimal
    rows: list[DisplayRow]
