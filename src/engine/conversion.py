"""Display-currency projection of a base-currency amortization result.

The schedule is computed once in the base currency; conversion multiplies the
already-rounded figures by the display rate at read time and never touches the
underlying result.
"""

from decimal import Decimal, ROUND_HALF_UP

from src.models.loan import AmortizationResult
from src.models.rates import DisplayConfig, DisplayRow, DisplaySchedule, ExchangeRateTable

TWO_PLACES = Decimal("0.01")


def _cents(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def display_rate(
    display_currency: str,
    base_currency: str,
    table: ExchangeRateTable | None,
) -> Decimal | None:
    """Multiplier from ``base_currency`` to ``display_currency``, or None if unavailable.

    A table quoted against some other base currency counts as unavailable.
    """
    display_currency = display_currency.upper()
    base_currency = base_currency.upper()
    if display_currency == base_currency:
        return Decimal("1")
    if table is None or table.base_currency != base_currency:
        return None
    return table.get(display_currency)


def convert_amount(amount: Decimal, rate: Decimal) -> Decimal:
    return _cents(amount * rate)


def convert_result(
    result: AmortizationResult,
    config: DisplayConfig,
    table: ExchangeRateTable | None,
) -> DisplaySchedule:
    """Project ``result`` into ``config.display_currency``.

    Without a rate the figures stay in the base currency and are labelled
    with the base currency.

    Raises:
        ValueError: if ``config.base_currency`` is not the currency the
            result was computed in.
    """
    if config.base_currency != result.base_currency.upper():
        raise ValueError(
            f"display config base {config.base_currency} does not match "
            f"result base {result.base_currency}"
        )
    rate = display_rate(config.display_currency, result.base_currency, table)
    converted = rate is not None and config.display_currency != result.base_currency
    if rate is None:
        rate = Decimal("1")
        label = result.base_currency
    else:
        label = config.display_currency

    rows = [
        DisplayRow(
            period=row.period,
            principal_portion=convert_amount(row.principal_portion, rate),
            interest_portion=convert_amount(row.interest_portion, rate),
            remaining_balance=convert_amount(row.remaining_balance, rate),
        )
        for row in result.schedule
    ]

    return DisplaySchedule(
        currency=label,
        requested_currency=config.display_currency,
        rate=rate,
        converted=converted,
        installment_amount=convert_amount(result.installment_amount, rate),
        total_interest=convert_amount(result.total_interest, rate),
        total_payment=convert_amount(result.total_payment, rate),
        rows=rows,
    )


def format_money(amount: Decimal, currency: str) -> str:
    return f"{amount:,.2f} {currency}"
