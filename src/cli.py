"""Terminal EMI report.

Usage:
    python -m src.cli 120000 9.25 12
    python -m src.cli 250000 7.5 360 --currency EUR --yearly
"""

import argparse
import asyncio
import sys
from decimal import Decimal, InvalidOperation

from src.config import settings
from src.data.exchange_rates import RateProvider
from src.engine.conversion import convert_result, format_money
from src.engine.debt import amortization_schedule, yearly_summary
from src.models.loan import AmortizationResult, InvalidLoanParameters, LoanParameters
from src.models.rates import DisplayConfig, DisplaySchedule


def _decimal(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def print_summary(display: DisplaySchedule) -> None:
    _header("Loan Summary")
    print(f"  Monthly EMI:      {format_money(display.installment_amount, display.currency)}")
    print(f"  Total Interest:   {format_money(display.total_interest, display.currency)}")
    print(f"  Total Payment:    {format_money(display.total_payment, display.currency)}")
    if display.requested_currency != display.currency:
        print(f"  Note: {display.requested_currency} rate unavailable, showing {display.currency}")
    elif display.converted:
        print(f"  Rate:             {display.rate} {display.currency} per base unit")


def print_schedule(display: DisplaySchedule) -> None:
    _header(f"Amortization Schedule ({display.currency})")
    print(f"  {'Month':>5}  {'Principal':>14}  {'Interest':>14}  {'Balance':>16}")
    for row in display.rows:
        print(
            f"  {row.period:>5}  {row.principal_portion:>14,.2f}  "
            f"{row.interest_portion:>14,.2f}  {row.remaining_balance:>16,.2f}"
        )


def print_yearly(result: AmortizationResult) -> None:
    _header(f"Yearly Summary ({result.base_currency})")
    print(f"  {'Year':>4}  {'Principal':>14}  {'Interest':>14}  {'Ending Balance':>16}")
    for y in yearly_summary(result):
        print(
            f"  {y['year']:>4}  {y['principal']:>14,.2f}  "
            f"{y['interest']:>14,.2f}  {y['ending_balance']:>16,.2f}"
        )


async def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Loan EMI amortization report")
    parser.add_argument("principal", type=_decimal, help="Loan amount in base currency")
    parser.add_argument("rate", type=_decimal, help="Annual interest rate in percent (e.g. 9.25)")
    parser.add_argument("months", type=int, help="Loan term in months")
    parser.add_argument(
        "--currency",
        default=settings.default_display_currency,
        help=f"Display currency (default: {settings.default_display_currency})",
    )
    parser.add_argument("--yearly", action="store_true", help="Also print a per-year summary")

    args = parser.parse_args(argv)

    try:
        params = LoanParameters(args.principal, args.rate, args.months)
    except InvalidLoanParameters as e:
        print(f"Invalid loan parameters: {e}", file=sys.stderr)
        return 2

    result = amortization_schedule(params)
    config = DisplayConfig(base_currency=settings.base_currency, display_currency=args.currency)

    table = None
    if config.display_currency != config.base_currency:
        table = await RateProvider().select_base_currency(config.base_currency)

    display = convert_result(result, config, table)
    print_summary(display)
    print_schedule(display)
    if args.yearly:
        print_yearly(result)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
