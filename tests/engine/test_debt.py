from decimal import Decimal

import pytest

from src.engine.debt import amortization_schedule, monthly_installment, yearly_summary
from src.models.loan import InvalidLoanParameters, LoanParameters


class TestLoanParameters:
    def test_zero_term_rejected(self):
        with pytest.raises(InvalidLoanParameters):
            LoanParameters(Decimal("1000"), Decimal("5"), 0)

    def test_negative_principal_rejected(self):
        with pytest.raises(InvalidLoanParameters):
            LoanParameters(Decimal("-1"), Decimal("5"), 12)

    def test_negative_rate_rejected(self):
        with pytest.raises(InvalidLoanParameters):
            LoanParameters(Decimal("1000"), Decimal("-0.5"), 12)

    def test_non_finite_rejected(self):
        with pytest.raises(InvalidLoanParameters):
            LoanParameters(Decimal("NaN"), Decimal("5"), 12)

    def test_non_numeric_text_rejected(self):
        with pytest.raises(InvalidLoanParameters, match="principal"):
            LoanParameters("abc", "5", 12)

    def test_invalid_parameters_are_value_errors(self):
        with pytest.raises(ValueError):
            LoanParameters(Decimal("1000"), Decimal("5"), -3)

    def test_numeric_inputs_coerced_to_decimal(self):
        params = LoanParameters(1000, 9.25, 12)
        assert params.principal == Decimal("1000")
        assert params.annual_rate_percent == Decimal("9.25")

    def test_monthly_rate(self):
        params = LoanParameters(Decimal("1000"), Decimal("12"), 12)
        assert params.monthly_rate == Decimal("0.01")


class TestMonthlyInstallment:
    def test_one_year_loan(self, one_year_loan):
        """$120K at 9.25% for 12 months."""
        pmt = monthly_installment(one_year_loan)
        # Expected: ~$10,508.09
        assert abs(pmt - Decimal("10508.09")) <= Decimal("0.01")

    def test_standard_mortgage(self, mortgage_loan):
        """$400K loan at 7% for 30 years."""
        result = amortization_schedule(mortgage_loan)
        assert result.installment_amount == Decimal("2661.21")

    def test_zero_rate(self, interest_free_loan):
        assert monthly_installment(interest_free_loan) == Decimal("250")

    def test_zero_principal(self):
        pmt = monthly_installment(LoanParameters(Decimal("0"), Decimal("7"), 360))
        assert pmt == Decimal("0")


class TestAmortizationSchedule:
    def test_one_year_first_and_last_rows(self, one_year_loan):
        result = amortization_schedule(one_year_loan)
        first = result.schedule[0]
        # 120000 * 9.25% / 12 = $925.00
        assert first.interest_portion == Decimal("925.00")
        assert abs(first.principal_portion - Decimal("9583.09")) <= Decimal("0.01")
        assert result.schedule[-1].period == 12
        assert result.schedule[-1].remaining_balance == Decimal("0.00")

    def test_interest_free_rows(self, interest_free_loan):
        result = amortization_schedule(interest_free_loan)
        assert result.installment_amount == Decimal("250.00")
        assert [r.remaining_balance for r in result.schedule] == [
            Decimal("750.00"), Decimal("500.00"), Decimal("250.00"), Decimal("0.00"),
        ]
        assert all(r.interest_portion == Decimal("0.00") for r in result.schedule)
        assert all(r.principal_portion == Decimal("250.00") for r in result.schedule)
        assert result.total_interest == Decimal("0.00")

    def test_interest_free_uneven_split_ends_at_zero(self):
        result = amortization_schedule(LoanParameters(Decimal("1000"), Decimal("0"), 3))
        assert result.installment_amount == Decimal("333.33")
        assert result.schedule[-1].remaining_balance == Decimal("0.00")

    def test_payment_count_and_periods(self, mortgage_loan):
        result = amortization_schedule(mortgage_loan)
        assert len(result.schedule) == 360
        assert [r.period for r in result.schedule] == list(range(1, 361))

    def test_first_payment_mostly_interest(self, mortgage_loan):
        first = amortization_schedule(mortgage_loan).schedule[0]
        # At 7%, first month interest = 400000 * 0.07/12 = $2,333.33
        assert first.interest_portion == Decimal("2333.33")
        assert first.interest_portion > first.principal_portion

    def test_balance_decreases(self, mortgage_loan):
        schedule = amortization_schedule(mortgage_loan).schedule
        for i in range(1, len(schedule)):
            assert schedule[i].remaining_balance < schedule[i - 1].remaining_balance

    def test_installment_split_matches_rows(self, one_year_loan):
        """Every row's split adds back to the same installment (within a cent of rounding)."""
        result = amortization_schedule(one_year_loan)
        for row in result.schedule:
            assert abs(row.principal_portion + row.interest_portion - result.installment_amount) <= Decimal("0.01")

    def test_principal_portions_sum_to_principal(self, mortgage_loan):
        result = amortization_schedule(mortgage_loan)
        total = sum(r.principal_portion for r in result.schedule)
        assert abs(total - mortgage_loan.principal) <= Decimal("0.01") * mortgage_loan.term_months

    def test_totals(self, interest_free_loan, one_year_loan):
        free = amortization_schedule(interest_free_loan)
        assert free.total_payment == Decimal("1000.00")

        paid = amortization_schedule(one_year_loan)
        assert abs(paid.total_payment - paid.total_interest - one_year_loan.principal) <= Decimal("0.02")

    def test_base_currency_label(self, one_year_loan):
        assert amortization_schedule(one_year_loan).base_currency == "USD"
        assert amortization_schedule(one_year_loan, base_currency="eur").base_currency == "EUR"

    def test_parameters_not_mutated(self, one_year_loan):
        amortization_schedule(one_year_loan)
        assert one_year_loan.principal == Decimal("120000")


class TestRoundingAtEmission:
    def test_final_balance_exactly_zero_over_long_term(self, mortgage_loan):
        """Carrying full precision keeps the 360th balance at zero, not a drifted residual."""
        last = amortization_schedule(mortgage_loan).schedule[-1]
        assert last.remaining_balance == Decimal("0.00")
        assert str(last.remaining_balance) == "0.00"

    def test_long_term_small_rate_final_balance_zero(self):
        params = LoanParameters(Decimal("987654.32"), Decimal("3.125"), 480)
        last = amortization_schedule(params).schedule[-1]
        assert abs(last.remaining_balance) <= Decimal("0.01")

    def test_rows_are_cents(self, one_year_loan):
        for row in amortization_schedule(one_year_loan).schedule:
            for value in (row.principal_portion, row.interest_portion, row.remaining_balance):
                assert value.as_tuple().exponent == -2

    def test_naive_rounding_would_drift(self, mortgage_loan):
        """Re-rounding the balance every month lands away from the engine's exact zero."""
        r = mortgage_loan.monthly_rate
        pmt = amortization_schedule(mortgage_loan).installment_amount
        balance = mortgage_loan.principal
        for _ in range(mortgage_loan.term_months):
            interest = (balance * r).quantize(Decimal("0.01"))
            balance = (balance - (pmt - interest)).quantize(Decimal("0.01"))
        assert balance != Decimal("0.00")


class TestManualInstallment:
    def test_overpayment_goes_negative_unclamped(self, one_year_loan):
        result = amortization_schedule(one_year_loan, installment=Decimal("10600"))
        assert result.installment_amount == Decimal("10600.00")
        assert result.schedule[-1].remaining_balance < 0

    def test_underpayment_leaves_balance(self, one_year_loan):
        result = amortization_schedule(one_year_loan, installment=Decimal("10400"))
        assert result.schedule[-1].remaining_balance > 0


class TestYearlySummary:
    def test_thirty_year_summary(self, mortgage_loan):
        yearly = yearly_summary(amortization_schedule(mortgage_loan))
        assert len(yearly) == 30
        assert yearly[-1]["ending_balance"] == Decimal("0.00")

    def test_partial_final_year(self):
        result = amortization_schedule(LoanParameters(Decimal("14000"), Decimal("0"), 14))
        yearly = yearly_summary(result)
        assert len(yearly) == 2
        assert yearly[0]["principal"] == Decimal("12000.00")
        assert yearly[1]["principal"] == Decimal("2000.00")
        assert yearly[1]["payments"] == Decimal("2000.00")
        assert [y["year"] for y in yearly] == [1, 2]
        assert all(type(y["year"]) is int for y in yearly)

    def test_yearly_totals_match(self, one_year_loan):
        result = amortization_schedule(one_year_loan)
        yearly = yearly_summary(result)
        assert len(yearly) == 1
        assert yearly[0]["interest"] == sum(r.interest_portion for r in result.schedule)
        assert yearly[0]["payments"] == result.installment_amount * 12
