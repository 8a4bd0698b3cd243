import math
from decimal import Decimal

import pytest

from immo_invest.engine.debt import amortization_schedule, compute_loan, monthly_payment
from immo_invest.engine.errors import InvalidAssumptionError


def _closed_form(principal: float, annual_pct: float, years: int) -> float:
    r = annual_pct / 100 / 12
    n = years * 12
    f = (1 + r) ** n
    return principal * r * f / (f - 1)


class TestMonthlyPayment:
    def test_standard_annuity(self):
        """400K at 3.5% over 25 years."""
        pmt = monthly_payment(Decimal("400000"), Decimal("3.5"), 25)
        assert math.isclose(float(pmt), _closed_form(400000, 3.5, 25), rel_tol=1e-9)
        assert pmt.quantize(Decimal("0.01")) == Decimal("2002.49")

    def test_known_case(self):
        # 100K @ 5% over 20y ~ 659.96
        pmt = monthly_payment(Decimal("100000"), Decimal("5"), 20)
        assert pmt.quantize(Decimal("0.01")) == Decimal("659.96")

    def test_zero_rate_is_linear(self):
        pmt = monthly_payment(Decimal("360000"), Decimal("0"), 30)
        assert pmt == Decimal("1000")

    def test_zero_principal(self):
        assert monthly_payment(Decimal("0"), Decimal("3.5"), 25) == Decimal("0")

    @pytest.mark.parametrize("term,rate", [(0, Decimal("3.5")), (0, Decimal("0")), (25, Decimal("-2"))])
    def test_rejects_invalid_terms(self, term, rate):
        with pytest.raises(InvalidAssumptionError):
            monthly_payment(Decimal("400000"), rate, term)


class TestComputeLoan:
    def test_scenario(self):
        loan = compute_loan(Decimal("500000"), Decimal("20"), 25, Decimal("3.5"))
        assert loan.down_payment_amount == Decimal("100000")
        assert loan.loan_amount == Decimal("400000")
        assert loan.months == 300
        assert math.isclose(float(loan.monthly_payment), _closed_form(400000, 3.5, 25), rel_tol=1e-9)

    def test_totals_are_consistent(self):
        loan = compute_loan(Decimal("500000"), Decimal("20"), 25, Decimal("3.5"))
        assert loan.total_payment == loan.monthly_payment * loan.months
        assert loan.total_interest == loan.total_payment - loan.loan_amount
        assert math.isclose(float(loan.total_interest), 200748.284311, rel_tol=1e-6)

    def test_zero_interest_fallback(self):
        loan = compute_loan(Decimal("450000"), Decimal("20"), 30, Decimal("0"))
        assert loan.loan_amount == Decimal("360000")
        assert loan.monthly_payment * loan.months == loan.loan_amount
        assert loan.total_interest == Decimal("0")

    def test_full_equity_means_no_payment(self):
        loan = compute_loan(Decimal("500000"), Decimal("100"), 25, Decimal("3.5"))
        assert loan.loan_amount == Decimal("0")
        assert loan.monthly_payment == Decimal("0")
        assert loan.total_interest == Decimal("0")

    def test_higher_rate_costs_more_interest(self):
        low = compute_loan(Decimal("500000"), Decimal("20"), 25, Decimal("2.0"))
        high = compute_loan(Decimal("500000"), Decimal("20"), 25, Decimal("6.0"))
        assert high.total_interest > low.total_interest

    @pytest.mark.parametrize(
        "down_payment,term,rate",
        [
            (Decimal("-5"), 25, Decimal("3.5")),
            (Decimal("120"), 25, Decimal("3.5")),
            (Decimal("20"), 0, Decimal("3.5")),
            (Decimal("20"), 25, Decimal("-1")),
        ],
    )
    def test_rejects_invalid_terms(self, down_payment, term, rate):
        with pytest.raises(InvalidAssumptionError):
            compute_loan(Decimal("500000"), down_payment, term, rate)


class TestAmortizationSchedule:
    def test_one_entry_per_year(self):
        plan = amortization_schedule(Decimal("400000"), Decimal("3.5"), 25)
        assert [y.year for y in plan] == list(range(1, 26))

    def test_ends_at_zero(self):
        plan = amortization_schedule(Decimal("400000"), Decimal("3.5"), 25)
        assert plan[-1].ending_balance == Decimal("0")

    def test_balance_decreases(self):
        plan = amortization_schedule(Decimal("400000"), Decimal("3.5"), 25)
        for prev, cur in zip(plan, plan[1:]):
            assert cur.ending_balance < prev.ending_balance

    def test_principal_shifts_from_interest(self):
        plan = amortization_schedule(Decimal("400000"), Decimal("3.5"), 25)
        assert plan[0].interest > plan[0].principal
        assert plan[-1].principal > plan[-1].interest

    def test_principal_repays_loan(self):
        plan = amortization_schedule(Decimal("400000"), Decimal("3.5"), 25)
        repaid = sum((y.principal for y in plan), Decimal("0"))
        assert abs(repaid - Decimal("400000")) < Decimal("0.000001")

    def test_yearly_payment_is_twelve_installments(self):
        pmt = monthly_payment(Decimal("400000"), Decimal("3.5"), 25)
        plan = amortization_schedule(Decimal("400000"), Decimal("3.5"), 25)
        for y in plan[:-1]:
            assert abs(y.payment - pmt * 12) < Decimal("0.000001")

    def test_zero_rate(self):
        plan = amortization_schedule(Decimal("120000"), Decimal("0"), 10)
        assert all(y.interest == 0 for y in plan)
        assert all(y.principal == Decimal("12000") for y in plan)
