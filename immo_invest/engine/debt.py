"""Annuity loan (Annuitätendarlehen) computation.

Pure functions: Decimal in, dataclass out. No I/O.
"""

import logging
from decimal import Decimal

from immo_invest.engine.validation import validate_down_payment, validate_loan_terms
from immo_invest.models.results import AmortizationYear, LoanResult

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def monthly_payment(
    loan_amount: Decimal, annual_interest_rate_percent: Decimal, loan_term_years: int
) -> Decimal:
    """Fixed monthly payment covering interest plus a growing principal share.

    Not rounded; callers format for display.
    """
    validate_loan_terms(loan_term_years, annual_interest_rate_percent)
    n = loan_term_years * MONTHS_PER_YEAR
    if loan_amount <= 0:
        return Decimal("0")
    r = annual_interest_rate_percent / 100 / MONTHS_PER_YEAR
    if r == 0:
        logger.debug("Zero interest rate, using linear repayment over %d months", n)
        return loan_amount / n

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n
    return loan_amount * (r * factor) / (factor - 1)


def compute_loan(
    total_price: Decimal,
    down_payment_percent: Decimal,
    loan_term_years: int,
    annual_interest_rate_percent: Decimal,
) -> LoanResult:
    """Monthly payment, total repayment and total interest for a purchase.

    Args:
        total_price: Purchase price
        down_payment_percent: Equity share in percent (20 = 20%)
        loan_term_years: Term in whole years
        annual_interest_rate_percent: Nominal rate in percent (3.5 = 3.5%)
    """
    validate_down_payment(down_payment_percent)

    down_payment_amount = total_price * down_payment_percent / 100
    loan_amount = total_price - down_payment_amount
    months = loan_term_years * MONTHS_PER_YEAR

    pmt = monthly_payment(loan_amount, annual_interest_rate_percent, loan_term_years)
    total_payment = pmt * months

    return LoanResult(
        loan_amount=loan_amount,
        down_payment_amount=down_payment_amount,
        monthly_payment=pmt,
        total_payment=total_payment,
        total_interest=total_payment - loan_amount,
        months=months,
    )


def amortization_schedule(
    loan_amount: Decimal,
    annual_interest_rate_percent: Decimal,
    loan_term_years: int,
) -> list[AmortizationYear]:
    """Yearly repayment plan (Tilgungsplan) for an annuity loan.

    Monthly interest accrues on the outstanding balance; the last payment
    is trimmed so the balance ends at exactly zero.
    """
    pmt = monthly_payment(loan_amount, annual_interest_rate_percent, loan_term_years)
    r = annual_interest_rate_percent / 100 / MONTHS_PER_YEAR
    n = loan_term_years * MONTHS_PER_YEAR

    plan: list[AmortizationYear] = []
    balance = max(loan_amount, Decimal("0"))
    year_payment = year_interest = year_principal = Decimal("0")

    for month in range(1, n + 1):
        interest = balance * r
        principal = pmt - interest
        if month == n or principal > balance:
            principal = balance
        balance -= principal

        year_interest += interest
        year_principal += principal
        year_payment += interest + principal

        if month % MONTHS_PER_YEAR == 0:
            plan.append(AmortizationYear(
                year=month // MONTHS_PER_YEAR,
                payment=year_payment,
                interest=year_interest,
                principal=year_principal,
                ending_balance=balance,
            ))
            year_payment = year_interest = year_principal = Decimal("0")

    return plan
