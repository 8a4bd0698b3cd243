"""Investment calculator: monthly cashflow, return on equity, break-even.

Pure functions: dataclasses in, dataclass out. No I/O.
"""

import logging
from decimal import Decimal

from immo_invest.config import settings
from immo_invest.engine.debt import compute_loan
from immo_invest.engine.validation import validate_loan_assumptions, validate_property
from immo_invest.models.assumptions import LoanAssumptions
from immo_invest.models.property import Property
from immo_invest.models.results import InvestmentSummary

logger = logging.getLogger(__name__)


def break_even_year(
    down_payment_amount: Decimal,
    annual_cashflow: Decimal,
    horizon_years: int | None = None,
) -> int | None:
    """First year in which the equity outlay is recovered by cashflow.

    Cumulative cashflow starts at -down_payment_amount and must turn
    strictly positive. Returns None if that does not happen within the
    horizon.
    """
    horizon = horizon_years if horizon_years is not None else settings.break_even_horizon_years
    cumulative = -down_payment_amount
    for year in range(1, horizon + 1):
        cumulative += annual_cashflow
        if cumulative > 0:
            return year
    logger.debug("No break-even within %d years (annual cashflow %s)", horizon, annual_cashflow)
    return None


def summarize_investment(
    prop: Property,
    assumptions: LoanAssumptions | None = None,
    horizon_years: int | None = None,
) -> InvestmentSummary:
    """Run the investment calculator for one property."""
    validate_property(prop)
    if assumptions is None:
        assumptions = LoanAssumptions.for_property(prop)
    validate_loan_assumptions(assumptions)

    loan = compute_loan(
        total_price=prop.total_price,
        down_payment_percent=assumptions.down_payment_percent,
        loan_term_years=assumptions.loan_term_years,
        annual_interest_rate_percent=assumptions.annual_interest_rate_percent,
    )

    monthly_cashflow = assumptions.monthly_rent - loan.monthly_payment - assumptions.monthly_costs
    annual_cashflow = monthly_cashflow * 12
    annual_yield = annual_cashflow / loan.down_payment_amount * 100

    return InvestmentSummary(
        loan=loan,
        monthly_rent=assumptions.monthly_rent,
        monthly_costs=assumptions.monthly_costs,
        monthly_cashflow=monthly_cashflow,
        annual_cashflow=annual_cashflow,
        annual_yield=annual_yield,
        break_even_year=break_even_year(loan.down_payment_amount, annual_cashflow, horizon_years),
    )
