"""Input guards. Every calculator runs these before it starts projecting.

Pure functions. Raise on bad input, return None otherwise.
"""

from decimal import Decimal

from immo_invest.engine.errors import InvalidAssumptionError, InvalidPropertyError
from immo_invest.models.assumptions import LoanAssumptions, TaxSettings
from immo_invest.models.property import Property


def validate_property(prop: Property) -> None:
    if prop.total_price <= 0:
        raise InvalidPropertyError(
            f"Property {prop.id}: total_price must be positive, got {prop.total_price}"
        )
    if prop.monthly_rent_cold < 0:
        raise InvalidPropertyError(
            f"Property {prop.id}: monthly_rent_cold must not be negative"
        )
    if prop.house_fee is not None and prop.house_fee < 0:
        raise InvalidPropertyError(f"Property {prop.id}: house_fee must not be negative")
    if prop.management_costs is not None and prop.management_costs < 0:
        raise InvalidPropertyError(
            f"Property {prop.id}: management_costs must not be negative"
        )


def validate_down_payment(down_payment_percent: Decimal) -> None:
    if not Decimal("0") <= down_payment_percent <= Decimal("100"):
        raise InvalidAssumptionError(
            f"down_payment_percent must be within 0..100, got {down_payment_percent}"
        )


def validate_loan_terms(loan_term_years: int, annual_interest_rate_percent: Decimal) -> None:
    if loan_term_years < 1:
        raise InvalidAssumptionError(f"loan_term_years must be at least 1, got {loan_term_years}")
    if annual_interest_rate_percent < 0:
        raise InvalidAssumptionError("annual_interest_rate_percent must not be negative")


def validate_loan_assumptions(assumptions: LoanAssumptions) -> None:
    validate_down_payment(assumptions.down_payment_percent)
    validate_loan_terms(assumptions.loan_term_years, assumptions.annual_interest_rate_percent)
    if assumptions.down_payment_percent == 0:
        # Yield is measured against equity
        raise InvalidAssumptionError("down_payment_percent must be above 0 to compute a yield")
    if assumptions.monthly_rent < 0 or assumptions.monthly_costs < 0:
        raise InvalidAssumptionError("monthly_rent and monthly_costs must not be negative")


def validate_growth(
    years: int, rent_increase_percent: Decimal, value_growth_percent: Decimal
) -> None:
    if years < 1:
        raise InvalidAssumptionError(f"years must be at least 1, got {years}")
    for name, rate in (
        ("rent_increase_percent", rent_increase_percent),
        ("value_growth_percent", value_growth_percent),
    ):
        if rate <= -100:
            raise InvalidAssumptionError(f"{name} must be above -100, got {rate}")


def validate_tax_settings(tax_settings: TaxSettings) -> None:
    if tax_settings.gross_annual_income <= 0:
        raise InvalidAssumptionError("gross_annual_income must be positive")
