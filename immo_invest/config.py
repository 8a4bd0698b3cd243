from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "IMMO_"}

    # App
    log_level: str = "INFO"

    # Projection horizons
    projection_years: int = 10
    break_even_horizon_years: int = 30

    # Financing defaults of the investment calculator
    default_down_payment_percent: Decimal = Decimal("20")
    default_loan_term_years: int = 25
    default_interest_rate_percent: Decimal = Decimal("3.5")
    monthly_cost_allowance: Decimal = Decimal("150")  # Verwaltung + Instandhaltung on top of Hausgeld

    # Fallbacks when the listing has no value of its own. The cashflow chart
    # and the tax tab have always used different ones; both are kept.
    cashflow_default_rent_increase_percent: Decimal = Decimal("2")
    cashflow_default_value_growth_percent: Decimal = Decimal("3")
    cashflow_default_management_costs: Decimal = Decimal("500")
    tax_default_rent_increase_percent: Decimal = Decimal("2.0")
    tax_default_value_growth_percent: Decimal = Decimal("3.5")
    tax_default_management_costs: Decimal = Decimal("1500")

    # Income tax (simplified 2024 brackets): upper bound of taxable income -> rate in %
    income_tax_brackets: list[tuple[Decimal, Decimal]] = [
        (Decimal("11604"), Decimal("0")),
        (Decimal("17005"), Decimal("14")),
        (Decimal("66760"), Decimal("24")),
        (Decimal("277825"), Decimal("42")),
    ]
    top_income_tax_rate: Decimal = Decimal("45")

    # Surcharges, as a share of the income tax rate
    solidarity_surcharge_rate: Decimal = Decimal("0.055")
    church_tax_rate: Decimal = Decimal("0.09")
    reduced_church_tax_rate: Decimal = Decimal("0.08")
    reduced_church_tax_states: list[str] = ["Bayern", "Baden-Württemberg"]


settings = Settings()
