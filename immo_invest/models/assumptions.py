from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from immo_invest import config
from immo_invest.models.property import Property


def _from_settings(name: str):
    """Dataclass default read from the settings at construction time."""
    return field(default_factory=lambda: getattr(config.settings, name))


def _listing_values(**values) -> dict:
    # Only values the listing actually carries; the rest fall back to settings
    return {k: v for k, v in values.items() if v is not None}


class MaritalStatus(Enum):
    SINGLE = "single"
    MARRIED = "married"  # Zusammenveranlagung (joint assessment)


@dataclass(frozen=True)
class LoanAssumptions:
    """Inputs of the investment calculator (financing + monthly cashflow)."""
    down_payment_percent: Decimal = _from_settings("default_down_payment_percent")
    loan_term_years: int = _from_settings("default_loan_term_years")
    annual_interest_rate_percent: Decimal = _from_settings("default_interest_rate_percent")
    monthly_rent: Decimal = Decimal("0")
    monthly_costs: Decimal = Decimal("0")  # Hausgeld + Verwaltung + Instandhaltung

    @classmethod
    def for_property(cls, prop: Property, **overrides) -> "LoanAssumptions":
        defaults = {
            "monthly_rent": prop.monthly_rent_cold,
            "monthly_costs": prop.monthly_house_fee + config.settings.monthly_cost_allowance,
        }
        defaults.update(overrides)
        return cls(**defaults)

    def down_payment_amount(self, total_price: Decimal) -> Decimal:
        return total_price * self.down_payment_percent / 100

    def loan_amount(self, total_price: Decimal) -> Decimal:
        return total_price - self.down_payment_amount(total_price)


@dataclass(frozen=True)
class CashflowAssumptions:
    """Growth and cost assumptions of the main cashflow projection."""
    years: int = _from_settings("projection_years")
    rent_increase_percent: Decimal = _from_settings("cashflow_default_rent_increase_percent")
    value_growth_percent: Decimal = _from_settings("cashflow_default_value_growth_percent")
    management_costs: Decimal = _from_settings("cashflow_default_management_costs")  # Annual

    @classmethod
    def for_property(cls, prop: Property, **overrides) -> "CashflowAssumptions":
        defaults = _listing_values(
            rent_increase_percent=prop.rent_increase_percent,
            value_growth_percent=prop.value_growth_percent,
            management_costs=prop.management_costs,
        )
        defaults.update(overrides)
        return cls(**defaults)


@dataclass(frozen=True)
class TaxSettings:
    gross_annual_income: Decimal = Decimal("80000")
    marital_status: MaritalStatus = MaritalStatus.SINGLE
    church_tax: bool = False
    state: str = "Bayern"  # Only affects the church tax rate

    @property
    def taxable_income(self) -> Decimal:
        # Splitting: married couples are assessed on half the joint income
        if self.marital_status is MaritalStatus.MARRIED:
            return self.gross_annual_income / 2
        return self.gross_annual_income


@dataclass(frozen=True)
class TaxAssumptions:
    """State of the tax tab.

    Carries its own growth rates, independent of CashflowAssumptions, so the
    two tabs can diverge.
    """
    tax_settings: TaxSettings = field(default_factory=TaxSettings)
    years: int = _from_settings("projection_years")
    value_growth_percent: Decimal = _from_settings("tax_default_value_growth_percent")
    rent_increase_percent: Decimal = _from_settings("tax_default_rent_increase_percent")
    management_costs: Decimal = _from_settings("tax_default_management_costs")  # Annual

    @classmethod
    def for_property(cls, prop: Property, **overrides) -> "TaxAssumptions":
        defaults = _listing_values(
            value_growth_percent=prop.value_growth_percent,
            rent_increase_percent=prop.rent_increase_percent,
            management_costs=prop.management_costs,
        )
        defaults.update(overrides)
        return cls(**defaults)
