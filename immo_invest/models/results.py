from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class LoanResult:
    loan_amount: Decimal
    down_payment_amount: Decimal
    monthly_payment: Decimal
    total_payment: Decimal
    total_interest: Decimal
    months: int


@dataclass(frozen=True)
class AmortizationYear:
    year: int
    payment: Decimal
    interest: Decimal
    principal: Decimal
    ending_balance: Decimal


@dataclass(frozen=True)
class InvestmentSummary:
    loan: LoanResult
    monthly_rent: Decimal
    monthly_costs: Decimal
    monthly_cashflow: Decimal
    annual_cashflow: Decimal
    annual_yield: Decimal  # Return on equity, % p.a.
    break_even_year: int | None  # None = not within the horizon

    @property
    def breaks_even(self) -> bool:
        return self.break_even_year is not None


@dataclass(frozen=True)
class CashflowYear:
    year: int
    monthly_rent: Decimal
    annual_rent: Decimal
    annual_costs: Decimal
    net_cashflow: Decimal
    cumulative_cashflow: Decimal
    property_value: Decimal
    total_return: Decimal


@dataclass(frozen=True)
class TaxYear(CashflowYear):
    taxes_due: Decimal = Decimal("0")
    after_tax_income: Decimal = Decimal("0")
    cumulative_after_tax_income: Decimal = Decimal("0")
    value_appreciation: Decimal = Decimal("0")

    @property
    def net_rental_income(self) -> Decimal:
        return self.net_cashflow


@dataclass(frozen=True)
class TaxRates:
    """Rates in percentage points. Surcharges are not compounded."""
    income_tax: Decimal
    solidarity: Decimal
    church: Decimal

    @property
    def total(self) -> Decimal:
        return self.income_tax + self.solidarity + self.church


@dataclass(frozen=True)
class TaxProjection:
    rates: TaxRates
    years: list[TaxYear] = field(default_factory=list)

    # Year 1
    current_year_tax: Decimal = Decimal("0")
    current_year_after_tax: Decimal = Decimal("0")

    # Whole horizon
    total_after_tax_income: Decimal = Decimal("0")
    total_taxes: Decimal = Decimal("0")
    final_value_appreciation: Decimal = Decimal("0")
