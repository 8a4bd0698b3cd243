"""Simplified income tax on rental income (vereinfachte Steuerberechnung).

One marginal bracket rate is applied to the whole net rental income, plus
solidarity surcharge and optional church tax. This is deliberately not a
progressive integral over the tariff zones. Depreciation (AfA), special
expenses and financing costs are not considered.

Pure functions: dataclasses in, dataclasses out. No I/O.
"""

import logging
from decimal import Decimal

from immo_invest.config import settings
from immo_invest.engine.cashflow import annual_costs, grow_rent_and_value, to_whole_units
from immo_invest.engine.validation import validate_growth, validate_property, validate_tax_settings
from immo_invest.models.assumptions import TaxAssumptions, TaxSettings
from immo_invest.models.property import Property
from immo_invest.models.results import TaxProjection, TaxRates, TaxYear

logger = logging.getLogger(__name__)


def income_tax_bracket_rate(taxable_income: Decimal) -> Decimal:
    """Marginal rate (percent) of the bracket the income falls into."""
    for upper_bound, rate in settings.income_tax_brackets:
        if taxable_income <= upper_bound:
            return rate
    return settings.top_income_tax_rate


def church_tax_share(state: str) -> Decimal:
    """Church tax as a share of income tax: 8% in Bayern/Baden-Württemberg, else 9%."""
    if state in settings.reduced_church_tax_states:
        return settings.reduced_church_tax_rate
    return settings.church_tax_rate


def income_tax_rates(tax_settings: TaxSettings) -> TaxRates:
    validate_tax_settings(tax_settings)
    rate = income_tax_bracket_rate(tax_settings.taxable_income)
    church = rate * church_tax_share(tax_settings.state) if tax_settings.church_tax else Decimal("0")
    return TaxRates(
        income_tax=rate,
        solidarity=rate * settings.solidarity_surcharge_rate,
        church=church,
    )


def tax_on(net_rental_income: Decimal, rates: TaxRates) -> Decimal:
    """Tax due on one year's net rental income.

    Losses produce a negative amount (a tax saving) at the same rate.
    """
    return net_rental_income * rates.total / 100


def project_after_tax(
    prop: Property, assumptions: TaxAssumptions | None = None
) -> TaxProjection:
    """Tax-adjusted projection using the tax tab's own growth assumptions.

    Yearly records are rounded to whole currency units; the aggregates are
    summed at full precision and rounded once.
    """
    validate_property(prop)
    if assumptions is None:
        assumptions = TaxAssumptions.for_property(prop)
    validate_growth(
        assumptions.years, assumptions.rent_increase_percent, assumptions.value_growth_percent
    )

    rates = income_tax_rates(assumptions.tax_settings)
    logger.debug(
        "Tax rates for income %s (%s): %s",
        assumptions.tax_settings.gross_annual_income,
        assumptions.tax_settings.marital_status.value,
        rates,
    )
    costs = annual_costs(prop, assumptions.management_costs)
    rounded_costs = to_whole_units(costs)

    rows: list[TaxYear] = []
    cumulative = Decimal("0")
    total_after_tax = Decimal("0")
    total_taxes = Decimal("0")
    first_year_tax = first_year_after_tax = Decimal("0")
    appreciation = Decimal("0")

    for year, rent, value in grow_rent_and_value(
        prop,
        assumptions.years,
        assumptions.rent_increase_percent,
        assumptions.value_growth_percent,
    ):
        annual_rent = rent * 12
        net_income = annual_rent - costs
        taxes = tax_on(net_income, rates)
        after_tax = net_income - taxes
        appreciation = value - prop.total_price

        total_taxes += taxes
        total_after_tax += after_tax
        if year == 1:
            first_year_tax, first_year_after_tax = taxes, after_tax

        net_cashflow = to_whole_units(net_income)
        cumulative += net_cashflow
        property_value = to_whole_units(value)

        rows.append(TaxYear(
            year=year,
            monthly_rent=to_whole_units(rent),
            annual_rent=to_whole_units(annual_rent),
            annual_costs=rounded_costs,
            net_cashflow=net_cashflow,
            cumulative_cashflow=cumulative,
            property_value=property_value,
            total_return=to_whole_units(cumulative + property_value - prop.total_price),
            taxes_due=to_whole_units(taxes),
            after_tax_income=to_whole_units(after_tax),
            cumulative_after_tax_income=to_whole_units(total_after_tax),
            value_appreciation=to_whole_units(appreciation),
        ))

    return TaxProjection(
        rates=rates,
        years=rows,
        current_year_tax=to_whole_units(first_year_tax),
        current_year_after_tax=to_whole_units(first_year_after_tax),
        total_after_tax_income=to_whole_units(total_after_tax),
        total_taxes=to_whole_units(total_taxes),
        final_value_appreciation=to_whole_units(appreciation),
    )
