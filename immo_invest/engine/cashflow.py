"""Multi-year cashflow and value projection.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from collections.abc import Iterator
from decimal import Decimal, ROUND_HALF_UP

from immo_invest.engine.errors import InvalidAssumptionError
from immo_invest.engine.validation import validate_growth, validate_property
from immo_invest.models.assumptions import CashflowAssumptions
from immo_invest.models.property import Property
from immo_invest.models.results import CashflowYear

WHOLE_UNITS = Decimal("1")


def to_whole_units(amount: Decimal) -> Decimal:
    rounded = amount.quantize(WHOLE_UNITS, ROUND_HALF_UP)
    # -0.4 rounds to -0
    return rounded.copy_abs() if rounded.is_zero() else rounded


def annual_costs(prop: Property, management_costs: Decimal) -> Decimal:
    """Hausgeld for twelve months plus annual management. Not grown over time."""
    if management_costs < 0:
        raise InvalidAssumptionError("management_costs must not be negative")
    return prop.monthly_house_fee * 12 + management_costs


def grow_rent_and_value(
    prop: Property,
    years: int,
    rent_increase_percent: Decimal,
    value_growth_percent: Decimal,
) -> Iterator[tuple[int, Decimal, Decimal]]:
    """Yield (year, monthly_rent, property_value) for years 1..N, unrounded.

    Year 1 carries the listing's rent and price; growth applies from year 2.
    """
    rent = prop.monthly_rent_cold
    value = prop.total_price
    rent_factor = 1 + rent_increase_percent / 100
    value_factor = 1 + value_growth_percent / 100
    for year in range(1, years + 1):
        yield year, rent, value
        rent *= rent_factor
        value *= value_factor


def project_cashflow(
    prop: Property, assumptions: CashflowAssumptions | None = None
) -> list[CashflowYear]:
    """Year-by-year rent, costs, cashflow, value and total return.

    Only the published records are rounded; rent and value compound at full
    precision.
    """
    validate_property(prop)
    if assumptions is None:
        assumptions = CashflowAssumptions.for_property(prop)
    validate_growth(
        assumptions.years, assumptions.rent_increase_percent, assumptions.value_growth_percent
    )

    costs = annual_costs(prop, assumptions.management_costs)
    rounded_costs = to_whole_units(costs)

    rows: list[CashflowYear] = []
    cumulative = Decimal("0")
    for year, rent, value in grow_rent_and_value(
        prop,
        assumptions.years,
        assumptions.rent_increase_percent,
        assumptions.value_growth_percent,
    ):
        annual_rent = rent * 12
        net_cashflow = to_whole_units(annual_rent - costs)
        cumulative += net_cashflow
        property_value = to_whole_units(value)

        rows.append(CashflowYear(
            year=year,
            monthly_rent=to_whole_units(rent),
            annual_rent=to_whole_units(annual_rent),
            annual_costs=rounded_costs,
            net_cashflow=net_cashflow,
            cumulative_cashflow=cumulative,
            property_value=property_value,
            total_return=to_whole_units(cumulative + property_value - prop.total_price),
        ))

    return rows
