"""Listing key figures shown on property cards and detail pages."""

from decimal import Decimal, ROUND_HALF_UP

from immo_invest.engine.errors import InvalidPropertyError
from immo_invest.engine.validation import validate_property
from immo_invest.models.property import Property

TWO_PLACES = Decimal("0.01")


def price_per_m2(prop: Property) -> Decimal:
    """Purchase price per square metre, whole currency units."""
    validate_property(prop)
    if prop.size_m2 is None or prop.size_m2 <= 0:
        raise InvalidPropertyError(f"Property {prop.id}: size_m2 must be positive")
    return (prop.total_price / prop.size_m2).quantize(Decimal("1"), ROUND_HALF_UP)


def gross_rental_yield(prop: Property) -> Decimal:
    """Annual cold rent over purchase price, percent with two decimals."""
    validate_property(prop)
    return (prop.monthly_rent_cold * 12 / prop.total_price * 100).quantize(
        TWO_PLACES, ROUND_HALF_UP
    )
