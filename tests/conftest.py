"""Canonical test fixtures used across all engine tests.

Fixture: 500K apartment, 1,500/month cold rent, 200 Hausgeld, 500 management,
2% rent increase, 3% value growth, 80 m².
Investor: single, 80K gross income, no church tax, Bayern.
"""

import pytest
from decimal import Decimal

from immo_invest.models.assumptions import MaritalStatus, TaxSettings
from immo_invest.models.property import Property


@pytest.fixture
def canonical_property() -> Property:
    return Property(
        id=1,
        address="Leopoldstraße 12, 80802 München",
        unit_number="WE 4",
        total_price=Decimal("500000"),
        monthly_rent_cold=Decimal("1500"),
        size_m2=Decimal("80"),
        rooms=Decimal("3"),
        house_fee=Decimal("200"),
        management_costs=Decimal("500"),
        value_growth_percent=Decimal("3"),
        rent_increase_percent=Decimal("2"),
        commission_percent=Decimal("3.57"),
    )


@pytest.fixture
def bare_property() -> Property:
    """Listing without any optional cost or growth fields."""
    return Property(
        id=2,
        total_price=Decimal("300000"),
        monthly_rent_cold=Decimal("1000"),
    )


@pytest.fixture
def single_investor() -> TaxSettings:
    return TaxSettings(
        gross_annual_income=Decimal("80000"),
        marital_status=MaritalStatus.SINGLE,
        church_tax=False,
        state="Bayern",
    )


@pytest.fixture
def married_investor() -> TaxSettings:
    return TaxSettings(
        gross_annual_income=Decimal("80000"),
        marital_status=MaritalStatus.MARRIED,
        church_tax=True,
        state="Berlin",
    )
