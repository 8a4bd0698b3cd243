from decimal import Decimal

import pytest

from immo_invest.config import settings
from immo_invest.engine.cashflow import project_cashflow
from immo_invest.models.assumptions import CashflowAssumptions, LoanAssumptions, TaxAssumptions


@pytest.fixture
def tuned_settings(monkeypatch):
    """Settings as a deployment might override them through IMMO_* variables."""
    monkeypatch.setattr(settings, "projection_years", 15)
    monkeypatch.setattr(settings, "cashflow_default_management_costs", Decimal("800"))
    monkeypatch.setattr(settings, "cashflow_default_value_growth_percent", Decimal("4"))
    monkeypatch.setattr(settings, "tax_default_management_costs", Decimal("1200"))
    monkeypatch.setattr(settings, "tax_default_rent_increase_percent", Decimal("1.5"))
    monkeypatch.setattr(settings, "default_loan_term_years", 30)
    return settings


class TestDefaultsFollowSettings:
    def test_cashflow_direct_and_listing_agree(self, tuned_settings, bare_property):
        direct = CashflowAssumptions()
        from_listing = CashflowAssumptions.for_property(bare_property)
        assert direct == from_listing
        assert direct.years == 15
        assert direct.management_costs == Decimal("800")
        assert direct.value_growth_percent == Decimal("4")

    def test_tax_direct_and_listing_agree(self, tuned_settings, bare_property):
        direct = TaxAssumptions()
        from_listing = TaxAssumptions.for_property(bare_property)
        assert direct == from_listing
        assert direct.years == 15
        assert direct.management_costs == Decimal("1200")
        assert direct.rent_increase_percent == Decimal("1.5")

    def test_loan_terms(self, tuned_settings, bare_property):
        assert LoanAssumptions().loan_term_years == 30
        assert LoanAssumptions.for_property(bare_property).loan_term_years == 30

    def test_projection_uses_tuned_costs(self, tuned_settings, bare_property):
        rows = project_cashflow(bare_property)
        assert len(rows) == 15
        assert rows[0].annual_costs == Decimal("800")


class TestListingValuesWin:
    def test_listing_overrides_settings(self, tuned_settings, canonical_property):
        a = CashflowAssumptions.for_property(canonical_property)
        assert a.management_costs == Decimal("500")
        assert a.value_growth_percent == Decimal("3")

    def test_explicit_zero_is_kept(self, bare_property):
        a = CashflowAssumptions.for_property(bare_property, rent_increase_percent=Decimal("0"))
        assert a.rent_increase_percent == Decimal("0")

    def test_untouched_settings_defaults(self):
        a = CashflowAssumptions()
        t = TaxAssumptions()
        assert (a.management_costs, t.management_costs) == (Decimal("500"), Decimal("1500"))
        assert (a.value_growth_percent, t.value_growth_percent) == (Decimal("3"), Decimal("3.5"))
