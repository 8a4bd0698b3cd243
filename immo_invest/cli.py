"""Terminal report for one property: key figures, financing, cashflow and tax projection.

Usage:
    immo-invest property.json --down-payment 20 --term 25 --rate 3.5
    immo-invest --price 500000 --rent 1500 --house-fee 200 --size 85 --income 95000 --married
    immo-invest property.json --html report.html
"""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pydantic import ValidationError

from immo_invest.charts import cashflow_figure, return_figure, tax_figure, write_report_html
from immo_invest.config import settings
from immo_invest.engine.cashflow import project_cashflow
from immo_invest.engine.debt import amortization_schedule
from immo_invest.engine.errors import ProjectionError
from immo_invest.engine.investment import summarize_investment
from immo_invest.engine.metrics import gross_rental_yield, price_per_m2
from immo_invest.engine.tax import project_after_tax
from immo_invest.models.assumptions import (
    CashflowAssumptions,
    LoanAssumptions,
    MaritalStatus,
    TaxAssumptions,
)
from immo_invest.models.property import Property
from immo_invest.models.results import AmortizationYear, CashflowYear, InvestmentSummary, TaxProjection
from immo_invest.schemas import PropertyInput, TaxSettingsInput

logger = logging.getLogger(__name__)


# ── Helpers ──────────────────────────────────────────────────────────────────

def _german(v, places: int) -> str:
    # 1,234.5 -> 1.234,5
    s = f"{float(v):,.{places}f}"
    return s.replace(",", "_").replace(".", ",").replace("_", ".")


def _eur(v) -> str:
    return f"{_german(v, 0)} €"


def _eur_cents(v) -> str:
    return f"{_german(v, 2)} €"


def _pct(v) -> str:
    return f"{float(v):.2f}%"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_property(prop: Property) -> None:
    _header("Objekt")
    if prop.address:
        print(f"  Adresse:          {prop.address} {prop.unit_number}".rstrip())
    print(f"  Kaufpreis:        {_eur(prop.total_price)}")
    print(f"  Kaltmiete:        {_eur(prop.monthly_rent_cold)}/Monat")
    if prop.size_m2:
        print(f"  Wohnfläche:       {prop.size_m2} m²  ({_eur(price_per_m2(prop))}/m²)")
    print(f"  Bruttomietrendite: {_pct(gross_rental_yield(prop))}")
    if prop.commission_percent is not None:
        print(f"  Provision:        {prop.commission_percent}% ({_eur(prop.commission_amount)})")


def print_investment(summary: InvestmentSummary) -> None:
    loan = summary.loan
    _header("Finanzierung")
    print(f"  Eigenkapital:         {_eur(loan.down_payment_amount)}")
    print(f"  Darlehenssumme:       {_eur(loan.loan_amount)}")
    print(f"  Monatliche Rate:      {_eur_cents(loan.monthly_payment)}")
    print(f"  Gesamte Zinsen:       {_eur(loan.total_interest)}")
    print(f"  Gesamtrückzahlung:    {_eur(loan.total_payment)}")
    print()
    print(f"  + Mieteinnahmen:      {_eur(summary.monthly_rent)}")
    print(f"  - Darlehensrate:      {_eur(loan.monthly_payment)}")
    print(f"  - Nebenkosten:        {_eur(summary.monthly_costs)}")
    print(f"  = Netto-Cashflow:     {_eur(summary.monthly_cashflow)}/Monat")
    print(f"  Eigenkapitalrendite:  {_pct(summary.annual_yield)} p.a.")
    if summary.breaks_even:
        print(f"  Break-Even:           {summary.break_even_year} Jahre")
    else:
        print("  Break-Even:           Nie")


def print_schedule(plan: list[AmortizationYear]) -> None:
    _header("Tilgungsplan")
    print(f"  {'Jahr':>4}  {'Zinsen':>10}  {'Tilgung':>10}  {'Restschuld':>12}")
    for y in plan:
        print(f"  {y.year:>4}  {_eur(y.interest):>10}  {_eur(y.principal):>10}  {_eur(y.ending_balance):>12}")


def print_cashflow(rows: list[CashflowYear]) -> None:
    _header("Cashflow-Projektion")
    print(f"  {'Jahr':>4}  {'Miete/M':>9}  {'Netto':>10}  {'Kumuliert':>11}  {'Wert':>11}  {'Rendite':>11}")
    for r in rows:
        print(
            f"  {r.year:>4}  {_eur(r.monthly_rent):>9}  {_eur(r.net_cashflow):>10}  "
            f"{_eur(r.cumulative_cashflow):>11}  {_eur(r.property_value):>11}  {_eur(r.total_return):>11}"
        )


def print_tax(projection: TaxProjection) -> None:
    rates = projection.rates
    _header("Steuerliche Projektion (vereinfacht)")
    print(f"  Einkommensteuer:      {float(rates.income_tax):.1f}%")
    print(f"  Solidaritätszuschlag: {float(rates.solidarity):.1f}%")
    print(f"  Kirchensteuer:        {float(rates.church):.1f}%")
    print(f"  Gesamtsteuersatz:     {float(rates.total):.1f}%")
    print()
    print(f"  {'Jahr':>4}  {'Netto':>10}  {'Steuern':>10}  {'Nach St.':>10}  {'Wertzuwachs':>12}")
    for y in projection.years:
        print(
            f"  {y.year:>4}  {_eur(y.net_rental_income):>10}  {_eur(y.taxes_due):>10}  "
            f"{_eur(y.after_tax_income):>10}  {_eur(y.value_appreciation):>12}"
        )
    print()
    print(f"  Summe nach Steuern:   {_eur(projection.total_after_tax_income)}")
    print(f"  Summe Steuern:        {_eur(projection.total_taxes)}")
    print(f"  Wertsteigerung:       {_eur(projection.final_value_appreciation)}")


# ── Input ────────────────────────────────────────────────────────────────────

def _decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Investment, cashflow and tax projection for a property")
    parser.add_argument("property_file", nargs="?", help="JSON file with a property record")

    prop = parser.add_argument_group("property (without a JSON file)")
    prop.add_argument("--price", type=_decimal, help="Total purchase price")
    prop.add_argument("--rent", type=_decimal, help="Monthly cold rent")
    prop.add_argument("--house-fee", type=_decimal, help="Monthly Hausgeld")
    prop.add_argument("--management-costs", type=_decimal, help="Annual management costs")
    prop.add_argument("--size", type=_decimal, help="Living area in m²")
    prop.add_argument("--value-growth", type=_decimal, help="Annual value growth in %%")
    prop.add_argument("--rent-increase", type=_decimal, help="Annual rent increase in %%")

    loan = parser.add_argument_group("financing")
    loan.add_argument("--down-payment", type=_decimal, default=settings.default_down_payment_percent,
                      help="Equity in %% (default: %(default)s)")
    loan.add_argument("--term", type=int, default=settings.default_loan_term_years,
                      help="Loan term in years (default: %(default)s)")
    loan.add_argument("--rate", type=_decimal, default=settings.default_interest_rate_percent,
                      help="Interest rate in %% (default: %(default)s)")
    loan.add_argument("--monthly-costs", type=_decimal, help="Monthly running costs (default: Hausgeld + allowance)")

    tax = parser.add_argument_group("tax")
    tax.add_argument("--income", type=_decimal, default=Decimal("80000"), help="Gross annual income (default: 80000)")
    tax.add_argument("--married", action="store_true", help="Joint assessment")
    tax.add_argument("--church-tax", action="store_true", help="Include church tax")
    tax.add_argument("--state", default="Bayern", help="Bundesland (default: Bayern)")

    parser.add_argument("--years", type=int, default=settings.projection_years, help="Projection horizon")
    parser.add_argument("--schedule", action="store_true", help="Print the yearly repayment plan")
    parser.add_argument("--html", help="Write charts to this HTML file")
    return parser


def load_property(args: argparse.Namespace, parser: argparse.ArgumentParser) -> Property:
    if args.property_file:
        raw = Path(args.property_file).read_text(encoding="utf-8")
        return PropertyInput.model_validate_json(raw).to_property()
    if args.price is None or args.rent is None:
        parser.error("either a property file or --price and --rent are required")
    return PropertyInput(
        total_price=args.price,
        monthly_rent_cold=args.rent,
        house_fee=args.house_fee,
        management_costs=args.management_costs,
        size_m2=args.size,
        value_growth_percent=args.value_growth,
        rent_increase_percent=args.rent_increase,
    ).to_property()


def run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    prop = load_property(args, parser)

    loan_overrides = {
        "down_payment_percent": args.down_payment,
        "loan_term_years": args.term,
        "annual_interest_rate_percent": args.rate,
    }
    if args.monthly_costs is not None:
        loan_overrides["monthly_costs"] = args.monthly_costs
    loan_assumptions = LoanAssumptions.for_property(prop, **loan_overrides)

    tax_settings = TaxSettingsInput(
        gross_annual_income=args.income,
        marital_status=MaritalStatus.MARRIED if args.married else MaritalStatus.SINGLE,
        church_tax=args.church_tax,
        state=args.state,
    ).to_tax_settings()

    summary = summarize_investment(prop, loan_assumptions)
    rows = project_cashflow(prop, CashflowAssumptions.for_property(prop, years=args.years))
    projection = project_after_tax(
        prop, TaxAssumptions.for_property(prop, tax_settings=tax_settings, years=args.years)
    )

    print_property(prop)
    print_investment(summary)
    if args.schedule:
        print_schedule(amortization_schedule(
            summary.loan.loan_amount, args.rate, args.term
        ))
    print_cashflow(rows)
    print_tax(projection)

    if args.html:
        path = write_report_html(
            args.html, [cashflow_figure(rows), return_figure(rows), tax_figure(projection)]
        )
        logger.info("Charts written to %s", path)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        return run(args, parser)
    except (ProjectionError, ValidationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
