"""Plotly figures for the cashflow and tax projection series."""

from pathlib import Path

import plotly.graph_objects as go

from immo_invest.models.results import CashflowYear, TaxProjection


def _labels(rows: list[CashflowYear]) -> list[str]:
    return [f"Jahr {r.year}" for r in rows]


def cashflow_figure(rows: list[CashflowYear]) -> go.Figure:
    """Annual rent, costs and net cashflow as grouped bars."""
    x = _labels(rows)
    fig = go.Figure()
    fig.add_trace(go.Bar(x=x, y=[float(r.annual_rent) for r in rows], name="Mieteinnahmen", marker_color="#10b981"))
    fig.add_trace(go.Bar(x=x, y=[float(r.annual_costs) for r in rows], name="Jährliche Kosten", marker_color="#ef4444"))
    fig.add_trace(go.Bar(x=x, y=[float(r.net_cashflow) for r in rows], name="Netto Cashflow", marker_color="#3b82f6"))
    fig.update_layout(title="Jährlicher Cashflow", barmode="group", xaxis_title="Jahr", yaxis_title="€")
    return fig


def return_figure(rows: list[CashflowYear]) -> go.Figure:
    """Cumulative cashflow, total return and property value over time."""
    x = _labels(rows)
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=x,
        y=[float(r.cumulative_cashflow) for r in rows],
        mode="lines+markers",
        name="Kumulierter Cashflow",
        line=dict(color="#3b82f6", width=3),
    ))
    fig.add_trace(go.Scatter(
        x=x,
        y=[float(r.total_return) for r in rows],
        mode="lines+markers",
        name="Gesamtrendite",
        line=dict(color="#10b981", width=3),
    ))
    fig.add_trace(go.Scatter(
        x=x,
        y=[float(r.property_value) for r in rows],
        mode="lines",
        name="Immobilienwert",
        line=dict(color="#8b5cf6", width=2, dash="dash"),
    ))
    fig.update_layout(title="Wertentwicklung & Gesamtrendite", xaxis_title="Jahr", yaxis_title="€")
    return fig


def tax_figure(projection: TaxProjection) -> go.Figure:
    rows = projection.years
    x = _labels(rows)
    fig = go.Figure()
    fig.add_trace(go.Bar(x=x, y=[float(r.taxes_due) for r in rows], name="Steuern", marker_color="#ef4444"))
    fig.add_trace(go.Bar(x=x, y=[float(r.after_tax_income) for r in rows], name="Nach Steuern", marker_color="#10b981"))
    fig.add_trace(go.Scatter(
        x=x,
        y=[float(r.value_appreciation) for r in rows],
        mode="lines+markers",
        name="Wertsteigerung",
        line=dict(color="#1a1a2e", width=2),
    ))
    fig.update_layout(
        title=f"Steuerliche Projektion (Gesamtsteuersatz {float(projection.rates.total):.1f}%)",
        barmode="group",
        xaxis_title="Jahr",
        yaxis_title="€",
    )
    return fig


def write_report_html(path: str | Path, figures: list[go.Figure]) -> Path:
    """Write figures into one standalone HTML page; plotly.js is inlined once."""
    path = Path(path)
    parts = [
        fig.to_html(full_html=False, include_plotlyjs=(i == 0))
        for i, fig in enumerate(figures)
    ]
    path.write_text(
        "<html><head><meta charset='utf-8'></head><body>\n" + "\n".join(parts) + "\n</body></html>",
        encoding="utf-8",
    )
    return path
