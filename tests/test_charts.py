from immo_invest.charts import cashflow_figure, return_figure, tax_figure, write_report_html
from immo_invest.engine.cashflow import project_cashflow
from immo_invest.engine.tax import project_after_tax


class TestFigures:
    def test_cashflow_bars(self, canonical_property):
        rows = project_cashflow(canonical_property)
        fig = cashflow_figure(rows)
        assert [t.name for t in fig.data] == ["Mieteinnahmen", "Jährliche Kosten", "Netto Cashflow"]
        assert list(fig.data[2].y) == [float(r.net_cashflow) for r in rows]
        assert list(fig.data[0].x)[0] == "Jahr 1"

    def test_return_lines(self, canonical_property):
        rows = project_cashflow(canonical_property)
        fig = return_figure(rows)
        assert len(fig.data) == 3
        assert fig.data[1].y[-1] == float(rows[-1].total_return)

    def test_tax_chart(self, canonical_property):
        projection = project_after_tax(canonical_property)
        fig = tax_figure(projection)
        assert len(fig.data) == 3
        assert "44.3%" in fig.layout.title.text


class TestHtmlReport:
    def test_writes_file(self, canonical_property, tmp_path):
        rows = project_cashflow(canonical_property)
        out = write_report_html(tmp_path / "report.html", [cashflow_figure(rows), return_figure(rows)])
        html = out.read_text(encoding="utf-8")
        assert out.exists()
        assert "Cashflow" in html
        assert "plotly" in html.lower()
