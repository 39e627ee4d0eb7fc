"""Tests for the amortization CLI."""

from mortgage_sim.cli import main


class TestCli:
    def test_yearly_summary(self, capsys):
        code = main(["250000", "3", "--duration", "25", "--start", "2024-01-01"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Loan Summary (300 months)" in out
        assert "Monthly payment" in out
        assert "2048" in out
        assert "Max monthly" not in out

    def test_variable_prints_bounds(self, capsys):
        code = main([
            "250000", "3", "--variable", "--cap", "5", "--floor", "1", "--start", "2024-01-01",
        ])
        out = capsys.readouterr().out
        assert code == 0
        assert "Max monthly (CAP)" in out
        assert "Min monthly (FLOOR)" in out

    def test_monthly_table(self, capsys):
        code = main([
            "100000", "0", "--duration", "12", "--unit", "months", "--start", "2024-01-01", "--monthly",
        ])
        out = capsys.readouterr().out
        assert code == 0
        assert "8,333.33" in out
        assert "8,333.37" in out
        assert "2024-12-01" in out

    def test_invalid_input(self, capsys):
        code = main(["500", "3", "--start", "2024-01-01"])
        captured = capsys.readouterr()
        assert code == 2
        assert captured.err.startswith("amount:")
        assert captured.out == ""
