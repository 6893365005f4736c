"""Tests for the command line interface."""

from typer.testing import CliRunner

from pokerodds.cli import app, format_percent

runner = CliRunner()


class TestFormatPercent:
    def test_two_decimals(self):
        assert format_percent(12.3456) == "12.35%"
        assert format_percent(100.0) == "100.00%"
        assert format_percent(0.0) == "0.00%"

    def test_tiny_chances(self):
        assert format_percent(0.004) == "<0.01%"


class TestOddsCommand:
    def test_finished_hand(self):
        result = runner.invoke(app, ["odds", "As Ah", "--board", "Ad Ac 2s 2h 2d"])
        assert result.exit_code == 0
        assert "Odds by the River" in result.output
        assert "100.00%" in result.output
        assert "Four of a Kind" in result.output
        assert "594" in result.output

    def test_chosen_street(self):
        result = runner.invoke(app, ["odds", "As Ah", "-b", "Kd 7c 2s", "--street", "river"])
        assert result.exit_code == 0
        assert "Odds by the River (exact)" in result.output

    def test_sampled(self):
        result = runner.invoke(app, ["odds", "As Kh", "-n", "300", "--seed", "1"])
        assert result.exit_code == 0
        assert "300 simulations" in result.output

    def test_invalid_card(self):
        result = runner.invoke(app, ["odds", "As Zz"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_wrong_hole_count(self):
        result = runner.invoke(app, ["odds", "As"])
        assert result.exit_code == 1

    def test_unknown_street(self):
        result = runner.invoke(app, ["odds", "As Ah", "--street", "preflop"])
        assert result.exit_code == 1
        assert "Unknown street" in result.output

    def test_duplicate_cards(self):
        result = runner.invoke(app, ["odds", "As Ah", "-b", "As 7c 2s"])
        assert result.exit_code == 1


class TestBestCommand:
    def test_best(self):
        result = runner.invoke(app, ["best", "9s 8s 7s 6s 5s Ah Ad"])
        assert result.exit_code == 0
        assert "Straight Flush" in result.output

    def test_high_card(self):
        result = runner.invoke(app, ["best", "7h 2c 9d Js 4h Kc 3s"])
        assert result.exit_code == 0
        assert "High Card" in result.output


class TestInteractive:
    def test_full_hand(self):
        lines = ["As Ah", "Kd 7c 2s", "Ad", "Ac"]
        result = runner.invoke(app, ["interactive"], input="\n".join(lines) + "\n")
        assert result.exit_code == 0
        assert "Four of a Kind" in result.output

    def test_quit(self):
        result = runner.invoke(app, ["interactive"], input="quit\n")
        assert result.exit_code == 0
