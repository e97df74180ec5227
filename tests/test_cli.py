"""
Tests for the CLI functionality
"""

from unittest.mock import patch

from typer.testing import CliRunner

from customerdomain.cli import app, DemoSelection
from customerdomain.demos import DemoName
from customerdomain.exceptions import CustomerDomainError


class TestCLI:
    """Test cases for CLI functionality"""

    def setup_method(self):
        """Set up test fixtures"""
        self.runner = CliRunner()

    def test_version_option(self):
        """Test --version option"""
        result = self.runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "customerdomain version" in result.stdout

    def test_help_option(self):
        """Test --help option"""
        result = self.runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "--demo" in result.stdout

    def test_no_arguments(self):
        """Running without arguments shows the final demo with every total"""
        result = self.runner.invoke(app, [])
        assert result.exit_code == 0

        for name in ("John", "Mary", "Richard", "Sarah"):
            assert name in result.stdout
        for total in ("£90.00", "£99.00", "£100.00"):
            assert total in result.stdout

    def test_demo_choices_follow_demo_names(self):
        """Every demo is selectable, plus all"""
        assert [choice.value for choice in DemoSelection] == [name.value for name in DemoName] + ["all"]

    def test_plain_output_lines(self):
        """Plain mode prints the scenario lines"""
        result = self.runner.invoke(app, ["--plain"])
        assert result.exit_code == 0
        assert "John (Eligible, £100.00): £90.00" in result.stdout
        assert "Mary (Eligible, £99.00): £99.00" in result.stdout
        assert "Richard (Registered, £100.00): £100.00" in result.stdout
        assert "Sarah (Guest, £100.00): £100.00" in result.stdout

    def test_naive_demo(self):
        """The naive demo shows the Grinch"""
        result = self.runner.invoke(app, ["--demo", "naive", "--plain"])
        assert result.exit_code == 0
        assert "Grinch (Eligible but NOT Registered, £100.00): £90.00" in result.stdout

    def test_all_demos(self):
        """--demo all runs every iteration in order"""
        result = self.runner.invoke(app, ["--demo", "all", "--plain"])
        assert result.exit_code == 0

        naive = result.stdout.index("Iteration 0")
        flagged = result.stdout.index("Iteration 1")
        final = result.stdout.index("Final Version")
        assert naive < flagged < final

    def test_demo_from_environment(self):
        """The demo can be chosen through CUSTOMERDOMAIN_DEMO"""
        result = self.runner.invoke(app, ["--plain"], env={"CUSTOMERDOMAIN_DEMO": "flagged"})
        assert result.exit_code == 0
        assert "Iteration 1" in result.stdout

    def test_invalid_demo(self):
        """Unknown demos are a usage error"""
        result = self.runner.invoke(app, ["--demo", "bogus"])
        assert result.exit_code == 2

    def test_verbose_option(self):
        """Test --verbose option"""
        result = self.runner.invoke(app, ["--verbose", "--plain"])
        assert result.exit_code == 0

    def test_domain_error_exit_code(self):
        """Domain errors exit with code 1"""
        with patch("customerdomain.cli.run_demo", side_effect=CustomerDomainError("broken")):
            result = self.runner.invoke(app, [])
        assert result.exit_code == 1

    def test_unexpected_error_exit_code(self):
        """Unexpected errors exit with code 1"""
        with patch("customerdomain.cli.run_demo", side_effect=RuntimeError("boom")):
            result = self.runner.invoke(app, ["--verbose"])
        assert result.exit_code == 1
