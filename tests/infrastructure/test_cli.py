"""End-to-end tests for the click command line."""

import pytest
from click.testing import CliRunner

from shopflow.infrastructure.cli import main
from shopflow.infrastructure.cli.main import cli


@pytest.fixture
def runner(monkeypatch) -> CliRunner:
    levels: list[str] = []
    monkeypatch.setattr(main, "configure_logging", levels.append)
    runner = CliRunner()
    runner.levels = levels
    return runner


# ── pricing ──────────────────────────────────────────────────────────────────


class TestPricingQuote:

    def test_quote(self, runner):
        result = runner.invoke(
            cli,
            ["pricing", "quote", "--items", "150000:2,50000:1", "--zone", "HCM",
             "--weight", "1.5", "--discount", "0.1"],
        )
        assert result.exit_code == 0, result.output
        assert "350.000 ₫" in result.output
        assert "37.500 ₫" in result.output
        assert "387.500 ₫" in result.output

    def test_domain_error_becomes_click_error(self, runner):
        result = runner.invoke(
            cli, ["pricing", "quote", "--items", "1000:1", "--zone", "HCM", "--weight", "0"]
        )
        assert result.exit_code == 1
        assert "Weight must be positive" in result.output

    def test_malformed_items(self, runner):
        result = runner.invoke(
            cli, ["pricing", "quote", "--items", "oops", "--zone", "HCM", "--weight", "1"]
        )
        assert result.exit_code == 2
        assert "UnitPrice:Qty" in result.output

    def test_configured_rates_from_environment(self, runner, monkeypatch):
        monkeypatch.setenv("SHOPFLOW_PRICING__BASE_SHIPPING_FEE", "0")
        result = runner.invoke(
            cli, ["pricing", "quote", "--items", "1000:1", "--zone", "HCM", "--weight", "1"]
        )
        assert result.exit_code == 0, result.output
        shipping = next(line for line in result.output.splitlines() if "Shipping" in line)
        assert shipping.split()[1] == "5.000"


# ── catalog ──────────────────────────────────────────────────────────────────


class TestCatalogSlug:

    def test_category_slug(self, runner):
        result = runner.invoke(cli, ["catalog", "slug", "Áo Dài Truyền Thống"])
        assert result.exit_code == 0
        assert result.output.strip() == "ao-dai-truyen-thong"

    def test_product_slug(self, runner):
        result = runner.invoke(cli, ["catalog", "slug", "--kind", "product", "Phở Bò [Đặc biệt]"])
        assert result.exit_code == 0
        assert result.output.strip() == "pho-bo-dac-biet"

    def test_invalid_name(self, runner):
        result = runner.invoke(cli, ["catalog", "slug", "A"])
        assert result.exit_code == 1
        assert "at least 2 characters" in result.output


# ── contact ──────────────────────────────────────────────────────────────────


class TestContact:

    def test_phone(self, runner):
        result = runner.invoke(cli, ["contact", "phone", "+84 90 123 4567"])
        assert result.exit_code == 0
        assert "901234567" in result.output
        assert "0901234567" in result.output
        assert "+84901234567" in result.output

    def test_invalid_phone(self, runner):
        result = runner.invoke(cli, ["contact", "phone", "12345"])
        assert result.exit_code == 1
        assert "Invalid phone number format" in result.output

    def test_email(self, runner):
        result = runner.invoke(cli, ["contact", "email", " Alice@Shop.VN "])
        assert result.exit_code == 0
        assert "alice@shop.vn" in result.output
        assert "Domain: shop.vn" in result.output

    def test_invalid_email(self, runner):
        result = runner.invoke(cli, ["contact", "email", "nope"])
        assert result.exit_code == 1
        assert "Invalid email format" in result.output


class TestLogLevel:

    def test_defaults_to_configured_level(self, runner):
        runner.invoke(cli, ["contact", "email", "a@shop.vn"])
        assert runner.levels == ["INFO"]

    def test_override(self, runner):
        runner.invoke(cli, ["--log-level", "DEBUG", "contact", "email", "a@shop.vn"])
        assert runner.levels == ["DEBUG"]
