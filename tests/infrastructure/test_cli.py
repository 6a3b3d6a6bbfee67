"""End-to-end tests of the click CLI against a temporary data directory."""

import pytest
from click.testing import CliRunner

from stockkeeper.infrastructure.cli.main import cli
from stockkeeper.infrastructure.config import get_settings


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("STOCKKEEPER_DATA_DIR", str(tmp_path))
    get_settings.cache_clear()
    yield CliRunner()
    get_settings.cache_clear()


def _invoke(runner, *args):
    result = runner.invoke(cli, list(args))
    assert result.exit_code == 0, result.output
    return result.output


def _seed(runner):
    _invoke(runner, "variant", "add", "--name", "Blue Mug")
    _invoke(runner, "stock", "set", "--variant", "Blue Mug", "--on-hand", "10")


def test_settings_read_from_environment(runner, tmp_path):
    assert get_settings().DATA_DIR == tmp_path


def test_full_order_flow(runner):
    _seed(runner)

    out = _invoke(runner, "cart", "create", "--customer", "Alice", "--items", "Blue Mug:3")
    assert "Order #1" in out
    assert "checkout=3" in out

    out = _invoke(runner, "cart", "update", "--id", "1", "--items", "Blue Mug:2")
    assert "checkout=2" in out

    _invoke(runner, "order", "place", "--id", "1")
    out = _invoke(runner, "stock", "show")
    (line,) = [line for line in out.splitlines() if line.startswith("Blue Mug")]
    assert line.split()[-3:] == ["10", "2", "8"]

    _invoke(runner, "order", "complete", "--id", "1")
    out = _invoke(runner, "order", "show", "--id", "1")
    assert "state=COMPLETED" in out
    assert "sold=2" in out
    assert "Shipment 1-1: ready" in out

    _invoke(runner, "order", "ship", "--id", "1")
    out = _invoke(runner, "order", "list")
    assert "SHIPPED" in out


def test_variant_add_derives_sku(runner):
    out = _invoke(runner, "variant", "add", "--name", "Blue Mug")
    assert "BLUE-MUG" in out
    assert "BLUE-MUG" in _invoke(runner, "variant", "list")


def test_domain_errors_become_click_errors(runner):
    result = runner.invoke(cli, ["order", "place", "--id", "7"])
    assert result.exit_code == 1
    assert "Order #7 not found" in result.output


def test_bad_item_format_rejected(runner):
    result = runner.invoke(cli, ["cart", "create", "--customer", "Al", "--items", "Mug"])
    assert result.exit_code == 2
    assert "Expected 'VariantName:Quantity'" in result.output


def test_placing_beyond_stock_fails(runner):
    _seed(runner)
    _invoke(runner, "cart", "create", "--customer", "Alice", "--items", "Blue Mug:11")

    result = runner.invoke(cli, ["order", "place", "--id", "1"])

    assert result.exit_code == 1
    assert "Insufficient stock for Blue Mug" in result.output


def test_repeated_variant_in_items_rejected(runner):
    _seed(runner)

    result = runner.invoke(
        cli, ["cart", "create", "--customer", "Alice", "--items", "Blue Mug:1,Blue Mug:2"]
    )

    assert result.exit_code == 1
    assert "'Blue Mug' is listed more than once" in result.output
    assert "No orders found." in _invoke(runner, "order", "list")
