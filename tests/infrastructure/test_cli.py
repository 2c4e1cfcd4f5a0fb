"""End-to-end tests of the click command-line interface."""

import json
import os
import time

import pytest
from click.testing import CliRunner

from shopbook.infrastructure.cli import main


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    monkeypatch.setattr(main, "configure_logging", lambda *args, **kwargs: None)


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(main.cli, ["--data-dir", str(tmp_path), *args])

    return _run


@pytest.fixture
def new_york_time():
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    saved = os.environ.get("TZ")
    os.environ["TZ"] = "America/New_York"
    time.tzset()
    yield
    if saved is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = saved
    time.tzset()


def _sales(tmp_path) -> list[dict]:
    return json.loads((tmp_path / "sales.json").read_text(encoding="utf-8"))


def _stock(tmp_path, product_id: str) -> int:
    products = json.loads((tmp_path / "products.json").read_text(encoding="utf-8"))
    return next(p["stock"] for p in products if p["id"] == product_id)


class TestProductCommands:

    def test_list_shows_seed_catalog(self, run):
        result = run("product", "list")
        assert result.exit_code == 0
        assert "Laptop Pro X1" in result.output
        assert "Rp 19.200.000" in result.output

    def test_add_and_search(self, run):
        result = run("product", "add", "--name", "Webcam", "--sku", "WC-005",
                     "--price", "750000", "--stock", "12")
        assert result.exit_code == 0
        assert "Product #5 'Webcam' added at Rp 750.000" in result.output

        result = run("product", "list", "--search", "wc-")
        assert "Webcam" in result.output
        assert "Laptop" not in result.output

    def test_duplicate_sku_is_reported(self, run):
        result = run("product", "add", "--name", "Clone", "--sku", "LP-001", "--price", "1")
        assert result.exit_code == 1
        assert "already exists" in result.output


class TestSaleCommands:

    def test_create_deducts_stock(self, run, tmp_path):
        result = run("sale", "create", "--customer", "1", "--items", "2:3,3:1")
        assert result.exit_code == 0, result.output
        assert "Customer: John Doe" in result.output
        assert "Rp 2.560.000" in result.output

        sale = _sales(tmp_path)[0]
        assert sale["status"] == "PENDING"
        assert sale["totalAmount"] == 3 * 400000 + 1360000
        assert _stock(tmp_path, "2") == 47
        assert _stock(tmp_path, "3") == 29

    def test_create_over_stock_writes_nothing(self, run, tmp_path):
        result = run("sale", "create", "--customer", "1", "--items", "4:9")
        assert result.exit_code == 1
        assert "available" in result.output
        assert not (tmp_path / "sales.json").exists()
        assert not (tmp_path / "products.json").exists()

    def test_create_unknown_customer(self, run, tmp_path):
        result = run("sale", "create", "--customer", "42", "--items", "1:1")
        assert result.exit_code == 1
        assert "Customer with ID '42' not found" in result.output

    def test_bad_items_format(self, run):
        result = run("sale", "create", "--customer", "1", "--items", "1-1")
        assert result.exit_code == 2
        assert "Expected 'ProductID:Quantity'" in result.output

    def test_toggle_edit_delete(self, run, tmp_path):
        run("sale", "create", "--customer", "1", "--items", "1:1")
        sale_id = _sales(tmp_path)[0]["id"]

        result = run("sale", "toggle", "--id", sale_id)
        assert "is now PAID" in result.output

        result = run("sale", "edit", "--id", sale_id, "--new-id", "INV-1",
                     "--customer", "2", "--date", "2024-01-05", "--total", "100")
        assert result.exit_code == 0, result.output
        sale = _sales(tmp_path)[0]
        assert sale["id"] == "INV-1"
        assert sale["customerName"] == "Jane Smith"
        assert sale["totalAmount"] == 100
        assert sale["date"].startswith("2024-01-05T00:00:00")
        assert sale["items"][0]["priceAtSale"] == 19200000

        result = run("sale", "delete", "--id", "INV-1", "--yes")
        assert result.exit_code == 0
        assert _sales(tmp_path) == []
        assert _stock(tmp_path, "1") == 14

    def test_listed_id_can_be_shown(self, run, tmp_path):
        run("sale", "create", "--customer", "2", "--items", "2:1")

        result = run("sale", "list")
        row = next(line for line in result.output.splitlines() if "Jane Smith" in line)
        listed_id = row.split()[1]
        assert listed_id == _sales(tmp_path)[0]["id"]

        result = run("sale", "show", "--id", listed_id)
        assert result.exit_code == 0, result.output
        assert "Customer: Jane Smith" in result.output

        result = run("customer", "history", "--id", "2")
        assert f"Inv #{listed_id}" in result.output

    def test_edit_date_is_local_calendar_day(self, run, tmp_path, new_york_time):
        run("sale", "create", "--customer", "1", "--items", "2:1")
        sale_id = _sales(tmp_path)[0]["id"]

        result = run("sale", "edit", "--id", sale_id, "--date", "2024-05-01")
        assert result.exit_code == 0, result.output
        assert _sales(tmp_path)[0]["date"].startswith("2024-05-01T00:00:00")

        result = run("sale", "show", "--id", sale_id)
        assert "Date:     2024-05-01" in result.output

        result = run("sale", "list")
        assert result.output.splitlines()[2].startswith("2024-05-01")

    def test_show_unknown(self, run):
        result = run("sale", "show", "--id", "nope")
        assert result.exit_code == 1
        assert "Sale #nope not found" in result.output


class TestReportCommands:

    def test_dashboard_and_totals(self, run):
        run("sale", "create", "--customer", "2", "--items", "2:2")

        result = run("report", "dashboard")
        assert result.exit_code == 0
        assert "Rp 800.000" in result.output
        assert "Sale #1" in result.output

        result = run("report", "totals")
        assert "Pending payments" in result.output
        assert "Rp 800.000" in result.output

    def test_stock_ranking(self, run):
        result = run("report", "stock", "--top", "2")
        lines = [line for line in result.output.splitlines() if line.startswith(("Laptop", "HD", "Mech", "Wire"))]
        assert [line.split()[0] for line in lines] == ["Laptop", "Mechanical"]


class TestThemeCommands:

    def test_set_and_show(self, run):
        assert run("theme", "show").output.strip() == "light"
        run("theme", "set", "dark")
        assert run("theme", "show").output.strip() == "dark"
        assert "light" in run("theme", "toggle").output


class TestRootOptions:

    def test_unknown_log_level_is_reported(self, run, monkeypatch):
        monkeypatch.setenv("SHOPBOOK_LOG_LEVEL", "LOUD")
        result = run("product", "list")
        assert result.exit_code == 1
        assert "Unknown log level" in result.output
